"""
Module: builder.sections

Purpose:
    Center-line section descriptors and their expansion into line counts.
    A section is either a fixed number of lines or a range of counts that
    expands into several sections at build time.

Key Functions:
    - expand_sections(): Yield line counts in declaration order
    - section_from_dict(): Parse one JSON section entry

Key Classes:
    - FixedSection: One section with a fixed line count
    - RangeSection: min..max inclusive, stepping by step

Used By:
    - builder.config: Default sections and JSON loading
    - builder.controller: Document driver
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Union


class ConfigError(ValueError):
    """Malformed configuration input."""
    pass


@dataclass(frozen=True)
class FixedSection:
    """
    A single section with a fixed number of center lines.

    Example:
        >>> list(FixedSection(31).counts())
        [31]
    """

    num_lines: int

    def counts(self) -> Iterator[int]:
        yield self.num_lines


@dataclass(frozen=True)
class RangeSection:
    """
    A run of sections with line counts min_lines..max_lines (inclusive).

    A minimum above the maximum yields nothing.

    Example:
        >>> list(RangeSection(3, 11, 2).counts())
        [3, 5, 7, 9, 11]
    """

    min_lines: int
    max_lines: int
    step: int = 1

    def __post_init__(self) -> None:
        if self.step <= 0 and self.min_lines <= self.max_lines:
            raise ValueError(f"step must be positive: {self.step}")

    def counts(self) -> Iterator[int]:
        if self.min_lines > self.max_lines:
            return
        yield from range(self.min_lines, self.max_lines + 1, self.step)


Section = Union[FixedSection, RangeSection]


def expand_sections(sections: Iterable[Section]) -> Iterator[int]:
    """
    Expand section descriptors into per-section line counts.

    Args:
        sections: Ordered section descriptors

    Yields:
        Line count for each section to draw, in declaration order

    Example:
        >>> list(expand_sections([RangeSection(15, 23, 4), FixedSection(31)]))
        [15, 19, 23, 31]
    """
    for section in sections:
        yield from section.counts()


_FIXED_KEYS = ("num_lines", "numLines")
_RANGE_KEYS = {
    "min_lines": ("min_lines", "minNumLines"),
    "max_lines": ("max_lines", "maxNumLines"),
    "step": ("step", "skipInterval"),
}


def section_from_dict(entry: Mapping[str, Any]) -> Section:
    """
    Build a section descriptor from a JSON entry.

    The variant comes from an explicit ``"type"`` key ("fixed" or "range")
    when present, otherwise from which keys the entry carries. camelCase
    keys from older config files are accepted.

    Raises:
        ConfigError: If the entry matches neither variant
    """
    if not isinstance(entry, Mapping):
        raise ConfigError(f"Section entry must be an object: {entry!r}")

    kind = entry.get("type")
    if kind is None:
        kind = "fixed" if any(k in entry for k in _FIXED_KEYS) else "range"

    try:
        if kind == "fixed":
            return FixedSection(num_lines=_as_count(_pick(entry, _FIXED_KEYS)))
        if kind == "range":
            values = {
                field_name: _pick(entry, keys)
                for field_name, keys in _RANGE_KEYS.items()
                if field_name != "step" or any(k in entry for k in keys)
            }
            return RangeSection(**{k: _as_count(v) for k, v in values.items()})
    except (KeyError, TypeError, ValueError) as e:
        raise ConfigError(f"Invalid section entry {dict(entry)!r}: {e}") from e

    raise ConfigError(f"Unknown section type: {kind!r}")


def _pick(entry: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in entry:
            return entry[key]
    raise KeyError(keys[0])


def _as_count(value: Any) -> int:
    # bool is an int subclass; JSON true/false is never a line count
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {value!r}")
    return value
