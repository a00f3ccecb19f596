"""
Module: builder.config

Purpose:
    Configuration dataclass for building fold guides, the embedded default
    section list, and loading configuration from JSON.

Key Classes:
    - BuilderConfig: Main configuration for building guides

Key Functions:
    - load_config(): Read a BuilderConfig from a JSON file

Dependencies:
    - dataclasses (std)
    - json (std)

Used By:
    - builder.controller: Document driver
    - foldguide.__main__: Command line
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .layout.config import (
    DEFAULT_PAGE_HEIGHT_PT,
    DEFAULT_PAGE_WIDTH_PT,
    LayoutConfig,
    PageMode,
)
from .sections import ConfigError, FixedSection, RangeSection, Section, section_from_dict

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_PATH = Path("lines.pdf")

DEFAULT_SECTIONS: tuple[Section, ...] = (
    RangeSection(min_lines=3, max_lines=11, step=2),
    RangeSection(min_lines=15, max_lines=23, step=4),
    FixedSection(31),
    FixedSection(39),
    FixedSection(51),
    FixedSection(65),
)


@dataclass(frozen=True)
class BuilderConfig:
    """
    Configuration for building a fold guide PDF (immutable).

    Attributes:
        sections: Ordered center-line sections
        page_width: Page width in points
        page_height: Page height in points
        mode: Quadrant or full-page sections
        output_path: Where the PDF is written

    Example:
        >>> config = BuilderConfig(sections=(FixedSection(3), FixedSection(5)))
        >>> config.layout_config().section_width
        408.0
    """

    sections: tuple[Section, ...] = DEFAULT_SECTIONS
    page_width: float = DEFAULT_PAGE_WIDTH_PT
    page_height: float = DEFAULT_PAGE_HEIGHT_PT
    mode: PageMode = PageMode.QUADRANT
    output_path: Path = DEFAULT_OUTPUT_PATH

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")

    def layout_config(self) -> LayoutConfig:
        return LayoutConfig(
            page_width=self.page_width,
            page_height=self.page_height,
            mode=self.mode,
        )


def parse_mode(value: str) -> PageMode:
    """Map "quadrant" / "full-page" (or "full_page") to a PageMode."""
    try:
        return PageMode(value.strip().lower().replace("_", "-"))
    except (AttributeError, ValueError) as e:
        raise ConfigError(f"Unknown page mode: {value!r}") from e


def load_config(
    path: Path,
    *,
    mode: Optional[PageMode] = None,
    output_path: Optional[Path] = None,
) -> BuilderConfig:
    """
    Load a BuilderConfig from a JSON file.

    Keys (all optional): ``sections``, ``page_width``, ``page_height``,
    ``mode``, ``output``. Missing keys keep their defaults. Explicit
    ``mode``/``output_path`` arguments override the file.

    Args:
        path: JSON config file
        mode: Page mode override
        output_path: Output path override

    Returns:
        Validated BuilderConfig

    Raises:
        ConfigError: If the file cannot be read or has the wrong shape

    Example:
        >>> config = load_config(Path("guides.json"), mode=PageMode.FULL_PAGE)
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    return config_from_dict(data, mode=mode, output_path=output_path)


def config_from_dict(
    data: dict[str, Any],
    *,
    mode: Optional[PageMode] = None,
    output_path: Optional[Path] = None,
) -> BuilderConfig:
    """Build a BuilderConfig from already-parsed JSON data."""
    kwargs: dict[str, Any] = {}

    if "sections" in data:
        raw_sections = data["sections"]
        if not isinstance(raw_sections, list):
            raise ConfigError("'sections' must be a list")
        kwargs["sections"] = tuple(section_from_dict(entry) for entry in raw_sections)

    for key in ("page_width", "page_height"):
        if key in data:
            kwargs[key] = data[key]

    if mode is not None:
        kwargs["mode"] = mode
    elif "mode" in data:
        kwargs["mode"] = parse_mode(data["mode"])

    if output_path is not None:
        kwargs["output_path"] = output_path
    elif "output" in data:
        kwargs["output_path"] = Path(data["output"])

    try:
        config = BuilderConfig(**kwargs)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    logger.debug(f"Loaded config with {len(config.sections)} section entries")
    return config
