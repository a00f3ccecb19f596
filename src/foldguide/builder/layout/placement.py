"""
Module: builder.layout.placement

Purpose:
    Decide where the next section goes and whether it needs a fresh page.

    Quadrant mode fills a page in the order top-left, top-right,
    bottom-left, bottom-right; a new page starts on every fourth section.
    Full-page mode gives every section its own page.

Key Functions:
    - place_section(): Region and page allocation for a section index

Key Classes:
    - Placement: Result of placing one section
    - LayoutError: Unreachable layout state

Used By:
    - builder.layout.paginator
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import LayoutConfig, PageMode
from .models import Region


class LayoutError(Exception):
    """Layout reached a state that should be impossible."""
    pass


@dataclass(frozen=True)
class Placement:
    """
    Where a section is drawn.

    Attributes:
        region: Area to draw the section's fold lines into
        new_page: Whether a page must be allocated before drawing
    """

    region: Region
    new_page: bool


# Quadrant slot -> origin as fractions of page (width, height).
# PDF origin is bottom-left, so the top row sits at half height.
_QUADRANT_ORIGINS = {
    0: (0.0, 0.5),  # top-left
    1: (0.5, 0.5),  # top-right
    2: (0.0, 0.0),  # bottom-left
    3: (0.5, 0.0),  # bottom-right
}


def place_section(index: int, config: LayoutConfig) -> Placement:
    """
    Resolve the region for the section at a zero-based running index.

    Args:
        index: Running section index across the document
        config: Layout configuration

    Returns:
        Placement with the section region and page allocation flag

    Raises:
        LayoutError: If the quadrant slot has no mapping

    Example:
        >>> place_section(5, LayoutConfig())
        Placement(region=Region(x=408.0, y=527.0, width=408.0, height=527.0), new_page=False)
    """
    if config.mode is PageMode.FULL_PAGE:
        return Placement(
            region=Region(0.0, 0.0, float(config.page_width), float(config.page_height)),
            new_page=True,
        )

    slot = index % 4
    if slot not in _QUADRANT_ORIGINS:
        raise LayoutError(f"No quadrant for section slot {slot}")

    fx, fy = _QUADRANT_ORIGINS[slot]
    region = Region(
        x=config.page_width * fx,
        y=config.page_height * fy,
        width=config.section_width,
        height=config.section_height,
    )
    return Placement(region=region, new_page=slot == 0)
