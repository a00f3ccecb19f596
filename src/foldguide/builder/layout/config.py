"""
Module: builder.layout.config

Purpose:
    Configuration for the page layout engine.
    Defines page dimensions (PDF points) and how sections share a page.

Key Classes:
    - PageMode: Quadrant (four sections per page) or full-page
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.placement: Section regions
    - builder.layout.drawing: Border guides
    - builder.layout.paginator: Page arrangement
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# US Letter (8.5in x 11in) at 96 DPI
DEFAULT_PAGE_WIDTH_PT = 816
DEFAULT_PAGE_HEIGHT_PT = 1054

# Inset of the left/right border guides so they stay inside the page
BORDER_INSET_PT = 0.5


class PageMode(Enum):
    """
    How sections are arranged on pages.

    Attributes:
        QUADRANT: Four half-width, half-height sections per page
        FULL_PAGE: One section filling each page
    """

    QUADRANT = "quadrant"
    FULL_PAGE = "full-page"


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for page layout (immutable).

    Attributes:
        page_width: Page width in points
        page_height: Page height in points
        mode: Section arrangement on each page
        border_inset: Horizontal inset of the left/right border guides

    Example:
        >>> config = LayoutConfig()
        >>> config.section_width
        408.0
    """

    page_width: float = DEFAULT_PAGE_WIDTH_PT
    page_height: float = DEFAULT_PAGE_HEIGHT_PT
    mode: PageMode = PageMode.QUADRANT
    border_inset: float = BORDER_INSET_PT

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")

    @property
    def section_width(self) -> float:
        """Width of one section region."""
        if self.mode is PageMode.QUADRANT:
            return self.page_width / 2
        return float(self.page_width)

    @property
    def section_height(self) -> float:
        """Height of one section region."""
        if self.mode is PageMode.QUADRANT:
            return self.page_height / 2
        return float(self.page_height)
