"""
Module: builder.layout.models

Purpose:
    Data models for page layout.
    Immutable dataclasses representing regions, guide lines, sections and pages.

Key Classes:
    - LineStyle: Mountain / valley / cut dash patterns
    - Region: Rectangle a section is drawn into
    - GuideLine: Zero-thickness styled segment
    - SectionPlan: Fold lines for one section
    - PagePlan: Complete page layout
    - LayoutResult: Final layout output

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.drawing: Creates GuideLines
    - builder.layout.paginator: Creates PagePlans
    - builder.output.renderer: Draws LayoutResults
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from .config import PageMode

Point = Tuple[float, float]


class LineStyle(Enum):
    """
    Dash pattern of a drawn guide line.

    Attributes:
        MOUNTAIN: Mountain fold, dash-dot
        VALLEY: Valley fold, dashed
        CUT: Cut/border guide, long dashes
    """

    MOUNTAIN = "mountain"
    VALLEY = "valley"
    CUT = "cut"

    @property
    def dash_array(self) -> tuple[float, ...]:
        return _DASH_ARRAYS[self]


_DASH_ARRAYS = {
    LineStyle.MOUNTAIN: (4, 2, 1, 2),
    LineStyle.VALLEY: (4, 1),
    LineStyle.CUT: (10, 10),
}


@dataclass(frozen=True)
class Region:
    """
    Rectangle in PDF coordinates (origin bottom-left).

    Example:
        >>> Region(x=408, y=527, width=408, height=527).top
        1054
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def top(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class GuideLine:
    """
    A straight guide line drawn with zero thickness.

    Attributes:
        start: (x, y) start point in points
        end: (x, y) end point in points
        style: Dash pattern to draw with
    """

    start: Point
    end: Point
    style: LineStyle


@dataclass(frozen=True)
class SectionPlan:
    """
    One section: a region holding evenly spaced fold lines.

    Attributes:
        index: Running section index across the whole document
        line_count: Requested number of center lines
        region: Area the lines span
        fold_lines: Mountain/valley lines, left to right
    """

    index: int
    line_count: int
    region: Region
    fold_lines: tuple[GuideLine, ...]


@dataclass(frozen=True)
class PagePlan:
    """
    Complete layout plan for a single page.

    Cut lines are drawn before the sections' fold lines.

    Attributes:
        index: Page number (0-indexed)
        cut_lines: Border and center guides for the page
        sections: Sections placed on this page
    """

    index: int
    cut_lines: tuple[GuideLine, ...]
    sections: tuple[SectionPlan, ...] = ()

    @property
    def section_count(self) -> int:
        """Number of sections on this page."""
        return len(self.sections)

    @property
    def lines(self) -> tuple[GuideLine, ...]:
        """All lines in drawing order."""
        return self.cut_lines + tuple(
            line for section in self.sections for line in section.fold_lines
        )


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output with diagnostics.

    Attributes:
        pages: Tuple of PagePlans
        page_width: Page width in points
        page_height: Page height in points
        mode: Section arrangement used
        warnings: List of warning messages

    Example:
        >>> result = LayoutResult(pages=(page1,), page_width=816, page_height=1054)
        >>> result.page_count
        1
    """

    pages: tuple[PagePlan, ...]
    page_width: float
    page_height: float
    mode: PageMode = PageMode.QUADRANT
    warnings: list[str] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        """Number of pages in layout."""
        return len(self.pages)

    @property
    def section_count(self) -> int:
        """Total number of sections across all pages."""
        return sum(p.section_count for p in self.pages)

    @property
    def line_counts(self) -> list[int]:
        """Line count of every section in document order."""
        return [s.line_count for p in self.pages for s in p.sections]
