"""
Module: builder.layout.paginator

Purpose:
    Arrange sections onto pages.

Algorithm:
    1. Place each section by its running index
    2. When the placement asks for a new page, close the current page and
       open a new one with its cut lines
    3. Add the section's fold lines to the open page
    4. Close the last page

Key Functions:
    - paginate(): Main pagination function

Dependencies:
    - builder.layout.placement: Section regions
    - builder.layout.drawing: Line geometry

Used By:
    - builder.controller: Document driver
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .config import LayoutConfig
from .drawing import cut_lines, fold_lines
from .models import GuideLine, LayoutResult, PagePlan, SectionPlan
from .placement import LayoutError, place_section

logger = logging.getLogger(__name__)


class _OpenPage:
    """Page still receiving sections."""

    def __init__(self, index: int, cuts: tuple[GuideLine, ...]) -> None:
        self.index = index
        self.cuts = cuts
        self.sections: List[SectionPlan] = []

    def close(self) -> PagePlan:
        return PagePlan(
            index=self.index,
            cut_lines=self.cuts,
            sections=tuple(self.sections),
        )


def paginate(
    line_counts: Iterable[int],
    config: LayoutConfig,
) -> LayoutResult:
    """
    Lay out one section per line count.

    Args:
        line_counts: Line count per section, in drawing order
        config: Layout configuration

    Returns:
        LayoutResult with page plans

    Raises:
        LayoutError: If a section would be drawn before any page exists

    Example:
        >>> result = paginate([3, 5], LayoutConfig())
        >>> result.page_count, result.section_count
        (1, 2)
    """
    pages: List[PagePlan] = []
    warnings: List[str] = []
    current: Optional[_OpenPage] = None
    page_cuts = cut_lines(config)

    for index, count in enumerate(line_counts):
        placement = place_section(index, config)

        if placement.new_page:
            if current is not None:
                pages.append(current.close())
            current = _OpenPage(len(pages), page_cuts)
            logger.debug(f"Started page {current.index}")

        if current is None:
            raise LayoutError(f"Section {index} has no page to draw on")

        current.sections.append(SectionPlan(
            index=index,
            line_count=count,
            region=placement.region,
            fold_lines=fold_lines(placement.region, count),
        ))
        logger.debug(f"Section {index}: {count} lines on page {current.index}")

    if current is not None:
        pages.append(current.close())

    if not pages:
        warnings.append("No sections to lay out")
        logger.warning("No sections to lay out, layout is empty")

    result = LayoutResult(
        pages=tuple(pages),
        page_width=config.page_width,
        page_height=config.page_height,
        mode=config.mode,
        warnings=warnings,
    )
    logger.info(f"Paginated {result.section_count} sections onto {result.page_count} pages")
    return result
