"""
Module: builder.layout

Purpose:
    Page layout for fold guides.
    Converts section line counts into positioned page layouts.

Key Functions:
    - paginate(): Arrange sections onto pages
    - place_section(): Region for one section
    - fold_lines(), cut_lines(): Line geometry

Key Classes:
    - LayoutConfig: Page size and mode
    - PagePlan: Single page layout plan
    - LayoutResult: Complete layout

Used By:
    - builder.controller: Document driver
    - builder.output.renderer: PDF drawing
"""

from .config import LayoutConfig, PageMode
from .models import (
    GuideLine,
    LayoutResult,
    LineStyle,
    PagePlan,
    Region,
    SectionPlan,
)
from .placement import LayoutError, Placement, place_section
from .drawing import cut_lines, fold_lines, fold_style
from .paginator import paginate

__all__ = [
    # Config
    "LayoutConfig",
    "PageMode",
    # Models
    "GuideLine",
    "LayoutResult",
    "LineStyle",
    "PagePlan",
    "Region",
    "SectionPlan",
    # Placement
    "LayoutError",
    "Placement",
    "place_section",
    # Functions
    "cut_lines",
    "fold_lines",
    "fold_style",
    "paginate",
]
