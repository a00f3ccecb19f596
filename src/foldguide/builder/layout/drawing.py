"""
Module: builder.layout.drawing

Purpose:
    Geometry of the lines drawn on each page.

    Fold lines: N vertical lines evenly spaced across a region at
    x0 + k * width / (N + 1) for k = 1..N, so none touches the region's
    left or right edge. Styles alternate mountain, valley, mountain, ...

    Cut lines: dashed border guides around the page plus the center
    guides separating sections.

Key Functions:
    - fold_lines(): Fold lines for one section
    - cut_lines(): Border guides for one page

Used By:
    - builder.layout.paginator
"""

from __future__ import annotations

from .config import LayoutConfig, PageMode
from .models import GuideLine, LineStyle, Region


def fold_style(line_index: int) -> LineStyle:
    """Mountain for even indices, valley for odd."""
    return LineStyle.MOUNTAIN if line_index % 2 == 0 else LineStyle.VALLEY


def fold_lines(region: Region, count: int) -> tuple[GuideLine, ...]:
    """
    Compute evenly spaced vertical fold lines for a section.

    Args:
        region: Section area
        count: Number of center lines (zero or less gives none)

    Returns:
        Lines ordered left to right, each spanning the region height

    Example:
        >>> lines = fold_lines(Region(0, 527, 408, 527), 3)
        >>> [line.start[0] for line in lines]
        [102.0, 204.0, 306.0]
    """
    if count <= 0:
        return ()

    spacing = region.width / (count + 1)
    lines = []
    for line_index in range(count):
        x = region.x + (line_index + 1) * spacing
        lines.append(GuideLine(
            start=(x, region.y),
            end=(x, region.top),
            style=fold_style(line_index),
        ))
    return tuple(lines)


def cut_lines(config: LayoutConfig) -> tuple[GuideLine, ...]:
    """
    Compute the dashed border guides for a newly allocated page.

    Left/right borders are inset so the dashes are not clipped at the
    page edge. Quadrant pages get a full center cross; full pages get a
    single horizontal center line.

    Args:
        config: Layout configuration

    Returns:
        Cut lines in drawing order
    """
    w = config.page_width
    h = config.page_height
    inset = config.border_inset

    segments = [
        ((inset, 0), (inset, h)),          # left border
        ((w - inset, 0), (w - inset, h)),  # right border
        ((0, h), (w, h)),                  # top border
        ((0, 0), (w, 0)),                  # bottom border
    ]
    if config.mode is PageMode.QUADRANT:
        segments.append(((w / 2, 0), (w / 2, h)))
    segments.append(((0, h / 2), (w, h / 2)))

    return tuple(
        GuideLine(start=start, end=end, style=LineStyle.CUT)
        for start, end in segments
    )
