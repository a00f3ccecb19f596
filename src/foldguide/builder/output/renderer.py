"""
Module: builder.output.renderer

Purpose:
    Render LayoutResult to PDF using ReportLab.
    Each PagePlan becomes one PDF page: cut lines first, then the fold
    lines of every section on the page.

Key Functions:
    - render_to_bytes(): Serialize a layout to PDF bytes
    - render_to_pdf(): Render a layout to a PDF file

Dependencies:
    - reportlab: PDF generation
    - builder.layout.models: LayoutResult, PagePlan

Used By:
    - builder.controller: Document driver
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

from reportlab.pdfgen import canvas

from foldguide.builder.layout.models import GuideLine, LayoutResult, PagePlan

logger = logging.getLogger(__name__)

# Zero width draws the thinnest line the output device supports
LINE_WIDTH_PT = 0
DOCUMENT_TITLE = "Fold guide lines"


def _get_creator() -> str:
    from foldguide import __version__
    return f"foldguide {__version__}"


def render_to_bytes(layout: LayoutResult) -> bytes:
    """
    Draw every page of a layout and serialize the document.

    Args:
        layout: Layout result from paginator

    Returns:
        The complete PDF document

    Example:
        >>> data = render_to_bytes(paginate([3, 5], LayoutConfig()))
        >>> data[:5]
        b'%PDF-'
    """
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=(layout.page_width, layout.page_height))
    c.setTitle(DOCUMENT_TITLE)
    c.setCreator(_get_creator())

    for page in layout.pages:
        _render_page(c, page)
        c.showPage()

    c.save()
    return buffer.getvalue()


def render_to_pdf(layout: LayoutResult, output_path: Path) -> None:
    """
    Render layout result to a PDF file.

    Args:
        layout: Layout result from paginator
        output_path: Path to write PDF

    Raises:
        OSError: If the PDF cannot be written
    """
    data = render_to_bytes(layout)
    output_path.write_bytes(data)
    logger.info(f"Rendered {layout.page_count} pages to {output_path}")


def _render_page(c: canvas.Canvas, page: PagePlan) -> None:
    """Draw a page's cut lines, then its sections' fold lines."""
    for line in page.lines:
        _draw_line(c, line)
    logger.debug(
        f"Drew page {page.index}: {len(page.cut_lines)} cut lines, "
        f"{page.section_count} sections"
    )


def _draw_line(c: canvas.Canvas, line: GuideLine) -> None:
    (x1, y1), (x2, y2) = line.start, line.end
    c.setLineWidth(LINE_WIDTH_PT)
    c.setDash(list(line.style.dash_array), 0)
    c.line(x1, y1, x2, y2)
