"""
Module: builder.output

Purpose:
    PDF rendering for fold guides.
    Converts LayoutResult to PDF using ReportLab.

Key Functions:
    - render_to_bytes(): Serialize layout to PDF bytes
    - render_to_pdf(): Render layout to a PDF file

Used By:
    - builder.controller: Document driver
"""

from .renderer import render_to_bytes, render_to_pdf

__all__ = [
    "render_to_bytes",
    "render_to_pdf",
]
