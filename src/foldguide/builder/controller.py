"""
Module: builder.controller

Purpose:
    Orchestrate the complete fold guide pipeline.
    Expand → Paginate → Render → Write

Key Functions:
    - build_guides(): Main entry point for building a guide PDF

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - builder.sections: Section expansion
    - builder.layout: Pagination
    - builder.output: PDF rendering

Used By:
    - foldguide.__main__: Command line
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from .config import BuilderConfig
from .layout import LayoutResult, paginate
from .output.renderer import render_to_pdf
from .sections import expand_sections

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        output_pdf: Path to the generated PDF
        layout: Layout that was rendered
        page_count: Number of pages generated
        line_counts: Line count of each section, in document order
        warnings: Any warnings during build

    Example:
        >>> result = build_guides(BuilderConfig())
        >>> print(f"Generated {result.page_count} pages")
    """
    output_pdf: Path
    layout: LayoutResult
    page_count: int
    line_counts: tuple[int, ...]
    warnings: tuple[str, ...]


def build_guides(config: BuilderConfig) -> BuildResult:
    """
    Build a fold guide PDF from start to finish.

    Pipeline:
    1. Expand section descriptors into line counts
    2. Paginate sections (page borders, regions, fold lines)
    3. Render the layout to PDF bytes
    4. Write the PDF to config.output_path

    Args:
        config: Build configuration

    Returns:
        BuildResult with path and layout

    Raises:
        LayoutError: If pagination reaches an impossible state
        BuildError: If the PDF cannot be written

    Example:
        >>> config = BuilderConfig(mode=PageMode.FULL_PAGE, output_path=Path("out.pdf"))
        >>> result = build_guides(config)
    """
    start_time = time.perf_counter()
    layout_config = config.layout_config()

    line_counts = tuple(expand_sections(config.sections))
    logger.info(
        f"Building {len(line_counts)} sections in {config.mode.value} mode "
        f"({config.page_width}x{config.page_height}pt)"
    )

    layout = paginate(line_counts, layout_config)

    output_path = Path(config.output_path)
    try:
        if output_path.parent != Path("."):
            output_path.parent.mkdir(parents=True, exist_ok=True)
        render_to_pdf(layout, output_path)
    except OSError as e:
        raise BuildError(f"Failed to write PDF {output_path}: {e}") from e

    elapsed = time.perf_counter() - start_time
    logger.info(f"Wrote {layout.page_count} pages to {output_path} in {elapsed:.2f}s")

    return BuildResult(
        output_pdf=output_path,
        layout=layout,
        page_count=layout.page_count,
        line_counts=tuple(layout.line_counts),
        warnings=tuple(layout.warnings),
    )
