"""
Command-line interface for foldguide.

Usage examples
--------------
  # Default guides, four sections per page, written to ./lines.pdf
  python -m foldguide

  # One section per page
  python -m foldguide --mode full-page

  # Sections and page size from a JSON file
  python -m foldguide --config guides.json --output out/guides.pdf
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from foldguide import __version__
from foldguide.builder import BuildError, BuilderConfig, ConfigError, build_guides, load_config
from foldguide.builder.config import DEFAULT_OUTPUT_PATH, parse_mode

logger = logging.getLogger("foldguide")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foldguide",
        description=(
            "Generate a PDF of fold-guide pages.\n\n"
            "Line styles:\n"
            "  dash-dot  -> Mountain fold\n"
            "  dashed    -> Valley fold\n"
            "  long dash -> Cut / border guide\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        metavar="FILE.json",
        help="JSON file with sections and page size (default: built-in sections).",
    )
    parser.add_argument(
        "--mode", "-m",
        choices=["quadrant", "full-page"],
        default=None,
        help="Four sections per page (quadrant, default) or one per page.",
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        metavar="FILE.pdf",
        help=f"Output PDF path (default: {DEFAULT_OUTPUT_PATH}).",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Log per-page detail.")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only log warnings and errors.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _resolve_config(args: argparse.Namespace) -> BuilderConfig:
    mode = parse_mode(args.mode) if args.mode else None

    if args.config:
        return load_config(args.config, mode=mode, output_path=args.output)

    kwargs = {}
    if mode is not None:
        kwargs["mode"] = mode
    if args.output is not None:
        kwargs["output_path"] = args.output
    return BuilderConfig(**kwargs)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=level, format="%(message)s")

    try:
        config = _resolve_config(args)
        build_guides(config)
    except (ConfigError, BuildError) as e:
        logger.error(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
