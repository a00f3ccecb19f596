"""
Module: builder

Purpose:
    Building pipeline for fold guide PDFs. Expands center-line sections,
    lays them out onto pages and renders the result with ReportLab.

Key Functions:
    - expand_sections(): Section descriptors to line counts
    - build_guides(): Main entry point for PDF generation
    - load_config(): Read configuration from JSON

Key Classes:
    - BuilderConfig: Configuration for building
    - FixedSection, RangeSection: Section descriptors
"""

from .sections import ConfigError, FixedSection, RangeSection, Section, expand_sections
from .config import BuilderConfig, DEFAULT_SECTIONS, load_config
from .controller import build_guides, BuildResult, BuildError

__all__ = [
    # Sections
    "ConfigError",
    "FixedSection",
    "RangeSection",
    "Section",
    "expand_sections",
    # Config
    "BuilderConfig",
    "DEFAULT_SECTIONS",
    "load_config",
    # Controller
    "build_guides",
    "BuildResult",
    "BuildError",
]
