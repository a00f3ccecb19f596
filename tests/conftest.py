import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import foldguide
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from foldguide.builder.layout import LayoutConfig, PageMode


# Common test fixtures
@pytest.fixture
def quadrant_config():
    """Letter-size layout, four sections per page."""
    return LayoutConfig(page_width=816, page_height=1054, mode=PageMode.QUADRANT)


@pytest.fixture
def full_page_config():
    """Letter-size layout, one section per page."""
    return LayoutConfig(page_width=816, page_height=1054, mode=PageMode.FULL_PAGE)
