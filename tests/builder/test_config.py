"""
Unit tests for builder configuration and JSON loading.
"""

import json
from pathlib import Path

import pytest

from foldguide.builder.config import (
    DEFAULT_OUTPUT_PATH,
    DEFAULT_SECTIONS,
    BuilderConfig,
    config_from_dict,
    load_config,
    parse_mode,
)
from foldguide.builder.layout import PageMode
from foldguide.builder.sections import ConfigError, FixedSection, RangeSection, expand_sections


class TestBuilderConfig:
    """Tests for BuilderConfig dataclass."""

    def test_init_when_defaults_then_letter_quadrant_lines_pdf(self):
        # Act
        config = BuilderConfig()

        # Assert
        assert config.page_width == 816
        assert config.page_height == 1054
        assert config.mode is PageMode.QUADRANT
        assert config.output_path == Path("lines.pdf")
        assert config.sections == DEFAULT_SECTIONS

    def test_default_sections_expand_to_twelve_counts(self):
        counts = list(expand_sections(DEFAULT_SECTIONS))
        assert counts == [3, 5, 7, 9, 11, 15, 19, 23, 31, 39, 51, 65]

    def test_layout_config_when_full_page_then_carries_mode_and_size(self):
        config = BuilderConfig(page_width=600, page_height=800, mode=PageMode.FULL_PAGE)

        layout_config = config.layout_config()

        assert layout_config.page_width == 600
        assert layout_config.page_height == 800
        assert layout_config.mode is PageMode.FULL_PAGE

    def test_init_when_page_width_not_positive_then_raises_error(self):
        with pytest.raises(ValueError, match="page_width must be positive"):
            BuilderConfig(page_width=0)

    def test_init_when_page_height_not_positive_then_raises_error(self):
        with pytest.raises(ValueError, match="page_height must be positive"):
            BuilderConfig(page_height=-1)


class TestParseMode:
    """Tests for parse_mode()."""

    @pytest.mark.parametrize("value,expected", [
        ("quadrant", PageMode.QUADRANT),
        ("full-page", PageMode.FULL_PAGE),
        ("FULL_PAGE", PageMode.FULL_PAGE),
    ])
    def test_when_known_value_then_maps_to_mode(self, value, expected):
        assert parse_mode(value) is expected

    def test_when_unknown_value_then_raises_config_error(self):
        with pytest.raises(ConfigError, match="Unknown page mode"):
            parse_mode("triptych")


class TestLoadConfig:
    """Tests for JSON config loading."""

    def test_when_full_file_then_all_fields_loaded(self, tmp_path):
        # Arrange
        path = tmp_path / "guides.json"
        path.write_text(json.dumps({
            "mode": "full-page",
            "page_width": 612,
            "page_height": 792,
            "output": "out/guides.pdf",
            "sections": [
                {"num_lines": 31},
                {"min_lines": 9, "max_lines": 13, "step": 2},
            ],
        }))

        # Act
        config = load_config(path)

        # Assert
        assert config.mode is PageMode.FULL_PAGE
        assert config.page_width == 612
        assert config.page_height == 792
        assert config.output_path == Path("out/guides.pdf")
        assert config.sections == (FixedSection(31), RangeSection(9, 13, 2))

    def test_when_keys_missing_then_defaults_kept(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("{}")

        config = load_config(path)

        assert config == BuilderConfig()

    def test_when_overrides_given_then_they_win_over_file(self, tmp_path):
        path = tmp_path / "guides.json"
        path.write_text(json.dumps({"mode": "full-page", "output": "a.pdf"}))

        config = load_config(path, mode=PageMode.QUADRANT, output_path=Path("b.pdf"))

        assert config.mode is PageMode.QUADRANT
        assert config.output_path == Path("b.pdf")

    def test_when_invalid_json_then_raises_config_error(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(ConfigError, match="not valid JSON"):
            load_config(path)

    def test_when_file_missing_then_raises_config_error(self, tmp_path):
        with pytest.raises(ConfigError, match="Failed to read config"):
            load_config(tmp_path / "missing.json")

    def test_when_top_level_not_object_then_raises_config_error(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")

        with pytest.raises(ConfigError, match="must contain a JSON object"):
            load_config(path)

    def test_when_sections_not_list_then_raises_config_error(self):
        with pytest.raises(ConfigError, match="'sections' must be a list"):
            config_from_dict({"sections": {"num_lines": 3}})

    def test_when_page_size_invalid_then_raises_config_error(self):
        with pytest.raises(ConfigError, match="Invalid configuration"):
            config_from_dict({"page_width": -5})

    def test_default_output_is_lines_pdf(self):
        assert DEFAULT_OUTPUT_PATH == Path("lines.pdf")
