"""
Tests for the foldguide command line.
"""

import json
import logging

import pytest
from pypdf import PdfReader

from foldguide.__main__ import main


class TestMain:

    def test_when_no_arguments_then_writes_lines_pdf_in_cwd(self, tmp_path, monkeypatch):
        # Arrange
        monkeypatch.chdir(tmp_path)

        # Act
        status = main([])

        # Assert
        assert status == 0
        reader = PdfReader(tmp_path / "lines.pdf")
        assert len(reader.pages) == 3  # 12 default sections, 4 per page

    def test_when_full_page_mode_then_page_per_section(self, tmp_path):
        output = tmp_path / "full.pdf"

        status = main(["--mode", "full-page", "--output", str(output), "--quiet"])

        assert status == 0
        assert len(PdfReader(output).pages) == 12

    def test_when_config_file_then_sections_loaded(self, tmp_path):
        # Arrange
        config_path = tmp_path / "guides.json"
        config_path.write_text(json.dumps({
            "mode": "full-page",
            "sections": [{"min_lines": 9, "max_lines": 13, "step": 2}],
        }))
        output = tmp_path / "guides.pdf"

        # Act
        status = main(["--config", str(config_path), "--output", str(output)])

        # Assert
        assert status == 0
        assert len(PdfReader(output).pages) == 3

    def test_when_mode_flag_and_config_then_flag_wins(self, tmp_path):
        config_path = tmp_path / "guides.json"
        config_path.write_text(json.dumps({
            "mode": "full-page",
            "sections": [{"num_lines": 3}, {"num_lines": 5}],
        }))
        output = tmp_path / "guides.pdf"

        main(["-c", str(config_path), "-m", "quadrant", "-o", str(output)])

        assert len(PdfReader(output).pages) == 1

    def test_when_config_invalid_then_returns_error_status(self, tmp_path, caplog):
        config_path = tmp_path / "broken.json"
        config_path.write_text("{oops")

        status = main(["--config", str(config_path)])

        assert status == 1
        assert "not valid JSON" in caplog.text

    def test_when_no_sections_then_warns_once_and_writes_empty_pdf(self, tmp_path, caplog):
        # Arrange
        config_path = tmp_path / "empty.json"
        config_path.write_text(json.dumps({"sections": []}))
        output = tmp_path / "empty.pdf"

        # Act
        with caplog.at_level(logging.WARNING):
            status = main(["--config", str(config_path), "--output", str(output)])

        # Assert
        assert status == 0
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "No sections to lay out" in warnings[0].getMessage()
        assert len(PdfReader(output).pages) == 0

    def test_when_unknown_mode_then_argparse_exits(self):
        with pytest.raises(SystemExit):
            main(["--mode", "triptych"])
