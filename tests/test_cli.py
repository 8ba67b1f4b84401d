# SPDX-License-Identifier: Apache-2.0
"""Tests for the fit-font CLI."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from fontfit.cli import (
    FONT_FILE_ENV,
    create_measurer,
    get_text_attributes,
    parse_args,
    run,
)
from fontfit.core.errors import ConfigurationError
from fontfit.core.models import ATTR_LETTER_SPACING, ATTR_LINE_HEIGHT_FACTOR
from fontfit.core.pdfium_measurer import PdfiumTextMeasurer
from fontfit.core.pillow_measurer import DEFAULT_FONT_NAME, PillowTextMeasurer


def _args(*argv: str) -> argparse.Namespace:
    with patch.object(sys, "argv", ["fit-font", *argv]):
        return parse_args()


class TestParseArgs:
    """Tests for parse_args function."""

    def test_basic(self) -> None:
        """Test required arguments and defaults."""
        args = _args("Hello", "--width", "200", "--height", "40")
        assert args.text == "Hello"
        assert args.width == 200.0
        assert args.height == 40.0
        assert args.lines == 1
        assert args.backend == "pdfium"
        assert args.font is None
        assert args.max_font_size is None
        assert args.min_font_scale is None
        assert args.json is False

    def test_short_options(self) -> None:
        args = _args("Hello", "-W", "80", "-H", "60", "-l", "0", "-b", "pillow")
        assert args.width == 80.0
        assert args.height == 60.0
        assert args.lines == 0
        assert args.backend == "pillow"

    def test_size_range_options(self) -> None:
        args = _args("Hello", "-W", "80", "-H", "60", "--max-font-size", "48", "--min-font-scale", "0.5")
        assert args.max_font_size == 48.0
        assert args.min_font_scale == 0.5

    def test_width_required(self) -> None:
        with pytest.raises(SystemExit):
            _args("Hello", "--height", "40")

    def test_invalid_backend(self) -> None:
        with pytest.raises(SystemExit):
            _args("Hello", "-W", "80", "-H", "60", "--backend", "cairo")


class TestGetTextAttributes:
    """Tests for get_text_attributes helper function."""

    def test_defaults_are_empty(self) -> None:
        args = argparse.Namespace(letter_spacing=0.0, line_height_factor=1.0)
        assert get_text_attributes(args) == {}

    def test_non_default_values(self) -> None:
        args = argparse.Namespace(letter_spacing=1.5, line_height_factor=1.2)
        assert get_text_attributes(args) == {
            ATTR_LETTER_SPACING: 1.5,
            ATTR_LINE_HEIGHT_FACTOR: 1.2,
        }


class TestCreateMeasurer:
    """Tests for create_measurer helper function."""

    def test_pdfium_default_font(self) -> None:
        measurer, font_name = create_measurer(_args("Hello", "-W", "1", "-H", "1"))
        assert isinstance(measurer, PdfiumTextMeasurer)
        assert font_name == "Helvetica"
        measurer.close()

    def test_pillow_default_font(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(FONT_FILE_ENV, raising=False)
        measurer, font_name = create_measurer(_args("Hello", "-W", "1", "-H", "1", "-b", "pillow"))
        assert isinstance(measurer, PillowTextMeasurer)
        assert font_name == DEFAULT_FONT_NAME

    def test_pillow_missing_font_file(self, tmp_path: Path) -> None:
        args = _args(
            "Hello", "-W", "1", "-H", "1", "-b", "pillow", "--font-file", str(tmp_path / "x.ttf")
        )
        with pytest.raises(ConfigurationError):
            create_measurer(args)

    def test_pillow_font_file_from_env(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv(FONT_FILE_ENV, str(tmp_path / "env.ttf"))
        with pytest.raises(ConfigurationError, match="env.ttf"):
            create_measurer(_args("Hello", "-W", "1", "-H", "1", "-b", "pillow"))


class TestRun:
    """Tests for run()."""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = run(_args("Hello", "-W", "200", "-H", "40", "--json"))
        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert 10.0 <= output["font_size"] <= 100.0
        assert output["state"] == "fit"
        assert 190.0 <= output["width"] <= 200.0
        assert output["probes"] >= 1

    def test_plain_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = run(_args("Hello", "-W", "200", "-H", "40"))
        assert exit_code == 0
        assert 10.0 <= float(capsys.readouterr().out.strip()) <= 100.0

    def test_escaped_newlines(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Literal \\n splits the text into lines."""
        exit_code = run(_args("Alpha\\nBravo\\nCharlie", "-W", "300", "-H", "60", "-l", "0", "--json"))
        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert 50.0 <= output["height"] <= 60.0

    def test_empty_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Empty text reports the max font size without probing."""
        exit_code = run(_args("", "-W", "200", "-H", "40", "--json", "--max-font-size", "30"))
        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["font_size"] == 30.0
        assert output["probes"] == 0
        assert output["state"] is None

    def test_unknown_font(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = run(_args("Hello", "-W", "200", "-H", "40", "--font", "Papyrus"))
        assert exit_code == 1
        assert "Error:" in capsys.readouterr().err
