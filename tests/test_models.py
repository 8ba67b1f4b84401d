# SPDX-License-Identifier: Apache-2.0
"""Tests for fontfit data models."""

from __future__ import annotations

import math

import pytest

from fontfit.core.models import (
    DEFAULT_MAX_FONT_SIZE,
    DEFAULT_MIN_FONT_SCALE,
    FitConfig,
    FitResult,
    FitState,
    Font,
    LineMode,
    Rect,
    Size,
)


class TestFitConfig:
    """Tests for FitConfig default substitution."""

    def test_defaults(self) -> None:
        """Missing options use the defaults."""
        config = FitConfig()
        assert config.max_font_size == DEFAULT_MAX_FONT_SIZE
        assert config.min_font_scale == DEFAULT_MIN_FONT_SCALE

    def test_valid_values_kept(self) -> None:
        """Valid options are kept as floats."""
        config = FitConfig(max_font_size=48, min_font_scale=0.5)
        assert config.max_font_size == 48.0
        assert config.min_font_scale == 0.5
        assert config.min_font_size == 24.0

    @pytest.mark.parametrize(
        "value",
        [math.nan, math.inf, -math.inf, 0.0, -12.0, "abc"],
    )
    def test_invalid_max_font_size(self, value: object) -> None:
        """Invalid max_font_size is replaced by 100."""
        config = FitConfig(max_font_size=value)  # type: ignore[arg-type]
        assert config.max_font_size == 100.0

    @pytest.mark.parametrize(
        "value",
        [math.nan, math.inf, 0.0, -0.5, 1.5],
    )
    def test_invalid_min_font_scale(self, value: float) -> None:
        """Invalid min_font_scale is replaced by 0.1."""
        config = FitConfig(min_font_scale=value)
        assert config.min_font_scale == 0.1

    def test_scale_of_one_is_valid(self) -> None:
        """A scale of exactly 1 collapses the range to a single size."""
        config = FitConfig(max_font_size=30, min_font_scale=1.0)
        assert config.size_range == (30.0, 30.0)

    def test_size_range(self) -> None:
        """size_range is (max * scale, max)."""
        min_size, max_size = FitConfig().size_range
        assert min_size == pytest.approx(10.0)
        assert max_size == 100.0
        assert min_size <= max_size

    def test_nan_matches_default(self) -> None:
        """NaN options behave exactly like the defaults."""
        assert FitConfig(math.nan, math.nan) == FitConfig(100, 0.1)


class TestFont:
    """Tests for Font."""

    def test_with_size_keeps_family(self) -> None:
        """Only the size changes."""
        font = Font("Times-Bold", 12.0)
        resized = font.with_size(30)
        assert resized == Font("Times-Bold", 30.0)
        assert font.size == 12.0


class TestLineMode:
    """Tests for LineMode."""

    def test_single_line(self) -> None:
        assert LineMode.for_number_of_lines(1) is LineMode.SINGLE_LINE

    @pytest.mark.parametrize("lines", [0, 2, 5])
    def test_multi_line(self, lines: int) -> None:
        """Zero (unlimited) and several lines fit along the height."""
        assert LineMode.for_number_of_lines(lines) is LineMode.MULTI_LINE


class TestGeometry:
    """Tests for Rect and Size."""

    def test_rect_size(self) -> None:
        rect = Rect(5, 10, 200, 40)
        assert rect.size == Size(200, 40)

    def test_size_to_dict(self) -> None:
        assert Size(1.5, 2.0).to_dict() == {"width": 1.5, "height": 2.0}


class TestFitResult:
    """Tests for FitResult."""

    def test_converged(self) -> None:
        assert FitResult(12.0, FitState.FIT, 3).converged
        assert not FitResult(12.0, FitState.TOO_BIG, 3).converged
        assert not FitResult(12.0).converged
