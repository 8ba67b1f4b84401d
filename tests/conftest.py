# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures for fontfit tests."""

from __future__ import annotations

from typing import Any, Mapping

import pytest

from fontfit.core.models import Font, Size
from fontfit.core.pdfium_measurer import PdfiumTextMeasurer


class LinearMeasurer:
    """Deterministic measurer whose box grows linearly with font size.

    width = font size * char_width * longest line length
    height = font size * line_height * number of lines ("\\n" separated)
    """

    def __init__(self, char_width: float = 0.5, line_height: float = 1.2) -> None:
        self.char_width = char_width
        self.line_height = line_height
        self.calls: list[tuple[str, Font, Size]] = []

    def measure(
        self,
        text: str,
        font: Font,
        attributes: Mapping[str, Any],
        constraint: Size,
    ) -> Size:
        self.calls.append((text, font, constraint))
        lines = text.split("\n")
        longest = max(len(line) for line in lines)
        return Size(
            font.size * self.char_width * longest,
            font.size * self.line_height * len(lines),
        )


@pytest.fixture
def linear_measurer() -> LinearMeasurer:
    """Create a LinearMeasurer with 0.5 char width and 1.2 line height."""
    return LinearMeasurer()


@pytest.fixture
def make_linear_measurer() -> type[LinearMeasurer]:
    """Factory for LinearMeasurer with custom metrics."""
    return LinearMeasurer


@pytest.fixture
def pdfium_measurer():
    """Create a PdfiumTextMeasurer, closed after the test."""
    measurer = PdfiumTextMeasurer()
    yield measurer
    measurer.close()
