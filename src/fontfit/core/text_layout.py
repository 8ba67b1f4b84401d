# SPDX-License-Identifier: Apache-2.0
"""Text measurement for font size fitting.

This module provides:
- The TextMeasurer protocol that the fitter measures through
- A glyph-metrics base class with line wrapping shared by the backends
- Word/character boundary wrapping with basic Japanese kinsoku rules
"""

from __future__ import annotations

import math
from typing import Protocol, runtime_checkable

from .models import (
    ATTR_LETTER_SPACING,
    ATTR_LINE_HEIGHT_FACTOR,
    Font,
    Size,
    TextAttributes,
)

# Characters that should not appear at the start of a line (Japanese kinsoku)
KINSOKU_NOT_AT_LINE_START: set[str] = {
    # Punctuation
    "。", "、", "．", "，", "：", "；", "！", "？",
    # Closing brackets
    "）", "」", "』", "】", "〉", "》", "〕", "］", "｝", ")",
    # Small kana
    "ぁ", "ぃ", "ぅ", "ぇ", "ぉ", "っ", "ゃ", "ゅ", "ょ", "ゎ",
    "ァ", "ィ", "ゥ", "ェ", "ォ", "ッ", "ャ", "ュ", "ョ", "ヮ",
    # Long vowel mark
    "ー",
    # Repetition marks
    "々", "ゝ", "ゞ", "ヽ", "ヾ",
}

# Characters that should not appear at the end of a line (Japanese kinsoku)
KINSOKU_NOT_AT_LINE_END: set[str] = {
    # Opening brackets
    "（", "「", "『", "【", "〈", "《", "〔", "［", "｛", "(",
}

# How far back to look for a space when breaking at a word boundary
WORD_BREAK_LOOKBEHIND = 20


@runtime_checkable
class TextMeasurer(Protocol):
    """Protocol for text measurement backends.

    Implementations must be deterministic for fixed inputs.
    """

    def measure(
        self,
        text: str,
        font: Font,
        attributes: TextAttributes,
        constraint: Size,
    ) -> Size:
        """Measure the box needed to render text.

        Args:
            text: Text to measure.
            font: Font family and size to measure with.
            attributes: Text attributes (letter spacing, line height factor, ...).
            constraint: Box controlling line wrapping. An infinite width
                disables wrapping; the height never clips.

        Returns:
            Size of the rendered text.
        """
        ...


def is_cjk_char(char: str) -> bool:
    """Check if a character is CJK (Chinese, Japanese, Korean).

    Args:
        char: Single character to check.

    Returns:
        True if the character is CJK.
    """
    code = ord(char)
    return (
        0x4E00 <= code <= 0x9FFF  # CJK Unified Ideographs
        or 0x3040 <= code <= 0x309F  # Hiragana
        or 0x30A0 <= code <= 0x30FF  # Katakana
        or 0x3400 <= code <= 0x4DBF  # CJK Extension A
        or 0xAC00 <= code <= 0xD7AF  # Hangul Syllables
        or 0x3000 <= code <= 0x303F  # CJK Punctuation
        or 0xFF00 <= code <= 0xFFEF  # Fullwidth Forms
    )


def apply_kinsoku(text: str, break_point: int) -> int:
    """Apply Japanese line-break rules (kinsoku).

    Args:
        text: Full text being wrapped.
        break_point: Proposed break point.

    Returns:
        Adjusted break point.
    """
    if break_point <= 0 or break_point >= len(text):
        return break_point

    # Next character must not start a line: pull it onto this one
    if text[break_point] in KINSOKU_NOT_AT_LINE_START:
        return break_point + 1

    # Last character must not end a line: push it to the next one
    if text[break_point - 1] in KINSOKU_NOT_AT_LINE_END and break_point > 1:
        return break_point - 1

    return break_point


class GlyphMetricsMeasurer:
    """Base class for measurers built on per-font glyph metrics.

    Subclasses supply text_width() and line_height(); this class lays the
    text out into lines and reports the bounding size.
    """

    def __enter__(self) -> GlyphMetricsMeasurer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release backend resources."""

    def text_width(self, text: str, font: Font) -> float:
        """Advance width of a single line of text, without letter spacing."""
        raise NotImplementedError

    def line_height(self, font: Font) -> float:
        """Height of one line of text at line height factor 1.0."""
        raise NotImplementedError

    def line_width(self, text: str, font: Font, letter_spacing: float = 0.0) -> float:
        """Width of a laid out line including letter spacing."""
        if not text:
            return 0.0
        return self.text_width(text, font) + letter_spacing * len(text)

    def _find_break_point(
        self,
        text: str,
        font: Font,
        max_width: float,
        letter_spacing: float,
    ) -> int:
        """Find the best break point for text wrapping.

        This method finds where to break text considering:
        - Maximum width constraint
        - Word boundaries for non-CJK text
        - Character boundaries for CJK text
        - Basic kinsoku (Japanese line-break rules)

        Returns:
            Number of characters to include in this line.
        """
        if not text:
            return 0

        current_width = 0.0
        break_point = len(text)

        for i, char in enumerate(text):
            char_width = self.text_width(char, font) + letter_spacing
            if current_width + char_width > max_width:
                break_point = i
                break
            current_width += char_width

        if break_point == 0:
            # Even a single character doesn't fit
            return 1

        if break_point >= len(text):
            return break_point

        break_point = apply_kinsoku(text, break_point)

        # For non-CJK text, try to break at word boundary
        if break_point > 0 and not is_cjk_char(text[break_point - 1]):
            for j in range(break_point - 1, max(0, break_point - WORD_BREAK_LOOKBEHIND), -1):
                if text[j] == " ":
                    return j + 1  # Include the space in the line

        return break_point

    def wrap_text(
        self,
        text: str,
        max_width: float,
        font: Font,
        letter_spacing: float = 0.0,
    ) -> list[str]:
        """Wrap a paragraph (no hard breaks) to a maximum width.

        Args:
            text: Text to wrap.
            max_width: Maximum line width.
            font: Font to measure with.
            letter_spacing: Extra advance per character.

        Returns:
            List of lines.
        """
        if not text:
            return []

        lines: list[str] = []
        remaining = text.strip()

        while remaining:
            break_point = self._find_break_point(remaining, font, max_width, letter_spacing)

            line = remaining[:break_point].rstrip()
            if line:
                lines.append(line)

            remaining = remaining[break_point:].lstrip()

        return lines

    def layout_lines(
        self,
        text: str,
        font: Font,
        attributes: TextAttributes,
        constraint: Size,
    ) -> list[str]:
        """Split text into rendered lines for the given constraint box."""
        letter_spacing = float(attributes.get(ATTR_LETTER_SPACING, 0.0))
        paragraphs = text.split("\n")
        if not math.isfinite(constraint.width):
            return paragraphs

        lines: list[str] = []
        for paragraph in paragraphs:
            # An empty paragraph still takes up a line
            lines.extend(
                self.wrap_text(paragraph, constraint.width, font, letter_spacing) or [""]
            )
        return lines

    def measure(
        self,
        text: str,
        font: Font,
        attributes: TextAttributes,
        constraint: Size,
    ) -> Size:
        """Measure the box needed to render text (see TextMeasurer)."""
        if not text:
            return Size(0.0, 0.0)

        letter_spacing = float(attributes.get(ATTR_LETTER_SPACING, 0.0))
        line_height_factor = float(attributes.get(ATTR_LINE_HEIGHT_FACTOR, 1.0))

        lines = self.layout_lines(text, font, attributes, constraint)
        width = max(self.line_width(line, font, letter_spacing) for line in lines)
        height = self.line_height(font) * line_height_factor * len(lines)
        return Size(max(width, 0.0), max(height, 0.0))
