# SPDX-License-Identifier: Apache-2.0
"""Text measurement with TrueType/OpenType fonts through Pillow."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from PIL import ImageFont

from .errors import FontLoadError
from .models import Font
from .text_layout import GlyphMetricsMeasurer

logger = logging.getLogger(__name__)

# Font name that selects Pillow's bundled default font
DEFAULT_FONT_NAME = "<default>"

_PillowFont = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


class PillowTextMeasurer(GlyphMetricsMeasurer):
    """Measure text using Pillow's FreeType font metrics.

    The font is resolved from font_file when given, otherwise from the
    font name (a file path or a file name Pillow finds in the system font
    directories). DEFAULT_FONT_NAME selects Pillow's bundled font.
    """

    def __init__(self, font_file: Path | None = None) -> None:
        """Initialize PillowTextMeasurer.

        Args:
            font_file: Font file used for every font name, if set.
        """
        self._font_file = font_file
        self._cache: dict[tuple[str, float], _PillowFont] = {}

    def load_font(self, font: Font) -> _PillowFont:
        """Load (or fetch from cache) the Pillow font for a Font.

        Raises:
            FontLoadError: If the font file cannot be opened.
        """
        key = (font.name, font.size)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        if self._font_file is None and font.name == DEFAULT_FONT_NAME:
            loaded: _PillowFont = ImageFont.load_default(size=font.size)
        else:
            source = str(self._font_file) if self._font_file is not None else font.name
            try:
                loaded = ImageFont.truetype(source, size=font.size)
            except OSError as e:
                raise FontLoadError(f"Cannot load font {source!r}: {e}", font.name) from e
            logger.debug("Loaded font %s at %.2f", source, font.size)

        self._cache[key] = loaded
        return loaded

    def text_width(self, text: str, font: Font) -> float:
        """Advance width of text."""
        if not text:
            return 0.0
        return float(self.load_font(font).getlength(text))

    def line_height(self, font: Font) -> float:
        """Line height as ascent plus descent."""
        pil_font = self.load_font(font)
        if isinstance(pil_font, ImageFont.FreeTypeFont):
            ascent, descent = pil_font.getmetrics()
            return float(ascent + descent)
        # Bitmap fallback font has no metrics
        left, top, right, bottom = pil_font.getbbox("Ag")
        return float(bottom - top)
