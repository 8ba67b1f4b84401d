# SPDX-License-Identifier: Apache-2.0
"""Text measurement with PDF standard fonts through PDFium."""

from __future__ import annotations

import ctypes
import logging
from typing import Any

import pypdfium2 as pdfium  # type: ignore[import-untyped]

from .errors import FontLoadError
from .models import Font
from .text_layout import GlyphMetricsMeasurer

logger = logging.getLogger(__name__)

# The 14 fonts every PDF reader provides
STANDARD_FONTS: frozenset[str] = frozenset(
    {
        "Courier",
        "Courier-Bold",
        "Courier-BoldOblique",
        "Courier-Oblique",
        "Helvetica",
        "Helvetica-Bold",
        "Helvetica-BoldOblique",
        "Helvetica-Oblique",
        "Times-Roman",
        "Times-Bold",
        "Times-BoldItalic",
        "Times-Italic",
        "Symbol",
        "ZapfDingbats",
    }
)


class PdfiumTextMeasurer(GlyphMetricsMeasurer):
    """Measure text using PDFium's font metrics.

    Font handles are loaded on first use and cached by name. Use as a
    context manager, or call close(), to release them.

    Example:
        with PdfiumTextMeasurer() as measurer:
            size = measurer.measure("Hello", Font("Helvetica", 24), {}, constraint)
    """

    def __init__(self) -> None:
        self._doc: Any = None
        self._fonts: dict[str, ctypes.c_void_p] = {}

    def close(self) -> None:
        """Release font handles and the scratch document."""
        for handle in self._fonts.values():
            pdfium.raw.FPDFFont_Close(handle)
        self._fonts.clear()
        if self._doc is not None:
            self._doc.close()
            self._doc = None

    def font_handle(self, font_name: str) -> ctypes.c_void_p:
        """Get (loading if necessary) the PDFium handle of a standard font.

        Raises:
            FontLoadError: If the name is not a standard font.
        """
        handle = self._fonts.get(font_name)
        if handle is not None:
            return handle

        if font_name not in STANDARD_FONTS:
            raise FontLoadError(
                f"Not a PDF standard font: {font_name!r} "
                f"(available: {', '.join(sorted(STANDARD_FONTS))})",
                font_name,
            )

        if self._doc is None:
            self._doc = pdfium.PdfDocument.new()

        handle = pdfium.raw.FPDFText_LoadStandardFont(self._doc, font_name.encode("ascii"))
        if not handle:
            raise FontLoadError(f"PDFium failed to load font: {font_name}", font_name)

        logger.debug("Loaded standard font %s", font_name)
        self._fonts[font_name] = handle
        return handle

    def text_width(self, text: str, font: Font) -> float:
        """Calculate the width of text using glyph advance widths."""
        if not text:
            return 0.0

        font_handle = self.font_handle(font.name)
        total_width = 0.0
        width_out = ctypes.c_float()

        for char in text:
            result = pdfium.raw.FPDFFont_GetGlyphWidth(
                font_handle,
                ord(char),
                ctypes.c_float(font.size),
                ctypes.byref(width_out),
            )
            if result:
                total_width += width_out.value

        return total_width

    def line_height(self, font: Font) -> float:
        """Calculate line height as ascent minus descent."""
        font_handle = self.font_handle(font.name)
        ascent = ctypes.c_float()
        descent = ctypes.c_float()

        pdfium.raw.FPDFFont_GetAscent(
            font_handle,
            ctypes.c_float(font.size),
            ctypes.byref(ascent),
        )
        pdfium.raw.FPDFFont_GetDescent(
            font_handle,
            ctypes.c_float(font.size),
            ctypes.byref(descent),
        )

        # descent is negative
        return ascent.value - descent.value
