# SPDX-License-Identifier: Apache-2.0
"""Text container that can resize its font to fit its bounds."""

from __future__ import annotations

import logging
from typing import Any, Optional

from fontfit.core.font_fitter import FontFitter
from fontfit.core.models import FitConfig, Font, LineMode, Rect, Size
from fontfit.core.pdfium_measurer import PdfiumTextMeasurer
from fontfit.core.text_layout import TextMeasurer

logger = logging.getLogger(__name__)

DEFAULT_FONT = Font("Helvetica", 17.0)


class FittableLabel:
    """A label holding text, font, line count, bounds and text attributes.

    The label does not render anything; it measures through a
    TextMeasurer (PDFium standard fonts by default).

    Example:
        label = FittableLabel("Hello", bounds=Rect(0, 0, 200, 40))
        label.apply_fitting_font_size()
        label.font  # Font(name="Helvetica", size=87.5)
    """

    def __init__(
        self,
        text: Optional[str] = None,
        font: Font = DEFAULT_FONT,
        number_of_lines: int = 1,
        bounds: Rect = Rect(0.0, 0.0, 100.0, 20.0),
        attributes: Optional[dict[str, Any]] = None,
        measurer: Optional[TextMeasurer] = None,
    ) -> None:
        """Initialize FittableLabel.

        Args:
            text: Label text.
            font: Label font.
            number_of_lines: 1 for single-line, 0 (unlimited) or more for multi-line.
            bounds: Label bounds; the default fit target.
            attributes: Text attributes applied to the whole text.
            measurer: Text measurement backend.
        """
        self.text = text
        self.font = font
        self.number_of_lines = number_of_lines
        self.bounds = bounds
        self.attributes: dict[str, Any] = dict(attributes or {})
        self._fitter = FontFitter(measurer if measurer is not None else PdfiumTextMeasurer())

    @property
    def line_mode(self) -> LineMode:
        """Fit axis derived from number_of_lines."""
        return LineMode.for_number_of_lines(self.number_of_lines)

    @property
    def measurer(self) -> TextMeasurer:
        """Text measurement backend."""
        return self._fitter.measurer

    def font_size_that_fits(
        self,
        text: str,
        max_font_size: Optional[float] = None,
        min_font_scale: Optional[float] = None,
        rect_size: Optional[Size] = None,
        config: Optional[FitConfig] = None,
    ) -> float:
        """Return a font size at which text fits this label.

        Invalid or missing max_font_size / min_font_scale fall back to
        100 and 0.1. Empty text returns the current font size.

        Args:
            text: Text to fit (need not be the label's own text).
            max_font_size: Largest font size available.
            min_font_scale: Smallest font size as a fraction of max_font_size.
            rect_size: Size to fit into (default: the label's bounds).
            config: Ready-made configuration, used instead of the two numbers.

        Returns:
            Font size in [max_font_size * min_font_scale, max_font_size].
        """
        if config is None:
            config = FitConfig(max_font_size=max_font_size, min_font_scale=min_font_scale)
        target_size = rect_size if rect_size is not None else self.bounds.size
        return self._fitter.font_size_that_fits(
            text,
            self.font,
            target_size,
            self.line_mode,
            config,
            self.attributes,
        )

    def apply_fitting_font_size(
        self,
        max_font_size: Optional[float] = None,
        min_font_scale: Optional[float] = None,
        rect_size: Optional[Size] = None,
        config: Optional[FitConfig] = None,
    ) -> None:
        """Resize the font so the current text fits the label.

        Only the point size changes; the font family is kept. Does
        nothing when the label has no text.
        """
        if not self.text:
            return

        font_size = self.font_size_that_fits(
            self.text,
            max_font_size=max_font_size,
            min_font_scale=min_font_scale,
            rect_size=rect_size,
            config=config,
        )
        logger.debug("Label font %s: %.2f -> %.2f", self.font.name, self.font.size, font_size)
        self.font = self.font.with_size(font_size)
