# SPDX-License-Identifier: Apache-2.0
"""Core font fitting modules."""

from .errors import ConfigurationError, FontFitError, FontLoadError
from .font_fitter import (
    FIT_TOLERANCE,
    FontFitter,
    constraint_size,
    multi_line_size_state,
    single_line_size_state,
    size_state,
)
from .models import (
    ATTR_LETTER_SPACING,
    ATTR_LINE_HEIGHT_FACTOR,
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
from .text_layout import GlyphMetricsMeasurer, TextMeasurer

__all__ = [
    "ATTR_LETTER_SPACING",
    "ATTR_LINE_HEIGHT_FACTOR",
    "ConfigurationError",
    "DEFAULT_MAX_FONT_SIZE",
    "DEFAULT_MIN_FONT_SCALE",
    "FIT_TOLERANCE",
    "FitConfig",
    "FitResult",
    "FitState",
    "Font",
    "FontFitError",
    "FontFitter",
    "FontLoadError",
    "GlyphMetricsMeasurer",
    "LineMode",
    "Rect",
    "Size",
    "TextMeasurer",
    "constraint_size",
    "multi_line_size_state",
    "single_line_size_state",
    "size_state",
]
