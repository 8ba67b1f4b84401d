# SPDX-License-Identifier: Apache-2.0
"""fontfit - find the font size at which text fits a box."""

from fontfit.core import (
    FitConfig,
    FitResult,
    FitState,
    Font,
    FontFitError,
    FontFitter,
    LineMode,
    Rect,
    Size,
    TextMeasurer,
)
from fontfit.label import FittableLabel

__version__ = "0.1.0"

__all__ = [
    "FitConfig",
    "FitResult",
    "FitState",
    "FittableLabel",
    "Font",
    "FontFitError",
    "FontFitter",
    "LineMode",
    "Rect",
    "Size",
    "TextMeasurer",
    "__version__",
]
