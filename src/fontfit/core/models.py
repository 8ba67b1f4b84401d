# SPDX-License-Identifier: Apache-2.0
"""Data models for font size fitting.

Everything here is transient: a fit computation builds these values,
uses them for a single search and throws them away.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_MAX_FONT_SIZE = 100.0
DEFAULT_MIN_FONT_SCALE = 0.1

# Recognised text attribute keys
ATTR_LETTER_SPACING = "letter_spacing"
ATTR_LINE_HEIGHT_FACTOR = "line_height_factor"

TextAttributes = Mapping[str, Any]


class LineMode(str, Enum):
    """Layout mode of a text container.

    Single-line containers are fitted along their width, multi-line
    containers along their height.
    """

    SINGLE_LINE = "single_line"
    MULTI_LINE = "multi_line"

    @classmethod
    def for_number_of_lines(cls, number_of_lines: int) -> LineMode:
        """Map a line count to a mode (0 means unlimited lines)."""
        if number_of_lines == 1:
            return cls.SINGLE_LINE
        return cls.MULTI_LINE


class FitState(str, Enum):
    """Classification of one measured probe against the target size."""

    FIT = "fit"
    TOO_BIG = "too_big"
    TOO_SMALL = "too_small"


@dataclass(frozen=True)
class Size:
    """Width and height in layout units."""

    width: float
    height: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class Rect:
    """Rectangle with top-left origin.

    Attributes:
        x: Left X coordinate
        y: Top Y coordinate
        width: Width of the rectangle
        height: Height of the rectangle
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def size(self) -> Size:
        """Size of the rectangle."""
        return Size(self.width, self.height)


@dataclass(frozen=True)
class Font:
    """Font family and point size.

    Attributes:
        name: Font name (e.g., "Helvetica", "Times-Roman", or a font file)
        size: Font size in points
    """

    name: str
    size: float

    def with_size(self, size: float) -> Font:
        """Return the same font family at another point size."""
        return replace(self, size=float(size))


def _is_valid_positive(value: Optional[float]) -> bool:
    if value is None:
        return False
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(number) and number > 0


@dataclass
class FitConfig:
    """Configuration of a font size fit.

    Both options are optional. Missing or invalid values (None, NaN,
    infinities, non-positive numbers, and scales above 1) are replaced
    by the defaults when the config is constructed.

    Attributes:
        max_font_size: Largest font size the search may return.
        min_font_scale: Smallest allowed size as a fraction of max_font_size.
    """

    max_font_size: Optional[float] = None
    min_font_scale: Optional[float] = None

    def __post_init__(self) -> None:
        if _is_valid_positive(self.max_font_size):
            self.max_font_size = float(self.max_font_size)  # type: ignore[arg-type]
        else:
            if self.max_font_size is not None:
                logger.debug(
                    "Invalid max_font_size %r, using %s",
                    self.max_font_size,
                    DEFAULT_MAX_FONT_SIZE,
                )
            self.max_font_size = DEFAULT_MAX_FONT_SIZE

        if _is_valid_positive(self.min_font_scale) and float(self.min_font_scale) <= 1.0:  # type: ignore[arg-type]
            self.min_font_scale = float(self.min_font_scale)  # type: ignore[arg-type]
        else:
            if self.min_font_scale is not None:
                logger.debug(
                    "Invalid min_font_scale %r, using %s",
                    self.min_font_scale,
                    DEFAULT_MIN_FONT_SCALE,
                )
            self.min_font_scale = DEFAULT_MIN_FONT_SCALE

    @property
    def min_font_size(self) -> float:
        """Smallest font size the search may return."""
        return self.max_font_size * self.min_font_scale  # type: ignore[operator]

    @property
    def size_range(self) -> tuple[float, float]:
        """Closed search interval (min_font_size, max_font_size)."""
        return self.min_font_size, float(self.max_font_size)  # type: ignore[arg-type]


@dataclass
class FitResult:
    """Outcome of a font size search.

    Attributes:
        font_size: Selected font size.
        state: State of the last probe, None if nothing was measured.
        probes: Number of measurement calls made.
    """

    font_size: float
    state: Optional[FitState] = None
    probes: int = 0

    @property
    def converged(self) -> bool:
        """Whether the search stopped on a fitting probe."""
        return self.state is FitState.FIT
