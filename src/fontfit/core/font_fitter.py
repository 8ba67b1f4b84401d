# SPDX-License-Identifier: Apache-2.0
"""Font size fitting utilities."""

from __future__ import annotations

import logging
import math
from typing import Optional

from .models import (
    FitConfig,
    FitResult,
    FitState,
    Font,
    LineMode,
    Size,
    TextAttributes,
)
from .text_layout import TextMeasurer

logger = logging.getLogger(__name__)

# Width of the accepted band below the target dimension
FIT_TOLERANCE = 10.0


def single_line_size_state(
    rect: Size,
    size: Size,
    tolerance: float = FIT_TOLERANCE,
) -> FitState:
    """Classify a measured box against a target width."""
    if size.width - tolerance <= rect.width <= size.width:
        return FitState.FIT
    elif rect.width > size.width:
        return FitState.TOO_BIG
    else:
        return FitState.TOO_SMALL


def multi_line_size_state(
    rect: Size,
    size: Size,
    tolerance: float = FIT_TOLERANCE,
) -> FitState:
    """Classify a measured box against a target height."""
    if size.height - tolerance <= rect.height <= size.height:
        return FitState.FIT
    elif rect.height > size.height:
        return FitState.TOO_BIG
    else:
        return FitState.TOO_SMALL


def size_state(
    rect: Size,
    size: Size,
    line_mode: LineMode,
    tolerance: float = FIT_TOLERANCE,
) -> FitState:
    """Classify a measured box along the axis of the line mode."""
    if line_mode is LineMode.SINGLE_LINE:
        return single_line_size_state(rect, size, tolerance)
    return multi_line_size_state(rect, size, tolerance)


def constraint_size(target_size: Size, line_mode: LineMode) -> Size:
    """Box passed to the measurer to control wrapping.

    Single-line text keeps its natural width; multi-line text wraps at
    the target width and grows downwards.
    """
    if line_mode is LineMode.SINGLE_LINE:
        return Size(math.inf, target_size.height)
    return Size(target_size.width, math.inf)


class FontFitter:
    """Find the font size at which text fits a target size.

    The search probes font sizes between config.min_font_size and
    config.max_font_size, measuring the text through a TextMeasurer.
    A probe fits when the measured dimension lies in
    [target - tolerance, target].
    """

    def __init__(
        self,
        measurer: TextMeasurer,
        tolerance: float = FIT_TOLERANCE,
    ) -> None:
        """Initialize FontFitter.

        Args:
            measurer: Text measurement backend.
            tolerance: Width of the fit band below the target dimension.
        """
        self._measurer = measurer
        self._tolerance = float(tolerance)

    @property
    def measurer(self) -> TextMeasurer:
        """Text measurement backend."""
        return self._measurer

    def binary_search_font_size(
        self,
        text: str,
        min_size: float,
        max_size: float,
        target_size: Size,
        constraint: Size,
        font: Font,
        line_mode: LineMode,
        attributes: Optional[TextAttributes] = None,
    ) -> FitResult:
        """Search [min_size, max_size] for a fitting font size.

        A fitting probe is returned immediately. A too-big probe lowers
        the upper bound by one point; a too-small probe moves the lower
        bound one point above the probe. When the interval collapses the
        remaining upper bound is returned, never below min_size.

        Args:
            text: Text to fit.
            min_size: Smallest font size allowed.
            max_size: Largest font size allowed.
            target_size: Size the text must fit.
            constraint: Wrapping box passed to the measurer.
            font: Font whose family is measured; its size is ignored.
            line_mode: Axis to fit along.
            attributes: Text attributes carried into every measurement.

        Returns:
            FitResult with the selected size.
        """
        attributes = attributes or {}
        lower_bound = min_size
        state: Optional[FitState] = None
        probes = 0

        while max_size > min_size:
            font_size = (min_size + max_size) / 2
            rect = self._measurer.measure(text, font.with_size(font_size), attributes, constraint)
            probes += 1
            state = size_state(rect, target_size, line_mode, self._tolerance)
            logger.debug(
                "Probe %d: size=%.3f measured=%.2fx%.2f -> %s",
                probes,
                font_size,
                rect.width,
                rect.height,
                state.value,
            )

            if state is FitState.FIT:
                return FitResult(font_size=font_size, state=state, probes=probes)
            elif state is FitState.TOO_BIG:
                max_size = max_size - 1
            else:
                min_size = font_size + 1

        return FitResult(font_size=max(max_size, lower_bound), state=state, probes=probes)

    def fit(
        self,
        text: str,
        font: Font,
        target_size: Size,
        line_mode: LineMode,
        config: Optional[FitConfig] = None,
        attributes: Optional[TextAttributes] = None,
    ) -> FitResult:
        """Fit text into target_size along the axis of line_mode.

        Empty text is returned at the current font size without measuring.

        Args:
            text: Text to fit.
            font: Current font; its size is returned for empty text.
            target_size: Size the text must fit.
            line_mode: Axis to fit along.
            config: Size range configuration (defaults when None).
            attributes: Text attributes carried into every measurement.

        Returns:
            FitResult with the selected size.
        """
        if not text:
            return FitResult(font_size=font.size)

        config = config or FitConfig()
        min_size, max_size = config.size_range
        result = self.binary_search_font_size(
            text,
            min_size,
            max_size,
            target_size,
            constraint_size(target_size, line_mode),
            font,
            line_mode,
            attributes,
        )
        logger.debug(
            "Fitted %d chars into %.1fx%.1f (%s): %.3f after %d probes",
            len(text),
            target_size.width,
            target_size.height,
            line_mode.value,
            result.font_size,
            result.probes,
        )
        return result

    def font_size_that_fits(
        self,
        text: str,
        font: Font,
        target_size: Size,
        line_mode: LineMode,
        config: Optional[FitConfig] = None,
        attributes: Optional[TextAttributes] = None,
    ) -> float:
        """Return the font size that fits (see fit())."""
        return self.fit(text, font, target_size, line_mode, config, attributes).font_size
