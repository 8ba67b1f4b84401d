# SPDX-License-Identifier: Apache-2.0
"""Exceptions raised by measurement backends and the CLI.

Invalid numeric fit configuration is not an error: it is normalised to
defaults by FitConfig.
"""

from __future__ import annotations


class FontFitError(Exception):
    """Base exception for fontfit."""

    pass


class FontLoadError(FontFitError):
    """A measurement backend could not load the requested font."""

    def __init__(self, message: str, font_name: str) -> None:
        super().__init__(message)
        self.font_name = font_name


class ConfigurationError(FontFitError):
    """Configuration error (unknown backend, missing font file, etc.).

    Fix the configuration first; retrying will not help.
    """

    pass
