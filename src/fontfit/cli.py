# SPDX-License-Identifier: Apache-2.0
"""
fontfit - CLI Tool

Finds the largest font size at which a text fits a box. Single-line text
is fitted to the box width, multi-line text to the box height.

Usage:
    fit-font <text> --width W --height H [options]

Examples:
    fit-font "Hello" --width 200 --height 40
    fit-font "Line one\\nLine two\\nLine three" --width 80 --height 60 --lines 0
    fit-font "Hello" -W 200 -H 40 --backend pillow --font-file DejaVuSans.ttf
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, NoReturn

from fontfit.core.errors import ConfigurationError, FontFitError
from fontfit.core.font_fitter import FontFitter, constraint_size
from fontfit.core.models import (
    ATTR_LETTER_SPACING,
    ATTR_LINE_HEIGHT_FACTOR,
    FitConfig,
    Font,
    LineMode,
    Size,
)
from fontfit.core.pdfium_measurer import PdfiumTextMeasurer
from fontfit.core.pillow_measurer import DEFAULT_FONT_NAME, PillowTextMeasurer
from fontfit.core.text_layout import GlyphMetricsMeasurer

logger = logging.getLogger(__name__)

FONT_FILE_ENV = "FONTFIT_FONT_FILE"


def parse_args() -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed argument Namespace.
    """
    parser = argparse.ArgumentParser(
        prog="fit-font",
        description="Find the largest font size at which text fits a box",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  %(prog)s "Hello" -W 200 -H 40                       # PDF standard font (Helvetica)
  %(prog)s "Hello" -W 200 -H 40 --font Times-Roman    # Another standard font
  %(prog)s "a\\nb\\nc" -W 80 -H 60 --lines 0            # Multi-line, fit height
  %(prog)s "Hello" -W 200 -H 40 --backend pillow      # Pillow default font
  %(prog)s "Hello" -W 200 -H 40 --json                # Machine-readable output

Environment Variables:
  {FONT_FILE_ENV}  Font file for --backend pillow (default for --font-file)
""",
    )

    parser.add_argument(
        "text",
        help="Text to fit (literal \\n starts a new line)",
    )

    # Target box
    parser.add_argument(
        "-W",
        "--width",
        type=float,
        required=True,
        help="Target box width",
    )
    parser.add_argument(
        "-H",
        "--height",
        type=float,
        required=True,
        help="Target box height",
    )
    parser.add_argument(
        "-l",
        "--lines",
        type=int,
        default=1,
        help="Number of lines: 1 fits width, 0 (unlimited) or more fits height (default: 1)",
    )

    # Size range
    range_group = parser.add_argument_group("Size range options")
    range_group.add_argument(
        "--max-font-size",
        type=float,
        help="Largest font size (default: 100)",
    )
    range_group.add_argument(
        "--min-font-scale",
        type=float,
        help="Smallest font size as a fraction of the largest (default: 0.1)",
    )

    # Font and backend
    font_group = parser.add_argument_group("Font options")
    font_group.add_argument(
        "-b",
        "--backend",
        default="pdfium",
        choices=["pdfium", "pillow"],
        help="Measurement backend (default: pdfium)",
    )
    font_group.add_argument(
        "-f",
        "--font",
        help=(
            "Font name: a PDF standard font for pdfium (default: Helvetica), "
            f"a font file for pillow (default: {DEFAULT_FONT_NAME})"
        ),
    )
    font_group.add_argument(
        "--font-file",
        type=Path,
        help=f"Font file for pillow (or set {FONT_FILE_ENV})",
    )

    # Text attributes
    attr_group = parser.add_argument_group("Text attribute options")
    attr_group.add_argument(
        "--letter-spacing",
        type=float,
        default=0.0,
        help="Extra advance per character (default: 0)",
    )
    attr_group.add_argument(
        "--line-height-factor",
        type=float,
        default=1.0,
        help="Line height multiplier (default: 1.0)",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    return parser.parse_args()


def create_measurer(args: argparse.Namespace) -> tuple[GlyphMetricsMeasurer, str]:
    """Create the measurement backend and resolve the font name.

    Args:
        args: Command line arguments.

    Returns:
        Tuple of (measurer, font_name).

    Raises:
        ConfigurationError: If the font file does not exist.
    """
    if args.backend == "pillow":
        font_file = args.font_file
        if font_file is None and os.environ.get(FONT_FILE_ENV):
            font_file = Path(os.environ[FONT_FILE_ENV])
        if font_file is not None and not font_file.exists():
            raise ConfigurationError(f"Font file not found: {font_file}")
        return PillowTextMeasurer(font_file=font_file), args.font or DEFAULT_FONT_NAME

    return PdfiumTextMeasurer(), args.font or "Helvetica"


def get_text_attributes(args: argparse.Namespace) -> dict[str, Any]:
    """Collect text attributes from CLI arguments.

    Args:
        args: Command line arguments.

    Returns:
        Attribute mapping with only the non-default values.
    """
    attributes: dict[str, Any] = {}
    if args.letter_spacing:
        attributes[ATTR_LETTER_SPACING] = args.letter_spacing
    if args.line_height_factor != 1.0:
        attributes[ATTR_LINE_HEIGHT_FACTOR] = args.line_height_factor
    return attributes


def run(args: argparse.Namespace) -> int:
    """Fit the text and print the result.

    Args:
        args: Command line arguments.

    Returns:
        Exit code (0: success, 1: failure).
    """
    text = args.text.replace("\\n", "\n")
    target_size = Size(args.width, args.height)
    line_mode = LineMode.for_number_of_lines(args.lines)
    attributes = get_text_attributes(args)
    config = FitConfig(max_font_size=args.max_font_size, min_font_scale=args.min_font_scale)

    try:
        measurer, font_name = create_measurer(args)
        with measurer:
            fitter = FontFitter(measurer)
            font = Font(font_name, config.max_font_size)  # type: ignore[arg-type]
            result = fitter.fit(text, font, target_size, line_mode, config, attributes)
            measured = measurer.measure(
                text,
                font.with_size(result.font_size),
                attributes,
                constraint_size(target_size, line_mode),
            )
    except FontFitError as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    if args.json:
        output = {
            "font_size": result.font_size,
            "width": measured.width,
            "height": measured.height,
            "state": result.state.value if result.state else None,
            "probes": result.probes,
        }
        print(json.dumps(output))
    else:
        print(f"{result.font_size:g}")
        if result.probes and not result.converged:
            logger.warning(
                "No size in range fits exactly; using %.2f (%s)",
                result.font_size,
                result.state.value if result.state else "no probes",
            )

    return 0


def main() -> NoReturn:
    """Main entry point."""
    args = parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    exit_code = run(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
