"""Command line entry point: load an image, filter it and export the result."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Sequence

from PySide6.QtGui import QGuiApplication

from .config import DEFAULT_EXPORT_NAME
from .core.edit_session import EditSession
from .core.parameters import FILTER_KEYS, FilterParameters
from .errors import ImgFxError
from .io.loader import load_image
from .io.presets import load_preset, save_preset
from .utils.logging import get_logger


def _parse_region(value: str) -> tuple[float, float]:
    try:
        width, height = value.lower().split("x", 1)
        region = (float(width), float(height))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}") from None
    if region[0] <= 0 or region[1] <= 0:
        raise argparse.ArgumentTypeError(f"region must be positive, got {value!r}")
    return region


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="imgfx",
        description="Apply colour filters and an optional border to an image.",
    )
    parser.add_argument("input", help="image file to edit")
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_EXPORT_NAME,
        help=f"file to write (default: {DEFAULT_EXPORT_NAME})",
    )
    parser.add_argument("--preset", help="JSON preset providing the starting values")
    parser.add_argument("--save-preset", help="write the final values to this JSON preset")
    parser.add_argument(
        "--fit",
        type=_parse_region,
        metavar="WIDTHxHEIGHT",
        help="scale the image to fit 90%% of this display region first",
    )
    parser.add_argument("--top-text", default="", help="caption drawn along the top edge")
    parser.add_argument("--bottom-text", default="", help="caption drawn along the bottom edge")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    filters = parser.add_argument_group("filters")
    for name in FILTER_KEYS:
        filters.add_argument(f"--{name}", type=float, metavar="VALUE")
    return parser


def _resolve_parameters(args: argparse.Namespace) -> FilterParameters:
    params = load_preset(args.preset) if args.preset else FilterParameters()
    overrides = {
        name: getattr(args, name) for name in FILTER_KEYS if getattr(args, name) is not None
    }
    return params.with_values(overrides)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return the process exit code."""

    args = build_parser().parse_args(argv)
    logger = get_logger()
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    # Painting on a QImage only needs a GUI application object, not a display.
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QGuiApplication.instance() or QGuiApplication([sys.argv[0]])
    _ = app

    try:
        params = _resolve_parameters(args)
        loaded = load_image(args.input, region=args.fit)
        session = EditSession(loaded.buffer, params, max_border=loaded.max_border)
        if args.top_text or args.bottom_text:
            session.set_caption(args.top_text, args.bottom_text)
        else:
            session.render()
        target = session.export(args.output)
        if args.save_preset:
            save_preset(args.save_preset, session.params)
    except ImgFxError as exc:
        logger.error("%s", exc)
        return 1

    logger.info(
        "Wrote %s (active filters: %s, border colour %s)",
        target,
        ", ".join(session.params.active_filters()) or "none",
        session.border_color.hex if session.border_color else "n/a",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
