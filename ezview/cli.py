# ezview/cli.py
"""
Wiersz poleceń: ``ezview <input.ppm>``.

Wczytuje obraz PPM (P3/P6) i otwiera okno podglądu. Błąd wczytywania jest
zgłaszany na stderr i kończy program kodem 1 – okno się wtedy nie otwiera.
"""

import argparse
import logging
import re
import sys
from typing import List, Optional

from . import __version__
from .constants import APP_SIZE
from .errors import PPMError
from .io.ppm import load_ppm

logger = logging.getLogger("ezview")

CONTROLS = """\
Controls:
                WASD - Translation
                TFGH - Scale
                IJKL - Shear
                  QE - Rotation
                   R - Reset
 Arrow Up/Arrow Down - Scale uniform
      Mouse Scroll Y - Scale uniform by scroll amount

Example: ezview test.ppm
"""

_SIZE_RE = re.compile(r"\d+x\d+")


def _window_size(value: str) -> str:
    if not _SIZE_RE.fullmatch(value):
        raise argparse.ArgumentTypeError(f"Expected WIDTHxHEIGHT, got '{value}'")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ezview",
        description="View a PPM (P3 or P6) image.",
        epilog=CONTROLS,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", help="The input image PPM file")
    parser.add_argument(
        "--size",
        type=_window_size,
        default=APP_SIZE,
        help=f"Initial window size as WIDTHxHEIGHT (default: {APP_SIZE})",
    )
    parser.add_argument(
        "--no-window",
        action="store_true",
        help="Only decode the image and print a short summary",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        image = load_ppm(args.input)
    except PPMError as e:
        logger.error("An error occurred loading the specified source file: %s", e)
        return 1

    if args.no_window:
        print(f"{args.input}: {image.width}x{image.height}")
        return 0

    if image.width == 0 or image.height == 0:
        logger.error("The image %s is empty, nothing to display", args.input)
        return 1

    from .render.viewer import show_image

    show_image(image, src=args.input, size=args.size)
    return 0


if __name__ == "__main__":
    sys.exit(main())
