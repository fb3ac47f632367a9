import argparse
import logging
import sys

from asciiterm.converter import RenderMode, image_to_ascii, parse_mode
from asciiterm.errors import AsciiArtError
from asciiterm.terminal import resolve_output_width

VERSION = "0.1.0"


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s: %(message)s")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="asciiterm", description="Convert images to colourised ASCII art in the terminal"
    )
    parser.add_argument("image", metavar="IMAGE", help="Path to the input image file (PNG or JPEG)")
    parser.add_argument("--width", type=int, default=None, help="Override the output width in characters")
    parser.add_argument(
        "--mode",
        default=RenderMode.STANDARD.value,
        help='Rendering mode: "standard" (default) or "edge"',
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log progress to stderr (repeat for debug)")
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    try:
        mode = parse_mode(args.mode)
        width = resolve_output_width(args.width).width
        art = image_to_ascii(args.image, width=width, mode=mode)
    except AsciiArtError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    print(art)
