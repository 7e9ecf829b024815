"""Command line interface: print an image as ASCII art."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from PIL import UnidentifiedImageError

from .convert import ImageConverter
from .options import ConvertOptions
from .terminal import TerminalError

_DEFAULTS = ConvertOptions()

_HEADER = """img2ascii version: img2ascii/1.0.0
Usage: img2ascii [-s] -f <filename> -r <ratio> -w <width> -g <height>

"""

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


def _boolean(text: str) -> bool:
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value {text!r}")


def build_parser() -> argparse.ArgumentParser:
    """Return the parser for the command line options."""
    parser = argparse.ArgumentParser(prog="img2ascii", usage=argparse.SUPPRESS)
    parser.add_argument("-f", dest="filename", default="", help="Image filename to be convert")
    parser.add_argument(
        "-r", dest="ratio", type=float, default=_DEFAULTS.ratio,
        help="Ratio to scale the image, ignored when use -w or -g",
    )
    parser.add_argument(
        "-w", dest="fixed_width", type=int, default=_DEFAULTS.fixed_width,
        help="Expected image width, -1 for image default width",
    )
    parser.add_argument(
        "-g", dest="fixed_height", type=int, default=_DEFAULTS.fixed_height,
        help="Expected image height, -1 for image default height",
    )
    flags = (
        ("-s", "fit_screen", "Fit the terminal screen, ignored when use -w, -g, -r"),
        ("-c", "colored", "Colored the ascii when output to the terminal"),
        ("-i", "reversed", "Reversed the ascii when output to the terminal"),
        ("-t", "stretched_screen", "Stretch the picture to overspread the screen"),
    )
    for flag, dest, text in flags:
        parser.add_argument(
            flag, dest=dest, nargs="?", const=True, type=_boolean,
            default=getattr(_DEFAULTS, dest), metavar="BOOL",
            help=f"{text} (use {flag}=false to turn off)",
        )
    return parser


def parse_options(args: argparse.Namespace) -> ConvertOptions:
    """Build conversion options from parsed arguments.

    Raises ValueError when no image file was given.
    """
    if not args.filename:
        raise ValueError("image file should not be empty")
    return ConvertOptions(
        ratio=args.ratio,
        fixed_width=args.fixed_width,
        fixed_height=args.fixed_height,
        fit_screen=args.fit_screen,
        stretched_screen=args.stretched_screen,
        colored=args.colored,
        reversed=args.reversed,
    )


def usage() -> None:
    """Print the usage text to standard error."""
    sys.stderr.write(_HEADER)
    sys.stderr.write(build_parser().format_help())


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = build_parser().parse_args(argv)
    try:
        options = parse_options(args)
    except ValueError:
        usage()
        return 0
    try:
        text = ImageConverter().image_file_to_ascii_string(args.filename, options)
    except (OSError, UnidentifiedImageError) as error:
        print(f"open image failed : {error}", file=sys.stderr)
        return 1
    except TerminalError as error:
        print(error, file=sys.stderr)
        return 1
    sys.stdout.write(text)
    return 0