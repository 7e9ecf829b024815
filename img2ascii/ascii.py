"""Conversion of single image pixels into ASCII characters."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

DEFAULT_PIXELS = " .,:;i1tfLCG08@"

_ESCAPE = "\x1b["
_FOREGROUND = "38;05;"
_RESET = "\x1b[0;00m"


@dataclass(frozen=True)
class CharPixel:
    """A pixel converted to a character, with the colour it came from."""

    char: str
    r: int
    g: int
    b: int
    a: int


@dataclass
class PixelOptions:
    """Options that control how a pixel becomes a character."""

    pixels: str = DEFAULT_PIXELS
    reversed: bool = False
    colored: bool = True

    def merge(self, other: PixelOptions) -> None:
        """Take over every setting of ``other``."""
        self.pixels = other.pixels
        self.reversed = other.reversed
        self.colored = other.colored


def intensity(r: int, g: int, b: int, a: int) -> int:
    """Return the summed channel brightness weighted by alpha."""
    return (r + g + b) * a // 255


def round_value(value: float) -> int:
    """Round half up to the nearest integer."""
    return int(math.floor(value + 0.5))


def _grayscale_code(level: int) -> int | None:
    # The xterm grayscale ramp covers 0x08, 0x12, ..., 0xee in steps of ten.
    if level >= 0x08 and level <= 0xEE and (level - 0x08) % 10 == 0:
        return 232 + (level - 0x08) // 10
    return None


def _xterm_code(r: int, g: int, b: int) -> int:
    if r == g == b:
        code = _grayscale_code(r)
        if code is not None:
            return code
    return 16 + 36 * (r * 5 // 255) + 6 * (g * 5 // 255) + b * 5 // 255


def decorate_with_color(char: str, r: int, g: int, b: int) -> str:
    """Wrap ``char`` in a 256-colour terminal foreground escape sequence."""
    return f"{_ESCAPE}{_FOREGROUND}{_xterm_code(r, g, b)}m{char}{_RESET}"


def _rgba(pixel: Sequence[int]) -> tuple[int, int, int, int]:
    channels = tuple(pixel)
    if len(channels) == 3:
        channels = (*channels, 255)
    if len(channels) != 4:
        raise ValueError(f"a pixel needs 3 or 4 channels, got {len(channels)}")
    for value in channels:
        if not 0 <= value <= 255:
            raise ValueError(f"channel value {value} is out of range 0..255")
    r, g, b, a = (int(value) for value in channels)
    return r, g, b, a


class PixelConverter:
    """Maps pixels onto a ramp of characters by their brightness."""

    def pixel_to_char_pixel(
        self, pixel: Sequence[int], options: PixelOptions | None = None
    ) -> CharPixel:
        """Convert an (r, g, b[, a]) pixel into a CharPixel."""
        opts = PixelOptions()
        if options is not None:
            opts.merge(options)
        pixels = opts.pixels[::-1] if opts.reversed else opts.pixels
        if len(pixels) < 2:
            raise ValueError("the character ramp needs at least two characters")

        r, g, b, a = _rgba(pixel)
        value = intensity(r, g, b, a)
        precision = float(255 * 3 // (len(pixels) - 1))
        char = pixels[round_value(value / precision)]
        return CharPixel(char=char, r=r, g=g, b=b, a=a)

    def pixel_to_ascii(
        self, pixel: Sequence[int], options: PixelOptions | None = None
    ) -> str:
        """Convert a pixel into its character, coloured when requested."""
        opts = PixelOptions()
        if options is not None:
            opts.merge(options)
        converted = self.pixel_to_char_pixel(pixel, opts)
        if opts.colored:
            return decorate_with_color(converted.char, converted.r, converted.g, converted.b)
        return converted.char