"""Working out the target size of an image and resizing it."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from PIL import Image

from .options import ConvertOptions
from .terminal import TerminalAccessor


class _Terminal(Protocol):
    def char_width(self) -> float: ...

    def screen_size(self) -> tuple[int, int]: ...


_Match = Callable[[ConvertOptions], bool]
_Compute = Callable[["ResizeHandler", int, int, ConvertOptions], "tuple[int, int]"]


def _fixed_size(handler, width, height, options):
    if options.fixed_width != -1:
        width = options.fixed_width
    if options.fixed_height != -1:
        height = options.fixed_height
    return width, height


def _ratio_size(handler, width, height, options):
    return (
        handler.scale_width_by_ratio(float(width), options.ratio),
        handler.scale_height_by_ratio(float(height), options.ratio),
    )


def _stretched_size(handler, width, height, options):
    return handler.terminal.screen_size()


def _fit_size(handler, width, height, options):
    return handler.calc_proportional_fitting_screen_size(width, height)


def _original_size(handler, width, height, options):
    return width, height


_RESOLVERS: tuple[tuple[_Match, _Compute], ...] = (
    (lambda o: o.fixed_width != -1 or o.fixed_height != -1, _fixed_size),
    (lambda o: o.ratio != 1, _ratio_size),
    (lambda o: o.stretched_screen, _stretched_size),
    (lambda o: o.fit_screen, _fit_size),
    (lambda o: True, _original_size),
)


def _resize(image: Image.Image, width: int, height: int) -> Image.Image:
    if width < 0 or height < 0:
        raise ValueError(f"cannot resize to a negative size {width}x{height}")
    old_width, old_height = image.size
    if width == 0 and height == 0:
        return image.copy()
    # A zero dimension keeps the aspect ratio of the source image.
    if width == 0:
        scale = old_height / height
        width = int(0.7 + old_width / scale)
    elif height == 0:
        scale = old_width / width
        height = int(0.7 + old_height / scale)
    if image.mode not in ("RGB", "RGBA"):
        image = image.convert("RGBA")
    return image.resize((width, height), Image.Resampling.LANCZOS)


class ResizeHandler:
    """Resizes images according to conversion options and the terminal."""

    def __init__(self, terminal: _Terminal | None = None) -> None:
        self.terminal = terminal if terminal is not None else TerminalAccessor()

    def scale_image(self, image: Image.Image, options: ConvertOptions) -> Image.Image:
        """Return ``image`` resized to the size the options call for."""
        width, height = self.resolve_size(image.width, image.height, options)
        return _resize(image, width, height)

    def resolve_size(self, width: int, height: int, options: ConvertOptions) -> tuple[int, int]:
        """Return the target size for an image of ``width`` by ``height``.

        Fixed sizes win over a ratio, a ratio over stretching to the screen,
        and stretching over fitting the screen.
        """
        for matches, compute in _RESOLVERS:
            if matches(options):
                return compute(self, width, height, options)
        return width, height

    def calc_proportional_fitting_screen_size(self, width: int, height: int) -> tuple[int, int]:
        """Scale proportionally so that the image just fits the terminal."""
        screen_width, screen_height = self.terminal.screen_size()
        return self.calc_fit_size(
            float(screen_width), float(screen_height), float(width), float(height)
        )

    def calc_fit_size_ratio(
        self, width: float, height: float, image_width: float, image_height: float
    ) -> float:
        """Return the ratio that makes the image fit inside ``width`` by ``height``.

        The height is matched first; if the result is too wide, the width is
        matched instead.
        """
        char_width = self.terminal.char_width()
        ratio = height / image_height
        scaled_width = image_width * ratio / char_width
        if scaled_width < width:
            return ratio / char_width
        return width / image_width

    def calc_fit_size(
        self, width: float, height: float, to_be_fit_width: float, to_be_fit_height: float
    ) -> tuple[int, int]:
        """Return the proportional size that fits inside ``width`` by ``height``."""
        ratio = self.calc_fit_size_ratio(width, height, to_be_fit_width, to_be_fit_height)
        return (
            self.scale_width_by_ratio(to_be_fit_width, ratio),
            self.scale_height_by_ratio(to_be_fit_height, ratio),
        )

    def scale_width_by_ratio(self, width: float, ratio: float) -> int:
        """Scale a width by ``ratio``."""
        return int(width * ratio)

    def scale_height_by_ratio(self, height: float, ratio: float) -> int:
        """Scale a height by ``ratio``, corrected for the character aspect."""
        return int(height * ratio * self.terminal.char_width())