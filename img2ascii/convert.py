"""Conversion of whole images into ASCII text."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike

from PIL import Image

from .ascii import CharPixel, PixelConverter, PixelOptions
from .options import ConvertOptions
from .resize import ResizeHandler

RGBA = tuple[int, int, int, int]


def open_image_file(filename: str | PathLike[str]) -> Image.Image:
    """Open and decode an image file.

    Raises FileNotFoundError for a missing file and
    PIL.UnidentifiedImageError for a file that is not a supported image.
    """
    image = Image.open(filename)
    image.load()
    return image


class ImageConverter:
    """Turns images into matrices or strings of ASCII characters."""

    def __init__(
        self,
        resize_handler: ResizeHandler | None = None,
        pixel_converter: PixelConverter | None = None,
    ) -> None:
        self.resize_handler = resize_handler if resize_handler is not None else ResizeHandler()
        self.pixel_converter = (
            pixel_converter if pixel_converter is not None else PixelConverter()
        )

    def _rows(self, image: Image.Image, options: ConvertOptions) -> Iterator[list[RGBA]]:
        scaled = self.resize_handler.scale_image(image, options)
        rgba = scaled if scaled.mode == "RGBA" else scaled.convert("RGBA")
        width, height = rgba.size
        data = rgba.tobytes()
        stride = width * 4
        for row_start in range(0, stride * height, stride):
            row = data[row_start:row_start + stride]
            channels = iter(row)
            yield list(zip(channels, channels, channels, channels))

    @staticmethod
    def _pixel_options(options: ConvertOptions) -> PixelOptions:
        return PixelOptions(colored=options.colored, reversed=options.reversed)

    def image_to_char_pixel_matrix(
        self, image: Image.Image, options: ConvertOptions | None = None
    ) -> list[list[CharPixel]]:
        """Return the scaled image as rows of CharPixel values."""
        options = options if options is not None else ConvertOptions()
        pixel_options = self._pixel_options(options)
        return [
            [self.pixel_converter.pixel_to_char_pixel(pixel, pixel_options) for pixel in row]
            for row in self._rows(image, options)
        ]

    def image_file_to_char_pixel_matrix(
        self, filename: str | PathLike[str], options: ConvertOptions | None = None
    ) -> list[list[CharPixel]]:
        """Open an image file and return it as rows of CharPixel values."""
        return self.image_to_char_pixel_matrix(open_image_file(filename), options)

    def image_to_ascii_matrix(
        self, image: Image.Image, options: ConvertOptions | None = None
    ) -> list[str]:
        """Return one string per pixel, with a newline entry closing each row."""
        options = options if options is not None else ConvertOptions()
        pixel_options = self._pixel_options(options)
        matrix: list[str] = []
        for row in self._rows(image, options):
            matrix.extend(
                self.pixel_converter.pixel_to_ascii(pixel, pixel_options) for pixel in row
            )
            matrix.append("\n")
        return matrix

    def image_to_ascii_string(
        self, image: Image.Image, options: ConvertOptions | None = None
    ) -> str:
        """Return the image rendered as a single string."""
        return "".join(self.image_to_ascii_matrix(image, options))

    def image_file_to_ascii_matrix(
        self, filename: str | PathLike[str], options: ConvertOptions | None = None
    ) -> list[str]:
        """Open an image file and return its ASCII matrix."""
        return self.image_to_ascii_matrix(open_image_file(filename), options)

    def image_file_to_ascii_string(
        self, filename: str | PathLike[str], options: ConvertOptions | None = None
    ) -> str:
        """Open an image file and return it rendered as a string."""
        return self.image_to_ascii_string(open_image_file(filename), options)