import pytest
from PIL import Image, UnidentifiedImageError

from img2ascii.ascii import CharPixel
from img2ascii.convert import ImageConverter, open_image_file
from img2ascii.options import ConvertOptions
from img2ascii.resize import ResizeHandler


class _StubTerminal:
    def char_width(self):
        return 0.5

    def screen_size(self):
        return 100, 80


def _plain_options(**changes):
    options = ConvertOptions(fit_screen=False, colored=False)
    for name, value in changes.items():
        setattr(options, name, value)
    return options


@pytest.fixture
def black_png(tmp_path):
    path = tmp_path / "3x3_black.png"
    Image.new("RGBA", (3, 3), (0, 0, 0, 255)).save(path)
    return path


@pytest.fixture
def white_png(tmp_path):
    path = tmp_path / "3x3_white.png"
    Image.new("RGBA", (3, 3), (255, 255, 255, 255)).save(path)
    return path


@pytest.fixture
def wide_png(tmp_path):
    path = tmp_path / "8x3.png"
    Image.new("RGB", (8, 3), (255, 255, 255)).save(path)
    return path


def test_open_png_and_jpg(tmp_path, black_png):
    jpg = tmp_path / "sample.jpg"
    Image.new("RGB", (4, 2), (10, 20, 30)).save(jpg)
    assert open_image_file(jpg).size == (4, 2)
    assert open_image_file(black_png).size == (3, 3)


def test_open_unsupported_file(tmp_path):
    path = tmp_path / "not_supported_sample_image"
    path.write_bytes(b"this is not an image")
    with pytest.raises(UnidentifiedImageError):
        open_image_file(path)


def test_open_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_image_file(tmp_path / "not exists")


def test_black_ascii_matrix(black_png):
    matrix = ImageConverter().image_file_to_ascii_matrix(black_png, _plain_options())
    assert matrix == [" ", " ", " ", "\n"] * 3


def test_white_ascii_matrix(white_png):
    matrix = ImageConverter().image_file_to_ascii_matrix(white_png, _plain_options())
    assert matrix == ["@", "@", "@", "\n"] * 3


@pytest.mark.parametrize(
    "fixture, expected",
    [("black_png", "   \n   \n   \n"), ("white_png", "@@@\n@@@\n@@@\n")],
)
def test_ascii_string(request, fixture, expected):
    path = request.getfixturevalue(fixture)
    assert ImageConverter().image_file_to_ascii_string(path, _plain_options()) == expected


@pytest.mark.parametrize(
    "fixture, expected",
    [("white_png", "   \n   \n   \n"), ("black_png", "@@@\n@@@\n@@@\n")],
)
def test_reversed_ascii_string(request, fixture, expected):
    path = request.getfixturevalue(fixture)
    options = _plain_options(reversed=True)
    assert ImageConverter().image_file_to_ascii_string(path, options) == expected


@pytest.mark.parametrize(
    "fixture, width, height",
    [("black_png", 3, 3), ("white_png", 3, 3), ("wide_png", 8, 3)],
)
def test_char_pixel_matrix_dimensions(request, fixture, width, height):
    path = request.getfixturevalue(fixture)
    matrix = ImageConverter().image_file_to_char_pixel_matrix(path, _plain_options())
    assert len(matrix) == height
    assert all(len(row) == width for row in matrix)


def test_char_pixel_values(white_png):
    matrix = ImageConverter().image_file_to_char_pixel_matrix(white_png, _plain_options())
    assert matrix[0][0] == CharPixel(char="@", r=255, g=255, b=255, a=255)


def test_grayscale_image_is_converted():
    image = Image.new("L", (2, 2), 255)
    assert ImageConverter().image_to_ascii_string(image, _plain_options()) == "@@\n@@\n"


def test_transparent_pixels_are_blank():
    image = Image.new("RGBA", (2, 1), (255, 255, 255, 0))
    assert ImageConverter().image_to_ascii_string(image, _plain_options()) == "  \n"


def test_colored_output_has_escape_sequences():
    image = Image.new("RGB", (2, 1), (123, 123, 123))
    matrix = ImageConverter().image_to_ascii_matrix(image, _plain_options(colored=True))
    assert len(matrix) == 3
    assert matrix[0].startswith("\x1b[")
    assert len(matrix[0]) > 1
    assert matrix[-1] == "\n"


def test_fixed_width_changes_columns():
    image = Image.new("RGB", (3, 3), (255, 255, 255))
    text = ImageConverter().image_to_ascii_string(image, _plain_options(fixed_width=5))
    assert text == "@@@@@\n" * 3


def test_fit_screen_uses_terminal_size():
    converter = ImageConverter(resize_handler=ResizeHandler(_StubTerminal()))
    image = Image.new("RGB", (2000, 1500), (255, 255, 255))
    options = ConvertOptions(colored=False, fit_screen=True)
    matrix = converter.image_to_char_pixel_matrix(image, options)
    assert len(matrix) == 37
    assert len(matrix[0]) == 100