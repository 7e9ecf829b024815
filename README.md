# img2ascii

img2ascii turns images that Pillow can open, such as JPEG and PNG, into ASCII
art. It can colour the output with 256-colour terminal escape codes and draw it
in reverse. It can size the image by a ratio or to a fixed width or height. It
can also scale the image to fit the terminal or stretch it to fill the terminal.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Command line

```
img2ascii -f picture.jpg
```

| Flag | Meaning | Default |
|------|---------|---------|
| `-f <filename>` | Image file to convert (required) | |
| `-r <ratio>` | Scale ratio. Ignored when `-w` or `-g` is given | `1` |
| `-w <width>` | Output width in characters. `-1` keeps the image width | `-1` |
| `-g <height>` | Output height in characters. `-1` keeps the image height | `-1` |
| `-s` | Fit the image to the terminal screen. Ignored when `-w`, `-g` or `-r` is given | on |
| `-t` | Stretch the image to fill the terminal screen. Takes precedence over `-s` | off |
| `-c` | Colour the characters | on |
| `-i` | Reverse the character ramp, so bright pixels become sparse characters | off |

The flags `-s`, `-t`, `-c` and `-i` each take an optional boolean value. You can
give it as `-c=false` or as `-c false`. The accepted values are `1`, `t`, `T`,
`true`, `TRUE`, `True` and `0`, `f`, `F`, `false`, `FALSE`, `False`. A flag
given without a value turns that option on.

Examples:

```
img2ascii -f picture.png -w 80 -g 40 -c=false
img2ascii -f picture.png -r 0.25
img2ascii -f picture.png -t
```

Fitting and stretching to the screen are on by default. Both of them need
standard output to be a terminal. When you redirect the output to a file or a
pipe, also give `-w`, `-g` or `-r`, or pass `-s=false`.

The command exits with these statuses:

- If `-f` is missing, it prints usage help to standard error and exits with
  status 0.
- If the file cannot be opened or decoded, it prints `open image failed : ...`
  to standard error and exits with status 1.
- If the terminal is needed but cannot be detected, it reports that and exits
  with status 1.

## Library

```python
from img2ascii.ascii import PixelConverter
from img2ascii.convert import ImageConverter
from img2ascii.options import ConvertOptions
from img2ascii.resize import ResizeHandler
from img2ascii.terminal import TerminalAccessor

converter = ImageConverter(ResizeHandler(TerminalAccessor()), PixelConverter())
options = ConvertOptions(fit_screen=False, colored=False)
print(converter.image_file_to_ascii_string("picture.png", options), end="")
```

- `img2ascii.options.ConvertOptions` holds the conversion options. It has the
  fields `ratio`, `fixed_width`, `fixed_height`, `fit_screen`,
  `stretched_screen`, `colored` and `reversed`, with the same defaults as the
  command.
- `img2ascii.convert.ImageConverter` converts whole images:
  - `image_to_ascii_string` and `image_file_to_ascii_string` return the
    rendered text.
  - `image_to_ascii_matrix` and `image_file_to_ascii_matrix` return a list
    with one string per character and a `"\n"` entry closing each row.
  - `image_to_char_pixel_matrix` and `image_file_to_char_pixel_matrix` return
    rows of `CharPixel` values. Each value holds the chosen character and the
    pixel's RGBA channels.
- `img2ascii.convert.open_image_file` opens and decodes an image. It raises
  `FileNotFoundError` for a missing file and `PIL.UnidentifiedImageError` for
  a file that is not a recognised image.
- `img2ascii.ascii.PixelConverter` converts single `(r, g, b[, a])` pixels:
  - `pixel_to_char_pixel` returns a `CharPixel`.
  - `pixel_to_ascii` returns the character, or the character wrapped in a
    colour escape sequence.

  Both methods take a `PixelOptions` with the fields `pixels`, `reversed` and
  `colored`. The default ramp is `" .,:;i1tfLCG08@"`.
- `img2ascii.resize.ResizeHandler` works out the target size and resizes the
  image with Lanczos resampling. It accepts any object that provides
  `char_width()` and `screen_size()` in place of a `TerminalAccessor`.

Character cells in a terminal are taller than they are wide. To allow for
this, heights are scaled by the character width: 0.714 on Windows and 0.5
elsewhere. When fitting or stretching to the screen,
`TerminalAccessor.screen_size` raises `img2ascii.terminal.TerminalError` if
standard output is not a terminal.