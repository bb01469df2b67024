# ledmatrix

A small driver for row-scanned LED matrix displays. It keeps a frame buffer
with one byte per pixel. It draws text into that buffer with a built-in 5x7
bitmap font, and it passes the frame to your own code one row at a time
through a callback.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from ledmatrix.display import DisplayConfig, DisplayDriver

def output_row(row_n, row_data, config):
    # row_data is a bytes object of config.width pixels, each 0 or 1.
    ...

driver = DisplayDriver(DisplayConfig(width=64, height=8,
                                     row_output_callback=output_row))
driver.render_text("Hello")

# Each call passes the next row to the callback. After the last row it
# starts again at row 0.
driver.scan()

# Print the frame, with '#' for each lit pixel.
driver.show()
```

### `ledmatrix.display`

- `DisplayConfig(width, height, row_output_callback=None)` sets the size of
  the matrix and the function that receives scanned rows. That function is
  called as `callback(row_n, row_data, config)`.
- `DisplayDriver(config)` creates a zero-filled internal buffer of
  `width * height` bytes and shows it. If `config` is `None`, the driver has
  no image.
- `DisplayDriver.render_text(text)` draws characters six pixels wide and
  seven rows tall into the internal buffer, from left to right. Drawing stops
  at the first NUL character. It also stops when the next character would
  start past the right edge. A character that starts near the edge is not
  clipped: its columns that go past the edge continue on the next row of the
  flat buffer.
- `DisplayDriver.set_image(image)` shows a flat `bytes`/`bytearray` of your
  own instead of the internal buffer. Any nonzero byte is a lit pixel.
- `DisplayDriver.scan()` passes the current row to the callback and then
  moves on to the next row. It does nothing if there is no callback or no
  image.
- `DisplayDriver.render()` returns the image as text. A lit pixel becomes
  `"# "` and an unlit pixel `"  "`, with one line per row.
- `DisplayDriver.show(file=None)` writes `render()` to `file`, or to standard
  output if no file is given.

### `ledmatrix.font`

- `get_character(character)` returns the seven row bytes of a glyph. Bit 7
  is the leftmost pixel. The font covers `A`–`Z`, `a`–`z`, `0`–`9`, `.`,
  `,`, `!`, `?` and space. Any other character is drawn as `A`.
- `FONT` is the glyph table. `CHARACTER_WIDTH` (6) and `CHARACTER_HEIGHT` (7)
  give the size of one character cell.

## Demo

```
ledmatrix-demo
```

The demo draws `Kminek42` on a 64x8 display and prints the frame. It then
scans all eight rows. Each row is printed by `ledmatrix.cli.format_row` as
`Row N: `, followed by an indent, followed by the pixels as `# ` or `. `.

## What it does not do

The package does not talk to any hardware itself. Sending a row to real LEDs
is the job of the `row_output_callback` you supply. Timing is also up to you:
you must call `scan()` often enough to refresh the display.