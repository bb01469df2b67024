"""Row-scanned LED matrix display driver."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from .font import CHARACTER_HEIGHT, CHARACTER_WIDTH, get_character

RowCallback = Callable[[int, bytes, "DisplayConfig"], None]


@dataclass
class DisplayConfig:
    """Geometry of the matrix and the sink that receives scanned rows."""

    width: int
    height: int
    row_output_callback: Optional[RowCallback] = None


class DisplayDriver:
    """Holds a one-byte-per-pixel image and emits it one row per scan."""

    def __init__(self, config: Optional[DisplayConfig]) -> None:
        self.config = config
        self._last_row = 0
        if config is None:
            self.buffer = bytearray()
            self.image: Optional[bytes | bytearray] = None
        else:
            self.buffer = bytearray(config.width * config.height)
            self.image = self.buffer

    @property
    def _width(self) -> int:
        return self.config.width if self.config else 0

    def set_image(self, image: Optional[bytes | bytearray]) -> None:
        """Show an external image; nonzero bytes are lit pixels."""
        self.image = image

    def render_text(self, text: str) -> None:
        """Draw ``text`` into the internal buffer, left to right.

        Drawing stops at the first NUL or once a character would start past
        the right edge.  Columns that run past the edge spill into the next
        row, as they do in the flat pixel buffer.
        """
        width = self._width
        text = text.split("\0", 1)[0]
        for index, character in enumerate(text):
            origin = index * CHARACTER_WIDTH
            if origin >= width:
                break
            glyph = get_character(character)
            for row, bits in enumerate(glyph[:CHARACTER_HEIGHT]):
                for col in range(CHARACTER_WIDTH):
                    position = row * width + origin + col
                    if position >= len(self.buffer):
                        continue
                    self.buffer[position] = 1 if bits & (1 << (8 - col)) else 0

    def scan(self) -> None:
        """Hand the next row to the row callback and advance."""
        config = self.config
        if config is None or config.row_output_callback is None or self.image is None:
            return
        start = self._last_row * config.width
        row_data = bytes(self.image[start:start + config.width])
        config.row_output_callback(self._last_row, row_data, config)
        self._last_row = (self._last_row + 1) % config.height

    def render(self) -> str:
        """Return the whole image as text, ``#`` for lit pixels."""
        if self.image is None or self.config is None:
            return ""
        width = self.config.width
        lines = []
        for row in range(self.config.height):
            pixels = self.image[row * width:(row + 1) * width]
            lines.append("".join("# " if pixel else "  " for pixel in pixels) + "\n")
        return "".join(lines)

    def show(self, file: Optional[TextIO] = None) -> None:
        """Write the rendered image to ``file`` (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.render())