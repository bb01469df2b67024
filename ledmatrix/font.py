"""A 5x7 bitmap font for the LED matrix driver.

Each glyph is seven rows of one byte.  The glyph occupies the five most
significant bits of each row, with bit 7 as the leftmost pixel.
"""

CHARACTER_WIDTH = 6
CHARACTER_HEIGHT = 7

Glyph = tuple[int, int, int, int, int, int, int]

FONT: dict[str, Glyph] = {
    "A": (0b01110000, 0b10001000, 0b10001000, 0b11111000, 0b10001000, 0b10001000, 0b10001000),
    "B": (0b11110000, 0b10001000, 0b10001000, 0b11110000, 0b10001000, 0b10001000, 0b11110000),
    "C": (0b01110000, 0b10001000, 0b10000000, 0b10000000, 0b10000000, 0b10001000, 0b01110000),
    "D": (0b11110000, 0b10001000, 0b10001000, 0b10001000, 0b10001000, 0b10001000, 0b11110000),
    "E": (0b11111000, 0b10000000, 0b10000000, 0b11110000, 0b10000000, 0b10000000, 0b11111000),
    "F": (0b11111000, 0b10000000, 0b10000000, 0b11110000, 0b10000000, 0b10000000, 0b10000000),
    "G": (0b01111000, 0b10000000, 0b10000000, 0b10111000, 0b10001000, 0b10001000, 0b01111000),
    "H": (0b10001000, 0b10001000, 0b10001000, 0b11111000, 0b10001000, 0b10001000, 0b10001000),
    "I": (0b01110000, 0b00100000, 0b00100000, 0b00100000, 0b00100000, 0b00100000, 0b01110000),
    "J": (0b00111000, 0b00010000, 0b00010000, 0b00010000, 0b00010000, 0b10010000, 0b01100000),
    "K": (0b10001000, 0b10010000, 0b10100000, 0b11000000, 0b10100000, 0b10010000, 0b10001000),
    "L": (0b10000000, 0b10000000, 0b10000000, 0b10000000, 0b10000000, 0b10000000, 0b11111000),
    "M": (0b10001000, 0b11011000, 0b10101000, 0b10101000, 0b10001000, 0b10001000, 0b10001000),
    "N": (0b10001000, 0b10001000, 0b11001000, 0b10101000, 0b10011000, 0b10001000, 0b10001000),
    "O": (0b01110000, 0b10001000, 0b10001000, 0b10001000, 0b10001000, 0b10001000, 0b01110000),
    "P": (0b11110000, 0b10001000, 0b10001000, 0b11110000, 0b10000000, 0b10000000, 0b10000000),
    "Q": (0b01110000, 0b10001000, 0b10001000, 0b10001000, 0b10101000, 0b10010000, 0b01101000),
    "R": (0b11110000, 0b10001000, 0b10001000, 0b11110000, 0b10100000, 0b10010000, 0b10001000),
    "S": (0b01110000, 0b10001000, 0b10000000, 0b01110000, 0b00001000, 0b10001000, 0b01110000),
    "T": (0b11111000, 0b00100000, 0b00100000, 0b00100000, 0b00100000, 0b00100000, 0b00100000),
    "U": (0b10001000, 0b10001000, 0b10001000, 0b10001000, 0b10001000, 0b10001000, 0b01110000),
    "V": (0b10001000, 0b10001000, 0b10001000, 0b10001000, 0b10001000, 0b01010000, 0b00100000),
    "W": (0b10001000, 0b10001000, 0b10001000, 0b10101000, 0b10101000, 0b10101000, 0b01010000),
    "X": (0b10001000, 0b10001000, 0b01010000, 0b00100000, 0b01010000, 0b10001000, 0b10001000),
    "Y": (0b10001000, 0b10001000, 0b10001000, 0b01010000, 0b00100000, 0b00100000, 0b00100000),
    "Z": (0b11111000, 0b00001000, 0b00010000, 0b00100000, 0b01000000, 0b10000000, 0b11111000),
    "a": (0b00000000, 0b00000000, 0b01110000, 0b00001000, 0b01111000, 0b10001000, 0b01110000),
    "b": (0b10000000, 0b10000000, 0b10110000, 0b11001000, 0b10001000, 0b10001000, 0b11110000),
    "c": (0b00000000, 0b00000000, 0b01111000, 0b10000000, 0b10000000, 0b10000000, 0b01111000),
    "d": (0b00001000, 0b00001000, 0b01101000, 0b10011000, 0b10001000, 0b10001000, 0b01111000),
    "e": (0b00000000, 0b00000000, 0b01110000, 0b10001000, 0b11111000, 0b10000000, 0b01110000),
    "f": (0b00011000, 0b00100000, 0b00100000, 0b01110000, 0b00100000, 0b00100000, 0b00100000),
    "g": (0b00000000, 0b00000000, 0b01110000, 0b10001000, 0b01111000, 0b00001000, 0b01110000),
    "h": (0b10000000, 0b10000000, 0b10110000, 0b11001000, 0b10001000, 0b10001000, 0b10001000),
    "i": (0b00100000, 0b00000000, 0b01100000, 0b00100000, 0b00100000, 0b00100000, 0b01110000),
    "j": (0b00010000, 0b00000000, 0b00110000, 0b00010000, 0b00010000, 0b00010000, 0b01100000),
    "k": (0b01000000, 0b01000000, 0b01001000, 0b01010000, 0b01100000, 0b01010000, 0b01001000),
    "l": (0b01100000, 0b00100000, 0b00100000, 0b00100000, 0b00100000, 0b00100000, 0b01110000),
    "m": (0b00000000, 0b00000000, 0b11010000, 0b10101000, 0b10101000, 0b10101000, 0b10101000),
    "n": (0b00000000, 0b00000000, 0b10110000, 0b11001000, 0b10001000, 0b10001000, 0b10001000),
    "o": (0b00000000, 0b00000000, 0b01110000, 0b10001000, 0b10001000, 0b10001000, 0b01110000),
    "p": (0b00000000, 0b00000000, 0b11110000, 0b10001000, 0b11110000, 0b10000000, 0b10000000),
    "q": (0b00000000, 0b00000000, 0b01111000, 0b10001000, 0b01111000, 0b00001000, 0b00001000),
    "r": (0b00000000, 0b00000000, 0b10110000, 0b11001000, 0b10000000, 0b10000000, 0b10000000),
    "s": (0b00000000, 0b00000000, 0b01111000, 0b10000000, 0b01110000, 0b00001000, 0b11110000),
    "t": (0b01000000, 0b11100000, 0b01000000, 0b01000000, 0b01000000, 0b01001000, 0b00110000),
    "u": (0b00000000, 0b00000000, 0b10001000, 0b10001000, 0b10001000, 0b10011000, 0b01101000),
    "v": (0b00000000, 0b00000000, 0b10001000, 0b10001000, 0b01010000, 0b01010000, 0b00100000),
    "w": (0b00000000, 0b00000000, 0b10001000, 0b10001000, 0b10101000, 0b10101000, 0b01010000),
    "x": (0b00000000, 0b00000000, 0b11001000, 0b00110000, 0b00100000, 0b01100000, 0b10011000),
    "y": (0b00000000, 0b00000000, 0b10001000, 0b01001000, 0b00110000, 0b00100000, 0b11000000),
    "z": (0b00000000, 0b00000000, 0b11111000, 0b00010000, 0b00100000, 0b01000000, 0b11111000),
    "0": (0b01110000, 0b10001000, 0b10011000, 0b10101000, 0b11001000, 0b10001000, 0b01110000),
    "1": (0b00010000, 0b00110000, 0b01010000, 0b00010000, 0b00010000, 0b00010000, 0b00010000),
    "2": (0b01110000, 0b10001000, 0b00001000, 0b00010000, 0b00100000, 0b01000000, 0b11111000),
    "3": (0b01110000, 0b10001000, 0b00001000, 0b00110000, 0b00001000, 0b10001000, 0b01110000),
    "4": (0b00010000, 0b00110000, 0b01010000, 0b10010000, 0b11111000, 0b00010000, 0b00010000),
    "5": (0b11111000, 0b10000000, 0b11110000, 0b00001000, 0b00001000, 0b10001000, 0b01110000),
    "6": (0b01110000, 0b10001000, 0b10000000, 0b11110000, 0b10001000, 0b10001000, 0b01110000),
    "7": (0b11111000, 0b10001000, 0b00010000, 0b00100000, 0b00100000, 0b00100000, 0b00100000),
    "8": (0b01110000, 0b10001000, 0b10001000, 0b01110000, 0b10001000, 0b10001000, 0b01110000),
    "9": (0b01110000, 0b10001000, 0b10001000, 0b01111000, 0b00001000, 0b10001000, 0b01110000),
    ".": (0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00100000, 0b00100000),
    ",": (0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00100000, 0b00100000, 0b01000000),
    "!": (0b00100000, 0b00100000, 0b00100000, 0b00100000, 0b00100000, 0b00000000, 0b00100000),
    "?": (0b01110000, 0b10001000, 0b00001000, 0b00010000, 0b00100000, 0b00000000, 0b00100000),
    " ": (0, 0, 0, 0, 0, 0, 0),
}

# Characters without a glyph fall back to the first glyph of the font.
_FALLBACK = FONT["A"]


def get_character(character: str) -> Glyph:
    """Return the seven row bytes of the glyph for ``character``."""
    return FONT.get(character, _FALLBACK)