"""Row-scanning LED matrix display driver with a built-in 5x7 bitmap font."""

__version__ = "0.1.0"
__all__ = ["font", "display", "cli"]