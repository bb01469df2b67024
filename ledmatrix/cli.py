"""Demo: render a word on a 64x8 matrix and scan out every row."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .display import DisplayConfig, DisplayDriver

DEMO_TEXT = "Kminek42"


def format_row(row_n: int, row_data: bytes, config: DisplayConfig) -> str:
    """Format one scanned row, indented by its distance from the bottom."""
    indent = (config.height - row_n) & 0xFFFF
    pixels = "".join("# " if pixel else ". " for pixel in row_data[:config.width])
    return f"Row {row_n}: " + " " * indent + pixels


def _print_row(row_n: int, row_data: bytes, config: DisplayConfig) -> None:
    print(format_row(row_n, row_data, config))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Draw the demo text, print the frame, then scan all rows."""
    parser = argparse.ArgumentParser(prog="ledmatrix", description=__doc__)
    parser.parse_args(argv)

    config = DisplayConfig(width=64, height=8, row_output_callback=_print_row)
    driver = DisplayDriver(config)
    driver.render_text(DEMO_TEXT)
    driver.show()
    for _ in range(config.height):
        driver.scan()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())