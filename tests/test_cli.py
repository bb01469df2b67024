from ledmatrix.cli import format_row, main
from ledmatrix.display import DisplayConfig


def test_format_row_pins_layout():
    assert format_row(0, bytes([1, 0]), DisplayConfig(2, 3)) == "Row 0:    # . "


def test_format_row_indent_shrinks_with_row():
    config = DisplayConfig(3, 8)
    lines = [format_row(n, bytes(3), config) for n in range(8)]
    prefixes = [len(line) - len(f"Row {n}: ") - 6 for n, line in enumerate(lines)]
    assert prefixes == [8 - n for n in range(8)]


def test_main_prints_frame_then_rows(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 16
    frame, rows = lines[:8], lines[8:]
    assert all(len(line) == 128 for line in frame)
    assert [line.split(":")[0] for line in rows] == [f"Row {n}" for n in range(8)]