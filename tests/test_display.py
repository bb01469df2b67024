import io

import pytest

from ledmatrix.display import DisplayConfig, DisplayDriver
from ledmatrix.font import CHARACTER_HEIGHT, CHARACTER_WIDTH, get_character


def _recording_driver(width, height):
    calls = []
    config = DisplayConfig(width, height, lambda n, data, cfg: calls.append((n, data, cfg)))
    return DisplayDriver(config), calls


def test_new_driver_buffer_is_blank():
    driver = DisplayDriver(DisplayConfig(4, 3))
    assert driver.buffer == bytearray(12)
    assert driver.render() == ("  " * 4 + "\n") * 3


def test_render_text_first_column_always_dark():
    driver = DisplayDriver(DisplayConfig(CHARACTER_WIDTH, CHARACTER_HEIGHT))
    driver.render_text("M")
    assert all(driver.buffer[row * CHARACTER_WIDTH] == 0 for row in range(CHARACTER_HEIGHT))


@pytest.mark.parametrize("character", ["A", "g", "0", "?", "W"])
def test_render_text_lights_one_pixel_per_glyph_bit(character):
    driver = DisplayDriver(DisplayConfig(CHARACTER_WIDTH, CHARACTER_HEIGHT))
    driver.render_text(character)
    expected = sum(bin(row).count("1") for row in get_character(character))
    assert sum(driver.buffer) == expected


def test_render_text_stops_at_right_edge():
    first = DisplayDriver(DisplayConfig(2 * CHARACTER_WIDTH, 8))
    second = DisplayDriver(DisplayConfig(2 * CHARACTER_WIDTH, 8))
    first.render_text("AB")
    second.render_text("ABCDEF")
    assert first.buffer == second.buffer


def test_render_text_stops_at_nul():
    first = DisplayDriver(DisplayConfig(24, 8))
    second = DisplayDriver(DisplayConfig(24, 8))
    first.render_text("Hi")
    second.render_text("Hi\0there")
    assert first.buffer == second.buffer


def test_space_leaves_buffer_blank():
    driver = DisplayDriver(DisplayConfig(18, 8))
    driver.render_text("   ")
    assert driver.buffer == bytearray(18 * 8)
    assert driver.render() == ("  " * 18 + "\n") * 8


def test_scan_cycles_through_rows():
    driver, calls = _recording_driver(3, 4)
    for _ in range(6):
        driver.scan()
    assert [n for n, _, _ in calls] == [0, 1, 2, 3, 0, 1]
    assert all(cfg is driver.config for _, _, cfg in calls)


def test_scan_delivers_row_slices_of_set_image():
    driver, calls = _recording_driver(2, 2)
    driver.set_image(bytes([1, 0, 0, 1]))
    driver.scan()
    driver.scan()
    assert [data for _, data, _ in calls] == [bytes([1, 0]), bytes([0, 1])]


def test_scan_without_callback_does_nothing():
    driver = DisplayDriver(DisplayConfig(2, 2))
    driver.scan()
    driver.set_image(bytes([1, 1, 1, 1]))
    driver.scan()
    assert driver._last_row == 0


def test_scan_without_image_does_not_call_back():
    driver, calls = _recording_driver(2, 2)
    driver.set_image(None)
    driver.scan()
    assert calls == []


def test_render_marks_lit_pixels():
    driver = DisplayDriver(DisplayConfig(2, 2))
    driver.set_image(bytes([1, 0, 0, 5]))
    assert driver.render() == "#     \n  # \n".replace("#     \n", "#   \n")


def test_show_writes_render_output():
    driver = DisplayDriver(DisplayConfig(12, 8))
    driver.render_text("Ok")
    out = io.StringIO()
    driver.show(out)
    assert out.getvalue() == driver.render()
    assert out.getvalue().count("\n") == 8


def test_driver_without_config_renders_nothing():
    driver = DisplayDriver(None)
    driver.render_text("abc")
    assert driver.render() == ""
    assert driver.buffer == bytearray()