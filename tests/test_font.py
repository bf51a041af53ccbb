import pytest

from fakepico.font import font_sprite_sheet, get_font_data
from fakepico.nibbles import get_pixel


def test_sheet_size():
    sheet = font_sprite_sheet(get_font_data())
    assert len(sheet) == 8192


def test_sheet_pixels_match_digits():
    rows = get_font_data().split("\n")
    sheet = font_sprite_sheet(get_font_data())
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            assert get_pixel(x, y, sheet) == int(ch, 16)


def test_first_row_packing():
    sheet = font_sprite_sheet(get_font_data())
    # Row 0 begins "7770": pixels 0 and 1 share byte 0, pixels 2 and 3 byte 1.
    assert sheet[0] == 0x77
    assert sheet[1] == 0x07


def test_short_input_leaves_rest_zero():
    sheet = font_sprite_sheet("7\n0 f")
    assert get_pixel(0, 0, sheet) == 7
    assert get_pixel(1, 0, sheet) == 0
    assert get_pixel(2, 0, sheet) == 15
    assert not any(sheet[2:])


def test_uppercase_hex_accepted():
    sheet = font_sprite_sheet("AB")
    assert get_pixel(0, 0, sheet) == 10
    assert get_pixel(1, 0, sheet) == 11


def test_invalid_digit_raises():
    with pytest.raises(ValueError):
        font_sprite_sheet("70g0")


def test_too_much_data_raises():
    with pytest.raises(ValueError):
        font_sprite_sheet("0" * (128 * 128 + 1))


def test_empty_input_gives_blank_sheet():
    sheet = font_sprite_sheet("")
    assert sheet == bytearray(8192)