import pytest

from fakepico.nibbles import combined_index, get_pixel, set_pixel


@pytest.mark.parametrize(
    "x, y, expected",
    [(0, 0, 0), (1, 0, 0), (127, 127, 8191), (126, 127, 8191), (37, 99, 6354)],
)
def test_combined_index(x, y, expected):
    assert combined_index(x, y) == expected


def test_set_two_pixels_packs_byte():
    buffer = bytearray(8192)
    set_pixel(0, 0, 3, buffer)
    set_pixel(1, 0, 9, buffer)
    assert buffer[0] == 147


def test_get_pixel_reads_nibbles():
    buffer = bytearray(8192)
    buffer[8191] = 210
    assert get_pixel(126, 127, buffer) == 2
    assert get_pixel(127, 127, buffer) == 13


def test_set_pixel_keeps_neighbour():
    buffer = bytearray(8192)
    buffer[0] = 0xFF
    set_pixel(0, 0, 0, buffer)
    assert buffer[0] == 0xF0
    set_pixel(1, 0, 0, buffer)
    assert buffer[0] == 0x00


def test_round_trip_all_colours():
    buffer = bytearray(8192)
    for c in range(16):
        set_pixel(c, 5, c, buffer)
    assert [get_pixel(c, 5, buffer) for c in range(16)] == list(range(16))