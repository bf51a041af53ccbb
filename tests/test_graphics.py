import pytest

from fakepico.font import font_sprite_sheet, get_font_data
from fakepico.graphics import Graphics
from fakepico.nibbles import get_pixel


@pytest.fixture
def g():
    gfx = Graphics()
    gfx.cls(0)
    return gfx


def _set_sprite_row(gfx, sprite, colors, row=0):
    base_x = (sprite % 16) * 8
    base_y = (sprite // 16) * 8
    for i, c in enumerate(colors):
        gfx.sset(base_x + i, base_y + row, c)


def _lit(gfx):
    return sum(1 for y in range(128) for x in range(128) if gfx.pget(x, y))


def test_rect_outline(g):
    g.rect(10, 10, 20, 15, 3)
    assert g.pget(10, 10) == 3
    assert g.pget(20, 15) == 3
    assert g.pget(15, 10) == 3
    assert g.pget(10, 12) == 3
    assert g.pget(15, 12) == 0


def test_rectfill_fills_inclusive_region(g):
    g.rectfill(5, 6, 9, 8, 11)
    inside = {g.pget(x, y) for x in range(5, 10) for y in range(6, 9)}
    assert inside == {11}
    assert g.pget(4, 6) == 0
    assert g.pget(10, 8) == 0
    assert g.pget(5, 9) == 0


def test_rectfill_corner_order_does_not_matter():
    a, b = Graphics(), Graphics()
    a.rectfill(3, 4, 30, 40, 2)
    b.rectfill(30, 40, 3, 4, 2)
    assert bytes(a.frame_buffer) == bytes(b.frame_buffer)


def test_rectfill_respects_clip(g):
    g.clip(0, 0, 10, 10)
    g.rectfill(0, 0, 127, 127, 5)
    assert g.pget(9, 9) == 5
    assert g.pget(10, 10) == 0
    assert g.pget(10, 0) == 0


def test_camera_offsets_drawing(g):
    g.camera(5, 5)
    g.rectfill(5, 5, 5, 5, 4)
    assert get_pixel(0, 0, g.frame_buffer) == 4
    assert g.pget(5, 5) == 4


def test_circ_extremes_and_hollow_centre(g):
    g.circ(64, 64, 10, 8)
    assert g.pget(74, 64) == 8
    assert g.pget(54, 64) == 8
    assert g.pget(64, 74) == 8
    assert g.pget(64, 54) == 8
    assert g.pget(64, 64) == 0


def test_circ_is_symmetric(g):
    g.circ(64, 64, 13, 9)
    for dy in range(-14, 15):
        for dx in range(-14, 15):
            assert g.pget(64 + dx, 64 + dy) == g.pget(64 - dx, 64 + dy)
            assert g.pget(64 + dx, 64 + dy) == g.pget(64 + dx, 64 - dy)


def test_circfill_radius_zero_is_single_pixel(g):
    g.circfill(40, 50, 0, 7)
    assert g.pget(40, 50) == 7
    assert _lit(g) == 1


def test_circfill_fills_centre_and_edges(g):
    g.circfill(64, 64, 6, 12)
    assert g.pget(64, 64) == 12
    assert g.pget(70, 64) == 12
    assert g.pget(58, 64) == 12
    assert g.pget(64, 70) == 12
    assert g.pget(71, 64) == 0


def test_circ_default_color_comes_from_state(g):
    g.color(10)
    g.circ(64, 64)
    assert g.pget(68, 64) == 10


def test_oval_touches_bounding_box(g):
    g.oval(10, 10, 30, 20, 9)
    assert g.pget(20, 20) == 9
    assert g.pget(20, 10) == 9
    assert g.pget(30, 15) == 9
    assert g.pget(10, 15) == 9
    assert g.pget(20, 15) == 0


def test_ovalfill_fills_centre_not_corner(g):
    g.ovalfill(10, 10, 30, 20, 9)
    assert g.pget(20, 15) == 9
    assert g.pget(10, 15) == 9
    assert g.pget(10, 10) == 0


def test_print_returns_end_position(g):
    assert g.print("ab", 0, 0, 7) == 8


def test_print_wide_glyph_matches_two_narrow(g):
    wide = g.print("\u2588", 0, 0, 7)
    narrow = g.print("ab", 0, 20, 7)
    assert wide == narrow


def test_print_draws_font_glyph(g):
    font = font_sprite_sheet(get_font_data())
    g.print("a", 0, 0, 8)
    index = ord("a") - 0x10
    gx, gy = (index % 16) * 8, (index // 16) * 8
    drawn = 0
    for y in range(5):
        for x in range(4):
            expected = 8 if get_pixel(gx + x, gy + y, font) else 0
            assert g.pget(x, y) == expected
            drawn += expected != 0
    assert drawn > 0


def test_print_bytes_matches_string():
    a, b = Graphics(), Graphics()
    a.print("hi", 3, 3, 7)
    b.print(b"hi", 3, 3, 7)
    assert bytes(a.frame_buffer) == bytes(b.frame_buffer)


def test_print_newline_returns_to_start_column(g):
    g.print("a\na", 10, 0, 7)
    first = [g.pget(10 + x, y) for y in range(5) for x in range(4)]
    second = [g.pget(10 + x, 6 + y) for y in range(5) for x in range(4)]
    assert first == second
    assert any(first)


def test_print_restores_palette(g):
    g.palt(0, False)
    before = bytes(g.memory.draw_state.draw_palette_map)
    g.print("x", 0, 0, 12)
    assert bytes(g.memory.draw_state.draw_palette_map) == before
    assert g.is_color_transparent(0) is False


def test_print_at_cursor_moves_down(g):
    g.cursor(3, 12)
    g.print("a")
    assert g.memory.draw_state.text_x == 3
    assert g.memory.draw_state.text_y == 12 + 6


def test_spr_draws_sprite_pixels(g):
    colors = [1, 2, 3, 4, 5, 6, 7, 8]
    _set_sprite_row(g, 1, colors)
    g.spr(1, 20, 30)
    assert [g.pget(20 + i, 30) for i in range(8)] == colors


def test_spr_flip_x_mirrors(g):
    colors = [1, 2, 3, 4, 5, 6, 7, 8]
    _set_sprite_row(g, 1, colors)
    g.spr(1, 20, 30, 1, 1, True, False)
    assert [g.pget(20 + i, 30) for i in range(8)] == colors[::-1]


def test_spr_flip_y_mirrors_rows(g):
    _set_sprite_row(g, 1, [3] * 8, row=0)
    g.spr(1, 20, 30, 1, 1, False, True)
    assert g.pget(20, 37) == 3
    assert g.pget(20, 30) == 0


def test_spr_skips_transparent_colour(g):
    g.cls(5)
    _set_sprite_row(g, 1, [0, 2])
    g.spr(1, 20, 30)
    assert g.pget(20, 30) == 5
    assert g.pget(21, 30) == 2


def test_spr_width_two_covers_neighbour(g):
    _set_sprite_row(g, 1, [4] * 8)
    _set_sprite_row(g, 2, [6] * 8)
    g.spr(1, 0, 0, 2, 1)
    assert g.pget(7, 0) == 4
    assert g.pget(8, 0) == 6


def test_sspr_unscaled_matches_spr():
    a, b = Graphics(), Graphics()
    for gfx in (a, b):
        _set_sprite_row(gfx, 1, [1, 2, 3, 4, 5, 6, 7, 8])
    a.spr(1, 10, 10)
    b.sspr(8, 0, 8, 8, 10, 10, 8, 8)
    assert bytes(a.frame_buffer) == bytes(b.frame_buffer)


def test_sspr_doubles_pixels(g):
    _set_sprite_row(g, 1, [1, 2, 3, 4, 5, 6, 7, 8])
    g.sspr(8, 0, 8, 8, 0, 0, 16, 16)
    for i in range(8):
        expected = g.sget(8 + i, 0)
        assert g.pget(2 * i, 0) == expected
        assert g.pget(2 * i + 1, 1) == expected


def test_map_draws_cells(g):
    _set_sprite_row(g, 1, [9] * 8)
    g.mset(0, 0, 1)
    g.map(0, 0, 16, 16, 1, 1)
    assert g.pget(16, 16) == 9
    assert g.pget(23, 16) == 9


def test_map_layer_filters_by_flags(g):
    _set_sprite_row(g, 1, [9] * 8)
    g.mset(0, 0, 1)
    g.fset(1, 0, True)
    g.map(0, 0, 16, 16, 1, 1, 2)
    assert g.pget(16, 16) == 0
    g.map(0, 0, 16, 16, 1, 1, 1)
    assert g.pget(16, 16) == 9


def test_tline_samples_map_sprite(g):
    _set_sprite_row(g, 1, [1, 2, 3, 4, 5, 6, 7, 8])
    g.mset(0, 0, 1)
    g.tline(0, 0, 7, 0, 0, 0)
    assert [g.pget(x, 0) for x in range(8)] == [g.sget(8 + x, 0) for x in range(8)]


def test_tline_start_offset_and_empty_cell(g):
    _set_sprite_row(g, 1, [1, 2, 3, 4, 5, 6, 7, 8])
    g.mset(0, 0, 1)
    g.tline(0, 0, 7, 0, 0.5, 0)
    assert [g.pget(x, 0) for x in range(4)] == [g.sget(12 + x, 0) for x in range(4)]
    assert [g.pget(x, 0) for x in range(4, 8)] == [0, 0, 0, 0]


def test_tline_empty_map_draws_nothing(g):
    _set_sprite_row(g, 0, [5] * 8)
    g.tline(0, 0, 20, 10, 0, 0)
    assert _lit(g) == 0