"""The built-in 4x5 / 8x5 glyph sheet used for text drawing."""

from __future__ import annotations

from .nibbles import set_pixel

SHEET_WIDTH = 128
SHEET_HEIGHT = 128

_HEX_DIGITS = "0123456789abcdefABCDEF"

# One hex digit per pixel, one line per pixel row. Glyphs 0x10-0x7f sit in the
# top 56 rows as 4-wide cells on an 8-pixel grid; glyphs 0x80-0xff follow.
_FONT = """\
77700000000000000000000000000000000000000000000000700000700000007770000000000000707000000000000000000000000000007070000007000000
77700000777000007770000070700000707000007070000007700000770000007000000000700000777000000000000000000000000000007070000070700000
77700000777000007070000007000000000000007070000077700000777000007000000000700000070000000700000000000000000000000000000007000000
77700000777000007770000070700000707000007070000007700000770000007000000000700000777000000000000070000000770000000000000000000000
77700000000000000000000000000000000000000000000000700000700000000000000077700000070000000000000007000000770000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000070000007070000070700000777000007070000077000000070000000700000007000000707000000000000000000000000000000000000000700000
00000000070000007070000077700000770000000070000077000000700000007000000000700000070000000700000000000000000000000000000007000000
00000000070000000000000070700000077000000700000077000000000000007000000000700000777000007770000000000000777000000000000007000000
00000000000000000000000077700000777000007000000070700000000000007000000000700000070000000700000007000000000000000000000007000000
00000000070000000000000070700000070000007070000077700000000000000700000007000000707000000000000070000000000000000700000070000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
77700000770000007770000077700000707000007770000070000000777000007770000077700000000000000000000000700000000000007000000077700000
70700000070000000070000000700000707000007000000070000000007000007070000070700000070000000700000007000000777000000700000000700000
70700000070000007770000007700000777000007770000077700000007000007770000077700000000000000000000070000000000000000070000007700000
70700000070000007000000000700000007000000070000070700000007000007070000000700000070000000700000007000000777000000700000000000000
77700000777000007770000077700000007000007770000077700000007000007770000000700000000000007000000000700000000000007000000007000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
07000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
70700000777000007700000077700000770000007770000077700000777000007070000077700000777000007070000070000000777000007700000007700000
70700000707000007700000070000000707000007700000077000000700000007070000007000000070000007700000070000000777000007070000070700000
70000000777000007070000070000000707000007000000070000000707000007770000007000000070000007070000070000000707000007070000070700000
07700000707000007770000077700000770000007770000070000000777000007070000077700000770000007070000077700000707000007070000077000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000007700000070000000077000000700000000000000
77700000070000007770000007700000777000007070000070700000707000007070000070700000777000007000000007000000007000007070000000000000
70700000707000007070000070000000070000007070000070700000707000000700000077700000007000007000000007000000007000000000000000000000
77700000770000007700000000700000070000007070000077700000777000007070000000700000700000007000000007000000007000000000000000000000
70000000077000007070000077000000070000000770000007000000777000007070000077700000777000007700000000700000077000000000000077700000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
07000000777000007770000007700000770000007770000077700000077000007070000077700000777000007070000070000000777000007700000007700000
00700000707000007070000070000000707000007000000070000000700000007070000007000000070000007070000070000000777000007070000070700000
00000000777000007700000070000000707000007700000077000000700000007770000007000000070000007700000070000000707000007070000070700000
00000000707000007070000070000000707000007000000070000000707000007070000007000000070000007070000070000000707000007070000070700000
00000000707000007770000007700000777000007770000070000000777000007070000077700000770000007070000077700000707000007070000077000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
77700000070000007770000007700000777000007070000070700000707000007070000070700000777000000770000007000000770000000000000000000000
70700000707000007070000070000000070000007070000070700000707000007070000070700000007000000700000007000000070000000070000007000000
77700000707000007700000077700000070000007070000070700000707000000700000077700000070000007700000007000000077000007770000070700000
70000000770000007070000000700000070000007070000077700000777000007070000000700000700000000700000007000000070000007000000070700000
70000000077000007070000077000000070000000770000007000000777000007070000077700000777000000770000007000000770000000000000077700000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
77777770707070707000007007777700700070000070000000777000077077000077700000777000007770000777770077777770000777000777770000070000
77777770070707007777777077000770007000700077770007770700077777000770770000777000077777007770077070777070000700007700077000777000
77777770707070707077707077000770700070000077700007777700077777007770777007777700777777707700077077777770000700007707077007777700
77777770070707007077707077707770007000700777700007777700007770000770770000777000070707007770077070000070077700007700077000777000
77777770707070700777770007777700700070000000700000777000000700000077700000707000070777000777770077777770077700000777770000070000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000077777000007000007777700077777000000000000000000077777007777777070707070077700007000000000777000000700000777007007000700
00000000770077700077700000777000777077707070000070007000770707700000000070707070007000007000700000000000077770000070000077777070
70707070770007707777777000070000770007700700707007070700777077707777777070707070077770007000070007777700000700000777770007007000
00000000770077700777770000777000770007700000070000700070770707700000000070707070707707007070070000000700007007007070007007007000
00000000077777000700070007777700077777000000000000000000077777007777777070707070077007000700000000077000070770000770070007070000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00777000000077000700070007770000077777000700000000070000070070000077770000700000007000000077770007777700000700000700077007077770
07777700007700000707777000007000000700000700000007777700077777000000700007770000777777007700007000007000000777007777000007000070
00777000070000000700070000000000077700000700000000070000070070000777777000707700007770000000007000070000007000000700070007000000
07000000007700000700070007000000700000000700070000770000070000000007000007000000000077000000070000070000070000007007770007070000
00777000000077000700700000777700077770000077700000070000007770000000777007007770077770000007700000007000007777000007707007007770
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
70070000070077000077770007007000770007000077000000000000707777000077700007700000007007000707000007777000007007000707770000070000
07777700770700700707007007077700070007700000000000770000700070000777770000700700077700700077770000700000077777700770707000077700
77070070077000707007007007007000070007000007000007007000707777000007000007777770007000000707707007777000007007700700707000070000
70770770770007707007007007077700070007000707070070000700700770000777700007700700077000700770007000700070000700000000770007777000
07700770070007700770070007077070007770007077007000000070707707700077070000007000007777000000770000077700000700000007000007700700
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00070000070000000077770000700000007777000700770007770000070000000000000000000000000000000000000007777700000077000007000000777000
07000000070007000000700007707700000070007707007000700770077700000000000007070000007000000700000000000700077700000777770000070000
07777700070007000077777000770700007777700770007000777000070070000777000077777000777700000777000000707000000700000000070000070000
00000700007007000700777007700700070000707700070000070700700070700000700007077000707070000700000000700000000700000000700000070000
00777000000070000000770000700770000077000700700000077770700077000007000000700000707700007077700007000000000700000077000007777700
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00007000007000000070000000700000007000000777770000700700000700000777770000700000070007000077777000777000070700700077700000700000
07777770077777000777700000777700007777700000070007777770070070000000070007777770007007000070007000070000070700700000000000700000
00077000007007000007000007000700070070000000070000700700007000000000700000700700000007000700707007777700000007000777770000777000
07707000070007000777770000007000000070000000070000000700000007700007700000700000000070000000077000070000000070000007000000700700
00077000070077000007000000070000000700000777770000007000007770000770070000077700000700000000700000700000007700000070000000700000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00070000000000000777770000070000000007000000700007000000077777000077000000070000077777000077770000070000000000700777770000707770
07777700007770000000070007777700000007000070070007007700000007000700700007777700000007000000000000700000000707000007000007770070
00070000000000000007070000000700000070000070070007770000000007007000070000070000007070000777770000700700000070000777777000700700
00070000000000000000770077777070000700000700007007000000000070000000007007070700000700000000000007000770000707700007000000070000
00700000077777000077000000070000077000000700007000777700007700000000000070770070000070000777700007777070077000000000777000070000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00077770077770000077700000700700007070000700000007777770077777000777770070000000000000000000000000000000000000000007000000070000
00000070000070000000000000700700007070000700000007000070070007000000070007000000707070000700000000000000077700000070000000007000
00000700077777000777770000700700007070000700000007000070000007000777770000007000000070007777700007770000077770007700077077000770
00000700000070000000070000000700007070700700770007000070000070000000070000070000000700000700700000070000000700000000700000700000
00777770077770000007700000077000070077000777000007777770000700000007700077700000077000000070000007777000077700000007000000070000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000
00000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000"""


def get_font_data() -> str:
    """Return the glyph sheet as lines of hex digits, one digit per pixel."""
    return _FONT


def font_sprite_sheet(fontdata: str) -> bytearray:
    """Pack a hex-digit pixel string into a 128x128 4-bit sprite sheet.

    Whitespace is ignored; pixels fill rows left to right, top to bottom.
    Pixels not given stay 0.
    """
    sheet = bytearray(SHEET_WIDTH * SHEET_HEIGHT // 2)
    digits = (ch for ch in fontdata if not ch.isspace())
    limit = SHEET_WIDTH * SHEET_HEIGHT
    for index, ch in enumerate(digits):
        if ch not in _HEX_DIGITS:
            raise ValueError(f"invalid pixel digit {ch!r} at pixel {index}")
        if index >= limit:
            raise ValueError(f"font data holds more than {limit} pixels")
        y, x = divmod(index, SHEET_WIDTH)
        set_pixel(x, y, int(ch, 16), sheet)
    return sheet