"""Pixel-level drawing state: palettes, clipping, camera, pixels, lines, flags and map cells."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .memory import MAP_DATA, RAM_SIZE, SPRITE_SHEET, Color, PicoRam
from .nibbles import get_pixel, set_pixel

SCREEN_WIDTH = 128
SCREEN_HEIGHT = 128

PALETTE: Tuple[Color, ...] = (
    Color(2, 4, 8),
    Color(29, 43, 83),
    Color(126, 37, 83),
    Color(0, 135, 81),
    Color(171, 82, 54),
    Color(95, 87, 79),
    Color(194, 195, 199),
    Color(255, 241, 232),
    Color(255, 0, 77),
    Color(255, 163, 0),
    Color(255, 236, 39),
    Color(0, 228, 54),
    Color(41, 173, 255),
    Color(131, 118, 156),
    Color(255, 119, 168),
    Color(255, 204, 170),
)

BG_GRAY = Color(128, 128, 128)

_TRANSPARENT_BIT = 0x10


def _clamp(value: int, lo: int, hi: int) -> int:
    """Clamp the way the reference clamp does, even when lo > hi."""
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def _clamp_to_screen(value: int) -> int:
    return _clamp(value, 0, SCREEN_WIDTH)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _byte_at(buffer: Sequence[int], index: int) -> int:
    if 0 <= index < len(buffer):
        return buffer[index]
    return 0


class Canvas:
    """Drawing state and the basic pixel operations over a machine memory."""

    def __init__(self, memory: Optional[PicoRam] = None):
        self.memory = memory if memory is not None else PicoRam()
        self._ds = self.memory.draw_state
        self._draw_pal = self._ds.draw_palette_map
        self._screen_pal = self._ds.screen_palette_map
        self._screen = self.memory.screen_buffer
        self._flags = self.memory.sprite_flags
        self.clip()
        self.pal()
        self.color()

    # -- accessors -------------------------------------------------------

    @property
    def frame_buffer(self) -> memoryview:
        """The 128x128 4-bit screen buffer."""
        return self._screen

    @property
    def screen_palette_map(self) -> memoryview:
        return self._screen_pal

    @property
    def palette_colors(self) -> Tuple[Color, ...]:
        return PALETTE

    # -- palette queries -------------------------------------------------

    def is_color_transparent(self, color: int) -> bool:
        return bool((self._draw_pal[color & 15] >> 4) & 1)

    def get_draw_pal_mapped_color(self, color: int) -> int:
        return self._draw_pal[color & 15] & 15

    def get_screen_pal_mapped_color(self, color: int) -> int:
        return self._screen_pal[color & 15] & 15

    # -- private helpers -------------------------------------------------

    def _apply_camera(self, x: int, y: int) -> Tuple[int, int]:
        return x - self._ds.camera_x, y - self._ds.camera_y

    @staticmethod
    def _is_on_screen(x: int, y: int) -> bool:
        return 0 <= x <= 127 and 0 <= y <= 127

    def _is_within_clip(self, x: int, y: int) -> bool:
        ds = self._ds
        return ds.clip_xb <= x < ds.clip_xe and ds.clip_yb <= y < ds.clip_ye

    def _put_pixel(self, x: int, y: int, col: int) -> None:
        """Write a pixel through the draw palette, wrapping coordinates."""
        set_pixel(x & 127, y & 127, self._draw_pal[col & 15] & 15, self._screen)

    def _put_pixel_clipped(self, x: int, y: int, col: int) -> None:
        if self._is_within_clip(x, y):
            self._put_pixel(x, y, col)

    def _h_line(self, x1: int, x2: int, y: int, col: int) -> None:
        ds = self._ds
        if not ds.clip_yb <= y < ds.clip_ye:
            return
        lo, hi = ds.clip_xb, ds.clip_xe - 1
        max_x = _clamp(max(x1, x2), lo, hi)
        min_x = _clamp(min(x1, x2), lo, hi)
        for x in range(min_x, max_x + 1):
            self._put_pixel(x, y, col)

    def _v_line(self, y1: int, y2: int, x: int, col: int) -> None:
        ds = self._ds
        if not ds.clip_xb <= x < ds.clip_xe:
            return
        lo, hi = ds.clip_yb, ds.clip_ye - 1
        max_y = _clamp(max(y1, y2), lo, hi)
        min_y = _clamp(min(y1, y2), lo, hi)
        for y in range(min_y, max_y + 1):
            self._put_pixel(x, y, col)

    @staticmethod
    def _sort_rect(x1: int, y1: int, x2: int, y2: int) -> Tuple[int, int, int, int]:
        return min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2)

    def _copy_sprite_to_screen(
        self,
        sheet: Sequence[int],
        scr_x: int,
        scr_y: int,
        spr_x: int,
        spr_y: int,
        spr_w: int,
        spr_h: int,
        flip_x: bool,
        flip_y: bool,
    ) -> None:
        """Blit an unscaled region of a 4-bit sheet to the screen."""
        scr_w, scr_h = spr_w, spr_h
        scr_x, scr_y = self._apply_camera(scr_x, scr_y)
        ds = self._ds
        clip_xb, clip_yb, clip_xe, clip_ye = ds.clip_xb, ds.clip_yb, ds.clip_xe, ds.clip_ye

        if scr_x < clip_xb:
            nclip = clip_xb - scr_x
            scr_x = clip_xb
            scr_w -= nclip
            if not flip_x:
                spr_x += nclip
            else:
                spr_w -= nclip
        if scr_x + scr_w > clip_xe:
            scr_w -= (scr_x + scr_w) - clip_xe
        if scr_y < clip_yb:
            nclip = clip_yb - scr_y
            scr_y = clip_yb
            scr_h -= nclip
            if not flip_y:
                spr_y += nclip
            else:
                spr_h -= nclip
        if scr_y + scr_h > clip_ye:
            scr_h -= (scr_y + scr_h) - clip_ye

        dy = 1
        if flip_y:
            spr_y += spr_h - 1
            dy = -1

        for y in range(scr_h):
            row = ((spr_y + y * dy) & 0x7F) * 64
            for x in range(scr_w):
                if not flip_x:
                    pix = spr_x + x
                    both = _byte_at(sheet, row + _trunc_div(pix, 2))
                    c = both & 0x0F if pix % 2 == 0 else both >> 4
                else:
                    pix = spr_x + spr_w - (x + 1)
                    both = _byte_at(sheet, row + _trunc_div(pix, 2))
                    c = both >> 4 if x % 2 == 0 else both & 0x0F
                if not self.is_color_transparent(c):
                    self._put_pixel(scr_x + x, scr_y + y, c)

    def _copy_stretch_sprite_to_screen(
        self,
        sheet: Sequence[int],
        spr_x: int,
        spr_y: int,
        spr_w: int,
        spr_h: int,
        scr_x: int,
        scr_y: int,
        scr_w: int,
        scr_h: int,
        flip_x: bool,
        flip_y: bool,
    ) -> None:
        """Blit a region of a 4-bit sheet scaled to a screen rectangle."""
        if spr_h == scr_h and spr_w == scr_w:
            self._copy_sprite_to_screen(
                sheet, scr_x, scr_y, spr_x, spr_y, scr_w, scr_h, flip_x, flip_y
            )
            return

        scr_x, scr_y = self._apply_camera(scr_x, scr_y)

        spr_x <<= 16
        spr_y <<= 16
        spr_w <<= 16
        spr_h <<= 16

        dx = _trunc_div(spr_w, scr_w)
        dy = _trunc_div(spr_h, scr_h)

        ds = self._ds
        clip_xb, clip_yb, clip_xe, clip_ye = ds.clip_xb, ds.clip_yb, ds.clip_xe, ds.clip_ye

        if scr_x < clip_xb:
            nclip = clip_xb - scr_x
            scr_x = clip_xb
            scr_w -= nclip
            if not flip_x:
                spr_x += nclip * dx
            else:
                spr_w -= nclip * dx
        if scr_x + scr_w > clip_xe:
            scr_w -= (scr_x + scr_w) - clip_xe
        if scr_y < clip_yb:
            nclip = clip_yb - scr_y
            scr_y = clip_yb
            scr_h -= nclip
            if not flip_y:
                spr_y += nclip * dy
            else:
                spr_h -= nclip * dy
        if scr_y + scr_h > clip_ye:
            scr_h -= (scr_y + scr_h) - clip_ye

        if flip_y:
            spr_y += spr_h - dy
            dy = -dy

        for y in range(scr_h):
            row = (((spr_y + y * dy) >> 16) & 0x7F) * 64
            for x in range(scr_w):
                if not flip_x:
                    pix = spr_x + x * dx
                    both = _byte_at(sheet, row + ((_trunc_div(pix, 2) >> 16) & 0x7F))
                    c = both & 0x0F if (pix >> 16) % 2 == 0 else both >> 4
                else:
                    pix = spr_x + spr_w - (x + 1) * dx
                    both = _byte_at(sheet, row + ((_trunc_div(pix, 2) >> 16) & 0x7F))
                    c = both >> 4 if (pix >> 16) % 2 == 0 else both & 0x0F
                if not self.is_color_transparent(c):
                    self._put_pixel(scr_x + x, scr_y + y, c)

    # -- public drawing --------------------------------------------------

    def cls(self, color: int = 0) -> None:
        """Fill the screen with one colour and home the text cursor."""
        color &= 15
        self._screen[:] = bytes([color << 4 | color]) * len(self._screen)
        self._ds.text_x = 0
        self._ds.text_y = 0

    def pset(self, x: int, y: int, col: Optional[int] = None) -> None:
        if col is None:
            col = self._ds.color
        self.color(col)
        x, y = self._apply_camera(x, y)
        if self._is_within_clip(x, y):
            self._put_pixel(x, y, col)

    def pget(self, x: int, y: int) -> int:
        x, y = self._apply_camera(x, y)
        if self._is_on_screen(x, y):
            return get_pixel(x, y, self._screen)
        return 0

    def color(self, col: int = 6) -> None:
        self._ds.color = col

    def line(self, *args: int) -> None:
        """Draw a line or update the line state.

        line() invalidates the line state; line(col) sets the colour and
        invalidates; line(x, y[, col]) continues from the last end point;
        line(x0, y0, x1, y1[, col]) draws a full line.
        """
        ds = self._ds
        count = len(args)
        if count == 0:
            self._invalidate_line()
        elif count == 1:
            self.color(args[0])
            self._invalidate_line()
        elif count in (2, 3):
            if ds.line_invalid == 0:
                col = args[2] if count == 3 else ds.color
                self._line(ds.line_x, ds.line_y, args[0], args[1], col)
        elif count == 4:
            self._line(*args, ds.color)
        elif count == 5:
            self._line(*args)
        else:
            raise TypeError(f"line() takes at most 5 arguments ({count} given)")

    def _invalidate_line(self) -> None:
        ds = self._ds
        ds.line_x = 0
        ds.line_y = 0
        ds.line_invalid = 1

    def _line(self, x0: int, y0: int, x1: int, y1: int, col: int) -> None:
        ds = self._ds
        ds.line_x = x1
        ds.line_y = y1
        ds.line_invalid = 0

        x0, y0 = self._apply_camera(x0, y0)
        x1, y1 = self._apply_camera(x1, y1)
        self.color(col)

        if x0 == x1:
            self._v_line(y0, y1, x0, col)
        elif y0 == y1:
            self._h_line(x0, x1, y0, col)
        else:
            dx, sx = abs(x1 - x0), (1 if x0 < x1 else -1)
            dy, sy = -abs(y1 - y0), (1 if y0 < y1 else -1)
            err = dx + dy
            while True:
                self._put_pixel_clipped(x0, y0, col)
                if x0 == x1 and y0 == y1:
                    break
                e2 = 2 * err
                if e2 >= dy:
                    err += dy
                    x0 += sx
                if e2 <= dx:
                    err += dx
                    y0 += sy

    def camera(self, x: int = 0, y: int = 0) -> None:
        self._ds.camera_x = x
        self._ds.camera_y = y

    def clip(self, x: int = 0, y: int = 0, w: int = 128, h: int = 128) -> None:
        ds = self._ds
        ds.clip_xb = _clamp_to_screen(x)
        ds.clip_yb = _clamp_to_screen(y)
        ds.clip_xe = _clamp_to_screen(x + w)
        ds.clip_ye = _clamp_to_screen(y + h)

    def cursor(self, x: int = 0, y: int = 0, col: Optional[int] = None) -> None:
        if col is not None:
            self.color(col)
        self._ds.text_x = x
        self._ds.text_y = y

    def pal(self, c0: Optional[int] = None, c1: Optional[int] = None, p: int = 0) -> None:
        """Reset both palettes, or map c0 to c1 in the draw (p=0) or screen (p=1) palette."""
        if c0 is None:
            for c in range(16):
                self._draw_pal[c] = c
                self._screen_pal[c] = c
            self.palt()
            return
        if c1 is None:
            raise TypeError("pal() needs both c0 and c1")
        c0 &= 0xFF
        c1 &= 0xFF
        p &= 0xFF
        if c0 < 16 and c1 < 16:
            if p == 0:
                self._draw_pal[c0] = (self._draw_pal[c0] & _TRANSPARENT_BIT) | (c1 & 0xF)
            elif p == 1:
                self._screen_pal[c0] = c1

    def palt(self, c: Optional[int] = None, t: Optional[bool] = None) -> None:
        """Reset transparency (only colour 0), or set colour c's transparency."""
        if c is None:
            self._draw_pal[0] |= _TRANSPARENT_BIT
            for col in range(1, 16):
                self._draw_pal[col] &= ~_TRANSPARENT_BIT & 0xFF
            return
        if t is None:
            raise TypeError("palt() needs both c and t")
        c &= 15
        if t:
            self._draw_pal[c] |= _TRANSPARENT_BIT
        else:
            self._draw_pal[c] &= ~_TRANSPARENT_BIT & 0xFF

    # -- sprite flags, sprite sheet and map -------------------------------

    def fget(self, n: int, f: Optional[int] = None):
        """Return sprite n's flag byte, or whether flag bit f is set."""
        flags = self._flags[n & 0xFF]
        if f is None:
            return flags
        return bool((flags >> (f & 0xFF)) & 1)

    def fset(self, n: int, *args) -> None:
        """fset(n, value) sets the flag byte; fset(n, f, v) sets or clears bit f."""
        n &= 0xFF
        if len(args) == 1:
            self._flags[n] = args[0] & 0xFF
        elif len(args) == 2:
            f, v = args
            mask = (1 << (f & 0xFF)) & 0xFF
            if v:
                self._flags[n] = self._flags[n] | mask
            else:
                self._flags[n] = self._flags[n] & ~mask & 0xFF
        else:
            raise TypeError("fset() takes n and one or two further arguments")

    def sget(self, x: int, y: int) -> int:
        return get_pixel(x & 0xFF, y & 0xFF, self.memory.data)

    def sset(self, x: int, y: int, c: int) -> None:
        set_pixel(x & 0xFF, y & 0xFF, c & 0xFF, self.memory.data)

    @staticmethod
    def _map_offset(celx: int, cely: int) -> Optional[int]:
        if cely < 32:
            offset = MAP_DATA + cely * 128 + celx
        elif cely < 64:
            offset = SPRITE_SHEET + cely * 128 + celx
        else:
            return None
        return offset if 0 <= offset < RAM_SIZE else None

    def mget(self, celx: int, cely: int) -> int:
        """Read a map cell; rows 32-63 share memory with the lower sprite sheet."""
        offset = self._map_offset(celx, cely)
        return 0 if offset is None else self.memory.data[offset]

    def mset(self, celx: int, cely: int, snum: int) -> None:
        offset = self._map_offset(celx, cely)
        if offset is not None:
            self.memory.data[offset] = snum & 0xFF