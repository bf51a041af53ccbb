"""Shape, text, sprite, map and textured-line drawing on top of the canvas."""

from __future__ import annotations

from typing import Optional, Union

from .canvas import Canvas
from .emoji import convert_emojis
from .font import font_sprite_sheet, get_font_data
from .memory import PicoRam
from .nibbles import get_pixel

_FIX_ONE = 1 << 16


def _wrap32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _wrap16(value: int) -> int:
    """Wrap an integer to a signed 16-bit value."""
    value &= 0xFFFF
    return value - (1 << 16) if value & 0x8000 else value


def _to_fix(value: Union[int, float]) -> int:
    """Convert a number to 16.16 fixed-point bits."""
    return _wrap32(round(value * _FIX_ONE))


class Graphics(Canvas):
    """The full drawing API: shapes, text, sprites, the map and textured lines."""

    def __init__(self, fontdata: Optional[str] = None, memory: Optional[PicoRam] = None):
        super().__init__(memory)
        self._font = font_sprite_sheet(get_font_data() if fontdata is None else fontdata)

    @property
    def font_sheet(self) -> bytearray:
        """The 4-bit glyph sheet used by :meth:`print`."""
        return self._font

    # -- textured line ---------------------------------------------------

    def tline(
        self,
        x0: int,
        y0: int,
        x1: int,
        y1: int,
        mx: Union[int, float],
        my: Union[int, float],
        mdx: Union[int, float] = 0.125,
        mdy: Union[int, float] = 0,
    ) -> None:
        """Draw a line textured from map cells, starting at map position (mx, my)."""
        x0, y0 = self._apply_camera(x0, y0)
        x1, y1 = self._apply_camera(x1, y1)

        x_major = abs(x1 - x0) >= abs(y1 - y0)
        dx = (1 if x0 <= x1 else -1) if x_major else 0
        dy = 0 if x_major else (1 if y0 <= y1 else -1)
        vertical = x0 == x1

        x = max(0, min(x0, 128))
        xend = max(0, min(x1, 128))
        y = max(0, min(y0, 128))
        yend = max(0, min(y1, 128))

        ds = self._ds
        mx, my = _to_fix(mx), _to_fix(my)
        mdx, mdy = _to_fix(mdx), _to_fix(mdy)
        xmask = _wrap32((ds.tline_map_width << 16) - 1)
        ymask = _wrap32((ds.tline_map_height << 16) - 1)

        def advance(pos: int, step_bits: int, mask: int) -> int:
            return _wrap32((pos & ~mask) | (_wrap32(pos + step_bits) & mask))

        # Skip the texture forward over the part clamped off-screen, in steps.
        delta = abs(x - x0 if x_major else y - y0)
        while delta:
            step = min(8192, delta)
            mx = advance(mx, _wrap32(mdx * step), xmask)
            my = advance(my, _wrap32(mdy * step), ymask)
            delta -= step

        sheet = self.memory.sprite_sheet
        while True:
            sx = (ds.tline_map_x_offset + (mx >> 16)) & 0x7F
            sy = (ds.tline_map_y_offset + (my >> 16)) & 0x3F
            sprite = self.mget(sx, sy)
            if sprite:
                spr_x = (sprite % 16) * 8
                spr_y = (sprite // 16) * 8
                col = get_pixel(
                    spr_x + ((_wrap32(mx << 3) >> 16) & 0x7),
                    spr_y + ((_wrap32(my << 3) >> 16) & 0x7),
                    sheet,
                )
                if not self.is_color_transparent(col):
                    self._put_pixel(x, y, self.get_draw_pal_mapped_color(col))

            mx = advance(mx, mdx, xmask)
            my = advance(my, mdy, ymask)

            if x_major:
                if x == xend:
                    break
                x += dx
                y = int(y0 + (x - x0) / (x1 - x0) * (y1 - y0))
            else:
                if y == yend:
                    break
                y += dy
                if not vertical:
                    x = int(x0 + (y - y0) / (y1 - y0) * (x1 - x0))

    # -- circles and ovals -----------------------------------------------

    def circ(self, ox: int, oy: int, r: int = 4, col: Optional[int] = None) -> None:
        """Draw a circle outline."""
        if col is None:
            col = self._ds.color
        self.color(col)
        ox, oy = self._apply_camera(ox, oy)

        x, y = r, 0
        decision = 1 - x
        put = self._put_pixel_clipped
        while y <= x:
            for px, py in (
                (ox + x, oy + y), (ox + y, oy + x), (ox - x, oy + y), (ox - y, oy + x),
                (ox - x, oy - y), (ox - y, oy - x), (ox + x, oy - y), (ox + y, oy - x),
            ):
                put(px, py, col)
            y += 1
            if decision < 0:
                decision += 2 * y + 1
            else:
                x -= 1
                decision += 2 * (y - x) + 1

    def circfill(self, ox: int, oy: int, r: int = 4, col: Optional[int] = None) -> None:
        """Draw a filled circle."""
        if col is None:
            col = self._ds.color
        self.color(col)
        ox, oy = self._apply_camera(ox, oy)

        if r == 0:
            self._put_pixel_clipped(ox, oy, col)
        elif r == 1:
            self._put_pixel_clipped(ox, oy - 1, col)
            self._h_line(ox - 1, ox + 1, oy, col)
            self._put_pixel_clipped(ox, oy + 1, col)
        elif r > 0:
            x, y, err = -r, 0, 2 - 2 * r
            while True:
                self._h_line(ox - x, ox + x, oy + y, col)
                self._h_line(ox - x, ox + x, oy - y, col)
                r = err
                if r > x:
                    x += 1
                    err += x * 2 + 1
                if r <= y:
                    y += 1
                    err += y * 2 + 1
                if x >= 0:
                    break

    def _oval_points(self, x0: int, y0: int, x1: int, y1: int):
        """Yield (xc, yc, wx, wy) quadrant offsets along an ellipse, plus its centre and radii."""
        x0, y0 = self._apply_camera(x0, y0)
        x1, y1 = self._apply_camera(x1, y1)
        x0, y0, x1, y1 = self._sort_rect(x0, y0, x1, y1)

        xr = (x1 - x0) // 2
        yr = (y1 - y0) // 2
        xc, yc = x0 + xr, y0 + yr
        asq, bsq = xr * xr, yr * yr

        first = []
        wx, wy = 0, yr
        xa, ya = 0, asq * 2 * yr
        thresh = asq // 4 - asq * yr
        while True:
            thresh += xa + bsq
            if thresh >= 0:
                ya -= asq * 2
                thresh -= ya
                wy -= 1
            xa += bsq * 2
            wx += 1
            if xa >= ya:
                break
            first.append((wx, wy))

        second = []
        wx, wy = xr, 0
        xa, ya = bsq * 2 * xr, 0
        thresh = bsq // 4 - bsq * xr
        while True:
            thresh += ya + asq
            if thresh >= 0:
                xa -= bsq * 2
                thresh -= xa
                wx -= 1
            ya += asq * 2
            wy += 1
            if ya > xa:
                break
            second.append((wx, wy))

        return xc, yc, xr, yr, first, second

    def oval(self, x0: int, y0: int, x1: int, y1: int, col: Optional[int] = None) -> None:
        """Draw an ellipse outline inside the given rectangle."""
        if col is None:
            col = self._ds.color
        self.color(col)
        xc, yc, xr, yr, first, second = self._oval_points(x0, y0, x1, y1)
        put = self._put_pixel_clipped

        put(xc, yc + yr, col)
        put(xc, yc - yr, col)
        for wx, wy in first:
            put(xc + wx, yc - wy, col)
            put(xc - wx, yc - wy, col)
            put(xc + wx, yc + wy, col)
            put(xc - wx, yc + wy, col)
        put(xc + xr, yc, col)
        put(xc - xr, yc, col)
        for wx, wy in second:
            put(xc + wx, yc - wy, col)
            put(xc - wx, yc - wy, col)
            put(xc + wx, yc + wy, col)
            put(xc - wx, yc + wy, col)

    def ovalfill(self, x0: int, y0: int, x1: int, y1: int, col: Optional[int] = None) -> None:
        """Draw a filled ellipse inside the given rectangle."""
        if col is None:
            col = self._ds.color
        self.color(col)
        xc, yc, xr, yr, first, second = self._oval_points(x0, y0, x1, y1)

        self._v_line(yc + yr, yc - yr, xc, col)
        for wx, wy in first:
            self._h_line(xc + wx, xc - wx, yc - wy, col)
            self._h_line(xc + wx, xc - wx, yc + wy, col)
        self._h_line(xc + xr, xc - xr, yc, col)
        for wx, wy in second:
            self._h_line(xc + wx, xc - wx, yc - wy, col)
            self._h_line(xc + wx, xc - wx, yc + wy, col)

    # -- rectangles ------------------------------------------------------

    def rect(self, x1: int, y1: int, x2: int, y2: int, col: Optional[int] = None) -> None:
        """Draw a rectangle outline; corners are inclusive."""
        if col is None:
            col = self._ds.color
        self.color(col)
        x1, y1 = self._apply_camera(x1, y1)
        x2, y2 = self._apply_camera(x2, y2)
        x1, y1, x2, y2 = self._sort_rect(x1, y1, x2, y2)
        self._h_line(x1, x2, y1, col)
        self._h_line(x1, x2, y2, col)
        self._v_line(y1, y2, x1, col)
        self._v_line(y1, y2, x2, col)

    def rectfill(self, x1: int, y1: int, x2: int, y2: int, col: Optional[int] = None) -> None:
        """Draw a filled rectangle; corners are inclusive."""
        if col is None:
            col = self._ds.color
        self.color(col)
        x1, y1 = self._apply_camera(x1, y1)
        x2, y2 = self._apply_camera(x2, y2)
        x1, y1, x2, y2 = self._sort_rect(x1, y1, x2, y2)
        for y in range(y1, y2 + 1):
            self._h_line(x1, x2, y, col)

    # -- text ------------------------------------------------------------

    def print(
        self,
        text: Union[str, bytes],
        x: Optional[int] = None,
        y: Optional[int] = None,
        col: Optional[int] = None,
    ) -> int:
        """Draw text and return the x position after its last glyph.

        Without coordinates the text goes at the cursor, which then moves
        down one line. Strings are encoded to console bytes first.
        """
        ds = self._ds
        if x is None or y is None:
            result = self.print(text, ds.text_x, ds.text_y, col)
            ds.text_y = ds.text_y + 6
            return result
        if col is None:
            col = ds.color

        self.color(col)
        ds.text_x = x
        ds.text_y = y

        prev_col7 = self._draw_pal[7]
        prev_transparent0 = self.is_color_transparent(0)
        self.pal(7, col, 0)
        self.palt(7, False)
        self.palt(0, True)

        data = bytes(text) if isinstance(text, (bytes, bytearray)) else convert_emojis(text)
        for ch in data:
            if 0x10 <= ch < 0x80:
                index = ch - 0x10
                self._copy_sprite_to_screen(
                    self._font, x, y, (index % 16) * 8, (index // 16) * 8, 4, 5, False, False
                )
                x += 4
            elif ch >= 0x80:
                index = ch - 0x80
                self._copy_sprite_to_screen(
                    self._font, x, y, (index % 16) * 8, (index // 16) * 8 + 56, 8, 5, False, False
                )
                x += 8
            elif ch == 0x0A:
                x = ds.text_x
                y += 6

        self._draw_pal[7] = prev_col7
        self.palt(0, prev_transparent0)
        return x

    # -- sprites and map -------------------------------------------------

    def spr(
        self,
        n: int,
        x: int,
        y: int,
        w: Union[int, float] = 1.0,
        h: Union[int, float] = 1.0,
        flip_x: bool = False,
        flip_y: bool = False,
    ) -> None:
        """Draw sprite n (and its neighbours for w, h > 1) at (x, y)."""
        spr_x = (n % 16) * 8
        spr_y = (n // 16) * 8
        spr_w = _wrap16(_wrap32(_to_fix(w) * 8) >> 16)
        spr_h = _wrap16(_wrap32(_to_fix(h) * 8) >> 16)
        self._copy_sprite_to_screen(
            self.memory.sprite_sheet, x, y, spr_x, spr_y, spr_w, spr_h, flip_x, flip_y
        )

    def sspr(
        self,
        sx: int,
        sy: int,
        sw: int,
        sh: int,
        dx: int,
        dy: int,
        dw: int,
        dh: int,
        flip_x: bool = False,
        flip_y: bool = False,
    ) -> None:
        """Draw a sprite-sheet rectangle stretched to a screen rectangle."""
        if (dw == 0 or dh == 0) and not (sw == dw and sh == dh):
            return
        self._copy_stretch_sprite_to_screen(
            self.memory.sprite_sheet, sx, sy, sw, sh, dx, dy, dw, dh, flip_x, flip_y
        )

    def map(
        self,
        celx: int,
        cely: int,
        sx: int,
        sy: int,
        celw: int,
        celh: int,
        layer: int = 0,
    ) -> None:
        """Draw a block of map cells; with a layer, only sprites whose flags match it."""
        layer &= 0xFF
        for y in range(celh):
            for x in range(celw):
                cell = self.mget(celx + x, cely + y)
                if cell and (layer == 0 or self.fget(cell) & layer):
                    self.spr(cell, sx + x * 8, sy + y * 8)