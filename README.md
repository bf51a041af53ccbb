# fakepico

The core of a fantasy-console emulator: a 32 KiB memory map, helpers for
4-bit packed pixels, conversion of cart text to the console's single-byte
character set, rewriting of the console's Lua dialect into plain Lua, the
built-in font, and a software renderer that draws into the screen area of
memory.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Modules

- `fakepico.memory` — `PicoRam`, a `bytearray` of 0x8000 bytes with views
  over its regions (`sprite_sheet`, `map_data`, `sprite_flags`,
  `music_data`, `sfx_data`, `general_use`, `cart_data`, `screen_buffer`),
  the `draw_state` (`DrawState`) and `hw_state` (`HardwareState`) blocks,
  `reset()`, and `song(index)` / `sfx(index)` which decode the `Song` and
  `Sfx` records (with their `Note`s). `Song`, `Sfx` and `Note` convert to
  and from bytes with `from_bytes` / `to_bytes`. Also `Color` and the
  `Button` flags.
- `fakepico.nibbles` — `combined_index`, `get_pixel` and `set_pixel` for
  128-pixel-wide buffers that hold two pixels per byte (even x in the low
  nibble).
- `fakepico.emoji` — `convert_emojis(text)` encodes a string as console
  bytes: ASCII passes through, the console's special glyphs map to their
  codes, and any other character is dropped.
- `fakepico.patcher` — `patch_lua(source)` rewrites shorthand `if`/`while`,
  compound assignment, `!=`, `//` comments, a leading `?` print and binary
  literals into standard Lua.
- `fakepico.font` — `get_font_data()` returns the built-in glyph sheet as
  hex digits; `font_sprite_sheet(fontdata)` packs such a string into a
  128x128 4-bit sheet.
- `fakepico.canvas` — `Canvas`: palettes (`pal`, `palt`), clipping,
  camera, cursor, colour, `cls`, `pset`/`pget`, `line`, sprite flags
  (`fget`/`fset`), sprite-sheet pixels (`sget`/`sset`) and map cells
  (`mget`/`mset`).
- `fakepico.graphics` — `Graphics`, a `Canvas` that adds `circ`,
  `circfill`, `oval`, `ovalfill`, `rect`, `rectfill`, `print`, `spr`,
  `sspr`, `map` and `tline`.
- `fakepico.fileio` — `get_file_contents` and `get_file_buffer`, which
  return an empty result when a file cannot be read.
- `fakepico.logger` — `Logger`, which writes nothing until `initialize()`
  opens its log file (`pico.log` by default).

## Example

```python
from fakepico.memory import PicoRam
from fakepico.graphics import Graphics

ram = PicoRam()
gfx = Graphics(memory=ram)
gfx.cls(1)
gfx.rectfill(10, 10, 40, 30, 8)
gfx.circ(64, 64, 20, 12)
gfx.print("hello", 0, 0, 7)
print(gfx.pget(12, 12))  # 8
```

The screen lives in memory from 0x6000 to 0x7fff, two pixels per byte, so
a host can read it straight from `ram.screen_buffer`, mapping each pixel
through `gfx.screen_palette_map` and `gfx.palette_colors`.

## What it does not do

This package is a library only. It has no command to run, does not
interpret Lua or run carts, does not load cart files, plays no sound,
reads no input and opens no window. `patch_lua` only rewrites source
text; running the result is left to the caller.