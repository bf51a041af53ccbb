"""The 32 KiB machine memory and the structures laid out inside it."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass
from typing import Tuple

RAM_SIZE = 0x8000

SPRITE_SHEET = 0x0000
MAP_DATA = 0x2000
SPRITE_FLAGS = 0x3000
MUSIC = 0x3100
SFX = 0x3200
GENERAL_USE = 0x4300
CART_DATA = 0x5E00
DRAW_STATE = 0x5F00
HW_STATE = 0x5F40
SCREEN = 0x6000

SONG_SIZE = 4
SFX_SIZE = 68


class Button(enum.IntFlag):
    """Bits of the button state byte."""

    LEFT = 1 << 0
    RIGHT = 1 << 1
    UP = 1 << 2
    DOWN = 1 << 3
    O = 1 << 4
    X = 1 << 5
    PAUSE = 1 << 6
    KEY_7 = 1 << 7


@dataclass(frozen=True)
class Color:
    """An RGBA colour."""

    red: int
    green: int
    blue: int
    alpha: int = 255


def _exact(data, size: int, what: str) -> bytes:
    raw = bytes(data)
    if len(raw) != size:
        raise ValueError(f"{what} needs {size} bytes, got {len(raw)}")
    return raw


@dataclass(frozen=True)
class Note:
    """One note of a sound effect, packed into 16 bits."""

    key: int = 0
    waveform: int = 0
    volume: int = 0
    effect: int = 0

    @classmethod
    def from_bytes(cls, data) -> "Note":
        word = int.from_bytes(_exact(data, 2, "note"), "little")
        return cls(
            key=word & 0x3F,
            waveform=(word >> 6) & 0x7,
            volume=(word >> 9) & 0x7,
            effect=(word >> 12) & 0xF,
        )

    def to_bytes(self) -> bytes:
        word = (
            (self.key & 0x3F)
            | (self.waveform & 0x7) << 6
            | (self.volume & 0x7) << 9
            | (self.effect & 0xF) << 12
        )
        return word.to_bytes(2, "little")


@dataclass(frozen=True)
class Song:
    """One music pattern: four channel sfx ids, each byte carrying a flag."""

    sfx0: int = 0
    sfx1: int = 0
    sfx2: int = 0
    sfx3: int = 0
    start: bool = False
    loop: bool = False
    stop: bool = False
    mode: bool = False

    @classmethod
    def from_bytes(cls, data) -> "Song":
        b = _exact(data, SONG_SIZE, "song")
        return cls(
            sfx0=b[0] & 0x7F,
            sfx1=b[1] & 0x7F,
            sfx2=b[2] & 0x7F,
            sfx3=b[3] & 0x7F,
            start=bool(b[0] & 0x80),
            loop=bool(b[1] & 0x80),
            stop=bool(b[2] & 0x80),
            mode=bool(b[3] & 0x80),
        )

    def to_bytes(self) -> bytes:
        pairs = (
            (self.sfx0, self.start),
            (self.sfx1, self.loop),
            (self.sfx2, self.stop),
            (self.sfx3, self.mode),
        )
        return bytes((sfx & 0x7F) | (0x80 if flag else 0) for sfx, flag in pairs)


@dataclass(frozen=True)
class Sfx:
    """A sound effect: 32 notes followed by four settings bytes."""

    notes: Tuple[Note, ...] = tuple(Note() for _ in range(32))
    editor_mode: int = 0
    speed: int = 0
    loop_range_start: int = 0
    loop_range_end: int = 0

    @classmethod
    def from_bytes(cls, data) -> "Sfx":
        b = _exact(data, SFX_SIZE, "sfx")
        notes = tuple(Note.from_bytes(b[i : i + 2]) for i in range(0, 64, 2))
        return cls(notes, b[64], b[65], b[66], b[67])

    def to_bytes(self) -> bytes:
        if len(self.notes) != 32:
            raise ValueError("sfx needs exactly 32 notes")
        body = b"".join(note.to_bytes() for note in self.notes)
        tail = bytes(
            v & 0xFF
            for v in (self.editor_mode, self.speed, self.loop_range_start, self.loop_range_end)
        )
        return body + tail


class _Field:
    """An integer stored at a fixed offset of a memory view."""

    def __init__(self, offset: int, size: int = 1, signed: bool = False):
        self.offset = offset
        self.size = size
        self.signed = signed

    def __get__(self, obj, owner=None):
        if obj is None:
            return self
        start = obj._base + self.offset
        return int.from_bytes(
            obj._data[start : start + self.size], "little", signed=self.signed
        )

    def __set__(self, obj, value) -> None:
        bits = 8 * self.size
        raw = int(value) & ((1 << bits) - 1)
        start = obj._base + self.offset
        obj._data[start : start + self.size] = raw.to_bytes(self.size, "little")


class _Block:
    """A run of bytes at a fixed offset, exposed as a writable memoryview."""

    def __init__(self, offset: int, length: int):
        self.offset = offset
        self.length = length

    def __get__(self, obj, owner=None):
        if obj is None:
            return self
        start = obj._base + self.offset
        return memoryview(obj._data)[start : start + self.length]

    def __set__(self, obj, value) -> None:
        raw = _exact(value, self.length, "block")
        start = obj._base + self.offset
        obj._data[start : start + self.length] = raw


class _Words:
    """Little-endian 32-bit words inside a byte buffer."""

    def __init__(self, data: bytearray, start: int, count: int):
        self._data = data
        self._start = start
        self._count = count

    def __len__(self) -> int:
        return self._count

    def _offset(self, index: int) -> int:
        if not -self._count <= index < self._count:
            raise IndexError("word index out of range")
        return self._start + 4 * (index % self._count)

    def __getitem__(self, index: int) -> int:
        return struct.unpack_from("<I", self._data, self._offset(index))[0]

    def __setitem__(self, index: int, value: int) -> None:
        struct.pack_into("<I", self._data, self._offset(index), int(value) & 0xFFFFFFFF)

    def __iter__(self):
        return (self[i] for i in range(self._count))


class _View:
    def __init__(self, data: bytearray, base: int):
        self._data = data
        self._base = base


class DrawState(_View):
    """The draw state block at 0x5f00."""

    draw_palette_map = _Block(0x00, 16)
    screen_palette_map = _Block(0x10, 16)
    clip_xb = _Field(0x20)
    clip_yb = _Field(0x21)
    clip_xe = _Field(0x22)
    clip_ye = _Field(0x23)
    unknown_05f24 = _Field(0x24)
    color = _Field(0x25)
    text_x = _Field(0x26)
    text_y = _Field(0x27)
    camera_x = _Field(0x28, 2, signed=True)
    camera_y = _Field(0x2A, 2, signed=True)
    draw_mode = _Field(0x2C)
    devkit_mode = _Field(0x2D)
    persist_palette = _Field(0x2E)
    sound_pause_state = _Field(0x2F)
    suppress_pause = _Field(0x30)
    fill_pattern = _Block(0x31, 2)
    fill_pattern_transparency_bit = _Field(0x33)
    color_setting_flag = _Field(0x34)
    line_invalid = _Field(0x35)
    unknown_05f36 = _Field(0x36)
    unknown_05f37 = _Field(0x37)
    tline_map_width = _Field(0x38)
    tline_map_height = _Field(0x39)
    tline_map_x_offset = _Field(0x3A)
    tline_map_y_offset = _Field(0x3B)
    line_x = _Field(0x3C, 2, signed=True)
    line_y = _Field(0x3E, 2, signed=True)

    def __init__(self, data: bytearray):
        super().__init__(data, DRAW_STATE)


class HardwareState(_View):
    """The hardware state block at 0x5f40."""

    audio_hardware_state = _Block(0x00, 4)
    button_states = _Block(0x0C, 8)
    unknown_input_block = _Block(0x14, 8)
    btnp_repeat_delay = _Field(0x1C)
    btnp_repeat_interval = _Field(0x1D)
    color_bitmask = _Field(0x1E)
    alternate_palette_flag = _Field(0x1F)
    alternate_palette_map = _Block(0x20, 16)
    alternate_palette_screen_line_bitfield = _Block(0x30, 16)
    gpio_pins = _Block(0x40, 128)

    def __init__(self, data: bytearray):
        super().__init__(data, HW_STATE)
        self.rng_state = _Words(data, HW_STATE + 0x04, 2)


class PicoRam:
    """The whole 32 KiB address space with named regions over it."""

    SIZE = RAM_SIZE

    def __init__(self):
        self.data = bytearray(RAM_SIZE)
        self.draw_state = DrawState(self.data)
        self.hw_state = HardwareState(self.data)

    def reset(self) -> None:
        """Zero every byte."""
        self.data[:] = bytes(RAM_SIZE)

    def _region(self, start: int, end: int) -> memoryview:
        return memoryview(self.data)[start:end]

    @property
    def sprite_sheet(self) -> memoryview:
        return self._region(SPRITE_SHEET, MAP_DATA)

    @property
    def map_data(self) -> memoryview:
        return self._region(MAP_DATA, SPRITE_FLAGS)

    @property
    def sprite_flags(self) -> memoryview:
        return self._region(SPRITE_FLAGS, MUSIC)

    @property
    def music_data(self) -> memoryview:
        return self._region(MUSIC, SFX)

    @property
    def sfx_data(self) -> memoryview:
        return self._region(SFX, GENERAL_USE)

    @property
    def general_use(self) -> memoryview:
        return self._region(GENERAL_USE, CART_DATA)

    @property
    def cart_data(self) -> memoryview:
        return self._region(CART_DATA, DRAW_STATE)

    @property
    def screen_buffer(self) -> memoryview:
        return self._region(SCREEN, RAM_SIZE)

    def song(self, index: int) -> Song:
        """Decode music pattern ``index`` (0-63)."""
        if not 0 <= index < 64:
            raise IndexError("song index out of range")
        start = MUSIC + index * SONG_SIZE
        return Song.from_bytes(self.data[start : start + SONG_SIZE])

    def sfx(self, index: int) -> Sfx:
        """Decode sound effect ``index`` (0-63)."""
        if not 0 <= index < 64:
            raise IndexError("sfx index out of range")
        start = SFX + index * SFX_SIZE
        return Sfx.from_bytes(self.data[start : start + SFX_SIZE])