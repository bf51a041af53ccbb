"""Helpers for 4-bit-per-pixel buffers laid out as 128-pixel rows."""

from __future__ import annotations

from typing import MutableSequence


def combined_index(x: int, y: int) -> int:
    """Return the byte index holding pixel (x, y) in a 64-bytes-per-row buffer."""
    return (y << 6) + (x >> 1)


def get_pixel(x: int, y: int, buffer: MutableSequence[int]) -> int:
    """Read the 4-bit colour of pixel (x, y); even x is the low nibble."""
    byte = buffer[combined_index(x, y)]
    return byte >> 4 if x & 1 else byte & 0x0F


def set_pixel(x: int, y: int, value: int, buffer: MutableSequence[int]) -> None:
    """Write the 4-bit colour of pixel (x, y), leaving its neighbour untouched."""
    index = combined_index(x, y)
    current = buffer[index]
    if x & 1:
        buffer[index] = (current & 0x0F) | ((value << 4) & 0xF0)
    else:
        buffer[index] = (current & 0xF0) | (value & 0x0F)