"""Reading whole files."""

from __future__ import annotations

import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def get_file_contents(filename: PathLike) -> str:
    """Return the file as text, or an empty string if it cannot be read."""
    try:
        with open(filename, "rb") as handle:
            return handle.read().decode("utf-8", errors="surrogateescape")
    except OSError:
        return ""


def get_file_buffer(filename: PathLike) -> bytes:
    """Return the file's bytes, or empty bytes if it cannot be read."""
    try:
        with open(filename, "rb") as handle:
            return handle.read()
    except OSError:
        return b""