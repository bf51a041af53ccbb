"""A small file logger that stays silent until initialized."""

from __future__ import annotations

import os
from typing import Optional, TextIO, Union


class Logger:
    """Writes messages to a log file once :meth:`initialize` has been called."""

    def __init__(self):
        self._file: Optional[TextIO] = None
        self.enabled = False

    def initialize(self, path: Union[str, "os.PathLike[str]"] = "pico.log") -> None:
        self._file = open(path, "w", encoding="utf-8")
        self.enabled = True

    @property
    def _active(self) -> bool:
        return self.enabled and self._file is not None

    def log_output(self, func: str, line: int, message: str) -> None:
        """Write a message headed by the function name and line."""
        if not self._active:
            return
        self._file.write(f"{func}:{line}:\n{message}\n\n")
        self._file.flush()

    def write(self, message: str) -> None:
        if not self._active:
            return
        self._file.write(message)
        self._file.flush()

    def exit(self) -> None:
        if not self._active:
            return
        self._file.close()
        self._file = None
        self.enabled = False

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc) -> None:
        self.exit()