"""Thread-safe appending to a text file."""

from __future__ import annotations

import os
import threading
from types import TracebackType
from typing import Optional, Union


class FileWriter:
    """Appends text to a file, serialising writes from several threads."""

    def __init__(self, filename: Union[str, os.PathLike]) -> None:
        self._file = open(filename, "a", encoding="utf-8")
        self._lock = threading.Lock()

    def write(self, data: str) -> None:
        with self._lock:
            self._file.write(data)

    def close(self) -> None:
        with self._lock:
            self._file.close()

    def __enter__(self) -> FileWriter:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()