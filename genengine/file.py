"""A thread-safe synchronous binary file."""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import BinaryIO, Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


class File:
    """A binary file opened for reading and writing, safe to share between threads.

    Opening a path creates the file, or empties it if it already exists.
    Operations on a file that is not open raise ``ValueError``.
    """

    def __init__(self, file_path: Optional[PathLike] = None) -> None:
        self._lock = threading.RLock()
        self._handle: Optional[BinaryIO] = None
        self._path: Optional[Path] = None
        if file_path is not None:
            self.open(file_path)

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def _require_open(self) -> BinaryIO:
        if self._handle is None:
            raise ValueError("file is not open")
        return self._handle

    def open(self, file_path: PathLike) -> "File":
        """Create or truncate ``file_path`` and open it for reading and writing."""
        with self._lock:
            self._close_handle()
            self._path = Path(file_path)
            with open(self._path, "wb"):
                pass
            self._handle = open(self._path, "r+b")
            return self

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes from the current position.

        Returns ``b""`` at the end of the file.
        """
        if size <= 0:
            raise ValueError("size must be positive")
        with self._lock:
            return self._require_open().read(size)

    def write(self, data: bytes, position: Optional[int] = None, flush: bool = False) -> int:
        """Write ``data`` at ``position``, or at the current position if ``None``.

        Returns the number of bytes written.
        """
        with self._lock:
            handle = self._require_open()
            if position is not None:
                handle.seek(position)
            written = handle.write(data)
            if flush:
                handle.flush()
            return written

    def seek(self, position: int) -> int:
        """Move to ``position`` bytes from the start and return the new position."""
        if position < 0:
            raise ValueError("position must not be negative")
        with self._lock:
            handle = self._require_open()
            handle.seek(position, os.SEEK_SET)
            return handle.tell()

    def tell(self) -> int:
        """Return the current position in the file."""
        with self._lock:
            return self._require_open().tell()

    def is_valid(self) -> bool:
        """Whether the file is open."""
        with self._lock:
            return self._handle is not None

    def file_size(self) -> int:
        """Return the size of the file in bytes."""
        with self._lock:
            handle = self._require_open()
            handle.flush()
            return os.fstat(handle.fileno()).st_size

    def timestamp(self) -> int:
        """Return the last modification time in whole seconds since the epoch."""
        with self._lock:
            handle = self._require_open()
            handle.flush()
            assert self._path is not None
            return int(os.stat(self._path).st_mtime)

    def _close_handle(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def close(self) -> None:
        """Close the file; closing twice is harmless."""
        with self._lock:
            self._close_handle()

    def __enter__(self) -> "File":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()