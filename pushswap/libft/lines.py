"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Optional

BUFFER_SIZE = 42
MAX_FD = 1024


class LineReader:
    """Reads lines from file descriptors, keeping unread data per descriptor.

    Each descriptor is read in chunks of ``buffer_size`` bytes. Data read past
    the end of a line is kept and handed out by the next call for the same
    descriptor, so several descriptors can be read in turns.
    """

    def __init__(self, buffer_size: int = BUFFER_SIZE, max_fd: int = MAX_FD) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if max_fd <= 0:
            raise ValueError("max_fd must be positive")
        self.buffer_size = buffer_size
        self.max_fd = max_fd
        self._pending: dict[int, bytes] = {}

    def _read_until_newline(self, fd: int, data: bytes) -> bytes:
        # At least one chunk is always read, and reading stops once the
        # chunk just read holds a newline or the end of input is reached.
        while True:
            chunk = os.read(fd, self.buffer_size)
            data += chunk
            if not chunk or b"\n" in chunk:
                return data

    def next_line(self, fd: int) -> Optional[bytes]:
        """The next line of ``fd``, with its newline if it has one.

        Returns None once the input is exhausted. Raises ValueError for a
        descriptor outside ``0 .. max_fd - 1`` and lets OSError from reading
        through; in both cases data kept for the descriptor is dropped.
        """
        if not 0 <= fd < self.max_fd:
            self._pending.pop(fd, None)
            raise ValueError(f"file descriptor {fd} out of range")
        data = self._pending.pop(fd, b"")
        data = self._read_until_newline(fd, data)
        if not data:
            return None
        cut = data.find(b"\n")
        if cut < 0:
            return data
        line, rest = data[: cut + 1], data[cut + 1 :]
        if rest:
            self._pending[fd] = rest
        return line

    def lines(self, fd: int) -> Iterator[bytes]:
        """Yield every remaining line of ``fd``."""
        while True:
            line = self.next_line(fd)
            if line is None:
                return
            yield line


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[bytes]:
    """The next line of ``fd``, using a shared reader; None at the end."""
    return _default_reader.next_line(fd)