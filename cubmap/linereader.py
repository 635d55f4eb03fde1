"""Reading a file descriptor one line at a time with a fixed read size."""

from __future__ import annotations

import os
from typing import Iterator, Optional

BUFFER_SIZE = 42


class LineReader:
    """Return successive lines of ``fd``, each with its trailing newline.

    Data is read ``buffer_size`` bytes at a time; bytes past the end of a
    line are kept for the next call. Descriptor 1 and negative descriptors
    are refused.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0 or fd == 1:
            raise ValueError(f"cannot read lines from descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._fd = fd
        self._buffer_size = buffer_size
        self._pending = bytearray()

    def next_line(self) -> Optional[str]:
        """The next line, or ``None`` once the input is exhausted."""
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self._fd, self._buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        cut = len(self._pending) if end < 0 else end + 1
        line = bytes(self._pending[:cut])
        del self._pending[:cut]
        return line.decode("utf-8", errors="surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line