"""Read a file descriptor one line at a time, keeping leftovers per descriptor."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Optional

BUFFER_SIZE = 42

_NEWLINE = b"\n"


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", "surrogateescape")


class LineReader:
    """Return successive lines from file descriptors.

    Data is read in chunks of ``buffer_size`` bytes. Bytes read past the end
    of a line are kept for the next call on the same descriptor, so several
    descriptors can be read in turn without mixing their lines.
    """

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytes] = {}

    def read_line(self, fd: int) -> Optional[str]:
        """Return the next line of ``fd``, newline included, or None at the end.

        The last line is returned without a newline if the data does not end
        with one. If reading fails, whatever was kept for ``fd`` is dropped
        and the error propagates.
        """
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        pending = bytearray(self._pending.pop(fd, b""))
        searched = 0
        while pending.find(_NEWLINE, searched) == -1:
            searched = len(pending)
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            pending += chunk
        if not pending:
            return None
        end = pending.find(_NEWLINE)
        cut = len(pending) if end == -1 else end + 1
        line, rest = bytes(pending[:cut]), bytes(pending[cut:])
        if rest:
            self._pending[fd] = rest
        return _decode(line)

    def forget(self, fd: int) -> None:
        """Drop any data kept for ``fd``."""
        self._pending.pop(fd, None)


def lines(fd: int, buffer_size: int = BUFFER_SIZE) -> Iterator[str]:
    """Yield every remaining line of ``fd`` in order."""
    reader = LineReader(buffer_size)
    while (line := reader.read_line(fd)) is not None:
        yield line