"""Byte-buffer helpers working on mutable bytes-like objects."""

from __future__ import annotations

import sys

_SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(buffer, n: int, name: str = "buffer") -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > len(buffer):
        raise ValueError(f"byte count {n} exceeds the length of {name}")


def bzero(buffer, n: int):
    """Zero the first ``n`` bytes of ``buffer`` and return it."""
    _check_count(buffer, n)
    buffer[:n] = bytes(n)
    return buffer


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer for ``nmemb`` items of ``size`` bytes.

    A request for zero items or zero-sized items yields a one-byte buffer.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("item count and size must not be negative")
    if not nmemb or not size:
        return bytearray(1)
    total = nmemb * size
    if total > _SIZE_MAX:
        raise OverflowError("requested allocation is too large")
    return bytearray(total)


def memchr(buffer, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes."""
    _check_count(buffer, n)
    position = bytes(buffer[:n]).find(c & 0xFF)
    return None if position < 0 else position


def memcmp(first, second, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair."""
    _check_count(first, n, "first")
    _check_count(second, n, "second")
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest, src, n: int):
    """Copy ``n`` bytes of ``src`` to the start of ``dest`` and return it."""
    _check_count(dest, n, "dest")
    _check_count(src, n, "src")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer, dest: int, src: int, n: int):
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to ``dest``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("byte count must not be negative")
    if max(dest, src) + n > len(buffer):
        raise ValueError("move extends past the end of the buffer")
    if dest != src:
        buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memset(buffer, c: int, n: int):
    """Fill the first ``n`` bytes of ``buffer`` with ``c`` and return it."""
    _check_count(buffer, n)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer