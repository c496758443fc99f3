"""String searching, copying, comparing and transforming helpers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional, Union

Char = Union[int, str]


def _target(c: Char) -> str:
    """Normalise a character argument to a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    return chr(c % 256)


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string, so its
    index is ``len(s)``.
    """
    target = _target(c)
    if target == "\0":
        position = s.find(target)
        return len(s) if position == -1 else position
    position = s.find(target)
    return None if position == -1 else position


def strrchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    target = _target(c)
    if target == "\0":
        return len(s)
    position = s.rfind(target)
    return None if position == -1 else position


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def striteri(s: str, f: Callable[[int, str], Optional[str]]) -> str:
    """Call ``f(index, char)`` on each character and return the edited string.

    ``f`` may return a replacement character, or None to keep the character.
    """
    edited = []
    for index, char in enumerate(s):
        replacement = f(index, char)
        edited.append(char if replacement is None else replacement)
    return "".join(edited)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return the string made of ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, char) for index, char in enumerate(s))


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    if first is None or second is None:
        raise TypeError("strjoin expects two strings")
    return first + second


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``, so a result
    length of ``size`` or more means the copy was truncated.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a total buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have. When ``size`` does not exceed ``len(dst)`` nothing is appended and
    the returned length is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0 or size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return their code difference.

    The end of a string compares as code 0, and comparison stops at the
    first NUL or difference.
    """
    for position in range(n):
        a = ord(first[position]) if position < len(first) else 0
        b = ord(second[position]) if position < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Return the index of ``little`` in the first ``n`` characters of ``big``.

    An empty ``little`` is found at index 0. A match must lie wholly within
    the first ``n`` characters; otherwise None is returned.
    """
    if not little:
        return 0
    limit = min(max(n, 0), len(big))
    position = big.find(little, 0, limit)
    return None if position == -1 else position


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start : start + length]