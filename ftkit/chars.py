"""ASCII character classification and case conversion.

Every function accepts either an integer code or a one-character string.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def is_digit(c: Char) -> bool:
    """True for '0'..'9'."""
    return ord("0") <= _code(c) <= ord("9")


def is_alpha(c: Char) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def is_sign(c: Char) -> bool:
    """True for '+' and '-'."""
    return _code(c) in (ord("+"), ord("-"))


def _convert(c: Char, low: int, high: int, shift: int) -> Char:
    code = _code(c)
    if low <= code <= high:
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; other values pass through."""
    return _convert(c, ord("A"), ord("Z"), 32)


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; other values pass through."""
    return _convert(c, ord("a"), ord("z"), -32)