"""Conversions between decimal text and integers with C integer widths."""

from __future__ import annotations

INT_MAX = 2147483647
INT_MIN = -2147483648
LONG_MAX = 9223372036854775807
LONG_MIN = -9223372036854775808
ULONG_MAX = 18446744073709551615

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _parse(text: str) -> int:
    """Parse leading whitespace, an optional sign and digits; ignore the rest."""
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    result = 0
    while position < length and text[position] in _DIGITS:
        result = result * 10 + (ord(text[position]) - ord("0"))
        position += 1
    return result * sign


def atoi(text: str) -> int:
    """Parse a decimal integer prefix of ``text`` as a 32-bit signed int.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Text without digits gives 0. Values outside the 32-bit range
    wrap around.
    """
    if text.startswith("-2147483648"):
        return INT_MIN
    return _wrap(_parse(text), 32)


def atol(text: str) -> int:
    """Parse a decimal integer prefix of ``text`` as a 64-bit signed long.

    Same rules as :func:`atoi`, with 64-bit wrap-around.
    """
    if text.startswith("-9223372036854775808"):
        return LONG_MIN
    return _wrap(_parse(text), 64)


def itoa(n: int) -> str:
    """Return the decimal representation of the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("itoa expects an integer")
    return str(n)