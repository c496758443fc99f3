"""Splitting strings into words and trimming characters from their ends."""

from __future__ import annotations


def split(s: str, c: str) -> list[str]:
    """Split ``s`` on the separator character ``c``, dropping empty words."""
    if len(c) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in s.split(c) if word]


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character of ``s`` found in ``charset``."""
    return s.strip(charset)