"""Byte-buffer, character, string, list, stack and line-reading helpers with classic C-library semantics."""

__version__ = "0.1.0"