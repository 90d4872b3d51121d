"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from minitalk.convert import itoa

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]

Char = Union[int, str]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _char(c: Char) -> str:
    """Normalise a character given as a 1-char string or an int code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return chr(c & 0xFF)


def put_char(c: Char, stream: Optional[TextIO] = None) -> int:
    """Write one character to stream (standard output by default).

    An int is taken as a byte value. Returns the number of characters written.
    """
    _target(stream).write(_char(c))
    return 1


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write s to stream; None writes nothing. Returns the characters written."""
    if s is None:
        return 0
    _target(stream).write(s)
    return len(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write s followed by a newline; None writes nothing at all."""
    if s is None:
        return 0
    _target(stream).write(s + "\n")
    return len(s) + 1


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write a 32-bit signed integer in decimal. Returns the characters written."""
    text = itoa(n)
    _target(stream).write(text)
    return len(text)