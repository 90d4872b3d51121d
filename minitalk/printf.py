"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Iterator, Optional, TextIO

__all__ = ["format", "printf"]

_UINT32_MASK = 0xFFFFFFFF
_UINTPTR_MASK = 2**64 - 1


def _int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - 2**32 if value >= 2**31 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _pointer(value: Any) -> str:
    address = 0 if value is None else operator.index(value) & _UINTPTR_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _convert(conversion: str, next_arg: Callable[[], Any]) -> tuple[str, int]:
    """Render one conversion; returns its text and the count it adds."""
    if conversion == "c":
        return _char(next_arg()), 1
    if conversion == "s":
        text = _string(next_arg())
    elif conversion == "p":
        text = _pointer(next_arg())
    elif conversion in ("d", "i"):
        text = str(_int32(operator.index(next_arg())))
    elif conversion == "u":
        text = str(operator.index(next_arg()) & _UINT32_MASK)
    elif conversion == "x":
        text = f"{operator.index(next_arg()) & _UINT32_MASK:x}"
    elif conversion == "X":
        text = f"{operator.index(next_arg()) & _UINT32_MASK:X}"
    elif conversion == "%":
        text = "%"
    else:
        # Unknown conversions print nothing but still count as one character.
        return "", 1
    return text, len(text)


def _pieces(template: str, args: tuple[Any, ...]) -> Iterator[tuple[str, int]]:
    remaining = iter(args)
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            yield ch, 1
            continue
        conversion = next(chars, None)
        if conversion is None:
            yield "%", 1
            return

        def next_arg(conv: str = conversion) -> Any:
            try:
                return next(remaining)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{conv}") from None

        yield _convert(conversion, next_arg)


def format(template: str, *args: Any) -> str:
    """Return the text printf would write for template and args."""
    return "".join(text for text, _ in _pieces(template, args))


def printf(template: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to stream (standard output by default).

    Returns the number of characters counted for the output.
    """
    pieces = list(_pieces(template, args))
    target = sys.stdout if stream is None else stream
    target.write("".join(text for text, _ in pieces))
    return sum(count for _, count in pieces)