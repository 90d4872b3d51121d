"""String helpers modelled on the classic C string routines."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional, Union

__all__ = [
    "split",
    "strtrim",
    "substr",
    "strnstr",
    "strchr",
    "strrchr",
    "strncmp",
    "strlcpy",
    "strlcat",
    "strjoin",
    "strmapi",
    "striteri",
]

Char = Union[int, str]

_NUL = "\0"


def _char(c: Char) -> str:
    """Normalise a character given as a 1-char string or an int code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(s: str, sep: Char) -> list[str]:
    """Split s on runs of the separator character, dropping empty words."""
    return [word for word in s.split(_char(sep)) if word]


def strtrim(s: str, charset: Optional[str]) -> str:
    """Strip every character of charset from both ends of s.

    With charset None the string is returned unchanged.
    """
    if charset is None:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s beginning at start.

    A start past the end of s gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start > len(s):
        return ""
    return s[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of needle in haystack, searching only the first length characters.

    The whole match must lie inside that prefix. An empty needle is found
    at index 0; a missing one gives None.
    """
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first occurrence of c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL and _NUL not in s:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last occurrence of c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters of two strings.

    Returns the difference of the codes of the first differing characters,
    a shorter string comparing as if followed by NUL, or 0 when equal.
    """
    _check_non_negative("n", n)
    for a, b in zip_longest(first[:n], second[:n], fillvalue=_NUL):
        if a == _NUL and b == _NUL:
            break
        if a != b:
            return ord(a) - ord(b)
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied (possibly truncated) text and the full length of
    src, which tells whether truncation happened.
    """
    _check_non_negative("size", size)
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size characters.

    Returns the resulting text and the length the result would have had
    without truncation (bounded by size when dest already fills it).
    """
    _check_non_negative("size", size)
    dest_len = len(dest)
    room = max(0, size - dest_len - 1)
    total = len(src) + (size if size <= dest_len else dest_len)
    return dest + src[:room], total


def strjoin(first: Optional[str], second: Optional[str]) -> str:
    """Concatenate two strings; a missing one counts as empty."""
    return (first or "") + (second or "")


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for every character of s."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call func(index, char) on every character of s in order.

    A returned string replaces the character; None leaves it as it was.
    The resulting string is returned.
    """
    result = []
    for index, ch in enumerate(s):
        replacement = func(index, ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)