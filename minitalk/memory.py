"""Byte-buffer operations in the spirit of the C memory functions."""

from __future__ import annotations

from typing import Optional

__all__ = [
    "memset",
    "bzero",
    "calloc",
    "memchr",
    "memcmp",
    "memcpy",
    "memmove",
]

SIZE_MAX = 2**64 - 1


def _check_count(count: int, *lengths: int) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for length in lengths:
        if count > length:
            raise ValueError(f"count {count} exceeds buffer length {length}")


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Fill the first count bytes of buffer with value (taken modulo 256)."""
    _check_count(count, len(buffer))
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> bytearray:
    """Zero the first count bytes of buffer."""
    return memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count elements of size bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > SIZE_MAX // size:
        raise MemoryError(f"{count} elements of {size} bytes overflow the size limit")
    return bytearray(count * size)


def memchr(data: bytes, value: int, count: int) -> Optional[int]:
    """Index of the first byte equal to value within the first count bytes, or None."""
    _check_count(count, len(data))
    index = bytes(data).find(bytes([value & 0xFF]), 0, count)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, size: int) -> int:
    """Compare the first size bytes as unsigned values.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_count(size, len(first), len(second))
    for a, b in zip(bytes(first[:size]), bytes(second[:size])):
        if a != b:
            return a - b
    return 0


def memcpy(destination: bytearray, source: bytes, size: int) -> bytearray:
    """Copy size bytes of source to the start of destination."""
    _check_count(size, len(destination), len(source))
    destination[:size] = bytes(source[:size])
    return destination


def memmove(buffer: bytearray, destination: int, source: int, count: int) -> bytearray:
    """Copy count bytes inside buffer from offset source to offset destination.

    The regions may overlap; the result is as if the source bytes were
    copied out first.
    """
    if destination < 0 or source < 0:
        raise ValueError("offsets must not be negative")
    _check_count(count, len(buffer) - destination, len(buffer) - source)
    if count and destination != source:
        buffer[destination:destination + count] = buffer[source:source + count]
    return buffer