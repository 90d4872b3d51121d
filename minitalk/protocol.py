"""Bit-level framing used between the client and the server.

A message is sent one byte at a time, least significant bit first, and
is terminated by a NUL byte. Each bit travels as one signal.
"""

from __future__ import annotations

from typing import Optional, Union

__all__ = ["encode_message", "Decoder"]

BITS_PER_BYTE = 8
TERMINATOR = 0


def encode_message(message: Union[str, bytes]) -> list[int]:
    """Return the bits that carry message, followed by a NUL terminator.

    Text is encoded as UTF-8. Each byte contributes eight bits, least
    significant first.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    return [
        (byte >> shift) & 1
        for byte in data + bytes([TERMINATOR])
        for shift in range(BITS_PER_BYTE)
    ]


class Decoder:
    """Reassembles bytes from a stream of bits, least significant bit first."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """Number of bits received towards the current byte."""
        return self._count

    def feed(self, bit: Union[int, bool]) -> Optional[int]:
        """Accept one bit; return the completed byte after every eighth bit."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._value |= int(bit) << self._count
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte