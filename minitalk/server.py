"""Server that rebuilds messages from signals and prints them."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, NoReturn, Optional, Sequence

from minitalk.protocol import TERMINATOR, Decoder

__all__ = ["serve", "main"]

_NEWLINE = ord("\n")


def serve(stream: Optional[BinaryIO] = None) -> NoReturn:
    """Announce the process id, then print every byte received, forever.

    SIGUSR1 is a 0 bit and SIGUSR2 a 1 bit. When a NUL byte completes,
    the sender is acknowledged with SIGUSR2. Output goes to stream, a
    binary stream, or to standard output by default.
    """
    if stream is None:
        sys.stdout.flush()
        stream = sys.stdout.buffer
    bits = {signal.SIGUSR1: 0, signal.SIGUSR2: 1}
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, set(bits))
    try:
        stream.write(f"Server PID: {os.getpid()}\n".encode("ascii"))
        stream.flush()
        decoder = Decoder()
        while True:
            info = signal.sigwaitinfo(set(bits))
            byte = decoder.feed(bits[info.si_signo])
            if byte is None:
                continue
            stream.write(bytes([byte]))
            if byte in (_NEWLINE, TERMINATOR):
                stream.flush()
            if byte == TERMINATOR:
                try:
                    os.kill(info.si_pid, signal.SIGUSR2)
                except ProcessLookupError:
                    pass
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server until interrupted."""
    try:
        serve()
    except KeyboardInterrupt:
        return 0