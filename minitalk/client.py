"""Client that sends a message to the server one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Optional, Sequence, Union

from minitalk.convert import atoi
from minitalk.printf import printf
from minitalk.protocol import encode_message

__all__ = ["send_message", "main"]

DEFAULT_DELAY = 0.0008


class _Acknowledged(Exception):
    """Raised from the signal handler when the server confirms receipt."""


def _on_acknowledge(signum: int, frame: object) -> None:
    raise _Acknowledged


def send_message(
    pid: int, message: Union[str, bytes], delay: float = DEFAULT_DELAY
) -> None:
    """Signal every bit of message, NUL-terminated, to process pid.

    SIGUSR1 carries a 0 bit and SIGUSR2 a 1 bit; delay seconds pass
    between signals.
    """
    if pid <= 0:
        raise ValueError(f"invalid process id: {pid}")
    for bit in encode_message(message):
        os.kill(pid, signal.SIGUSR2 if bit else signal.SIGUSR1)
        time.sleep(delay)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Send a message to the server and wait for its acknowledgement."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "client"
        printf("Usage: %s <PID> <message>\n", prog)
        return 1
    pid = atoi(args[0])
    message = args[1] + "\n"
    previous = signal.signal(signal.SIGUSR2, _on_acknowledge)
    try:
        send_message(pid, message)
        while True:
            signal.pause()
    except _Acknowledged:
        printf("Message recu\n")
        return 0
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    finally:
        signal.signal(signal.SIGUSR2, previous)