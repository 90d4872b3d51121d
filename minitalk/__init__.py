"""Send text between processes bit by bit over SIGUSR1 and SIGUSR2, with string, memory and formatting helpers."""

__version__ = "0.1.0"
__all__ = [
    "ascii",
    "client",
    "convert",
    "linkedlist",
    "memory",
    "output",
    "printf",
    "protocol",
    "server",
    "strings",
]