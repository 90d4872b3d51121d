# minitalk

minitalk carries text from one process to another using only two POSIX
signals. The client sends each byte of the message as eight bits, least
significant bit first. SIGUSR1 stands for a 0 bit and SIGUSR2 for a 1 bit. A
NUL byte marks the end of the message. The server puts the bits back
together, writes each byte to standard output as soon as it is complete, and
sends SIGUSR2 to the client when the NUL byte arrives. The client then
prints `Message recu` and exits.

Text is sent as UTF-8, so any character can be carried.

## Requirements

The package runs on POSIX systems only, because it uses SIGUSR1 and SIGUSR2.
The server waits for signals with `signal.sigwaitinfo`, which Python does not
provide on macOS, so the server needs Linux or another system that has it.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

Start the server in one terminal. It prints its process id:

```
minitalk-server
Server PID: 12345
```

Send a message from another terminal:

```
minitalk-client 12345 "hello there"
```

The server prints `hello there` followed by a newline. The client appends
that newline to every message before sending it. It waits 0.8 ms between
signals, then waits for the server's acknowledgement and exits with status 0.

The client exits with status 1 if it is not given exactly two arguments, a
PID and a message (it prints a usage line), or if the PID is not a positive
number or the signals cannot be delivered (it prints an error to standard
error). The PID is read the way C's `atoi` reads a number, so trailing
non-digits are ignored.

The server runs until it is interrupted with Ctrl-C.

## Library

The encoding and decoding work without any signals:

```python
from minitalk.protocol import Decoder, encode_message

bits = encode_message("hi")   # 8 bits per byte, LSB first, then 8 zero bits
decoder = Decoder()
received = bytearray()
for bit in bits:
    byte = decoder.feed(bit)  # an int after every eighth bit, otherwise None
    if byte is not None:
        received.append(byte)
# received == b"hi\x00"
```

`Decoder.pending` tells how many bits of the current byte have arrived.
`feed` raises `ValueError` for anything other than 0 or 1.

`minitalk.client.send_message(pid, message, delay=0.0008)` sends a message
to a running server, and `minitalk.server.serve(stream=None)` runs the server
loop, writing to a binary stream of your choice.

The package also includes a few helper modules:

- `minitalk.ascii`: ASCII character tests and case changes (`is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`).
  Each accepts a one-character string or an integer code.
- `minitalk.convert`: `atoi`, which parses leading decimal text and wraps to
  32 bits, and `itoa`, which renders a 32-bit signed integer.
- `minitalk.memory`: byte-buffer helpers (`memset`, `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove`) that work on `bytearray` and
  `bytes` objects and raise `ValueError` for counts that run past a buffer.
- `minitalk.strings`: string helpers (`split`, `strtrim`, `substr`,
  `strnstr`, `strchr`, `strrchr`, `strncmp`, `strlcpy`, `strlcat`, `strjoin`,
  `strmapi`, `striteri`). The search functions return an index or `None`,
  and `strlcpy` and `strlcat` return the resulting text together with the
  length they report.
- `minitalk.output`: writers (`put_char`, `put_str`, `put_endl`, `put_nbr`)
  for a text stream, standard output by default.
- `minitalk.printf`: a small formatter that understands `%c %s %p %d %i %u
  %x %X %%` (`format`, which returns the text, and `printf`, which writes it
  and returns the character count).
- `minitalk.linkedlist`: `LinkedList` and `Node`, a singly linked list with
  `push_front`, `push_back`, `last`, `iterate`, `map`, `clear`, `len()` and
  iteration.

## Limitations

- There is no per-bit acknowledgement. The client relies on the pause
  between signals; if the server falls behind, signals of the same kind can
  merge and the message arrives garbled.
- The server decodes one stream of bits. Two clients sending at the same
  time interleave their bits and corrupt both messages.
- Only the end of a whole message is acknowledged, and there is no
  retransmission.

## Running the tests

```
pytest
```