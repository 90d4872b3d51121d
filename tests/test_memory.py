import pytest

from minitalk.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buf = bytearray(b"hello world")
    result = memset(buf, ord("x"), 5)
    assert result is buf
    assert buf[:5] == b"x" * 5
    assert buf[5:] == b" world"


def test_memset_masks_value():
    buf = bytearray(3)
    memset(buf, 0x100 + ord("z"), 3)
    assert buf == b"zzz"


def test_memset_too_long():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero():
    buf = bytearray(b"abcdef")
    assert bzero(buf, 4) is buf
    assert buf[:4] == bytes(4)
    assert buf[4:] == b"ef"


@pytest.mark.parametrize("count,size", [(0, 0), (3, 4), (10, 1), (0, 9)])
def test_calloc_zeroed(count, size):
    buf = calloc(count, size)
    assert len(buf) == count * size
    assert all(byte == 0 for byte in buf)


def test_calloc_overflow():
    with pytest.raises(MemoryError):
        calloc(SIZE_MAX, 2)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first():
    data = b"banana"
    index = memchr(data, ord("n"), len(data))
    assert data[index] == ord("n")
    assert ord("n") not in data[:index]


def test_memchr_respects_count():
    assert memchr(b"banana", ord("n"), 2) is None
    assert memchr(b"xa", 0x100 + ord("a"), 2) == 1


def test_memcmp_equal_and_sign():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_unsigned():
    assert memcmp(b"\x80", b"\x00", 1) > 0


def test_memcpy_copies_prefix():
    dest = bytearray(b"..........")
    result = memcpy(dest, b"source", 6)
    assert result is dest
    assert dest[:6] == b"source"
    assert dest[6:] == b"...."


def test_memcpy_size_too_large():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"abc", 4)


def test_memmove_overlap_forward():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 2, 0, 4)
    assert buf[2:6] == original[0:4]
    assert buf[:2] == original[:2]


def test_memmove_overlap_backward():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 0, 2, 4)
    assert buf[0:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memmove_zero_count_is_noop():
    buf = bytearray(b"abc")
    assert memmove(buf, 1, 0, 0) == b"abc"


def test_memmove_out_of_bounds():
    with pytest.raises(ValueError):
        memmove(bytearray(b"abc"), 2, 0, 2)
    with pytest.raises(ValueError):
        memmove(bytearray(b"abc"), -1, 0, 1)