import io

import pytest

from minitalk.printf import format, printf


def test_plain_text_unchanged():
    assert format("hello world") == "hello world"


@pytest.mark.parametrize("n", [0, 1, -1, 12345, -98765, 2147483647, -2147483648])
def test_decimal_round_trip(n):
    assert int(format("%d", n)) == n


@pytest.mark.parametrize("n", [0, 5, -5, 2147483647])
def test_i_matches_d(n):
    assert format("%i", n) == format("%d", n)


def test_decimal_wraps_to_int32():
    assert format("%d", 2**31) == "-2147483648"


@pytest.mark.parametrize("n", [1, 7, 1000])
def test_unsigned_wraps_negative(n):
    assert int(format("%u", -n)) + n == 2**32


@pytest.mark.parametrize("n", [0, 10, 255, 4096, 0xDEADBEEF])
def test_hex_round_trip(n):
    lower = format("%x", n)
    upper = format("%X", n)
    assert int(lower, 16) == n
    assert upper.lower() == lower
    assert lower == lower.lower()


def test_pointer_nil():
    assert format("%p", None) == "(nil)"
    assert format("%p", 0) == "(nil)"


@pytest.mark.parametrize("address", [1, 0x7FFF1234, 0xFFFFFFFFFFFF])
def test_pointer_round_trip(address):
    text = format("%p", address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address


def test_char_from_string_and_code():
    assert format("%c", "A") == "A"
    assert format("%c", ord("A")) == format("%c", "A")


def test_string_conversion():
    assert format("<%s>", "abc") == "<abc>"


def test_string_none_raises():
    with pytest.raises(TypeError):
        format("%s", None)


def test_percent_escape():
    assert format("100%%") == "100%"


def test_trailing_percent_is_literal():
    assert format("50%") == "50%"


def test_unknown_conversion_prints_nothing_but_counts():
    buf = io.StringIO()
    count = printf("a%zb", stream=buf)
    assert buf.getvalue() == "ab"
    assert count == 3


def test_not_enough_arguments():
    with pytest.raises(TypeError):
        format("%d %d", 1)


@pytest.mark.parametrize(
    "template, args",
    [
        ("%d and %s", (42, "text")),
        ("%c%c%c", ("x", "y", "z")),
        ("%p|%p", (None, 0xABC)),
        ("%u %x %X %%", (-3, 255, 255)),
        ("Usage: %s <PID> <message>\n", ("client",)),
    ],
)
def test_printf_count_matches_output(template, args):
    buf = io.StringIO()
    count = printf(template, *args, stream=buf)
    assert buf.getvalue() == format(template, *args)
    assert count == len(buf.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s-%d", "id", 9)
    out = capsys.readouterr().out
    assert out == format("%s-%d", "id", 9)
    assert count == len(out)