import io

import pytest

from ftkit.printf import format_hex, format_pointer, format_unsigned, printf, sprintf


@pytest.mark.parametrize("n", [1, 15, 16, 255, 4096, 0xDEADBEEF])
def test_format_hex_round_trip(n):
    assert int(format_hex(n, False), 16) == n


@pytest.mark.parametrize("n", [10, 171, 0xCAFE])
def test_format_hex_upper_matches_lower(n):
    lower = format_hex(n, False)
    assert format_hex(n, True) == lower.upper()
    assert lower == lower.lower()


def test_format_hex_zero():
    assert format_hex(0, False) == "0"


def test_format_hex_negative_wraps():
    assert int(format_hex(-1, False), 16) == 2**32 - 1


def test_format_pointer_null():
    assert format_pointer(0) == "0x0"
    assert format_pointer(None) == "0x0"


@pytest.mark.parametrize("address", [1, 0x7FFF0000, 2**48 + 5])
def test_format_pointer_round_trip(address):
    text = format_pointer(address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address


def test_format_unsigned_wraps():
    assert int(format_unsigned(-1)) == 2**32 - 1
    assert format_unsigned(0) == "0"


def test_format_unsigned_plain():
    assert format_unsigned(12345) == "12345"


def test_sprintf_plain_text():
    assert sprintf("just text") == "just text"


def test_sprintf_string_and_null():
    assert sprintf("[%s]", "abc") == "[abc]"
    assert sprintf("%s", None) == "(null)"


def test_sprintf_char():
    assert sprintf("%c%c", ord("h"), "i") == "hi"


@pytest.mark.parametrize("n", [0, -5, 123, -2147483648, 2147483647])
def test_sprintf_decimal_round_trip(n):
    assert int(sprintf("%d", n)) == n
    assert sprintf("%i", n) == sprintf("%d", n)


def test_sprintf_decimal_wraps_to_int32():
    assert int(sprintf("%d", 2**31)) == -(2**31)


def test_sprintf_unsigned_and_hex():
    assert int(sprintf("%u", -1)) == 2**32 - 1
    assert int(sprintf("%x", 3054), 16) == 3054
    assert sprintf("%X", 3054) == sprintf("%x", 3054).upper()


def test_sprintf_pointer():
    assert sprintf("%p", None) == "0x0"
    assert int(sprintf("%p", 4096)[2:], 16) == 4096


def test_sprintf_percent_takes_no_argument():
    assert sprintf("100%% %d", 7) == "100% 7"


def test_sprintf_unknown_conversion_prints_nothing():
    assert sprintf("a%qb%d", 3) == "ab3"


def test_sprintf_trailing_percent_dropped():
    assert sprintf("abc%") == "abc"


def test_sprintf_stops_at_nul():
    assert sprintf("ab\0%d", 1) == "ab"


def test_sprintf_too_few_arguments():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_sprintf_wrong_argument_type():
    with pytest.raises(TypeError):
        sprintf("%d", "nine")
    with pytest.raises(TypeError):
        sprintf("%s", 9)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s=%d%c", "x", 10, "!", stream=stream)
    assert stream.getvalue() == "x=10!"
    assert count == len("x=10!")


def test_printf_count_matches_sprintf():
    stream = io.StringIO()
    count = printf("%p %u %X", 255, 99, 48879, stream=stream)
    assert stream.getvalue() == sprintf("%p %u %X", 255, 99, 48879)
    assert count == len(stream.getvalue())


def test_printf_default_stdout(capsys):
    count = printf("%s", None)
    assert capsys.readouterr().out == "(null)"
    assert count == 6