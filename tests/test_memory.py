import pytest

from ftkit.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix():
    buffer = bytearray(b"ABCDEFGHIJ")
    result = memset(buffer, 97, 3)
    assert result is buffer
    assert buffer == bytearray(b"aaaDEFGHIJ")


def test_memset_uses_low_byte():
    buffer = bytearray(4)
    memset(buffer, 0x1FF, 4)
    assert buffer == bytearray(b"\xff" * 4)


def test_memset_too_long_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero():
    buffer = bytearray(b"ABCDEFGHIJ")
    bzero(buffer, 3)
    assert buffer[:3] == bytearray(3)
    assert buffer[3:] == bytearray(b"DEFGHIJ")


def test_memcpy_copies_prefix():
    src = b"SourceEEEEEEEE"
    dest = bytearray(b"ABCDEFGHIJ")
    result = memcpy(dest, src, 10)
    assert result is dest
    assert dest == bytearray(src[:10])


def test_memcpy_partial_keeps_rest():
    dest = bytearray(b"ABCDEFGHIJ")
    memcpy(dest, b"xyz", 2)
    assert dest[:2] == bytearray(b"xy")
    assert dest[2:] == bytearray(b"CDEFGHIJ")


def test_memcpy_too_long_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"abc", 4)


def test_memmove_forward_overlap():
    original = b"abcdefgh"
    buffer = bytearray(original)
    memmove(buffer, 2, 0, 4)
    assert buffer[2:6] == original[0:4]
    assert buffer[:2] == original[:2]
    assert buffer[6:] == original[6:]


def test_memmove_backward_overlap():
    original = b"abcdefgh"
    buffer = bytearray(original)
    memmove(buffer, 0, 3, 5)
    assert buffer[0:5] == original[3:8]
    assert buffer[5:] == original[5:]


def test_memmove_same_offset_or_zero_length_is_noop():
    buffer = bytearray(b"abcdef")
    memmove(buffer, 2, 2, 3)
    memmove(buffer, 0, 4, 0)
    assert buffer == bytearray(b"abcdef")


def test_memmove_past_end_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(6), 4, 0, 3)


def test_memchr_finds_first_occurrence():
    data = b"me voy a caer de la mesa"
    assert memchr(data, ord("d"), 17) == data.index(b"d")


def test_memchr_respects_length():
    data = b"me voy a caer de la mesa"
    assert memchr(data, ord("d"), 5) is None


def test_memchr_compares_low_byte():
    data = b"\x00\xff\x01"
    assert memchr(data, 0x1FF, 3) == 1


def test_memcmp_equal_prefix():
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"same", b"same", 4) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_antisymmetric():
    first, second = b"hello", b"help!"
    assert memcmp(first, second, 5) == -memcmp(second, first, 5)


def test_calloc_zero_filled():
    buffer = calloc(3, 4)
    assert len(buffer) == 3 * 4
    assert buffer == bytearray(len(buffer))


def test_calloc_size_max_raises():
    with pytest.raises(MemoryError):
        calloc(1, SIZE_MAX)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)