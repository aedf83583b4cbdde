"""Byte-buffer operations over bytes-like objects and bytearrays."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"length {n} exceeds buffer size {len(buffer)}")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first *length* bytes of *buffer* with the low byte of *value*."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Zero the first *length* bytes of *buffer*."""
    return memset(buffer, 0, length)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy *n* bytes from *src* to the start of *dest*."""
    _check_length(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy *n* bytes within *buffer*, correct even when the regions overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n)
    if max(dest_offset, src_offset) + n > len(buffer):
        raise ValueError("region runs past the end of the buffer")
    if dest_offset != src_offset and n:
        buffer[dest_offset:dest_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of *value* in data[:n], or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Compare the first *n* bytes; return the difference at the first mismatch, else 0."""
    _check_length(n, first, second)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of *count* elements of *size* bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size == SIZE_MAX:
        raise MemoryError("element size too large")
    return bytearray(count * size)