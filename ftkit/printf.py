"""A small printf supporting %c %s %p %d %i %u %x %X and %%.

Numeric arguments are reduced the way C passes them: %d and %i as signed
32-bit integers, %u %x %X as unsigned 32-bit, %p as an unsigned 64-bit
address. A conversion letter that is not supported prints nothing and
takes no argument. The format ends at its first NUL, if it has one.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

from ftkit.search import strlen

_UINT_BITS = 32
_UINT_MASK = (1 << _UINT_BITS) - 1
_POINTER_MASK = (1 << 64) - 1
NULL_TEXT = "(null)"


def _require_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} expects an int, got {type(value).__name__}")
    return value


def _to_int32(n: int) -> int:
    n &= _UINT_MASK
    return n - (1 << _UINT_BITS) if n >= 1 << (_UINT_BITS - 1) else n


def format_hex(num: int, upper: bool = False) -> str:
    """Hexadecimal digits of *num* as an unsigned 32-bit value."""
    num = _require_int(num, "X" if upper else "x")
    return format(num & _UINT_MASK, "X" if upper else "x")


def format_pointer(address: Optional[int]) -> str:
    """An address as '0x' and lower-case hex digits; None is the null address."""
    if address is None:
        address = 0
    address = _require_int(address, "p")
    return "0x" + format(address & _POINTER_MASK, "x")


def format_unsigned(n: int) -> str:
    """Decimal digits of *n* as an unsigned 32-bit value."""
    return str(_require_int(n, "u") & _UINT_MASK)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return NULL_TEXT
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value[:strlen(value)]


_CONVERSIONS = {
    "c": _format_char,
    "s": _format_str,
    "p": format_pointer,
    "d": lambda value: str(_to_int32(_require_int(value, "d"))),
    "i": lambda value: str(_to_int32(_require_int(value, "i"))),
    "u": format_unsigned,
    "x": lambda value: format_hex(value, False),
    "X": lambda value: format_hex(value, True),
}


def _pieces(fmt: str, args: Iterator[Any]) -> Iterator[str]:
    chars = iter(fmt[:strlen(fmt)])
    for char in chars:
        if char != "%":
            yield char
            continue
        conversion = next(chars, None)
        if conversion is None:
            return
        if conversion == "%":
            yield "%"
            continue
        handler = _CONVERSIONS.get(conversion)
        if handler is None:
            continue
        try:
            value = next(args)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{conversion}") from None
        yield handler(value)


def sprintf(fmt: str, *args: Any) -> str:
    """The text that *fmt* and *args* produce."""
    return "".join(_pieces(fmt, iter(args)))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to *stream* (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)