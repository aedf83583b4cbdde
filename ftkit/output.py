"""Writing characters, strings and integers to a text stream.

The stream defaults to standard output, looked up at call time.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from ftkit.search import strlen

CharLike = Union[int, str]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def put_char(c: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write one character; an integer code is reduced to its low byte."""
    _target(stream).write(_char(c))


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write *s* up to its first NUL; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s[:strlen(s)])


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write *s* followed by a newline; None writes nothing at all."""
    if s is None:
        return
    put_str(s, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal representation of the integer *n*."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _target(stream).write(str(n))