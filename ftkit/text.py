"""String building and conversion helpers: numbers, splitting, joining, trimming.

Text is a ``str`` that, as with C strings, ends at its first NUL character,
if it has one.
"""

from __future__ import annotations

import re
from typing import Callable, List, MutableSequence, Optional, Tuple

from ftkit.search import strlen

NUL = "\0"

_LEADING_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _body(text: str) -> str:
    return text[:strlen(text)]


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def atoi(text: str) -> int:
    """The integer at the start of *text*.

    Leading whitespace is skipped, one optional sign is read, then decimal
    digits up to the first non-digit. Without digits the result is 0.
    """
    match = _LEADING_NUMBER.match(_body(text))
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Decimal representation of the integer *n*."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def split(text: str, sep: str) -> List[str]:
    """The non-empty words of *text* separated by runs of the character *sep*."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise TypeError(f"separator must be a single character, got {sep!r}")
    return [word for word in _body(text).split(sep) if word]


def strjoin(first: str, second: str) -> str:
    """*first* followed by *second*."""
    return _body(first) + _body(second)


def strtrim(text: str, charset: str) -> str:
    """*text* with every leading and trailing character found in *charset* removed."""
    return _body(text).strip(_body(charset))


def substr(text: str, start: int, length: int) -> str:
    """At most *length* characters of *text* from index *start*.

    A start at or past the end gives an empty string.
    """
    _check_size("start", start)
    _check_size("length", length)
    body = _body(text)
    if start >= len(body):
        return ""
    return body[start:start + length]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string of func(index, char) for each character of *text*."""
    return "".join(func(index, char) for index, char in enumerate(_body(text)))


def striteri(
    chars: MutableSequence[str],
    func: Callable[[int, str], Optional[str]],
) -> MutableSequence[str]:
    """Call func(index, char) on each character of *chars*, in place.

    A character returned by *func* replaces the one at that index; None
    leaves it as it was. Iteration ends at the first NUL, including one
    that *func* writes.
    """
    for index, char in enumerate(chars):
        if char == NUL:
            break
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement
            if replacement == NUL:
                break
    return chars


def strdup(text: str) -> str:
    """A copy of *text* up to its terminator."""
    return str(_body(text))


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy *src* into a buffer of *size* characters, terminator included.

    Returns the copied text (at most size - 1 characters, empty when
    *size* is 0) and the full length of *src*; a length not below *size*
    means the copy was cut short.
    """
    _check_size("size", size)
    body = _body(src)
    return body[:max(size - 1, 0)], len(body)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append *src* to *dest* within a buffer of *size* characters, terminator included.

    Returns the resulting text and the length it tried to create:
    min(len(dest), size) + len(src). Nothing is appended when *dest*
    already fills the buffer.
    """
    _check_size("size", size)
    head = _body(dest)
    tail = _body(src)
    result = head
    if size > 0 and len(head) < size - 1:
        result = head + tail[:size - 1 - len(head)]
    return result, min(len(head), size) + len(tail)