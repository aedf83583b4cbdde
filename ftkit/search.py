"""Length, character search, comparison and substring search on NUL-terminated text.

Text is a ``str``. As with C strings, it ends at the first NUL character,
if it has one.
"""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[int, str]

NUL = "\0"


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _terminated(text: str) -> str:
    end = text.find(NUL)
    return text if end < 0 else text[:end]


def strlen(text: str) -> int:
    """Number of characters before the first NUL (or the whole length)."""
    return len(_terminated(text))


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of *c*, or None.

    Searching for NUL finds the terminator, at index ``strlen(text)``.
    """
    target = chr(_code(c) & 0xFF)
    body = _terminated(text)
    if target == NUL:
        return len(body)
    index = body.find(target)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of *c*, or None.

    Searching for NUL finds the terminator, at index ``strlen(text)``.
    """
    target = chr(_code(c) & 0xFF)
    body = _terminated(text)
    if target == NUL:
        return len(body)
    index = body.rfind(target)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters.

    Returns the difference of the character codes at the first mismatch,
    or 0 when the compared parts are equal. A string that ends early
    compares as if followed by NUL.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    a = _terminated(first)[:n]
    b = _terminated(second)[:n]
    for x, y in zip(a.ljust(len(b), NUL), b.ljust(len(a), NUL)):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first *needle* lying wholly within haystack[:length], or None.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    target = _terminated(needle)
    if not target:
        return 0
    body = _terminated(haystack)
    limit = min(length, len(body))
    index = body.find(target, 0, limit)
    return None if index < 0 else index