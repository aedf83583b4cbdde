# ftkit

Small helpers for characters, byte buffers, strings, linked lists and
printf-style formatting. Their behaviour is exact and documented, down to
edge cases.

Text arguments are ordinary `str` values. Most string functions treat the
first NUL character (`"\0"`) as the end of the text, so `strlen("ab\0cd")`
is `2`. Search functions return indices, or `None` where nothing is found.

## Modules

### `ftkit.chars`

ASCII classification and case mapping. Each function takes an integer code
or a one-character string; anything else raises `TypeError`.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` (codes 0–127),
  `is_print` (space through `~`), `is_sign` (`+` or `-`).
- `to_upper`, `to_lower`: convert an ASCII letter and return a value of the
  same kind as the argument (`int` in, `int` out; `str` in, `str` out).
  Other values come back unchanged.
- `nb_abs(nb)`: absolute value of an integer.

### `ftkit.memory`

Operations on `bytes` and `bytearray`. A negative length, or a length larger
than a buffer, raises `ValueError`.

- `memset(buffer, value, length)`: fill the first `length` bytes with the low
  byte of `value`; returns the buffer.
- `bzero(buffer, length)`: zero the first `length` bytes.
- `memcpy(dest, src, n)`: copy `n` bytes from `src` to the start of `dest`.
- `memmove(buffer, dest_offset, src_offset, n)`: copy `n` bytes within one
  buffer, correct when the regions overlap.
- `memchr(data, value, n)`: index of the first matching byte in `data[:n]`,
  or `None`.
- `memcmp(first, second, n)`: difference of the first mismatching bytes, or
  `0`.
- `calloc(count, size)`: a zero-filled `bytearray` of `count * size` bytes.

### `ftkit.search`

- `strlen(text)`: characters before the first NUL.
- `strchr(text, c)`, `strrchr(text, c)`: index of the first / last
  occurrence of `c`, or `None`. Searching for NUL returns `strlen(text)`.
- `strncmp(first, second, n)`: compare at most `n` characters; returns the
  difference of the codes at the first mismatch, or `0`.
- `strnstr(haystack, needle, length)`: index of the first `needle` lying
  wholly within `haystack[:length]`, or `None`; an empty needle gives `0`.

### `ftkit.lists`

`Node` holds `content` and `next`. `LinkedList` keeps a `head` node and can
be built from any iterable:

- `push_front(content)`, `push_back(content)`: add a node and return it.
- `last()`: the last node, or `None`.
- `len(...)` and iteration over the contents.
- `clear(delete=None)`: empty the list, calling `delete` on each content.
- `iterate(func)`: call `func` on each content in order.
- `map(func, delete=None)`: a new list of `func(content)`. If `func` raises,
  the contents produced so far are passed to `delete` and the error
  propagates.

### `ftkit.text`

- `atoi(text)`: skip leading whitespace, read one optional sign and the
  decimal digits that follow; `0` when there are none.
- `itoa(n)`: decimal representation of an integer.
- `split(text, sep)`: the non-empty words between runs of the single
  character `sep`.
- `strjoin(first, second)`, `strdup(text)`.
- `strtrim(text, charset)`: strip leading and trailing characters found in
  `charset`.
- `substr(text, start, length)`: at most `length` characters from `start`;
  empty when `start` is at or past the end.
- `strmapi(text, func)`: a new string of `func(index, char)`.
- `striteri(chars, func)`: call `func(index, char)` over a mutable sequence
  of characters; a returned character replaces the one at that index, and
  the walk stops at the first NUL.
- `strlcpy(src, size)`: returns `(copied_text, len(src))`, the copy holding
  at most `size - 1` characters.
- `strlcat(dest, src, size)`: returns `(result, min(len(dest), size) +
  len(src))`; nothing is appended when `dest` already fills the buffer.

### `ftkit.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream,
standard output by default. `put_str` and `put_endl` write nothing for
`None`; an integer given to `put_char` is reduced to its low byte.

### `ftkit.printf`

`sprintf(fmt, *args)` returns formatted text; `printf(fmt, *args,
stream=None)` writes it and returns the number of characters written.
Supported conversions: `%c %s %p %d %i %u %x %X %%`.

- `%d` and `%i` print the argument as a signed 32-bit integer; `%u`, `%x`
  and `%X` as an unsigned 32-bit one; `%p` as `0x` followed by lower-case
  hex of a 64-bit address (`None` is `0x0`).
- `%s` with `None` prints `(null)`.
- An unsupported conversion letter prints nothing and takes no argument; a
  `%` at the very end is dropped. Too few arguments raise `TypeError`.
- `format_hex(num, upper=False)`, `format_pointer(address)` and
  `format_unsigned(n)` expose the individual conversions.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftkit.text import atoi, itoa, split
from ftkit.printf import sprintf
from ftkit.lists import LinkedList

atoi("  -42abc")          # -42
itoa(-2147483648)         # "-2147483648"
split("a..b.c", ".")      # ["a", "b", "c"]

sprintf("%d items, %x hex, %s", 3, 255, None)
# "3 items, ff hex, (null)"

items = LinkedList()
items.push_back(1)
items.push_back(2)
items.push_front(0)
list(items)               # [0, 1, 2]
len(items)                # 3
doubled = items.map(lambda x: x * 2, None)
list(doubled)             # [0, 2, 4]
```

## What it does not do

ftkit is a library only: it has no command-line tool. Output goes to Python
text streams rather than to raw file descriptors, and the formatter supports
no flags, widths or precisions.