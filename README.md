# ftlib

Small, dependency-free helpers that behave like the classic C character,
memory and string routines, expressed with Python types: characters are
integer codes or one-character strings, buffers are `bytearray` and other
writable buffer objects, strings are `str`, and searches return indices or
`None` instead of pointers.

## Installation

```
pip install .
```

## Modules

### `ftlib.chars`

ASCII classification and case conversion. Each function takes an integer
code or a one-character string; anything longer raises `ValueError`, and
other types (including `bool`) raise `TypeError`.

- `isalpha`, `isdigit`, `isalnum`, `isascii` (0..127), `isprint` (space
  through `~`) return `bool`. Only ASCII ranges count.
- `toupper` and `tolower` change ASCII letters only and return a value of the
  same type as the argument.

### `ftlib.convert`

- `atoi(text)` skips leading ASCII whitespace, accepts one optional `+` or
  `-`, and reads digits up to the first non-digit. Text with no leading
  number gives `0`. The result is a Python `int` and is not limited in size.

### `ftlib.memory`

Operations on objects that support the buffer protocol, viewed as flat
unsigned bytes. A byte count larger than the buffer, or negative, raises
`ValueError`; a read-only destination raises `TypeError`. To work on part of a
buffer, pass a slice of a `memoryview`.

- `memset(buffer, value, n)` fills the first `n` bytes with the low eight bits
  of `value` and returns `buffer`.
- `bzero(buffer, n)` sets the first `n` bytes to zero.
- `memcpy(dest, src, n)` and `memmove(dest, src, n)` copy `n` bytes and return
  `dest`; overlapping regions are copied correctly. If both `dest` and `src`
  are `None`, `None` is returned.
- `memchr(buffer, value, n)` returns the index of the first matching byte in
  the first `n` bytes, or `None`.
- `calloc(count, size)` returns a zero-filled `bytearray` of `count * size`
  bytes. It raises `MemoryError` when either argument equals the platform's
  largest size value or the total is too large, and `ValueError` for negative
  arguments.

### `ftlib.strings`

String routines with C semantics: a string ends at its first `"\0"`, and
anything after it is ignored. Negative sizes and lengths raise `ValueError`.

- `strlen(s)` — length up to the terminator.
- `strlcpy(src, size)` — returns `(content, len(src))`, where `content` holds
  at most `size - 1` characters, or is `None` when `size` is 0.
- `strlcat(dst, src, size)` — returns `(content, attempted_length)`. When
  `dst` already fills the buffer it comes back unchanged and the length is
  `size + len(src)`.
- `strchr(s, c)` / `strrchr(s, c)` — index of the first / last `c`, or `None`.
  Searching for `"\0"` (or `0`) gives the index of the terminator. An integer
  `c` uses its low eight bits.
- `strncmp(s1, s2, n)` — difference of the first differing character codes
  within `n` characters, or `0`.
- `strnstr(haystack, needle, length)` — index of `needle` lying wholly within
  the first `length` characters, `0` for an empty needle, otherwise `None`.
- `strdup(s)` — copy of `s` up to its terminator.
- `substr(s, start, length)` — up to `length` characters from `start`; `""`
  when `start` is at or past the end, `None` when `s` is `None`.

## Example

```python
from ftlib.chars import isalpha, toupper
from ftlib.convert import atoi
from ftlib.memory import calloc, memchr, memset
from ftlib.strings import strchr, strlcat, strlcpy, strncmp, substr

isalpha("B")                    # True
toupper("a")                    # "A"
toupper(ord("a"))               # 65
atoi("   -12345abc")            # -12345

buf = calloc(4, 2)              # bytearray(8)
memset(buf, ord("A"), 3)        # bytearray(b"AAA\x00\x00\x00\x00\x00")
memchr(buf, 0, 8)               # 3

strlcpy("Hello, world!", 6)     # ("Hello", 13)
strlcat("Hello, ", "world!", 100)  # ("Hello, world!", 13)
strchr("Hello World", "l")      # 2
substr("Hello World", 6, 5)     # "World"
strncmp("Hello", "Helpful", 3)  # 0
```

## Scope

This is a library only: it has no command-line interface, and it offers only
the routines listed above.

## Running the tests

```
pip install .[test]
pytest
```