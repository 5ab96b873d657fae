"""String operations with C string semantics.

A string ends at its first NUL character (``"\\0"``) if it holds one;
anything after it is ignored. Searches return an index into the string
rather than a pointer, and None where nothing is found. Sizes and lengths
are counts of characters and must not be negative.
"""

from __future__ import annotations

from itertools import zip_longest

_NUL = "\0"


def _terminated(s: str) -> str:
    """Return ``s`` up to, not including, its first NUL character."""
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _check_count(n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def _as_char(c: int | str) -> str:
    """Return the single character that ``c`` stands for.

    Only the low eight bits of an integer are used.
    """
    if isinstance(c, bool):
        raise TypeError("expected an int code or a one-character string, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(
        f"expected an int code or a one-character string, got {type(c).__name__}"
    )


def strlen(s: str) -> int:
    """Return the number of characters before the terminating NUL."""
    return len(_terminated(s))


def strlcpy(src: str, size: int) -> tuple[str | None, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the buffer's new content, at most ``size - 1`` characters, and the
    length of ``src``. When ``size`` is 0 nothing is written and the content
    is None.
    """
    _check_count(size, "size")
    text = _terminated(src)
    if size == 0:
        return None, len(text)
    return text[: size - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` held in a buffer of ``size`` characters.

    Returns the buffer's new content and the length of the string the call
    tried to create. When ``dst`` already fills the buffer it is returned
    unchanged and the length is ``size`` plus the length of ``src``.
    """
    _check_count(size, "size")
    head = _terminated(dst)
    tail = _terminated(src)
    dst_len = min(len(head), size)
    if dst_len >= size:
        return dst, size + len(tail)
    room = size - dst_len - 1
    return head + tail[:room], dst_len + len(tail)


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL yields the index of the terminator.
    """
    text = _terminated(s)
    char = _as_char(c)
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL yields the index of the terminator.
    """
    text = _terminated(s)
    char = _as_char(c)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first pair of differing character codes,
    or 0 when the compared parts are equal.
    """
    _check_count(n, "n")
    pairs = zip_longest(_terminated(s1)[:n], _terminated(s2)[:n], fillvalue=_NUL)
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of ``needle`` within the first ``length`` characters.

    The whole of ``needle`` must lie within that span. An empty needle is
    found at index 0; None is returned when there is no match.
    """
    _check_count(length, "length")
    target = _terminated(needle)
    if not target:
        return 0
    index = _terminated(haystack)[:length].find(target)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its terminator."""
    return "".join(_terminated(s))


def substr(s: str | None, start: int, length: int) -> str | None:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end gives an empty string; None gives None.
    """
    if s is None:
        return None
    _check_count(start, "start")
    _check_count(length, "length")
    text = _terminated(s)
    if start >= len(text):
        return ""
    return text[start : start + length]