"""Byte-level operations on mutable buffers.

Buffers are any objects that support the buffer protocol (``bytearray``,
``memoryview``, ``array.array`` and the like). They are treated as flat
sequences of unsigned bytes, whatever their item type. A region that starts
partway into a buffer is passed as a slice of a ``memoryview``. A byte count
larger than the buffer raises ``ValueError``.
"""

from __future__ import annotations

import struct
import sys
from typing import TypeVar

_SIZE_MAX = (1 << (struct.calcsize("P") * 8)) - 1

BufferT = TypeVar("BufferT")


def _check_count(n: int, available: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > available:
        raise ValueError(f"byte count {n} exceeds the {available} bytes of {what}")


def _byte_view(buffer: object) -> memoryview:
    return memoryview(buffer).cast("B")  # type: ignore[arg-type]


def _writable_view(buffer: object) -> memoryview:
    view = _byte_view(buffer)
    if view.readonly:
        view.release()
        raise TypeError(f"{type(buffer).__name__} is not a writable buffer")
    return view


def memset(buffer: BufferT, value: int, n: int) -> BufferT:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` and return it.

    Only the low eight bits of ``value`` are used.
    """
    with _writable_view(buffer) as view:
        _check_count(n, len(view), "the buffer")
        view[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: object, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def _copy(dest: BufferT | None, src: object | None, n: int) -> BufferT | None:
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("dest and src must both be buffers")
    with _writable_view(dest) as target, _byte_view(src) as source:
        _check_count(n, len(target), "the destination")
        _check_count(n, len(source), "the source")
        if n:
            target[:n] = source[:n]
    return dest


def memcpy(dest: BufferT | None, src: object | None, n: int) -> BufferT | None:
    """Copy ``n`` bytes from ``src`` into ``dest`` and return ``dest``.

    When both ``dest`` and ``src`` are None, None is returned.
    """
    return _copy(dest, src, n)


def memmove(dest: BufferT | None, src: object | None, n: int) -> BufferT | None:
    """Copy ``n`` bytes from ``src`` into ``dest``, allowing the regions to overlap.

    Returns ``dest``; when both ``dest`` and ``src`` are None, None is returned.
    """
    return _copy(dest, src, n)


def memchr(buffer: object, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value`` in the first ``n`` bytes.

    Only the low eight bits of ``value`` are used. Returns None when the byte
    does not occur.
    """
    with _byte_view(buffer) as view:
        _check_count(n, len(view), "the buffer")
        index = view[:n].tobytes().find(value & 0xFF)
    return None if index < 0 else index


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes each.

    Raises ``MemoryError`` when either argument is the largest size value or
    the total does not fit in memory addressing.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == _SIZE_MAX or size == _SIZE_MAX:
        raise MemoryError(f"cannot allocate {count} elements of {size} bytes")
    total = count * size
    if total > sys.maxsize:
        raise MemoryError(f"cannot allocate {total} bytes")
    return bytearray(total)