"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a one-character
string. Only the ASCII ranges are recognised; codes outside them are never
letters, digits or printable.
"""

from __future__ import annotations

from typing import overload

_UPPER_A, _UPPER_Z = ord("A"), ord("Z")
_LOWER_A, _LOWER_Z = ord("a"), ord("z")
_DIGIT_0, _DIGIT_9 = ord("0"), ord("9")
_CASE_OFFSET = _LOWER_A - _UPPER_A


def _code(c: int | str) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, bool):
        raise TypeError("expected an int code or a one-character string, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(
        f"expected an int code or a one-character string, got {type(c).__name__}"
    )


def _is_upper(code: int) -> bool:
    return _UPPER_A <= code <= _UPPER_Z


def _is_lower(code: int) -> bool:
    return _LOWER_A <= code <= _LOWER_Z


def isalpha(c: int | str) -> bool:
    """Return True if ``c`` is an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def isdigit(c: int | str) -> bool:
    """Return True if ``c`` is an ASCII decimal digit."""
    return _DIGIT_0 <= _code(c) <= _DIGIT_9


def isalnum(c: int | str) -> bool:
    """Return True if ``c`` is an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """Return True if ``c`` lies in the ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """Return True if ``c`` is printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


@overload
def toupper(c: int) -> int: ...
@overload
def toupper(c: str) -> str: ...


def toupper(c: int | str) -> int | str:
    """Map an ASCII lowercase letter to uppercase; return anything else unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


@overload
def tolower(c: int) -> int: ...
@overload
def tolower(c: str) -> str: ...


def tolower(c: int | str) -> int | str:
    """Map an ASCII uppercase letter to lowercase; return anything else unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _is_upper(code):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code