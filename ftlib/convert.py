"""Conversion of text to integers."""

from __future__ import annotations

import re

_LEADING_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def atoi(text: str) -> int:
    """Parse the leading integer of ``text``.

    Leading ASCII whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first character that is not an ASCII digit. Text
    without a leading number yields 0.
    """
    match = _LEADING_INTEGER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value