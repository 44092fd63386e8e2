"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

INT_MIN = -2147483648
INT_MAX = 2147483647

_SPACES = frozenset(" \t\n\v\f\r")


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % (1 << 32) + INT_MIN


def atoi(text: str) -> int:
    """Parse leading whitespace, an optional sign and digits; the result wraps to 32 bits.

    Parsing stops at the first character that is not a digit; no digits gives 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _SPACES:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    total = 0
    while pos < length and "0" <= text[pos] <= "9":
        total = total * 10 + (ord(text[pos]) - 48)
        pos += 1
    return _wrap_int32(total * sign)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit integer")
    return str(n)