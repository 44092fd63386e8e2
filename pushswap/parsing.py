"""Reading the numbers to sort from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.libft.conversion import INT_MAX, INT_MIN
from pushswap.libft.strings import split

_SPACES = frozenset(" \t\n\v\f\r")
_ALLOWED = frozenset("0123456789-+ ")


class ParseError(ValueError):
    """The arguments do not describe a list of distinct 32-bit integers."""


def atol(text: str) -> int:
    """Parse leading whitespace, an optional sign and digits.

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
    return total * sign


def join_arguments(args: Iterable[str]) -> str:
    """Concatenate the arguments, each followed by a single space."""
    return "".join(f"{arg} " for arg in args)


def parse_numbers(args: Sequence[str]) -> list[int]:
    """Return the integers named by ``args``.

    Arguments may hold several numbers separated by spaces. Raises ParseError
    when there are no arguments, when a character other than a digit, a sign
    or a space appears, when a number lies outside the 32-bit range, or when
    a number repeats.
    """
    if not args:
        raise ParseError("no arguments given")
    text = join_arguments(args)
    bad = sorted({char for char in text if char not in _ALLOWED})
    if bad:
        raise ParseError(f"unexpected characters: {''.join(bad)!r}")
    numbers = [atol(word) for word in split(text, " ")]
    seen: set[int] = set()
    for number in numbers:
        if not INT_MIN <= number <= INT_MAX:
            raise ParseError(f"{number} does not fit in a 32-bit integer")
        if number in seen:
            raise ParseError(f"{number} appears more than once")
        seen.add(number)
    return numbers


def is_sorted(values: Sequence[int]) -> bool:
    """True when every value is strictly smaller than the one after it."""
    return all(left < right for left, right in zip(values, values[1:]))