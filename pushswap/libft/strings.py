"""C-style string helpers expressed over Python strings.

Functions that would return a pointer into a string return an index instead,
or None where nothing is found. Copy helpers that fill a sized buffer return
the resulting text together with the length they report.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Union

CharLike = Union[int, str]


def _as_char(c: CharLike) -> str:
    """Return ``c`` as a one-character string; ints are taken as unsigned bytes."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL, or the whole length."""
    end = s.find("\0")
    return len(s) if end < 0 else end


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the text that fits and the full length of ``src``; a result length
    smaller than the reported one means the copy was truncated.
    """
    _check_size(size, "size")
    src = src[: strlen(src)]
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have had. When ``size`` does not exceed the length of ``dest`` nothing is
    appended and the reported length is ``size`` plus the length of ``src``.
    """
    _check_size(size, "size")
    dest = dest[: strlen(dest)]
    src = src[: strlen(src)]
    if size <= len(dest):
        return dest, size + len(src)
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference at the first mismatch."""
    _check_size(n, "n")
    first = first[: strlen(first)]
    second = second[: strlen(second)]
    for pos in range(n):
        a = ord(first[pos]) if pos < len(first) else 0
        b = ord(second[pos]) if pos < len(second) else 0
        if a != b or a == 0 or b == 0:
            return a - b
    return 0


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``; a NUL matches the terminator."""
    index = (s[: strlen(s)] + "\0").find(_as_char(c))
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``; a NUL matches the terminator."""
    index = (s[: strlen(s)] + "\0").rfind(_as_char(c))
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return where ``little`` first occurs wholly within the first ``length`` characters of ``big``."""
    _check_size(length, "length")
    little = little[: strlen(little)]
    if not little:
        return 0
    big = big[: strlen(big)]
    index = big.find(little, 0, min(length, len(big)))
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its terminator."""
    return s[: strlen(s)]


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _check_size(start, "start")
    _check_size(length, "length")
    s = s[: strlen(s)]
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return strdup(first) + strdup(second)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return strdup(s).strip(strdup(charset))


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty words."""
    delimiter = _as_char(sep)
    text = strdup(s)
    if delimiter == "\0":
        return [text] if text else []
    return [word for word in text.split(delimiter) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(strdup(s)))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` on each element, storing any non-None result in place."""
    for index, char in enumerate(list(chars)):
        result = func(index, char)
        if result is not None:
            chars[index] = result