"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

from pushswap.libft.conversion import itoa

CharLike = Union[int, str]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _char_bytes(c: CharLike) -> bytes:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c.encode("utf-8")
    return bytes([c & 0xFF])


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write one character to ``fd``; a negative descriptor is ignored."""
    if fd < 0:
        return
    _write_all(fd, _char_bytes(c))


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` to ``fd``; nothing happens for None or a negative descriptor."""
    if s is None or fd < 0:
        return
    _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline; nothing happens for None or a negative descriptor."""
    if s is None or fd < 0:
        return
    _write_all(fd, (s + "\n").encode("utf-8"))


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of the 32-bit integer ``n``; a negative descriptor is ignored."""
    if fd < 0:
        return
    _write_all(fd, itoa(n).encode("ascii"))