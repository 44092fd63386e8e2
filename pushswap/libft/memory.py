"""Byte-buffer operations on bytearrays and memoryviews."""

from __future__ import annotations

from typing import Optional, Union

WritableBuffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

SIZE_MAX = (1 << 64) - 1


def _check_span(buf: ReadableBuffer, n: int, name: str = "buffer") -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > len(buf):
        raise IndexError(f"{name} holds {len(buf)} bytes, {n} requested")


def memset(buf: WritableBuffer, c: int, n: int) -> WritableBuffer:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` taken as an unsigned byte."""
    _check_span(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: WritableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size != 0 and nmemb > SIZE_MAX // size:
        raise OverflowError(f"{nmemb} elements of {size} bytes overflow the address space")
    return bytearray(nmemb * size)


def memchr(buf: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_span(buf, n)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(first: ReadableBuffer, second: ReadableBuffer, n: int) -> int:
    """Compare ``n`` bytes as unsigned values; return the difference at the first mismatch."""
    _check_span(first, n, "first")
    _check_span(second, n, "second")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: WritableBuffer, src: ReadableBuffer, n: int) -> WritableBuffer:
    """Copy ``n`` bytes from ``src`` into the start of ``dest``."""
    _check_span(dest, n, "dest")
    _check_span(src, n, "src")
    dest[:n] = src[:n]
    return dest


def memmove(dest: WritableBuffer, src: ReadableBuffer, count: int) -> WritableBuffer:
    """Copy ``count`` bytes from ``src`` to ``dest``; the two may overlap."""
    _check_span(dest, count, "dest")
    _check_span(src, count, "src")
    dest[:count] = bytes(src[:count])
    return dest