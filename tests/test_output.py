import os

import pytest

from pushswap.libft.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def _capture(action):
    """Run action with the write end of a pipe and return what it wrote."""
    read_fd, write_fd = os.pipe()
    try:
        try:
            action(write_fd)
        finally:
            os.close(write_fd)
        chunks = []
        while True:
            chunk = os.read(read_fd, 4096)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)
    finally:
        os.close(read_fd)


def test_putchar_writes_character():
    assert _capture(lambda fd: (putchar_fd("x", fd), putchar_fd(ord("y"), fd))) == b"xy"


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        _capture(lambda fd: putchar_fd("ab", fd))


def test_putstr_writes_text():
    assert _capture(lambda fd: putstr_fd("hello world", fd)) == b"hello world"


def test_putstr_none_writes_nothing():
    assert _capture(lambda fd: putstr_fd(None, fd)) == b""


def test_putendl_appends_newline():
    assert _capture(lambda fd: putendl_fd("line", fd)) == b"line\n"


def test_putendl_none_writes_nothing():
    assert _capture(lambda fd: putendl_fd(None, fd)) == b""


@pytest.mark.parametrize(
    "value, text",
    [(0, b"0"), (42, b"42"), (-7, b"-7"), (2147483647, b"2147483647"), (-2147483648, b"-2147483648")],
)
def test_putnbr_writes_decimal(value, text):
    assert _capture(lambda fd: putnbr_fd(value, fd)) == text


def test_putnbr_out_of_range():
    with pytest.raises(OverflowError):
        _capture(lambda fd: putnbr_fd(2147483648, fd))


def test_negative_descriptor_is_ignored():
    written = _capture(
        lambda fd: (
            putchar_fd("a", -1),
            putstr_fd("abc", -1),
            putendl_fd("abc", -1),
            putnbr_fd(5, -1),
            putstr_fd("ok", fd),
        )
    )
    assert written == b"ok"