"""Writing characters, strings and numbers to file descriptors.

A negative descriptor is ignored and nothing is written. Text is written
as UTF-8; bytes-like strings are written as they are, up to their first NUL.
"""

from __future__ import annotations

import os
from typing import Optional, Union

from pylibft.convert import itoa
from pylibft.search import strdup

Text = Union[str, bytes, bytearray, memoryview]
CharLike = Union[int, str]


def _write_all(fd: int, data: bytes) -> None:
    """Write all of ``data`` to ``fd``."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _encode(s: Text) -> bytes:
    content = strdup(s)
    return content.encode("utf-8") if isinstance(content, str) else bytes(content)


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write one character to ``fd``; an integer is written as one byte."""
    if isinstance(c, bool) or not isinstance(c, (int, str)):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes([c & 0xFF])
    if fd < 0:
        return
    _write_all(fd, data)


def putstr_fd(s: Optional[Text], fd: int) -> None:
    """Write the string ``s`` to ``fd``; ``None`` writes nothing."""
    if s is None or fd < 0:
        return
    _write_all(fd, _encode(s))


def putendl_fd(s: Optional[Text], fd: int) -> None:
    """Write the string ``s`` followed by a newline; ``None`` writes nothing."""
    if s is None or fd < 0:
        return
    _write_all(fd, _encode(s) + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of the 32-bit signed integer ``n`` to ``fd``."""
    text = itoa(n)
    if fd < 0:
        return
    _write_all(fd, text.encode("ascii"))