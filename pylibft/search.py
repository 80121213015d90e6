"""Measuring, copying, comparing and searching NUL-terminated strings.

A string is a ``str`` or a bytes-like object. Its content ends at the first
NUL character (``"\\0"`` or byte ``0``), or at its end if it has none.
Functions that find something return an index into the string, or ``None``
when nothing is found. Functions that write take a ``bytearray`` (or a
writable ``memoryview``) as the destination buffer and raise
``IndexError`` when the buffer is too small for what they must write.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import List, Optional, Union

Text = Union[str, bytes, bytearray, memoryview]
Writable = Union[bytearray, memoryview]
CharLike = Union[int, str]


def _content(s: Text) -> Union[str, bytes]:
    """Return the part of ``s`` before its first NUL."""
    if isinstance(s, str):
        cut = s.find("\0")
        return s if cut < 0 else s[:cut]
    if isinstance(s, (bytes, bytearray, memoryview)):
        data = bytes(s)
        cut = data.find(0)
        return data if cut < 0 else data[:cut]
    raise TypeError(f"expected a str or bytes-like object, got {type(s).__name__}")


def _bytes_content(s: Text) -> bytes:
    """Return the content of a bytes-like string; text is rejected."""
    if isinstance(s, str):
        raise TypeError("expected a bytes-like object, got str")
    content = _content(s)
    assert isinstance(content, bytes)
    return content


def _codes(s: Text) -> List[int]:
    """Return the character codes of the content of ``s``."""
    content = _content(s)
    if isinstance(content, str):
        return [ord(ch) for ch in content]
    return list(content)


def _char_code(c: CharLike) -> int:
    """Return the code searched for; integers are reduced to one byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return c & 0xFF


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def strlen(s: Text) -> int:
    """Return the number of characters before the first NUL in ``s``."""
    return len(_content(s))


def strlcpy(dst: Writable, src: Text, size: int) -> int:
    """Copy at most ``size - 1`` bytes of ``src`` into ``dst`` and terminate it.

    Nothing is written when ``size`` is 0. Returns the length of ``src``, so
    a result of ``size`` or more means the copy was truncated.
    """
    _check_size(size)
    data = _bytes_content(src)
    if size == 0:
        return len(data)
    chunk = data[: size - 1]
    if len(chunk) + 1 > len(dst):
        raise IndexError(f"destination of {len(dst)} bytes cannot hold {len(chunk) + 1}")
    dst[: len(chunk)] = chunk
    dst[len(chunk)] = 0
    return len(data)


def strlcat(dst: Writable, src: Text, size: int) -> int:
    """Append ``src`` to the string in ``dst``, keeping the total under ``size``.

    Returns the length of the string it tried to build. When ``dst`` already
    holds ``size`` or more characters nothing is written and ``size`` plus the
    length of ``src`` is returned.
    """
    _check_size(size)
    data = _bytes_content(src)
    if size == 0:
        return len(data)
    dst_len = strlen(dst)
    if dst_len >= size:
        return size + len(data)
    chunk = data[: size - dst_len - 1]
    end = dst_len + len(chunk)
    if end + 1 > len(dst):
        raise IndexError(f"destination of {len(dst)} bytes cannot hold {end + 1}")
    dst[dst_len:end] = chunk
    dst[end] = 0
    return dst_len + len(data)


def strchr(s: Text, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    code = _char_code(c)
    codes = _codes(s)
    if code == 0:
        return len(codes)
    try:
        return codes.index(code)
    except ValueError:
        return None


def strrchr(s: Text, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    code = _char_code(c)
    codes = _codes(s)
    if code == 0:
        return len(codes)
    for index in reversed(range(len(codes))):
        if codes[index] == code:
            return index
    return None


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference between the first pair of differing character
    codes, or 0 when the compared parts are equal. The end of a string
    compares as code 0.
    """
    _check_size(n)
    pairs = zip_longest(_codes(s1), _codes(s2), fillvalue=0)
    for a, b in islice(pairs, n):
        if a != b:
            return a - b
    return 0


def strnstr(big: Text, little: Text, length: int) -> Optional[int]:
    """Return the index of the first ``little`` in the first ``length``
    characters of ``big``, or ``None``. An empty ``little`` is found at 0."""
    _check_size(length)
    needle = _content(little)
    if not needle:
        return 0
    haystack = _content(big)
    if type(haystack) is not type(needle):
        raise TypeError("cannot search mixed text and bytes")
    found = haystack[:length].find(needle)  # type: ignore[arg-type]
    return None if found < 0 else found


def strdup(s: Text) -> Union[str, bytes, bytearray]:
    """Return a new copy of the content of ``s``.

    A ``bytearray`` gives a new ``bytearray``; other bytes-like objects give
    ``bytes``.
    """
    content = _content(s)
    if isinstance(s, bytearray):
        return bytearray(content)
    return content