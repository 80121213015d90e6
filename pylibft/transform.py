"""Building new strings from existing ones.

Strings are ``str`` or bytes-like objects whose content ends at the first
NUL, as in :mod:`pylibft.search`. Functions that build a new string return
a ``str`` for text input and ``bytes`` for bytes-like input.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Union

from pylibft.search import strdup, strlen

Text = Union[str, bytes, bytearray, memoryview]
Result = Union[str, bytes]
CharLike = Union[int, str]
Writable = Union[bytearray, memoryview]


def _text(s: Text) -> Result:
    """Return the content of ``s`` before its first NUL as ``str`` or ``bytes``."""
    if s is None:
        raise TypeError("expected a string, got None")
    content = strdup(s)
    return content if isinstance(content, str) else bytes(content)


def _separator(s: Result, c: CharLike) -> Result:
    """Return the separator ``c`` in the same kind as ``s``."""
    if isinstance(c, bool) or not isinstance(c, (int, str)):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    if isinstance(c, str) and len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if isinstance(s, str):
        return c if isinstance(c, str) else chr(c)
    code = ord(c) if isinstance(c, str) else c & 0xFF
    if code > 0xFF:
        raise ValueError(f"character {c!r} does not fit in one byte")
    return bytes([code])


def _check_callable(f: Optional[Callable]) -> None:
    if not callable(f):
        raise TypeError("expected a callable")


def substr(s: Text, start: int, length: int) -> Result:
    """Return up to ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` at or past the end of the string gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    content = _text(s)
    if start >= len(content):
        return content[:0]
    return content[start:start + length]


def strjoin(s1: Text, s2: Text) -> Result:
    """Return the concatenation of two strings of the same kind."""
    first = _text(s1)
    second = _text(s2)
    if type(first) is not type(second):
        raise TypeError("cannot join text and bytes")
    return first + second  # type: ignore[operator]


def strtrim(s1: Text, chars: Text) -> Result:
    """Remove every character found in ``chars`` from both ends of ``s1``."""
    content = _text(s1)
    strip_set = _text(chars)
    if type(content) is not type(strip_set):
        raise TypeError("cannot trim text with bytes or bytes with text")
    if not strip_set:
        return content
    return content.strip(strip_set)  # type: ignore[arg-type]


def split(s: Text, c: CharLike) -> List[Result]:
    """Split ``s`` on the character ``c``, dropping empty pieces."""
    content = _text(s)
    sep = _separator(content, c)
    return [word for word in content.split(sep) if word]  # type: ignore[arg-type]


def strmapi(s: Text, f: Callable[[int, object], object]) -> Result:
    """Return a new string made of ``f(index, char)`` for each character.

    For text ``f`` receives and returns one-character strings; for bytes it
    receives and returns byte values.
    """
    _check_callable(f)
    content = _text(s)
    mapped = [f(index, ch) for index, ch in enumerate(content)]
    if isinstance(content, str):
        return "".join(mapped)  # type: ignore[arg-type]
    return bytes(mapped)  # type: ignore[arg-type]


def striteri(buf: Writable, f: Callable[[int, int], Optional[int]]) -> None:
    """Call ``f(index, byte)`` for each byte of the string in ``buf``.

    A value returned by ``f`` replaces the byte in place; ``None`` leaves it
    unchanged.
    """
    _check_callable(f)
    if not isinstance(buf, (bytearray, memoryview)):
        raise TypeError(f"expected a writable buffer, got {type(buf).__name__}")
    length = strlen(buf)
    for index, value in enumerate(bytes(buf[:length])):
        replacement = f(index, value)
        if replacement is not None:
            buf[index] = replacement