"""ASCII character classification and case conversion.

Every function takes a character code (an ``int``) or a one-character
string and works only on the ASCII range. The classification functions
return the character code when it matches and ``0`` when it does not.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_UPPER_FIRST = ord("A")
_UPPER_LAST = ord("Z")
_LOWER_FIRST = ord("a")
_LOWER_LAST = ord("z")
_DIGIT_FIRST = ord("0")
_DIGIT_LAST = ord("9")
_ASCII_LAST = 127
_CASE_OFFSET = _LOWER_FIRST - _UPPER_FIRST


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return c


def isalpha(c: CharLike) -> int:
    """Return the code of ``c`` if it is an ASCII letter, else 0."""
    code = _code(c)
    if _UPPER_FIRST <= code <= _UPPER_LAST or _LOWER_FIRST <= code <= _LOWER_LAST:
        return code
    return 0


def isdigit(c: CharLike) -> int:
    """Return the code of ``c`` if it is an ASCII decimal digit, else 0."""
    code = _code(c)
    return code if _DIGIT_FIRST <= code <= _DIGIT_LAST else 0


def isalnum(c: CharLike) -> int:
    """Return the code of ``c`` if it is an ASCII letter or digit, else 0."""
    code = _code(c)
    return code if isalpha(code) or isdigit(code) else 0


def isascii(c: CharLike) -> int:
    """Return 1 if ``c`` is in the 7-bit ASCII range, else 0."""
    code = _code(c)
    if 0 <= code <= _ASCII_LAST:
        return 1
    return 0


def isprint(c: CharLike) -> int:
    """Return the code of ``c`` if it is a printable ASCII character, else 0."""
    code = _code(c)
    return code if 32 <= code < 127 else 0


def toupper(c: CharLike) -> int:
    """Return the upper-case code of an ASCII lower-case letter; others unchanged."""
    code = _code(c)
    if _LOWER_FIRST <= code <= _LOWER_LAST:
        return code - _CASE_OFFSET
    return code


def tolower(c: CharLike) -> int:
    """Return the lower-case code of an ASCII upper-case letter; others unchanged."""
    code = _code(c)
    if _UPPER_FIRST <= code <= _UPPER_LAST:
        return code + _CASE_OFFSET
    return code