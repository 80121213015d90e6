"""Conversion between decimal text and 32-bit signed integers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to the 32-bit two's complement range."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(nptr: str) -> int:
    """Parse a leading decimal integer from ``nptr``.

    Leading ASCII whitespace is skipped, one optional ``+`` or ``-`` is
    accepted, and digits are read until the first non-digit. Text with no
    digits gives 0. Values beyond the 32-bit range wrap around.
    """
    text = nptr.split("\0", 1)[0]
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    for ch in text[pos:]:
        if ch not in _DIGITS:
            break
        result = result * 10 + _DIGITS.index(ch)
    return _wrap_int32(sign * result)


def itoa(n: int) -> str:
    """Return the decimal text of the 32-bit signed integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)