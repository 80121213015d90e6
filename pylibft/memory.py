"""Operations on raw byte buffers.

Buffers are ``bytearray`` objects or writable ``memoryview`` slices of them.
Read-only sources may be any bytes-like object. A length that reaches past
the end of a buffer raises ``IndexError``.
"""

from __future__ import annotations

from typing import Optional, Union

SIZE_MAX = 2**64 - 1

Writable = Union[bytearray, memoryview]
Readable = Union[bytes, bytearray, memoryview]


def _check_length(n: int, *buffers: Readable) -> None:
    """Reject negative lengths and lengths that exceed any given buffer."""
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"length {n} exceeds buffer of {len(buf)} bytes")


def memset(buf: Writable, c: int, n: int) -> Writable:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (taken modulo 256)."""
    _check_length(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Writable, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dest: Optional[Writable], src: Optional[Readable], n: int) -> Optional[Writable]:
    """Copy ``n`` bytes from ``src`` into the start of ``dest`` and return ``dest``.

    When both ``dest`` and ``src`` are ``None`` nothing happens and ``None``
    is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source buffer")
    _check_length(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(dest: Optional[Writable], src: Optional[Readable], n: int) -> Optional[Writable]:
    """Copy ``n`` bytes from ``src`` to ``dest``, correct even when they overlap.

    When both ``dest`` and ``src`` are ``None`` nothing happens and ``None``
    is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memmove needs both a destination and a source buffer")
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memchr(data: Readable, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``c`` (modulo 256) in the
    first ``n`` bytes of ``data``, or ``None`` if there is none."""
    _check_length(n, data)
    offset = bytes(data[:n]).find(c & 0xFF)
    return None if offset < 0 else offset


def memcmp(s1: Readable, s2: Readable, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference between the first pair of differing bytes, or 0
    when the compared ranges are equal.
    """
    _check_length(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer for ``nmemb`` elements of ``size`` bytes.

    A zero count or size gives an empty buffer. A total that does not fit in
    the platform's size type raises ``OverflowError``.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    total = nmemb * size
    if total > SIZE_MAX:
        raise OverflowError(f"{nmemb} * {size} bytes exceeds the addressable size")
    return bytearray(total)