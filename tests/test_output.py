import os

import pytest

from pylibft.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    for fd in (read_fd, write_fd):
        try:
            os.close(fd)
        except OSError:
            pass


def _drain(read_fd, write_fd):
    os.close(write_fd)
    chunks = []
    while True:
        chunk = os.read(read_fd, 4096)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)


def test_putchar_fd_str(pipe):
    putchar_fd("C", pipe[1])
    assert _drain(*pipe) == b"C"


def test_putchar_fd_int(pipe):
    putchar_fd(ord("C"), pipe[1])
    assert _drain(*pipe) == b"C"


def test_putchar_fd_rejects_long_string():
    with pytest.raises(ValueError):
        putchar_fd("ab", 1)


def test_putchar_fd_negative_fd_writes_nothing(pipe):
    result = putchar_fd("C", -1)
    assert result is None
    putchar_fd("D", pipe[1])
    assert _drain(*pipe) == b"D"


def test_putstr_fd(pipe):
    putstr_fd("Banana", pipe[1])
    assert _drain(*pipe) == b"Banana"


def test_putstr_fd_stops_at_nul(pipe):
    putstr_fd(b"Ban\0ana", pipe[1])
    assert _drain(*pipe) == b"Ban"


def test_putstr_fd_none_writes_nothing(pipe):
    putstr_fd(None, pipe[1])
    assert _drain(*pipe) == b""


def test_putendl_fd(pipe):
    putendl_fd("Banana", pipe[1])
    assert _drain(*pipe) == b"Banana\n"


def test_putendl_fd_none_writes_nothing(pipe):
    putendl_fd(None, pipe[1])
    assert _drain(*pipe) == b""


@pytest.mark.parametrize("n", [1234, 0, -42, 2147483647, -2147483648])
def test_putnbr_fd_round_trip(pipe, n):
    putnbr_fd(n, pipe[1])
    assert int(_drain(*pipe)) == n


def test_putnbr_fd_int_min_text(pipe):
    putnbr_fd(-2147483648, pipe[1])
    assert _drain(*pipe) == b"-2147483648"


def test_putnbr_fd_out_of_range_raises():
    with pytest.raises(OverflowError):
        putnbr_fd(2147483648, 1)


def test_putnbr_fd_negative_fd_writes_nothing(pipe):
    result = putnbr_fd(1234, -1)
    assert result is None
    putnbr_fd(56, pipe[1])
    assert _drain(*pipe) == b"56"


def test_sequence_of_writes(pipe):
    putstr_fd("n=", pipe[1])
    putnbr_fd(7, pipe[1])
    putchar_fd("\n", pipe[1])
    assert _drain(*pipe) == b"n=7\n"