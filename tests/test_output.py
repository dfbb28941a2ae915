import os

import pytest

from minitalk.chars import parse_int
from minitalk.output import put_char, put_endl, put_number, put_str


class _Pipe:
    def __init__(self):
        self.read_fd, self.write_fd = os.pipe()
        self._write_open = True
        self._read_open = True

    def read(self):
        self._close_write()
        with os.fdopen(self.read_fd, "rb") as reader:
            self._read_open = False
            return reader.read()

    def _close_write(self):
        if self._write_open:
            os.close(self.write_fd)
            self._write_open = False

    def close(self):
        self._close_write()
        if self._read_open:
            os.close(self.read_fd)
            self._read_open = False


@pytest.fixture
def pipe():
    p = _Pipe()
    yield p
    p.close()


def test_put_char_string(pipe):
    put_char("a", pipe.write_fd)
    assert pipe.read() == b"a"


def test_put_char_integer_is_one_byte(pipe):
    put_char(65, pipe.write_fd)
    assert pipe.read() == b"A"


def test_put_char_rejects_long_string(pipe):
    with pytest.raises(ValueError):
        put_char("ab", pipe.write_fd)


def test_put_str(pipe):
    put_str("MY PID: ", pipe.write_fd)
    assert pipe.read() == b"MY PID: "


def test_put_endl_appends_newline(pipe):
    put_endl("hello", pipe.write_fd)
    assert pipe.read() == b"hello\n"


def test_put_number_minimum(pipe):
    put_number(-2147483648, pipe.write_fd)
    assert pipe.read() == b"-2147483648"


@pytest.mark.parametrize("n", [0, 7, -42, 12345, 2147483647])
def test_put_number_round_trip(pipe, n):
    put_number(n, pipe.write_fd)
    assert parse_int(pipe.read().decode("ascii")) == n


def test_put_number_overflow(pipe):
    with pytest.raises(OverflowError):
        put_number(2**31, pipe.write_fd)