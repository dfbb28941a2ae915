import pytest

from minitalk.memory import allocate, compare, copy, fill, find_byte, move, zero


def test_fill_prefix_only():
    buf = bytearray(5)
    result = fill(buf, 0x41, 3)
    assert result is buf
    assert buf[:3] == bytes([0x41]) * 3
    assert buf[3:] == bytes(2)


def test_fill_truncates_value_to_byte():
    assert fill(bytearray(4), 0x141, 4) == fill(bytearray(4), 0x41, 4)


def test_fill_past_end_raises():
    with pytest.raises(IndexError):
        fill(bytearray(2), 1, 3)


def test_fill_negative_count_raises():
    with pytest.raises(ValueError):
        fill(bytearray(2), 1, -1)


def test_zero_clears_prefix():
    buf = bytearray(b"xyzw")
    zero(buf, 2)
    assert buf == bytearray(bytes(2) + b"zw")


def test_copy_full_and_partial():
    assert copy(bytearray(4), b"wxyz", 4) == bytearray(b"wxyz")
    buf = copy(bytearray(b"...."), b"ab", 2)
    assert buf[:2] == b"ab"
    assert buf[2:] == b".."


def test_copy_short_source_raises():
    with pytest.raises(IndexError):
        copy(bytearray(4), b"ab", 3)


def test_move_forward_overlap():
    buf = bytearray(b"abcdef")
    assert move(buf, 2, 0, 4) == bytearray(b"ababcd")


def test_move_backward_overlap():
    buf = bytearray(b"abcdef")
    assert move(buf, 0, 2, 4) == bytearray(b"cdefef")


def test_move_out_of_bounds_raises():
    with pytest.raises(IndexError):
        move(bytearray(b"abc"), 1, 0, 3)


def test_find_byte():
    assert find_byte(b"hello", ord("l"), 5) == b"hello".index(b"l")
    assert find_byte(b"hello", ord("o"), 4) is None
    assert find_byte(None, 0, 3) is None


def test_find_byte_truncates_value():
    assert find_byte(b"\x00\x01\xff", 0x1FF, 3) == find_byte(b"\x00\x01\xff", 0xFF, 3)


def test_compare_sign_and_prefix():
    assert compare(b"abc", b"abd", 3) < 0
    assert compare(b"abd", b"abc", 3) > 0
    assert compare(b"abc", b"abd", 2) == 0
    assert compare(b"a", b"c", 1) == -2


def test_compare_is_antisymmetric():
    a, b = b"\x00\x80\x10", b"\x00\x10\x80"
    assert compare(a, b, 3) == -compare(b, a, 3)


def test_allocate_zeroed():
    buf = allocate(3, 4)
    assert len(buf) == 3 * 4
    assert buf == bytearray(len(buf))
    assert allocate(0, 8) == bytearray()


def test_allocate_overflow_raises():
    with pytest.raises(MemoryError):
        allocate(2**63, 4)