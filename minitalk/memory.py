"""Byte-buffer operations: fill, copy, overlapping move, search, compare."""

from __future__ import annotations

import operator

SIZE_MAX = 2**64 - 1


def _check_count(n: int) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    return n


def _check_span(name: str, data, offset: int, n: int) -> None:
    if offset < 0 or offset + n > len(data):
        raise IndexError(
            f"{name}: span of {n} bytes at {offset} exceeds length {len(data)}"
        )


def fill(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` truncated to a byte."""
    n = _check_count(n)
    _check_span("buffer", buffer, 0, n)
    buffer[:n] = bytes([operator.index(value) & 0xFF]) * n
    return buffer


def zero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    fill(buffer, 0, n)


def copy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    n = _check_count(n)
    _check_span("dest", dest, 0, n)
    _check_span("src", src, 0, n)
    dest[:n] = bytes(src[:n])
    return dest


def move(buffer: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buffer``; the spans may overlap."""
    n = _check_count(n)
    _check_span("destination", buffer, dest_offset, n)
    _check_span("source", buffer, src_offset, n)
    buffer[dest_offset:dest_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def find_byte(data: bytes | None, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` among the first ``n``, or None."""
    if data is None:
        return None
    n = _check_count(n)
    target = operator.index(value) & 0xFF
    index = bytes(data[:n]).find(bytes([target]))
    return None if index < 0 else index


def compare(a: bytes, b: bytes, n: int) -> int:
    """Difference of the first differing bytes among the first ``n``, else 0."""
    n = _check_count(n)
    _check_span("a", a, 0, n)
    _check_span("b", b, 0, n)
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    return 0


def allocate(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises MemoryError when the total would not fit in a machine size.
    """
    count = _check_count(count)
    size = _check_count(size)
    total = count * size
    if total > SIZE_MAX:
        raise MemoryError(f"{count} * {size} bytes overflows the allocation size")
    return bytearray(total)