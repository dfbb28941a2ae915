"""Text helpers with C string semantics: NUL-terminated lengths, bounded copies."""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence

_NUL = 0


def _c_len(data: bytes | bytearray) -> int:
    """Length of the NUL-terminated string at the start of ``data``."""
    end = data.find(b"\0")
    return len(data) if end < 0 else end


def _as_char(c: int | str) -> str:
    """Turn a one-character string or an integer into a character.

    Integers are truncated to a byte, as a C ``char`` cast would.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _check_count(name: str, n: int) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")
    return n


def length(s: str | bytes) -> int:
    """Number of characters before the first NUL, or the whole length."""
    end = s.find("\0" if isinstance(s, str) else b"\0")
    return len(s) if end < 0 else end


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    sep = _as_char(sep)
    if sep == "\0":
        return [s] if s else []
    return [word for word in s.split(sep) if word]


def trim(s: str, chars: str) -> str:
    """Remove any characters of ``chars`` from both ends of ``s``."""
    if chars is None:
        raise TypeError("chars must be a string")
    return s.strip(chars)


def substring(s: str, start: int, count: int) -> str:
    """Up to ``count`` characters of ``s`` from ``start``; empty past the end."""
    start = _check_count("start", start)
    count = _check_count("count", count)
    if start >= len(s):
        return ""
    return s[start:start + count]


def find_within(haystack: str, needle: str, limit: int) -> int | None:
    """Index of ``needle`` lying wholly inside the first ``limit`` characters.

    An empty needle is found at index 0.
    """
    limit = _check_count("limit", limit)
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def find_char(s: str, c: int | str) -> int | None:
    """Index of the first ``c`` in ``s``; a NUL is found at the end."""
    c = _as_char(c)
    if c == "\0":
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def rfind_char(s: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``s``; a NUL is found at the end."""
    c = _as_char(c)
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the end of a string reads as NUL.

    Returns the difference of the first differing character codes, or 0.
    """
    n = _check_count("n", n)
    for index in range(n):
        left = ord(s1[index]) if index < len(s1) else _NUL
        right = ord(s2[index]) if index < len(s2) else _NUL
        if left != right:
            return left - right
        if left == _NUL:
            break
    return 0


def join(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(s))


def iter_indexed(
    chars: MutableSequence[str], func: Callable[[int, MutableSequence[str]], None]
) -> None:
    """Call ``func(index, chars)`` for each position present at the start.

    The callback may change ``chars[index]`` in place.
    """
    for index in range(len(chars)):
        func(index, chars)


def bounded_copy(dest: bytearray, src: bytes, size: int) -> int:
    """Copy ``src`` into ``dest`` keeping at most ``size`` bytes, NUL included.

    Returns the length of ``src``, so a result of ``size`` or more means the
    copy was cut short.
    """
    size = _check_count("size", size)
    src_len = _c_len(src)
    if size == 0:
        return src_len
    copied = min(size - 1, src_len)
    if copied + 1 > len(dest):
        raise IndexError(
            f"copy of {copied + 1} bytes exceeds destination length {len(dest)}"
        )
    dest[:copied] = src[:copied]
    dest[copied] = _NUL
    return src_len


def bounded_concat(dest: bytearray, src: bytes, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dest`` within ``size`` bytes.

    Returns the length the full result would have had; when ``size`` is
    smaller than the current string, returns ``size`` plus the length of
    ``src`` and leaves ``dest`` alone.
    """
    size = _check_count("size", size)
    if b"\0" not in dest:
        raise ValueError("destination holds no NUL-terminated string")
    dst_len = _c_len(dest)
    src_len = _c_len(src)
    if size < dst_len:
        return size + src_len
    copied = max(0, min(src_len, size - dst_len - 1))
    end = dst_len + copied
    if end + 1 > len(dest):
        raise IndexError(
            f"concatenation needs {end + 1} bytes, destination has {len(dest)}"
        )
    dest[dst_len:end] = src[:copied]
    dest[end] = _NUL
    return dst_len + src_len