"""Character classification, case mapping and integer text conversion."""

from __future__ import annotations

import operator
import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_INT_MIN_DIGITS = "2147483648"


def _code(c: int | str) -> int:
    """Return the integer code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _same_kind(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return _same_kind(c, code)


def to_lower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return _same_kind(c, code)


def _wrap32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def parse_int(text: str | None) -> int:
    """Parse a leading decimal integer the way the C library's atoi does.

    Leading whitespace and one sign are accepted, parsing stops at the first
    non-digit, text without digits gives 0 and the result wraps to 32 bits.
    """
    if text is None:
        return 0
    match = _NUMBER.match(text)
    sign_text, digits = match.group(1), match.group(2)
    sign = -1 if sign_text == "-" else 1
    if sign == -1 and digits.startswith(_INT_MIN_DIGITS):
        return INT_MIN
    result = 0
    for digit in digits:
        result = _wrap32(result * 10 + int(digit))
    return _wrap32(result * sign)


def format_int(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    n = operator.index(n)
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)