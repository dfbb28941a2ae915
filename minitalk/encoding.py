"""Bit framing of messages: each byte travels as eight bits, most significant
first, and a NUL byte ends the message."""

from __future__ import annotations

import operator
from collections.abc import Iterator

BITS_PER_BYTE = 8
TERMINATOR = 0

_BIT_TEXT = {"0": "0", "1": "1", 0: "0", 1: "1"}


def _byte_value(c: int | str) -> int:
    """Byte value of a one-character string or an integer (cast to unsigned)."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        code = ord(c)
        if code > 0xFF:
            raise ValueError(f"character {c!r} does not fit in one byte")
        return code
    return operator.index(c) & 0xFF


def _message_bytes(message: str | bytes) -> bytes:
    """The bytes of ``message`` up to, not including, its first NUL."""
    if isinstance(message, str):
        data = message.encode("utf-8", "surrogateescape")
    else:
        data = bytes(message)
    return data.split(b"\0", 1)[0]


def char_to_byte(c: int | str) -> str:
    """Eight '0'/'1' characters for the byte ``c``, most significant bit first."""
    return format(_byte_value(c), "08b")


def byte_to_char(byte: str) -> int:
    """Byte value of eight bit characters; anything but '1' counts as 0."""
    if len(byte) != BITS_PER_BYTE:
        raise ValueError(
            f"expected {BITS_PER_BYTE} bit characters, got {len(byte)}"
        )
    return int("".join("1" if bit == "1" else "0" for bit in byte), 2)


def message_to_bits(message: str | bytes) -> Iterator[str]:
    """Yield the bits of ``message`` (UTF-8 for text) followed by a NUL byte."""
    for value in (*_message_bytes(message), TERMINATOR):
        yield from char_to_byte(value)


class ByteDecoder:
    """Collects bits one at a time and gives back each completed byte."""

    def __init__(self) -> None:
        self._bits: list[str] = []

    @property
    def pending(self) -> int:
        """Number of bits received towards the current byte."""
        return len(self._bits)

    def feed(self, bit: int | str) -> int | None:
        """Add one bit; return the byte value once eight have arrived."""
        try:
            text = _BIT_TEXT[bit]
        except (KeyError, TypeError):
            raise ValueError(f"not a bit: {bit!r}") from None
        self._bits.append(text)
        if len(self._bits) < BITS_PER_BYTE:
            return None
        value = byte_to_char("".join(self._bits))
        self.reset()
        return value

    def reset(self) -> None:
        """Discard any bits of an unfinished byte."""
        self._bits.clear()