"""Client that sends a text message to a server process bit by bit as signals."""

from __future__ import annotations

import os
import signal
import sys
import time
from collections.abc import Iterable, Sequence

from minitalk.chars import parse_int
from minitalk.encoding import char_to_byte, message_to_bits

DEFAULT_DELAY = 100e-6


class ClientError(Exception):
    """Raised for bad arguments or a server that cannot be signalled."""


def check_args(argv: Sequence[str]) -> tuple[int, str]:
    """Validate ``[pid, message]`` and return the parsed pid and the message."""
    if len(argv) != 2:
        raise ClientError("format->./client <PID> <MSG>")
    pid = parse_int(argv[0])
    if pid <= 0:
        raise ClientError("invalid PID.")
    return pid, argv[1]


def _send_bits(pid: int, bits: Iterable[str], delay: float) -> None:
    for bit in bits:
        signum = signal.SIGUSR1 if bit == "0" else signal.SIGUSR2
        try:
            os.kill(pid, signum)
        except OSError as exc:
            raise ClientError(
                f"cannot signal process {pid}: {exc.strerror or exc}"
            ) from exc
        time.sleep(delay)


def send_char(pid: int, c: int | str, delay: float = DEFAULT_DELAY) -> None:
    """Send one byte: SIGUSR1 for each 0 bit, SIGUSR2 for each 1 bit."""
    _send_bits(pid, char_to_byte(c), delay)


def send_message(
    pid: int, message: str | bytes, delay: float = DEFAULT_DELAY
) -> None:
    """Send every byte of ``message`` and then a terminating NUL."""
    _send_bits(pid, message_to_bits(message), delay)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``client <PID> <MSG>``."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        pid, message = check_args(argv)
        send_message(pid, message)
    except ClientError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())