"""Server that rebuilds messages from SIGUSR1/SIGUSR2 bits and prints them."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Sequence

from minitalk.encoding import TERMINATOR, ByteDecoder
from minitalk.output import put_char, put_number, put_str

_SIGNAL_BITS = {signal.SIGUSR1: "0", signal.SIGUSR2: "1"}


class Server:
    """Decodes incoming signal bits and writes each completed byte to ``fd``.

    A NUL byte, which ends a message, is written as a newline.
    """

    def __init__(self, fd: int = 1) -> None:
        self.fd = fd
        self.decoder = ByteDecoder()

    def handle_signal(self, signum: int, frame=None) -> None:
        """Take one bit from a signal; other signals are ignored."""
        bit = _SIGNAL_BITS.get(signum)
        if bit is None:
            return
        value = self.decoder.feed(bit)
        if value is None:
            return
        if value == TERMINATOR:
            put_char("\n", self.fd)
        else:
            put_char(value, self.fd)

    def install(self) -> None:
        """Make this server the handler of SIGUSR1 and SIGUSR2."""
        for signum in _SIGNAL_BITS:
            signal.signal(signum, self.handle_signal)

    def serve_forever(self) -> None:
        """Install the handlers, print the process id and wait for signals."""
        self.install()
        put_str("MY PID: ", self.fd)
        put_number(os.getpid(), self.fd)
        put_char("\n", self.fd)
        while True:
            signal.pause()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: run the server until interrupted."""
    try:
        Server().serve_forever()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())