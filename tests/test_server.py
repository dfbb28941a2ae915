import os
import signal

from minitalk.client import send_message
from minitalk.encoding import char_to_byte, message_to_bits
from minitalk.server import Server

_SIGNAL_FOR_BIT = {"0": signal.SIGUSR1, "1": signal.SIGUSR2}


def _capture(action):
    read_fd, write_fd = os.pipe()
    try:
        action(Server(fd=write_fd))
    finally:
        os.close(write_fd)
    with os.fdopen(read_fd, "rb") as stream:
        return stream.read()


def _feed(server, bits):
    for bit in bits:
        server.handle_signal(_SIGNAL_FOR_BIT[bit], None)


def test_message_is_printed_with_newline():
    output = _capture(lambda server: _feed(server, message_to_bits("hello")))
    assert output == b"hello\n"


def test_utf8_bytes_pass_through():
    text = "héllo"
    output = _capture(lambda server: _feed(server, message_to_bits(text)))
    assert output == text.encode("utf-8") + b"\n"


def test_several_messages_in_sequence():
    def action(server):
        _feed(server, message_to_bits("one"))
        _feed(server, message_to_bits("two"))

    assert _capture(action) == b"one\ntwo\n"


def test_partial_byte_writes_nothing():
    def action(server):
        _feed(server, char_to_byte("a")[:7])
        assert server.decoder.pending == 7

    assert _capture(action) == b""


def test_other_signals_are_ignored():
    def action(server):
        for bit in message_to_bits("ok"):
            server.handle_signal(signal.SIGINT, None)
            server.handle_signal(_SIGNAL_FOR_BIT[bit], None)
        server.handle_signal(signal.SIGTERM, None)

    assert _capture(action) == b"ok\n"


def test_install_registers_handlers():
    saved = {s: signal.getsignal(s) for s in (signal.SIGUSR1, signal.SIGUSR2)}
    server = Server(fd=1)
    try:
        server.install()
        assert signal.getsignal(signal.SIGUSR1) == server.handle_signal
        assert signal.getsignal(signal.SIGUSR2) == server.handle_signal
    finally:
        for signum, handler in saved.items():
            signal.signal(signum, handler)


def test_real_signals_from_client():
    saved = {s: signal.getsignal(s) for s in (signal.SIGUSR1, signal.SIGUSR2)}

    def action(server):
        server.install()
        send_message(os.getpid(), "ping", delay=0.001)

    try:
        output = _capture(action)
    finally:
        for signum, handler in saved.items():
            signal.signal(signum, handler)
    assert output == b"ping\n"