# minitalk

A tiny messaging pair for POSIX systems. A server process waits for Unix
signals, and a client sends it a text message one bit at a time: `SIGUSR1`
carries a `0` bit and `SIGUSR2` carries a `1` bit. Each byte is sent as eight
bits, most significant bit first, with a short pause after each signal. Text
is sent as UTF-8. A NUL byte ends the message, and the server then prints a
newline.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then waits for
signals until it is interrupted:

```
minitalk-server
```

```
MY PID: 12345
```

From another terminal, send a message to that process id:

```
minitalk-client 12345 "hello there"
```

The server writes each byte to standard output as soon as its eight bits have
arrived.

The client needs exactly two arguments, a process id and a message. If the
argument count is wrong, if the process id is not a positive number, or if a
signal cannot be delivered, it prints a message starting with `Error:` to
standard error and exits with status 1.

## Library use

The bit encoding is in `minitalk.encoding`. Bytes are handled as integer
values:

```python
from minitalk.encoding import ByteDecoder, byte_to_char, char_to_byte, message_to_bits

char_to_byte("A")         # "01000001"
byte_to_char("01000001")  # 65

decoder = ByteDecoder()
for bit in message_to_bits("hi"):
    value = decoder.feed(bit)
    if value is not None:
        print(value)      # 104, 105, then 0 for the terminator
```

`ByteDecoder.pending` tells how many bits of the current byte have arrived,
and `ByteDecoder.reset()` discards them.

In `minitalk.client`, `send_char(pid, c, delay)` and
`send_message(pid, message, delay)` send to a running server; `delay` is the
pause in seconds after each signal and defaults to 100 microseconds. Both
raise `ClientError` when a signal cannot be delivered, and `check_args(argv)`
raises it for bad command-line arguments.

`minitalk.server.Server(fd=1)` decodes bits passed to
`handle_signal(signum, frame)` and writes each completed byte to `fd`, a NUL
as a newline. `install()` makes it the handler of `SIGUSR1` and `SIGUSR2`, and
`serve_forever()` installs the handlers, prints the process id and waits.

The package also has small helpers:

- `minitalk.chars`: ASCII classification (`is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`), case mapping (`to_upper`, `to_lower`),
  `parse_int` (atoi-style parsing that wraps to 32 bits) and `format_int`.
- `minitalk.memory`: byte-buffer operations `fill`, `zero`, `copy`, `move`
  (overlapping spans allowed), `find_byte`, `compare` and `allocate`.
- `minitalk.strings`: `length`, `split`, `trim`, `substring`, `find_within`,
  `find_char`, `rfind_char`, `compare_n`, `join`, `map_indexed`,
  `iter_indexed`, and the NUL-terminated `bounded_copy` and `bounded_concat`.
- `minitalk.linkedlist`: `LinkedList` of `Node`s with `push_front`,
  `push_back`, `last`, `remove_first`, `clear`, `for_each` and `map`.
- `minitalk.output`: `put_char`, `put_str`, `put_endl` and `put_number` write
  to a file descriptor.

## Limits

There is no acknowledgement from the server: the client relies on its pause
between signals, and bits lost by the operating system are not detected or
resent. The server handles one sender at a time.

## Running the tests

```
pip install ".[test]"
pytest
```