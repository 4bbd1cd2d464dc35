# xnetframe

Building blocks for network programs written with threads and sockets.
The package uses only the standard library.

## Modules

- `xnetframe.stream`: `Stream`, an abstract binary stream that reads and
  writes fixed-size little-endian values (`ValueType`), booleans, strings
  with a one-byte length prefix (`read_string` / `write_string`) and strings
  with a four-byte length prefix (`read_long_string` / `write_long_string`).
  `MemoryStream` is an in-memory implementation. A short read raises
  `StreamError`, whose `status` is a `StreamStatus`; `status_string` gives
  its printable name.
- `xnetframe.platform`: `get_min`, `get_max`, `to_signed` and the byte-order
  swaps `swap16`, `swap32`, `swap64` and `swap_float64`; `MAX_PACKET_LEN`
  is 4096.
- `xnetframe.tokenizer`: `StringTokenizer`, which splits text on any of a
  set of delimiter characters and hands out the tokens one by one
  (`next_token`, `has_more_tokens`, `count_tokens`) or by iteration.
- `xnetframe.blocking_queue`: `BlockingQueue`, a thread-safe FIFO whose
  `push` waits while it is full and `pop` waits while it is empty. A
  `max_count` of zero or less means no limit. `destroy` wakes every waiter;
  a wait that cannot complete then raises `QueueDestroyedError`.
- `xnetframe.system`: `work_home_directory` (the `GAME_HOME` environment
  variable, or `WorkHomeNotSetError`), `current_directory` (`GAME_HOME` if
  set, otherwise the working directory) and `processor_count`.
- `xnetframe.timer`: `TimerEventHandler`, an abstract event with an event
  id, a delay and repetition settings; subclasses implement `handle_event`.
- `xnetframe.viewer`: `Viewer`, an abstract named sink for timestamped log
  lines, and `format_date`, which formats a Unix timestamp as local
  `YYYY/MM/DD HH:MM:SS`.
- `xnetframe.tcp_socket`: `TcpSocket`, an abstract stream socket wrapper.
  Operations raise `SocketError` (or `SocketNotCreatedError` before
  `create`), record the error code in `error_code`, and count bytes in
  `sent_bytes` and `received_bytes`. Subclasses implement `on_recv`,
  `on_send`, `on_close` and `on_connect`.
- `xnetframe.udp_socket`: `UdpSocket`, an abstract datagram socket whose
  `create(host, port)` makes a non-blocking socket, sets its buffer sizes
  (8192 bytes by default) and binds it. Subclasses implement `on_recv` and
  `on_send`.
- `xnetframe.xnet_channel`: `XNetChannel`, a concrete `TcpSocket`. It
  reports connect and close to a connector object (anything with
  `on_channel_connect(channel)` and `on_channel_close(channel, status)`),
  passes received data to `dispatch_service.dispatch(channel, data)` when a
  dispatcher is attached, and sends whole packets with `send_packet`, which
  returns `False` and closes the channel on failure. `CloseStatus` says why a
  channel was closed; the connector is told once per open socket.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Writing and reading a length-prefixed string:

```python
from xnetframe.stream import MemoryStream, ValueType

out = MemoryStream(b"")
out.write_string("hello", 255)
out.write_bool(True)
out.write(ValueType.UINT16, 513)

back = MemoryStream(out.getvalue())
assert back.read_string() == "hello"
assert back.read_bool() is True
assert back.read(ValueType.UINT16) == 513
```

Swapping byte order:

```python
from xnetframe.platform import swap32

assert swap32(0x12345678) == 0x78563412
```

Splitting text into tokens:

```python
from xnetframe.tokenizer import StringTokenizer

tokens = StringTokenizer("a, b,,c", ", ")
assert tokens.count_tokens() == 3
assert list(tokens) == ["a", "b", "c"]
```

Passing work between threads:

```python
from xnetframe.blocking_queue import BlockingQueue

queue = BlockingQueue(10)
queue.push("job")
assert queue.pop() == "job"
```

Using a channel with your own connector:

```python
from xnetframe.xnet_channel import XNetChannel

class Connector:
    def on_channel_connect(self, channel):
        channel.send_packet(b"ping")

    def on_channel_close(self, channel, status):
        print("closed:", status.name)

channel = XNetChannel(Connector())
channel.create()
channel.connect("127.0.0.1", 9000)
channel.on_connect(0)
```

## What the package does not do

The sockets and the channel react to events only when their `on_*` methods
are called; the package has no I/O loop or thread that polls sockets and
calls them, no service that creates and runs a channel or a UDP socket from
configuration, no connector class, and no scheduler that fires
`TimerEventHandler` events. A program supplies these itself, for example with
`threading` and `selectors`.

## Command line

```
xnetframe
```

prints `hello world` and exits with status 0.