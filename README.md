# socketwire

Pure-Python building blocks for the Engine.IO wire protocol (version 3) and for
socket.io style room broadcasting. The package uses only the standard library.

## Modules

- `socketwire.frame` provides `FrameType` (`STRING` = 0, `BINARY` = 1) and
  `byte_to_frame_type(b)`. The function raises `ValueError` for an unknown byte.
- `socketwire.packet` provides:
  - `PacketType`: `OPEN`, `CLOSE`, `PING`, `PONG`, `MESSAGE`, `UPGRADE` and `NOOP`.
    `str()` gives the lower-case name. `string_byte()` gives the ASCII digit and
    `binary_byte()` gives the raw byte.
  - `byte_to_packet_type(b, frame_type)`. For string frames the byte is read as an
    ASCII digit.
  - The `Frame` and `Packet` dataclasses.
  - `PacketDecoder(reader).next_reader()`, which returns
    `(frame_type, packet_type, body_reader)`. It raises `EOFError` when no frames
    remain.
  - `PacketEncoder(writer).next_writer(frame_type, packet_type)`, which writes the
    packet-type byte and returns the frame writer.
  - In-memory frame sources and sinks for tests: `FakeConnReader` serves a list of
    frames, and `FakeConstReader` alternates text and binary message frames without
    end. `FakeConnWriter` collects each closed frame in `.frames`, and
    `FakeDiscardWriter` throws everything away.
- `socketwire.payload_util` reads and writes the length prefixes of a polling payload:
  - `write_text_len(length, buf)` writes `b"12:"`.
  - `write_binary_len(length, buf)` writes one byte per digit followed by `0xff`.
  - `read_text_len(reader)` and `read_binary_len(reader)` read them back. They raise
    `InvalidPayloadError` for a bad digit and `EOFError` when the input ends early.
- `socketwire.payload_errors` defines the error classes:
  - `PayloadError` is the base class. Its `temporary` property tells whether the
    operation can be retried.
  - `OpError(op, err)` has the message `"op: err"` and takes `temporary` from `err`.
  - `RetryError` is always temporary.
  - `InvalidPayloadError` is also a `ValueError`.
- `socketwire.pauser.Pauser` lets a pause wait until all workers are done:
  - `working()` and `done()` register and unregister a worker. `working()` returns
    `False` once the pauser is paused.
  - `pause()` returns `True` only for the call that actually pauses.
  - `resume()` returns to normal operation.
  - `pausing_trigger()` and `paused_trigger()` return `threading.Event`s that are set
    when a pause is requested and when it takes effect.
- `socketwire.broadcast.Broadcast` is a thread-safe registry of rooms. A member is any
  object with an `id` attribute and an `emit(event, *args)` method. It provides
  `join`, `leave`, `leave_all`, `clear`, `send`, `send_all`, `for_each`, `size`,
  `rooms` and `all_rooms`. A room is removed when its last member leaves.
- `socketwire.adapter_options` provides `RedisAdapterOptions` (a dataclass) and
  `default_options()`. The defaults are address `127.0.0.1:6379`, prefix `socket.io`
  and network `tcp`. `get_options(opts)` lays the non-empty string fields of `opts`
  over those defaults. `get_addr()` builds `host:port` when `addr` is empty.

## Installing

```
pip install .
pip install ".[test]"   # with pytest and hypothesis
```

## Examples

Encode a packet and decode it again:

```python
from socketwire.frame import FrameType
from socketwire.packet import (
    FakeConnReader, FakeConnWriter, PacketDecoder, PacketEncoder, PacketType,
)

sink = FakeConnWriter()
writer = PacketEncoder(sink).next_writer(FrameType.STRING, PacketType.MESSAGE)
writer.write("hello".encode())
writer.close()
# sink.frames == [Frame(FrameType.STRING, b"4hello")]

frame_type, packet_type, reader = PacketDecoder(FakeConnReader(sink.frames)).next_reader()
# packet_type is PacketType.MESSAGE and reader.read() == b"hello"
```

Length prefixes:

```python
import io
from socketwire.payload_util import read_binary_len, write_binary_len

buf = io.BytesIO()
write_binary_len(23461, buf)
# buf.getvalue() == bytes([2, 3, 4, 6, 1, 0xff])
buf.seek(0)
read_binary_len(buf)  # 23461
```

Broadcast to a room:

```python
from socketwire.broadcast import Broadcast

rooms = Broadcast()
rooms.join("lobby", connection)  # any object with .id and emit(event, *args)
rooms.send("lobby", "reply", "hi")
rooms.size("lobby")  # 1
```

## What it does not do

The package has no HTTP server, no client and no transports such as polling or
websocket. It writes and reads the length prefixes of a long-polling body, but it does
not split a whole body into packets or join packets into a body. `RedisAdapterOptions`
holds settings only. Nothing in the package connects to Redis.

## Running the tests

```
pytest
```