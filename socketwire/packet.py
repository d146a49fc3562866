"""Engine.io packet types and a packet layer on top of framed connections."""

from __future__ import annotations

import io
from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO, Protocol

from socketwire.frame import FrameType

__all__ = [
    "PacketType",
    "byte_to_packet_type",
    "Frame",
    "Packet",
    "PacketDecoder",
    "PacketEncoder",
    "FakeConnReader",
    "FakeConstReader",
    "FakeConnWriter",
    "FakeDiscardWriter",
]

_ZERO = ord("0")


class PacketType(IntEnum):
    """Type of an engine.io packet."""

    OPEN = 0
    CLOSE = 1
    PING = 2
    PONG = 3
    MESSAGE = 4
    UPGRADE = 5
    NOOP = 6

    def __str__(self) -> str:
        return self.name.lower()

    def string_byte(self) -> int:
        """The packet type as an ASCII digit."""
        return int(self) + _ZERO

    def binary_byte(self) -> int:
        """The packet type as a raw byte."""
        return int(self)


def byte_to_packet_type(b: int, frame_type: FrameType) -> PacketType:
    """Convert a leading byte of a frame into a PacketType.

    Raises ValueError when the byte names no packet type.
    """
    if frame_type == FrameType.STRING:
        b -= _ZERO
    return PacketType(b)


@dataclass(frozen=True)
class Frame:
    """One transport frame: its type and raw bytes."""

    frame_type: FrameType
    data: bytes


@dataclass(frozen=True)
class Packet:
    """One decoded packet: frame type, packet type and body."""

    frame_type: FrameType
    packet_type: PacketType
    data: bytes


class FrameReader(Protocol):
    def next_reader(self) -> tuple[FrameType, BinaryIO]: ...


class FrameWriter(Protocol):
    def next_writer(self, frame_type: FrameType) -> BinaryIO: ...


class PacketDecoder:
    """Reads packets from a framed reader, one frame per packet."""

    def __init__(self, reader: FrameReader) -> None:
        self._reader = reader

    def next_reader(self) -> tuple[FrameType, PacketType, BinaryIO]:
        """Return the frame type, packet type and a reader for the body.

        Raises EOFError when the underlying reader has no more frames.
        """
        frame_type, reader = self._reader.next_reader()
        head = reader.read(1)
        if len(head) != 1:
            reader.close()
            raise EOFError("frame without packet type")
        try:
            packet_type = byte_to_packet_type(head[0], frame_type)
        except ValueError:
            reader.close()
            raise
        return frame_type, packet_type, reader


class PacketEncoder:
    """Writes packets to a framed writer, one frame per packet."""

    def __init__(self, writer: FrameWriter) -> None:
        self._writer = writer

    def next_writer(self, frame_type: FrameType, packet_type: PacketType) -> BinaryIO:
        """Open a frame, write the packet type and return the frame writer."""
        writer = self._writer.next_writer(frame_type)
        if frame_type == FrameType.STRING:
            head = packet_type.string_byte()
        else:
            head = packet_type.binary_byte()
        try:
            writer.write(bytes([head]))
        except BaseException:
            writer.close()
            raise
        return writer


class FakeConnReader:
    """Frame reader serving a fixed list of frames."""

    def __init__(self, frames: list[Frame] | None) -> None:
        self._frames = list(frames or [])

    def next_reader(self) -> tuple[FrameType, BinaryIO]:
        if not self._frames:
            raise EOFError("no more frames")
        frame = self._frames.pop(0)
        return frame.frame_type, io.BytesIO(frame.data)


class _ConstByteReader:
    """Reader that yields one constant byte per read; counts its closes."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.close_count = 0

    def read(self, size: int = -1) -> bytes:
        return bytes([self.value])

    def close(self) -> None:
        self.close_count += 1


class FakeConstReader:
    """Endless frame reader alternating text and binary message frames."""

    def __init__(self) -> None:
        self._frame_type = FrameType.STRING
        self._reader = _ConstByteReader(PacketType.MESSAGE.string_byte())

    def next_reader(self) -> tuple[FrameType, BinaryIO]:
        frame_type = self._frame_type
        if frame_type == FrameType.BINARY:
            self._frame_type = FrameType.STRING
            self._reader.value = PacketType.MESSAGE.string_byte()
        else:
            self._frame_type = FrameType.BINARY
            self._reader.value = PacketType.MESSAGE.binary_byte()
        return frame_type, self._reader


class _FakeFrame:
    def __init__(self, owner: FakeConnWriter, frame_type: FrameType) -> None:
        self._owner = owner
        self._frame_type = frame_type
        self._data = bytearray()

    def write(self, data: bytes) -> int:
        self._data.extend(data)
        return len(data)

    def read(self, size: int = -1) -> bytes:
        if size < 0:
            size = len(self._data)
        chunk = bytes(self._data[:size])
        del self._data[:size]
        return chunk

    def close(self) -> None:
        self._owner.frames.append(Frame(self._frame_type, bytes(self._data)))


class FakeConnWriter:
    """Frame writer collecting every closed frame in ``frames``."""

    def __init__(self) -> None:
        self.frames: list[Frame] = []

    def next_writer(self, frame_type: FrameType) -> _FakeFrame:
        return _FakeFrame(self, frame_type)


class _Discarder:
    """Writer that drops its data, keeping only a count of bytes seen."""

    def __init__(self) -> None:
        self.written = 0
        self.closed = False

    def write(self, data: bytes) -> int:
        self.written += len(data)
        return len(data)

    def close(self) -> None:
        self.closed = True


class FakeDiscardWriter:
    """Frame writer that throws everything away."""

    def next_writer(self, frame_type: FrameType) -> _Discarder:
        return _Discarder()