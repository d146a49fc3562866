"""Length prefixes of the engine.io payload format."""

from __future__ import annotations

from typing import BinaryIO

from socketwire.payload_errors import InvalidPayloadError

__all__ = ["write_binary_len", "write_text_len", "read_binary_len", "read_text_len"]

_LEN_END = 0xFF
_COLON = ord(":")


def write_binary_len(length: int, buf: BinaryIO) -> None:
    """Write ``length`` as one byte per decimal digit, ended by 0xff."""
    if length <= 0:
        buf.write(bytes([0x00, _LEN_END]))
        return
    buf.write(bytes(int(d) for d in str(length)) + bytes([_LEN_END]))


def write_text_len(length: int, buf: BinaryIO) -> None:
    """Write ``length`` as ASCII digits ended by a colon."""
    if length <= 0:
        buf.write(b"0:")
        return
    buf.write(str(length).encode("ascii") + b":")


def _read_byte(reader: BinaryIO) -> int:
    b = reader.read(1)
    if not b:
        raise EOFError("unexpected end of payload")
    return b[0]


def read_binary_len(reader: BinaryIO) -> int:
    """Read a length written by write_binary_len."""
    result = 0
    while (b := _read_byte(reader)) != _LEN_END:
        if b > 9:
            raise InvalidPayloadError()
        result = result * 10 + b
    return result


def read_text_len(reader: BinaryIO) -> int:
    """Read a length written by write_text_len."""
    result = 0
    while (b := _read_byte(reader)) != _COLON:
        if not ord("0") <= b <= ord("9"):
            raise InvalidPayloadError()
        result = result * 10 + (b - ord("0"))
    return result