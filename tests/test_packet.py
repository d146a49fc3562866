import pytest

from socketwire.frame import FrameType
from socketwire.packet import (
    FakeConnReader,
    FakeConnWriter,
    FakeConstReader,
    FakeDiscardWriter,
    Frame,
    Packet,
    PacketDecoder,
    PacketEncoder,
    PacketType,
    byte_to_packet_type,
)

S = FrameType.STRING
B = FrameType.BINARY

CASES = [
    ([], []),
    ([Packet(S, PacketType.OPEN, b"")], [Frame(S, b"0")]),
    (
        [Packet(S, PacketType.MESSAGE, "hello 你好".encode())],
        [Frame(S, "4hello 你好".encode())],
    ),
    (
        [Packet(B, PacketType.MESSAGE, "hello 你好".encode())],
        [Frame(B, bytes([0x04]) + b"hello " + bytes([0xE4, 0xBD, 0xA0, 0xE5, 0xA5, 0xBD]))],
    ),
    (
        [
            Packet(S, PacketType.OPEN, b""),
            Packet(B, PacketType.MESSAGE, b"hello\n"),
            Packet(S, PacketType.MESSAGE, "你好\n".encode()),
            Packet(S, PacketType.PING, b"probe"),
        ],
        [
            Frame(S, b"0"),
            Frame(B, bytes([0x04]) + b"hello\n"),
            Frame(S, "4你好\n".encode()),
            Frame(S, b"2probe"),
        ],
    ),
    (
        [
            Packet(B, PacketType.MESSAGE, bytes(range(12))),
            Packet(S, PacketType.MESSAGE, b"hello"),
            Packet(S, PacketType.CLOSE, b""),
        ],
        [
            Frame(B, bytes([4]) + bytes(range(12))),
            Frame(S, b"4hello"),
            Frame(S, b"1"),
        ],
    ),
]


@pytest.mark.parametrize("packets, frames", CASES)
def test_decoder(packets, frames):
    decoder = PacketDecoder(FakeConnReader(frames))
    output = []
    with pytest.raises(EOFError):
        while True:
            ft, pt, reader = decoder.next_reader()
            data = reader.read()
            reader.close()
            output.append(Packet(ft, pt, data))
    assert output == packets


@pytest.mark.parametrize("packets, frames", CASES)
def test_encoder(packets, frames):
    writer = FakeConnWriter()
    encoder = PacketEncoder(writer)
    for p in packets:
        fw = encoder.next_writer(p.frame_type, p.packet_type)
        assert fw.write(p.data) == len(p.data)
        fw.close()
    assert writer.frames == frames


PACKET_TYPE_CASES = [
    (0, B, PacketType.OPEN, ord("0"), 0, "open"),
    (1, B, PacketType.CLOSE, ord("1"), 1, "close"),
    (2, B, PacketType.PING, ord("2"), 2, "ping"),
    (3, B, PacketType.PONG, ord("3"), 3, "pong"),
    (4, B, PacketType.MESSAGE, ord("4"), 4, "message"),
    (5, B, PacketType.UPGRADE, ord("5"), 5, "upgrade"),
    (6, B, PacketType.NOOP, ord("6"), 6, "noop"),
    (ord("0"), S, PacketType.OPEN, ord("0"), 0, "open"),
    (ord("1"), S, PacketType.CLOSE, ord("1"), 1, "close"),
    (ord("2"), S, PacketType.PING, ord("2"), 2, "ping"),
    (ord("3"), S, PacketType.PONG, ord("3"), 3, "pong"),
    (ord("4"), S, PacketType.MESSAGE, ord("4"), 4, "message"),
    (ord("5"), S, PacketType.UPGRADE, ord("5"), 5, "upgrade"),
    (ord("6"), S, PacketType.NOOP, ord("6"), 6, "noop"),
]


@pytest.mark.parametrize("b, ftype, ptype, str_byte, bin_byte, text", PACKET_TYPE_CASES)
def test_packet_type(b, ftype, ptype, str_byte, bin_byte, text):
    typ = byte_to_packet_type(b, ftype)
    assert typ is ptype
    assert typ.string_byte() == str_byte
    assert typ.binary_byte() == bin_byte
    assert str(typ) == text


def test_unknown_packet_byte_is_rejected():
    with pytest.raises(ValueError):
        byte_to_packet_type(ord("9"), S)


def test_discard_writer_accepts_everything():
    encoder = PacketEncoder(FakeDiscardWriter())
    writer = encoder.next_writer(B, PacketType.MESSAGE)
    assert writer.write(b"abc") == 3
    writer.close()


def test_empty_frame_raises_eof():
    decoder = PacketDecoder(FakeConnReader([Frame(S, b"")]))
    with pytest.raises(EOFError):
        decoder.next_reader()


class _FailingWriter:
    def __init__(self):
        self.closed = False

    def write(self, data):
        raise OSError("write failed")

    def close(self):
        self.closed = True


class _FailingFrameWriter:
    def __init__(self):
        self.last = None

    def next_writer(self, frame_type):
        self.last = _FailingWriter()
        return self.last


def test_encoder_closes_writer_on_write_error():
    frames = _FailingFrameWriter()
    encoder = PacketEncoder(frames)
    with pytest.raises(OSError, match="write failed"):
        encoder.next_writer(S, PacketType.MESSAGE)
    assert frames.last.closed is True