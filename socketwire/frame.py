"""Frame types carried by an engine.io transport."""

from enum import IntEnum

__all__ = ["FrameType", "byte_to_frame_type"]


class FrameType(IntEnum):
    """Kind of a transport frame: text or binary."""

    STRING = 0
    BINARY = 1


def byte_to_frame_type(b: int) -> FrameType:
    """Convert a byte value to a FrameType.

    Raises ValueError for a byte that names no frame type.
    """
    return FrameType(b)