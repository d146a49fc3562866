"""Engine.IO frame and packet codecs, payload length prefixes, a pauser and room broadcasting."""

__version__ = "0.1.0"

__all__ = [
    "adapter_options",
    "broadcast",
    "frame",
    "packet",
    "pauser",
    "payload_errors",
    "payload_util",
]