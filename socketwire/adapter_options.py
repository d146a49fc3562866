"""Settings of the Redis adapter."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["RedisAdapterOptions", "default_options", "get_options"]


@dataclass
class RedisAdapterOptions:
    """Connection settings of the Redis adapter.

    ``host`` and ``port`` are kept for older configurations; ``addr`` is
    preferred.
    """

    host: str = ""
    port: str = ""
    addr: str = ""
    prefix: str = ""
    network: str = ""
    password: str = ""
    db: int = 0

    def get_addr(self) -> str:
        """The address to dial, built from host and port when unset."""
        if not self.addr:
            self.addr = f"{self.host}:{self.port}"
        return self.addr


def default_options() -> RedisAdapterOptions:
    """Options with the default address, prefix and network."""
    return RedisAdapterOptions(addr="127.0.0.1:6379", prefix="socket.io", network="tcp")


def get_options(opts: RedisAdapterOptions | None) -> RedisAdapterOptions:
    """Defaults overridden by the non-empty string fields of ``opts``."""
    options = default_options()
    if opts is not None:
        for name in ("host", "port", "addr", "prefix", "network", "password"):
            value = getattr(opts, name)
            if value:
                setattr(options, name, value)
    return options