"""Errors raised by the payload codec."""

from __future__ import annotations

__all__ = ["PayloadError", "OpError", "RetryError", "InvalidPayloadError"]


class PayloadError(Exception):
    """Base class of payload errors."""

    @property
    def temporary(self) -> bool:
        """Whether the failed operation may be retried."""
        return False


class OpError(PayloadError):
    """An error bound to the operation that failed."""

    def __init__(self, op: str, err: BaseException) -> None:
        super().__init__(f"{op}: {err}")
        self.op = op
        self.err = err

    @property
    def temporary(self) -> bool:
        if isinstance(self.err, PayloadError):
            return self.err.temporary
        return False


class RetryError(PayloadError):
    """An error after which the operation can be retried."""

    @property
    def temporary(self) -> bool:
        return True


class InvalidPayloadError(PayloadError, ValueError):
    """Malformed payload data."""

    def __init__(self, message: str = "invalid payload") -> None:
        super().__init__(message)