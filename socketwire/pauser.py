"""Coordination of pausing while workers are active."""

from __future__ import annotations

import threading
from enum import Enum, auto

__all__ = ["Pauser"]


class _Status(Enum):
    NORMAL = auto()
    PAUSING = auto()
    PAUSED = auto()


class Pauser:
    """Lets a pause wait until every active worker is done.

    ``pausing_trigger`` is set as soon as a pause is requested and
    ``paused_trigger`` once it has taken effect; ``resume`` replaces both.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._workers = 0
        self._pausing = threading.Event()
        self._paused = threading.Event()
        self._status = _Status.NORMAL

    def pause(self) -> bool:
        """Pause once all workers are done; False if already paused."""
        with self._cond:
            if self._status is _Status.PAUSED:
                return False
            if self._status is _Status.NORMAL:
                self._pausing.set()
                self._status = _Status.PAUSING
            while self._workers != 0:
                self._cond.wait()
            if self._status is _Status.PAUSED:
                return False
            self._paused.set()
            self._status = _Status.PAUSED
            self._cond.notify_all()
            return True

    def resume(self) -> None:
        """Return to normal operation with fresh triggers."""
        with self._cond:
            self._status = _Status.NORMAL
            self._paused = threading.Event()
            self._pausing = threading.Event()

    def working(self) -> bool:
        """Register a worker; False once paused."""
        with self._cond:
            if self._status is _Status.PAUSED:
                return False
            self._workers += 1
            return True

    def done(self) -> None:
        """Unregister a worker."""
        with self._cond:
            if self._status is _Status.PAUSED or self._workers == 0:
                return
            self._workers -= 1
            self._cond.notify_all()

    def pausing_trigger(self) -> threading.Event:
        """Event set when a pause has been requested."""
        with self._cond:
            return self._pausing

    def paused_trigger(self) -> threading.Event:
        """Event set when the pause has taken effect."""
        with self._cond:
            return self._paused