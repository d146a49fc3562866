"""Room membership and broadcasting to connections."""

from __future__ import annotations

import threading
from typing import Any, Callable, Protocol

__all__ = ["Connection", "Broadcast"]


class Connection(Protocol):
    """What a room member must offer."""

    @property
    def id(self) -> str: ...

    def emit(self, event: str, *args: Any) -> None: ...


class Broadcast:
    """Rooms of connections, keyed by room name and connection id."""

    def __init__(self) -> None:
        self._rooms: dict[str, dict[str, Connection]] = {}
        self._lock = threading.RLock()

    def join(self, room: str, connection: Connection) -> None:
        """Add the connection to the room."""
        with self._lock:
            self._rooms.setdefault(room, {})[connection.id] = connection

    def leave(self, room: str, connection: Connection) -> None:
        """Remove the connection from the room; empty rooms disappear."""
        with self._lock:
            members = self._rooms.get(room)
            if members is None:
                return
            members.pop(connection.id, None)
            if not members:
                del self._rooms[room]

    def leave_all(self, connection: Connection) -> None:
        """Remove the connection from every room."""
        with self._lock:
            for room, members in list(self._rooms.items()):
                members.pop(connection.id, None)
                if not members:
                    del self._rooms[room]

    def clear(self, room: str) -> None:
        """Remove the room and all its members."""
        with self._lock:
            self._rooms.pop(room, None)

    def send(self, room: str, event: str, *args: Any) -> None:
        """Emit the event to every connection in the room."""
        with self._lock:
            members = list(self._rooms.get(room, {}).values())
            for connection in members:
                connection.emit(event, *args)

    def send_all(self, event: str, *args: Any) -> None:
        """Emit the event to every connection of every room."""
        with self._lock:
            members = [c for room in self._rooms.values() for c in room.values()]
            for connection in members:
                connection.emit(event, *args)

    def for_each(self, room: str, func: Callable[[Connection], Any]) -> None:
        """Call ``func`` for each connection in the room, if it exists."""
        with self._lock:
            members = self._rooms.get(room)
            if members is None:
                return
            for connection in list(members.values()):
                func(connection)

    def size(self, room: str) -> int:
        """Number of connections in the room."""
        with self._lock:
            return len(self._rooms.get(room, {}))

    def rooms(self, connection: Connection | None = None) -> list[str]:
        """Rooms the connection is in, or every room when none is given."""
        if connection is None:
            return self.all_rooms()
        with self._lock:
            return [room for room, members in self._rooms.items() if connection.id in members]

    def all_rooms(self) -> list[str]:
        """Every room that has members."""
        with self._lock:
            return list(self._rooms)