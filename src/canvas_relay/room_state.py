"""
Room State Management for the Relay

This module manages the in-memory state of whiteboard rooms: which
connections are inside each room, the usernames they announced, and the
drawing history replayed to anyone who joins later.

Nothing here is persisted; a room lives only while it has members.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Set

logger = logging.getLogger(__name__)

CLEAR_EVENT_TYPE = "clear"


class DrawingLog:
    """
    Ordered history of drawing events for a single room.

    Events are stored exactly as received. A clear marker is never stored;
    it wipes the log instead (see reset()).
    """

    def __init__(self):
        self._events: List[Dict[str, Any]] = []

    def append(self, event: Dict[str, Any]) -> bool:
        """
        Append a drawing event to the history.

        Args:
            event: The drawing event payload

        Returns:
            True if the event was stored, False for a clear marker
        """
        if event.get("type") == CLEAR_EVENT_TYPE:
            return False
        self._events.append(event)
        return True

    def reset(self):
        """Drop every stored event."""
        self._events = []

    def snapshot(self) -> List[Dict[str, Any]]:
        """Return a copy of the history in original order."""
        return list(self._events)

    def __len__(self) -> int:
        return len(self._events)


@dataclass
class Room:
    """
    Represents a whiteboard room.

    Attributes:
        room_id: Unique identifier for the room
        members: Live connections currently inside the room
        usernames: Usernames announced by members, in join order
        history: Drawing events replayed to new joiners
        created_at: ISO 8601 timestamp when the room was created
    """

    room_id: str
    members: Set[Any] = field(default_factory=set)
    usernames: Dict[str, None] = field(default_factory=dict)
    history: DrawingLog = field(default_factory=DrawingLog)
    created_at: str = ""

    def __post_init__(self):
        """Initialize the creation timestamp if not set."""
        if not self.created_at:
            self.created_at = datetime.now(timezone.utc).isoformat()

    def add_member(self, connection: Any, username: str):
        """Add a connection and its username to the room."""
        self.members.add(connection)
        self.usernames[username] = None

    def remove_member(self, connection: Any, username: Optional[str]):
        """Remove a connection and its username from the room."""
        self.members.discard(connection)
        if username is not None:
            self.usernames.pop(username, None)

    def has_member(self, connection: Any) -> bool:
        return connection in self.members

    def is_empty(self) -> bool:
        """True when no connection and no username is left."""
        return not self.members and not self.usernames

    @property
    def user_list(self) -> List[str]:
        return list(self.usernames)

    @property
    def member_count(self) -> int:
        return len(self.members)

    def to_dict(self) -> Dict[str, Any]:
        """Convert room to dictionary for serialization."""
        return {
            "room_id": self.room_id,
            "users": self.user_list,
            "member_count": self.member_count,
            "drawing_count": len(self.history),
            "created_at": self.created_at,
        }


class RoomRegistry:
    """
    Maps room IDs to rooms.

    Rooms are created explicitly and removed only through delete_if_empty(),
    so "does this room exist" is always answered by registry membership.
    """

    def __init__(self):
        self._rooms: Dict[str, Room] = {}

    def create(self, room_id: str) -> Optional[Room]:
        """
        Create an empty room.

        Args:
            room_id: The room ID to create

        Returns:
            The created Room, or None if a room with this ID already exists.
            An existing room is left untouched.
        """
        if room_id in self._rooms:
            return None

        room = Room(room_id=room_id)
        self._rooms[room_id] = room
        logger.info(f"Created room {room_id}")
        return room

    def get_room(self, room_id: str) -> Optional[Room]:
        """
        Get a room by its ID.

        Args:
            room_id: The room ID to look up

        Returns:
            The Room object if found, None otherwise
        """
        return self._rooms.get(room_id)

    def delete_if_empty(self, room_id: str) -> bool:
        """
        Delete a room once both its members and usernames are gone.

        Args:
            room_id: The room ID to check

        Returns:
            True if the room was deleted, False otherwise
        """
        room = self._rooms.get(room_id)
        if room is None or not room.is_empty():
            return False

        del self._rooms[room_id]
        logger.info(f"Room {room_id} deleted (no users left)")
        return True

    def list_rooms(self) -> List[Dict[str, Any]]:
        """Get summaries of every room."""
        return [room.to_dict() for room in self._rooms.values()]

    def get_room_count(self) -> int:
        """Get the total number of rooms."""
        return len(self._rooms)

    def __contains__(self, room_id: str) -> bool:
        return room_id in self._rooms
