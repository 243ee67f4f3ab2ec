"""
Per-connection session state.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional


@dataclass
class ConnectionSession:
    """
    State tracked for one live connection.

    Attributes:
        connection: The transport connection (owned by the server)
        room_id: The room this connection currently occupies, if any
        username: The display name most recently supplied
        connected_at: ISO 8601 timestamp when the connection was accepted
    """

    connection: Any
    room_id: Optional[str] = None
    username: Optional[str] = None
    connected_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    @property
    def client_id(self) -> int:
        """Identifier used in log lines."""
        return id(self.connection)

    @property
    def in_room(self) -> bool:
        return self.room_id is not None

    def enter(self, room_id: str, username: str):
        """Record that the connection now occupies a room."""
        self.room_id = room_id
        self.username = username

    def clear_room(self):
        """Forget the current room; the username is kept."""
        self.room_id = None
