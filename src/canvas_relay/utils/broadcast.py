"""
Broadcast Utilities

Fans a message out to the members of a room.
"""

import json
import logging
from typing import Any, Dict, Optional

from websockets.asyncio.server import broadcast
from websockets.protocol import State

from ..room_state import Room

logger = logging.getLogger(__name__)


def is_writable(connection) -> bool:
    """True if the connection can still accept outbound frames."""
    return connection.state is State.OPEN


class BroadcastEngine:
    """
    Delivers one payload to many room members.

    The payload is serialized once and handed to websockets' broadcast(),
    which writes the same frame to every open connection without waiting
    for any of them to drain. Closed or closing connections are skipped and
    a failed write never stops the rest of the fan-out. Nothing here
    suspends, so a handler that broadcasts runs to completion in one step.
    """

    def broadcast_all(self, room: Room, payload: Dict[str, Any]) -> int:
        """
        Send a payload to every member of a room.

        Args:
            room: The room to broadcast to
            payload: The message to broadcast

        Returns:
            Number of open members the payload was handed to
        """
        return self._fan_out(room, payload, exclude=None)

    def broadcast_except(
        self, room: Room, sender: Any, payload: Dict[str, Any]
    ) -> int:
        """
        Send a payload to every member of a room except the sender.

        Args:
            room: The room to broadcast to
            sender: Connection to leave out
            payload: The message to broadcast

        Returns:
            Number of open members the payload was handed to
        """
        return self._fan_out(room, payload, exclude=sender)

    def send_direct(self, connection: Any, payload: Dict[str, Any]) -> bool:
        """
        Send a payload to a single connection.

        Args:
            connection: The recipient
            payload: The message to send

        Returns:
            True if the connection was open and the payload was handed to it
        """
        if not is_writable(connection):
            logger.debug(f"Client {id(connection)} closed before reply")
            return False
        broadcast([connection], json.dumps(payload))
        return True

    def _fan_out(
        self, room: Room, payload: Dict[str, Any], exclude: Optional[Any]
    ) -> int:
        recipients = [
            connection
            for connection in room.members
            if connection is not exclude and is_writable(connection)
        ]
        skipped = len(room.members) - len(recipients) - (exclude in room.members)
        if skipped:
            logger.debug(
                f"Skipping {skipped} closed connection(s) in room {room.room_id}"
            )
        if recipients:
            broadcast(recipients, json.dumps(payload))
        return len(recipients)
