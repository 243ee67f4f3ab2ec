"""
Room Service for the Relay

Owns the room registry and implements the room lifecycle: creating rooms,
joining, leaving, and relaying chat and drawing events to room members.

Architecture:
    - One RoomService per process, built at startup and handed to the
      router; there is no module-level state
    - Every operation is synchronous: a handler and its fan-out finish
      before the event loop runs anything else
"""

import logging
from typing import Any, Optional

from .room_state import Room, RoomRegistry
from .session import ConnectionSession
from .schemas import (
    DrawingMessage,
    create_user_joined_event,
    create_user_left_event,
    create_chat_event,
    create_error_response,
    create_join_error_response,
    create_room_exists_response,
    create_no_room_response,
)
from .utils import BroadcastEngine, validate_room_request

logger = logging.getLogger(__name__)


class RoomService:
    """
    Room lifecycle and event relay.

    Expected negative outcomes (room already exists, room not found,
    missing fields) are answered with a reply to the requester only and
    never raise.
    """

    def __init__(
        self,
        registry: Optional[RoomRegistry] = None,
        broadcaster: Optional[BroadcastEngine] = None,
    ):
        """
        Initialize the room service.

        Args:
            registry: Room registry to operate on (a fresh one if None)
            broadcaster: Fan-out engine (a default one if None)
        """
        self.registry = registry if registry is not None else RoomRegistry()
        self.broadcaster = (
            broadcaster if broadcaster is not None else BroadcastEngine()
        )
        logger.info("RoomService initialized")

    def reply(self, session: ConnectionSession, payload: dict) -> bool:
        """Send a payload to the session's own connection."""
        return self.broadcaster.send_direct(session.connection, payload)

    def current_room(self, session: ConnectionSession) -> Optional[Room]:
        """Return the room the session occupies, if it still exists."""
        if not session.in_room:
            return None
        return self.registry.get_room(session.room_id)

    # ===== Room lifecycle =====

    def create_room(
        self, session: ConnectionSession, room_id: Any, username: Any
    ):
        """
        Handle a create_room request.

        Args:
            session: The requesting session
            room_id: Requested room ID
            username: Requested display name
        """
        self.leave(session)

        is_valid, error = validate_room_request(room_id, username)
        if not is_valid:
            self.reply(session, create_error_response(error))
            return
        session.username = username

        room = self.registry.create(room_id)
        if room is None:
            logger.info(
                f"{username} tried to create existing room {room_id}"
            )
            self.reply(session, create_room_exists_response(room_id))
            return

        self.join(room, session, username)

    def join_room(
        self, session: ConnectionSession, room_id: Any, username: Any
    ):
        """
        Handle a join_room request.

        Args:
            session: The requesting session
            room_id: Room ID to join
            username: Requested display name
        """
        self.leave(session)

        is_valid, error = validate_room_request(room_id, username)
        if not is_valid:
            self.reply(session, create_join_error_response(error))
            return
        session.username = username

        room = self.registry.get_room(room_id)
        if room is None:
            logger.info(f"{username} tried to join missing room {room_id}")
            self.reply(session, create_no_room_response(room_id))
            return

        self.join(room, session, username)

    def join(self, room: Room, session: ConnectionSession, username: str):
        """
        Add a session to a room and announce it to every member.

        The joiner receives the announcement too; it carries the drawing
        history the joiner needs to rebuild the canvas.

        Args:
            room: The room to join
            session: The joining session
            username: Display name to announce
        """
        room.add_member(session.connection, username)
        session.enter(room.room_id, username)

        event = create_user_joined_event(
            room_id=room.room_id,
            username=username,
            users=room.user_list,
            user_count=room.member_count,
            drawings=room.history.snapshot(),
        )
        self.broadcaster.broadcast_all(room, event)
        logger.info(f"{username} joined room {room.room_id}")

    def leave(self, session: ConnectionSession):
        """
        Remove a session from its current room, if it has one.

        An emptied room is deleted without notifying anyone; otherwise the
        remaining members receive user_left.

        Args:
            session: The departing session
        """
        if not session.in_room:
            return

        room_id = session.room_id
        session.clear_room()
        room = self.registry.get_room(room_id)
        if room is None or not room.has_member(session.connection):
            return

        username = session.username
        room.remove_member(session.connection, username)
        logger.info(f"{username} left room {room_id}")

        if self.registry.delete_if_empty(room_id):
            return

        event = create_user_left_event(
            room_id=room_id,
            username=username,
            users=room.user_list,
            user_count=room.member_count,
        )
        self.broadcaster.broadcast_except(room, session.connection, event)

    # ===== Event relay =====

    def send_chat(self, session: ConnectionSession, text: Any) -> int:
        """
        Relay a chat line to the other members of the session's room.

        Returns:
            Number of members the chat was handed to
        """
        room = self.current_room(session)
        if room is None:
            logger.debug(f"Client {session.client_id} sent chat outside a room")
            return 0

        event = create_chat_event(session.username, text)
        return self.broadcaster.broadcast_except(
            room, session.connection, event
        )

    def relay_drawing(
        self, session: ConnectionSession, message: DrawingMessage
    ) -> int:
        """
        Record a drawing event and forward it verbatim to the other members.

        A clear event wipes the room history instead of being recorded.

        Returns:
            Number of members the event was handed to
        """
        room = self.current_room(session)
        if room is None:
            logger.debug(
                f"Client {session.client_id} sent {message.kind} outside a room"
            )
            return 0

        if message.is_clear:
            room.history.reset()
            logger.info(f"Canvas cleared in room {room.room_id}")
        else:
            room.history.append(message.payload)

        return self.broadcaster.broadcast_except(
            room, session.connection, message.payload
        )
