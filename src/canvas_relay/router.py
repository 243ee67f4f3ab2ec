"""
Message Router

Decodes each inbound frame and dispatches it to the room service. Each
frame is handled on its own; the only state carried between frames is the
connection's session.
"""

import logging
from typing import Union

from .errors import UnknownMessageType
from .schemas import (
    CreateRoomMessage,
    JoinRoomMessage,
    ChatMessage,
    DrawingMessage,
    InboundMessage,
    parse_message,
    create_error_response,
    INVALID_DATA_FORMAT,
)
from .service import RoomService
from .session import ConnectionSession

logger = logging.getLogger(__name__)


class MessageRouter:
    """
    Routes client messages to room operations.

    A bad frame never closes the connection: the sender gets a generic
    error envelope and may keep sending.
    """

    def __init__(self, service: RoomService):
        """
        Initialize the router.

        Args:
            service: The room service that owns all room state
        """
        self.service = service

    def handle_message(
        self, session: ConnectionSession, raw: Union[str, bytes]
    ):
        """
        Process an incoming frame from a client.

        Args:
            session: The sender's session
            raw: The frame as received (JSON)
        """
        try:
            message = parse_message(raw)
            self.dispatch(session, message)
        except UnknownMessageType as e:
            logger.warning(str(e))
        except Exception as e:
            logger.error(
                f"Error handling message from client "
                f"{session.client_id}: {e}"
            )
            self._send_error(session)

    def dispatch(self, session: ConnectionSession, message: InboundMessage):
        """Run the room operation for a decoded message."""
        if isinstance(message, CreateRoomMessage):
            self.service.create_room(
                session, message.room_id, message.username
            )
        elif isinstance(message, JoinRoomMessage):
            self.service.join_room(
                session, message.room_id, message.username
            )
        elif isinstance(message, ChatMessage):
            self.service.send_chat(session, message.text)
        elif isinstance(message, DrawingMessage):
            self.service.relay_drawing(session, message)
        else:
            raise TypeError(f"Unsupported message: {message!r}")

    def handle_close(self, session: ConnectionSession):
        """
        Clean up after a connection closes, whatever the cause.

        Args:
            session: The closed connection's session
        """
        self.service.leave(session)
        logger.info(f"Client {session.client_id} connection closed")

    def _send_error(self, session: ConnectionSession):
        try:
            self.service.reply(
                session, create_error_response(INVALID_DATA_FORMAT)
            )
        except Exception as e:
            logger.error(f"Failed to send error message: {e}")
