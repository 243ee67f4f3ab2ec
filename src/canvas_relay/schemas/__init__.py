"""
Schemas for the Relay

This module contains the inbound message types and the builders for the
envelopes the relay sends back to clients.
"""

from .messages import (
    CreateRoomMessage,
    JoinRoomMessage,
    ChatMessage,
    DrawingMessage,
    InboundMessage,
    parse_message,
)
from .events import (
    create_user_joined_event,
    create_user_left_event,
    create_chat_event,
)
from .responses import (
    create_error_response,
    create_join_error_response,
    create_room_exists_response,
    create_no_room_response,
    INVALID_DATA_FORMAT,
    MISSING_ROOM_FIELDS,
)

__all__ = [
    "CreateRoomMessage",
    "JoinRoomMessage",
    "ChatMessage",
    "DrawingMessage",
    "InboundMessage",
    "parse_message",
    "create_user_joined_event",
    "create_user_left_event",
    "create_chat_event",
    "create_error_response",
    "create_join_error_response",
    "create_room_exists_response",
    "create_no_room_response",
    "INVALID_DATA_FORMAT",
    "MISSING_ROOM_FIELDS",
]
