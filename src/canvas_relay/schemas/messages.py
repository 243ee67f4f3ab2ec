"""
Inbound Message Schema Definitions

Contains the typed messages a client may send and the decoder that turns a
raw WebSocket frame into one of them. Anything that does not decode into a
known shape is rejected here, before it reaches room logic.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from ..errors import ProtocolError, UnknownMessageType

STROKE_TYPES = ("start", "draw")
SHAPE_TYPES = ("text", "rectangle", "circle")
CLEAR_TYPE = "clear"
DRAWING_TYPES = STROKE_TYPES + SHAPE_TYPES + (CLEAR_TYPE,)


@dataclass
class CreateRoomMessage:
    """
    Request to create a room and join it.

    Attributes:
        room_id: Requested room ID (may be missing)
        username: Display name (may be missing)
    """

    room_id: Optional[str]
    username: Optional[str]


@dataclass
class JoinRoomMessage:
    """
    Request to join an existing room.

    Attributes:
        room_id: Room ID to join (may be missing)
        username: Display name (may be missing)
    """

    room_id: Optional[str]
    username: Optional[str]


@dataclass
class ChatMessage:
    """A chat line for the other members of the sender's room."""

    text: Any


@dataclass
class DrawingMessage:
    """
    A stroke, shape or clear event.

    Attributes:
        kind: The event type (start, draw, text, rectangle, circle, clear)
        payload: The full event as received, forwarded verbatim
    """

    kind: str
    payload: Dict[str, Any]

    @property
    def is_clear(self) -> bool:
        return self.kind == CLEAR_TYPE


InboundMessage = Union[
    CreateRoomMessage, JoinRoomMessage, ChatMessage, DrawingMessage
]


def parse_message(raw: Union[str, bytes]) -> InboundMessage:
    """
    Decode a raw frame into a typed message.

    Args:
        raw: The frame received from the client (JSON text)

    Returns:
        The decoded message

    Raises:
        ProtocolError: If the frame is not a JSON object with a type
        UnknownMessageType: If the type is not one the relay handles
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ProtocolError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ProtocolError("Message must be a JSON object")

    message_type = data.get("type")
    if not message_type:
        raise ProtocolError("Missing message type")
    if not isinstance(message_type, str):
        raise UnknownMessageType(repr(message_type))

    if message_type == "create_room":
        return CreateRoomMessage(
            room_id=data.get("roomId"), username=data.get("username")
        )
    if message_type == "join_room":
        return JoinRoomMessage(
            room_id=data.get("roomId"), username=data.get("username")
        )
    if message_type == "chat":
        return ChatMessage(text=data.get("text"))
    if message_type in DRAWING_TYPES:
        return DrawingMessage(kind=message_type, payload=data)

    raise UnknownMessageType(message_type)
