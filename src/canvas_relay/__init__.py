"""
Whiteboard Relay Package

This package provides the real-time relay for the collaborative whiteboard:
room state, message routing, broadcasting and the WebSocket server.
"""

from .room_state import DrawingLog, Room, RoomRegistry
from .session import ConnectionSession
from .service import RoomService
from .router import MessageRouter
from .config import ServerConfig
from .websocket_server import WebSocketServer
from .errors import ProtocolError, UnknownMessageType

__all__ = [
    "DrawingLog",
    "Room",
    "RoomRegistry",
    "ConnectionSession",
    "RoomService",
    "MessageRouter",
    "ServerConfig",
    "WebSocketServer",
    "ProtocolError",
    "UnknownMessageType",
]
