"""
Event Schema Definitions

Contains functions for creating the envelopes broadcast to room members:
user_joined, user_left and chat.
"""

import time
from typing import Any, Dict, List, Optional


def create_user_joined_event(
    room_id: str,
    username: str,
    users: List[str],
    user_count: int,
    drawings: List[Dict[str, Any]],
) -> Dict[str, Any]:
    """
    Create a user_joined event.

    Args:
        room_id: Room ID the user joined
        username: Username of the joining member
        users: Usernames currently in the room
        user_count: Number of connections in the room after the join
        drawings: Drawing history for the joiner to rebuild the canvas

    Returns:
        dict: Event broadcast
    """
    return {
        "type": "user_joined",
        "drawings": drawings,
        "users": users,
        "username": username,
        "roomId": room_id,
        "userCount": user_count,
        "message": f"{username} joined the room: {room_id}",
    }


def create_user_left_event(
    room_id: str,
    username: Optional[str],
    users: List[str],
    user_count: int,
) -> Dict[str, Any]:
    """
    Create a user_left event.

    Args:
        room_id: Room ID the user left
        username: Username of the departing member
        users: Usernames remaining in the room
        user_count: Number of connections remaining

    Returns:
        dict: Event broadcast
    """
    return {
        "type": "user_left",
        "users": users,
        "username": username,
        "roomId": room_id,
        "userCount": user_count,
        "message": f"{username} left the room",
    }


def create_chat_event(
    username: Optional[str],
    text: Any,
    timestamp: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Create a chat broadcast.

    Args:
        username: Username of the sender
        text: Chat text as sent
        timestamp: Server time in milliseconds since the epoch (now if None)

    Returns:
        dict: Event broadcast
    """
    if timestamp is None:
        timestamp = int(time.time() * 1000)
    return {
        "type": "chat",
        "username": username,
        "text": text,
        "timestamp": timestamp,
    }
