"""
Response Schema Definitions

Contains functions for creating replies sent only to the requesting
connection.
"""

from typing import Any, Dict

INVALID_DATA_FORMAT = "Invalid data format"
MISSING_ROOM_FIELDS = "Missing room ID or username"


def create_error_response(error_message: str) -> Dict[str, Any]:
    """
    Create a generic error response.

    Args:
        error_message: Error message text

    Returns:
        dict: Error response
    """
    return {
        "type": "error",
        "message": error_message,
    }


def create_join_error_response(error_message: str) -> Dict[str, Any]:
    """
    Create the error reply for a join_room request.

    Join errors carry their text under "msg", like the other join replies.

    Args:
        error_message: Error message text

    Returns:
        dict: Error response
    """
    return {
        "type": "error",
        "msg": error_message,
    }


def create_room_exists_response(room_id: str) -> Dict[str, Any]:
    """
    Create the reply for a create_room on an ID that is already taken.

    Args:
        room_id: The requested room ID

    Returns:
        dict: Notice response
    """
    return {
        "type": "room_already_exist",
        "roomId": room_id,
        "msg": f"{room_id} already existed...",
    }


def create_no_room_response(room_id: str) -> Dict[str, Any]:
    """
    Create the reply for a join_room on an unknown room.

    Args:
        room_id: The requested room ID

    Returns:
        dict: Notice response
    """
    return {
        "type": "no_room",
        "roomId": room_id,
        "msg": f"Room {room_id} does not exist",
    }
