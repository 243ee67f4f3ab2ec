"""
Validation Utilities

Contains utility functions for validating room requests.
"""

from typing import Any, Optional, Tuple

from ..schemas.responses import MISSING_ROOM_FIELDS


def _is_present(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def validate_room_request(
    room_id: Any, username: Any
) -> Tuple[bool, Optional[str]]:
    """
    Validate the fields of a create_room or join_room request.

    Args:
        room_id: The requested room ID
        username: The requested display name

    Returns:
        tuple: (is_valid, error_message)
            - is_valid: True if both fields are non-empty strings
            - error_message: Error message if invalid, None if valid
    """
    if not _is_present(room_id) or not _is_present(username):
        return False, MISSING_ROOM_FIELDS

    return True, None
