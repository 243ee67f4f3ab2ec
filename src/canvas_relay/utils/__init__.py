"""
Utilities for the Relay

This module contains utility functions for common operations
like broadcasting and request validation.
"""

from .broadcast import BroadcastEngine, is_writable
from .validation import validate_room_request

__all__ = [
    "BroadcastEngine",
    "is_writable",
    "validate_room_request",
]
