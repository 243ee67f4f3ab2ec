"""
Relay Errors

Exceptions raised while decoding inbound client messages.
"""


class ProtocolError(Exception):
    """Raised when an inbound payload cannot be decoded into a message."""


class UnknownMessageType(Exception):
    """Raised when a well-formed payload carries an unsupported type."""

    def __init__(self, message_type: str):
        super().__init__(f"Unknown message type: {message_type}")
        self.message_type = message_type
