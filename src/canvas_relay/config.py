"""
Relay Configuration

Settings are read from the environment when the server starts.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_ALLOWED_ORIGINS = (
    "https://aanand-code.github.io",
    "https://real-time-collaborative-whiteboard-uove.onrender.com",
    "http://localhost:5500",
)
ANY_ORIGIN = "*"


def normalize_origin(origin: str) -> str:
    """Strip whitespace and any trailing slash from an origin."""
    return origin.strip().rstrip("/")


def parse_origins(value: str) -> Tuple[str, ...]:
    """
    Parse a comma-separated origin list.

    Example: "https://a.example, http://localhost:5500/"
    """
    origins = (normalize_origin(part) for part in value.split(","))
    return tuple(origin for origin in origins if origin)


@dataclass(frozen=True)
class ServerConfig:
    """
    Relay server settings.

    Attributes:
        host: Host address to bind to
        port: Port to listen on (WebSocket and health checks share it)
        allowed_origins: Origins allowed to open a WebSocket; "*" allows any
        log_level: Name of the root logging level
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    allowed_origins: Tuple[str, ...] = DEFAULT_ALLOWED_ORIGINS
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        """
        Build the configuration from environment variables.

        Reads HOST, PORT, ALLOWED_ORIGINS and LOG_LEVEL.

        Raises:
            ValueError: If PORT is not an integer
        """
        if environ is None:
            environ = os.environ

        port_value = environ.get("PORT", str(DEFAULT_PORT))
        try:
            port = int(port_value)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {port_value!r}")

        origins_env = environ.get("ALLOWED_ORIGINS")
        allowed_origins = (
            parse_origins(origins_env)
            if origins_env is not None
            else DEFAULT_ALLOWED_ORIGINS
        )

        return cls(
            host=environ.get("HOST", DEFAULT_HOST),
            port=port,
            allowed_origins=allowed_origins,
            log_level=environ.get("LOG_LEVEL", "INFO").upper(),
        )

    def origin_allowed(self, origin: Optional[str]) -> bool:
        """Check an Origin header against the allow-list."""
        if ANY_ORIGIN in self.allowed_origins:
            return True
        if not origin:
            return False
        return normalize_origin(origin) in self.allowed_origins
