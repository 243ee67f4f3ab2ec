#!/usr/bin/env python3
"""
Collaborative Whiteboard Relay

Runs the WebSocket relay that shares drawing and chat events between the
members of a room.
"""

import asyncio
import logging
import sys

from .config import ServerConfig
from .router import MessageRouter
from .service import RoomService
from .websocket_server import WebSocketServer

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO"):
    """Configure root logging for the process."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


async def run_server(config: ServerConfig):
    """
    Run the relay until cancelled.

    Args:
        config: Server settings
    """
    service = RoomService()
    router = MessageRouter(service)
    ws_server = WebSocketServer(router, config)

    await ws_server.start()
    logger.info(f"Allowed origins: {', '.join(config.allowed_origins)}")

    try:
        await asyncio.Event().wait()
    except asyncio.CancelledError:
        logger.info("Server shutdown requested")
    finally:
        await ws_server.stop()
        logger.info("Relay stopped")


def main():
    """Main entry point for the relay server."""
    config = ServerConfig.from_env()
    configure_logging(config.log_level)
    logger.info("Starting whiteboard relay server...")

    try:
        asyncio.run(run_server(config))
    except KeyboardInterrupt:
        logger.info("Shutting down relay server...")
        sys.exit(0)


if __name__ == "__main__":
    main()
