"""
WebSocket Server for the Relay

Accepts client connections, screens them against the origin allow-list,
answers plain HTTP health checks, and hands every frame to the router.
"""

import logging
from http import HTTPStatus
from typing import Optional

import websockets
from websockets.asyncio.server import Server, ServerConnection, serve
from websockets.http11 import Request, Response

from .config import ServerConfig
from .router import MessageRouter
from .session import ConnectionSession

logger = logging.getLogger(__name__)

HEALTH_PATH = "/health"
ROOT_PATH = "/"


class WebSocketServer:
    """
    WebSocket server for handling client connections.

    Health checks and the origin check run in process_request(), before the
    WebSocket handshake completes.
    """

    def __init__(self, router: MessageRouter, config: ServerConfig):
        """
        Initialize the WebSocket server.

        Args:
            router: Router that processes client frames
            config: Server settings (bind address, allowed origins)
        """
        self.router = router
        self.config = config
        self.server: Optional[Server] = None

    async def start(self):
        """Start the WebSocket server."""
        self.server = await serve(
            self.handle_client,
            self.config.host,
            self.config.port,
            process_request=self.process_request,
        )
        logger.info(
            f"Server started and running on port {self.bound_port}"
        )

    async def stop(self):
        """Stop the WebSocket server."""
        if self.server:
            self.server.close()
            await self.server.wait_closed()
            logger.info("WebSocket server stopped")

    @property
    def bound_port(self) -> Optional[int]:
        """The port actually bound (useful when configured with port 0)."""
        if not self.server:
            return None
        for sock in self.server.sockets:
            return sock.getsockname()[1]
        return None

    def process_request(
        self, connection: ServerConnection, request: Request
    ) -> Optional[Response]:
        """
        Answer plain HTTP requests and reject disallowed origins.

        Returns:
            A response to send instead of upgrading, or None to continue
            with the WebSocket handshake
        """
        if request.path == HEALTH_PATH:
            return connection.respond(HTTPStatus.OK, "OK\n")

        if request.path == ROOT_PATH and "Upgrade" not in request.headers:
            return connection.respond(
                HTTPStatus.OK, "WebSocket server running...\n"
            )

        origin = request.headers.get("Origin")
        if not self.config.origin_allowed(origin):
            logger.warning(f"Rejected connection from origin: {origin}")
            return connection.respond(
                HTTPStatus.UNAUTHORIZED, "Unauthorized origin\n"
            )

        return None

    async def handle_client(self, websocket: ServerConnection):
        """
        Handle a client connection.

        Args:
            websocket: The WebSocket connection
        """
        session = ConnectionSession(connection=websocket)
        logger.info(f"New connection established: client {session.client_id}")

        try:
            async for message in websocket:
                self.router.handle_message(session, message)
        except websockets.exceptions.ConnectionClosed:
            logger.info(f"Client {session.client_id} disconnected")
        except Exception as e:
            logger.error(f"Error handling client {session.client_id}: {e}")
        finally:
            self.router.handle_close(session)
