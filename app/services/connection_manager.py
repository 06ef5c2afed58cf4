"""WebSocket connection registry and creation broadcasts."""

import logging
import threading

from fastapi import WebSocket
from starlette.websockets import WebSocketState

from app.schemas.item import Item

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Service to push new items to every live WebSocket client."""

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._connections: set[WebSocket] = set()
        self._lock = threading.Lock()

    @property
    def active_connections(self) -> int:
        with self._lock:
            return len(self._connections)

    async def connect(self, websocket: WebSocket) -> None:
        """Register and accept a client connection."""
        with self._lock:
            self._connections.add(websocket)
        await websocket.accept()
        logger.info("🔌 Client connected (%d open)", self.active_connections)

    def disconnect(self, websocket: WebSocket) -> None:
        """Forget a client connection. Safe to call more than once."""
        with self._lock:
            self._connections.discard(websocket)
        logger.info("👋 Client disconnected (%d open)", self.active_connections)

    async def broadcast(self, item: Item) -> int:
        """
        Send ``item`` as JSON text to every open connection.

        Connections that are still connecting or already closing are skipped.
        A failed send drops that connection without affecting the others.

        Args:
            item: Newly created item

        Returns:
            Number of connections the payload was sent to
        """
        payload = item.model_dump_json()
        with self._lock:
            connections = list(self._connections)

        delivered = 0
        for websocket in connections:
            if not _is_open(websocket):
                continue
            try:
                await websocket.send_text(payload)
                delivered += 1
            except Exception as e:
                logger.warning("⚠️  Dropping connection after failed send: %s", e)
                self.disconnect(websocket)

        logger.debug("Broadcast item %s to %d clients", item.id, delivered)
        return delivered


def _is_open(websocket: WebSocket) -> bool:
    return (
        websocket.client_state == WebSocketState.CONNECTED
        and websocket.application_state == WebSocketState.CONNECTED
    )
