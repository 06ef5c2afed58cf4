"""Dependencies resolving the application-owned services."""

from starlette.requests import HTTPConnection

from app.services.connection_manager import ConnectionManager
from app.services.inventory_store import InventoryStore


def get_store(connection: HTTPConnection) -> InventoryStore:
    """Get the inventory store of the running application."""
    return connection.app.state.store


def get_connection_manager(connection: HTTPConnection) -> ConnectionManager:
    """Get the WebSocket registry of the running application."""
    return connection.app.state.connection_manager
