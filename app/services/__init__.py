"""Services package."""

from app.services.connection_manager import ConnectionManager
from app.services.inventory_store import InventoryStore

__all__ = ["ConnectionManager", "InventoryStore"]
