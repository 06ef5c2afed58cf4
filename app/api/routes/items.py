"""Inventory routes."""

import logging

from fastapi import APIRouter, Depends, status

from app.api.deps import get_connection_manager, get_store
from app.core.errors import ServerError
from app.schemas.item import Item, ItemCreate
from app.services.connection_manager import ConnectionManager
from app.services.inventory_store import InventoryStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/items", response_model=list[Item])
async def get_items(store: InventoryStore = Depends(get_store)) -> list[Item]:
    """Get all items."""
    try:
        return store.list_items()
    except Exception as e:
        raise ServerError("Server error retrieving inventory") from e


@router.get("/all", response_model=list[Item])
async def get_all_items(store: InventoryStore = Depends(get_store)) -> list[Item]:
    """Get all items (alias of /items)."""
    try:
        return store.list_items()
    except Exception as e:
        raise ServerError("Server error retrieving inventory") from e


@router.get("/item/{item_id}", response_model=Item)
async def get_item(item_id: str, store: InventoryStore = Depends(get_store)) -> Item:
    """Get a specific item by ID."""
    return store.get_item(item_id)


@router.post("/item", response_model=Item, status_code=status.HTTP_201_CREATED)
async def create_item(
    payload: ItemCreate | None = None,
    store: InventoryStore = Depends(get_store),
    manager: ConnectionManager = Depends(get_connection_manager),
) -> Item:
    """Create a new item and notify connected clients."""
    item = store.create_item(payload if payload is not None else ItemCreate())

    try:
        await manager.broadcast(item)
    except Exception:
        logger.exception("❌ Error broadcasting item %s", item.id)

    return item


@router.get("/categories", response_model=list[str])
async def get_categories(store: InventoryStore = Depends(get_store)) -> list[str]:
    """Get the distinct item categories."""
    try:
        return store.list_categories()
    except Exception as e:
        raise ServerError("Server error retrieving categories") from e


@router.get("/byCategory", response_model=list[Item])
async def get_items_by_category(
    category: str | None = None,
    store: InventoryStore = Depends(get_store),
) -> list[Item]:
    """Get items of a category, or all items when no category is given."""
    try:
        return store.filter_by_category(category)
    except Exception as e:
        raise ServerError("Server error filtering items") from e


@router.delete("/item/{item_id}", response_model=Item)
async def delete_item(item_id: str, store: InventoryStore = Depends(get_store)) -> Item:
    """Delete an item and return it."""
    return store.delete_item(item_id)


@router.get("/supplier-items", response_model=list[Item])
async def get_supplier_items(
    supplier: str | None = None,
    store: InventoryStore = Depends(get_store),
) -> list[Item]:
    """Get items from a supplier; the supplier parameter is required."""
    return store.filter_by_supplier(supplier)
