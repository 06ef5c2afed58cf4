"""Request and response schemas."""

from app.schemas.item import Item, ItemCreate

__all__ = ["Item", "ItemCreate"]
