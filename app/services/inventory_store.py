"""In-memory inventory store."""

import logging
import threading
from typing import Any, Iterable

from app.core.coercion import parse_float, parse_int, to_number
from app.core.errors import BadRequestError, NotFoundError
from app.schemas.item import Item, ItemCreate
from app.services.seed import SEED_ITEMS

logger = logging.getLogger(__name__)

REQUIRED_TEXT_FIELDS = ("name", "status", "category", "supplier")
REQUIRED_NUMERIC_FIELDS = ("quantity", "weight")


class InventoryStore:
    """Owns the ordered item collection; all access goes through one lock."""

    def __init__(self, seed: Iterable[dict[str, Any]] = SEED_ITEMS) -> None:
        """Initialize the store with a copy of ``seed``."""
        self._seed = tuple(seed)
        self._lock = threading.Lock()
        self._items: list[Item] = [Item(**record) for record in self._seed]

    def reset(self) -> None:
        """Restore the seed inventory."""
        with self._lock:
            self._items = [Item(**record) for record in self._seed]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def list_items(self) -> list[Item]:
        """Get all items in insertion order."""
        with self._lock:
            return list(self._items)

    def get_item(self, item_id: Any) -> Item:
        """
        Get an item by id.

        ``item_id`` may be a path token: ``"1"``, ``"01"`` and ``"1.0"`` all
        match id 1.

        Raises:
            NotFoundError: No item has that id
        """
        target = to_number(item_id)
        with self._lock:
            for item in self._items:
                if item.id == target:
                    return item
        raise NotFoundError("Item not found")

    def list_categories(self) -> list[str]:
        """Get each category once, in the order first seen."""
        with self._lock:
            return list(dict.fromkeys(item.category for item in self._items))

    def filter_by_category(self, category: str | None = None) -> list[Item]:
        """Get items of ``category``, or every item when no category is given."""
        with self._lock:
            if not category:
                return list(self._items)
            return [item for item in self._items if item.category == category]

    def filter_by_supplier(self, supplier: str | None) -> list[Item]:
        """
        Get items from ``supplier``.

        Raises:
            BadRequestError: No supplier was given
        """
        if not supplier:
            raise BadRequestError("Supplier parameter required")
        with self._lock:
            return [item for item in self._items if item.supplier == supplier]

    def create_item(self, payload: ItemCreate) -> Item:
        """
        Validate ``payload``, assign the next id and append the new item.

        ``quantity`` and ``weight`` only need to be present (0 is fine);
        values that are not numeric are stored as NaN.

        Raises:
            BadRequestError: A required field is missing, empty or not text
        """
        missing_text = any(
            not isinstance(getattr(payload, field), str) or not getattr(payload, field)
            for field in REQUIRED_TEXT_FIELDS
        )
        missing_numbers = any(not payload.is_present(field) for field in REQUIRED_NUMERIC_FIELDS)
        if missing_text or missing_numbers:
            logger.info(
                "Missing or invalid fields, name: %s status: %s quantity: %s "
                "category: %s supplier: %s weight: %s",
                payload.name,
                payload.status,
                payload.quantity if payload.is_present("quantity") else "undefined",
                payload.category,
                payload.supplier,
                payload.weight if payload.is_present("weight") else "undefined",
            )
            raise BadRequestError("Missing required fields")

        with self._lock:
            next_id = max((item.id for item in self._items), default=0) + 1
            item = Item(
                id=next_id,
                name=payload.name,
                status=payload.status,
                quantity=parse_int(payload.quantity),
                category=payload.category,
                supplier=payload.supplier,
                weight=parse_float(payload.weight),
            )
            self._items.append(item)

        logger.info("📦 Created item %s (%s)", item.id, item.name)
        return item

    def delete_item(self, item_id: Any) -> Item:
        """
        Remove the first item whose id equals the integer read from ``item_id``.

        Raises:
            NotFoundError: No item has that id
        """
        target = parse_int(item_id)
        with self._lock:
            for index, item in enumerate(self._items):
                if isinstance(target, int) and item.id == target:
                    removed = self._items.pop(index)
                    break
            else:
                raise NotFoundError("Item not found")

        logger.info("🗑️  Deleted item %s (%s)", removed.id, removed.name)
        return removed
