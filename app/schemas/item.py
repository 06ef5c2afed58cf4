"""Item schemas for request/response validation."""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class Item(BaseModel):
    """Complete Item schema with ID."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int = Field(..., description="Unique item identifier")
    name: str = Field(..., description="Item name")
    status: str = Field(..., description="Stock status, e.g. available, reserved, out of stock")
    quantity: int | float = Field(..., description="Units in stock (NaN when input was not numeric)")
    category: str = Field(..., description="Item category")
    supplier: str = Field(..., description="Supplier name")
    weight: float = Field(..., description="Unit weight (NaN when input was not numeric)")

    @field_serializer("quantity", "weight", when_used="json")
    def serialize_number(self, value: int | float) -> int | float | None:
        # JSON has no NaN
        if isinstance(value, float) and math.isnan(value):
            return None
        return value


class ItemCreate(BaseModel):
    """
    Schema for creating a new item.

    Every field is optional here; required fields are checked by the store so
    a missing or non-text field is reported as a bad request. ``quantity``
    and ``weight`` accept any JSON value and are coerced to numbers on creation.
    """

    name: Any = None
    status: Any = None
    quantity: Any = None
    category: Any = None
    supplier: Any = None
    weight: Any = None

    def is_present(self, field: str) -> bool:
        """Whether the client sent ``field`` at all (an explicit null counts)."""
        return field in self.model_fields_set

