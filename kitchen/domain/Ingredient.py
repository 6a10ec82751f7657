"""IngredientEntity domain entity: a pantry item with stock flag, quantity, yield and store."""
import copy
import time
import uuid
from typing import Optional

from kitchen.logic.normalize import normalize_name


def now_ms() -> int:
    """Current timestamp in milliseconds (used for updated_at)."""
    return int(time.time() * 1000)


def new_inventory_id() -> str:
    return "inv_" + uuid.uuid4().hex[:9]


# Optional amounts that may be unset but never negative
NON_NEGATIVE_OPTIONAL = ("needed_quantity", "serves_per_unit")


def _check_non_negative(field: str, value):
    if value is not None and value < 0:
        raise ValueError(f"{field} cannot be negative: {value}")


class IngredientEntity:
    # Fields that may be replaced through with_field(); name_normalized is derived
    EDITABLE_FIELDS = frozenset({
        "name", "in_stock", "category", "unit", "quantity", "needed_quantity",
        "serves_per_unit", "brand", "store", "location", "notes",
        "date_bought", "expiry_date",
    })

    def __init__(self, id: str = "", name: str = "", in_stock: bool = True, category: str = "Pantry",
                 unit: str = "pcs", quantity: float = 0, needed_quantity: Optional[float] = None,
                 serves_per_unit: Optional[float] = None, brand: Optional[str] = None,
                 store: Optional[str] = None, location: Optional[str] = None, notes: Optional[str] = None,
                 date_bought: Optional[str] = None, expiry_date: Optional[str] = None,
                 updated_at: Optional[int] = None):
        if quantity is None:
            quantity = 0
        if quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {quantity}")
        _check_non_negative("needed_quantity", needed_quantity)
        _check_non_negative("serves_per_unit", serves_per_unit)
        self.id = id or new_inventory_id()
        self.name = name
        self.name_normalized = normalize_name(name)
        self.in_stock = bool(in_stock)
        self.category = category
        self.unit = unit
        self.quantity = quantity
        self.needed_quantity = needed_quantity
        self.serves_per_unit = serves_per_unit
        self.brand = brand
        self.store = store
        self.location = location
        self.notes = notes
        self.date_bought = date_bought
        self.expiry_date = expiry_date
        self.updated_at = updated_at if updated_at is not None else now_ms()

    def with_field(self, field: str, value):
        '''
        Returns a copy with one field replaced. Renaming re-derives name_normalized
        in the same step; updated_at is refreshed.
        '''
        if field == "name_normalized":
            raise ValueError("name_normalized is derived from name and cannot be set directly")
        if field not in self.EDITABLE_FIELDS:
            raise ValueError(f"Unknown ingredient field: {field!r}")
        if field == "quantity" and (value is None or value < 0):
            raise ValueError(f"Quantity cannot be negative: {value}")
        if field in NON_NEGATIVE_OPTIONAL:
            _check_non_negative(field, value)
        updated = copy.copy(self)
        setattr(updated, field, value)
        if field == "name":
            updated.name_normalized = normalize_name(value)
        if field == "in_stock":
            updated.in_stock = bool(value)
        updated.updated_at = now_ms()
        return updated

    def toggled_stock(self):
        '''Returns a copy with in_stock flipped.'''
        return self.with_field("in_stock", not self.in_stock)

    @property
    def is_purchase_candidate(self) -> bool:
        """Out of stock, or a positive restock need was recorded."""
        return (not self.in_stock) or bool(self.needed_quantity and self.needed_quantity > 0)

    def __str__(self) -> str:
        parts = [f"{self.name} - {self.quantity} {self.unit}"]
        parts.append("in stock" if self.in_stock else "out of stock")
        if self.store:
            parts.append(f"Store: {self.store}")
        return " - ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an IngredientEntity from a dictionary. Ignores unknown keys and the derived key.'''
        d = dict(data) if isinstance(data, dict) else {}
        allowed = IngredientEntity.EDITABLE_FIELDS | {"id", "updated_at"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        return IngredientEntity(**filtered)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "name_normalized": self.name_normalized,
            "in_stock": self.in_stock,
            "category": self.category,
            "unit": self.unit,
            "quantity": self.quantity,
            "needed_quantity": self.needed_quantity,
            "serves_per_unit": self.serves_per_unit,
            "brand": self.brand,
            "store": self.store,
            "location": self.location,
            "notes": self.notes,
            "date_bought": self.date_bought,
            "expiry_date": self.expiry_date,
            "updated_at": self.updated_at,
        }
