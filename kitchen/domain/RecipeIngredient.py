"""RecipeIngredient: a required line inside a recipe, with optional stock snapshot fields."""
import copy
from typing import Optional

from kitchen.logic.normalize import normalize_name
from kitchen.utilities.constants import RECIPE_UNITS, DEFAULT_RECIPE_UNIT, DEFAULT_SERVES_PER_UNIT


class RecipeIngredient:
    EDITABLE_FIELDS = frozenset({
        "name", "amount", "unit", "category", "ingredient_id",
        "in_stock", "available_quantity", "serves_per_unit", "store",
    })

    def __init__(self, name: str = "", amount: float = 1, unit: str = DEFAULT_RECIPE_UNIT,
                 category: str = "Pantry", ingredient_id: Optional[str] = None,
                 in_stock: Optional[bool] = None, available_quantity: Optional[float] = None,
                 serves_per_unit: Optional[float] = None, store: Optional[str] = None):
        if amount is None:
            amount = 0
        if amount < 0:
            raise ValueError(f"Amount cannot be negative: {amount}")
        self.name = name
        self.name_normalized = normalize_name(name)
        self.amount = amount
        self.unit = unit
        self.category = category
        self.ingredient_id = ingredient_id
        # Snapshot of the linked pantry item at authoring time
        self.in_stock = in_stock
        self.available_quantity = available_quantity
        self.serves_per_unit = serves_per_unit
        self.store = store

    def with_field(self, field: str, value):
        '''Returns a copy with one field replaced; renaming refreshes name_normalized.'''
        if field == "name_normalized":
            raise ValueError("name_normalized is derived from name and cannot be set directly")
        if field not in self.EDITABLE_FIELDS:
            raise ValueError(f"Unknown recipe ingredient field: {field!r}")
        if field == "amount" and (value is None or value < 0):
            raise ValueError(f"Amount cannot be negative: {value}")
        updated = copy.copy(self)
        setattr(updated, field, value)
        if field == "name":
            updated.name_normalized = normalize_name(value)
        return updated

    def linked_to(self, entity):
        '''
        Returns a copy linked to a pantry entity picked from the suggestion list.
        Copies the entity's identity, unit and stock snapshot; the required amount is kept.
        '''
        linked = copy.copy(self)
        linked.name = entity.name
        linked.name_normalized = entity.name_normalized
        linked.unit = entity.unit if entity.unit in RECIPE_UNITS else DEFAULT_RECIPE_UNIT
        linked.category = entity.category
        linked.ingredient_id = entity.id
        linked.in_stock = entity.in_stock
        linked.available_quantity = entity.quantity
        linked.serves_per_unit = entity.serves_per_unit or DEFAULT_SERVES_PER_UNIT
        linked.store = entity.store or ""
        return linked

    def __str__(self) -> str:
        return f"{self.name} - {self.amount} {self.unit}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        filtered = {k: v for k, v in d.items() if k in RecipeIngredient.EDITABLE_FIELDS}
        return RecipeIngredient(**filtered)

    def to_dict(self):
        return {
            "name": self.name,
            "name_normalized": self.name_normalized,
            "amount": self.amount,
            "unit": self.unit,
            "category": self.category,
            "ingredient_id": self.ingredient_id,
            "in_stock": self.in_stock,
            "available_quantity": self.available_quantity,
            "serves_per_unit": self.serves_per_unit,
            "store": self.store,
        }
