"""Depletion / auto-buy estimator.

estimate_need(ingredient, matched_entity=None) turns a recipe line's required
amount plus the pantry stock and yield-per-unit into:
    is_enough        -> matched, in stock and enough serves left after cooking
    remaining_serves -> serves left after cooking (negative = deficit)
    auto_buy_count   -> purchase units covering the gap (never 0)

Default resolution policy, in order:
    quantity        : matched entity quantity -> ingredient.available_quantity -> 0
    serves_per_unit : matched entity serves_per_unit -> ingredient.serves_per_unit -> 1
                      (a zero or negative yield is floored to 1 before any division)
"""
from __future__ import annotations
import math
from typing import List, Optional, Tuple

from kitchen.domain.Ingredient import IngredientEntity
from kitchen.domain.Recipe import Recipe
from kitchen.domain.RecipeIngredient import RecipeIngredient
from kitchen.logic.inventory.index import InventoryIndex
from kitchen.logic.normalize import normalize_name
from kitchen.utilities.constants import DEFAULT_SERVES_PER_UNIT, STOCK_METER_SEGMENTS

__all__ = ["NeedEstimate", "estimate_need", "estimate_recipe_needs", "serves_segments"]

SEGMENT_EMPTY = "empty"
SEGMENT_COVERED = "covered"
SEGMENT_DEFICIT = "deficit"


class NeedEstimate:
    """Quantity verdict for one recipe line: enough or not, serves left, units to buy."""

    def __init__(self, is_enough: bool, remaining_serves: float, auto_buy_count: int,
                 total_serves_available: float = 0, serves_per_unit: float = DEFAULT_SERVES_PER_UNIT):
        self.is_enough = is_enough
        self.remaining_serves = remaining_serves
        self.auto_buy_count = auto_buy_count
        self.total_serves_available = total_serves_available
        self.serves_per_unit = serves_per_unit

    @property
    def deficit(self) -> float:
        """Missing serves (0 when nothing is missing)."""
        return -self.remaining_serves if self.remaining_serves < 0 else 0

    def __str__(self) -> str:
        state = "enough" if self.is_enough else f"buy {self.auto_buy_count}"
        return f"remaining {self.remaining_serves} serves - {state}"

    __repr__ = __str__

    def to_dict(self):
        return {
            "is_enough": self.is_enough,
            "remaining_serves": self.remaining_serves,
            "auto_buy_count": self.auto_buy_count,
            "total_serves_available": self.total_serves_available,
            "serves_per_unit": self.serves_per_unit,
        }


def _first_set(*values):
    for v in values:
        if v is not None:
            return v
    return None


def _resolve_quantity(ingredient: RecipeIngredient, entity: Optional[IngredientEntity]) -> float:
    quantity = _first_set(entity.quantity if entity is not None else None, ingredient.available_quantity)
    return quantity if quantity is not None else 0


def _resolve_serves_per_unit(ingredient: RecipeIngredient, entity: Optional[IngredientEntity]) -> float:
    spu = _first_set(entity.serves_per_unit if entity is not None else None, ingredient.serves_per_unit)
    # non-positive yields count as one serve per unit
    return spu if spu and spu > 0 else DEFAULT_SERVES_PER_UNIT


def estimate_need(ingredient: RecipeIngredient, matched_entity: Optional[IngredientEntity] = None) -> NeedEstimate:
    serves_per_unit = _resolve_serves_per_unit(ingredient, matched_entity)
    total_serves = _resolve_quantity(ingredient, matched_entity) * serves_per_unit
    remaining = total_serves - ingredient.amount
    is_enough = matched_entity is not None and matched_entity.in_stock is True and remaining >= 0
    auto_buy = math.ceil(abs(remaining) / serves_per_unit) or 1
    return NeedEstimate(is_enough, remaining, auto_buy, total_serves, serves_per_unit)


def estimate_recipe_needs(recipe: Recipe, index: InventoryIndex) -> List[Tuple[RecipeIngredient, Optional[IngredientEntity], NeedEstimate]]:
    """Per-line (ingredient, live match or None, estimate), in recipe order.

    The live match is taken regardless of stock status so quantities of
    out-of-stock items still count toward the estimate.
    """
    rows = []
    for ingredient in recipe.ingredients:
        entity = index.lookup(normalize_name(ingredient.name))
        rows.append((ingredient, entity, estimate_need(ingredient, entity)))
    return rows


def serves_segments(estimate: NeedEstimate, required: float, segments: int = STOCK_METER_SEGMENTS) -> List[str]:
    """Stock meter cells drawn next to a recipe line.

    The capacity max(available, required, 1) is split into equal segments. A
    segment is empty when stock does not reach its start, covered when the
    serves left after cooking still reach its end, and deficit otherwise.
    """
    capacity = max(estimate.total_serves_available, required, 1)
    per_segment = capacity / segments
    cells: List[str] = []
    for i in range(segments):
        start = i * per_segment
        end = (i + 1) * per_segment
        if estimate.total_serves_available <= start:
            cells.append(SEGMENT_EMPTY)
        elif estimate.remaining_serves >= end:
            cells.append(SEGMENT_COVERED)
        else:
            cells.append(SEGMENT_DEFICIT)
    return cells
