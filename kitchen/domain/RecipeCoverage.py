"""RecipeCoverage: derived view of how far the current inventory satisfies one recipe."""
from typing import Dict, List, Optional

from kitchen.domain.Ingredient import IngredientEntity


class RecipeCoverage:
    def __init__(self, matched_count: int = 0, total_required: int = 0,
                 missing_ingredients: Optional[List[str]] = None,
                 matched_entities: Optional[Dict[str, IngredientEntity]] = None):
        self.matched_count = matched_count
        self.total_required = total_required
        self.missing_ingredients = missing_ingredients[:] if missing_ingredients else []
        self.matched_entities = dict(matched_entities or {})

    @property
    def coverage_ratio(self) -> float:
        # Nothing required -> 0 rather than a division by zero
        if self.total_required == 0:
            return 0
        return self.matched_count / self.total_required

    @property
    def is_cookable(self) -> bool:
        return not self.missing_ingredients

    def is_matched(self, ingredient_name: str) -> bool:
        return ingredient_name in self.matched_entities

    def __str__(self) -> str:
        return (f"Coverage {self.matched_count}/{self.total_required} - "
                f"{'cookable' if self.is_cookable else 'missing: ' + ', '.join(self.missing_ingredients)}")

    __repr__ = __str__

    def to_dict(self):
        return {
            "matched_count": self.matched_count,
            "total_required": self.total_required,
            "coverage_ratio": self.coverage_ratio,
            "missing_ingredients": list(self.missing_ingredients),
            "is_cookable": self.is_cookable,
            "matched_entities": {name: ent.to_dict() for name, ent in self.matched_entities.items()},
        }
