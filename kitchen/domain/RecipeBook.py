"""RecipeBook aggregate: ordered recipe collection with name search."""
import logging
from typing import Iterable, List, Optional, Tuple

from kitchen.domain.Recipe import Recipe
from kitchen.events.Event_Bus import GLOBAL_EVENT_BUS
from kitchen.events.event_helpers import publish_recipes_changed

logger = logging.getLogger(__name__)


class RecipeBook:
    def __init__(self, recipes: Optional[Iterable[Recipe]] = None):
        self.recipes: List[Recipe] = list(recipes or [])
        self._event_bus = GLOBAL_EVENT_BUS

    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    def _changed(self, action: str, recipe: Recipe):
        logger.info(f"Recipe {action}: {recipe.name} ({recipe.id})")
        publish_recipes_changed(action, recipe.id, self.recipes, bus=self._event_bus)

    def _position(self, recipe_id: str) -> int:
        for pos, recipe in enumerate(self.recipes):
            if recipe.id == recipe_id:
                return pos
        raise KeyError(recipe_id)

    def get(self, recipe_id: str) -> Recipe:
        return self.recipes[self._position(recipe_id)]

    def snapshot(self) -> Tuple[Recipe, ...]:
        return tuple(self.recipes)

    def add(self, recipe: Recipe):
        self.recipes = self.recipes + [recipe]
        self._changed("add", recipe)
        return recipe

    def replace(self, recipe: Recipe):
        pos = self._position(recipe.id)
        self.recipes = self.recipes[:pos] + [recipe] + self.recipes[pos + 1:]
        self._changed("update", recipe)
        return recipe

    def remove(self, recipe_id: str):
        pos = self._position(recipe_id)
        removed = self.recipes[pos]
        self.recipes = self.recipes[:pos] + self.recipes[pos + 1:]
        self._changed("remove", removed)
        return removed

    def search(self, query: str = "") -> List[Recipe]:
        """Recipes whose normalized name contains the lowercased query, in book order."""
        q = (query or "").lower()
        return [r for r in self.recipes if q in r.name_normalized]

    def __len__(self) -> int:
        return len(self.recipes)

    def __iter__(self):
        return iter(self.recipes)

    @classmethod
    def from_dict(cls, data):
        return cls(Recipe.from_dict(r) for r in data)

    def to_dict(self):
        return [r.to_dict() for r in self.recipes]
