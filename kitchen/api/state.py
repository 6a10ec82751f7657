"""In-memory kitchen state owned by the web layer (the only mutable state in the app)."""
import logging

from kitchen.domain.Ingredient import IngredientEntity
from kitchen.domain.Inventory import Inventory
from kitchen.domain.Recipe import Recipe
from kitchen.domain.RecipeBook import RecipeBook
from kitchen.domain.RecipeIngredient import RecipeIngredient
from kitchen.events.Event_Bus import EventBus, INVENTORY_CHANGED, RECIPES_CHANGED
from kitchen.logic.inventory.index import InventoryIndex

logger = logging.getLogger(__name__)


def _seed_inventory():
    return [
        IngredientEntity(id="inv_1", name="Avocado", in_stock=True, category="Produce", quantity=2, unit="pcs",
                         location="Counter", brand="Hass", store="Whole Foods"),
        IngredientEntity(id="inv_2", name="Sourdough Bread", in_stock=False, category="Bakery", quantity=0,
                         unit="loaf", location="Pantry", store="Local Bakery"),
    ]


def _seed_recipes():
    return [
        Recipe(
            id="1",
            name="Avocado Toast",
            description="Creamy avocado on sourdough.",
            cooking_time=10,
            type="Breakfast",
            difficulty="Easy",
            instructions=["Toast bread", "Mash avocado"],
            ingredients=[
                RecipeIngredient("Avocado", 1, "whole", "Produce", in_stock=True, available_quantity=2,
                                 serves_per_unit=1),
                RecipeIngredient("Sourdough Bread", 2, "slices", "Bakery", in_stock=False),
            ],
            nutrition={"calories": 350, "protein": 8, "carbs": 40, "fat": 18},
        ),
    ]


class KitchenState:
    """Inventory + recipe book sharing one event bus.

    The inventory index is rebuilt from the current snapshot whenever either
    collection publishes a change, so derived views never go stale.
    """

    def __init__(self, inventory: Inventory = None, recipe_book: RecipeBook = None, bus: EventBus = None):
        self.bus = bus or EventBus()
        self.inventory = (inventory or Inventory()).set_event_bus(self.bus)
        self.recipe_book = (recipe_book or RecipeBook()).set_event_bus(self.bus)
        self.index = InventoryIndex(self.inventory.snapshot())
        self.bus.subscribe(INVENTORY_CHANGED, self._on_inventory_changed)
        self.bus.subscribe(RECIPES_CHANGED, self._on_recipes_changed)

    def _on_inventory_changed(self, event_name, payload):
        self.index = InventoryIndex(payload["snapshot"])
        logger.debug(f"Inventory index rebuilt after {payload['action']} ({len(self.index)} items)")

    def _on_recipes_changed(self, event_name, payload):
        logger.debug(f"Recipe book now holds {len(payload['snapshot'])} recipes")

    @classmethod
    def seeded(cls):
        return cls(Inventory(_seed_inventory()), RecipeBook(_seed_recipes()))


_state = KitchenState.seeded()


def get_state() -> KitchenState:
    """FastAPI dependency returning the process-wide state."""
    return _state


def reset_state() -> KitchenState:
    """Replace the process-wide state with a freshly seeded one."""
    global _state
    _state = KitchenState.seeded()
    return _state
