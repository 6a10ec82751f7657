from typing import Final

DEFAULT_STORE: Final[str] = "General"
DEFAULT_SERVES_PER_UNIT: Final[int] = 1
DEFAULT_BUY_QUANTITY: Final[int] = 1
SUGGESTION_LIMIT: Final[int] = 5
STOCK_METER_SEGMENTS: Final[int] = 5

INGREDIENT_CATEGORIES: Final[tuple[str, ...]] = (
    "Produce", "Meat", "Dairy", "Pantry", "Frozen", "Bakery", "Other"
)
STORAGE_LOCATIONS: Final[tuple[str, ...]] = ("Fridge", "Pantry", "Freezer", "Counter")
DIFFICULTIES: Final[tuple[str, ...]] = ("Easy", "Medium", "Hard")
MEAL_TYPES: Final[tuple[str, ...]] = ("Breakfast", "Lunch", "Dinner", "Snack")

# Units offered by the recipe editor; anything else falls back to 'piece'
RECIPE_UNITS: Final[tuple[str, ...]] = (
    "piece", "g", "kg", "ml", "l", "cup", "tbsp", "tsp", "slices", "whole", "pinch"
)
DEFAULT_RECIPE_UNIT: Final[str] = "piece"

# Defaults used by the quick-add action of the grocery list
QUICK_ADD_CATEGORY: Final[str] = "Pantry"
QUICK_ADD_UNIT: Final[str] = "pcs"
