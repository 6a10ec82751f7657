"""Synchronous event bus used by the inventory and recipe collections.

Event names:
  inventory.changed      -> payload {"action": str, "entity_id": str, "snapshot": tuple[IngredientEntity, ...]}
  inventory.out_of_stock -> payload {"entity": IngredientEntity}
  recipes.changed        -> payload {"action": str, "recipe_id": str, "snapshot": tuple[Recipe, ...]}

Subscribers are callables taking (event_name, payload). Derived views (coverage,
grocery list) are rebuilt by subscribers from the snapshot, never patched.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
INVENTORY_CHANGED = "inventory.changed"
INVENTORY_OUT_OF_STOCK = "inventory.out_of_stock"
RECIPES_CHANGED = "recipes.changed"


class EventBus:
    def __init__(self):
        self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

    def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
        if callback not in self._subscribers[event_name]:
            self._subscribers[event_name].append(callback)

    def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
        try:
            self._subscribers[event_name].remove(callback)
        except ValueError:
            logger.debug(f"Unsubscribe ignored: {callback} not registered for {event_name}")

    def publish(self, event_name: str, payload: Any):
        for cb in list(self._subscribers.get(event_name, [])):
            try:
                cb(event_name, payload)
            except Exception:
                logger.exception(f"Error delivering {event_name} to {cb}")


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()

__all__ = ['EventBus', 'GLOBAL_EVENT_BUS', 'INVENTORY_CHANGED', 'INVENTORY_OUT_OF_STOCK', 'RECIPES_CHANGED']
