"""Helpers that publish collection events on a bus (the global one by default)."""
from __future__ import annotations
from typing import Any, Iterable, Optional

from .Event_Bus import GLOBAL_EVENT_BUS, EventBus, INVENTORY_CHANGED, INVENTORY_OUT_OF_STOCK, RECIPES_CHANGED

__all__ = ['publish_inventory_changed', 'publish_out_of_stock', 'publish_recipes_changed']


def publish_inventory_changed(action: str, entity_id: str, snapshot: Iterable[Any],
                              bus: Optional[EventBus] = None):
    """Publish an inventory.changed event carrying the full new snapshot."""
    (bus or GLOBAL_EVENT_BUS).publish(INVENTORY_CHANGED, {
        'action': action,
        'entity_id': entity_id,
        'snapshot': tuple(snapshot),
    })


def publish_out_of_stock(entity: Any, bus: Optional[EventBus] = None):
    (bus or GLOBAL_EVENT_BUS).publish(INVENTORY_OUT_OF_STOCK, {'entity': entity})


def publish_recipes_changed(action: str, recipe_id: str, snapshot: Iterable[Any],
                            bus: Optional[EventBus] = None):
    (bus or GLOBAL_EVENT_BUS).publish(RECIPES_CHANGED, {
        'action': action,
        'recipe_id': recipe_id,
        'snapshot': tuple(snapshot),
    })
