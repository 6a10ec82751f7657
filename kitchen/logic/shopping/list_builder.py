"""Grocery list builder.

Provides build_grocery_list(inventory) -> {store: [ {entity, buy_quantity, partial}, ... ]}.

Purchase candidates are entities that are out of stock, or in stock with a
positive needed_quantity (partial restock). Groups keep the first-seen store
order; items keep inventory order. Nothing is cached: every call rebuilds the
list from the snapshot it is given.
"""
import logging
from typing import Dict, List, Any, Iterable

from kitchen.domain.GroceryList import GroceryGroup
from kitchen.domain.Ingredient import IngredientEntity
from kitchen.utilities.constants import DEFAULT_STORE, DEFAULT_BUY_QUANTITY

logger = logging.getLogger(__name__)


def _store_label(entity: IngredientEntity) -> str:
    return entity.store or DEFAULT_STORE


def buy_quantity(entity: IngredientEntity):
    """Explicit restock target, else the tracked quantity, else one unit.

    Zero counts as unset at each step, so a candidate never shows "buy 0".
    """
    return entity.needed_quantity or entity.quantity or DEFAULT_BUY_QUANTITY


def is_partial_restock(entity: IngredientEntity) -> bool:
    return entity.in_stock and bool(entity.needed_quantity and entity.needed_quantity > 0)


def build_grocery_list(inventory: Iterable[IngredientEntity]) -> Dict[str, List[Dict[str, Any]]]:
    """Group purchase candidates by store.

    Args:
        inventory: IngredientEntity records (an Inventory, a snapshot tuple or a list).

    Returns:
        Insertion-ordered dict mapping store label ("General" when unset) to a
        list of { entity, buy_quantity, partial } dicts.
    """
    groups: Dict[str, List[Dict[str, Any]]] = {}
    for entity in inventory:
        if not entity.is_purchase_candidate:
            continue
        groups.setdefault(_store_label(entity), []).append({
            'entity': entity,
            'buy_quantity': buy_quantity(entity),
            'partial': is_partial_restock(entity),
        })
    logger.debug(f"Grocery list built: {sum(len(v) for v in groups.values())} items in {len(groups)} stores")
    return groups


def grocery_groups(inventory: Iterable[IngredientEntity]) -> List[GroceryGroup]:
    return [GroceryGroup(store, items) for store, items in build_grocery_list(inventory).items()]


def count_purchase_items(inventory: Iterable[IngredientEntity]) -> int:
    return sum(1 for entity in inventory if entity.is_purchase_candidate)


__all__ = ['build_grocery_list', 'grocery_groups', 'count_purchase_items', 'buy_quantity', 'is_partial_restock']
