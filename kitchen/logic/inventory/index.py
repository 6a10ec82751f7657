"""Inventory index: normalized-name lookup and substring suggestions over pantry entities.

Provides InventoryIndex(entities) with lookup(key) and search(query, limit=5).
"""
from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Tuple

from kitchen.domain.Ingredient import IngredientEntity
from kitchen.logic.normalize import normalize_name
from kitchen.utilities.constants import SUGGESTION_LIMIT

__all__ = ["InventoryIndex"]


class InventoryIndex:
    """Read-only keyed view over an inventory snapshot.

    Entities sharing a normalized key are not merged: lookup() returns the last
    one indexed, while search() and entities still list every one of them.
    """

    def __init__(self, entities: Iterable[IngredientEntity]):
        self._entities: Tuple[IngredientEntity, ...] = tuple(entities)
        self._by_key: Dict[str, IngredientEntity] = {e.name_normalized: e for e in self._entities}

    @property
    def entities(self) -> Tuple[IngredientEntity, ...]:
        return self._entities

    def lookup(self, key: str) -> Optional[IngredientEntity]:
        """Exact match on name_normalized; None when nothing matches."""
        return self._by_key.get(key)

    def lookup_name(self, name: str) -> Optional[IngredientEntity]:
        return self.lookup(normalize_name(name))

    def search(self, query: str, limit: int = SUGGESTION_LIMIT) -> List[IngredientEntity]:
        """Entities whose key contains the normalized query, in index order, at most `limit`."""
        q = normalize_name(query)
        if not q:
            return []
        hits: List[IngredientEntity] = []
        for entity in self._entities:
            if q in entity.name_normalized:
                hits.append(entity)
                if len(hits) >= limit:
                    break
        return hits

    def __contains__(self, key) -> bool:
        return key in self._by_key

    def __len__(self) -> int:
        return len(self._entities)
