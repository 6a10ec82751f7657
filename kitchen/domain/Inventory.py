"""Inventory aggregate: ordered collection of IngredientEntity records, replaced by identity."""
import logging
from typing import Iterable, List, Optional, Tuple

from kitchen.domain.Ingredient import IngredientEntity
from kitchen.events.Event_Bus import GLOBAL_EVENT_BUS
from kitchen.events.event_helpers import publish_inventory_changed, publish_out_of_stock
from kitchen.utilities.constants import QUICK_ADD_CATEGORY, QUICK_ADD_UNIT

logger = logging.getLogger(__name__)


class Inventory:
    def __init__(self, entities: Optional[Iterable[IngredientEntity]] = None):
        self.items: List[IngredientEntity] = list(entities or [])
        self._event_bus = GLOBAL_EVENT_BUS

    # --- Observer helpers -------------------------------------------------
    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    def _changed(self, action: str, entity: IngredientEntity, previous: Optional[IngredientEntity] = None):
        logger.info(f"Inventory {action}: {entity.name} ({entity.id})")
        publish_inventory_changed(action, entity.id, self.items, bus=self._event_bus)
        was_in_stock = previous.in_stock if previous is not None else True
        if action != "remove" and was_in_stock and not entity.in_stock:
            publish_out_of_stock(entity, bus=self._event_bus)

    # --- Lookup -----------------------------------------------------------
    def _position(self, entity_id: str) -> int:
        for pos, item in enumerate(self.items):
            if item.id == entity_id:
                return pos
        raise KeyError(entity_id)

    def get(self, entity_id: str) -> IngredientEntity:
        '''
        Returns the entity with the given id; raises KeyError if absent.
        '''
        return self.items[self._position(entity_id)]

    def snapshot(self) -> Tuple[IngredientEntity, ...]:
        '''
        Immutable view handed to the matching and grocery functions.
        '''
        return tuple(self.items)

    def missing_count(self) -> int:
        return sum(1 for item in self.items if not item.in_stock)

    # --- Mutations --------------------------------------------------------
    def add(self, entity: IngredientEntity):
        self.items = self.items + [entity]
        self._changed("add", entity)
        return entity

    def replace(self, entity: IngredientEntity):
        '''
        Replaces the element sharing entity.id. A new list is bound; every other
        element is the same object as before.
        '''
        pos = self._position(entity.id)
        previous = self.items[pos]
        self.items = self.items[:pos] + [entity] + self.items[pos + 1:]
        self._changed("update", entity, previous)
        return entity

    def update(self, entity_id: str, field: str, value):
        '''
        Updates one named field (re-deriving dependent fields) and replaces the record.
        '''
        return self.replace(self.get(entity_id).with_field(field, value))

    def toggle_stock(self, entity_id: str):
        return self.replace(self.get(entity_id).toggled_stock())

    def remove(self, entity_id: str):
        pos = self._position(entity_id)
        removed = self.items[pos]
        self.items = self.items[:pos] + self.items[pos + 1:]
        self._changed("remove", removed)
        return removed

    def quick_add(self, name: str):
        '''
        Adds a new out-of-stock item by name only, so it lands on the grocery list.
        '''
        name = (name or "").strip()
        if not name:
            raise ValueError("Ingredient name cannot be empty")
        entity = IngredientEntity(name=name, in_stock=False, category=QUICK_ADD_CATEGORY,
                                  quantity=0, unit=QUICK_ADD_UNIT)
        return self.add(entity)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    @classmethod
    def from_dict(cls, data):
        '''
        Builds an Inventory from a list of dictionaries (no events are published).
        '''
        return cls(IngredientEntity.from_dict(item) for item in data)

    def to_dict(self):
        return [item.to_dict() for item in self.items]
