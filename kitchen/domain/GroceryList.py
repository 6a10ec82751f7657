"""GroceryGroup: purchase candidates sharing one store label, each with a buy quantity."""
from typing import Dict, List, Any


class GroceryGroup:
    def __init__(self, store: str, items: List[Dict[str, Any]] = None):
        self.store = store
        # Each item: {"entity": IngredientEntity, "buy_quantity": number, "partial": bool}
        self.items = items[:] if items else []

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __str__(self) -> str:
        lines = ",\n\t".join(f"{it['entity'].name} x{it['buy_quantity']}" for it in self.items)
        return f"{self.store}:\n\t{lines}"

    __repr__ = __str__

    def to_dict(self):
        return {
            "store": self.store,
            "count": len(self.items),
            "items": [
                {
                    **it["entity"].to_dict(),
                    "buy_quantity": it["buy_quantity"],
                    "partial": it["partial"],
                }
                for it in self.items
            ],
        }
