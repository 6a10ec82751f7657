"""Recipe domain entity: name, description, ingredient lines, instructions, nutrition, time, difficulty, type."""
import copy
import uuid
from typing import List, Dict, Optional

from kitchen.domain.RecipeIngredient import RecipeIngredient
from kitchen.logic.normalize import normalize_name


class Recipe:
    EDITABLE_FIELDS = frozenset({
        "name", "description", "ingredients", "instructions", "nutrition",
        "cooking_time", "difficulty", "type",
    })

    def __init__(self, id: str = "", name: str = "", description: str = "",
                 ingredients: Optional[List[RecipeIngredient]] = None, instructions: Optional[List[str]] = None,
                 nutrition: Optional[Dict[str, float]] = None, cooking_time: int = 30,
                 difficulty: str = "Medium", type: str = "Dinner"):
        self.id = id or uuid.uuid4().hex[:9]
        self.name = name
        self.name_normalized = normalize_name(name)
        self.description = description
        self.ingredients = ingredients[:] if ingredients else []
        self.instructions = instructions[:] if instructions else []
        n = dict(nutrition or {})
        # Normalize key synonyms
        if 'carbohydrates' in n and 'carbs' not in n:
            n['carbs'] = n.get('carbohydrates')
        self.nutrition = {
            'calories': n.get('calories', 0),
            'protein': n.get('protein', 0),
            'carbs': n.get('carbs', 0),
            'fat': n.get('fat', n.get('fats', 0)),
        }
        self.cooking_time = cooking_time
        self.difficulty = difficulty
        self.type = type

    def with_field(self, field: str, value):
        '''Returns a copy with one field replaced; renaming refreshes name_normalized.'''
        if field == "name_normalized":
            raise ValueError("name_normalized is derived from name and cannot be set directly")
        if field not in self.EDITABLE_FIELDS:
            raise ValueError(f"Unknown recipe field: {field!r}")
        updated = copy.copy(self)
        if field in ("ingredients", "instructions"):
            value = list(value or [])
        setattr(updated, field, value)
        if field == "name":
            updated.name_normalized = normalize_name(value)
        return updated

    def __str__(self) -> str:
        return (f"{self.name} - {self.type} - {self.difficulty} - {self.cooking_time} min - "
                f"{len(self.ingredients)} ingredients - Calories: {self.nutrition.get('calories', 0)}")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        d.pop('name_normalized', None)
        d['ingredients'] = [RecipeIngredient.from_dict(ing) for ing in d.get('ingredients', [])]
        return Recipe(**d)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "name_normalized": self.name_normalized,
            "description": self.description,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "instructions": self.instructions,
            "nutrition": dict(self.nutrition),
            "cooking_time": self.cooking_time,
            "difficulty": self.difficulty,
            "type": self.type,
        }
