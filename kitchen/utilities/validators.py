"""
Input validation schemas using Pydantic; the form-level guard in front of the collections.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Literal, Any

from kitchen.domain.Ingredient import IngredientEntity
from kitchen.domain.Recipe import Recipe
from kitchen.domain.RecipeIngredient import RecipeIngredient

IngredientCategory = Literal["Produce", "Meat", "Dairy", "Pantry", "Frozen", "Bakery", "Other"]
StorageLocation = Literal["Fridge", "Pantry", "Freezer", "Counter"]
Difficulty = Literal["Easy", "Medium", "Hard"]
MealType = Literal["Breakfast", "Lunch", "Dinner", "Snack"]


def _strip(v):
    if isinstance(v, str):
        return v.strip()
    return v


class IngredientInput(BaseModel):
    """Schema for a pantry item created from the ingredient form."""
    name: str = Field(..., min_length=1, max_length=100)
    in_stock: bool = True
    category: IngredientCategory = "Pantry"
    unit: str = Field("pcs", min_length=1, max_length=20)
    quantity: float = Field(1, ge=0)
    needed_quantity: Optional[float] = Field(None, ge=0)
    serves_per_unit: Optional[float] = Field(None, ge=0)
    brand: Optional[str] = None
    store: Optional[str] = None
    location: Optional[StorageLocation] = "Pantry"
    notes: Optional[str] = None
    date_bought: Optional[str] = None
    expiry_date: Optional[str] = None

    @field_validator('name', 'unit', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return _strip(v)

    @field_validator('brand', 'store', 'notes')
    @classmethod
    def blank_to_none(cls, v):
        v = _strip(v)
        return v or None

    def to_entity(self) -> IngredientEntity:
        return IngredientEntity(**self.model_dump())


class RecipeIngredientInput(BaseModel):
    """Schema for one ingredient line of the recipe form."""
    name: str = Field(..., min_length=1, max_length=100)
    amount: float = Field(1, ge=0)
    unit: str = Field("piece", min_length=1, max_length=20)
    category: str = "Pantry"
    ingredient_id: Optional[str] = None
    in_stock: Optional[bool] = None
    available_quantity: Optional[float] = Field(None, ge=0)
    serves_per_unit: Optional[float] = Field(None, ge=0)
    store: Optional[str] = None

    @field_validator('name', 'unit', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        return _strip(v)


class NutritionInput(BaseModel):
    calories: float = Field(0, ge=0)
    protein: float = Field(0, ge=0)
    carbs: float = Field(0, ge=0)
    fat: float = Field(0, ge=0)


class RecipeInput(BaseModel):
    """Schema for recipe form validation."""
    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    ingredients: List[RecipeIngredientInput] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    nutrition: NutritionInput = Field(default_factory=NutritionInput)
    cooking_time: int = Field(30, ge=0)
    difficulty: Difficulty = "Medium"
    type: MealType = "Dinner"

    @field_validator('name', mode='before')
    @classmethod
    def validate_name(cls, v):
        """Recipe name cannot be blank."""
        v = _strip(v)
        if isinstance(v, str) and not v:
            raise ValueError('Recipe name cannot be empty')
        return v

    @field_validator('instructions')
    @classmethod
    def validate_steps(cls, v):
        """Filter out empty steps."""
        return [step.strip() for step in v if step and step.strip()]

    def to_recipe(self, recipe_id: str = "") -> Recipe:
        """Build a Recipe; pass recipe_id to keep the identity of an edited recipe."""
        data = self.model_dump()
        data['ingredients'] = [RecipeIngredient(**ing) for ing in data['ingredients']]
        return Recipe(id=recipe_id, **data)


class FieldUpdateInput(BaseModel):
    """Schema for a single-field record update."""
    field: str = Field(..., min_length=1)
    value: Any = None


def validated_field_value(schema, current: dict, field: str, value):
    """Run one field value through `schema`, with the record's other values as context.

    Returns the coerced value (e.g. "false" -> False). Fields the schema does not
    know are returned unchanged; the record's with_field() rejects those.
    """
    if field not in schema.model_fields:
        return value
    data = {k: v for k, v in current.items() if k in schema.model_fields}
    data[field] = value
    return getattr(schema.model_validate(data), field)


class QuickAddInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator('name', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        return _strip(v)
