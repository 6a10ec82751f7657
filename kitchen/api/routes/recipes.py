import logging
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from kitchen.api.state import KitchenState, get_state
from kitchen.logic.coverage.calculator import compute_coverage
from kitchen.logic.depletion.estimator import estimate_recipe_needs, serves_segments
from kitchen.utilities.validators import RecipeInput, RecipeIngredientInput, FieldUpdateInput, validated_field_value

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


def _get_or_404(state: KitchenState, recipe_id: str):
    try:
        return state.recipe_book.get(recipe_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Recipe '{recipe_id}' not found")


@router.get("")
def list_recipes(q: str = Query(default=""), state: KitchenState = Depends(get_state)):
    """Recipes matching the search box, each with its live coverage."""
    recipes = state.recipe_book.search(q)
    items = []
    for recipe in recipes:
        data = recipe.to_dict()
        data["coverage"] = compute_coverage(recipe, state.index).to_dict()
        items.append(data)
    return {"items": items, "count": len(items), "total": len(state.recipe_book)}


@router.post("", status_code=201)
def add_recipe(payload: RecipeInput, state: KitchenState = Depends(get_state)):
    recipe = state.recipe_book.add(payload.to_recipe())
    return recipe.to_dict()


@router.get("/{recipe_id}")
def get_recipe(recipe_id: str, state: KitchenState = Depends(get_state)):
    return _get_or_404(state, recipe_id).to_dict()


@router.put("/{recipe_id}")
def edit_recipe(recipe_id: str, payload: RecipeInput, state: KitchenState = Depends(get_state)):
    """Save the recipe form over an existing recipe, keeping its id."""
    _get_or_404(state, recipe_id)
    recipe = state.recipe_book.replace(payload.to_recipe(recipe_id))
    return recipe.to_dict()


def _line_or_404(recipe, idx: int):
    if not 0 <= idx < len(recipe.ingredients):
        raise HTTPException(status_code=404, detail=f"Recipe '{recipe.id}' has no ingredient line {idx}")
    return recipe.ingredients[idx]


def _replace_line(state: KitchenState, recipe, idx: int, line):
    lines = recipe.ingredients[:idx] + [line] + recipe.ingredients[idx + 1:]
    return state.recipe_book.replace(recipe.with_field("ingredients", lines))


@router.patch("/{recipe_id}/ingredients/{idx}")
def update_recipe_line(recipe_id: str, idx: int, payload: FieldUpdateInput, state: KitchenState = Depends(get_state)):
    recipe = _get_or_404(state, recipe_id)
    line = _line_or_404(recipe, idx)
    try:
        value = validated_field_value(RecipeIngredientInput, line.to_dict(), payload.field, payload.value)
        updated = line.with_field(payload.field, value)
    except (ValidationError, ValueError, TypeError) as e:
        logger.warning(f"Rejected update of recipe {recipe_id} line {idx}.{payload.field}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    return _replace_line(state, recipe, idx, updated).to_dict()


@router.post("/{recipe_id}/ingredients/{idx}/link/{entity_id}")
def link_recipe_line(recipe_id: str, idx: int, entity_id: str, state: KitchenState = Depends(get_state)):
    """Attach a recipe line to the pantry item picked from the suggestions."""
    recipe = _get_or_404(state, recipe_id)
    line = _line_or_404(recipe, idx)
    try:
        entity = state.inventory.get(entity_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Ingredient '{entity_id}' not found")
    return _replace_line(state, recipe, idx, line.linked_to(entity)).to_dict()


@router.get("/{recipe_id}/coverage")
def recipe_coverage(recipe_id: str, state: KitchenState = Depends(get_state)):
    recipe = _get_or_404(state, recipe_id)
    return {"recipe_id": recipe.id, **compute_coverage(recipe, state.index).to_dict()}


@router.get("/{recipe_id}/needs")
def recipe_needs(recipe_id: str, state: KitchenState = Depends(get_state)):
    """Quantity view: per line, is there enough and how many units to buy."""
    recipe = _get_or_404(state, recipe_id)
    lines = []
    for ingredient, entity, estimate in estimate_recipe_needs(recipe, state.index):
        lines.append({
            "ingredient": ingredient.to_dict(),
            "matched_id": entity.id if entity is not None else None,
            **estimate.to_dict(),
            "meter": serves_segments(estimate, ingredient.amount),
        })
    return {"recipe_id": recipe.id, "lines": lines, "count": len(lines)}


@router.delete("/{recipe_id}")
def delete_recipe(recipe_id: str, state: KitchenState = Depends(get_state)):
    _get_or_404(state, recipe_id)
    removed = state.recipe_book.remove(recipe_id)
    return {"status": "deleted", "id": removed.id}
