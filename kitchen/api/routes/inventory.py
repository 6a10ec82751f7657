import logging
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from kitchen.api.state import KitchenState, get_state
from kitchen.utilities import config
from kitchen.utilities.validators import IngredientInput, FieldUpdateInput, validated_field_value

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


def _get_or_404(state: KitchenState, entity_id: str):
    try:
        return state.inventory.get(entity_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Ingredient '{entity_id}' not found")


@router.get("")
def list_inventory(state: KitchenState = Depends(get_state)):
    return {
        "items": state.inventory.to_dict(),
        "count": len(state.inventory),
        "missing_count": state.inventory.missing_count(),
    }


@router.post("", status_code=201)
def add_ingredient(payload: IngredientInput, state: KitchenState = Depends(get_state)):
    entity = state.inventory.add(payload.to_entity())
    return entity.to_dict()


@router.get("/search")
def search_inventory(q: str = Query(default=""), state: KitchenState = Depends(get_state)):
    """Suggestions for the recipe editor's ingredient field."""
    hits = state.index.search(q, limit=config.SUGGESTION_LIMIT)
    return {"query": q, "items": [e.to_dict() for e in hits], "count": len(hits)}


@router.get("/{entity_id}")
def get_ingredient(entity_id: str, state: KitchenState = Depends(get_state)):
    return _get_or_404(state, entity_id).to_dict()


@router.patch("/{entity_id}")
def update_ingredient(entity_id: str, payload: FieldUpdateInput, state: KitchenState = Depends(get_state)):
    current = _get_or_404(state, entity_id)
    try:
        value = validated_field_value(IngredientInput, current.to_dict(), payload.field, payload.value)
        entity = state.inventory.update(entity_id, payload.field, value)
    except (ValidationError, ValueError, TypeError) as e:
        logger.warning(f"Rejected update of {entity_id}.{payload.field}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    return entity.to_dict()


@router.post("/{entity_id}/toggle")
def toggle_stock(entity_id: str, state: KitchenState = Depends(get_state)):
    _get_or_404(state, entity_id)
    return state.inventory.toggle_stock(entity_id).to_dict()


@router.delete("/{entity_id}")
def delete_ingredient(entity_id: str, state: KitchenState = Depends(get_state)):
    _get_or_404(state, entity_id)
    removed = state.inventory.remove(entity_id)
    return {"status": "deleted", "id": removed.id}
