from fastapi import APIRouter, Depends, HTTPException

from kitchen.api.state import KitchenState, get_state
from kitchen.logic.shopping.list_builder import grocery_groups, count_purchase_items
from kitchen.utilities.validators import QuickAddInput

router = APIRouter(prefix="/api/grocery-list", tags=["grocery"])


@router.get("")
def grocery_list(state: KitchenState = Depends(get_state)):
    snapshot = state.inventory.snapshot()
    groups = grocery_groups(snapshot)
    return {
        "groups": [g.to_dict() for g in groups],
        "count": count_purchase_items(snapshot),
    }


@router.post("/quick-add", status_code=201)
def quick_add(payload: QuickAddInput, state: KitchenState = Depends(get_state)):
    try:
        entity = state.inventory.quick_add(payload.name)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return entity.to_dict()
