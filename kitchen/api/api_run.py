import logging

from fastapi import FastAPI, Depends

from kitchen.api.routes import inventory, recipes, grocery
from kitchen.api.state import KitchenState, get_state
from kitchen.utilities import config

# Logging
logger = logging.getLogger("kitchen_app")

# Initialize FastAPI app
app = FastAPI(title="Kitchen OS Pantry & Recipe API", debug=config.DEBUG)

# Include routers
app.include_router(inventory.router)
app.include_router(recipes.router)
app.include_router(grocery.router)


@app.get("/")
def overview(state: KitchenState = Depends(get_state)):
    """Dashboard counters: pantry size, items needing restock, recipe count."""
    return {
        "inventory": len(state.inventory),
        "missing_count": state.inventory.missing_count(),
        "recipes": len(state.recipe_book),
    }


logger.debug("Kitchen API routes registered")
