"""Recipe coverage calculator.

Provides compute_coverage(recipe, index) -> RecipeCoverage, plus helpers that
run it over a whole recipe collection.

Cookability is a presence check only: every ingredient line must resolve to an
in-stock inventory entity. Whether the stocked quantity is sufficient is
answered separately by kitchen.logic.depletion.estimator.
"""
from __future__ import annotations
import logging
from typing import Dict, Iterable, List

from kitchen.domain.Ingredient import IngredientEntity
from kitchen.domain.Recipe import Recipe
from kitchen.domain.RecipeCoverage import RecipeCoverage
from kitchen.logic.inventory.index import InventoryIndex
from kitchen.logic.normalize import normalize_name

logger = logging.getLogger(__name__)

__all__ = ["compute_coverage", "compute_all_coverage", "cookable_recipes"]


def compute_coverage(recipe: Recipe, index: InventoryIndex) -> RecipeCoverage:
    matched: Dict[str, IngredientEntity] = {}
    missing: List[str] = []
    matched_count = 0
    for ingredient in recipe.ingredients:
        entity = index.lookup(normalize_name(ingredient.name))
        if entity is not None and entity.in_stock:
            matched[ingredient.name] = entity
            matched_count += 1
        else:
            missing.append(ingredient.name)
    coverage = RecipeCoverage(
        matched_count=matched_count,
        total_required=len(recipe.ingredients),
        missing_ingredients=missing,
        matched_entities=matched,
    )
    logger.debug(f"Coverage for {recipe.name!r}: {coverage}")
    return coverage


def compute_all_coverage(recipes: Iterable[Recipe], index: InventoryIndex) -> Dict[str, RecipeCoverage]:
    """Coverage per recipe id, in recipe order."""
    return {recipe.id: compute_coverage(recipe, index) for recipe in recipes}


def cookable_recipes(recipes: Iterable[Recipe], index: InventoryIndex) -> List[Recipe]:
    return [r for r in recipes if compute_coverage(r, index).is_cookable]
