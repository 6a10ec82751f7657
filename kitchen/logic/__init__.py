"""Ingredient matching & coverage engine.

Modules:
- normalize: ingredient name -> matching key
- inventory: keyed index over pantry entities
- coverage: recipe cookability against the index
- depletion: per-line deficit and auto-buy estimates
- shopping: store-grouped grocery list
"""
__all__ = ["normalize", "inventory", "coverage", "depletion", "shopping"]
