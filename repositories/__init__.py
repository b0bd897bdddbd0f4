"""
Repositories package - Data access layer.
"""

from repositories.ingredient_repository import IngredientRepository
from repositories.recipe_repository import RecipeRepository

__all__ = [
    "IngredientRepository",
    "RecipeRepository",
]
