"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.ingredient_schemas import Ingredient, IngredientListResponse
from domain.schemas.recipe_schemas import (
    CookingStep,
    GeneratedRecipe,
    Recipe,
    RecipeResponse,
)

__all__ = [
    # Ingredient schemas
    "Ingredient",
    "IngredientListResponse",
    # Recipe schemas
    "CookingStep",
    "GeneratedRecipe",
    "Recipe",
    "RecipeResponse",
]
