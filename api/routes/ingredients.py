"""Ingredient routes - read-only view of the pantry."""

from fastapi import APIRouter, Depends
import logging

from api.dependencies import get_ingredient_repository
from app.exceptions import PersistenceError
from domain.schemas.ingredient_schemas import IngredientListResponse
from repositories import IngredientRepository

router = APIRouter(prefix="/api", tags=["Ingredients"])
logger = logging.getLogger("pantrychef.api.ingredients")


@router.get("/ingredients", response_model=IngredientListResponse)
def list_ingredients(
    repo: IngredientRepository = Depends(get_ingredient_repository),
) -> IngredientListResponse:
    """List every ingredient currently in the pantry."""
    try:
        ingredients = repo.list_all()
    except PersistenceError as exc:
        logger.error("Error getting ingredients: %s", exc.to_dict())
        raise PersistenceError("Failed to get ingredients") from exc

    return IngredientListResponse(
        success=True, ingredients=ingredients, count=len(ingredients)
    )
