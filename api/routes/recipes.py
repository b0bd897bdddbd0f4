"""
Recipe routes - generate a recipe from the ingredients on hand.
"""

from fastapi import APIRouter, Depends
import logging

from api.dependencies import get_recipe_generation_service
from domain.schemas.recipe_schemas import RecipeResponse
from services import RecipeGenerationService

router = APIRouter(prefix="/api", tags=["Recipes"])
logger = logging.getLogger("pantrychef.api.recipes")


@router.post("/generate-recipe", response_model=RecipeResponse)
def generate_recipe(
    service: RecipeGenerationService = Depends(get_recipe_generation_service),
) -> RecipeResponse:
    """
    Generate a recipe from every stored ingredient and save it.

    - **400**: the pantry is empty
    - **500**: reading ingredients, calling the model or saving failed
    """
    result = service.generate()
    logger.info("Recipe saved with ID: %s", result.recipe_id)

    return RecipeResponse(
        success=True,
        message=f"Recipe successfully generated and saved with ID: {result.recipe_id}",
        recipe_id=result.recipe_id,
        recipe=result.recipe,
    )
