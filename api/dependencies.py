"""
API dependencies for dependency injection

Each request gets fresh repositories and services wrapped around the shared
MongoDB and OpenAI handles opened in the application lifespan. Tests replace
any of these through ``app.dependency_overrides``.
"""

from fastapi import Depends
from pymongo.database import Database

from adapters import mongo_adapter, openai_adapter
from app.config import settings
from repositories import IngredientRepository, RecipeRepository
from services import RecipeGenerationClient, RecipeGenerationService


def get_database() -> Database:
    """
    Database handle dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Database = Depends(get_database)):
            # Use db handle here
            pass
    """
    return mongo_adapter.get_db()


def get_ingredient_repository(db: Database = Depends(get_database)) -> IngredientRepository:
    return IngredientRepository(db, settings.ingredients_collection)


def get_recipe_repository(db: Database = Depends(get_database)) -> RecipeRepository:
    return RecipeRepository(db, settings.recipes_collection)


def get_recipe_client() -> RecipeGenerationClient:
    return RecipeGenerationClient(
        openai_adapter.get_client(),
        model=settings.openai_model,
        temperature=settings.openai_temperature,
        max_tokens=settings.openai_max_tokens,
    )


def get_recipe_generation_service(
    ingredient_repo: IngredientRepository = Depends(get_ingredient_repository),
    recipe_repo: RecipeRepository = Depends(get_recipe_repository),
    recipe_client: RecipeGenerationClient = Depends(get_recipe_client),
) -> RecipeGenerationService:
    return RecipeGenerationService(ingredient_repo, recipe_repo, recipe_client)
