"""Recipe generation service - runs one generate-recipe request end to end."""

from dataclasses import dataclass
import logging

from app.exceptions import (
    NoIngredientsAvailable,
    RecipeGenerationFailed,
    ServiceError,
)
from domain.enums import GenerationStage
from domain.schemas.recipe_schemas import Recipe
from repositories.ingredient_repository import IngredientRepository
from repositories.recipe_repository import RecipeRepository
from services.prompt_service import format_ingredients_for_prompt
from services.recipe_ai_service import RecipeGenerationClient

logger = logging.getLogger("pantrychef.recipe_generation")

STAGE_MESSAGES = {
    GenerationStage.FETCHING_INGREDIENTS: "Failed to get ingredients",
    GenerationStage.GENERATING_RECIPE: "Failed to generate recipe",
    GenerationStage.PERSISTING: "Failed to save recipe",
}


@dataclass
class GenerationResult:
    """Outcome of a successful generate-recipe request."""

    recipe_id: str
    recipe: Recipe


class RecipeGenerationService:
    """
    Fetch ingredients -> format -> generate with the model -> persist.

    Stages advance linearly. An empty pantry stops the flow before the model
    is called and is reported as a client error; any other failure moves to
    ERROR and is reported as a server error naming the failed stage.
    """

    def __init__(
        self,
        ingredient_repo: IngredientRepository,
        recipe_repo: RecipeRepository,
        recipe_client: RecipeGenerationClient,
    ):
        self.ingredient_repo = ingredient_repo
        self.recipe_repo = recipe_repo
        self.recipe_client = recipe_client
        self.stage = GenerationStage.FETCHING_INGREDIENTS

    def _advance(self, stage: GenerationStage) -> None:
        if self.stage.is_terminal():
            raise RuntimeError(f"Cannot leave terminal stage {self.stage.value}")
        logger.info("Recipe generation: %s -> %s", self.stage.value, stage.value)
        self.stage = stage

    def _fail(self, exc: ServiceError) -> RecipeGenerationFailed:
        failed_stage = self.stage
        logger.error(
            "Recipe generation failed at %s: %s",
            failed_stage.value,
            exc.to_dict(),
        )
        self._advance(GenerationStage.ERROR)
        return RecipeGenerationFailed(
            failed_stage, exc, message=STAGE_MESSAGES.get(failed_stage)
        )

    def generate(self) -> GenerationResult:
        """
        Run the full flow once.

        Raises:
            NoIngredientsAvailable: the ingredient store is empty
            RecipeGenerationFailed: a store read, model call or store write failed
        """
        self.stage = GenerationStage.FETCHING_INGREDIENTS
        logger.info("Fetching ingredients...")
        try:
            ingredients = self.ingredient_repo.list_all()
        except ServiceError as exc:
            raise self._fail(exc) from exc

        if not ingredients:
            logger.warning("No ingredients available, skipping recipe generation")
            self._advance(GenerationStage.ERROR)
            raise NoIngredientsAvailable()
        logger.info("Found %d ingredients", len(ingredients))

        self._advance(GenerationStage.FORMATTING)
        ingredients_text = format_ingredients_for_prompt(ingredients)
        logger.debug("Ingredients formatted for prompt:\n%s", ingredients_text)

        self._advance(GenerationStage.GENERATING_RECIPE)
        try:
            recipe = self.recipe_client.generate_recipe(ingredients_text)
        except ServiceError as exc:
            raise self._fail(exc) from exc
        logger.info("Recipe generated: %s", recipe.recipe_name)

        self._advance(GenerationStage.PERSISTING)
        try:
            recipe_id = self.recipe_repo.save(recipe)
        except ServiceError as exc:
            raise self._fail(exc) from exc

        self._advance(GenerationStage.DONE)
        return GenerationResult(recipe_id=recipe_id, recipe=recipe)
