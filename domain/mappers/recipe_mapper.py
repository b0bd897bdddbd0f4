"""
Recipe domain mappers.
Handles transformation between the nested model reply, the typed flattened
Recipe and the single-level document written to the Recipes collection.
"""

from typing import Any, List, Tuple

from domain.enums import RecipeStatus
from domain.schemas.recipe_schemas import CookingStep, GeneratedRecipe, Recipe

INGREDIENT_KEY = "recipe_ingredient_{index}"
STEP_TITLE_KEY = "recipe_step_{index}_title"
SUBSTEP_KEY = "recipe_step_{index}_substep_{sub_index}"
SUBSTEP_COUNT_KEY = "recipe_step_{index}_substep_count"


class RecipeMapper:
    """Mapper for recipe transformations."""

    @staticmethod
    def flatten(generated: GeneratedRecipe) -> Recipe:
        """
        Convert the nested model reply into a flattened Recipe.

        Ingredients become ``recipe_ingredient_<i>`` keys. Each stage becomes a
        title key, one key per sub-step and a text-encoded sub-step count.

        Args:
            generated: decoded model reply

        Returns:
            Recipe with counts, default flags and both flattened mappings set
        """
        ingredients = {
            INGREDIENT_KEY.format(index=i): ingredient
            for i, ingredient in enumerate(generated.ingredients)
        }

        cooking_steps = {}
        for i, step in enumerate(generated.cooking_steps):
            cooking_steps[STEP_TITLE_KEY.format(index=i)] = step.title
            for j, sub_step in enumerate(step.sub_steps):
                cooking_steps[SUBSTEP_KEY.format(index=i, sub_index=j)] = sub_step
            cooking_steps[SUBSTEP_COUNT_KEY.format(index=i)] = str(len(step.sub_steps))

        return Recipe(
            recipe_name=generated.recipe_name,
            recipe_description=generated.recipe_description,
            recipe_difficulty=generated.recipe_difficulty,
            recipe_estimated_time=generated.recipe_estimated_time,
            ingredients=ingredients,
            recipe_ingredient_count=len(generated.ingredients),
            cooking_steps=cooking_steps,
            recipe_step_count=len(generated.cooking_steps),
            recipe_is_marked=False,
            recipe_status=RecipeStatus.CREATED.value,
        )

    @staticmethod
    def unflatten(recipe: Recipe) -> GeneratedRecipe:
        """
        Regroup a flattened Recipe by index and sub-step index.

        Raises:
            ValueError: a key implied by the counts is missing or a sub-step
                count is not an integer
        """
        try:
            ingredients = [
                recipe.ingredients[INGREDIENT_KEY.format(index=i)]
                for i in range(recipe.recipe_ingredient_count)
            ]
            steps = []
            for i in range(recipe.recipe_step_count):
                count = int(recipe.cooking_steps[SUBSTEP_COUNT_KEY.format(index=i)])
                steps.append(
                    CookingStep(
                        title=recipe.cooking_steps[STEP_TITLE_KEY.format(index=i)],
                        sub_steps=[
                            recipe.cooking_steps[SUBSTEP_KEY.format(index=i, sub_index=j)]
                            for j in range(count)
                        ],
                    )
                )
        except KeyError as exc:
            raise ValueError(f"Flattened recipe is missing key {exc.args[0]}") from exc

        return GeneratedRecipe(
            recipe_name=recipe.recipe_name,
            recipe_description=recipe.recipe_description,
            recipe_difficulty=recipe.recipe_difficulty,
            recipe_estimated_time=recipe.recipe_estimated_time,
            ingredients=ingredients,
            cooking_steps=steps,
        )

    @staticmethod
    def to_document(recipe: Recipe) -> List[Tuple[str, Any]]:
        """
        Serialize a Recipe into ordered (key, value) pairs for storage.

        Scalar fields come first, then every ingredient key, then every
        cooking-step key. The Recipe itself is left untouched.
        """
        pairs: List[Tuple[str, Any]] = [
            ("recipe_description", recipe.recipe_description),
            ("recipe_difficulty", recipe.recipe_difficulty),
            ("recipe_estimated_time", recipe.recipe_estimated_time),
            ("recipe_ingredient_count", recipe.recipe_ingredient_count),
            ("recipe_step_count", recipe.recipe_step_count),
            ("recipe_is_marked", recipe.recipe_is_marked),
            ("recipe_name", recipe.recipe_name),
            ("recipe_status", recipe.recipe_status),
            ("createDateTime", recipe.create_date_time),
            ("updateDateTime", recipe.update_date_time),
        ]
        pairs.extend(recipe.ingredients.items())
        pairs.extend(recipe.cooking_steps.items())
        return pairs
