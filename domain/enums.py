"""
Domain enums for PantryChef application.
Contains all enumeration types used across the domain models.
"""

import enum


class RecipeStatus(str, enum.Enum):
    """Status codes stored in recipe_status"""

    CREATED = "0"


class GenerationStage(str, enum.Enum):
    """Stages of a single generate-recipe request"""

    FETCHING_INGREDIENTS = "fetching_ingredients"
    FORMATTING = "formatting"
    GENERATING_RECIPE = "generating_recipe"
    PERSISTING = "persisting"
    DONE = "done"
    ERROR = "error"

    def is_terminal(self) -> bool:
        return self in (GenerationStage.DONE, GenerationStage.ERROR)
