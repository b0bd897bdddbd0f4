"""Services package - Business logic layer"""

from services.recipe_ai_service import RecipeGenerationClient
from services.recipe_generation_service import (
    GenerationResult,
    RecipeGenerationService,
)

# Note: prompt_service contains utility functions, not a class

__all__ = [
    "RecipeGenerationClient",
    "GenerationResult",
    "RecipeGenerationService",
]
