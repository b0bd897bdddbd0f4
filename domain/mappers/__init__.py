"""
Domain mappers package.
Handles transformation between model replies, domain schemas and stored documents.
"""

from domain.mappers.recipe_mapper import RecipeMapper

__all__ = ["RecipeMapper"]
