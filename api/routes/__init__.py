"""API routes package"""

from . import health, ingredients, recipes

__all__ = ["health", "ingredients", "recipes"]
