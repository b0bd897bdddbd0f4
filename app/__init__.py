"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    ServiceError,
    ConfigurationMissing,
    PersistenceError,
    ModelUnavailable,
    MalformedModelOutput,
    NoIngredientsAvailable,
    RecipeGenerationFailed,
)

__all__ = [
    "settings",
    "ServiceError",
    "ConfigurationMissing",
    "PersistenceError",
    "ModelUnavailable",
    "MalformedModelOutput",
    "NoIngredientsAvailable",
    "RecipeGenerationFailed",
]
