"""
Recipe Repository - Data access layer for generated recipes (MongoDB integration)
"""

from datetime import datetime, timezone
from typing import Callable, Optional
import logging
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.exceptions import PersistenceError
from domain.mappers.recipe_mapper import RecipeMapper
from domain.schemas.recipe_schemas import Recipe

logger = logging.getLogger("pantrychef.repositories.recipe")

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RecipeRepository:
    """
    Append-only repository over the Recipes collection.
    """

    def __init__(
        self,
        db: Database,
        collection_name: str = "Recipes",
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize repository with a MongoDB database handle"""
        self.collection = db[collection_name]
        self.clock = clock or _utcnow

    def save(self, recipe: Recipe) -> str:
        """Stamp and insert a flattened recipe as a new document

        Both timestamps are set on ``recipe`` to the same instant before the
        write, so callers can return the stamped recipe.

        Args:
            recipe: flattened recipe

        Returns:
            Identifier of the new document

        Raises:
            PersistenceError: the insert failed
        """
        now = self.clock().astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)
        recipe.create_date_time = now
        recipe.update_date_time = now

        document = dict(RecipeMapper.to_document(recipe))
        try:
            result = self.collection.insert_one(document)
        except PyMongoError as exc:
            raise PersistenceError(
                "Error saving recipe", details={"error": str(exc)}
            ) from exc

        recipe_id = str(result.inserted_id)
        logger.info("Recipe stored: %s", recipe_id)
        return recipe_id
