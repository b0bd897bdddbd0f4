"""
Ingredient Repository - Data access layer for pantry ingredients (MongoDB integration)
"""

from typing import List
import logging
from pydantic import ValidationError
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.exceptions import PersistenceError
from domain.schemas.ingredient_schemas import Ingredient

logger = logging.getLogger("pantrychef.repositories.ingredient")


class IngredientRepository:
    """
    Read-only repository over the Ingredients collection.
    Documents are owned by another system; this one only lists them.
    """

    def __init__(self, db: Database, collection_name: str = "Ingredients"):
        """Initialize repository with a MongoDB database handle"""
        self.collection = db[collection_name]

    def list_all(self) -> List[Ingredient]:
        """List every ingredient document

        Returns:
            Ingredients in store iteration order; empty list for an empty collection

        Raises:
            PersistenceError: iterating or decoding a document failed
        """
        ingredients: List[Ingredient] = []
        try:
            for doc in self.collection.find():
                ingredients.append(Ingredient.model_validate(doc))
        except PyMongoError as exc:
            raise PersistenceError(
                "Error iterating ingredients", details={"error": str(exc)}
            ) from exc
        except ValidationError as exc:
            raise PersistenceError(
                "Error converting document to ingredient",
                details={"error": str(exc)},
            ) from exc

        logger.debug("Loaded %d ingredients", len(ingredients))
        return ingredients
