"""Pydantic schemas for documents in the Ingredients collection."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Ingredient(BaseModel):
    """One pantry item. Read-only here; its lifecycle belongs to the document store."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    suid: str = Field(default="", alias="_SUID")
    ingredient_group: str = ""
    ingredient_name: str = ""
    ingredient_number: str = ""
    create_date_time: str = Field(default="", alias="createDateTime")
    update_date_time: str = Field(default="", alias="updateDateTime")

    @field_validator("ingredient_number", mode="before")
    @classmethod
    def number_as_text(cls, v):
        """Quantities are sometimes stored as numbers; keep their text form."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class IngredientListResponse(BaseModel):
    """Body of GET /api/ingredients"""

    success: bool = True
    ingredients: list[Ingredient] = Field(default_factory=list)
    count: int = 0
