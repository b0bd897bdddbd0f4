"""Pydantic schemas for generated recipes.

Two shapes exist: the nested form the model replies with, and the flattened
form stored in the Recipes collection.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List, Optional

from domain.enums import RecipeStatus


class CookingStep(BaseModel):
    """One cooking stage with its ordered sub-steps."""

    title: str = ""
    sub_steps: List[str] = Field(default_factory=list)

    @field_validator("title", mode="before")
    @classmethod
    def null_as_empty_text(cls, v):
        return "" if v is None else v

    @field_validator("sub_steps", mode="before")
    @classmethod
    def null_as_empty_list(cls, v):
        return [] if v is None else v


class GeneratedRecipe(BaseModel):
    """Recipe as returned by the chat-completion model, before flattening.

    A JSON null in any field reads as that field's empty value.
    """

    recipe_name: str = ""
    recipe_description: str = ""
    recipe_difficulty: str = ""
    recipe_estimated_time: str = ""
    ingredients: List[str] = Field(default_factory=list)
    cooking_steps: List[CookingStep] = Field(default_factory=list)

    @field_validator(
        "recipe_name",
        "recipe_description",
        "recipe_difficulty",
        "recipe_estimated_time",
        mode="before",
    )
    @classmethod
    def null_as_empty_text(cls, v):
        return "" if v is None else v

    @field_validator("ingredients", "cooking_steps", mode="before")
    @classmethod
    def null_as_empty_list(cls, v):
        return [] if v is None else v


class Recipe(BaseModel):
    """Flattened recipe as stored in the Recipes collection.

    ``ingredients`` holds ``recipe_ingredient_<i>`` keys and ``cooking_steps``
    holds ``recipe_step_<i>_title``, ``recipe_step_<i>_substep_<j>`` and
    ``recipe_step_<i>_substep_count`` keys.
    """

    model_config = ConfigDict(populate_by_name=True)

    recipe_name: str = ""
    recipe_description: str = ""
    recipe_difficulty: str = ""
    recipe_estimated_time: str = ""
    ingredients: Dict[str, str] = Field(default_factory=dict)
    recipe_ingredient_count: int = 0
    cooking_steps: Dict[str, str] = Field(default_factory=dict)
    recipe_step_count: int = 0
    recipe_is_marked: bool = False
    recipe_status: str = RecipeStatus.CREATED.value
    create_date_time: str = Field(default="", alias="createDateTime")
    update_date_time: str = Field(default="", alias="updateDateTime")


class RecipeResponse(BaseModel):
    """Body of POST /api/generate-recipe"""

    success: bool
    message: str
    recipe_id: Optional[str] = None
    recipe: Optional[Recipe] = None
