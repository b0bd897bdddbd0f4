"""
Tests for recipe flattening.

Covers:
- Key layout and counts produced from a nested model reply
- Flatten -> regroup round trip
- Ordered storage serialization
"""

import pytest

from domain.mappers.recipe_mapper import RecipeMapper
from domain.schemas.recipe_schemas import GeneratedRecipe, Recipe
from test_fixtures import make_model_reply


def _generated(**kwargs):
    return GeneratedRecipe.model_validate(make_model_reply(**kwargs))


def test_flatten_counts_and_keys():
    generated = _generated(
        ingredients=("a", "b", "c", "d"),
        steps=(("One", ("x", "y", "z")), ("Two", ()), ("Three", ("w",))),
    )

    recipe = RecipeMapper.flatten(generated)

    assert recipe.recipe_ingredient_count == 4
    assert recipe.recipe_step_count == 3
    assert sorted(recipe.ingredients) == [f"recipe_ingredient_{i}" for i in range(4)]

    steps = recipe.cooking_steps
    title_keys = [k for k in steps if k.endswith("_title")]
    count_keys = [k for k in steps if k.endswith("_substep_count")]
    substep_keys = [k for k in steps if "_substep_" in k and not k.endswith("_count")]
    assert len(title_keys) == 3
    assert len(count_keys) == 3
    assert len(substep_keys) == 4
    assert [int(steps[f"recipe_step_{i}_substep_count"]) for i in range(3)] == [3, 0, 1]
    assert steps["recipe_step_0_title"] == "One"
    assert steps["recipe_step_0_substep_2"] == "z"
    assert steps["recipe_step_2_substep_0"] == "w"


def test_flatten_sets_creation_defaults():
    recipe = RecipeMapper.flatten(_generated())

    assert recipe.recipe_is_marked is False
    assert recipe.recipe_status == "0"
    assert recipe.recipe_name == "Onion omelette"
    assert recipe.recipe_difficulty == "●●○○○"
    assert recipe.create_date_time == ""


def test_substep_counts_are_text():
    recipe = RecipeMapper.flatten(_generated())
    assert recipe.cooking_steps["recipe_step_0_substep_count"] == "2"
    assert recipe.cooking_steps["recipe_step_1_substep_count"] == "1"


def test_flatten_empty_reply():
    recipe = RecipeMapper.flatten(GeneratedRecipe())
    assert recipe.recipe_ingredient_count == 0
    assert recipe.recipe_step_count == 0
    assert recipe.ingredients == {}
    assert recipe.cooking_steps == {}


def test_flatten_then_unflatten_round_trip():
    generated = _generated(
        ingredients=("rice - 1공기", "kimchi - 100g"),
        steps=(("재료 준비", ("김치를 썬다", "밥을 준비한다")), ("조리하기", ("볶는다",)), ("마무리", ())),
    )

    assert RecipeMapper.unflatten(RecipeMapper.flatten(generated)) == generated


def test_unflatten_reports_missing_key():
    recipe = RecipeMapper.flatten(_generated())
    del recipe.cooking_steps["recipe_step_1_title"]

    with pytest.raises(ValueError, match="recipe_step_1_title"):
        RecipeMapper.unflatten(recipe)


def test_to_document_order_and_content():
    recipe = RecipeMapper.flatten(_generated())
    recipe.create_date_time = "2026-10-19T09:30:00Z"
    recipe.update_date_time = "2026-10-19T09:30:00Z"

    pairs = RecipeMapper.to_document(recipe)
    keys = [k for k, _ in pairs]

    assert keys[:10] == [
        "recipe_description",
        "recipe_difficulty",
        "recipe_estimated_time",
        "recipe_ingredient_count",
        "recipe_step_count",
        "recipe_is_marked",
        "recipe_name",
        "recipe_status",
        "createDateTime",
        "updateDateTime",
    ]
    assert keys[10:13] == ["recipe_ingredient_0", "recipe_ingredient_1", "recipe_ingredient_2"]
    assert len(keys) == len(set(keys))
    assert len(pairs) == 10 + len(recipe.ingredients) + len(recipe.cooking_steps)

    document = dict(pairs)
    assert "ingredients" not in document
    assert "cooking_steps" not in document
    assert document["recipe_step_0_substep_count"] == "2"


def test_to_document_leaves_recipe_untouched():
    recipe = RecipeMapper.flatten(_generated())
    before = recipe.model_copy(deep=True)

    RecipeMapper.to_document(recipe)

    assert recipe == before
    assert isinstance(recipe, Recipe)
