"""
Tests for the chat-completion recipe client.

Covers:
- Code fence stripping
- Decoding of untrusted model replies
- Request parameters sent to the model
- Mapping of API failures to ModelUnavailable
"""

import json
from types import SimpleNamespace

import pytest
from openai import OpenAIError

from app.exceptions import MalformedModelOutput, ModelUnavailable
from services.prompt_service import SYSTEM_PROMPT
from services.recipe_ai_service import (
    RecipeGenerationClient,
    decode_model_output,
    strip_code_fence,
)
from test_fixtures import make_model_reply, make_openai_client


REPLY = json.dumps(make_model_reply(), ensure_ascii=False)


# =============================================================================
# CODE FENCE STRIPPING
# =============================================================================


@pytest.mark.parametrize(
    "wrapped",
    [
        REPLY,
        f"```json\n{REPLY}\n```",
        f"```\n{REPLY}\n```",
        f"  \n```json{REPLY}```\n\n",
        f"\t{REPLY}\n",
    ],
)
def test_strip_code_fence_variants(wrapped):
    assert strip_code_fence(wrapped) == REPLY


def test_fenced_and_plain_replies_decode_identically():
    fenced = decode_model_output(strip_code_fence(f"```json\n{REPLY}\n```"))
    plain = decode_model_output(strip_code_fence(REPLY))
    assert fenced == plain
    assert fenced.recipe_name == "Onion omelette"


# =============================================================================
# DECODING
# =============================================================================


@pytest.mark.parametrize(
    "raw",
    [
        "Sorry, I cannot help with that.",
        '{"recipe_name": "half',
        "[1, 2, 3]",
        "null",
        '{"recipe_name": "x", "ingredients": "not a list"}',
        '{"recipe_name": "x", "cooking_steps": [{"title": "a", "sub_steps": [1, 2]}]}',
    ],
)
def test_decode_rejects_malformed_output(raw):
    with pytest.raises(MalformedModelOutput) as exc_info:
        decode_model_output(raw)
    assert exc_info.value.raw_output == raw
    assert exc_info.value.http_status == 500


def test_decode_tolerates_missing_fields():
    recipe = decode_model_output('{"recipe_name": "Toast"}')
    assert recipe.recipe_name == "Toast"
    assert recipe.ingredients == []
    assert recipe.cooking_steps == []


def test_decode_reads_null_fields_as_empty():
    recipe = decode_model_output(
        '{"recipe_name": "Toast", "recipe_description": null, "ingredients": null,'
        ' "cooking_steps": [{"title": "a", "sub_steps": null}]}'
    )
    assert recipe.recipe_name == "Toast"
    assert recipe.recipe_description == ""
    assert recipe.ingredients == []
    assert len(recipe.cooking_steps) == 1
    assert recipe.cooking_steps[0].title == "a"
    assert recipe.cooking_steps[0].sub_steps == []


def test_decode_reads_null_step_list_as_empty():
    recipe = decode_model_output('{"recipe_name": "Toast", "cooking_steps": null}')
    assert recipe.cooking_steps == []


# =============================================================================
# MODEL CALL
# =============================================================================


def test_generate_recipe_sends_prompt_and_flattens_reply():
    openai_client = make_openai_client(f"```json\n{REPLY}\n```")
    recipe_client = RecipeGenerationClient(
        openai_client, model="gpt-4", temperature=0.7, max_tokens=2000
    )

    recipe = recipe_client.generate_recipe("1. egg (dairy) - 수량: 2개\n")

    kwargs = openai_client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "gpt-4"
    assert kwargs["temperature"] == 0.7
    assert kwargs["max_tokens"] == 2000
    messages = kwargs["messages"]
    assert messages[0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert messages[1]["role"] == "user"
    assert "1. egg (dairy) - 수량: 2개" in messages[1]["content"]

    assert recipe.recipe_ingredient_count == 3
    assert recipe.recipe_step_count == 2
    assert recipe.cooking_steps["recipe_step_0_title"] == "Prep"


def test_generate_recipe_calls_model_once():
    openai_client = make_openai_client(REPLY)
    RecipeGenerationClient(openai_client).generate_recipe("text")
    assert openai_client.chat.completions.create.call_count == 1


def test_api_error_becomes_model_unavailable():
    openai_client = make_openai_client(error=OpenAIError("connection reset"))

    with pytest.raises(ModelUnavailable) as exc_info:
        RecipeGenerationClient(openai_client).generate_recipe("text")

    assert "connection reset" in exc_info.value.details["error"]
    assert openai_client.chat.completions.create.call_count == 1


def test_no_choices_becomes_model_unavailable():
    openai_client = make_openai_client(completion=SimpleNamespace(choices=[]))

    with pytest.raises(ModelUnavailable, match="No response"):
        RecipeGenerationClient(openai_client).generate_recipe("text")


def test_empty_message_becomes_model_unavailable():
    openai_client = make_openai_client(content=None)

    with pytest.raises(ModelUnavailable):
        RecipeGenerationClient(openai_client).generate_recipe("text")


def test_malformed_reply_propagates_raw_text():
    openai_client = make_openai_client("```json\nnot json at all\n```")

    with pytest.raises(MalformedModelOutput) as exc_info:
        RecipeGenerationClient(openai_client).generate_recipe("text")

    assert exc_info.value.raw_output == "not json at all"
