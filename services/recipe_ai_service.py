"""Recipe generation through the OpenAI chat-completion API."""

import logging
from openai import OpenAI, OpenAIError
from pydantic import ValidationError

from app.exceptions import MalformedModelOutput, ModelUnavailable
from domain.mappers.recipe_mapper import RecipeMapper
from domain.schemas.recipe_schemas import GeneratedRecipe, Recipe
from services.prompt_service import SYSTEM_PROMPT, build_recipe_prompt

logger = logging.getLogger("pantrychef.recipe_ai")


def strip_code_fence(content: str) -> str:
    """Remove surrounding whitespace and a markdown code fence from a model reply."""
    content = content.strip()
    content = content.removeprefix("```json")
    content = content.removeprefix("```")
    content = content.removesuffix("```")
    return content.strip()


def decode_model_output(content: str) -> GeneratedRecipe:
    """
    Decode a cleaned model reply into the nested recipe shape.

    The model is not bound by the requested schema, so anything that is not a
    JSON object of the expected shape is rejected as a whole.

    Raises:
        MalformedModelOutput: carrying ``content`` for diagnosis
    """
    try:
        return GeneratedRecipe.model_validate_json(content)
    except ValidationError as exc:
        raise MalformedModelOutput(
            content,
            details={"error": str(exc), "response": content},
        ) from exc


class RecipeGenerationClient:
    """
    Turns a formatted ingredient block into a flattened Recipe with one
    chat-completion call. No retries: a failed call ends the request.
    """

    def __init__(
        self,
        client: OpenAI,
        model: str = "gpt-4",
        temperature: float = 0.7,
        max_tokens: int = 2000,
    ):
        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    def generate_recipe(self, ingredients_text: str) -> Recipe:
        """
        Ask the model for a recipe and flatten its reply.

        Raises:
            ModelUnavailable: the call failed or returned no usable choice
            MalformedModelOutput: the reply is not a recipe JSON object
        """
        content = self._complete(build_recipe_prompt(ingredients_text))
        generated = decode_model_output(strip_code_fence(content))
        return RecipeMapper.flatten(generated)

    def _complete(self, prompt: str) -> str:
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except OpenAIError as exc:
            raise ModelUnavailable(
                "Error calling OpenAI API", details={"error": str(exc)}
            ) from exc

        if not resp.choices:
            raise ModelUnavailable("No response from OpenAI")

        content = resp.choices[0].message.content
        if content is None:
            raise ModelUnavailable("Empty response from OpenAI")

        logger.debug("Model replied with %d characters", len(content))
        return content
