"""
Recipe generation client backed by Google's Gemini API.

This module sends the encoded fridge photo, the composed prompt and a strict
JSON response schema to the generative model, then parses the answer into a
batch of Recipe objects.

The client:
- Uses google-generativeai (genai.GenerativeModel.generate_content)
- Requests application/json constrained by RECIPE_RESPONSE_SCHEMA
- Strips ```json fences the model may still wrap around the body
- Assigns every recipe a fresh local id
- Returns a GenerationResult instead of raising, so callers branch on
  result.ok rather than catching exceptions

There is no retry, no timeout and no rate-limit backoff. The number of recipes
asked for is not enforced on the response.

Requires GEMINI_API_KEY (or API_KEY) in the environment or .env file. The model
defaults to gemini-2.5-flash and can be overridden via GEMINI_MODEL.
"""

import json
import logging
import os
import re
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, List, Optional

import google.generativeai as genai
from dotenv import load_dotenv
from pydantic import ValidationError

from .errors import FridgeChefError, GenerationConfigError, ImageReadError, RecipeParseError
from .ingestion import EncodedImage, decode_image
from .models import DietaryFilter, Recipe
from .prompts import DEFAULT_RECIPE_COUNT, RECIPE_RESPONSE_SCHEMA, build_prompt

logger = logging.getLogger(__name__)

DEFAULT_MODEL_NAME = "gemini-2.5-flash"

GENERIC_ERROR_MESSAGE = "Failed to analyze image. Please try again with a clearer photo."

_LEADING_FENCE = re.compile(r"^```[a-zA-Z]*\s*")
_TRAILING_FENCE = re.compile(r"\s*```$")


class GenerationFailure(str, Enum):
    """Why a generation attempt produced no recipes."""
    IMAGE_READ = "image_read"
    NOT_CONFIGURED = "not_configured"
    REQUEST_FAILED = "request_failed"
    INVALID_RESPONSE = "invalid_response"


@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of one photo analysis.

    Either `recipes` holds the batch (possibly empty) and `failure` is None, or
    `failure` names the reason and `detail` carries a diagnostic message for
    logs. `detail` is never meant for end users; show GENERIC_ERROR_MESSAGE.
    """
    recipes: List[Recipe] = field(default_factory=list)
    failure: Optional[GenerationFailure] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, recipes: Iterable[Recipe]) -> "GenerationResult":
        return cls(recipes=list(recipes))

    @classmethod
    def failed(cls, failure: GenerationFailure, detail: str = "") -> "GenerationResult":
        return cls(recipes=[], failure=GenerationFailure(failure), detail=detail)


def new_recipe_id() -> str:
    """Return a process-unique recipe id, e.g. 'recipe-1c9e...'."""
    return f"recipe-{uuid.uuid4().hex}"


def strip_code_fences(text: str) -> str:
    """
    Remove markdown code fences around a JSON body.

    Examples:
        >>> strip_code_fences('```json\\n[]\\n```')
        '[]'
        >>> strip_code_fences('[]')
        '[]'
    """
    cleaned = text.strip()
    cleaned = _LEADING_FENCE.sub("", cleaned)
    cleaned = _TRAILING_FENCE.sub("", cleaned)
    return cleaned.strip()


def parse_recipes(text: Optional[str], id_factory: Optional[Callable[[], str]] = None) -> List[Recipe]:
    """
    Parse the model's JSON answer into a batch of recipes.

    Args:
        text: Raw response text (may be fenced, may be empty)
        id_factory: Callable producing a fresh id per recipe (defaults to new_recipe_id)

    Returns:
        List of Recipe objects in response order. Empty text yields an empty list.

    Raises:
        RecipeParseError: If the body is not JSON, not an array, or any element
                          fails validation. The whole batch is discarded.
    """
    if not text or not text.strip():
        return []

    make_id = id_factory or new_recipe_id
    body = strip_code_fences(text)

    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise RecipeParseError(f"Model response is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise RecipeParseError(f"Expected a JSON array of recipes, got {type(data).__name__}")

    recipes: List[Recipe] = []
    for index, raw in enumerate(data):
        if not isinstance(raw, dict):
            raise RecipeParseError(f"Recipe #{index} is a {type(raw).__name__}, expected an object")
        try:
            recipes.append(Recipe.model_validate({**raw, "id": make_id()}))
        except ValidationError as e:
            raise RecipeParseError(f"Recipe #{index} failed validation: {e}") from e

    return recipes


def _response_text(response) -> str:
    """Extract the text of a generate_content response, '' if it has none."""
    try:
        return response.text or ""
    except ValueError:
        # .text raises when there are no candidate parts; a blocked prompt is an error
        feedback = getattr(response, "prompt_feedback", None)
        if feedback is not None and getattr(feedback, "block_reason", None):
            raise
        return ""


class RecipeGenerationClient:
    """
    Client for turning a fridge photo into recipes via Gemini.

    Attributes:
        model_name: Gemini model identifier
        recipe_count: How many recipes the prompt asks for
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        recipe_count: int = DEFAULT_RECIPE_COUNT,
    ) -> None:
        """
        Initialize the client.

        Args:
            api_key: Gemini API key (optional, reads GEMINI_API_KEY, then API_KEY)
            model_name: Model identifier (optional, reads GEMINI_MODEL or uses gemini-2.5-flash)
            recipe_count: Number of recipes to request
        """
        load_dotenv()

        self.api_key = api_key or os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")
        self.model_name = model_name or os.getenv("GEMINI_MODEL", DEFAULT_MODEL_NAME)
        self.recipe_count = recipe_count

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _request(self, image: EncodedImage, prompt: str) -> str:
        if not self.api_key:
            raise GenerationConfigError(
                "GEMINI_API_KEY is not set. Please add it to your .env file at the project root:\n"
                "GEMINI_API_KEY=your_gemini_api_key_here"
            )

        genai.configure(api_key=self.api_key)
        model = genai.GenerativeModel(self.model_name)
        response = model.generate_content(
            [
                {"mime_type": image.mime_type, "data": decode_image(image)},
                prompt,
            ],
            generation_config=genai.GenerationConfig(
                response_mime_type="application/json",
                response_schema=RECIPE_RESPONSE_SCHEMA,
            ),
        )
        return _response_text(response)

    def generate(self, image: EncodedImage, filters: Iterable[DietaryFilter] = ()) -> GenerationResult:
        """
        Analyze a photo and return a recipe batch.

        Args:
            image: Encoded photo
            filters: Active dietary filters in selection order

        Returns:
            GenerationResult. Never raises for service, network or parse errors.
        """
        filters = [DietaryFilter(f) for f in filters]
        prompt = build_prompt(filters, recipe_count=self.recipe_count)

        logger.info(
            "Requesting recipes from %s (%s, ~%d bytes, filters=%s)",
            self.model_name,
            image.mime_type,
            image.size_bytes,
            [f.value for f in filters] or "none",
        )

        try:
            text = self._request(image, prompt)
        except GenerationConfigError as e:
            logger.error("Recipe generation not configured: %s", e)
            return GenerationResult.failed(GenerationFailure.NOT_CONFIGURED, str(e))
        except ImageReadError as e:
            logger.error("Could not decode image for generation: %s", e)
            return GenerationResult.failed(GenerationFailure.IMAGE_READ, str(e))
        except Exception as e:
            logger.exception("Gemini API error")
            return GenerationResult.failed(GenerationFailure.REQUEST_FAILED, str(e))

        try:
            recipes = parse_recipes(text)
        except RecipeParseError as e:
            logger.error("Discarding recipe batch: %s", e)
            return GenerationResult.failed(GenerationFailure.INVALID_RESPONSE, str(e))

        logger.info("Generated %d recipe(s)", len(recipes))
        return GenerationResult.success(recipes)


def analyze_fridge_photo(
    image: EncodedImage,
    filters: Iterable[DietaryFilter] = (),
    client: Optional[RecipeGenerationClient] = None,
) -> GenerationResult:
    """Analyze a photo with the given (or a default) client."""
    return (client or RecipeGenerationClient()).generate(image, filters)


def failure_from_error(error: FridgeChefError) -> GenerationResult:
    """Map a core error raised before the request into a failed result."""
    if isinstance(error, ImageReadError):
        return GenerationResult.failed(GenerationFailure.IMAGE_READ, str(error))
    if isinstance(error, GenerationConfigError):
        return GenerationResult.failed(GenerationFailure.NOT_CONFIGURED, str(error))
    if isinstance(error, RecipeParseError):
        return GenerationResult.failed(GenerationFailure.INVALID_RESPONSE, str(error))
    return GenerationResult.failed(GenerationFailure.REQUEST_FAILED, str(error))
