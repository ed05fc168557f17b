"""
Prompt and response schema for the recipe generation request.

The prompt asks the model to identify ingredients in the photo, suggest
recipes built mainly from them, split ingredients into available/missing and
respect the active dietary filters. The schema constrains the JSON the model
returns to the Recipe shape (minus the locally assigned id).
"""

from typing import Iterable

from .models import DietaryFilter, Difficulty

DEFAULT_RECIPE_COUNT = 5

PROMPT_TEMPLATE = """Analyze the provided image of a fridge/pantry. Identify the visible ingredients.
Based on these ingredients, suggest {recipe_count} creative and delicious recipes that can be made primarily with these items.

If the recipe requires common pantry staples (oil, salt, pepper, basic spices) or items not clearly visible, list them as 'ingredientsMissing'.
Items clearly visible or confidently inferred from the image context should be 'ingredientsAvailable'.

Strictly adhere to the following dietary restrictions if any are listed: {constraints}.
{unrestricted_note}"""

UNRESTRICTED_NOTE = "No dietary restrictions are listed, so any recipe is acceptable."


def _ingredient_list_schema() -> dict:
    return {
        "type": "array",
        "items": {
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "amount": {"type": "string"},
            },
            "required": ["name", "amount"],
        },
    }


# Gemini response schema: an array of recipe objects
RECIPE_RESPONSE_SCHEMA = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "title": {"type": "string"},
            "description": {"type": "string"},
            "difficulty": {
                "type": "string",
                "format": "enum",
                "enum": [d.value for d in Difficulty],
            },
            "prepTimeMinutes": {"type": "integer"},
            "calories": {"type": "integer"},
            "dietaryTags": {"type": "array", "items": {"type": "string"}},
            "ingredientsAvailable": _ingredient_list_schema(),
            "ingredientsMissing": _ingredient_list_schema(),
            "steps": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "stepNumber": {"type": "integer"},
                        "instruction": {"type": "string"},
                    },
                    "required": ["stepNumber", "instruction"],
                },
            },
        },
        "required": [
            "title",
            "description",
            "difficulty",
            "prepTimeMinutes",
            "calories",
            "dietaryTags",
            "ingredientsAvailable",
            "ingredientsMissing",
            "steps",
        ],
    },
}


def constraint_clause(filters: Iterable[DietaryFilter]) -> str:
    """
    Join the active dietary filters in selection order.

    Examples:
        >>> constraint_clause([DietaryFilter.VEGAN, DietaryFilter.KETO])
        'Vegan, Keto'
        >>> constraint_clause([])
        ''
    """
    return ", ".join(DietaryFilter(f).value for f in filters)


def build_prompt(filters: Iterable[DietaryFilter], recipe_count: int = DEFAULT_RECIPE_COUNT) -> str:
    """
    Compose the natural-language instruction sent alongside the photo.

    An empty filter selection leaves the constraint clause empty and adds an
    explicit note that no restriction applies.

    Args:
        filters: Active dietary filters, in selection order
        recipe_count: How many recipes to ask for (not enforced on the response)

    Returns:
        Prompt text
    """
    clause = constraint_clause(filters)
    return PROMPT_TEMPLATE.format(
        recipe_count=recipe_count,
        constraints=clause,
        unrestricted_note="" if clause else UNRESTRICTED_NOTE,
    ).rstrip() + "\n"
