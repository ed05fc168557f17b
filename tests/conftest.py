"""Shared fixtures: model-shaped recipe payloads and parsed recipes."""

import json
from typing import Any, Dict, List, Union

import pytest

from fridgechef.models import Recipe


def recipe_payload(
    title: str = "Tomato Egg Stir-Fry",
    steps: Union[int, List[Dict[str, Any]]] = 3,
    **overrides: Any,
) -> Dict[str, Any]:
    """
    A recipe object as the model returns it (camelCase, no id).

    steps is either a count of numbered steps or the literal step objects.
    """
    if isinstance(steps, int):
        steps = [{"stepNumber": i, "instruction": f"Step {i} instruction."} for i in range(1, steps + 1)]
    payload = {
        "title": title,
        "description": "Quick weeknight classic.",
        "difficulty": "Easy",
        "prepTimeMinutes": 15,
        "calories": 320,
        "dietaryTags": ["Vegetarian"],
        "ingredientsAvailable": [{"name": "eggs", "amount": "3"}, {"name": "tomato", "amount": "2"}],
        "ingredientsMissing": [{"name": "olive oil", "amount": "2 tbsp"}],
        "steps": steps,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def model_response_text() -> str:
    """Unfenced JSON body with two recipes."""
    return json.dumps([recipe_payload(), recipe_payload(title="Caprese Salad", steps=2)])


@pytest.fixture
def sample_recipe() -> Recipe:
    """A parsed recipe with 3 steps and one missing ingredient (olive oil, 2 tbsp)."""
    return Recipe.model_validate({**recipe_payload(), "id": "recipe-test-1"})


@pytest.fixture
def sample_recipes(sample_recipe) -> List[Recipe]:
    second = Recipe.model_validate({**recipe_payload(title="Caprese Salad", steps=2), "id": "recipe-test-2"})
    return [sample_recipe, second]
