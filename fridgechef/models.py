"""
Recipe and shopping list models for FridgeChef.

This module defines the canonical data shapes shared by the backend API, the
generation client and the Streamlit UI:

- Ingredient / RecipeStep / Recipe: one generated batch from the model.
- ShoppingItem: a locally owned shopping list entry.
- Difficulty / DietaryFilter: closed enumerations.

# NOTE: Attribute names are snake_case; the camelCase names the model returns
    (prepTimeMinutes, ingredientsMissing, stepNumber, ...) are kept as aliases.
    Dump with `by_alias=True` to get the wire format back.

All models are frozen. A new photo analysis produces a new batch rather than
mutating the previous one, and shopping items are replaced via model_copy().
"""

from enum import Enum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Difficulty(str, Enum):
    """How hard a recipe is to cook."""
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class DietaryFilter(str, Enum):
    """Dietary constraints a user can ask the model to respect."""
    VEGETARIAN = "Vegetarian"
    VEGAN = "Vegan"
    KETO = "Keto"
    GLUTEN_FREE = "Gluten-Free"
    DAIRY_FREE = "Dairy-Free"
    HIGH_PROTEIN = "High-Protein"


# Display order for the sidebar toggles
DIETARY_OPTIONS: List[DietaryFilter] = list(DietaryFilter)


class Ingredient(BaseModel):
    """A named quantity, e.g. olive oil / 2 tbsp."""
    name: str = Field(..., description="Ingredient name")
    amount: str = Field(default="", description="Free-form quantity (e.g. '2 tbsp', 'a pinch')")

    model_config = ConfigDict(frozen=True)


class RecipeStep(BaseModel):
    """
    One instruction of a recipe.

    step_number is only a display label. Navigation and ordering always use the
    step's position in Recipe.steps.
    """
    step_number: int = Field(..., alias="stepNumber", description="Label shown as 'Step N'")
    instruction: str = Field(..., description="Instruction text")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Recipe(BaseModel):
    """
    A single generated recipe.

    The id is assigned locally when the model response is parsed; the model
    never supplies it.
    """
    id: str = Field(..., description="Locally generated identifier, unique within a batch")
    title: str = Field(..., description="Recipe title")
    description: str = Field(default="", description="One or two sentence summary")
    difficulty: Difficulty = Field(..., description="Easy, Medium or Hard")
    prep_time_minutes: int = Field(default=0, ge=0, alias="prepTimeMinutes")
    calories: int = Field(default=0, ge=0)
    ingredients_available: List[Ingredient] = Field(default_factory=list, alias="ingredientsAvailable")
    ingredients_missing: List[Ingredient] = Field(default_factory=list, alias="ingredientsMissing")
    steps: List[RecipeStep] = Field(..., min_length=1)
    dietary_tags: List[str] = Field(default_factory=list, alias="dietaryTags")

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "recipe-3f2a9c",
                "title": "Tomato Egg Stir-Fry",
                "description": "Quick weeknight classic.",
                "difficulty": "Easy",
                "prepTimeMinutes": 15,
                "calories": 320,
                "ingredientsAvailable": [{"name": "eggs", "amount": "3"}],
                "ingredientsMissing": [{"name": "olive oil", "amount": "2 tbsp"}],
                "steps": [{"stepNumber": 1, "instruction": "Beat the eggs."}],
                "dietaryTags": ["Vegetarian"],
            }
        },
    )

    @field_validator("difficulty", mode="before")
    @classmethod
    def _normalize_difficulty(cls, value: Any) -> Any:
        # "easy" / "EASY" -> "Easy"
        if isinstance(value, str):
            return value.strip().capitalize()
        return value

    @field_validator("steps", mode="before")
    @classmethod
    def _fill_step_numbers(cls, value: Any) -> Any:
        """Default a missing stepNumber to the step's 1-based position."""
        if not isinstance(value, list):
            return value
        steps = []
        for position, step in enumerate(value, start=1):
            if isinstance(step, dict) and step.get("stepNumber") is None and step.get("step_number") is None:
                step = {**step, "stepNumber": position}
            steps.append(step)
        return steps

    @property
    def missing_count(self) -> int:
        return len(self.ingredients_missing)


class ShoppingItem(BaseModel):
    """An entry of the local shopping list."""
    id: str = Field(..., description="Locally generated identifier, unique within the list")
    name: str = Field(..., description="What to buy")
    amount: str = Field(default="", description="Optional quantity, may be empty")
    checked: bool = Field(default=False, description="Whether the item has been bought")

    model_config = ConfigDict(frozen=True)

    @property
    def label(self) -> str:
        """Display text, e.g. 'olive oil (2 tbsp)' or 'eggs'."""
        if self.amount:
            return f"{self.name} ({self.amount})"
        return self.name
