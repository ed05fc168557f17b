"""
Shopping list operations.

The shopping list is a tuple of ShoppingItem kept in the UI state. Every
function here is pure: it takes the current list and returns a new one. All
operations are total; unknown ids are ignored rather than raising.

Items are created either from the sidebar form or from a recipe's missing
ingredients. They never flow back into a Recipe.
"""

import uuid
from typing import Iterable, Tuple

from .models import Ingredient, ShoppingItem

ShoppingList = Tuple[ShoppingItem, ...]


def new_item_id() -> str:
    return f"item-{uuid.uuid4().hex}"


def add_item(items: Iterable[ShoppingItem], name: str, amount: str = "") -> ShoppingList:
    """
    Append a new unchecked item.

    The name is trimmed; a blank name leaves the list unchanged (the sidebar
    form disables its submit button in that case).
    """
    items = tuple(items)
    name = (name or "").strip()
    if not name:
        return items
    return items + (ShoppingItem(id=new_item_id(), name=name, amount=amount or ""),)


def add_ingredient(items: Iterable[ShoppingItem], ingredient: Ingredient) -> ShoppingList:
    """Append a recipe's missing ingredient, keeping its name and amount verbatim."""
    return tuple(items) + (
        ShoppingItem(id=new_item_id(), name=ingredient.name, amount=ingredient.amount),
    )


def toggle_item(items: Iterable[ShoppingItem], item_id: str) -> ShoppingList:
    """Flip the checked flag of one item."""
    return tuple(
        item.model_copy(update={"checked": not item.checked}) if item.id == item_id else item
        for item in items
    )


def remove_item(items: Iterable[ShoppingItem], item_id: str) -> ShoppingList:
    return tuple(item for item in items if item.id != item_id)


def remaining_count(items: Iterable[ShoppingItem]) -> int:
    """Number of items not yet checked off."""
    return sum(1 for item in items if not item.checked)
