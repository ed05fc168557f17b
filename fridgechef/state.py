"""
UI state container for FridgeChef.

The whole UI is driven by one immutable AppState value and a fixed set of pure
transition functions. The Streamlit layer stores the current AppState in
st.session_state and replaces it with whatever a transition returns;
rendering is a projection of the state.

State slices:
- recipes: the last generated batch, replaced wholesale
- is_loading: True strictly between request dispatch and settlement
- error: generic user-facing message after a failed generation
- active_recipe: recipe shown in full-screen cooking mode, or None
- shopping_list / active_filters: survive across generation cycles

# NOTE: Two generations settling out of order is last-write-wins:
    finish_generation always replaces the batch.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from . import shopping
from .generation import GENERIC_ERROR_MESSAGE, GenerationResult
from .models import DietaryFilter, Ingredient, Recipe, ShoppingItem

logger = logging.getLogger(__name__)

VIEW_COOKING = "cooking"
VIEW_LOADING = "loading"
VIEW_RESULTS = "results"
VIEW_UPLOAD = "upload"


@dataclass(frozen=True)
class AppState:
    """Snapshot of everything the UI renders."""
    recipes: Tuple[Recipe, ...] = ()
    is_loading: bool = False
    error: Optional[str] = None
    active_recipe: Optional[Recipe] = None
    shopping_list: Tuple[ShoppingItem, ...] = ()
    active_filters: Tuple[DietaryFilter, ...] = ()


# --- Generation -------------------------------------------------------------

def start_generation(state: AppState) -> AppState:
    """A new photo was selected: clear error and recipes, enter loading."""
    return replace(state, error=None, recipes=(), is_loading=True)


def finish_generation(state: AppState, result: GenerationResult) -> AppState:
    """
    Settle a generation request.

    On success the batch replaces the recipes; on failure the generic error
    message is set and the recipes stay empty. Loading always ends. Filters
    and the shopping list are left untouched.
    """
    if result.ok:
        return replace(state, recipes=tuple(result.recipes), error=None, is_loading=False)

    logger.error("Recipe generation failed (%s): %s", result.failure.value, result.detail)
    return replace(state, recipes=(), error=GENERIC_ERROR_MESSAGE, is_loading=False)


def dismiss_error(state: AppState) -> AppState:
    return replace(state, error=None)


# --- Filters ----------------------------------------------------------------

def toggle_filter(state: AppState, dietary_filter: DietaryFilter) -> AppState:
    """
    Turn a dietary filter on or off.

    Newly enabled filters go to the end so the prompt lists them in selection
    order. Recipes already on screen are not re-filtered.
    """
    dietary_filter = DietaryFilter(dietary_filter)
    if dietary_filter in state.active_filters:
        filters = tuple(f for f in state.active_filters if f != dietary_filter)
    else:
        filters = state.active_filters + (dietary_filter,)
    return replace(state, active_filters=filters)


def active_filter_summary(state: AppState) -> str:
    """'Active Filters: Vegan, Keto', or '' when no filter is on."""
    if not state.active_filters:
        return ""
    return "Active Filters: " + ", ".join(f.value for f in state.active_filters)


# --- Cooking mode -----------------------------------------------------------

def open_recipe(state: AppState, recipe: Recipe) -> AppState:
    return replace(state, active_recipe=recipe)


def close_recipe(state: AppState) -> AppState:
    """Leave cooking mode; the recipe stays in the grid."""
    return replace(state, active_recipe=None)


# --- Shopping list ----------------------------------------------------------

def add_shopping_item(state: AppState, name: str, amount: str = "") -> AppState:
    return replace(state, shopping_list=shopping.add_item(state.shopping_list, name, amount))


def add_missing_ingredient(state: AppState, ingredient: Ingredient) -> AppState:
    return replace(state, shopping_list=shopping.add_ingredient(state.shopping_list, ingredient))


def toggle_shopping_item(state: AppState, item_id: str) -> AppState:
    return replace(state, shopping_list=shopping.toggle_item(state.shopping_list, item_id))


def remove_shopping_item(state: AppState, item_id: str) -> AppState:
    return replace(state, shopping_list=shopping.remove_item(state.shopping_list, item_id))


# --- Projection -------------------------------------------------------------

def view_mode(state: AppState) -> str:
    """
    Decide which main view to render.

    Returns:
        "cooking" while a recipe is active (full-screen takeover), otherwise
        "loading", "results" (non-empty batch) or "upload". The error banner is
        rendered on top of the upload view.
    """
    if state.active_recipe is not None:
        return VIEW_COOKING
    if state.is_loading:
        return VIEW_LOADING
    if state.recipes:
        return VIEW_RESULTS
    return VIEW_UPLOAD
