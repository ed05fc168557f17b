"""
Recipe card and recipe grid components.

Each card shows the title with up to two dietary tags, prep time, calories and
difficulty, the description, the first three missing ingredients (each with an
add-to-shopping-list button) and a "Start Cooking" button.
"""

import html
from typing import Sequence

import streamlit as st

from fridgechef.models import Recipe
from fridgechef.state import add_missing_ingredient
from streamlit_app.ui.layout import pill_tag
from streamlit_app.utils.state import dispatch, enter_cooking_mode

MAX_TAGS_SHOWN = 2
MAX_MISSING_SHOWN = 3
GRID_COLUMNS = 3


def _card_header(recipe: Recipe) -> str:
    tags = "".join(pill_tag(tag) for tag in recipe.dietary_tags[:MAX_TAGS_SHOWN])
    return (
        f'<div class="fc-card-header"><div>{tags}</div>'
        f'<div class="fc-card-title">{html.escape(recipe.title)}</div></div>'
    )


def _meta_line(recipe: Recipe) -> str:
    difficulty = recipe.difficulty.value
    return (
        f'<div class="fc-meta">⏱ {recipe.prep_time_minutes}m &nbsp; '
        f"🔥 {recipe.calories} kcal &nbsp; "
        f'<span class="fc-difficulty fc-difficulty--{difficulty.lower()}">👨‍🍳 {difficulty}</span></div>'
    )


def _render_missing_ingredients(recipe: Recipe) -> None:
    if not recipe.missing_count:
        return

    st.markdown(
        f'<div class="fc-missing-title">Missing Ingredients ({recipe.missing_count})</div>',
        unsafe_allow_html=True,
    )
    for index, ingredient in enumerate(recipe.ingredients_missing[:MAX_MISSING_SHOWN]):
        name_col, add_col = st.columns([5, 1])
        with name_col:
            st.caption(ingredient.name)
        with add_col:
            st.button(
                "➕",
                key=f"add_missing_{recipe.id}_{index}",
                help="Add to shopping list",
                on_click=dispatch,
                args=(add_missing_ingredient, ingredient),
            )
    if recipe.missing_count > MAX_MISSING_SHOWN:
        st.caption(f"+{recipe.missing_count - MAX_MISSING_SHOWN} more...")


def render_recipe_card(recipe: Recipe) -> None:
    """
    Render one recipe card.

    Args:
        recipe: Recipe to display
    """
    with st.container(border=True):
        st.markdown(_card_header(recipe), unsafe_allow_html=True)
        st.markdown(_meta_line(recipe), unsafe_allow_html=True)
        st.write(recipe.description)
        _render_missing_ingredients(recipe)
        st.button(
            "Start Cooking",
            key=f"start_cooking_{recipe.id}",
            type="primary",
            use_container_width=True,
            on_click=enter_cooking_mode,
            args=(recipe,),
        )


def render_recipe_grid(recipes: Sequence[Recipe]) -> None:
    """Lay recipes out in rows of GRID_COLUMNS cards."""
    for start in range(0, len(recipes), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS, gap="medium")
        for col, recipe in zip(cols, recipes[start:start + GRID_COLUMNS]):
            with col:
                render_recipe_card(recipe)
