"""
Sidebar: branding, dietary filter toggles and the shopping list.

Filter toggles and shopping list edits go straight through dispatch(); they
never touch the generation pipeline. Filters only affect the next analysis.
"""

import streamlit as st

from fridgechef.models import DIETARY_OPTIONS
from fridgechef.shopping import remaining_count
from fridgechef.state import (
    AppState,
    add_shopping_item,
    remove_shopping_item,
    toggle_filter,
    toggle_shopping_item,
)
from streamlit_app.ui.feedback import show_empty_state
from streamlit_app.utils.state import dispatch

NEW_ITEM_KEY = "shopping_new_item"


def _render_filters(state: AppState) -> None:
    st.markdown("##### 🔎 Dietary Filters")
    cols = st.columns(2)
    for index, option in enumerate(DIETARY_OPTIONS):
        active = option in state.active_filters
        with cols[index % 2]:
            st.button(
                option.value,
                key=f"filter_{option.name}",
                type="primary" if active else "secondary",
                use_container_width=True,
                on_click=dispatch,
                args=(toggle_filter, option),
            )


def _submit_new_item() -> None:
    """Form callback: add the typed item and clear the input before the rerun draws the list."""
    dispatch(add_shopping_item, st.session_state.get(NEW_ITEM_KEY, ""))
    st.session_state[NEW_ITEM_KEY] = ""


def _render_add_item_form() -> None:
    with st.form("add_shopping_item", border=False):
        name_col, button_col = st.columns([4, 1])
        with name_col:
            st.text_input(
                "Add item",
                key=NEW_ITEM_KEY,
                placeholder="Add item...",
                label_visibility="collapsed",
            )
        with button_col:
            st.form_submit_button("➕", on_click=_submit_new_item)


def _render_shopping_list(state: AppState) -> None:
    header = "##### 🛒 Shopping List"
    if state.shopping_list:
        header += f" ({remaining_count(state.shopping_list)} left)"
    st.markdown(header)

    _render_add_item_form()

    if not state.shopping_list:
        show_empty_state("List is empty. Add missing ingredients from recipes!")
        return

    for item in state.shopping_list:
        check_col, remove_col = st.columns([5, 1])
        with check_col:
            st.checkbox(
                item.label,
                value=item.checked,
                key=f"shopping_check_{item.id}",
                on_change=dispatch,
                args=(toggle_shopping_item, item.id),
            )
        with remove_col:
            st.button(
                "🗑",
                key=f"shopping_remove_{item.id}",
                help="Remove from list",
                on_click=dispatch,
                args=(remove_shopping_item, item.id),
            )


def render_sidebar(state: AppState) -> None:
    """
    Render the full sidebar.

    Args:
        state: Current AppState (read-only; edits go through dispatch)
    """
    with st.sidebar:
        st.markdown('<div class="fc-brand">🥦 FridgeChef</div>', unsafe_allow_html=True)
        st.markdown('<div class="fc-brand-caption">Your AI Culinary Assistant</div>', unsafe_allow_html=True)

        st.divider()
        _render_filters(state)

        st.divider()
        _render_shopping_list(state)
