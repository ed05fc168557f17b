"""
UI State Management Module.

This module wraps Streamlit's session_state around the pure state container in
fridgechef.state. The current AppState lives under one session key; pages never
mutate it directly but call dispatch() with a transition function:

    dispatch(toggle_filter, DietaryFilter.VEGAN)

Next to the AppState this module keeps three pieces of UI plumbing:
- the cooking session (current step and read-aloud flag) while cooking mode is open
- the pending upload, i.e. the encoded photo waiting for the loading view to send it
- an uploader nonce, bumped per analysis so the upload widgets reset

# NOTE: session_state only lives for the current browser session. Refreshing
    the page starts over with an empty shopping list.
"""

from typing import Any, Callable, Optional

import streamlit as st

from fridgechef.cooking import CookingSession, start_cooking
from fridgechef.ingestion import EncodedImage
from fridgechef.state import AppState, close_recipe, open_recipe

# Session state keys
APP_STATE_KEY = "app_state"
COOKING_KEY = "cooking_session"
PENDING_IMAGE_KEY = "pending_image"
UPLOAD_NONCE_KEY = "upload_nonce"
SPEECH_RESET_KEY = "speech_reset_pending"


def init_state() -> None:
    """
    Ensure the app state exists in session state.

    Call this at the top of the page before reading any state.
    """
    if APP_STATE_KEY not in st.session_state:
        st.session_state[APP_STATE_KEY] = AppState()
    if UPLOAD_NONCE_KEY not in st.session_state:
        st.session_state[UPLOAD_NONCE_KEY] = 0


def get_app_state() -> AppState:
    """Get the current AppState, initializing it on first access."""
    init_state()
    return st.session_state[APP_STATE_KEY]


def dispatch(transition: Callable[..., AppState], *args: Any) -> AppState:
    """
    Apply a transition to the current state and store the result.

    Args:
        transition: Pure function (state, *args) -> AppState from fridgechef.state
        *args: Extra arguments for the transition

    Returns:
        The new AppState
    """
    new_state = transition(get_app_state(), *args)
    st.session_state[APP_STATE_KEY] = new_state
    return new_state


# --- Cooking mode -----------------------------------------------------------

def get_cooking_session() -> Optional[CookingSession]:
    """
    Get the cooking session for the active recipe.

    Starts a fresh session at step 0 if a recipe is active but no session (or a
    session for a different recipe) is stored.
    """
    active = get_app_state().active_recipe
    if active is None:
        return None

    session = st.session_state.get(COOKING_KEY)
    if not isinstance(session, CookingSession) or session.recipe.id != active.id:
        session = start_cooking(active)
        st.session_state[COOKING_KEY] = session
    return session


def set_cooking_session(session: CookingSession) -> None:
    st.session_state[COOKING_KEY] = session


def update_cooking_session(transition: Callable[[CookingSession], CookingSession]) -> None:
    session = get_cooking_session()
    if session is not None:
        st.session_state[COOKING_KEY] = transition(session)


def enter_cooking_mode(recipe) -> None:
    dispatch(open_recipe, recipe)
    st.session_state[COOKING_KEY] = start_cooking(recipe)


def exit_cooking_mode() -> None:
    """Close cooking mode (finish or explicit close)."""
    dispatch(close_recipe)
    st.session_state.pop(COOKING_KEY, None)
    st.session_state[SPEECH_RESET_KEY] = True


def pop_speech_reset() -> bool:
    """True once after cooking mode was left, so the page can silence read-aloud."""
    return bool(st.session_state.pop(SPEECH_RESET_KEY, False))


# --- Upload plumbing --------------------------------------------------------

def set_pending_image(image: EncodedImage) -> None:
    st.session_state[PENDING_IMAGE_KEY] = image


def pop_pending_image() -> Optional[EncodedImage]:
    return st.session_state.pop(PENDING_IMAGE_KEY, None)


def get_upload_nonce() -> int:
    init_state()
    return st.session_state[UPLOAD_NONCE_KEY]


def bump_upload_nonce() -> None:
    """Give the upload widgets new keys so they drop the processed file."""
    st.session_state[UPLOAD_NONCE_KEY] = get_upload_nonce() + 1
