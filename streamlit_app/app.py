"""
FridgeChef - Streamlit Frontend Main Entry Point.

Upload (or snap) a photo of your fridge or pantry, get recipe suggestions from
the backend, add missing ingredients to a shopping list, and cook step by step
in a full-screen cooking mode.

The page is a projection of one AppState (see fridgechef.state). Which view is
shown is decided by view_mode():
- cooking: full-screen step viewer, nothing else rendered
- loading: sends the pending photo to the backend, then reruns
- results: recipe grid with an "Analyze Another Photo" uploader
- upload: hero with the upload affordances, plus the error banner if any

Run with:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Add project root to path so `api`, `fridgechef` and `streamlit_app` import
# regardless of how the app is run
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import logging

import streamlit as st

from fridgechef.errors import ImageReadError
from fridgechef.generation import failure_from_error
from fridgechef.ingestion import read_image
from fridgechef.state import (
    VIEW_COOKING,
    VIEW_LOADING,
    VIEW_RESULTS,
    active_filter_summary,
    dismiss_error,
    finish_generation,
    start_generation,
    view_mode,
)
from streamlit_app.ui.cooking_mode import render_cooking_mode
from streamlit_app.ui.feedback import show_error, working_spinner
from streamlit_app.ui.layout import hero_section, loading_view, page_header
from streamlit_app.ui.recipe_card import render_recipe_grid
from streamlit_app.ui.sidebar import render_sidebar
from streamlit_app.ui.speech import cancel_speech
from streamlit_app.ui.styles import load_global_styles
from streamlit_app.utils.api_client import analyze_fridge_photo, get_health_status
from streamlit_app.utils.state import (
    bump_upload_nonce,
    dispatch,
    get_app_state,
    get_cooking_session,
    get_upload_nonce,
    pop_pending_image,
    pop_speech_reset,
    set_pending_image,
)

logger = logging.getLogger(__name__)

IMAGE_TYPES = ["png", "jpg", "jpeg", "webp", "gif", "bmp", "heic", "heif"]

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="FridgeChef",
    page_icon="🥦",
    layout="wide",
    initial_sidebar_state="expanded",
)

load_global_styles()


def handle_upload(uploaded) -> None:
    """
    Start an analysis for a newly selected photo.

    Clears error and recipes and enters loading; the loading view sends the
    photo on the next run. A photo that cannot be read settles the request
    immediately as a failure.
    """
    if uploaded is None:
        return

    dispatch(start_generation)
    try:
        set_pending_image(read_image(uploaded))
    except ImageReadError as e:
        logger.error("Could not read uploaded photo: %s", e)
        dispatch(finish_generation, failure_from_error(e))

    bump_upload_nonce()
    st.rerun()


def render_upload_affordances(nonce: int) -> None:
    upload_col, camera_col = st.columns(2, gap="large")
    with upload_col:
        uploaded = st.file_uploader("📤 Upload Photo", type=IMAGE_TYPES, key=f"upload_{nonce}")
    with camera_col:
        with st.expander("📷 Take Photo", expanded=False):
            captured = st.camera_input("Take Photo", key=f"camera_{nonce}", label_visibility="collapsed")
    handle_upload(uploaded or captured)


def render_upload_view() -> None:
    state = get_app_state()
    hero_section(
        "What's in your fridge?",
        "Upload a photo of your open fridge or pantry. Our AI will identify ingredients "
        "and suggest delicious recipes tailored to your diet.",
    )
    render_upload_affordances(get_upload_nonce())

    summary = active_filter_summary(state)
    if summary:
        st.caption(f"🥗 {summary}")


def render_error_banner() -> None:
    state = get_app_state()
    if state.error and show_error(state.error, retry_key="dismiss_error"):
        dispatch(dismiss_error)
        st.rerun()


def run_pending_generation() -> None:
    """Send the pending photo to the backend and settle the request."""
    state = get_app_state()
    loading_view()

    with working_spinner("Analyzing your ingredients..."):
        image = pop_pending_image()
        if image is None:
            logger.warning("Loading without a pending photo; returning to the upload view")
            dispatch(finish_generation, failure_from_error(ImageReadError("No photo to analyze")))
        else:
            dispatch(finish_generation, analyze_fridge_photo(image, state.active_filters))

    st.rerun()


def render_results_view() -> None:
    state = get_app_state()
    title_col, another_col = st.columns([3, 2])
    with title_col:
        page_header("Suggested Recipes", subtitle=active_filter_summary(state) or None)
    with another_col:
        with st.expander("📷 Analyze Another Photo", expanded=False):
            uploaded = st.file_uploader(
                "Analyze Another Photo",
                type=IMAGE_TYPES,
                key=f"upload_again_{get_upload_nonce()}",
                label_visibility="collapsed",
            )
    handle_upload(uploaded)

    render_recipe_grid(state.recipes)


def render_system_status() -> None:
    with st.sidebar:
        st.divider()
        with st.expander("System status", expanded=False):
            backend_status = get_health_status()
            if backend_status:
                raw = backend_status.get("raw", {})
                st.success("🟢 Backend online")
                st.caption(f"Model: {raw.get('model', 'unknown')}")
                if not raw.get("api_key_configured", False):
                    st.warning("GEMINI_API_KEY is not set on the backend.")
            else:
                st.error("🔴 Backend offline / unreachable")


app_state = get_app_state()
mode = view_mode(app_state)

if mode == VIEW_COOKING:
    render_cooking_mode(get_cooking_session())
    st.stop()

if pop_speech_reset():
    cancel_speech()

render_sidebar(app_state)
render_system_status()

if mode == VIEW_LOADING:
    run_pending_generation()
elif mode == VIEW_RESULTS:
    render_results_view()
else:
    render_upload_view()
    render_error_banner()
