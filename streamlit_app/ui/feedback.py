"""
Standardized feedback utilities for error, empty and loading states.

Provides reusable components for displaying the generation error banner,
empty states and the loading indicator in a consistent manner.
"""

from contextlib import contextmanager
from typing import Optional

import streamlit as st


def show_error(message: str, retry_key: Optional[str] = None) -> bool:
    """
    Display a standardized error message with an optional retry button.

    Args:
        message: Main error message to display
        retry_key: If given, render a "Try Again" button with this widget key

    Returns:
        True if the retry button was clicked on this run
    """
    st.error(f"⚠️ {message}")
    if retry_key is not None:
        return st.button("Try Again", key=retry_key)
    return False


def show_empty_state(title: str) -> None:
    """Display a standardized empty state caption."""
    st.caption(f"📭 {title}")


@contextmanager
def working_spinner(label: str = "Working…"):
    """
    Context manager wrapper for standardized loading spinners.

    Usage:
        with working_spinner("Analyzing your ingredients..."):
            result = analyze_fridge_photo(image, filters)

    Args:
        label: Spinner label text (default: "Working…")
    """
    with st.spinner(label):
        yield
