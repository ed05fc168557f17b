"""
Layout primitives for consistent page structure.

Provides the page header, the upload hero shown before any recipes exist, the
loading view and small HTML helpers.
"""

import html
from typing import Optional

import streamlit as st


def page_header(title: str, subtitle: Optional[str] = None) -> None:
    """
    Render a consistent section header with title and optional subtitle.

    Args:
        title: Main title
        subtitle: Optional subtitle/description text
    """
    st.markdown(f"## {title}")
    if subtitle:
        st.caption(subtitle)


def pill_tag(text: str) -> str:
    """
    Create HTML for a small rounded pill tag (e.g. a dietary tag).

    Args:
        text: Text to display in the tag

    Returns:
        HTML string for the pill tag
    """
    return f'<span class="pill-tag">{html.escape(text)}</span>'


def hero_section(title: str, subtitle: str) -> None:
    """
    Render the centered hero with title and subtitle.

    Args:
        title: Main hero title
        subtitle: Subtitle/description text
    """
    st.markdown(
        f'<div class="fc-hero"><div style="font-size:3rem">✨</div>'
        f"<h1>{html.escape(title)}</h1><p>{html.escape(subtitle)}</p></div>",
        unsafe_allow_html=True,
    )


def loading_view() -> None:
    """Headline shown while a photo is being analyzed (the spinner sits below it)."""
    st.markdown(
        '<div class="fc-hero"><h3>Analyzing your ingredients...</h3>'
        "<p>Creating custom recipes based on what we found.</p></div>",
        unsafe_allow_html=True,
    )
