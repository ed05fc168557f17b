"""
UI Styling and Components Module.

This module provides global CSS styling and the reusable components of the
FridgeChef Streamlit app: sidebar, recipe cards, cooking mode and feedback.
"""

from streamlit_app.ui.styles import load_global_styles, hide_sidebar
from streamlit_app.ui.layout import page_header, pill_tag

__all__ = [
    "load_global_styles",
    "hide_sidebar",
    "page_header",
    "pill_tag",
]
