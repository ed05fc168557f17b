"""
Global CSS Styling for FridgeChef.

This module provides load_global_styles() to inject consistent styling, plus
hide_sidebar() which cooking mode uses to take over the whole screen.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the FridgeChef app.

    This function:
    - Imports Google Fonts (Nunito) for friendly typography
    - Styles buttons as rounded pills
    - Defines the recipe card, difficulty badge, missing-ingredient box and
      cooking mode classes used by the components
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700;800&display=swap');

        html, body, [class*="css"] {
            font-family: 'Nunito', 'sans serif' !important;
        }

        h1, h2, h3, h4, h5, h6 {
            font-weight: 700 !important;
            letter-spacing: 0.01em !important;
        }

        .main .block-container {
            max-width: 1200px !important;
            padding-top: 1.5rem !important;
            padding-bottom: 2.5rem !important;
        }

        /* Buttons - rounded pills */
        .stButton > button {
            border-radius: 12px !important;
            font-weight: 600 !important;
            transition: all 0.3s ease !important;
        }

        .stButton > button:hover {
            transform: translateY(-1px) !important;
        }

        /* Brand */
        .fc-brand {
            font-size: 1.6rem;
            font-weight: 800;
            color: #059669;
        }

        .fc-brand-caption {
            color: #64748b;
            font-size: 0.85rem;
        }

        /* Hero */
        .fc-hero {
            text-align: center;
            padding: 3rem 0 1rem 0;
        }

        .fc-hero h1 {
            font-size: 3rem !important;
            color: #1e293b;
        }

        .fc-hero p {
            color: #64748b;
            font-size: 1.1rem;
            max-width: 36rem;
            margin: 0 auto;
        }

        /* Recipe card header */
        .fc-card-header {
            background: linear-gradient(135deg, #ecfdf5 0%, #ccfbf1 100%);
            border-radius: 12px;
            padding: 1rem;
            min-height: 7rem;
            display: flex;
            flex-direction: column;
            justify-content: flex-end;
        }

        .fc-card-title {
            font-size: 1.2rem;
            font-weight: 700;
            color: #1e293b;
            line-height: 1.3;
        }

        .fc-meta {
            color: #64748b;
            font-size: 0.8rem;
            font-weight: 600;
        }

        /* Difficulty badges */
        .fc-difficulty {
            display: inline-block;
            padding: 0.1rem 0.5rem;
            border-radius: 999px;
            font-size: 0.75rem;
            font-weight: 700;
        }

        .fc-difficulty--easy { background: #dcfce7; color: #15803d; }
        .fc-difficulty--medium { background: #fef9c3; color: #a16207; }
        .fc-difficulty--hard { background: #fee2e2; color: #b91c1c; }

        /* Missing ingredients box */
        .fc-missing-title {
            color: #9a3412;
            font-size: 0.8rem;
            font-weight: 700;
        }

        /* Pill tags */
        .pill-tag {
            display: inline-block;
            padding: 0.2rem 0.6rem;
            border-radius: 6px;
            background: rgba(255, 255, 255, 0.9);
            color: #047857;
            font-size: 0.7rem;
            font-weight: 700;
            margin: 0 0.2rem 0.2rem 0;
        }

        /* Cooking mode */
        .fc-step-badge {
            display: inline-block;
            padding: 0.25rem 1rem;
            border-radius: 999px;
            border: 1px solid #e2e8f0;
            color: #059669;
            font-weight: 700;
            font-size: 0.8rem;
            text-transform: uppercase;
            letter-spacing: 0.1em;
        }

        .fc-step-text {
            font-size: 2rem;
            font-weight: 500;
            color: #1e293b;
            line-height: 1.4;
            text-align: center;
            padding: 2rem 0;
        }

        .fc-step-dots {
            text-align: center;
            letter-spacing: 0.3rem;
            color: #cbd5e1;
        }

        .fc-step-dots .current {
            color: #10b981;
        }

        .fc-shopping-checked {
            color: #94a3b8;
            text-decoration: line-through;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)


def hide_sidebar() -> None:
    """Hide the sidebar and its toggle so a view can use the whole screen."""
    st.markdown(
        """
        <style>
            [data-testid="stSidebar"], [data-testid="collapsedControl"] {
                display: none !important;
            }
        </style>
        """,
        unsafe_allow_html=True,
    )
