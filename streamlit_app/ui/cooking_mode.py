"""
Full-screen cooking mode.

Replaces the whole page (sidebar hidden, grid not rendered) with a step viewer
for one recipe: top bar with close and read-aloud controls, a progress bar, the
current step, and previous / next-or-finish navigation. Close is available on
every step; "Finish Cooking" becomes the primary action only on the last step.
"""

import html

import streamlit as st

from fridgechef.cooking import CookingSession, next_step, previous_step, speech_finished, toggle_read_aloud
from streamlit_app.ui.speech import read_aloud
from streamlit_app.ui.styles import hide_sidebar
from streamlit_app.utils.state import exit_cooking_mode, set_cooking_session, update_cooking_session


def _render_top_bar(session: CookingSession) -> None:
    close_col, title_col, speak_col = st.columns([1, 6, 2])
    with close_col:
        st.button("✕", key="cooking_close", help="Close cooking mode", on_click=exit_cooking_mode)
    with title_col:
        st.markdown(f"**{html.escape(session.recipe.title)}**")
        st.caption(session.step_label)
    with speak_col:
        icon = "🔇" if session.is_speaking else "🔊"
        st.button(
            f"{icon} {session.read_aloud_label}",
            key="cooking_read_aloud",
            type="primary" if session.is_speaking else "secondary",
            use_container_width=True,
            on_click=update_cooking_session,
            args=(toggle_read_aloud,),
        )
    st.progress(session.progress)


def _render_step(session: CookingSession) -> None:
    st.markdown(
        f'<div style="text-align:center"><span class="fc-step-badge">Step {session.step.step_number}</span></div>'
        f'<div class="fc-step-text">{html.escape(session.step.instruction)}</div>',
        unsafe_allow_html=True,
    )


def _render_navigation(session: CookingSession) -> None:
    prev_col, dots_col, next_col = st.columns([2, 3, 2])
    with prev_col:
        st.button(
            "‹ Previous",
            key="cooking_previous",
            disabled=session.is_first,
            use_container_width=True,
            on_click=update_cooking_session,
            args=(previous_step,),
        )
    with dots_col:
        dots = "".join(
            '<span class="current">●</span>' if index == session.current_step else "●"
            for index in range(session.step_count)
        )
        st.markdown(f'<div class="fc-step-dots">{dots}</div>', unsafe_allow_html=True)
    with next_col:
        if session.is_last:
            st.button(
                f"✔ {session.primary_action}",
                key="cooking_finish",
                type="primary",
                use_container_width=True,
                on_click=exit_cooking_mode,
            )
        else:
            st.button(
                f"{session.primary_action} ›",
                key="cooking_next",
                type="primary",
                use_container_width=True,
                on_click=update_cooking_session,
                args=(next_step,),
            )


def _sync_read_aloud(session: CookingSession) -> None:
    """Play the current step if speaking, and go idle once the browser reports it ended."""
    ended = read_aloud(session.step.instruction, session.utterance_id if session.is_speaking else None)
    if ended is None:
        return

    finished = speech_finished(session, ended)
    if finished is not session:
        set_cooking_session(finished)
        st.rerun()


def render_cooking_mode(session: CookingSession) -> None:
    """
    Render cooking mode for the given session.

    Args:
        session: Current cooking session (recipe, step index, read-aloud flag)
    """
    hide_sidebar()
    _render_top_bar(session)
    _render_step(session)
    st.divider()
    _render_navigation(session)

    _sync_read_aloud(session)
