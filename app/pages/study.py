"""
Study page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import (
    current_card,
    end_session,
    process_rating,
    start_study_session,
)
from app.state import get_library
from app.ui import (
    render_answer,
    render_feedback_buttons,
    render_question,
    render_session_complete,
    render_session_stats,
)
from core import library as lib


def render_study_page() -> None:
    """
    Render the study flow (intro or active session).
    """
    library = get_library()
    if render_session_stats(library.streak):
        end_session()
        st.rerun()

    card = current_card()
    if card is None:
        _render_intro_screen(library)
    else:
        _render_active_session(card)


def _render_intro_screen(library: lib.Library) -> None:
    summary = lib.deck_summary(library)
    st.markdown(f"**{summary.category_name}**: {summary.total} cards, {summary.due} due")

    render_session_complete()

    if summary.total == 0:
        st.info("This category has no cards yet. Create some from your notes first.")
        return

    col1, col2 = st.columns(2)

    with col1:
        if st.button("Study Due Cards", type="primary", use_container_width=True,
                     disabled=summary.due == 0, help="Cards whose review time has come"):
            start_study_session("due")
            st.rerun()

    with col2:
        if st.button("Study All Cards", type="secondary", use_container_width=True,
                     help="Every card in this category, due or not"):
            start_study_session("all")
            st.rerun()


def _render_active_session(card) -> None:
    st.markdown("<br>", unsafe_allow_html=True)

    if not st.session_state.show_answer:
        render_question(card.question, corner_text=f"reps {card.stats.reps}")
        st.markdown("<br>", unsafe_allow_html=True)
        if st.button("Reveal Answer", use_container_width=True, type="primary"):
            st.session_state.show_answer = True
            st.rerun()
    else:
        render_answer(card.question, card.answer)
        st.markdown("<br>", unsafe_allow_html=True)

        feedback = render_feedback_buttons(key_suffix=str(st.session_state.study_position))
        if feedback is not None:
            process_rating(feedback)
