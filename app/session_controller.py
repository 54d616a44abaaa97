"""
Study session lifecycle helpers for Streamlit app.
"""

from __future__ import annotations

import logging

import streamlit as st

from app.state import get_library, persist_library
from core import library as lib
from core.review import Difficulty, build_study_queue


logger = logging.getLogger(__name__)


def start_study_session(mode: str) -> None:
    """
    Start a study session over the selected category.

    Args:
        mode: "due" for cards whose due time has passed, "all" for the whole deck
    """
    library = get_library()
    queue = build_study_queue(lib.get_deck(library), mode=mode)
    if not queue:
        st.info("No cards to study right now.")
        return

    st.session_state.study_queue = [card.id for card in queue]
    st.session_state.study_position = 0
    st.session_state.study_mode = mode
    st.session_state.session_count = 0
    st.session_state.session_ratings = {"easy": 0, "medium": 0, "hard": 0}

    load_next_card()


def load_next_card() -> None:
    """
    Load the next queued card, or finish the session.

    Cards deleted since the queue was built are skipped.
    """
    library = get_library()
    deck_ids = {card.id for card in lib.get_deck(library)}

    while st.session_state.study_position < len(st.session_state.study_queue):
        card_id = st.session_state.study_queue[st.session_state.study_position]
        if card_id in deck_ids:
            st.session_state.current_card_id = card_id
            st.session_state.show_answer = False
            return
        st.session_state.study_position += 1

    end_session()


def current_card():
    if st.session_state.current_card_id is None:
        return None
    try:
        return lib.find_card(get_library(), st.session_state.current_card_id)
    except ValueError:
        return None


def process_rating(difficulty: Difficulty) -> None:
    """
    Rate the current card, persist, and move to the next one.
    """
    card_id = st.session_state.current_card_id
    if card_id is not None:
        card, event_data = lib.record_rating(get_library(), card_id, difficulty)
        persist_library()
        logger.debug("Rated card %s %s, next due %s", card.id, difficulty.value, event_data["due"])

        st.session_state.session_count += 1
        st.session_state.session_ratings[difficulty.value] += 1
        st.session_state.study_position += 1

    load_next_card()
    st.rerun()


def end_session() -> None:
    """
    End the current session.
    """
    st.session_state.current_card_id = None
    st.session_state.study_queue = []
    st.session_state.study_position = 0
    st.session_state.show_answer = False
