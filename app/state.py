"""
Streamlit session state and database initialization helpers.
"""

from __future__ import annotations

import streamlit as st

from core import storage
from core.library import Library


def init_database() -> None:
    """
    Initialize database schema (cached per Streamlit session).
    """
    @st.cache_resource
    def _init_database() -> None:
        storage.init_db()

    _init_database()


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "library" not in st.session_state:
        st.session_state.library = storage.load_library()
    if "study_queue" not in st.session_state:
        st.session_state.study_queue = []
    if "study_position" not in st.session_state:
        st.session_state.study_position = 0
    if "study_mode" not in st.session_state:
        st.session_state.study_mode = "due"
    if "current_card_id" not in st.session_state:
        st.session_state.current_card_id = None
    if "show_answer" not in st.session_state:
        st.session_state.show_answer = False
    if "session_count" not in st.session_state:
        st.session_state.session_count = 0
    if "session_ratings" not in st.session_state:
        st.session_state.session_ratings = {"easy": 0, "medium": 0, "hard": 0}
    if "generation_preview" not in st.session_state:
        st.session_state.generation_preview = None


def get_library() -> Library:
    return st.session_state.library


def persist_library() -> None:
    """Write the in-memory library back to the store."""
    storage.save_library(st.session_state.library)


def reload_library() -> None:
    st.session_state.library = storage.load_library()
