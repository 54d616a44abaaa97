"""
Notes to Flashcards - Main App

Paste notes, turn them into flashcards and review them with spaced repetition.

Run with:
    streamlit run app/streamlit_app.py
"""

import streamlit as st

from app.router import PAGES
from app.state import ensure_session_state, get_library, init_database
from app.ui import render_category_picker
from core import config


# ---- Page Setup ----

st.set_page_config(
    page_title="Notes to Flashcards",
    page_icon="🗂️",
    layout="centered"
)

config.configure_logging()
init_database()
ensure_session_state()


def render_test_mode_warning():
    """Show warning if in test mode."""
    if config.is_test_mode():
        st.warning("⚠️ **TEST MODE** - Using the test database (set TEST_MODE=false in .env for production)")


def main():
    """Main app entry point."""
    st.markdown("<style>.stApp h1 { font-size: 1.6rem; }</style>", unsafe_allow_html=True)
    st.title("🗂️ Notes to Flashcards")
    render_test_mode_warning()

    with st.sidebar:
        render_category_picker(get_library())

    tabs = st.tabs([page.title for page in PAGES])
    for tab, page in zip(tabs, PAGES):
        with tab:
            page.render()


if __name__ == "__main__":
    main()
