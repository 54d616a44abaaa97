"""
Library page: categories and deck management.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import end_session
from app.state import get_library, persist_library
from core import library as lib


def render_library_page() -> None:
    library = get_library()
    _render_categories(library)
    st.divider()
    _render_deck(library)


def _render_categories(library: lib.Library) -> None:
    st.subheader("Categories")
    category = lib.selected_category(library)

    col1, col2 = st.columns(2)
    with col1:
        with st.form("new_category_form", clear_on_submit=True):
            name = st.text_input("New category")
            if st.form_submit_button("Add Category"):
                try:
                    lib.add_category(library, name)
                except ValueError as exc:
                    st.error(str(exc))
                else:
                    end_session()
                    persist_library()
                    st.rerun()

    with col2:
        with st.form("rename_category_form"):
            new_name = st.text_input("Rename current", value=category.name)
            if st.form_submit_button("Rename"):
                try:
                    lib.rename_category(library, category.id, new_name)
                except ValueError as exc:
                    st.error(str(exc))
                else:
                    persist_library()
                    st.rerun()

    if st.button(f"Delete '{category.name}'", disabled=len(library.categories) <= 1):
        lib.delete_category(library, category.id)
        end_session()
        persist_library()
        st.rerun()


def _render_deck(library: lib.Library) -> None:
    deck = lib.get_deck(library)
    st.subheader(f"Cards ({len(deck)})")

    col1, col2, col3 = st.columns([3, 1, 1])
    with col1:
        query = st.text_input("Search", placeholder="Filter by question or answer",
                              label_visibility="collapsed")
    with col2:
        if st.button("Shuffle", use_container_width=True, disabled=not deck):
            lib.shuffle_deck(library)
            persist_library()
            st.rerun()
    with col3:
        if st.button("Clear", use_container_width=True, disabled=not deck):
            lib.clear_deck(library)
            end_session()
            persist_library()
            st.rerun()

    for card in lib.search_cards(deck, query):
        with st.expander(card.question):
            st.write(card.answer)
            st.caption(
                f"Due {card.due:%Y-%m-%d %H:%M} UTC · interval {card.stats.interval}d · "
                f"ease {card.stats.ease:.2f} · reps {card.stats.reps}"
            )
            with st.form(f"edit_{card.id}"):
                question = st.text_input("Question", value=card.question)
                answer = st.text_area("Answer", value=card.answer)
                save, delete = st.columns(2)
                saved = save.form_submit_button("Save")
                deleted = delete.form_submit_button("Delete")

            if saved:
                try:
                    lib.edit_card(library, card.id, question, answer)
                except ValueError as exc:
                    st.error(str(exc))
                else:
                    persist_library()
                    st.rerun()
            if deleted:
                lib.delete_card(library, card.id)
                persist_library()
                st.rerun()
