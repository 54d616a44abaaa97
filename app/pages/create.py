"""
Create page: notes to cards, and manual entry.
"""

from __future__ import annotations

from functools import partial

import streamlit as st

from app.state import get_library, persist_library
from core import config
from core import library as lib
from core.generation import complete_prompt, generate_flashcards


def render_create_page() -> None:
    library = get_library()
    category = lib.selected_category(library)

    st.subheader(f"Add cards to {category.name}")
    _render_notes_form(library)
    _render_preview(library)

    st.divider()
    _render_manual_form(library)


def _render_notes_form(library: lib.Library) -> None:
    preferences = library.preferences
    with st.form("notes_form", clear_on_submit=False):
        notes = st.text_area("Notes", height=220, placeholder="Paste your notes here...")
        force_ai = st.checkbox("Always use AI", value=preferences.force_ai)
        submitted = st.form_submit_button("Generate Flashcards", type="primary")

    if not submitted:
        return
    if not notes.strip():
        st.warning("Please paste some notes first.")
        return

    complete = complete_prompt
    if preferences.provider == "ollama":
        complete = partial(complete_prompt, model=preferences.ollama_model)

    with st.spinner("Generating flashcards..."):
        outcome = generate_flashcards(
            notes,
            provider=preferences.provider,
            api_key=config.get_api_key(preferences.provider),
            force_ai=force_ai,
            count=preferences.card_count,
            complete=complete,
        )
    st.session_state.generation_preview = outcome


def _render_preview(library: lib.Library) -> None:
    outcome = st.session_state.generation_preview
    if outcome is None:
        return

    if outcome.fallback_reason:
        st.warning(f"AI generation unavailable ({outcome.fallback_reason}); using offline extraction.")

    if outcome.card_count == 0:
        st.error("No flashcards found. Try a 'Term - definition' or 'Q: / A:' format.")
        st.session_state.generation_preview = None
        return

    source = "AI" if outcome.source == "remote" else "offline extraction"
    st.markdown(f"**{outcome.card_count} cards** from {source}")

    for draft in outcome.cards:
        st.markdown(f"- **{draft.question}**: {draft.answer}")
    for name, drafts in outcome.categories.items():
        st.markdown(f"**{name}**")
        for draft in drafts:
            st.markdown(f"- **{draft.question}**: {draft.answer}")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Add Cards", type="primary", use_container_width=True):
            added = lib.merge_generated(library, outcome)
            persist_library()
            st.session_state.generation_preview = None
            st.success(f"Added {added} cards.")
            st.rerun()
    with col2:
        if st.button("Discard", use_container_width=True):
            st.session_state.generation_preview = None
            st.rerun()


def _render_manual_form(library: lib.Library) -> None:
    st.markdown("### Add a single card")
    with st.form("manual_card_form", clear_on_submit=True):
        question = st.text_input("Question")
        answer = st.text_area("Answer", height=100)
        submitted = st.form_submit_button("Add Card")

    if submitted:
        try:
            lib.add_card(library, question, answer)
        except ValueError as exc:
            st.error(str(exc))
            return
        persist_library()
        st.success("Card added.")
