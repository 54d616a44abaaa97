"""
Category picker for the sidebar.
"""

from __future__ import annotations

import streamlit as st

from app.state import persist_library
from app.session_controller import end_session
from core import library as lib


def render_category_picker(library: lib.Library) -> None:
    """
    Select the active category; switching ends any running session.
    """
    st.markdown("### Category")

    ids = [category.id for category in library.categories]
    names = {category.id: category.name for category in library.categories}
    selected = st.selectbox(
        "Category",
        ids,
        index=ids.index(library.selected_category_id),
        format_func=lambda category_id: names[category_id],
        label_visibility="collapsed",
    )
    if selected != library.selected_category_id:
        lib.select_category(library, selected)
        end_session()
        persist_library()
        st.rerun()

    st.caption(str(lib.deck_summary(library)))
