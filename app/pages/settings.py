"""
Settings page: generation provider and maintenance.
"""

from __future__ import annotations

import streamlit as st

from app.state import get_library, persist_library, reload_library
from app.session_controller import end_session
from core import config, storage
from core.generation import PROVIDERS


def render_settings_page() -> None:
    library = get_library()
    preferences = library.preferences

    st.subheader("AI Generation")
    providers = list(PROVIDERS)
    with st.form("settings_form"):
        provider = st.selectbox(
            "Provider",
            providers,
            index=providers.index(preferences.provider) if preferences.provider in providers else 0,
        )
        ollama_model = st.text_input("Ollama model", value=preferences.ollama_model)
        card_count = st.number_input("Cards per note", min_value=1, max_value=50, value=preferences.card_count)
        force_ai = st.checkbox("Always use AI, even for short notes", value=preferences.force_ai)
        if st.form_submit_button("Save Settings", type="primary"):
            preferences.provider = provider
            preferences.ollama_model = ollama_model.strip() or config.DEFAULT_OLLAMA_MODEL
            preferences.card_count = int(card_count)
            preferences.force_ai = force_ai
            persist_library()
            st.success("Settings saved.")

    env_name = config.PROVIDER_KEY_ENV.get(preferences.provider)
    if env_name is None:
        st.caption(f"Ollama runs locally at {config.get_ollama_base_url()}; no key needed.")
    elif config.get_api_key(preferences.provider):
        st.caption(f"{env_name} is set.")
    else:
        st.caption(f"{env_name} is not set; offline extraction will be used.")

    st.subheader("Maintenance")
    st.caption(f"Database: {config.get_database_url()}")
    confirm = st.checkbox("I understand this deletes every category, card and streak")
    if st.button("Reset All Data", disabled=not confirm):
        storage.reset_db()
        end_session()
        reload_library()
        st.rerun()
