"""
Feedback Button UI

Renders rating buttons for the current card.
"""

from typing import Optional

import streamlit as st
from core.review import Difficulty


RATING_CHOICES = {
    "😰 Hard": Difficulty.HARD,
    "👍 Medium": Difficulty.MEDIUM,
    "✨ Easy": Difficulty.EASY,
}


def render_feedback_buttons(key_suffix: str = "") -> Optional[Difficulty]:
    """
    Render rating buttons.

    Returns:
        Difficulty selected by user, or None if no button clicked
    """
    st.markdown("**How well did you know the answer?**")

    st.markdown(
        """
        <style>
        .stRadio div[role="radiogroup"] {
            display: grid;
            grid-template-columns: repeat(3, 1fr);
            gap: 0.5rem;
        }
        .stRadio label {
            border: 1px solid #ddd;
            border-radius: 10px;
            padding: 0.55rem 0.6rem;
            text-align: center;
            background: #f9fafb;
        }
        .stRadio label:hover {
            border-color: #bbb;
            background: #f3f4f6;
        }
        .stRadio label div {
            justify-content: center;
            font-weight: 600;
            color: #111;
        }
        .stRadio input {
            display: none;
        }
        </style>
        """,
        unsafe_allow_html=True
    )

    choice = st.radio(
        "Rating",
        list(RATING_CHOICES),
        index=None,
        key=f"rating_choice_{key_suffix}" if key_suffix else "rating_choice",
        label_visibility="collapsed"
    )

    if choice is None:
        return None
    return RATING_CHOICES[choice]
