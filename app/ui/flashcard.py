"""
Flashcard UI Component

Renders one side of a card. Card text comes from user notes, so it is
HTML-escaped before rendering.
"""

from __future__ import annotations

import html

import streamlit as st
from app.ui.flashcard_style import (
    ANSWER_STYLE,
    CARD_MIN_HEIGHT,
    CARD_PADDING,
    CORNER_FONT_SIZE,
    NOTE_COLOR,
    QUESTION_STYLE,
    TEXT_COLOR,
    CardSideStyle,
)


def render_flashcard(
    main_text: str,
    subtitle: str = "",
    corner_text: str = "",
    style: CardSideStyle = QUESTION_STYLE,
) -> None:
    """
    Render a flashcard side.

    Args:
        main_text: Primary text (center, large)
        subtitle: Optional secondary text (below main, smaller)
        corner_text: Optional text in top-right corner
        style: QUESTION_STYLE or ANSWER_STYLE
    """
    corner_html = ""
    if corner_text:
        corner_html = (
            f'<div style="position: absolute; top: 15px; right: 20px; '
            f'font-size: {CORNER_FONT_SIZE}; color: {NOTE_COLOR}; '
            f'font-style: italic;">{html.escape(corner_text)}</div>'
        )

    main_html = (
        f'<h1 style="font-size: {style.text_size}; color: {TEXT_COLOR}; '
        'font-weight: normal; margin: 0; white-space: normal; '
        'text-align: center; line-height: 1.4; max-width: 100%; '
        'overflow-wrap: anywhere; word-break: break-word;">'
        f"{html.escape(main_text)}</h1>"
    )

    subtitle_html = ""
    if subtitle:
        subtitle_html = (
            f'<p style="font-size: {style.note_size}; color: {NOTE_COLOR}; '
            f'font-style: {style.note_style}; margin: 15px 0 0 0; text-align: center; '
            'line-height: 1.4; max-width: 100%; overflow-wrap: anywhere; '
            f'word-break: break-word;">{html.escape(subtitle)}</p>'
        )

    card_html = (
        f'<div style="background-color: {style.background}; padding: {CARD_PADDING}; '
        'border-radius: 15px; text-align: center; box-shadow: 0 4px 6px '
        f'rgba(0, 0, 0, 0.1); min-height: {CARD_MIN_HEIGHT}; display: flex; '
        'flex-direction: column; align-items: center; justify-content: center; '
        f'position: relative;">{corner_html}{main_html}{subtitle_html}</div>'
    )

    st.markdown(card_html, unsafe_allow_html=True)


def render_question(question: str, corner_text: str = "") -> None:
    render_flashcard(question, corner_text=corner_text, style=QUESTION_STYLE)


def render_answer(question: str, answer: str) -> None:
    render_flashcard(answer, subtitle=question, style=ANSWER_STYLE)
