"""
Look of the two card sides.

The question side carries a small reps note in its corner; the answer side
repeats the question underneath the answer.
"""

from __future__ import annotations

from dataclasses import dataclass


CARD_PADDING = "35px 24px"
CARD_MIN_HEIGHT = "210px"
TEXT_COLOR = "#1f1f1f"
NOTE_COLOR = "#666"
CORNER_FONT_SIZE = "0.85em"


@dataclass(frozen=True)
class CardSideStyle:
    background: str
    text_size: str
    note_size: str = "1.0em"
    note_style: str = "italic"


QUESTION_STYLE = CardSideStyle(background="#f0f2f6", text_size="1.8em")

ANSWER_STYLE = CardSideStyle(background="#e8f4f8", text_size="1.4em", note_style="normal")
