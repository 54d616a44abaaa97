"""
Due-card selection for study sessions.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Literal, Optional

from core.review.card_state import Flashcard, utc_now


StudyMode = Literal["due", "all"]


def is_due(card: Flashcard, now: Optional[datetime] = None) -> bool:
    return card.due <= (now or utc_now())


def due_cards(cards: Iterable[Flashcard], now: Optional[datetime] = None) -> list[Flashcard]:
    """Cards eligible for review, in deck order."""
    now = now or utc_now()
    return [card for card in cards if is_due(card, now)]


def next_due_card(cards: Iterable[Flashcard], now: Optional[datetime] = None) -> Optional[Flashcard]:
    """The most overdue card, or None when nothing is due."""
    due = sorted(due_cards(cards, now), key=lambda card: card.due)
    return due[0] if due else None


def build_study_queue(
    cards: Iterable[Flashcard],
    mode: StudyMode = "due",
    now: Optional[datetime] = None
) -> list[Flashcard]:
    """
    Pre-compute the cards for a study session.

    Args:
        cards: Deck to study
        mode: "due" for cards whose due time has passed, "all" for the whole deck
        now: Reference time (defaults to now, UTC)
    """
    if mode == "all":
        return list(cards)
    if mode != "due":
        raise ValueError(f"Unknown study mode: {mode}")
    return due_cards(cards, now)
