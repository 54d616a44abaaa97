"""
Card library: categories, their decks and per-category rating counts.

Every operation takes the library it works on; there is no ambient
"current category" or "current card". Persistence lives in core.storage.
"""

from __future__ import annotations

import random
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional, Tuple

from core import config
from core.extraction import CardDraft, normalize_flashcards
from core.generation import GenerationOutcome
from core.review import (
    Flashcard,
    RatingCounts,
    StreakState,
    due_cards,
    new_card,
    parse_difficulty,
    record_session,
    review_card,
    today_string,
    utc_now,
)


DEFAULT_CATEGORY_NAME = "General"


@dataclass
class Category:
    id: str
    name: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict) -> "Category":
        return cls(id=str(data["id"]), name=str(data.get("name") or DEFAULT_CATEGORY_NAME))


@dataclass
class Preferences:
    """User choices that are not secrets (API keys stay in the environment)."""
    provider: str = config.DEFAULT_PROVIDER
    ollama_model: str = config.DEFAULT_OLLAMA_MODEL
    card_count: int = config.DEFAULT_CARD_COUNT
    force_ai: bool = False

    def to_dict(self) -> dict:
        return {
            "provider": self.provider,
            "ollama_model": self.ollama_model,
            "card_count": self.card_count,
            "force_ai": self.force_ai,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Preferences":
        data = data or {}
        provider = data.get("provider")
        if provider not in config.PROVIDER_KEY_ENV and provider != "ollama":
            provider = config.DEFAULT_PROVIDER
        return cls(
            provider=provider,
            ollama_model=data.get("ollama_model") or config.DEFAULT_OLLAMA_MODEL,
            card_count=int(data.get("card_count") or config.DEFAULT_CARD_COUNT),
            force_ai=bool(data.get("force_ai", False)),
        )


@dataclass
class Library:
    categories: list[Category] = field(default_factory=list)
    selected_category_id: Optional[str] = None
    decks: dict[str, list[Flashcard]] = field(default_factory=dict)
    ratings: dict[str, RatingCounts] = field(default_factory=dict)
    streak: StreakState = field(default_factory=StreakState)
    preferences: Preferences = field(default_factory=Preferences)


@dataclass(frozen=True)
class DeckSummary:
    category_name: str
    total: int
    due: int

    def __str__(self) -> str:
        return f"{self.total} cards ({self.due} due) in {self.category_name}"


def generate_category_id() -> str:
    return uuid.uuid4().hex[:12]


# ---- Categories ----

def new_library() -> Library:
    """Empty library with the default category selected."""
    library = Library()
    ensure_default_category(library)
    return library


def ensure_default_category(library: Library) -> Category:
    """
    Make sure at least one category exists and a valid one is selected.

    Returns:
        The selected category
    """
    if not library.categories:
        library.categories.append(Category(id=generate_category_id(), name=DEFAULT_CATEGORY_NAME))

    ids = {category.id for category in library.categories}
    if library.selected_category_id not in ids:
        library.selected_category_id = library.categories[0].id

    return selected_category(library)


def get_category(library: Library, category_id: str) -> Category:
    for category in library.categories:
        if category.id == category_id:
            return category
    raise ValueError(f"Unknown category: {category_id}")


def selected_category(library: Library) -> Category:
    return get_category(library, library.selected_category_id)


def find_category_by_name(library: Library, name: str) -> Optional[Category]:
    """Case-insensitive lookup by name."""
    key = name.strip().lower()
    return next((c for c in library.categories if c.name.lower() == key), None)


def add_category(library: Library, name: str, select: bool = True) -> Category:
    name = (name or "").strip()
    if not name:
        raise ValueError("Category name cannot be empty")

    category = Category(id=generate_category_id(), name=name)
    library.categories.append(category)
    library.decks[category.id] = []
    library.ratings[category.id] = RatingCounts()
    if select:
        library.selected_category_id = category.id
    return category


def rename_category(library: Library, category_id: str, name: str) -> Category:
    name = (name or "").strip()
    if not name:
        raise ValueError("Category name cannot be empty")
    category = get_category(library, category_id)
    category.name = name
    return category


def delete_category(library: Library, category_id: str) -> None:
    """
    Delete a category together with its deck and rating counts.

    Raises:
        ValueError: If it is the last category or does not exist
    """
    get_category(library, category_id)
    if len(library.categories) <= 1:
        raise ValueError("Cannot delete last category.")

    library.categories = [c for c in library.categories if c.id != category_id]
    library.decks.pop(category_id, None)
    library.ratings.pop(category_id, None)
    if library.selected_category_id == category_id:
        library.selected_category_id = library.categories[0].id


def select_category(library: Library, category_id: str) -> Category:
    category = get_category(library, category_id)
    library.selected_category_id = category.id
    return category


# ---- Decks ----

def get_deck(library: Library, category_id: Optional[str] = None) -> list[Flashcard]:
    """Cards of a category (the selected one by default)."""
    category_id = category_id or library.selected_category_id
    return library.decks.setdefault(category_id, [])


def get_ratings(library: Library, category_id: Optional[str] = None) -> RatingCounts:
    category_id = category_id or library.selected_category_id
    return library.ratings.setdefault(category_id, RatingCounts())


def find_card(library: Library, card_id: str, category_id: Optional[str] = None) -> Flashcard:
    for card in get_deck(library, category_id):
        if card.id == card_id:
            return card
    raise ValueError(f"Unknown card: {card_id}")


def add_card(
    library: Library,
    question: str,
    answer: str,
    category_id: Optional[str] = None,
    now: Optional[datetime] = None
) -> Flashcard:
    """Manual single-card entry."""
    card = new_card(question, answer, now=now)
    get_deck(library, category_id).append(card)
    return card


def add_drafts(
    library: Library,
    drafts: Iterable[CardDraft],
    category_id: Optional[str] = None,
    now: Optional[datetime] = None
) -> list[Flashcard]:
    cards = normalize_flashcards(drafts, now=now)
    get_deck(library, category_id).extend(cards)
    return cards


def edit_card(
    library: Library,
    card_id: str,
    question: str,
    answer: str,
    category_id: Optional[str] = None
) -> Flashcard:
    """Replace a card's text; its schedule is kept."""
    edited = new_card(question, answer)
    card = find_card(library, card_id, category_id)
    card.question = edited.question
    card.answer = edited.answer
    return card


def delete_card(library: Library, card_id: str, category_id: Optional[str] = None) -> bool:
    deck = get_deck(library, category_id)
    remaining = [card for card in deck if card.id != card_id]
    removed = len(remaining) != len(deck)
    deck[:] = remaining
    return removed


def clear_deck(library: Library, category_id: Optional[str] = None) -> None:
    get_deck(library, category_id).clear()


def shuffle_deck(
    library: Library,
    category_id: Optional[str] = None,
    rng: Optional[random.Random] = None
) -> None:
    (rng or random.Random()).shuffle(get_deck(library, category_id))


def search_cards(cards: Iterable[Flashcard], text: str) -> list[Flashcard]:
    """Case-insensitive substring filter over question and answer."""
    needle = (text or "").strip().lower()
    if not needle:
        return list(cards)
    return [
        card for card in cards
        if needle in card.question.lower() or needle in card.answer.lower()
    ]


def deck_summary(
    library: Library,
    category_id: Optional[str] = None,
    now: Optional[datetime] = None
) -> DeckSummary:
    category_id = category_id or library.selected_category_id
    deck = get_deck(library, category_id)
    try:
        name = get_category(library, category_id).name
    except ValueError:
        name = "Unknown"
    return DeckSummary(category_name=name, total=len(deck), due=len(due_cards(deck, now)))


# ---- Generation Results ----

def merge_generated(
    library: Library,
    outcome: GenerationOutcome,
    now: Optional[datetime] = None
) -> int:
    """
    Add generated cards to the library.

    Flat cards go to the selected category. Categorized cards go to the
    category with the same name (case-insensitive), created if missing;
    creating categories does not change the selection.

    Returns:
        Number of cards added
    """
    added = len(add_drafts(library, outcome.cards, now=now))

    for name, drafts in outcome.categories.items():
        category = find_category_by_name(library, name)
        if category is None:
            category = add_category(library, name, select=False)
        added += len(add_drafts(library, drafts, category_id=category.id, now=now))

    return added


# ---- Ratings ----

def record_rating(
    library: Library,
    card_id: str,
    difficulty,
    category_id: Optional[str] = None,
    now: Optional[datetime] = None,
    reset_reps_on_hard: bool = False,
    break_on_missed_day: bool = False
) -> Tuple[Flashcard, dict]:
    """
    Rate a card and update the category's rating counts and the streak.

    Raises:
        InvalidDifficulty: If the rating is not recognized (nothing changes)
        ValueError: If the card is not in the deck
    """
    grade = parse_difficulty(difficulty)
    card = find_card(library, card_id, category_id)
    now = now or utc_now()

    card, event_data = review_card(card, grade, now=now, reset_reps_on_hard=reset_reps_on_hard)
    get_ratings(library, category_id).increment(grade)
    record_session(library.streak, today_string(now), break_on_missed_day=break_on_missed_day)

    event_data['category_id'] = category_id or library.selected_category_id
    return card, event_data
