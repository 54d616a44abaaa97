"""
Library persistence on the key-value store.

Key layout:
    flashcards_categories            [{"id", "name"}, ...]
    flashcards_selected_category     category id
    flashcards_<category id>         [card dict, ...]
    flashcards_ratings_<category id> {"easy", "medium", "hard"}
    flashcards_streak                int
    flashcards_last_date             "YYYY-MM-DD" or null
    flashcards_session_count         int
    flashcards_preferences           {"provider", "ollama_model", ...}
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from core.library import (
    Category,
    Library,
    Preferences,
    ensure_default_category,
)
from core.review import Flashcard, RatingCounts, StreakState, utc_now
from core.storage.database import delete_value, get_value, init_db, list_keys, set_values

logger = logging.getLogger(__name__)


KEY_PREFIX = "flashcards_"
CATEGORIES_KEY = "flashcards_categories"
SELECTED_CATEGORY_KEY = "flashcards_selected_category"
STREAK_KEY = "flashcards_streak"
LAST_DATE_KEY = "flashcards_last_date"
SESSION_COUNT_KEY = "flashcards_session_count"
PREFERENCES_KEY = "flashcards_preferences"


def deck_key(category_id: str) -> str:
    return f"{KEY_PREFIX}{category_id}"


def ratings_key(category_id: str) -> str:
    return f"{KEY_PREFIX}ratings_{category_id}"


def load_library(now: Optional[datetime] = None) -> Library:
    """
    Load the whole library from the store.

    Missing keys load as empty values; a library with no categories gets
    the default "General" category.
    """
    init_db()
    now = now or utc_now()

    categories = []
    for data in get_value(CATEGORIES_KEY, []) or []:
        try:
            categories.append(Category.from_dict(data))
        except (KeyError, TypeError):
            logger.warning("Skipping malformed category entry: %r", data)

    library = Library(
        categories=categories,
        selected_category_id=get_value(SELECTED_CATEGORY_KEY),
        streak=StreakState.from_dict({
            "streak": get_value(STREAK_KEY),
            "last_study_date": get_value(LAST_DATE_KEY),
            "daily_session_count": get_value(SESSION_COUNT_KEY),
        }),
        preferences=Preferences.from_dict(get_value(PREFERENCES_KEY)),
    )
    ensure_default_category(library)

    for category in library.categories:
        library.decks[category.id] = [
            Flashcard.from_dict(data, now=now)
            for data in get_value(deck_key(category.id), []) or []
            if isinstance(data, dict)
        ]
        library.ratings[category.id] = RatingCounts.from_dict(get_value(ratings_key(category.id)))

    logger.debug("Loaded %d categories", len(library.categories))
    return library


def save_library(library: Library):
    """Write the whole library and drop the keys of deleted categories."""
    init_db()

    values = {
        CATEGORIES_KEY: [category.to_dict() for category in library.categories],
        SELECTED_CATEGORY_KEY: library.selected_category_id,
        STREAK_KEY: library.streak.streak,
        LAST_DATE_KEY: library.streak.last_study_date,
        SESSION_COUNT_KEY: library.streak.daily_session_count,
        PREFERENCES_KEY: library.preferences.to_dict(),
    }
    for category in library.categories:
        deck = library.decks.get(category.id, [])
        ratings = library.ratings.get(category.id, RatingCounts())
        values[deck_key(category.id)] = [card.to_dict() for card in deck]
        values[ratings_key(category.id)] = ratings.to_dict()

    set_values(values)

    # Decks and ratings of deleted categories
    for key in list_keys(KEY_PREFIX):
        if key not in values:
            delete_value(key)
