"""
Review - three-bucket spaced repetition and daily streaks

Quick start:
    from core import review

    card = review.new_card("What is TCP?", "A reliable transport protocol.")
    review.rate(card, review.Difficulty.EASY)

    state = review.StreakState()
    review.record_session(state, review.today_string())
"""

# Core scheduler API (algorithm logic)
from core.review.scheduler import next_stats, rate, review_card

# Streak tracking
from core.review.streak import (
    StreakState,
    daily_progress,
    record_session,
    today_string,
)

# Study queue
from core.review.queue import (
    build_study_queue,
    due_cards,
    is_due,
    next_due_card,
)

# Constants and parameters
from core.review.constants import (
    Difficulty,
    parse_difficulty,
    DAILY_SESSION_GOAL,
    EASE_MAX,
    EASE_MIN,
    INITIAL_EASE,
    MAX_ANSWER_LENGTH,
)

# Card state
from core.review.card_state import (
    CardStats,
    Flashcard,
    RatingCounts,
    new_card,
    utc_now,
)


__all__ = [
    # Core algorithm
    "rate",
    "review_card",
    "next_stats",

    # Streak
    "StreakState",
    "record_session",
    "daily_progress",
    "today_string",

    # Study queue
    "build_study_queue",
    "due_cards",
    "is_due",
    "next_due_card",

    # Enums
    "Difficulty",
    "parse_difficulty",

    # Card state
    "CardStats",
    "Flashcard",
    "RatingCounts",
    "new_card",
    "utc_now",

    # Parameters
    "DAILY_SESSION_GOAL",
    "EASE_MAX",
    "EASE_MIN",
    "INITIAL_EASE",
    "MAX_ANSWER_LENGTH",
]
