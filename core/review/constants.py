"""
Review Constants and Parameters

All tunable values for the three-bucket scheduler and the streak tracker
in one place.
"""

from __future__ import annotations

from enum import Enum

from core.errors import InvalidDifficulty


# ---- Ratings ----

class Difficulty(str, Enum):
    """User feedback on a review."""
    EASY = "easy"      # Recalled fluently
    MEDIUM = "medium"  # Recalled normally
    HARD = "hard"      # Struggled or failed


def parse_difficulty(value) -> Difficulty:
    """
    Coerce a rating to Difficulty.

    Accepts Difficulty members or the strings easy / medium / hard
    (case-insensitive, surrounding whitespace ignored).

    Raises:
        InvalidDifficulty: For anything else
    """
    if isinstance(value, Difficulty):
        return value
    if isinstance(value, str):
        try:
            return Difficulty(value.strip().lower())
        except ValueError:
            pass
    raise InvalidDifficulty(value)


# ---- Card Defaults ----

INITIAL_EASE = 2.5
INITIAL_INTERVAL = 0   # days; 0 means never reviewed
INITIAL_REPS = 0

MAX_ANSWER_LENGTH = 500  # Longer answers are truncated, not rejected


# ---- Ease Factor ----

EASE_MIN = 1.3
EASE_MAX = 3.0

EASE_DELTA = {
    Difficulty.EASY: +0.15,
    Difficulty.MEDIUM: 0.0,
    Difficulty.HARD: -0.20,
}


# ---- Streak ----

DAILY_SESSION_GOAL = 5  # Ratings per day that count the day toward the streak
