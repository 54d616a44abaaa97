"""
Constants for deck analytics.
"""

from __future__ import annotations

from typing import Final


FORECAST_DAYS: Final[int] = 14

RATING_LABELS: Final[dict[str, str]] = {
    "easy": "Easy",
    "medium": "Medium",
    "hard": "Hard",
}

# Upper bounds (days, inclusive) for the interval histogram
INTERVAL_BINS: Final[list[float]] = [-1, 0, 6, 29, float("inf")]
INTERVAL_LABELS: Final[list[str]] = ["New", "1-6 days", "1-4 weeks", "1+ month"]

CARD_COLUMNS: Final[list[str]] = ["id", "question", "due", "ease", "interval", "reps"]
