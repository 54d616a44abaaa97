"""
Streak Tracker

A day counts toward the streak once its DAILY_SESSION_GOAL-th rating is
recorded. The streak is bumped at most once per day.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from core.review.card_state import utc_now
from core.review.constants import DAILY_SESSION_GOAL


@dataclass
class StreakState:
    """Consecutive-day study streak and today's session counter."""
    streak: int = 0
    last_study_date: Optional[str] = None  # ISO calendar date (YYYY-MM-DD)
    daily_session_count: int = 0

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "StreakState":
        """Build from stored values; negative or unreadable counters load as 0."""
        data = data or {}
        last_study_date = data.get("last_study_date")
        return cls(
            streak=max(0, _counter(data.get("streak"))),
            last_study_date=last_study_date if isinstance(last_study_date, str) and last_study_date else None,
            daily_session_count=max(0, _counter(data.get("daily_session_count"))),
        )


def _counter(value) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def today_string(now: Optional[datetime] = None) -> str:
    """Calendar-day key for a timestamp (local date of the given datetime)."""
    return (now or utc_now()).date().isoformat()


def record_session(
    state: StreakState,
    today: str,
    break_on_missed_day: bool = False
) -> StreakState:
    """
    Record one rating event for `today` (modifies in place) and return state.

    A new day resets the daily counter. With `break_on_missed_day`, a gap of
    more than one day since the last study date also resets the streak.

    Args:
        state: Streak state to update
        today: Calendar-day string (YYYY-MM-DD)
        break_on_missed_day: Reset the streak after a skipped day

    Returns:
        The same state object
    """
    if state.last_study_date != today:
        if break_on_missed_day and state.last_study_date is not None:
            if not _is_previous_day(state.last_study_date, today):
                state.streak = 0
        state.daily_session_count = 0
        state.last_study_date = today

    state.daily_session_count += 1
    if state.daily_session_count == DAILY_SESSION_GOAL:
        state.streak += 1

    return state


def daily_progress(state: StreakState, today: Optional[str] = None) -> int:
    """Sessions done toward today's goal, capped at DAILY_SESSION_GOAL."""
    if today is not None and state.last_study_date != today:
        return 0
    return min(DAILY_SESSION_GOAL, state.daily_session_count)


def _is_previous_day(last_study_date: str, today: str) -> bool:
    try:
        last = date.fromisoformat(last_study_date)
        current = date.fromisoformat(today)
    except ValueError:
        # Unparseable dates (e.g. legacy formats) count as a gap
        return False
    return current - last == timedelta(days=1)
