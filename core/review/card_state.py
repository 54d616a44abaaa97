"""
Card State - Flashcard values and their scheduling stats

Key concepts:
- Ease (E): Multiplier applied to the interval on an easy review, in [1.3, 3.0]
- Interval (I): Whole days until the next review (0 = never reviewed)
- Due: Absolute UTC time at or after which the card can be reviewed

Optional fields are defaulted exactly once, here, when a card is built;
nothing downstream re-applies defaults.
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from core.review.constants import (
    Difficulty,
    INITIAL_EASE,
    INITIAL_INTERVAL,
    INITIAL_REPS,
    MAX_ANSWER_LENGTH,
    EASE_MAX,
    EASE_MIN,
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_card_id() -> str:
    """Opaque unique identity for a card."""
    return uuid.uuid4().hex


@dataclass
class CardStats:
    """Scheduling stats for one card."""
    ease: float = INITIAL_EASE
    interval: int = INITIAL_INTERVAL  # days
    reps: int = INITIAL_REPS

    def to_dict(self) -> dict:
        return {"ease": self.ease, "interval": self.interval, "reps": self.reps}

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "CardStats":
        """Unreadable or null fields (e.g. a NaN ease stored as null) take the defaults."""
        data = data if isinstance(data, dict) else {}
        ease = _number(data.get("ease"), float, INITIAL_EASE)
        return cls(
            ease=min(EASE_MAX, max(EASE_MIN, ease)),
            interval=max(0, _number(data.get("interval"), int, INITIAL_INTERVAL)),
            reps=max(0, _number(data.get("reps"), int, INITIAL_REPS)),
        )


@dataclass
class Flashcard:
    """
    One question/answer unit with its own review schedule.

    Mutated only by the scheduler (core.review.scheduler.rate) and by
    explicit edits from the library.
    """
    id: str
    question: str
    answer: str
    due: datetime
    stats: CardStats = field(default_factory=CardStats)

    def to_dict(self) -> dict:
        """Serialize to a JSON-ready dict (due as ISO 8601)."""
        return {
            "id": self.id,
            "question": self.question,
            "answer": self.answer,
            "due": self.due.isoformat(),
            "stats": self.stats.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict, now: Optional[datetime] = None) -> "Flashcard":
        """
        Build a card from stored data, defaulting missing optional fields.

        Accepts `due` as an ISO string, a datetime, or epoch milliseconds.
        A due value that cannot be read makes the card due now.
        """
        now = as_utc(now) if now else utc_now()
        return cls(
            id=str(data.get("id") or generate_card_id()),
            question=str(data.get("question", "")).strip(),
            answer=_truncate(str(data.get("answer", "")).strip()),
            due=_parse_due(data.get("due"), now),
            stats=CardStats.from_dict(data.get("stats")),
        )


@dataclass
class RatingCounts:
    """How often each rating was given in a category. Never decremented."""
    easy: int = 0
    medium: int = 0
    hard: int = 0

    def increment(self, difficulty: Difficulty) -> None:
        setattr(self, difficulty.value, getattr(self, difficulty.value) + 1)

    @property
    def total(self) -> int:
        return self.easy + self.medium + self.hard

    def to_dict(self) -> dict:
        return {"easy": self.easy, "medium": self.medium, "hard": self.hard}

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "RatingCounts":
        data = data if isinstance(data, dict) else {}
        return cls(
            easy=_number(data.get("easy"), int, 0),
            medium=_number(data.get("medium"), int, 0),
            hard=_number(data.get("hard"), int, 0),
        )


def new_card(question: str, answer: str, now: Optional[datetime] = None) -> Flashcard:
    """
    Create a new, immediately due card (manual entry or extraction).

    Raises:
        ValueError: If question or answer is empty after trimming
    """
    question = (question or "").strip()
    answer = (answer or "").strip()
    if not question or not answer:
        raise ValueError("A card needs a non-empty question and answer")

    return Flashcard(
        id=generate_card_id(),
        question=question,
        answer=_truncate(answer),
        due=now or utc_now(),
        stats=CardStats(),
    )


def _truncate(answer: str) -> str:
    return answer[:MAX_ANSWER_LENGTH]


def _number(value, cast, default):
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return cast(number)


def as_utc(moment: datetime) -> datetime:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _parse_due(value, now: datetime) -> datetime:
    if value is None or value == "" or isinstance(value, bool):
        return now
    try:
        if isinstance(value, datetime):
            due = value
        elif isinstance(value, (int, float)):
            due = datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
        else:
            due = datetime.fromisoformat(str(value))
    except (ValueError, OverflowError, OSError):
        return now
    return as_utc(due)
