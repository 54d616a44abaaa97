"""
Scheduler - Three-bucket review policy

Pure scheduling and state updates (no database calls, no randomness).

Main workflow:
1. Validate the rating (before touching the card)
2. Update ease and interval for the rating bucket
3. Count the repetition
4. Set due = now + interval days
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Optional, Tuple

from core.review.card_state import CardStats, Flashcard, as_utc, utc_now
from core.review.constants import (
    Difficulty,
    EASE_DELTA,
    EASE_MAX,
    EASE_MIN,
    parse_difficulty,
)


def round_half_up(value: float) -> int:
    """Round to the nearest whole day, halves rounding up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def next_stats(
    stats: CardStats,
    difficulty: Difficulty,
    reset_reps_on_hard: bool = False
) -> CardStats:
    """
    Compute new stats for a rating without mutating the input.

    Rules:
    - EASY:   ease += 0.15 (max 3.0); interval = round(interval * ease), or 1
              for a card that was never reviewed
    - MEDIUM: ease unchanged; interval = max(1, interval)
    - HARD:   ease -= 0.2 (min 1.3); interval = 1

    Reps are incremented on every rating. `reset_reps_on_hard` switches HARD
    to resetting reps to 0 instead.
    """
    ease = min(EASE_MAX, max(EASE_MIN, stats.ease + EASE_DELTA[difficulty]))

    if difficulty == Difficulty.EASY:
        interval = round_half_up(stats.interval * ease) if stats.interval > 0 else 1
    elif difficulty == Difficulty.HARD:
        interval = 1
    else:
        interval = max(1, round_half_up(stats.interval or 1))

    if difficulty == Difficulty.HARD and reset_reps_on_hard:
        reps = 0
    else:
        reps = stats.reps + 1

    return CardStats(ease=ease, interval=max(1, interval), reps=reps)


def rate(
    card: Flashcard,
    difficulty,
    now: Optional[datetime] = None,
    reset_reps_on_hard: bool = False
) -> Flashcard:
    """
    Apply a rating to a card (modifies in place) and return it.

    Args:
        card: Card to update
        difficulty: Difficulty member or 'easy' / 'medium' / 'hard'
        now: Review time (defaults to now; naive times are taken as UTC)
        reset_reps_on_hard: Reset reps to 0 on HARD instead of incrementing

    Returns:
        The same card, with new stats and due time

    Raises:
        InvalidDifficulty: If the rating is not recognized (card untouched)
    """
    grade = parse_difficulty(difficulty)
    now = as_utc(now) if now else utc_now()

    card.stats = next_stats(card.stats, grade, reset_reps_on_hard=reset_reps_on_hard)
    card.due = now + timedelta(days=card.stats.interval)
    return card


def review_card(
    card: Flashcard,
    difficulty,
    now: Optional[datetime] = None,
    reset_reps_on_hard: bool = False
) -> Tuple[Flashcard, dict]:
    """
    Rate a card and return it with a review event dict.

    The event captures the stats before and after the rating, ready for a
    caller that keeps a review log.
    """
    grade = parse_difficulty(difficulty)
    now = as_utc(now) if now else utc_now()

    before = card.stats.to_dict()
    rate(card, grade, now=now, reset_reps_on_hard=reset_reps_on_hard)

    event_data = {
        'card_id': card.id,
        'timestamp': now,
        'difficulty': grade.value,
        'ease_before': before['ease'],
        'interval_before': before['interval'],
        'reps_before': before['reps'],
        'ease_after': card.stats.ease,
        'interval_after': card.stats.interval,
        'reps_after': card.stats.reps,
        'due': card.due,
    }
    return card, event_data
