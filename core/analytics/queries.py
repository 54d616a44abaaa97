"""
Data-loading helpers for analytics.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from core.analytics.constants import CARD_COLUMNS
from core.review import Flashcard


def load_cards_df(cards: Iterable[Flashcard]) -> pd.DataFrame:
    """
    Flatten a deck into a dataframe (due as UTC timestamps).
    """
    rows = [
        {
            "id": card.id,
            "question": card.question,
            "due": card.due,
            "ease": card.stats.ease,
            "interval": card.stats.interval,
            "reps": card.stats.reps,
        }
        for card in cards
    ]
    if not rows:
        return pd.DataFrame(columns=CARD_COLUMNS)

    df = pd.DataFrame(rows, columns=CARD_COLUMNS)
    df["due"] = pd.to_datetime(df["due"], utc=True).astype("datetime64[ns, UTC]")
    return df
