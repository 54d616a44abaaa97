"""
Types for analytics dashboards.
"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class DeckDashboardData:
    """
    Precomputed metrics and series for one category's deck.
    """
    category_id: str
    label: str
    total_cards: int
    due_now: int
    streak: int
    daily_progress: int
    daily_goal: int
    mean_ease: float
    rating_distribution: pd.Series
    due_forecast: pd.Series
    interval_buckets: pd.Series
