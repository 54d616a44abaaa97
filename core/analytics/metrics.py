"""
Metric computations for the deck dashboard.
"""

from __future__ import annotations

from datetime import datetime

import pandas as pd

from core.analytics.constants import INTERVAL_BINS, INTERVAL_LABELS, RATING_LABELS
from core.review import RatingCounts


def build_forecast_index(now: datetime, days: int) -> pd.DatetimeIndex:
    """
    Dense UTC day index starting today.
    """
    start = pd.Timestamp(now).tz_convert("UTC").floor("D")
    return pd.date_range(start=start, periods=days, freq="D", unit="ns")


def compute_due_count(cards_df: pd.DataFrame, now: datetime) -> int:
    if cards_df.empty:
        return 0
    return int((cards_df["due"] <= pd.Timestamp(now)).sum())


def compute_due_forecast(cards_df: pd.DataFrame, day_index: pd.DatetimeIndex) -> pd.Series:
    """
    Cards becoming due per day; overdue cards count toward the first day.
    Cards due after the window are left out.
    """
    if len(day_index) == 0:
        return pd.Series(dtype="int64")
    if cards_df.empty:
        return pd.Series(0, index=day_index, dtype="int64")

    due_day = cards_df["due"].dt.floor("D").clip(lower=day_index[0])
    counts = due_day.value_counts()
    return counts.reindex(day_index, fill_value=0).astype("int64")


def compute_rating_distribution(ratings: RatingCounts) -> pd.Series:
    counts = ratings.to_dict()
    return pd.Series(
        {label: counts[key] for key, label in RATING_LABELS.items()},
        dtype="int64",
    )


def compute_interval_buckets(cards_df: pd.DataFrame) -> pd.Series:
    """
    Number of cards per review-interval bucket (New, days, weeks, months).
    """
    if cards_df.empty:
        return pd.Series(0, index=INTERVAL_LABELS, dtype="int64")

    buckets = pd.cut(cards_df["interval"].astype("int64"), bins=INTERVAL_BINS, labels=INTERVAL_LABELS)
    counts = buckets.value_counts()
    counts.index = counts.index.astype(str)
    return counts.reindex(INTERVAL_LABELS, fill_value=0).astype("int64")


def compute_mean_ease(cards_df: pd.DataFrame) -> float:
    if cards_df.empty:
        return 0.0
    return float(cards_df["ease"].astype("float64").mean())
