"""
Service layer to assemble the deck dashboard.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from core import library as lib
from core.analytics.constants import FORECAST_DAYS
from core.analytics.metrics import (
    build_forecast_index,
    compute_due_count,
    compute_due_forecast,
    compute_interval_buckets,
    compute_mean_ease,
    compute_rating_distribution,
)
from core.analytics.queries import load_cards_df
from core.analytics.types import DeckDashboardData
from core.review import DAILY_SESSION_GOAL, daily_progress, today_string, utc_now


def build_deck_dashboard(
    library: lib.Library,
    category_id: Optional[str] = None,
    now: Optional[datetime] = None,
    forecast_days: int = FORECAST_DAYS
) -> DeckDashboardData:
    """
    Build all KPI values and series needed by the dashboard page for a deck.
    """
    now = now or utc_now()
    category = lib.get_category(library, category_id or library.selected_category_id)
    cards_df = load_cards_df(lib.get_deck(library, category.id))

    return DeckDashboardData(
        category_id=category.id,
        label=category.name,
        total_cards=len(cards_df),
        due_now=compute_due_count(cards_df, now),
        streak=library.streak.streak,
        daily_progress=daily_progress(library.streak, today_string(now)),
        daily_goal=DAILY_SESSION_GOAL,
        mean_ease=compute_mean_ease(cards_df),
        rating_distribution=compute_rating_distribution(lib.get_ratings(library, category.id)),
        due_forecast=compute_due_forecast(cards_df, build_forecast_index(now, forecast_days)),
        interval_buckets=compute_interval_buckets(cards_df),
    )
