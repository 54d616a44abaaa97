"""
Analytics package exports.
"""

from core.analytics.constants import FORECAST_DAYS
from core.analytics.service import build_deck_dashboard
from core.analytics.types import DeckDashboardData

__all__ = [
    "FORECAST_DAYS",
    "build_deck_dashboard",
    "DeckDashboardData",
]
