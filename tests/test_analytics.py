"""
Tests for the deck dashboard.
"""

from datetime import timedelta

from core import library as lib
from core.analytics import FORECAST_DAYS, build_deck_dashboard


def test_empty_deck(now):
    dashboard = build_deck_dashboard(lib.new_library(), now=now)

    assert dashboard.label == "General"
    assert dashboard.total_cards == 0
    assert dashboard.due_now == 0
    assert len(dashboard.due_forecast) == FORECAST_DAYS
    assert dashboard.due_forecast.sum() == 0
    assert dashboard.interval_buckets.sum() == 0
    assert dashboard.mean_ease == 0.0


def test_deck_metrics(now):
    library = lib.new_library()
    overdue = lib.add_card(library, "overdue", "a", now=now - timedelta(days=2))
    tomorrow = lib.add_card(library, "tomorrow", "b", now=now + timedelta(days=1))
    lib.add_card(library, "next month", "c", now=now + timedelta(days=30))
    for _ in range(5):
        lib.record_rating(library, overdue.id, "hard", now=now - timedelta(days=2))
    overdue.due = now - timedelta(days=2)
    overdue.stats.interval = 3
    tomorrow.stats.interval = 10
    lib.get_ratings(library).easy += 2

    dashboard = build_deck_dashboard(library, now=now)

    assert dashboard.total_cards == 3
    assert dashboard.due_now == 1
    assert dashboard.due_forecast.iloc[0] == 1
    assert dashboard.due_forecast.iloc[1] == 1
    assert dashboard.due_forecast.sum() == 2
    assert dashboard.rating_distribution.to_dict() == {"Easy": 2, "Medium": 0, "Hard": 5}
    assert dashboard.streak == 1
    assert dashboard.daily_progress == 0
    assert dashboard.interval_buckets.to_dict() == {
        "New": 1,
        "1-6 days": 1,
        "1-4 weeks": 1,
        "1+ month": 0,
    }
