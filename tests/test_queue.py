"""
Tests for study queue selection.
"""

from datetime import timedelta

import pytest

from core.review import build_study_queue, due_cards, is_due, new_card, next_due_card


@pytest.fixture
def deck(now):
    overdue = new_card("overdue", "a", now=now - timedelta(days=3))
    due_now = new_card("due now", "b", now=now)
    later = new_card("later", "c", now=now + timedelta(days=2))
    return [due_now, later, overdue]


class TestQueue:

    def test_is_due_is_inclusive(self, deck, now):
        assert is_due(deck[0], now)
        assert not is_due(deck[1], now)

    def test_due_cards_keep_deck_order(self, deck, now):
        assert [c.question for c in due_cards(deck, now)] == ["due now", "overdue"]

    def test_next_due_card_is_most_overdue(self, deck, now):
        assert next_due_card(deck, now).question == "overdue"

    def test_next_due_card_none(self, now):
        assert next_due_card([new_card("q", "a", now=now + timedelta(days=1))], now) is None

    def test_build_all(self, deck, now):
        assert build_study_queue(deck, mode="all", now=now) == deck

    def test_build_due(self, deck, now):
        assert len(build_study_queue(deck, now=now)) == 2

    def test_unknown_mode(self, deck):
        with pytest.raises(ValueError):
            build_study_queue(deck, mode="random")
