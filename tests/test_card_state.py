"""
Tests for card values and their construction-time defaults.
"""

from datetime import datetime, timezone

import pytest

from core.review import EASE_MAX, EASE_MIN, Flashcard, RatingCounts, Difficulty, new_card


class TestNewCard:

    def test_fields_trimmed(self, now):
        card = new_card("  Q ", " A  ", now=now)
        assert (card.question, card.answer, card.due) == ("Q", "A", now)

    @pytest.mark.parametrize("question,answer", [("", "A"), ("Q", "   "), (None, "A")])
    def test_empty_rejected(self, question, answer):
        with pytest.raises(ValueError):
            new_card(question, answer)

    def test_answer_truncated(self):
        assert len(new_card("Q", "y" * 501).answer) == 500


class TestFlashcardFromDict:

    def test_missing_optional_fields_defaulted_once(self, now):
        card = Flashcard.from_dict({"id": "abc", "question": "Q", "answer": "A"}, now=now)

        assert card.id == "abc"
        assert card.due == now
        assert (card.stats.ease, card.stats.interval, card.stats.reps) == (2.5, 0, 0)

    def test_epoch_milliseconds_due(self, now):
        millis = int(now.timestamp() * 1000)
        card = Flashcard.from_dict({"question": "Q", "answer": "A", "due": millis})
        assert card.due == now

    def test_naive_iso_due_is_utc(self):
        card = Flashcard.from_dict({"question": "Q", "answer": "A", "due": "2024-01-02T03:04:05"})
        assert card.due == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    def test_ease_clamped(self):
        high = Flashcard.from_dict({"question": "Q", "answer": "A", "stats": {"ease": 9}})
        low = Flashcard.from_dict({"question": "Q", "answer": "A", "stats": {"ease": 0.1}})
        assert (high.stats.ease, low.stats.ease) == (EASE_MAX, EASE_MIN)

    @pytest.mark.parametrize("ease", [None, "abc", float("nan"), True])
    def test_unreadable_ease_defaulted(self, ease):
        card = Flashcard.from_dict({"question": "Q", "answer": "A", "stats": {"ease": ease, "reps": "2"}})
        assert (card.stats.ease, card.stats.reps) == (2.5, 2)

    @pytest.mark.parametrize("due", ["tomorrow", "2024-13-45", 10 ** 20])
    def test_unreadable_due_is_now(self, due, now):
        card = Flashcard.from_dict({"question": "Q", "answer": "A", "due": due}, now=now)
        assert card.due == now

    def test_to_dict_round_trip(self, now):
        card = new_card("Q", "A", now=now)
        assert Flashcard.from_dict(card.to_dict()) == card


class TestRatingCounts:

    def test_increment_and_total(self):
        counts = RatingCounts()
        counts.increment(Difficulty.EASY)
        counts.increment(Difficulty.HARD)
        counts.increment(Difficulty.HARD)

        assert counts.to_dict() == {"easy": 1, "medium": 0, "hard": 2}
        assert counts.total == 3
