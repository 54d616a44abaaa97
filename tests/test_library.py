"""
Tests for categories, decks and the rating flow.
"""

import random
from datetime import timedelta

import pytest

from core import library as lib
from core.errors import InvalidDifficulty
from core.extraction import CardDraft
from core.generation import GenerationOutcome
from core.review import Difficulty


@pytest.fixture
def library():
    return lib.new_library()


class TestCategories:

    def test_new_library_has_general(self, library):
        assert [c.name for c in library.categories] == ["General"]
        assert lib.selected_category(library).name == "General"

    def test_add_selects_new_category(self, library):
        category = lib.add_category(library, "  Biology ")
        assert category.name == "Biology"
        assert library.selected_category_id == category.id
        assert lib.get_deck(library) == []

    def test_add_without_selecting(self, library):
        general = lib.selected_category(library)
        lib.add_category(library, "Biology", select=False)
        assert library.selected_category_id == general.id

    def test_blank_name_rejected(self, library):
        with pytest.raises(ValueError):
            lib.add_category(library, "   ")

    def test_rename(self, library):
        category = lib.selected_category(library)
        lib.rename_category(library, category.id, "Networking")
        assert lib.selected_category(library).name == "Networking"

    def test_cannot_delete_last(self, library):
        with pytest.raises(ValueError, match="last category"):
            lib.delete_category(library, library.selected_category_id)

    def test_delete_selected_moves_selection(self, library, now):
        general = lib.selected_category(library)
        biology = lib.add_category(library, "Biology")
        lib.add_card(library, "Q", "A", now=now)

        lib.delete_category(library, biology.id)

        assert library.selected_category_id == general.id
        assert biology.id not in library.decks
        assert biology.id not in library.ratings

    def test_select_unknown(self, library):
        with pytest.raises(ValueError):
            lib.select_category(library, "missing")

    def test_find_by_name_case_insensitive(self, library):
        lib.add_category(library, "Biology")
        assert lib.find_category_by_name(library, " biology ").name == "Biology"
        assert lib.find_category_by_name(library, "chemistry") is None

    def test_ensure_default_repairs_selection(self, library):
        library.selected_category_id = "gone"
        assert lib.ensure_default_category(library) is library.categories[0]


class TestDecks:

    def test_add_edit_delete(self, library, now):
        card = lib.add_card(library, "What is TCP?", "A protocol", now=now)

        lib.edit_card(library, card.id, " What is UDP? ", "Another protocol")
        assert (card.question, card.answer) == ("What is UDP?", "Another protocol")

        assert lib.delete_card(library, card.id)
        assert not lib.delete_card(library, card.id)
        assert lib.get_deck(library) == []

    def test_edit_keeps_schedule(self, library, now):
        card = lib.add_card(library, "Q", "A", now=now)
        lib.record_rating(library, card.id, "easy", now=now)
        due = card.due

        lib.edit_card(library, card.id, "Q2", "A2")

        assert card.due == due
        assert card.stats.reps == 1

    def test_edit_rejects_blank(self, library, now):
        card = lib.add_card(library, "Q", "A", now=now)
        with pytest.raises(ValueError):
            lib.edit_card(library, card.id, "Q", "  ")
        assert card.answer == "A"

    def test_search(self, library, now):
        lib.add_card(library, "What is TCP?", "Transport protocol", now=now)
        lib.add_card(library, "Capital of Peru", "Lima", now=now)

        deck = lib.get_deck(library)
        assert [c.question for c in lib.search_cards(deck, "PROTOCOL")] == ["What is TCP?"]
        assert len(lib.search_cards(deck, "")) == 2

    def test_shuffle_is_seedable(self, library, now):
        for index in range(10):
            lib.add_card(library, f"Q{index}", "A", now=now)
        before = [c.question for c in lib.get_deck(library)]

        lib.shuffle_deck(library, rng=random.Random(42))
        shuffled = [c.question for c in lib.get_deck(library)]

        expected = list(before)
        random.Random(42).shuffle(expected)
        assert shuffled == expected

    def test_clear(self, library, now):
        lib.add_card(library, "Q", "A", now=now)
        lib.clear_deck(library)
        assert lib.get_deck(library) == []

    def test_summary(self, library, now):
        lib.add_card(library, "Q1", "A", now=now)
        lib.add_card(library, "Q2", "A", now=now + timedelta(days=1))

        summary = lib.deck_summary(library, now=now)

        assert (summary.category_name, summary.total, summary.due) == ("General", 2, 1)
        assert str(summary) == "2 cards (1 due) in General"


class TestMergeGenerated:

    def test_flat_cards_go_to_selected(self, library, now):
        outcome = GenerationOutcome(source="heuristic", cards=[CardDraft("Q", "A")])
        assert lib.merge_generated(library, outcome, now=now) == 1
        assert [c.question for c in lib.get_deck(library)] == ["Q"]

    def test_categories_matched_by_name(self, library, now):
        biology = lib.add_category(library, "Biology", select=False)
        outcome = GenerationOutcome(
            source="remote",
            categories={
                "biology": [CardDraft("Cell?", "Unit of life")],
                "Chemistry": [CardDraft("H2O?", "Water"), CardDraft("NaCl?", "Salt")],
            },
        )

        added = lib.merge_generated(library, outcome, now=now)

        assert added == 3
        assert [c.question for c in lib.get_deck(library, biology.id)] == ["Cell?"]
        chemistry = lib.find_category_by_name(library, "Chemistry")
        assert len(lib.get_deck(library, chemistry.id)) == 2
        assert lib.selected_category(library).name == "General"


class TestRecordRating:

    def test_updates_card_ratings_and_streak(self, library, now):
        card = lib.add_card(library, "Q", "A", now=now)

        rated, event = lib.record_rating(library, card.id, Difficulty.HARD, now=now)

        assert rated is card
        assert card.due == now + timedelta(days=1)
        assert lib.get_ratings(library).hard == 1
        assert library.streak.daily_session_count == 1
        assert library.streak.last_study_date == "2024-03-10"
        assert event["category_id"] == library.selected_category_id

    def test_fifth_rating_starts_streak(self, library, now):
        card = lib.add_card(library, "Q", "A", now=now)
        for _ in range(5):
            lib.record_rating(library, card.id, "medium", now=now)
        assert library.streak.streak == 1

    def test_invalid_difficulty_changes_nothing(self, library, now):
        card = lib.add_card(library, "Q", "A", now=now)

        with pytest.raises(InvalidDifficulty):
            lib.record_rating(library, card.id, "again", now=now)

        assert card.stats.reps == 0
        assert lib.get_ratings(library).total == 0
        assert library.streak.daily_session_count == 0

    def test_unknown_card(self, library, now):
        with pytest.raises(ValueError):
            lib.record_rating(library, "missing", "easy", now=now)
