"""
Tests for the SQLAlchemy key-value store and library persistence.
"""

from core import library as lib
from core import storage
from core.review import Difficulty


class TestKeyValueStore:

    def test_set_get_delete(self, temp_database):
        storage.set_value("flashcards_streak", 3)
        assert storage.get_value("flashcards_streak") == 3

        storage.set_value("flashcards_streak", 4)
        assert storage.get_value("flashcards_streak") == 4

        assert storage.delete_value("flashcards_streak")
        assert not storage.delete_value("flashcards_streak")
        assert storage.get_value("flashcards_streak", "missing") == "missing"

    def test_structured_values(self, temp_database):
        storage.set_value("flashcards_preferences", {"provider": "groq", "force_ai": True})
        assert storage.get_value("flashcards_preferences") == {"provider": "groq", "force_ai": True}

    def test_list_keys_prefix_is_literal(self, temp_database):
        storage.set_values({"flashcards_a": 1, "flashcardsXb": 2, "other": 3})
        assert storage.list_keys("flashcards_") == ["flashcards_a"]

    def test_test_mode_database_name(self, temp_database):
        assert storage.get_engine().url.database.endswith("test_flashcards.db")

    def test_reset(self, temp_database):
        storage.set_value("flashcards_streak", 1)
        storage.reset_db()
        assert storage.list_keys() == []


class TestLibraryPersistence:

    def test_empty_store_loads_default_category(self, temp_database):
        library = storage.load_library()
        assert [c.name for c in library.categories] == ["General"]

    def test_round_trip(self, temp_database, now):
        library = lib.new_library()
        card = lib.add_card(library, "What is TCP?", "A protocol", now=now)
        lib.record_rating(library, card.id, Difficulty.EASY, now=now)
        biology = lib.add_category(library, "Biology")
        lib.add_card(library, "Cell?", "Unit of life", now=now)
        library.preferences.provider = "ollama"

        storage.save_library(library)
        loaded = storage.load_library(now=now)

        assert [c.to_dict() for c in loaded.categories] == [c.to_dict() for c in library.categories]
        assert loaded.selected_category_id == biology.id
        assert loaded.decks == library.decks
        assert loaded.ratings == library.ratings
        assert loaded.streak == library.streak
        assert loaded.preferences.provider == "ollama"

    def test_storage_keys(self, temp_database, now):
        library = lib.new_library()
        lib.add_card(library, "Q", "A", now=now)
        storage.save_library(library)

        category_id = library.selected_category_id
        assert set(storage.list_keys()) == {
            "flashcards_categories",
            "flashcards_selected_category",
            f"flashcards_{category_id}",
            f"flashcards_ratings_{category_id}",
            "flashcards_streak",
            "flashcards_last_date",
            "flashcards_session_count",
            "flashcards_preferences",
        }

    def test_deleted_category_keys_removed(self, temp_database):
        library = lib.new_library()
        biology = lib.add_category(library, "Biology")
        storage.save_library(library)

        lib.delete_category(library, biology.id)
        storage.save_library(library)

        assert f"flashcards_{biology.id}" not in storage.list_keys()
        assert f"flashcards_ratings_{biology.id}" not in storage.list_keys()

    def test_corrupt_entries_ignored(self, temp_database):
        storage.set_value("flashcards_categories", [{"name": "no id"}, {"id": "c1", "name": "Ok"}])
        storage.set_value("flashcards_c1", [{"question": "Q", "answer": "A"}, "junk"])

        library = storage.load_library()

        assert [c.id for c in library.categories] == ["c1"]
        assert [card.question for card in library.decks["c1"]] == ["Q"]

    def test_unreadable_card_fields_take_defaults(self, temp_database, now):
        storage.set_value("flashcards_categories", [{"id": "c1", "name": "Legacy"}])
        storage.set_value("flashcards_c1", [
            {"question": "Q1", "answer": "A1", "due": "tomorrow"},
            {"question": "Q2", "answer": "A2", "stats": {"ease": None, "interval": "x", "reps": None}},
        ])
        storage.set_value("flashcards_ratings_c1", {"easy": None, "hard": 2})

        library = storage.load_library(now=now)

        first, second = library.decks["c1"]
        assert first.due == now
        assert second.stats.to_dict() == {"ease": 2.5, "interval": 0, "reps": 0}
        assert library.ratings["c1"].to_dict() == {"easy": 0, "medium": 0, "hard": 2}
