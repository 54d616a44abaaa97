"""
Tests for environment-driven configuration.
"""

import pytest

from core import config


class TestDatabaseUrl:

    def test_default(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.setenv("TEST_MODE", "false")
        assert config.get_database_url() == "sqlite:///flashcards.db"

    def test_test_mode_swaps_database_name(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://flashcards:pw@host:5432/flashcards")
        monkeypatch.setenv("TEST_MODE", "true")
        assert config.get_database_url() == "postgresql://flashcards:pw@host:5432/test_flashcards"

    def test_invalid_url(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "flashcards.db")
        with pytest.raises(ValueError):
            config.get_database_url()


class TestProvider:

    def test_default_provider(self, monkeypatch):
        monkeypatch.delenv("FLASHCARDS_AI_PROVIDER", raising=False)
        assert config.get_provider() == "gemini"

    def test_unknown_provider(self, monkeypatch):
        monkeypatch.setenv("FLASHCARDS_AI_PROVIDER", "skynet")
        with pytest.raises(ValueError):
            config.get_provider()

    def test_api_keys(self, monkeypatch):
        monkeypatch.setenv("GROQ_API_KEY", " gsk-123 ")
        assert config.get_api_key("groq") == "gsk-123"
        assert config.get_api_key("ollama") == ""


@pytest.mark.parametrize("value,expected", [("25", 25), ("0", 1), ("lots", 10)])
def test_card_count(monkeypatch, value, expected):
    monkeypatch.setenv("FLASHCARDS_CARD_COUNT", value)
    assert config.get_card_count() == expected
