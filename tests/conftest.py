import os
from datetime import datetime, timezone

import pytest

# Set test environment variables
os.environ["TEST_MODE"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["FLASHCARDS_AI_PROVIDER"] = "gemini"


@pytest.fixture
def now():
    """Fixed review clock (UTC)."""
    return datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def temp_database(tmp_path, monkeypatch):
    """Point the store at a fresh SQLite file for one test."""
    from core import storage

    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'flashcards.db'}")
    storage.init_db()
    yield tmp_path
    storage.dispose_engines()
