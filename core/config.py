"""
Environment-driven configuration.

Values are read from the process environment (and a local .env file) on
every call, so tests can monkeypatch them freely.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


DEFAULT_DATABASE_URL = "sqlite:///flashcards.db"
DEFAULT_PROVIDER = "gemini"
DEFAULT_OLLAMA_MODEL = "llama3"
DEFAULT_CARD_COUNT = 10

PROVIDER_KEY_ENV = {
    "openai": "OPENAI_API_KEY",
    "gemini": "GEMINI_API_KEY",
    "groq": "GROQ_API_KEY",
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def is_test_mode() -> bool:
    """Check if running in test mode."""
    return os.getenv("TEST_MODE", "false").lower() == "true"


def get_database_url() -> str:
    """
    Get the database URL from environment variables.

    In test mode the 'flashcards' database name is swapped for
    'test_flashcards', for both SQLite files and server databases.

    Raises:
        ValueError: If DATABASE_URL is set but is not a SQLAlchemy URL
    """
    url = os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL
    if "://" not in url:
        raise ValueError(
            f"DATABASE_URL must be a SQLAlchemy connection string "
            f"(e.g. sqlite:///flashcards.db), got: {url!r}"
        )

    if is_test_mode() and "test_flashcards" not in url:
        # Swap only the last occurrence (the database name, not the user)
        head, sep, tail = url.rpartition("flashcards")
        if sep:
            return f"{head}test_flashcards{tail}"

    return url


def get_provider() -> str:
    """Get the configured remote generation provider."""
    provider = os.getenv("FLASHCARDS_AI_PROVIDER", DEFAULT_PROVIDER).strip().lower()
    if provider not in PROVIDER_KEY_ENV and provider != "ollama":
        raise ValueError(f"Unknown AI provider: {provider!r}")
    return provider


def get_api_key(provider: str) -> str:
    """
    Get the API key for a provider ('' when not configured).

    Ollama runs locally and never needs a key.
    """
    env_name = PROVIDER_KEY_ENV.get(provider)
    if env_name is None:
        return ""
    return os.getenv(env_name, "").strip()


def get_ollama_model() -> str:
    return os.getenv("OLLAMA_MODEL", DEFAULT_OLLAMA_MODEL)


def get_ollama_base_url() -> str:
    return os.getenv("OLLAMA_BASE_URL", "http://localhost:11434/v1")


def get_card_count() -> int:
    """Number of cards requested from the remote generator."""
    try:
        return max(1, int(os.getenv("FLASHCARDS_CARD_COUNT", DEFAULT_CARD_COUNT)))
    except ValueError:
        return DEFAULT_CARD_COUNT


def configure_logging() -> None:
    """Configure root logging from LOG_LEVEL (default INFO)."""
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
