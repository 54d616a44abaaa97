"""
Shared prompt fragments and provider configuration for remote generation.
"""

from __future__ import annotations

# ---- Generation Policy ----

SHORT_NOTE_THRESHOLD = 300   # characters; shorter notes may skip the remote call
MIN_HEURISTIC_CARDS = 2      # ...if the heuristic already found this many cards


# ---- Providers ----
# Every provider is reached through an OpenAI-compatible chat completions API.

PROVIDERS = {
    "openai": {
        "base_url": None,
        "model": "gpt-4o-mini",
        "json_mode": False,
        "needs_key": True,
    },
    "groq": {
        "base_url": "https://api.groq.com/openai/v1",
        "model": "llama-3.3-70b-versatile",
        "json_mode": True,
        "needs_key": True,
    },
    "gemini": {
        "base_url": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "model": "gemini-1.5-flash",
        "json_mode": True,
        "needs_key": True,
    },
    "ollama": {
        "base_url": None,  # resolved from OLLAMA_BASE_URL
        "model": None,     # resolved from OLLAMA_MODEL
        "json_mode": True,
        "needs_key": False,
    },
}


# ---- Prompts ----

SYSTEM_PROMPT = "You are an expert educator who turns study notes into concise flashcards."

GENERATION_PROMPT = """Extract exactly {count} important Q/A pairs from the notes into JSON.

Format: {{"categories":[{{"name":"Topic","cards":[{{"question":"...","answer":"..."}}]}}]}}

Guidelines:
- One fact per card; keep answers short (one or two sentences)
- Questions must be answerable from the notes alone
- Group cards under short topic names
- Return ONLY the JSON object, no commentary

NOTES: {notes}"""


def format_prompt(notes: str, count: int) -> str:
    """Fill the generation prompt with the note text and card count."""
    return GENERATION_PROMPT.format(count=count, notes=notes)
