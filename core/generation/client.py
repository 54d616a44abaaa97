"""
Remote generation client.

Every provider (OpenAI, Groq, Gemini, Ollama) is reached through the
`openai` package's OpenAI-compatible chat completions API. The core only
sends a prompt and receives raw text; it does not retry or rate-limit.
"""

from __future__ import annotations

import logging
from typing import Optional

from openai import OpenAI, OpenAIError

from core import config
from core.errors import RemoteGenerationFailure
from core.generation.constants import PROVIDERS, SYSTEM_PROMPT

logger = logging.getLogger(__name__)

# OpenAI clients, reused across calls (keyed by provider and API key)
_clients: dict[tuple[str, str], OpenAI] = {}


def get_provider_settings(provider: str) -> dict:
    """
    Resolve base URL and model for a provider.

    Raises:
        ValueError: If the provider is unknown
    """
    if provider not in PROVIDERS:
        raise ValueError(f"Unknown AI provider: {provider!r}")

    settings = dict(PROVIDERS[provider])
    if provider == "ollama":
        settings["base_url"] = config.get_ollama_base_url()
        settings["model"] = config.get_ollama_model()
    return settings


def get_client(provider: str, api_key: str) -> OpenAI:
    """Get or create the OpenAI client for a provider."""
    cache_key = (provider, api_key)
    if cache_key not in _clients:
        settings = get_provider_settings(provider)
        _clients[cache_key] = OpenAI(
            # Ollama ignores the key but the client requires one
            api_key=api_key or "ollama",
            base_url=settings["base_url"],
        )
    return _clients[cache_key]


def complete_prompt(
    prompt: str,
    provider: str,
    api_key: str,
    model: Optional[str] = None
) -> str:
    """
    Send a prompt to the provider and return the raw reply text.

    Args:
        prompt: Full user prompt
        provider: openai, groq, gemini or ollama
        api_key: Provider API key ('' for Ollama)
        model: Override the provider's default model

    Returns:
        Raw model output (may still contain code fences)

    Raises:
        RemoteGenerationFailure: If the request fails or the reply is empty
    """
    settings = get_provider_settings(provider)
    client = get_client(provider, api_key)

    request = {
        "model": model or settings["model"],
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ],
    }
    if settings["json_mode"]:
        request["response_format"] = {"type": "json_object"}

    try:
        completion = client.chat.completions.create(**request)
    except OpenAIError as exc:
        raise RemoteGenerationFailure(f"{provider} request failed: {exc}") from exc

    if not completion.choices:
        raise RemoteGenerationFailure("AI failed to return content.")

    content = completion.choices[0].message.content
    if not content:
        raise RemoteGenerationFailure("AI failed to return content.")

    logger.debug("%s returned %d characters", provider, len(content))
    return content
