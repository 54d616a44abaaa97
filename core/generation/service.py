"""
Card generation policy: heuristic extraction first, remote generation when
it is worth it, and the heuristic result whenever the remote side fails.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Literal, Optional

from core import config
from core.errors import RemoteGenerationFailure
from core.extraction import CardDraft, deduplicate, extract_cards
from core.generation.client import complete_prompt, get_provider_settings
from core.generation.constants import (
    MIN_HEURISTIC_CARDS,
    SHORT_NOTE_THRESHOLD,
    format_prompt,
)
from core.generation.parsing import parse_generation_response
from core.generation.schemas import GenerationResult

logger = logging.getLogger(__name__)


# complete(prompt, provider, api_key) -> raw text
CompleteFn = Callable[[str, str, str], str]

GenerationSource = Literal["heuristic", "remote"]


@dataclass
class GenerationOutcome:
    """
    Cards produced for one note.

    `cards` go to the currently selected category; `categories` maps topic
    names (as returned by the remote generator) to their cards.
    """
    source: GenerationSource
    cards: list[CardDraft] = field(default_factory=list)
    categories: dict[str, list[CardDraft]] = field(default_factory=dict)
    fallback_reason: Optional[str] = None

    @property
    def card_count(self) -> int:
        return len(self.cards) + sum(len(cards) for cards in self.categories.values())


def generate_flashcards(
    text: str,
    provider: Optional[str] = None,
    api_key: Optional[str] = None,
    force_ai: bool = False,
    count: Optional[int] = None,
    complete: Optional[CompleteFn] = None,
) -> GenerationOutcome:
    """
    Turn a note into cards, choosing between heuristics and remote generation.

    Policy:
    1. Always run the heuristic extractor first
    2. No API key for a keyed provider -> heuristic result
    3. Short note (< 300 chars) with >= 2 heuristic cards and not forced
       -> heuristic result
    4. Otherwise ask the remote generator; on any failure fall back to the
       heuristic result and report why in `fallback_reason`

    Never raises for remote failures.

    Args:
        text: Raw note text
        provider: openai, groq, gemini or ollama (defaults to configuration)
        api_key: Provider key (defaults to configuration)
        force_ai: Skip the short-note shortcut and always try the remote side
        count: Number of cards to request (defaults to configuration)
        complete: Remote call, injectable for tests

    Returns:
        GenerationOutcome
    """
    heuristic = extract_cards(text)
    if not text or not text.strip():
        return GenerationOutcome(source="heuristic", cards=heuristic)

    provider = provider or config.get_provider()
    if api_key is None:
        api_key = config.get_api_key(provider)
    count = count or config.get_card_count()
    complete = complete or complete_prompt

    if get_provider_settings(provider)["needs_key"] and not api_key:
        reason = f"{provider.upper()} API key missing" if force_ai else None
        return GenerationOutcome(source="heuristic", cards=heuristic, fallback_reason=reason)

    if not force_ai and len(text) < SHORT_NOTE_THRESHOLD and len(heuristic) >= MIN_HEURISTIC_CARDS:
        return GenerationOutcome(source="heuristic", cards=heuristic)

    try:
        raw = complete(format_prompt(text, count), provider, api_key)
        result = parse_generation_response(raw)
        logger.debug("%s returned %d cards in %d categories", provider, result.card_count(), len(result.categories))
        outcome = outcome_from_result(result)
        if outcome.card_count == 0:
            raise RemoteGenerationFailure("AI returned no usable cards")
    except RemoteGenerationFailure as exc:
        logger.warning("Remote generation failed, using heuristic cards: %s", exc)
        return GenerationOutcome(source="heuristic", cards=heuristic, fallback_reason=str(exc))

    return outcome


def outcome_from_result(result: GenerationResult) -> GenerationOutcome:
    """Dedup and normalize a parsed remote result."""
    categories: dict[str, list[CardDraft]] = {}
    for category in result.categories:
        name = (category.name or "").strip() or "General"
        drafts = deduplicate(card.model_dump() for card in category.cards)
        if drafts:
            categories.setdefault(name, [])
            categories[name] = deduplicate([*categories[name], *drafts])

    cards = deduplicate(card.model_dump() for card in result.cards)
    return GenerationOutcome(source="remote", cards=cards, categories=categories)
