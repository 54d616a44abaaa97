"""
Extraction entry point: note text -> ordered card drafts.

Pure and deterministic: the same text always yields the same drafts, and no
input (empty, whitespace, binary junk) raises.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from core.errors import MalformedInput
from core.extraction.fallback import parse_loose_cards
from core.extraction.line_classifier import split_lines
from core.extraction.normalizer import deduplicate, normalize_flashcards
from core.extraction.strategies import run_strategies
from core.extraction.types import CardDraft, ExtractionCandidate
from core.review.card_state import Flashcard

logger = logging.getLogger(__name__)


def extract_candidates(text: str) -> list[ExtractionCandidate]:
    """
    Run the five primary strategies over the note.

    Raises:
        MalformedInput: If no strategy recognized any structure
    """
    candidates = run_strategies(split_lines(text))
    if not candidates:
        raise MalformedInput("No recognizable question/answer structure")
    return candidates


def extract_cards(text: str) -> list[CardDraft]:
    """
    Extract question/answer drafts from free-form notes.

    The primary strategies run first; only when they find nothing at all
    does the loose fallback parser run. An empty result is a valid outcome
    (the caller may then ask the remote generator).

    Args:
        text: Raw note text

    Returns:
        Deduplicated drafts in source/priority order
    """
    if not text or not text.strip():
        return []

    try:
        candidates = extract_candidates(text)
    except MalformedInput as exc:
        logger.info("%s; running loose fallback parser", exc)
        candidates = parse_loose_cards(text)

    return deduplicate(candidates)


def build_flashcards(text: str, now: Optional[datetime] = None) -> list[Flashcard]:
    """Extract drafts and turn them into new, immediately due flashcards."""
    return normalize_flashcards(extract_cards(text), now=now)
