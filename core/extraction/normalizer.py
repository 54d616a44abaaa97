"""
Deduplicator / Normalizer

Folds extraction candidates into card drafts, then drafts into schedulable
flashcards.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Union

from core.extraction.constants import MAX_ANSWER_LENGTH
from core.extraction.types import CardDraft, ExtractionCandidate
from core.review.card_state import Flashcard, new_card


def deduplicate(
    candidates: Iterable[Union[ExtractionCandidate, CardDraft, dict]]
) -> list[CardDraft]:
    """
    Trim, filter, dedup and truncate candidates.

    - Both fields are trimmed; a candidate with an empty field is dropped.
    - The dedup key is the lowercased trimmed question; the first occurrence
      wins, so the order of the input acts as the tie-break priority.
    - Answers longer than MAX_ANSWER_LENGTH are truncated.

    Accepts extraction candidates, drafts, or plain {"question", "answer"}
    dicts (as returned by the remote generator).

    Returns:
        Drafts in first-seen order
    """
    seen = set()
    drafts = []

    for candidate in candidates:
        if isinstance(candidate, dict):
            question = candidate.get("question")
            answer = candidate.get("answer")
        else:
            question = candidate.question
            answer = candidate.answer

        question = str(question or "").strip()
        answer = str(answer or "").strip()
        if not question or not answer:
            continue

        key = question.lower()
        if key in seen:
            continue
        seen.add(key)

        if len(answer) > MAX_ANSWER_LENGTH:
            answer = answer[:MAX_ANSWER_LENGTH]

        drafts.append(CardDraft(question=question, answer=answer))

    return drafts


def normalize_flashcards(
    drafts: Iterable[CardDraft],
    now: Optional[datetime] = None
) -> list[Flashcard]:
    """Give each draft a fresh identity and the initial schedule (due now)."""
    return [new_card(draft.question, draft.answer, now=now) for draft in drafts]
