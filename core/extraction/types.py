"""
Value types produced by the extraction engine.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CardDraft:
    """A normalized question/answer pair that has no identity or schedule yet."""
    question: str
    answer: str

    def to_dict(self) -> dict:
        return {"question": self.question, "answer": self.answer}


@dataclass(frozen=True)
class ExtractionCandidate:
    """
    Unconfirmed (question, answer) pair produced by one strategy.

    start/end are the inclusive indices of the lines the strategy consumed.
    """
    question: str
    answer: str
    start: int
    end: int
    strategy: str
