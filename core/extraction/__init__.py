"""
Heuristic text-to-card extraction.

Quick start:
    from core import extraction

    drafts = extraction.extract_cards("Mitochondria: powerhouse of the cell")
    cards = extraction.normalize_flashcards(drafts)
"""

from core.extraction.extractor import (
    build_flashcards,
    extract_candidates,
    extract_cards,
)
from core.extraction.fallback import parse_loose_cards
from core.extraction.line_classifier import LineShape, classify_line, split_lines
from core.extraction.normalizer import deduplicate, normalize_flashcards
from core.extraction.strategies import STRATEGIES, collect_answer, run_strategies
from core.extraction.types import CardDraft, ExtractionCandidate


__all__ = [
    # Entry points
    "extract_cards",
    "extract_candidates",
    "build_flashcards",
    "parse_loose_cards",

    # Building blocks
    "LineShape",
    "classify_line",
    "split_lines",
    "collect_answer",
    "run_strategies",
    "STRATEGIES",
    "deduplicate",
    "normalize_flashcards",

    # Types
    "CardDraft",
    "ExtractionCandidate",
]
