"""
Import a notes file into the flashcard library.

Cards are extracted offline by default; --ai also tries the configured
remote provider (falling back to offline extraction on any failure).

Usage:
    python -m scripts.import_notes notes.md [--category "Networking"] [--dry-run]
    python -m scripts.import_notes notes.md --ai --provider groq
    cat notes.md | python -m scripts.import_notes -
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

from core import config, storage
from core import library as lib
from core.extraction import extract_cards
from core.generation import PROVIDERS, GenerationOutcome, generate_flashcards


def read_notes(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def import_notes(
    text: str,
    category_name: Optional[str] = None,
    use_ai: bool = False,
    provider: Optional[str] = None,
    count: Optional[int] = None,
    dry_run: bool = False
) -> GenerationOutcome:
    """
    Extract cards from `text` and add them to the stored library.

    Flat cards go to `category_name` (created if missing) or to the selected
    category; AI-categorized cards go to their own categories.
    """
    if use_ai:
        outcome = generate_flashcards(text, provider=provider, force_ai=True, count=count)
    else:
        outcome = GenerationOutcome(source="heuristic", cards=extract_cards(text))

    if outcome.fallback_reason:
        print(f"⚠ AI generation unavailable: {outcome.fallback_reason}")

    print(f"Found {outcome.card_count} cards ({outcome.source})")
    for draft in outcome.cards:
        print(f"  Q: {draft.question}")
        print(f"  A: {draft.answer}")
    for name, drafts in outcome.categories.items():
        print(f"  [{name}] {len(drafts)} cards")

    if dry_run:
        print("\n⚠ DRY RUN MODE - No changes were made to the library")
        return outcome

    library = storage.load_library()
    target = lib.selected_category(library)
    if category_name:
        target = lib.find_category_by_name(library, category_name) or lib.add_category(
            library, category_name, select=False
        )

    added = len(lib.add_drafts(library, outcome.cards, category_id=target.id))
    added += lib.merge_generated(library, replace(outcome, cards=[]))
    storage.save_library(library)

    print(f"\n✓ Added {added} cards (flat cards to '{target.name}')")
    return outcome


def main():
    parser = argparse.ArgumentParser(description="Import a notes file as flashcards")
    parser.add_argument(
        "path",
        help="Notes file to import ('-' reads stdin)"
    )
    parser.add_argument(
        "--category",
        help="Category for the cards (default: the selected category)"
    )
    parser.add_argument(
        "--ai",
        action="store_true",
        help="Use the remote AI provider (falls back to offline extraction)"
    )
    parser.add_argument(
        "--provider",
        choices=sorted(PROVIDERS),
        help="AI provider (default: FLASHCARDS_AI_PROVIDER)"
    )
    parser.add_argument(
        "--count",
        type=int,
        help="Number of cards to request from the AI provider"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the cards without saving them"
    )

    args = parser.parse_args()
    config.configure_logging()

    text = read_notes(args.path)
    if not text.strip():
        parser.error("notes are empty")

    import_notes(
        text,
        category_name=args.category,
        use_ai=args.ai,
        provider=args.provider,
        count=args.count,
        dry_run=args.dry_run
    )


if __name__ == "__main__":
    main()
