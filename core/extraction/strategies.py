"""
Extraction Strategies

Five independent passes over the same immutable tuple of trimmed lines, in
priority order:

1. Explicit Q:/A: blocks
2. Delimiter pairs ("term - definition")
3. Parenthetical glosses ("term (gloss)")
4. Interrogative sentence followed by prose
5. Heading followed by a body

Strategies never remove lines from each other. They may overlap and produce
the same pair twice; overlaps are resolved by the deduplicator, where the
strategy order acts as the tie-break priority.
"""

from __future__ import annotations

from typing import Callable, Sequence

from core.extraction import line_classifier as lc
from core.extraction.types import ExtractionCandidate


Strategy = Callable[[Sequence[str]], list[ExtractionCandidate]]


def collect_answer(lines: Sequence[str], start: int, seed: str = "") -> tuple[str, int]:
    """
    Accumulate continuation lines into an answer.

    Starting at `start`, non-empty continuation lines are joined with single
    spaces. Collection stops at a blank line once some content exists (a
    non-empty `seed` counts as content) or at any boundary line (heading,
    delimiter pair, question/answer marker, interrogative sentence).

    Args:
        lines: Trimmed note lines
        start: Index of the first line to consider
        seed: Answer text already known (e.g. the right side of a pair)

    Returns:
        (answer_text, index_of_last_consumed_line); the index is start - 1
        when nothing was consumed.
    """
    parts = [seed] if seed else []
    last = start - 1

    for index in range(start, len(lines)):
        line = lines[index]
        if not line:
            if parts:
                break
            continue
        if not lc.is_continuation(line):
            break
        parts.append(line)
        last = index

    return " ".join(parts), last


# ---- 1. Explicit Q:/A: blocks ----

def extract_explicit_blocks(lines: Sequence[str]) -> list[ExtractionCandidate]:
    candidates = []
    index = 0

    while index < len(lines):
        question = lc.question_marker_text(lines[index])
        if question is None:
            index += 1
            continue

        answer_index = _find_answer_marker(lines, index + 1)
        if answer_index is not None:
            seed = lc.answer_marker_text(lines[answer_index]) or ""
            answer, last = collect_answer(lines, answer_index + 1, seed=seed)
            last = max(last, answer_index)
        else:
            answer, last = collect_answer(lines, index + 1)

        if answer:
            candidates.append(ExtractionCandidate(
                question=question,
                answer=answer,
                start=index,
                end=last,
                strategy="explicit",
            ))
        index = max(last, index) + 1

    return candidates


def _find_answer_marker(lines: Sequence[str], start: int):
    """Index of the nearest A: line before the next structural boundary."""
    for index in range(start, len(lines)):
        line = lines[index]
        if not line:
            continue
        if lc.is_answer_marker(line):
            return index
        if lc.is_boundary(line):
            return None
    return None


# ---- 2. Delimiter pairs ----

def extract_delimiter_pairs(lines: Sequence[str]) -> list[ExtractionCandidate]:
    candidates = []
    index = 0

    while index < len(lines):
        line = lines[index]
        pair = None
        if line and not lc.is_marker(line) and not lc.is_heading(line):
            pair = lc.match_delimiter_pair(line)
        if pair is None:
            index += 1
            continue

        question, right = pair
        answer, last = collect_answer(lines, index + 1, seed=right)
        candidates.append(ExtractionCandidate(
            question=question,
            answer=answer,
            start=index,
            end=max(last, index),
            strategy="delimiter",
        ))
        index = max(last, index) + 1

    return candidates


# ---- 3. Parenthetical glosses ----

def extract_parentheticals(lines: Sequence[str]) -> list[ExtractionCandidate]:
    candidates = []
    for index, line in enumerate(lines):
        if not line or lc.is_marker(line):
            continue
        match = lc.match_parenthetical(line)
        if match:
            term, gloss = match
            candidates.append(ExtractionCandidate(
                question=term,
                answer=gloss,
                start=index,
                end=index,
                strategy="parenthetical",
            ))
    return candidates


# ---- 4. Interrogative sentences ----

def extract_interrogatives(lines: Sequence[str]) -> list[ExtractionCandidate]:
    candidates = []
    index = 0

    while index < len(lines):
        line = lines[index]
        if not line or lc.is_marker(line) or lc.is_heading(line) or not lc.is_interrogative(line):
            index += 1
            continue

        question = lc.strip_bullet(line)
        answer, last = collect_answer(lines, index + 1)
        if answer and question:
            candidates.append(ExtractionCandidate(
                question=question,
                answer=answer,
                start=index,
                end=last,
                strategy="interrogative",
            ))
        index = max(last, index) + 1

    return candidates


# ---- 5. Headings with a body ----

def extract_headings(lines: Sequence[str]) -> list[ExtractionCandidate]:
    candidates = []
    index = 0

    while index < len(lines):
        title = lc.heading_text(lines[index]) if lines[index] else None
        if title is None:
            index += 1
            continue

        answer, last = collect_answer(lines, index + 1)
        if answer:
            candidates.append(ExtractionCandidate(
                question=title,
                answer=answer,
                start=index,
                end=last,
                strategy="heading",
            ))
        index = max(last, index) + 1

    return candidates


STRATEGIES: tuple[Strategy, ...] = (
    extract_explicit_blocks,
    extract_delimiter_pairs,
    extract_parentheticals,
    extract_interrogatives,
    extract_headings,
)


def run_strategies(lines: Sequence[str]) -> list[ExtractionCandidate]:
    """Concatenate every strategy's candidates, in priority order."""
    candidates = []
    for strategy in STRATEGIES:
        candidates.extend(strategy(lines))
    return candidates
