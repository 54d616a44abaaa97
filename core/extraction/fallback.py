"""
Loose fallback parser.

Runs only when none of the five primary strategies found anything in the
whole note. It re-scans the text with simpler rules:

- explicit Q:/A: lines paired with the nearest following answer line
- single-character delimiter pairs ("term: definition", "term - definition")
- tab-separated two-column lines

and, if all of those come up empty, splits any line containing a question
mark into the question (up to the '?') and the rest of that line.
"""

from __future__ import annotations

from typing import Sequence

from core.extraction import line_classifier as lc
from core.extraction.constants import LOOSE_PAIR_RE, TAB_PAIR_RE
from core.extraction.types import ExtractionCandidate


def parse_loose_cards(text: str) -> list[ExtractionCandidate]:
    """Loosely parse note text into candidates (may be empty)."""
    lines = lc.split_lines(text)

    candidates = []
    candidates.extend(_pair_markers(lines))
    candidates.extend(_loose_pairs(lines))
    candidates.extend(_tab_pairs(lines))

    if not candidates:
        candidates.extend(_split_questions(lines))

    return candidates


def _pair_markers(lines: Sequence[str]) -> list[ExtractionCandidate]:
    candidates = []
    index = 0

    while index < len(lines):
        question = lc.question_marker_text(lines[index])
        if question is None:
            index += 1
            continue

        paired = False
        for answer_index in range(index + 1, len(lines)):
            line = lines[answer_index]
            if lc.is_question_marker(line):
                break
            answer = lc.answer_marker_text(line)
            if answer is not None:
                candidates.append(ExtractionCandidate(
                    question=question,
                    answer=answer,
                    start=index,
                    end=answer_index,
                    strategy="loose_explicit",
                ))
                index = answer_index + 1
                paired = True
                break

        if not paired:
            index += 1

    return candidates


def _loose_pairs(lines: Sequence[str]) -> list[ExtractionCandidate]:
    candidates = []
    for index, line in enumerate(lines):
        if not line or lc.is_marker(line):
            continue
        match = LOOSE_PAIR_RE.match(line)
        if match:
            candidates.append(ExtractionCandidate(
                question=match.group("left").strip(),
                answer=match.group("right").strip(),
                start=index,
                end=index,
                strategy="loose_pair",
            ))
    return candidates


def _tab_pairs(lines: Sequence[str]) -> list[ExtractionCandidate]:
    candidates = []
    for index, line in enumerate(lines):
        match = TAB_PAIR_RE.match(line)
        if match:
            candidates.append(ExtractionCandidate(
                question=match.group("left").strip(),
                answer=match.group("right").strip(),
                start=index,
                end=index,
                strategy="tab",
            ))
    return candidates


def _split_questions(lines: Sequence[str]) -> list[ExtractionCandidate]:
    candidates = []
    for index, line in enumerate(lines):
        question, mark, rest = line.partition("?")
        if not mark or not rest.strip():
            continue
        candidates.append(ExtractionCandidate(
            question=f"{question.strip()}?",
            answer=rest.strip(),
            start=index,
            end=index,
            strategy="question_split",
        ))
    return candidates
