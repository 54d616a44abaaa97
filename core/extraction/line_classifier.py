"""
Line Classifier

Recognizes the shapes a single trimmed line of notes can take. A line may
match several shapes at once (a heading can also look like a delimiter pair),
so there is no single canonical label: each extraction strategy tests only
the predicates it needs.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from core.extraction.constants import (
    ANSWER_MARKER_RE,
    BULLET_RE,
    DELIMITER_PAIR_RE,
    HEADING_RE,
    MIN_GLOSS_LENGTH,
    MIN_INTERROGATIVE_LENGTH,
    PARENTHETICAL_RE,
    QUESTION_MARKER_RE,
)


class LineShape(str, Enum):
    """Shapes recognized by the classifier."""
    HEADING = "heading"
    QUESTION_MARKER = "question_marker"
    ANSWER_MARKER = "answer_marker"
    DELIMITER_PAIR = "delimiter_pair"
    PARENTHETICAL = "parenthetical"
    INTERROGATIVE = "interrogative"
    CONTINUATION = "continuation"


def split_lines(text: str) -> tuple[str, ...]:
    """Split note text into an immutable tuple of trimmed lines (blanks kept)."""
    if not text:
        return ()
    return tuple(line.strip() for line in text.splitlines())


# ---- Predicates ----

def heading_text(line: str) -> Optional[str]:
    """Heading text without the leading (and any closing) hashes, or None."""
    match = HEADING_RE.match(line)
    if not match:
        return None
    text = match.group("text").rstrip("#").strip()
    return text or None


def is_heading(line: str) -> bool:
    return heading_text(line) is not None


def question_marker_text(line: str) -> Optional[str]:
    """Text after a Q:/Question: marker, or None if the line has no marker."""
    match = QUESTION_MARKER_RE.match(line)
    return match.group("text").strip() if match else None


def is_question_marker(line: str) -> bool:
    return question_marker_text(line) is not None


def answer_marker_text(line: str) -> Optional[str]:
    """Text after an A:/Answer: marker, or None if the line has no marker."""
    match = ANSWER_MARKER_RE.match(line)
    return match.group("text").strip() if match else None


def is_answer_marker(line: str) -> bool:
    return answer_marker_text(line) is not None


def is_marker(line: str) -> bool:
    return is_question_marker(line) or is_answer_marker(line)


def match_delimiter_pair(line: str) -> Optional[tuple[str, str]]:
    """Split 'term - definition' style lines into (left, right)."""
    match = DELIMITER_PAIR_RE.match(line)
    if not match:
        return None
    left = _strip_emphasis(match.group("left"))
    right = match.group("right").strip()
    if not left or not right:
        return None
    return left, right


def is_delimiter_pair(line: str) -> bool:
    return match_delimiter_pair(line) is not None


def match_parenthetical(line: str) -> Optional[tuple[str, str]]:
    """Split 'term (gloss)' lines into (term, gloss); gloss must be > 4 chars."""
    match = PARENTHETICAL_RE.match(line)
    if not match:
        return None
    term = _strip_emphasis(match.group("term"))
    gloss = match.group("gloss").strip()
    if not term or len(gloss) < MIN_GLOSS_LENGTH:
        return None
    return term, gloss


def is_parenthetical(line: str) -> bool:
    return match_parenthetical(line) is not None


def strip_bullet(line: str) -> str:
    """Drop a leading list marker ("- ", "* ", "1. ", "2) ")."""
    return BULLET_RE.sub("", line, count=1).strip()


def is_interrogative(line: str) -> bool:
    return line.endswith("?") and len(line) >= MIN_INTERROGATIVE_LENGTH


def is_boundary(line: str) -> bool:
    """Lines that end answer collection."""
    return (
        is_heading(line)
        or is_question_marker(line)
        or is_answer_marker(line)
        or is_delimiter_pair(line)
        or is_interrogative(line)
    )


def is_continuation(line: str) -> bool:
    """Non-empty prose that can extend a pending answer."""
    return bool(line) and not is_boundary(line)


def classify_line(line: str) -> frozenset[LineShape]:
    """Return every shape the line matches (CONTINUATION when it is plain prose)."""
    line = line.strip()
    if not line:
        return frozenset()

    shapes = set()
    if is_heading(line):
        shapes.add(LineShape.HEADING)
    if is_question_marker(line):
        shapes.add(LineShape.QUESTION_MARKER)
    if is_answer_marker(line):
        shapes.add(LineShape.ANSWER_MARKER)
    if is_delimiter_pair(line):
        shapes.add(LineShape.DELIMITER_PAIR)
    if is_parenthetical(line):
        shapes.add(LineShape.PARENTHETICAL)
    if is_interrogative(line):
        shapes.add(LineShape.INTERROGATIVE)

    if not shapes & {
        LineShape.HEADING,
        LineShape.QUESTION_MARKER,
        LineShape.ANSWER_MARKER,
        LineShape.DELIMITER_PAIR,
        LineShape.INTERROGATIVE,
    }:
        shapes.add(LineShape.CONTINUATION)

    return frozenset(shapes)


def _strip_emphasis(text: str) -> str:
    """Drop surrounding whitespace and markdown bold/italic markers."""
    return text.strip().strip("*_").strip()
