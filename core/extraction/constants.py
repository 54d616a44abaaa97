"""
Extraction constants and line patterns.

All patterns are applied to lines that have already been trimmed.
"""

from __future__ import annotations

import re
from typing import Final

from core.review.constants import MAX_ANSWER_LENGTH  # noqa: F401


MAX_PAIR_LEFT_LENGTH: Final[int] = 120
MIN_GLOSS_LENGTH: Final[int] = 5      # Parenthetical gloss must be longer than 4 chars
MIN_INTERROGATIVE_LENGTH: Final[int] = 4


# ---- Primary line shapes ----

BULLET_PREFIX = r"(?:[-*+•]\s+|\d+[.)]\s+)?"

BULLET_RE = re.compile(r"^" + BULLET_PREFIX)

HEADING_RE = re.compile(r"^(?P<hashes>#{1,6})\s+(?P<text>.+)$")

QUESTION_MARKER_RE = re.compile(r"^(?:question|q)\s*:\s*(?P<text>.*)$", re.IGNORECASE)

ANSWER_MARKER_RE = re.compile(r"^(?:answer|a)\s*:\s*(?P<text>.*)$", re.IGNORECASE)

# <left> <delimiter> <right>
#   colon:              needs whitespace after it ("Term: definition")
#   hyphen, =, >:       need whitespace on both sides ("x = y", "a - b")
#   en/em dash, ->, =>: may be unspaced ("term—definition")
DELIMITER_PAIR_RE = re.compile(
    r"^" + BULLET_PREFIX
    + r"(?P<left>.{1," + str(MAX_PAIR_LEFT_LENGTH) + r"}?)"
    + r"(?P<delim>\s*(?:->|=>|[–—])\s*|\s+[-=>]\s+|:\s+)"
    + r"(?P<right>\S.*)$"
)

PARENTHETICAL_RE = re.compile(
    r"^" + BULLET_PREFIX
    + r"(?P<term>[^()]{1," + str(MAX_PAIR_LEFT_LENGTH) + r"}?)\s*"
    + r"\((?P<gloss>[^()]+)\)[.,;]?$"
)


# ---- Loose fallback patterns ----

LOOSE_PAIR_RE = re.compile(r"^(?P<left>.+?)\s*[:=\-–—]\s+(?P<right>.+)$")

TAB_PAIR_RE = re.compile(r"^(?P<left>[^\t]+)\t+(?P<right>[^\t].*)$")
