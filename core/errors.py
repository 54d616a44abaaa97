"""
Error types shared by the extraction, review and generation modules.
"""

from __future__ import annotations


class FlashcardError(Exception):
    """Base class for all flashcard errors."""


class MalformedInput(FlashcardError):
    """
    No recognizable question/answer structure was found in the notes.

    Not fatal: the extractor catches it and runs the loose fallback parser.
    """


class InvalidDifficulty(FlashcardError, ValueError):
    """A rating outside easy / medium / hard was passed to the scheduler."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid difficulty: {value!r} (expected easy, medium or hard)")


class RemoteGenerationFailure(FlashcardError):
    """
    The remote generation collaborator failed or returned unparsable content.

    Recovered locally by substituting the heuristic extractor's output.
    """
