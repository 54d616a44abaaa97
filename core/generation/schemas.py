"""
Pydantic models for remote generation responses.

The collaborator returns either a flat card list or cards grouped by topic:

    {"cards": [{"question": "...", "answer": "..."}]}
    {"categories": [{"name": "Topic", "cards": [...]}]}
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GeneratedCard(BaseModel):
    """A single question/answer pair as returned by the model."""
    model_config = ConfigDict(extra="ignore")

    question: Optional[str] = Field(None, description="Front of the card")
    answer: Optional[str] = Field(None, description="Back of the card")


class GeneratedCategory(BaseModel):
    """A named group of generated cards."""
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(None, description="Topic name for the cards")
    cards: list[GeneratedCard] = Field(default_factory=list)


class GenerationResult(BaseModel):
    """Structured output from the remote generator."""
    model_config = ConfigDict(extra="ignore")

    cards: list[GeneratedCard] = Field(default_factory=list)
    categories: list[GeneratedCategory] = Field(default_factory=list)

    def card_count(self) -> int:
        return len(self.cards) + sum(len(category.cards) for category in self.categories)
