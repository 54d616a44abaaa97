"""
Remote generation collaborator and the heuristic/remote policy.
"""

from core.generation.client import complete_prompt, get_client, get_provider_settings
from core.generation.constants import PROVIDERS, format_prompt
from core.generation.parsing import parse_generation_response, strip_code_fences
from core.generation.schemas import GeneratedCard, GeneratedCategory, GenerationResult
from core.generation.service import GenerationOutcome, generate_flashcards, outcome_from_result


__all__ = [
    "generate_flashcards",
    "GenerationOutcome",
    "outcome_from_result",
    "complete_prompt",
    "get_client",
    "get_provider_settings",
    "parse_generation_response",
    "strip_code_fences",
    "format_prompt",
    "PROVIDERS",
    "GeneratedCard",
    "GeneratedCategory",
    "GenerationResult",
]
