"""
Tests for parsing remote generation replies.
"""

import pytest

from core.errors import RemoteGenerationFailure
from core.generation import parse_generation_response, strip_code_fences


class TestStripCodeFences:

    def test_json_fence(self):
        assert strip_code_fences('```json\n{"cards": []}\n```') == '{"cards": []}'

    def test_plain_fence(self):
        assert strip_code_fences('```{"a": 1}```') == '{"a": 1}'

    def test_none(self):
        assert strip_code_fences(None) == ""


class TestParseGenerationResponse:

    def test_flat_cards(self):
        result = parse_generation_response('```json\n{"cards": [{"question": "Q", "answer": "A"}]}\n```')
        assert result.categories == []
        assert result.cards[0].question == "Q"

    def test_categorized(self):
        raw = '{"categories": [{"name": "Bio", "cards": [{"question": "Q", "answer": "A"}]}]}'
        result = parse_generation_response(raw)
        assert result.categories[0].name == "Bio"
        assert result.card_count() == 1

    def test_json_wrapped_in_prose(self):
        raw = 'Here are your cards:\n{"cards": [{"question": "Q", "answer": "A"}]}\nEnjoy!'
        assert parse_generation_response(raw).card_count() == 1

    def test_null_fields_accepted(self):
        result = parse_generation_response('{"cards": [{"question": null, "answer": "A", "extra": 1}]}')
        assert result.cards[0].question is None

    @pytest.mark.parametrize("raw", [
        "",
        "```json\n```",
        "not json at all",
        '{"flashcards": []}',
        "[1, 2, 3]",
        '{"cards": "nope"}',
        '{"cards": [ broken',
    ])
    def test_failures(self, raw):
        with pytest.raises(RemoteGenerationFailure):
            parse_generation_response(raw)
