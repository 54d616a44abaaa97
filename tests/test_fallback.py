"""
Tests for the loose fallback parser.
"""

from core.extraction.fallback import parse_loose_cards


def pairs(candidates):
    return [(c.question, c.answer) for c in candidates]


class TestParseLooseCards:

    def test_markers_paired_across_other_lines(self):
        text = "Q: Capital of Peru\nsome note\nA: Lima"
        assert pairs(parse_loose_cards(text)) == [("Capital of Peru", "Lima")]

    def test_unanswered_question_marker_is_dropped(self):
        text = "Q: first\nQ: second\nA: answer two"
        assert pairs(parse_loose_cards(text)) == [("second", "answer two")]

    def test_loose_pairs_skip_marker_lines(self):
        text = "Q: one\nA: two\nkey= value"
        candidates = parse_loose_cards(text)
        assert [c.strategy for c in candidates] == ["loose_explicit", "loose_pair"]
        assert pairs(candidates)[1] == ("key", "value")

    def test_question_split_only_when_nothing_else_found(self):
        text = "term: definition\nWhy? because"
        assert [c.strategy for c in parse_loose_cards(text)] == ["loose_pair"]

    def test_question_split(self):
        assert pairs(parse_loose_cards("Why? because")) == [("Why?", "because")]

    def test_question_mark_at_end_of_line_is_not_split(self):
        assert parse_loose_cards("Why is that?") == []

    def test_empty(self):
        assert parse_loose_cards("") == []
