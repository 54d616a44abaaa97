"""
Tests for the line classifier predicates.
"""

import pytest

from core.extraction import line_classifier as lc
from core.extraction.line_classifier import LineShape


class TestSplitLines:

    def test_lines_are_trimmed_and_blanks_kept(self):
        assert lc.split_lines("  a \n\n b") == ("a", "", "b")

    def test_empty_text(self):
        assert lc.split_lines("") == ()

    def test_windows_line_endings(self):
        assert lc.split_lines("a\r\nb") == ("a", "b")


class TestHeadings:

    def test_markdown_heading(self):
        assert lc.heading_text("# Photosynthesis") == "Photosynthesis"

    def test_closing_hashes_removed(self):
        assert lc.heading_text("## Title ##") == "Title"

    def test_hashtag_is_not_heading(self):
        assert not lc.is_heading("#hashtag")

    def test_seven_hashes_is_not_heading(self):
        assert not lc.is_heading("####### too deep")


class TestMarkers:

    def test_question_marker_variants(self):
        assert lc.question_marker_text("Q: What is TCP?") == "What is TCP?"
        assert lc.question_marker_text("question: foo") == "foo"
        assert lc.question_marker_text("q : bar") == "bar"

    def test_bare_marker_counts(self):
        assert lc.question_marker_text("Q:") == ""
        assert lc.is_question_marker("Q:")

    def test_answer_marker(self):
        assert lc.answer_marker_text("A: A reliable protocol.") == "A reliable protocol."
        assert lc.is_answer_marker("Answer: yes")

    def test_words_starting_with_q_or_a_are_not_markers(self):
        assert not lc.is_marker("Quantum: small")
        assert not lc.is_marker("Area: length times width")


class TestDelimiterPairs:

    def test_colon_pair(self):
        assert lc.match_delimiter_pair("Mitochondria: powerhouse of the cell") == (
            "Mitochondria", "powerhouse of the cell"
        )

    def test_spaced_hyphen_pair(self):
        assert lc.match_delimiter_pair("TCP - Transmission Control Protocol") == (
            "TCP", "Transmission Control Protocol"
        )

    def test_arrow_pair(self):
        assert lc.match_delimiter_pair("Paris -> capital of France") == ("Paris", "capital of France")

    def test_em_dash_pair(self):
        assert lc.match_delimiter_pair("Entropy—measure of disorder") == ("Entropy", "measure of disorder")

    def test_bullet_and_emphasis_stripped(self):
        assert lc.match_delimiter_pair("- **Term**: definition") == ("Term", "definition")

    def test_hyphenated_word_is_not_a_pair(self):
        assert not lc.is_delimiter_pair("a well-known fact")

    def test_url_is_not_a_pair(self):
        assert not lc.is_delimiter_pair("http://example.com")


class TestParentheticals:

    def test_term_with_gloss(self):
        assert lc.match_parenthetical("Osmosis (movement of water).") == ("Osmosis", "movement of water")

    def test_short_gloss_rejected(self):
        assert lc.match_parenthetical("ATP (fuel)") is None


class TestInterrogatives:

    def test_question_sentence(self):
        assert lc.is_interrogative("Why?")

    def test_too_short(self):
        assert not lc.is_interrogative("Ok?")

    def test_question_mark_must_end_line(self):
        assert not lc.is_interrogative("Is it? yes")

    @pytest.mark.parametrize("line,expected", [
        ("1. What is DNA?", "What is DNA?"),
        ("2) Why?", "Why?"),
        ("* Where?", "Where?"),
        ("What is RNA?", "What is RNA?"),
    ])
    def test_strip_bullet(self, line, expected):
        assert lc.strip_bullet(line) == expected


class TestClassifyLine:

    def test_plain_prose_is_continuation(self):
        assert lc.classify_line("Plants need light.") == frozenset({LineShape.CONTINUATION})

    def test_blank_line_has_no_shape(self):
        assert lc.classify_line("   ") == frozenset()

    def test_line_can_match_several_shapes(self):
        shapes = lc.classify_line("# What is it?")
        assert LineShape.HEADING in shapes
        assert LineShape.INTERROGATIVE in shapes
        assert LineShape.CONTINUATION not in shapes

    def test_parenthetical_is_also_continuation(self):
        shapes = lc.classify_line("Osmosis (movement of water)")
        assert shapes == frozenset({LineShape.PARENTHETICAL, LineShape.CONTINUATION})
