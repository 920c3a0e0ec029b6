"""Tests for text statistics."""

import json
import pytest
from pathlib import Path
import sys

from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).parent.parent))

from textlens.stats import (
    EMPTY_PAYLOAD,
    TextStats,
    count_sentences,
    get_text_stats,
    get_text_stats_json,
    parse_text_stats,
    stats_to_json,
)


class TestGetTextStats:
    """Test computing statistics."""

    def test_basic_sentence(self):
        """Test counts for a short English text."""
        stats = get_text_stats("Hello world. How are you?")

        assert stats.word_count == 5
        assert stats.character_count == 25
        assert stats.character_count_no_spaces == 21
        assert stats.sentence_count == 2
        # Punctuation is part of the word: 5 + 6 + 3 + 3 + 4
        assert stats.average_word_length == pytest.approx(21 / 5)

    def test_empty_text(self):
        """Test that empty text has an average of exactly 0.0."""
        stats = get_text_stats("")

        assert stats.word_count == 0
        assert stats.character_count == 0
        assert stats.sentence_count == 0
        assert stats.average_word_length == 0.0

    def test_whitespace_only(self):
        """Test whitespace-only text."""
        stats = get_text_stats(" \t\n ")

        assert stats.word_count == 0
        assert stats.character_count == 4
        assert stats.character_count_no_spaces == 0
        assert stats.average_word_length == 0.0

    def test_collapses_whitespace(self):
        """Test that runs of whitespace do not create empty words."""
        assert get_text_stats("a  b   c").word_count == 3

    def test_counts_code_points(self):
        """Test that characters are counted as code points, not bytes."""
        stats = get_text_stats("नमस्ते")

        assert stats.character_count == 6
        assert stats.word_count == 1
        assert stats.average_word_length == 6.0

    def test_information_separators_split_words(self):
        """Test that U+001C to U+001F count as whitespace."""
        stats = get_text_stats("a\x1cb\x1fc")

        assert stats.word_count == 3
        assert stats.character_count == 5
        assert stats.character_count_no_spaces == 3

    def test_immutable(self):
        """Test that the record cannot be modified."""
        stats = get_text_stats("Hello")
        with pytest.raises(ValidationError):
            stats.word_count = 10


class TestCountSentences:
    """Test sentence counting."""

    @pytest.mark.parametrize("text,expected", [
        ("", 0),
        ("No delimiter at all", 1),
        ("One. Two! Three?", 3),
        ("Wait... what?! Really", 3),
        ("...", 0),
        ("Trailing delimiter.", 1),
        (" . ! ? ", 0),
    ])
    def test_sentence_counts(self, text, expected):
        """Test that empty segments are never counted."""
        assert count_sentences(text) == expected


class TestSerialization:
    """Test the JSON payload."""

    def test_camel_case_payload(self):
        """Test the exact payload format."""
        payload = get_text_stats_json("Hello world. How are you?")

        assert payload == (
            '{"wordCount":5,"characterCount":25,"characterCountNoSpaces":21,'
            '"sentenceCount":2,"averageWordLength":4.2}'
        )

    def test_empty_text_payload(self):
        """Test that zero values are still serialized."""
        data = json.loads(get_text_stats_json(""))

        assert data["wordCount"] == 0
        assert data["averageWordLength"] == 0.0
        assert isinstance(data["averageWordLength"], float)

    def test_failure_degrades_to_empty_payload(self):
        """Test that a serialization error yields an empty payload."""

        class Unserializable:
            def model_dump_json(self, **kwargs):
                raise ValueError("cannot serialize")

        assert stats_to_json(Unserializable()) == EMPTY_PAYLOAD


class TestParseTextStats:
    """Test parsing payloads back into records."""

    def test_round_trip(self):
        """Test that a payload parses back into an equal record."""
        stats = get_text_stats("Ceci est un test. Vraiment!")
        assert parse_text_stats(stats_to_json(stats)) == stats

    def test_empty_payload_is_none(self):
        """Test that the failure payload is distinguishable."""
        assert parse_text_stats(EMPTY_PAYLOAD) is None

    @pytest.mark.parametrize("payload", [
        "",
        "not json",
        "[]",
        '{"wordCount": 1}',
        '{"wordCount":"x","characterCount":1,"characterCountNoSpaces":1,'
        '"sentenceCount":1,"averageWordLength":1.0}',
        '{"wordCount":"5","characterCount":"25","characterCountNoSpaces":21,'
        '"sentenceCount":2,"averageWordLength":"4.2"}',
        '{"wordCount":5,"characterCount":25,"characterCountNoSpaces":21,'
        '"sentenceCount":true,"averageWordLength":4.2}',
    ])
    def test_malformed_payload_is_none(self, payload):
        """Test that malformed payloads are rejected."""
        assert parse_text_stats(payload) is None

    def test_all_zero_record_is_valid(self):
        """Test that a real all-zero record is not treated as a failure."""
        parsed = parse_text_stats(get_text_stats_json(""))

        assert parsed is not None
        assert parsed.word_count == 0


def test_text_stats_accepts_field_names():
    """Test building a record with snake_case names."""
    stats = TextStats(
        word_count=1,
        character_count=3,
        character_count_no_spaces=3,
        sentence_count=1,
        average_word_length=3.0,
    )
    assert stats.model_dump(by_alias=True)["characterCountNoSpaces"] == 3
