"""
Descriptive text statistics.

The statistics record crosses process boundaries as compact JSON with
camelCase keys:

    {"wordCount":5,"characterCount":25,"characterCountNoSpaces":21,
     "sentenceCount":2,"averageWordLength":4.2}
"""

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from textlens.utils.logging_setup import get_logger

logger = get_logger(__name__)

SENTENCE_DELIMITERS = re.compile(r"[.!?]")

# Returned when the record cannot be serialized
EMPTY_PAYLOAD = "{}"


class TextStats(BaseModel):
    """Word, character and sentence counts for one text."""

    model_config = ConfigDict(frozen=True, strict=True, alias_generator=to_camel, populate_by_name=True)

    word_count: int = Field(ge=0)
    character_count: int = Field(ge=0)
    character_count_no_spaces: int = Field(ge=0)
    sentence_count: int = Field(ge=0)
    average_word_length: float = Field(ge=0.0)


def count_sentences(text: str) -> int:
    """
    Count sentences delimited by '.', '!' or '?'.

    Segments that are empty after trimming are ignored, so repeated or
    trailing delimiters do not add sentences.
    """
    return sum(1 for segment in SENTENCE_DELIMITERS.split(text) if segment.strip())


def get_text_stats(text: str) -> TextStats:
    """
    Compute statistics for a text.

    Args:
        text: Input text

    Returns:
        TextStats record
    """
    words = text.split()
    word_count = len(words)
    total_word_length = sum(len(word) for word in words)

    return TextStats(
        word_count=word_count,
        character_count=len(text),
        character_count_no_spaces=sum(1 for char in text if not char.isspace()),
        sentence_count=count_sentences(text),
        average_word_length=total_word_length / word_count if word_count else 0.0,
    )


def stats_to_json(stats: TextStats) -> str:
    """
    Serialize a statistics record with camelCase keys.

    Args:
        stats: Record to serialize

    Returns:
        Compact JSON string, or "{}" if serialization fails
    """
    try:
        return stats.model_dump_json(by_alias=True)
    except Exception as e:
        logger.error(f"Failed to serialize text stats: {e}")
        return EMPTY_PAYLOAD


def get_text_stats_json(text: str) -> str:
    """Compute statistics for a text and serialize them."""
    return stats_to_json(get_text_stats(text))


def parse_text_stats(payload: str) -> Optional[TextStats]:
    """
    Parse a serialized statistics payload.

    The empty payload produced by a failed serialization does not validate,
    so callers can tell it apart from a real all-zero record.

    Args:
        payload: JSON string as produced by stats_to_json

    Returns:
        TextStats record, or None if the payload is missing fields or malformed
    """
    try:
        return TextStats.model_validate_json(payload)
    except ValidationError as e:
        logger.debug(f"Invalid text stats payload: {e.error_count()} error(s)")
        return None
