"""
Per-message analysis combining language detection and text statistics.

A chat host runs this on every incoming message: the detected language
selects the reply language, and the statistics are shown next to the
message, e.g. "Detected: DE | Words: 6 | Chars: 40".
"""

from typing import Any, Dict, Optional

from textlens.detector import MAX_TOKENS, detect_language
from textlens.stats import TextStats, get_text_stats_json, parse_text_stats
from textlens.utils.logging_setup import get_logger

logger = get_logger(__name__)


class MessageAnalysis:
    """Detected language and statistics for one message."""

    def __init__(self, language: str, stats: Optional[TextStats] = None):
        """
        Initialize an analysis result.

        Args:
            language: Detected language code
            stats: Text statistics, or None if they were unavailable
        """
        self.language = language
        self.stats = stats

    def __repr__(self) -> str:
        return f"MessageAnalysis(language={self.language!r}, stats={self.stats!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MessageAnalysis):
            return NotImplemented
        return self.language == other.language and self.stats == other.stats

    def to_dict(self) -> Dict[str, Any]:
        """Convert analysis to dictionary format with camelCase stats keys."""
        return {
            "language": self.language,
            "stats": self.stats.model_dump(by_alias=True) if self.stats else None,
        }


def analyze_message(text: str, max_tokens: int = MAX_TOKENS) -> MessageAnalysis:
    """
    Detect the language of a message and compute its statistics.

    Statistics go through their serialized payload, the same path a host
    across a process boundary uses, and are dropped if it does not validate.

    Args:
        text: Message text
        max_tokens: Number of leading tokens used for language detection

    Returns:
        MessageAnalysis
    """
    language = detect_language(text, max_tokens=max_tokens)
    stats = parse_text_stats(get_text_stats_json(text))
    if stats is None:
        logger.warning("Text statistics unavailable for message")
    return MessageAnalysis(language, stats)


def format_analysis(analysis: MessageAnalysis) -> str:
    """
    Format an analysis as a one-line summary.

    Args:
        analysis: Result of analyze_message

    Returns:
        Summary such as "Detected: EN | Words: 5 | Chars: 25"
    """
    summary = f"Detected: {analysis.language.upper()}"
    if analysis.stats is not None:
        summary += f" | Words: {analysis.stats.word_count} | Chars: {analysis.stats.character_count}"
    return summary
