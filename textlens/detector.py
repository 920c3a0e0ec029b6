"""
Heuristic language detection.

Scores the eight supported languages from two kinds of evidence:

1. Lexical: the first tokens of the text are matched against a list of
   common words per language.
2. Character-level: presence of script ranges (Devanagari, Thai) or of
   language-typical diacritics anywhere in the text.

The language with the highest score wins. Ties go to the language declared
first in SUPPORTED_LANGUAGES, and text with no evidence at all is reported
as English.
"""

from typing import Dict, FrozenSet, Tuple
import unicodedata

from textlens.languages import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from textlens.utils.logging_setup import get_logger

logger = get_logger(__name__)

# Only the leading tokens are scored
MAX_TOKENS = 50

COMMON_WORDS: Dict[str, FrozenSet[str]] = {
    "en": frozenset([
        "the", "be", "to", "of", "and", "a", "in", "that", "have", "i",
        "it", "for", "not", "on", "with", "he", "as", "you", "do", "at",
    ]),
    "de": frozenset([
        "der", "die", "und", "in", "den", "von", "zu", "das", "mit", "sich",
        "des", "auf", "für", "ist", "im", "dem", "nicht", "ein", "eine", "als",
    ]),
    "fr": frozenset([
        "le", "de", "et", "à", "un", "il", "être", "en", "avoir", "que",
        "pour", "dans", "ce", "son", "une", "sur", "avec", "ne", "se",
    ]),
    "it": frozenset([
        "il", "di", "e", "la", "a", "un", "per", "è", "in", "una",
        "sono", "che", "si", "con", "non", "le", "da", "al", "i", "come",
    ]),
    "pt": frozenset([
        "o", "de", "e", "do", "da", "em", "um", "para", "é", "com",
        "não", "uma", "os", "no", "se", "na", "por", "mais", "as", "como",
    ]),
    "hi": frozenset([
        "है", "और", "के", "में", "को", "से", "का", "की", "यह", "वह",
        "हो", "नहीं", "तो", "भी", "या", "पर", "इस", "उस", "जो", "कि",
    ]),
    "es": frozenset([
        "el", "la", "de", "que", "y", "a", "en", "un", "ser", "se",
        "no", "haber", "por", "con", "su", "para", "como", "estar", "tener", "le",
    ]),
    "th": frozenset([
        "ที่", "เป็น", "และ", "ใน", "ของ", "จะ", "ได้", "ไม่", "มี", "ก็",
        "แล้ว", "กับ", "ให้", "ไป", "มา", "นี้", "นั้น", "เขา", "เธอ", "เรา",
    ]),
}

# Native-script words rarely collide with other lists, so they weigh more
WORD_WEIGHTS: Dict[str, int] = {
    "en": 2, "de": 2, "fr": 2, "it": 2, "pt": 2, "hi": 3, "es": 2, "th": 3,
}

SCRIPT_RANGES: Dict[str, Tuple[str, str]] = {
    "hi": ("\u0900", "\u097f"),  # Devanagari
    "th": ("\u0e00", "\u0e7f"),  # Thai
}
SCRIPT_BONUS = 10

DIACRITICS: Dict[str, FrozenSet[str]] = {
    "fr": frozenset("àâéèêëîïôùûüÿç"),
    "es": frozenset("áéíóúñü"),
    "pt": frozenset("áàâãéêíóôõúüç"),
    "it": frozenset("àèéìòù"),
    "de": frozenset("äöüß"),
}
DIACRITIC_BONUS: Dict[str, int] = {"fr": 3, "es": 3, "pt": 3, "it": 3, "de": 5}


def _is_word_char(char: str) -> bool:
    """
    Return True for letters, numbers and combining marks.

    Unlike a plain alphanumeric test, combining marks count as word
    characters, so Devanagari vowel signs and Thai tone marks are kept.
    """
    return unicodedata.category(char)[0] in ("L", "N", "M")


def _strip_token(token: str) -> str:
    """Strip leading and trailing non-word characters from a token."""
    start = 0
    end = len(token)
    while start < end and not _is_word_char(token[start]):
        start += 1
    while end > start and not _is_word_char(token[end - 1]):
        end -= 1
    return token[start:end]


def _add(scores: Dict[str, int], language: str, points: int) -> None:
    scores[language] = scores.get(language, 0) + points


def score_languages(text: str, max_tokens: int = MAX_TOKENS) -> Dict[str, int]:
    """
    Build the score table for a text.

    Only languages with at least one piece of evidence appear in the result,
    so every score is positive.

    Args:
        text: Input text
        max_tokens: Number of leading tokens used for word matching

    Returns:
        Mapping of language code to accumulated score

    Raises:
        ValueError: If max_tokens is less than 1
    """
    if max_tokens < 1:
        raise ValueError(f"max_tokens must be at least 1, got {max_tokens}")

    scores: Dict[str, int] = {}

    if not text.strip():
        return scores

    tokens = text.lower().split()

    # Lexical evidence
    for token in tokens[:max_tokens]:
        word = _strip_token(token)
        if not word:
            continue
        for language in SUPPORTED_LANGUAGES:
            if word in COMMON_WORDS[language]:
                _add(scores, language, WORD_WEIGHTS[language])

    # Character-level evidence, checked on the text as given
    chars = set(text)
    for language, (low, high) in SCRIPT_RANGES.items():
        if any(low <= char <= high for char in chars):
            _add(scores, language, SCRIPT_BONUS)

    for language, marks in DIACRITICS.items():
        if not marks.isdisjoint(chars):
            _add(scores, language, DIACRITIC_BONUS[language])

    return scores


def select_language(scores: Dict[str, int]) -> str:
    """
    Pick the best-scoring language.

    Ties are broken by the order of SUPPORTED_LANGUAGES.

    Args:
        scores: Score table from score_languages

    Returns:
        Winning language code, or the default language if scores is empty
    """
    best = DEFAULT_LANGUAGE
    best_score = 0
    for language in SUPPORTED_LANGUAGES:
        score = scores.get(language, 0)
        if score > best_score:
            best = language
            best_score = score
    return best


def detect_language(text: str, max_tokens: int = MAX_TOKENS) -> str:
    """
    Detect the language of a text.

    Never fails for any text: empty text or text without any evidence
    returns "en".

    Args:
        text: Input text
        max_tokens: Number of leading tokens used for word matching

    Returns:
        One of en, de, fr, it, pt, hi, es, th

    Raises:
        ValueError: If max_tokens is less than 1
    """
    scores = score_languages(text, max_tokens=max_tokens)
    language = select_language(scores)
    logger.debug(f"Detected language: {language} (scores: {scores})")
    return language
