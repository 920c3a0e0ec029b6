"""Supported language codes and their display names."""

from typing import Dict, Tuple

DEFAULT_LANGUAGE = "en"

# Declaration order doubles as the detection tie-break priority
SUPPORTED_LANGUAGES: Tuple[str, ...] = ("en", "de", "fr", "it", "pt", "hi", "es", "th")

LANGUAGE_NAMES: Dict[str, str] = {
    "en": "English",
    "de": "Deutsch",
    "fr": "Français",
    "it": "Italiano",
    "pt": "Português",
    "hi": "हिन्दी",
    "es": "Español",
    "th": "ไทย",
}


def is_supported(code: str) -> bool:
    """Return True if code is one of the supported language codes."""
    return code in LANGUAGE_NAMES


def language_name(code: str) -> str:
    """
    Get the native display name for a language code.

    Args:
        code: Language code (e.g. "de")

    Returns:
        Display name, or the upper-cased code if the language is unknown
    """
    return LANGUAGE_NAMES.get(code, code.upper())
