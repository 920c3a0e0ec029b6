"""Language-aware text normalization."""

# Scripts without case distinction: only surrounding whitespace is removed
UNCASED_LANGUAGES = frozenset(["hi", "th"])


def lowercase(text: str) -> str:
    """
    Lowercase text without locale rules.

    German ß is left as is and capital ẞ becomes ß; there is no
    special handling beyond the standard Unicode mapping.

    Args:
        text: Input text

    Returns:
        Lowercased text
    """
    return text.lower()


def normalize_text(text: str, language: str) -> str:
    """
    Normalize text for a language.

    Hindi and Thai text is trimmed. Every other code, including unknown
    ones, is lowercased (surrounding whitespace is kept).

    Args:
        text: Input text
        language: Language code, e.g. as returned by detect_language

    Returns:
        Normalized text
    """
    if language in UNCASED_LANGUAGES:
        return text.strip()
    return lowercase(text)
