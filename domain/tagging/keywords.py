"""Keyword extraction and keyword-set similarity."""

import re

# English-only; tokens of length <= 2 are dropped before this set is consulted.
STOP_WORDS: frozenset[str] = frozenset(
    {
        # articles, conjunctions, prepositions
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
        # question words and auxiliaries
        "what", "how", "why", "when", "where", "which", "who", "is", "are", "was", "were", "be",
        "have", "has", "had", "do", "does", "did", "will", "would", "could", "should", "may", "might",
        # pronouns and connectives
        "this", "that", "these", "those", "can", "if", "then", "than", "from", "up", "out", "as",
    }
)

MIN_KEYWORD_LENGTH = 3

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def extract_keywords(text: str | None) -> list[str]:
    """
    Normalize free text into its significant tokens.

    Lower-cases, turns punctuation into spaces, splits on whitespace, then drops short
    tokens and stop words. Duplicates are removed keeping the first occurrence.

    Examples:
        >>> extract_keywords("Solve the linear equation 2x + 3 = 7 for x")
        ['solve', 'linear', 'equation']
        >>> extract_keywords("")
        []
    """
    if not text:
        return []

    normalized = _NON_WORD.sub(" ", str(text).lower())
    keywords: list[str] = []
    seen: set[str] = set()
    for token in _WHITESPACE.split(normalized):
        if len(token) < MIN_KEYWORD_LENGTH or token in STOP_WORDS or token in seen:
            continue
        seen.add(token)
        keywords.append(token)
    return keywords


def similarity(text_a: str | None, text_b: str | None) -> float:
    """Jaccard similarity of the keyword sets of two texts (0.0 when both are keyword-free)."""
    words_a = set(extract_keywords(text_a))
    words_b = set(extract_keywords(text_b))

    union = words_a | words_b
    if not union:
        return 0.0
    return len(words_a & words_b) / len(union)
