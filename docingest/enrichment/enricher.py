"""Word counting and a best-effort language guess.

The language tag scores the opening tokens against short stop-word lists.
It is a hint for downstream consumers, not language identification.
"""

from docingest.processor.models import Enrichment

DEFAULT_LANGUAGE = "en"
LANGUAGE_SAMPLE_TOKENS = 100

STOP_WORDS: dict[str, frozenset[str]] = {
    "en": frozenset({"the", "and", "or", "but", "in", "on", "at", "to", "for", "of"}),
    "es": frozenset({"el", "la", "y", "o", "pero", "en", "un", "una", "de", "que"}),
    "fr": frozenset({"le", "de", "et", "ou", "mais", "dans", "sur", "pour", "avec", "ce"}),
    "de": frozenset({"der", "die", "das", "und", "oder", "aber", "mit", "für", "nicht", "ist"}),
}


def count_words(text: str) -> int:
    """Count non-empty whitespace-delimited tokens."""
    return len(text.split())


def detect_language(text: str) -> str:
    """Return the language whose stop words score highest.

    A shared top score, or no score at all, falls back to DEFAULT_LANGUAGE.
    """
    tokens = text.lower().split()[:LANGUAGE_SAMPLE_TOKENS]
    scores = {
        language: sum(1 for token in tokens if token in words)
        for language, words in STOP_WORDS.items()
    }
    best_score = max(scores.values())
    leaders = [language for language, score in scores.items() if score == best_score]
    if best_score == 0 or len(leaders) > 1:
        return DEFAULT_LANGUAGE
    return leaders[0]


class MetadataEnricher:
    """Derives text metadata attached to every processed document."""

    def enrich(self, text: str) -> Enrichment:
        return Enrichment(word_count=count_words(text), language=detect_language(text))
