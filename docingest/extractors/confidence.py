"""Confidence model: how much each extraction path is trusted."""

import math

PDF_TEXT_LAYER_CONFIDENCE = 0.95
WORD_CONFIDENCE = 0.98
TEXT_UTF8_CONFIDENCE = 1.0
TEXT_FALLBACK_CONFIDENCE = 0.9
UNAVAILABLE_CONFIDENCE = 0.0

CHARS_PER_PAGE = 3000


def clamp_confidence(value: float) -> float:
    """Force an externally reported score into [0, 1]; NaN counts as no confidence."""
    if math.isnan(value):
        return 0.0
    return min(1.0, max(0.0, value))


def estimate_pages(text: str) -> int:
    """Rough page estimate for formats without page boundaries."""
    return math.ceil(len(text) / CHARS_PER_PAGE)
