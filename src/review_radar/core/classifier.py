"""
Keyword Classification Engine
=============================

Deterministic theme flags and sentiment scoring over raw review text.
No model required: every decision is a keyword test, so results are
reproducible and explainable.

Usage:
    signal = classify(text)
    score = score_sentiment(text)
    validation = validate_review_text(text)
"""

import logging

from review_radar.core.entities import (
    Sentiment,
    SentimentScore,
    TextValidation,
    ThemeSignal,
)
from review_radar.core.randomness import round_half_up

logger = logging.getLogger(__name__)


# =============================================================================
# THEME VOCABULARY
# =============================================================================
# Substring tests; any hit sets the flag. Flags are independent of each other.

DELIVERY_ISSUE_TERMS = ("delivery", "shipping", "slow")
QUALITY_ISSUE_TERMS = ("quality", "poor", "cheap")
SERVICE_ISSUE_TERMS = ("service", "support", "help")
POSITIVE_TONE_TERMS = ("excellent", "great", "amazing")

# =============================================================================
# SENTIMENT LEXICON
# =============================================================================
# Whole-token matches. Several words overlap with the theme vocabulary
# ("quality", "poor", "cheap", "slow"); both scorers count them.

POSITIVE_WORDS = frozenset({
    "good", "great", "excellent", "amazing", "perfect", "love", "satisfied",
    "happy", "quality", "fast", "beautiful", "recommend", "wonderful", "awesome",
})

NEGATIVE_WORDS = frozenset({
    "bad", "poor", "terrible", "disappointed", "slow", "delayed", "damaged",
    "cheap", "worst", "horrible", "hate", "angry", "frustrated",
})

MIN_TEXT_LENGTH = 50
MAX_TEXT_LENGTH = 50_000
MIN_WORD_COUNT = 10


def _contains_any(text: str, terms: tuple[str, ...]) -> bool:
    return any(term in text for term in terms)


def classify(text: str) -> ThemeSignal:
    """Derive theme flags from review text (case-insensitive)."""
    lowered = text.lower()
    return ThemeSignal(
        delivery_issue=_contains_any(lowered, DELIVERY_ISSUE_TERMS),
        quality_issue=_contains_any(lowered, QUALITY_ISSUE_TERMS),
        service_issue=_contains_any(lowered, SERVICE_ISSUE_TERMS),
        positive_tone=_contains_any(lowered, POSITIVE_TONE_TERMS),
    )


def count_sentiment_words(text: str) -> tuple[int, int, int]:
    """Count lexicon hits.

    Returns:
        Tuple of (positive_count, negative_count, total_words)
    """
    words = text.lower().split()
    positive = sum(1 for word in words if word in POSITIVE_WORDS)
    negative = sum(1 for word in words if word in NEGATIVE_WORDS)
    return positive, negative, len(words)


def score_sentiment(text: str) -> SentimentScore:
    """Quick sentiment preview based on lexicon counts."""
    positive, negative, _ = count_sentiment_words(text)
    total = positive + negative

    if total == 0:
        return SentimentScore(sentiment=Sentiment.NEUTRAL, confidence=50)

    if positive > negative:
        sentiment = Sentiment.POSITIVE
    elif negative > positive:
        sentiment = Sentiment.NEGATIVE
    else:
        sentiment = Sentiment.NEUTRAL

    confidence = round_half_up(max(positive, negative) / total * 100)
    return SentimentScore(sentiment=sentiment, confidence=confidence)


def validate_review_text(
    text: str,
    min_length: int = MIN_TEXT_LENGTH,
    max_length: int = MAX_TEXT_LENGTH,
    min_words: int = MIN_WORD_COUNT,
) -> TextValidation:
    """Check that text is long enough, short enough and wordy enough to analyze."""
    issues = []

    if len(text) < min_length:
        issues.append(
            f"Please provide more text for meaningful analysis (minimum {min_length} characters)"
        )

    if len(text) > max_length:
        issues.append(f"Text too long. Please limit to {max_length:,} characters")

    if len(text.split()) < min_words:
        issues.append("Please provide more content for comprehensive analysis")

    if issues:
        logger.debug("Review text rejected: %s", issues)

    return TextValidation(is_valid=not issues, issues=tuple(issues))
