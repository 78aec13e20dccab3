from __future__ import annotations

from .config import DEFAULT_ENGINE_CONFIG
from .models import SentimentLabel, TagSuggestion


def classify_sentiment(
    quality_suggestions: list[TagSuggestion],
    margin: float = DEFAULT_ENGINE_CONFIG.sentiment_margin,
) -> SentimentLabel:
    """
    Turn quality-category suggestions into a three-way label.

    A side wins only when its summed confidence beats the other by more than
    ``margin``; anything closer is neutral.
    """
    pos_score = sum(s.confidence for s in quality_suggestions if s.tag == "positive")
    neg_score = sum(s.confidence for s in quality_suggestions if s.tag == "negative")

    if pos_score > neg_score + margin:
        return SentimentLabel.positive
    if neg_score > pos_score + margin:
        return SentimentLabel.negative
    return SentimentLabel.neutral
