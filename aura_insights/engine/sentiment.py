"""Lexicon sentiment scorer for journal entries.

A placeholder for a real sentiment model: each lexicon word that occurs
anywhere in the text (case-insensitive substring) moves the score by one
step, and the result is clamped to [-1, 1].
"""

from __future__ import annotations

from dataclasses import dataclass

from aura_insights.engine.stats import clamp
from aura_insights.engine.thresholds import (
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    SENTIMENT_MAX,
    SENTIMENT_MIN,
    SENTIMENT_STEP,
)


@dataclass(frozen=True)
class SentimentScorer:
    """Scores free text against a fixed positive and negative word set."""

    positive_words: frozenset[str] = POSITIVE_WORDS
    negative_words: frozenset[str] = NEGATIVE_WORDS
    step: float = SENTIMENT_STEP

    def score(self, text: str) -> float:
        lowered = text.lower()
        pos = sum(1 for word in self.positive_words if word in lowered)
        neg = sum(1 for word in self.negative_words if word in lowered)
        raw = (pos - neg) * self.step
        return round(clamp(raw, SENTIMENT_MIN, SENTIMENT_MAX), 4)


_DEFAULT_SCORER = SentimentScorer()


def analyze_sentiment(text: str) -> float:
    """Return a sentiment score in [-1, 1]; text with no lexicon hits scores 0."""
    return _DEFAULT_SCORER.score(text)
