"""Mood analytics over journal sentiment scores.

Ordering matters for two computations and is checked rather than guessed:

* ``compute_mood_trends`` wants entries oldest first (chronological).
* ``compute_short_term_trend`` wants entries most recent first.
"""

from __future__ import annotations

import logging
import statistics
from typing import Any, Sequence

from aura_insights.engine.stats import mean
from aura_insights.engine.thresholds import (
    MOOD_BANDS,
    MOOD_DEFAULT,
    MOVING_AVERAGE_WINDOW,
    STABILITY_BANDS,
    STABILITY_DEFAULT,
    STABILITY_MIN_ENTRIES,
    TREND_DELTA,
    TREND_MIN_ENTRIES,
    TREND_OLDER_WINDOW,
    TREND_RECENT_WINDOW,
    classify_above,
    classify_below,
)
from aura_insights.models.insights import MoodTrendPoint
from aura_insights.models.records import JournalEntry

logger = logging.getLogger(__name__)


def _scores(entries: Sequence[JournalEntry]) -> list[float]:
    return [e.sentiment_score or 0.0 for e in entries]


def ensure_chronological(entries: Sequence[JournalEntry]) -> None:
    """Raise ValueError unless ``created_at`` never decreases."""
    for prev, curr in zip(entries, entries[1:]):
        if curr.created_dt < prev.created_dt:
            raise ValueError("journal entries must be ordered oldest first")


def ensure_newest_first(entries: Sequence[JournalEntry]) -> None:
    """Raise ValueError unless ``created_at`` never increases."""
    for prev, curr in zip(entries, entries[1:]):
        if curr.created_dt > prev.created_dt:
            raise ValueError("journal entries must be ordered most recent first")


def average_sentiment(entries: Sequence[JournalEntry]) -> float:
    return mean(_scores(entries))


def classify_mood(avg: float) -> str:
    """Positive above 0.3, Neutral above -0.3, otherwise Needs Support."""
    return classify_above(avg, MOOD_BANDS, MOOD_DEFAULT)


def compute_mood_insights(entries: Sequence[JournalEntry]) -> dict[str, Any]:
    avg = average_sentiment(entries)
    return {
        "total_entries": len(entries),
        "average_sentiment": round(avg, 2),
        "recent_mood": classify_mood(avg),
    }


def compute_mood_trends(entries: Sequence[JournalEntry]) -> list[MoodTrendPoint]:
    """Trailing moving average, one point per entry.

    Point *i* averages entries ``max(0, i - 6) .. i``.
    """
    ensure_chronological(entries)
    scores = _scores(entries)
    points = []
    for i, entry in enumerate(entries):
        window = scores[max(0, i - MOVING_AVERAGE_WINDOW + 1): i + 1]
        points.append(MoodTrendPoint(
            date=entry.created_at[:10],
            moving_average=round(mean(window), 2),
        ))
    return points


def mood_variance(entries: Sequence[JournalEntry]) -> float:
    """Population variance of the sentiment scores (0.0 below two entries)."""
    scores = _scores(entries)
    if len(scores) < 2:
        return 0.0
    return statistics.pvariance(scores)


def compute_mood_stability(entries: Sequence[JournalEntry]) -> str:
    if len(entries) < STABILITY_MIN_ENTRIES:
        return "stable"
    return classify_below(mood_variance(entries), STABILITY_BANDS, STABILITY_DEFAULT)


def compute_short_term_trend(entries: Sequence[JournalEntry]) -> str:
    """Compare the 5 most recent entries with the 5 before them.

    Without a full window of older entries the recent mean is compared with
    itself, which is always "stable".
    """
    if len(entries) < TREND_MIN_ENTRIES:
        return "stable"
    ensure_newest_first(entries)

    scores = _scores(entries)
    recent = scores[:TREND_RECENT_WINDOW]
    older = scores[TREND_RECENT_WINDOW:TREND_RECENT_WINDOW + TREND_OLDER_WINDOW]

    recent_avg = mean(recent)
    older_avg = mean(older) if len(older) >= TREND_OLDER_WINDOW else recent_avg

    if recent_avg > older_avg + TREND_DELTA:
        return "improving"
    if recent_avg < older_avg - TREND_DELTA:
        return "declining"
    return "stable"


def compute_journal_stats(entries: Sequence[JournalEntry]) -> dict[str, Any]:
    """Entry counts per month plus the short-term trend (newest first input)."""
    by_month: dict[str, int] = {}
    for e in entries:
        month = e.created_at[:7]
        by_month[month] = by_month.get(month, 0) + 1

    return {
        "total_entries": len(entries),
        "average_sentiment": round(average_sentiment(entries), 2),
        "by_month": dict(sorted(by_month.items())),
        "mood_trend": compute_short_term_trend(entries),
    }
