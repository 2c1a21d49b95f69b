"""Tunable constants for the insights engine.

The ladders below encode product intent; the computations in the sibling
modules only walk these tables. Band tables are ordered and evaluated top to
bottom with a strict comparison, the first match wins.
"""

from __future__ import annotations

from typing import Sequence

# ── Sentiment ────────────────────────────────────────────────────────────

POSITIVE_WORDS = frozenset({
    "happy", "grateful", "excited", "calm", "focused", "productive",
})
NEGATIVE_WORDS = frozenset({
    "stressed", "anxious", "tired", "sad", "frustrated",
})
SENTIMENT_STEP: float = 0.2
SENTIMENT_MIN: float = -1.0
SENTIMENT_MAX: float = 1.0

# ── Art style (sentiment > threshold) ────────────────────────────────────

ART_STYLE_BANDS: list[tuple[float, str]] = [
    (0.5, "vibrant"),
    (0.0, "calm"),
    (-0.5, "muted"),
]
ART_STYLE_DEFAULT = "dark"
ART_STYLES = ("vibrant", "calm", "muted", "dark")

# ── Mood (average sentiment > threshold) ─────────────────────────────────

MOOD_BANDS: list[tuple[float, str]] = [
    (0.3, "Positive"),
    (-0.3, "Neutral"),
]
MOOD_DEFAULT = "Needs Support"

# Population variance < threshold
STABILITY_BANDS: list[tuple[float, str]] = [
    (0.1, "very_stable"),
    (0.3, "stable"),
    (0.5, "somewhat_variable"),
]
STABILITY_DEFAULT = "highly_variable"
STABILITY_MIN_ENTRIES = 2

MOVING_AVERAGE_WINDOW = 7

TREND_RECENT_WINDOW = 5
TREND_OLDER_WINDOW = 5
TREND_DELTA: float = 0.2
TREND_MIN_ENTRIES = 2

# ── Aura score ───────────────────────────────────────────────────────────

AURA_FOCUS_WEIGHT: float = 40.0
AURA_FOCUS_TARGET_HOURS: float = 50.0
AURA_MOOD_WEIGHT: float = 35.0
AURA_CHALLENGE_WEIGHT: float = 25.0

# ── Weekly summary ───────────────────────────────────────────────────────

# Session count > threshold
CONSISTENCY_BANDS: list[tuple[int, str]] = [
    (7, "excellent"),
    (3, "momentum"),
]
CONSISTENCY_DEFAULT = "set_goals"

# ── Calendar ─────────────────────────────────────────────────────────────

WEEKDAY_NAMES = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)
LAST_DAYS_WINDOW = 7


def classify_above(value: float, bands: Sequence[tuple[float, str]], default: str) -> str:
    """Return the label of the first band whose threshold *value* exceeds."""
    for threshold, label in bands:
        if value > threshold:
            return label
    return default


def classify_below(value: float, bands: Sequence[tuple[float, str]], default: str) -> str:
    """Return the label of the first band whose threshold *value* is under."""
    for threshold, label in bands:
        if value < threshold:
            return label
    return default
