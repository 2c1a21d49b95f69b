"""Aura score synthesizer.

Weighted blend of the three analytics branches (focus 40, mood 35,
challenges 25). Each component is clamped to its own range before summing,
so the score is monotonic in every input and always within 0-100.
"""

from __future__ import annotations

from typing import Optional

from aura_insights.engine.stats import clamp, round_half_up
from aura_insights.engine.thresholds import (
    AURA_CHALLENGE_WEIGHT,
    AURA_FOCUS_TARGET_HOURS,
    AURA_FOCUS_WEIGHT,
    AURA_MOOD_WEIGHT,
)


def focus_component(total_focus_hours: float) -> float:
    # Full marks once the focus target is reached
    raw = total_focus_hours / AURA_FOCUS_TARGET_HOURS * AURA_FOCUS_WEIGHT
    return clamp(raw, 0.0, AURA_FOCUS_WEIGHT)


def mood_component(average_sentiment: float) -> float:
    # [-1, 1] → [0, weight]
    raw = (average_sentiment + 1) / 2 * AURA_MOOD_WEIGHT
    return clamp(raw, 0.0, AURA_MOOD_WEIGHT)


def challenge_component(completion_rate: float) -> float:
    raw = completion_rate / 100 * AURA_CHALLENGE_WEIGHT
    return clamp(raw, 0.0, AURA_CHALLENGE_WEIGHT)


def compute_aura_score(
    total_focus_hours: Optional[float] = 0.0,
    average_sentiment: Optional[float] = 0.0,
    completion_rate: Optional[float] = 0,
) -> int:
    """Composite wellness score in [0, 100]; missing inputs count as zero."""
    score = (
        focus_component(total_focus_hours or 0.0)
        + mood_component(average_sentiment or 0.0)
        + challenge_component(completion_rate or 0)
    )
    return round_half_up(score)
