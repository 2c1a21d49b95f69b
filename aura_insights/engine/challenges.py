"""Challenge analytics: pure functions over a user's progress records."""

from __future__ import annotations

from typing import Any, Sequence

from aura_insights.engine.stats import round_half_up
from aura_insights.models.records import ChallengeProgress


def completion_rate(completed: int, total: int) -> int:
    """Whole-number percentage, 0 when there is nothing to complete."""
    if total <= 0:
        return 0
    return round_half_up(completed / total * 100)


def compute_challenge_insights(progress: Sequence[ChallengeProgress]) -> dict[str, Any]:
    completed = sum(1 for p in progress if p.completed)
    active = len(progress) - completed
    return {
        "total_challenges": len(progress),
        "completed": completed,
        "active": active,
        "completion_rate": completion_rate(completed, len(progress)),
    }
