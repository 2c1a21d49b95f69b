"""Actionable suggestions derived from a productivity pattern."""

from __future__ import annotations

from aura_insights.engine.thresholds import WEEKDAY_NAMES
from aura_insights.models.insights import ProductivityPattern, Recommendation


def compute_recommendations(pattern: ProductivityPattern) -> list[Recommendation]:
    """Always two recommendations: peak time, then best day."""
    day_name = WEEKDAY_NAMES[pattern.peak_day_of_week % len(WEEKDAY_NAMES)]
    return [
        Recommendation(
            type="peak_time",
            message=(
                f"Your peak productivity is at {pattern.peak_hour}:00. "
                "Schedule important tasks during this time."
            ),
        ),
        Recommendation(
            type="best_day",
            message=(
                f"{day_name} is your most productive day. "
                "Plan deep work sessions accordingly."
            ),
        ),
    ]
