"""Focus analytics: totals, daily rollups and productivity patterns.

All functions take the completed sessions the caller already selected
(window, limit) and never fail on an empty collection.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional, Sequence

from aura_insights.engine.stats import accumulate, peak_key, round_half_up
from aura_insights.engine.thresholds import LAST_DAYS_WINDOW
from aura_insights.models.insights import DailyFocusBucket, ProductivityPattern
from aura_insights.models.records import DEFAULT_CATEGORY, FocusSession

logger = logging.getLogger(__name__)


def total_minutes(sessions: Sequence[FocusSession]) -> int:
    return sum(s.minutes for s in sessions)


def average_session_length(sessions: Sequence[FocusSession]) -> int:
    """Mean minutes per session, rounded; 0 when there are no sessions."""
    if not sessions:
        return 0
    return round_half_up(total_minutes(sessions) / len(sessions))


def day_of_week(dt: datetime) -> int:
    """0=Sunday .. 6=Saturday."""
    return (dt.weekday() + 1) % 7


def _utc_date(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).date().isoformat()


def last_days_focus(
    sessions: Sequence[FocusSession],
    today: Optional[date] = None,
    days: int = LAST_DAYS_WINDOW,
) -> list[DailyFocusBucket]:
    """Minutes per calendar day for the *days* days ending today, oldest first.

    A session belongs to the day its ``start_time`` string starts with.
    """
    today = today or datetime.now(timezone.utc).date()
    buckets = []
    for offset in range(days - 1, -1, -1):
        day = (today - timedelta(days=offset)).isoformat()
        minutes = sum(s.minutes for s in sessions if s.start_time.startswith(day))
        buckets.append(DailyFocusBucket(date=day, minutes=minutes))
    return buckets


def compute_focus_insights(
    sessions: Sequence[FocusSession],
    today: Optional[date] = None,
) -> dict[str, Any]:
    """Totals and the last-7-days rollup for a user's completed sessions."""
    minutes = total_minutes(sessions)
    return {
        "total_minutes": minutes,
        "total_hours": f"{minutes / 60:.1f}",
        "total_sessions": len(sessions),
        "average_session_length": average_session_length(sessions),
        "last_7_days": [b.to_dict() for b in last_days_focus(sessions, today)],
    }


def compute_focus_stats(sessions: Sequence[FocusSession]) -> dict[str, Any]:
    """Period statistics broken down by category and by start date."""
    minutes = total_minutes(sessions)

    by_category: dict[str, int] = {}
    by_day: dict[str, int] = {}
    for s in sessions:
        cat = s.category or DEFAULT_CATEGORY
        by_category[cat] = by_category.get(cat, 0) + s.minutes
        day = _utc_date(s.start_dt)
        by_day[day] = by_day.get(day, 0) + s.minutes

    return {
        "total_hours": f"{minutes / 60:.2f}",
        "total_sessions": len(sessions),
        "average_session_length": average_session_length(sessions),
        "by_category": by_category,
        "by_day": dict(sorted(by_day.items())),
    }


def compute_productivity_patterns(sessions: Sequence[FocusSession]) -> ProductivityPattern:
    """Peak hour and weekday by accumulated focused minutes.

    Hours and weekdays come from each session's own timestamp. Ties go to
    the lowest hour / weekday index.
    """
    starts = [(s.start_dt, s.minutes) for s in sessions]
    by_hour = accumulate((dt.hour, m) for dt, m in starts)
    by_day = accumulate((day_of_week(dt), m) for dt, m in starts)

    pattern = ProductivityPattern(
        peak_hour=peak_key(by_hour),
        peak_day_of_week=peak_key(by_day),
        hourly_distribution=by_hour,
        daily_distribution=by_day,
    )
    logger.debug(
        "Productivity pattern over %d sessions: peak hour %d, peak day %d",
        len(sessions), pattern.peak_hour, pattern.peak_day_of_week,
    )
    return pattern
