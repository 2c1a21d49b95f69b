"""Report assembly: joins the analytics branches for one snapshot.

Builders are pure: the snapshot and ``now`` come in, a report model goes
out. Fetching lives in ``aura_insights.service``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from aura_insights.engine.aura import compute_aura_score
from aura_insights.engine.challenges import compute_challenge_insights
from aura_insights.engine.focus import (
    compute_focus_insights,
    compute_focus_stats,
    compute_productivity_patterns,
    total_minutes,
)
from aura_insights.engine.mood import (
    average_sentiment,
    compute_journal_stats,
    compute_mood_insights,
    compute_mood_stability,
    compute_mood_trends,
)
from aura_insights.engine.recommendations import compute_recommendations
from aura_insights.engine.summary import compute_weekly_summary
from aura_insights.models.reports import (
    DashboardReport,
    FocusStatsReport,
    JournalStatsReport,
    MoodTrendReport,
    PatternDetail,
    ProductivityReport,
    ProfileSummary,
    WeeklySummaryReport,
)
from aura_insights.store.snapshot import RecordSnapshot

logger = logging.getLogger(__name__)

NOT_ENOUGH_SESSIONS = "Not enough data yet. Complete more focus sessions to see patterns."
NO_JOURNAL_ENTRIES = "No journal entries found"


def _now(now: Optional[datetime]) -> datetime:
    return now or datetime.now(timezone.utc)


def build_dashboard(snapshot: RecordSnapshot, now: Optional[datetime] = None) -> DashboardReport:
    """Aura score plus focus, mood and challenge insights.

    Expects the recent sessions and the recent journal entries (newest first).
    """
    now = _now(now)
    sessions = snapshot.focus_sessions
    entries = snapshot.journal_entries

    focus = compute_focus_insights(sessions, today=now.date())
    journal = compute_mood_insights(entries)
    challenges = compute_challenge_insights(snapshot.challenge_progress)

    aura = compute_aura_score(
        total_focus_hours=total_minutes(sessions) / 60,
        average_sentiment=average_sentiment(entries),
        completion_rate=challenges["completion_rate"],
    )
    logger.debug("Dashboard for %s: aura %d", snapshot.user_id, aura)

    profile = snapshot.profile
    return DashboardReport(
        aura_score=aura,
        focus=focus,
        journal=journal,
        challenges=challenges,
        profile=ProfileSummary(name=profile.name, total_focus_hours=profile.total_focus_hours),
        degraded=list(snapshot.degraded),
        generated_at=now.isoformat(),
    )


def build_weekly_summary(
    snapshot: RecordSnapshot,
    days: int = 7,
    now: Optional[datetime] = None,
) -> WeeklySummaryReport:
    now = _now(now)
    return WeeklySummaryReport(
        start_date=(now - timedelta(days=days)).isoformat(),
        end_date=now.isoformat(),
        summary=compute_weekly_summary(snapshot.focus_sessions, snapshot.journal_entries),
    )


def build_productivity_report(snapshot: RecordSnapshot, days: int = 30) -> ProductivityReport:
    sessions = snapshot.focus_sessions
    if not sessions:
        return ProductivityReport(message=NOT_ENOUGH_SESSIONS)

    pattern = compute_productivity_patterns(sessions)
    return ProductivityReport(
        period=f"last_{days}_days",
        total_sessions=len(sessions),
        patterns=PatternDetail(
            peak_productivity_hour=pattern.peak_hour,
            peak_productivity_day=pattern.peak_day_of_week,
            hourly_distribution=pattern.hourly_distribution,
            daily_distribution=pattern.daily_distribution,
        ),
        recommendations=[r.to_dict() for r in compute_recommendations(pattern)],
    )


def build_mood_trend_report(snapshot: RecordSnapshot, days: int = 30) -> MoodTrendReport:
    """Moving-average trend; expects journal entries oldest first."""
    entries = snapshot.journal_entries
    if not entries:
        return MoodTrendReport(message=NO_JOURNAL_ENTRIES)

    return MoodTrendReport(
        period=f"{days}_days",
        entries_analyzed=len(entries),
        trends=[p.to_dict() for p in compute_mood_trends(entries)],
        average_mood=round(average_sentiment(entries), 2),
        mood_stability=compute_mood_stability(entries),
    )


def build_focus_stats_report(snapshot: RecordSnapshot, period: str) -> FocusStatsReport:
    return FocusStatsReport(period=period, **compute_focus_stats(snapshot.focus_sessions))


def build_journal_stats_report(snapshot: RecordSnapshot) -> JournalStatsReport:
    """Expects journal entries newest first."""
    return JournalStatsReport(**compute_journal_stats(snapshot.journal_entries))
