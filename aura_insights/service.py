"""Insights service: fetches a snapshot per report and hands it to the engine.

Mirrors the insight endpoints of the route layer: each method selects the
record window that endpoint uses, fetches concurrently, then builds the
report from the immutable snapshot.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from aura_insights.config.settings import (
    FOCUS_RECENT_LIMIT,
    JOURNAL_RECENT_LIMIT,
    MOOD_TREND_DAYS,
    PATTERN_WINDOW_DAYS,
    STATS_PERIOD_DAYS,
    WEEKLY_SUMMARY_DAYS,
)
from aura_insights.engine.reports import (
    build_dashboard,
    build_focus_stats_report,
    build_journal_stats_report,
    build_mood_trend_report,
    build_productivity_report,
    build_weekly_summary,
)
from aura_insights.models.reports import (
    DashboardReport,
    FocusStatsReport,
    JournalStatsReport,
    MoodTrendReport,
    ProductivityReport,
    WeeklySummaryReport,
)
from aura_insights.store.base import RecordStore
from aura_insights.store.snapshot import fetch_snapshot

logger = logging.getLogger(__name__)


class InsightsService:
    def __init__(self, store: RecordStore, now: Optional[datetime] = None):
        self.store = store
        self._fixed_now = now

    def now(self) -> datetime:
        return self._fixed_now or datetime.now(timezone.utc)

    async def dashboard(self, user_id: str) -> DashboardReport:
        snapshot = await fetch_snapshot(
            self.store, user_id,
            session_limit=FOCUS_RECENT_LIMIT,
            journal_limit=JOURNAL_RECENT_LIMIT,
            journal_newest_first=True,
        )
        if snapshot.degraded:
            logger.info("Dashboard for %s built from partial data: %s",
                        user_id, ", ".join(snapshot.degraded))
        return build_dashboard(snapshot, now=self.now())

    async def weekly_summary(self, user_id: str) -> WeeklySummaryReport:
        now = self.now()
        snapshot = await fetch_snapshot(
            self.store, user_id,
            since=now - timedelta(days=WEEKLY_SUMMARY_DAYS),
        )
        return build_weekly_summary(snapshot, days=WEEKLY_SUMMARY_DAYS, now=now)

    async def productivity_patterns(self, user_id: str) -> ProductivityReport:
        snapshot = await fetch_snapshot(
            self.store, user_id,
            since=self.now() - timedelta(days=PATTERN_WINDOW_DAYS),
        )
        return build_productivity_report(snapshot, days=PATTERN_WINDOW_DAYS)

    async def mood_trends(self, user_id: str, days: int = MOOD_TREND_DAYS) -> MoodTrendReport:
        snapshot = await fetch_snapshot(
            self.store, user_id,
            journal_since=self.now() - timedelta(days=days),
        )
        return build_mood_trend_report(snapshot, days=days)

    async def focus_stats(self, user_id: str, period: str = "week") -> FocusStatsReport:
        if period not in STATS_PERIOD_DAYS:
            raise ValueError(f"unknown period {period!r}; expected one of {sorted(STATS_PERIOD_DAYS)}")
        snapshot = await fetch_snapshot(
            self.store, user_id,
            since=self.now() - timedelta(days=STATS_PERIOD_DAYS[period]),
        )
        return build_focus_stats_report(snapshot, period)

    async def journal_stats(self, user_id: str) -> JournalStatsReport:
        snapshot = await fetch_snapshot(self.store, user_id, journal_newest_first=True)
        return build_journal_stats_report(snapshot)
