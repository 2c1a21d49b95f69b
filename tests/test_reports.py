"""Tests for snapshot fetching, report assembly and the insights service."""

import time

import pytest

from aura_insights.engine.reports import (
    NO_JOURNAL_ENTRIES,
    NOT_ENOUGH_SESSIONS,
    build_dashboard,
    build_mood_trend_report,
    build_productivity_report,
)
from aura_insights.models.records import Profile
from aura_insights.scripts import report as report_cli
from aura_insights.scripts.seed_demo import seed
from aura_insights.service import InsightsService
from aura_insights.store.snapshot import RecordSnapshot, fetch_snapshot


class FailingStore:
    """Store whose journal and challenge fetches blow up."""

    def __init__(self, inner):
        self.inner = inner

    def fetch_focus_sessions(self, *args, **kwargs):
        return self.inner.fetch_focus_sessions(*args, **kwargs)

    def fetch_journal_entries(self, *args, **kwargs):
        raise ConnectionError("journal backend unavailable")

    def fetch_challenge_progress(self, user_id):
        raise RuntimeError("challenge backend error")

    def fetch_profile(self, user_id):
        return self.inner.fetch_profile(user_id)


class SlowStore(FailingStore):
    """Store whose challenge fetch outlasts the snapshot timeout."""

    def fetch_journal_entries(self, *args, **kwargs):
        return self.inner.fetch_journal_entries(*args, **kwargs)

    def fetch_challenge_progress(self, user_id):
        time.sleep(0.5)
        return self.inner.fetch_challenge_progress(user_id)


# ═══════════════════════════════════════════════════════════════════════════
# Pure report builders
# ═══════════════════════════════════════════════════════════════════════════


class TestReportBuilders:
    def test_empty_dashboard(self, frozen_now):
        report = build_dashboard(RecordSnapshot(user_id="u1"), now=frozen_now)
        assert report.aura_score == 18
        assert report.focus.total_hours == "0.0"
        assert report.journal.recent_mood == "Neutral"
        assert report.challenges.completion_rate == 0
        assert report.profile.total_focus_hours == 0.0
        assert report.generated_at == frozen_now.isoformat()

    def test_dashboard_joins_branches(self, make_session, make_entries, make_progress, frozen_now):
        snapshot = RecordSnapshot(
            user_id="user-1",
            focus_sessions=tuple(make_session(duration=300) for _ in range(10)),
            journal_entries=tuple(make_entries([1.0, 1.0])),
            challenge_progress=(make_progress(completed=True),),
            profile=Profile(user_id="user-1", name="Sam", total_focus_hours=50.0),
        )
        report = build_dashboard(snapshot, now=frozen_now)
        assert report.aura_score == 100
        assert report.focus.total_hours == "50.0"
        assert report.profile.name == "Sam"
        assert report.focus.last_7_days[-1].minutes == 3000

    def test_productivity_not_enough_data(self):
        report = build_productivity_report(RecordSnapshot(user_id="u1"))
        assert report.message == NOT_ENOUGH_SESSIONS
        assert report.recommendations == []
        assert report.patterns is None

    def test_productivity_report(self, make_session, frozen_now):
        sessions = (make_session(duration=50, start=frozen_now.replace(hour=10)),)
        report = build_productivity_report(RecordSnapshot(user_id="u1", focus_sessions=sessions))
        assert report.period == "last_30_days"
        assert report.patterns.peak_productivity_hour == 10
        assert [r.type for r in report.recommendations] == ["peak_time", "best_day"]

    def test_mood_trend_empty(self):
        report = build_mood_trend_report(RecordSnapshot(user_id="u1"))
        assert report.message == NO_JOURNAL_ENTRIES
        assert report.trends == []

    def test_mood_trend_report(self, make_entries):
        entries = tuple(make_entries([0.2, 0.2, 0.2], newest_first=False))
        report = build_mood_trend_report(RecordSnapshot(user_id="u1", journal_entries=entries), days=14)
        assert report.period == "14_days"
        assert report.entries_analyzed == 3
        assert report.average_mood == pytest.approx(0.2)
        assert report.mood_stability == "very_stable"


# ═══════════════════════════════════════════════════════════════════════════
# Snapshot fetching
# ═══════════════════════════════════════════════════════════════════════════


class TestFetchSnapshot:
    async def test_fetches_all_collections(self, store, make_session, make_progress, frozen_now):
        store.save_focus_session(make_session(duration=30))
        store.save_focus_session(make_session(completed=False))
        store.save_challenge_progress(make_progress())
        store.save_profile(Profile(user_id="user-1", name="Ada"))

        snapshot = await fetch_snapshot(store, "user-1")
        assert len(snapshot.focus_sessions) == 1
        assert len(snapshot.challenge_progress) == 1
        assert snapshot.profile.name == "Ada"
        assert snapshot.degraded == ()

    async def test_failed_fetch_degrades_to_empty(self, store, make_session):
        store.save_focus_session(make_session(duration=30))
        snapshot = await fetch_snapshot(FailingStore(store), "user-1")
        assert len(snapshot.focus_sessions) == 1
        assert snapshot.journal_entries == ()
        assert snapshot.challenge_progress == ()
        assert set(snapshot.degraded) == {"journal_entries", "challenge_progress"}

    async def test_slow_fetch_times_out_to_empty(self, store, make_progress):
        store.save_challenge_progress(make_progress(completed=True))
        snapshot = await fetch_snapshot(SlowStore(store), "user-1", timeout=0.05)
        assert snapshot.challenge_progress == ()
        assert snapshot.degraded == ("challenge_progress",)
        assert snapshot.profile.user_id == "user-1"

    async def test_degraded_dashboard_still_builds(self, store, frozen_now):
        service = InsightsService(FailingStore(store), now=frozen_now)
        report = await service.dashboard("user-1")
        assert report.challenges.total_challenges == 0
        assert "journal_entries" in report.degraded


# ═══════════════════════════════════════════════════════════════════════════
# Service over seeded demo data
# ═══════════════════════════════════════════════════════════════════════════


@pytest.fixture
def seeded(r, frozen_now):
    return seed("demo-user", r=r, now=frozen_now)


class TestInsightsService:
    async def test_dashboard(self, seeded, frozen_now):
        report = await InsightsService(seeded, now=frozen_now).dashboard("demo-user")
        assert report.focus.total_sessions == 10
        assert report.focus.total_minutes == 450
        assert report.challenges.completed == 1
        assert report.challenges.completion_rate == 33
        assert report.profile.total_focus_hours == pytest.approx(7.5)
        assert 0 <= report.aura_score <= 100

    async def test_weekly_summary(self, seeded, frozen_now):
        report = await InsightsService(seeded, now=frozen_now).weekly_summary("demo-user")
        # sessions started within the last 7 days
        assert "across 7 sessions" in report.summary
        assert report.end_date == frozen_now.isoformat()

    async def test_productivity_patterns(self, seeded, frozen_now):
        report = await InsightsService(seeded, now=frozen_now).productivity_patterns("demo-user")
        assert report.total_sessions == 10
        assert report.patterns.peak_productivity_hour == 9

    async def test_mood_trends(self, seeded, frozen_now):
        report = await InsightsService(seeded, now=frozen_now).mood_trends("demo-user", days=30)
        assert report.entries_analyzed == 6
        dates = [p.date for p in report.trends]
        assert dates == sorted(dates)

    async def test_focus_stats(self, seeded, frozen_now):
        report = await InsightsService(seeded, now=frozen_now).focus_stats("demo-user", "month")
        assert report.total_sessions == 10
        assert report.by_category["Work"] == 245

    async def test_focus_stats_rejects_unknown_period(self, seeded, frozen_now):
        with pytest.raises(ValueError):
            await InsightsService(seeded, now=frozen_now).focus_stats("demo-user", "decade")

    async def test_journal_stats(self, seeded, frozen_now):
        report = await InsightsService(seeded, now=frozen_now).journal_stats("demo-user")
        assert report.total_entries == 6
        assert report.mood_trend in ("improving", "declining", "stable")


class TestReportCli:
    async def test_run_report_returns_payload(self, seeded, frozen_now):
        args = report_cli.build_parser().parse_args(["dashboard", "--user", "demo-user"])
        payload = await report_cli.run_report(InsightsService(seeded, now=frozen_now), args)
        assert payload["focus"]["total_sessions"] == 10
        assert "aura_score" in payload

    def test_parser_rejects_unknown_report(self):
        with pytest.raises(SystemExit):
            report_cli.build_parser().parse_args(["nonsense", "--user", "u"])
