"""Tests for focus analytics and productivity patterns."""

from datetime import datetime, timedelta, timezone

import pytest

from aura_insights.engine.focus import (
    compute_focus_insights,
    compute_focus_stats,
    compute_productivity_patterns,
    day_of_week,
    last_days_focus,
)
from aura_insights.engine.recommendations import compute_recommendations
from aura_insights.models.insights import ProductivityPattern


def _at(day, hour, minute=0):
    return datetime(2026, 2, day, hour, minute, tzinfo=timezone.utc)


class TestFocusInsights:
    def test_empty_sessions(self, frozen_now):
        result = compute_focus_insights([], today=frozen_now.date())
        assert result["total_hours"] == "0.0"
        assert result["total_sessions"] == 0
        assert result["average_session_length"] == 0
        assert result["total_minutes"] == 0
        assert len(result["last_7_days"]) == 7
        assert all(day["minutes"] == 0 for day in result["last_7_days"])

    def test_totals_and_average(self, make_session, frozen_now):
        sessions = [make_session(duration=d) for d in (60, 30, 90)]
        result = compute_focus_insights(sessions, today=frozen_now.date())
        assert result["total_minutes"] == 180
        assert result["average_session_length"] == 60
        assert result["total_hours"] == "3.0"
        assert result["total_sessions"] == 3

    def test_average_rounds_half_up(self, make_session):
        sessions = [make_session(duration=d) for d in (10, 11)]
        result = compute_focus_insights(sessions)
        assert result["average_session_length"] == 11

    def test_missing_duration_counts_as_zero(self, make_session):
        sessions = [make_session(duration=40), make_session(completed=False)]
        result = compute_focus_insights(sessions)
        assert result["total_minutes"] == 40


class TestLastDays:
    def test_window_is_oldest_to_newest(self, frozen_now):
        buckets = last_days_focus([], today=frozen_now.date())
        assert [b.date for b in buckets] == [
            "2026-02-09", "2026-02-10", "2026-02-11", "2026-02-12",
            "2026-02-13", "2026-02-14", "2026-02-15",
        ]

    def test_sessions_bucketed_by_start_date_prefix(self, make_session, frozen_now):
        sessions = [
            make_session(duration=30, start=_at(15, 8)),
            make_session(duration=45, start=_at(15, 17)),
            make_session(duration=60, start=_at(13, 9)),
            make_session(duration=99, start=_at(1, 9)),   # outside window
        ]
        buckets = last_days_focus(sessions, today=frozen_now.date())
        by_date = {b.date: b.minutes for b in buckets}
        assert by_date["2026-02-15"] == 75
        assert by_date["2026-02-13"] == 60
        assert sum(by_date.values()) == 135

    def test_bucket_hours_string(self, make_session, frozen_now):
        buckets = last_days_focus([make_session(duration=90)], today=frozen_now.date())
        assert buckets[-1].to_dict() == {"date": "2026-02-15", "minutes": 90, "hours": "1.5"}


class TestProductivityPatterns:
    def test_empty_sessions(self):
        pattern = compute_productivity_patterns([])
        assert pattern.peak_hour == 0
        assert pattern.peak_day_of_week == 0
        assert pattern.hourly_distribution == {}
        assert pattern.daily_distribution == {}

    def test_peak_hour_by_accumulated_minutes(self, make_session):
        sessions = [
            make_session(duration=30, start=_at(10, 9)),
            make_session(duration=30, start=_at(11, 9, 30)),
            make_session(duration=50, start=_at(10, 14)),
        ]
        pattern = compute_productivity_patterns(sessions)
        assert pattern.peak_hour == 9
        assert pattern.hourly_distribution == {9: 60, 14: 50}

    def test_hour_tie_keeps_lowest_hour(self, make_session):
        sessions = [
            make_session(duration=40, start=_at(10, 16)),
            make_session(duration=40, start=_at(10, 8)),
        ]
        assert compute_productivity_patterns(sessions).peak_hour == 8

    def test_peak_day_sunday_indexed(self, make_session):
        # 2026-02-15 is a Sunday, 2026-02-11 a Wednesday
        sessions = [
            make_session(duration=20, start=_at(15, 9)),
            make_session(duration=80, start=_at(11, 9)),
        ]
        pattern = compute_productivity_patterns(sessions)
        assert pattern.peak_day_of_week == 3
        assert pattern.daily_distribution == {0: 20, 3: 80}

    def test_day_tie_keeps_lowest_index(self, make_session):
        sessions = [
            make_session(duration=25, start=_at(14, 9)),   # Saturday
            make_session(duration=25, start=_at(9, 9)),    # Monday
        ]
        assert compute_productivity_patterns(sessions).peak_day_of_week == 1

    def test_hour_uses_timestamp_offset(self, make_session):
        local = datetime(2026, 2, 10, 7, 0, tzinfo=timezone(timedelta(hours=-5)))
        pattern = compute_productivity_patterns([make_session(duration=30, start=local)])
        assert pattern.peak_hour == 7

    @pytest.mark.parametrize("day,expected", [(15, 0), (16, 1), (21, 6)])
    def test_day_of_week(self, day, expected):
        assert day_of_week(_at(day, 12)) == expected


class TestFocusStats:
    def test_breakdowns(self, make_session):
        sessions = [
            make_session(duration=30, start=_at(10, 9), category="Work"),
            make_session(duration=45, start=_at(10, 15), category="Work"),
            make_session(duration=20, start=_at(11, 9), category=""),
        ]
        stats = compute_focus_stats(sessions)
        assert stats["total_hours"] == "1.58"
        assert stats["total_sessions"] == 3
        assert stats["average_session_length"] == 32
        assert stats["by_category"] == {"Work": 75, "General": 20}
        assert stats["by_day"] == {"2026-02-10": 75, "2026-02-11": 20}

    def test_empty(self):
        stats = compute_focus_stats([])
        assert stats["total_hours"] == "0.00"
        assert stats["average_session_length"] == 0
        assert stats["by_category"] == {}


class TestRecommendations:
    def test_two_recommendations_in_order(self):
        recs = compute_recommendations(ProductivityPattern(peak_hour=14, peak_day_of_week=2))
        assert [r.type for r in recs] == ["peak_time", "best_day"]
        assert "14:00" in recs[0].message
        assert recs[1].message.startswith("Tuesday is your most productive day")

    def test_empty_pattern_defaults(self):
        recs = compute_recommendations(ProductivityPattern())
        assert "0:00" in recs[0].message
        assert recs[1].message.startswith("Sunday")
