"""Shared test fixtures for the insights engine test suite."""

import pytest
import fakeredis
from datetime import datetime, timedelta, timezone

from aura_insights.models.records import (
    ChallengeProgress,
    FocusSession,
    JournalEntry,
)
from aura_insights.store.redis_store import RedisRecordStore


# ── Redis ────────────────────────────────────────────────────────────────

@pytest.fixture
def r():
    """Fresh fakeredis instance per test (decode_responses=True like production)."""
    return fakeredis.FakeRedis(decode_responses=True)


@pytest.fixture
def store(r):
    return RedisRecordStore(r)


# ── Time Freezing ───────────────────────────────────────────────────────

@pytest.fixture
def frozen_now():
    """Fixed 'now' for deterministic windows: 2026-02-15T12:00:00Z (a Sunday)."""
    return datetime(2026, 2, 15, 12, 0, 0, tzinfo=timezone.utc)


# ── Record Factories ────────────────────────────────────────────────────

@pytest.fixture
def make_session(frozen_now):
    """Factory for completed focus sessions.

    Usage:
        session = make_session(duration=45, start=frozen_now - timedelta(days=1))
    """
    _counter = 0

    def _factory(duration=30, start=None, user_id="user-1", category="General",
                 completed=True, **overrides):
        nonlocal _counter
        _counter += 1
        start = start or frozen_now
        fields = {
            "session_id": f"session-{_counter}",
            "user_id": user_id,
            "task": f"Task {_counter}",
            "category": category,
            "start_time": start.isoformat(),
        }
        if completed:
            fields.update({
                "end_time": (start + timedelta(minutes=duration)).isoformat(),
                "duration": duration,
                "completed": True,
            })
        fields.update(overrides)
        return FocusSession(**fields)

    return _factory


@pytest.fixture
def make_entry(frozen_now):
    """Factory for journal entries with an explicit sentiment score."""
    _counter = 0

    def _factory(score=0.0, created=None, user_id="user-1", text=None):
        nonlocal _counter
        _counter += 1
        created = created or frozen_now
        return JournalEntry(
            entry_id=f"entry-{_counter}",
            user_id=user_id,
            text=text or f"Entry {_counter}",
            sentiment_score=score,
            created_at=created.isoformat(),
            updated_at=created.isoformat(),
        )

    return _factory


@pytest.fixture
def make_entries(make_entry, frozen_now):
    """Build entries from a score list, most recent first, one day apart."""
    def _factory(scores, newest_first=True):
        entries = [
            make_entry(score=s, created=frozen_now - timedelta(days=i))
            for i, s in enumerate(scores)
        ]
        return entries if newest_first else list(reversed(entries))

    return _factory


@pytest.fixture
def make_progress():
    _counter = 0

    def _factory(completed=False, goal_value=10, user_id="user-1", progress=None):
        nonlocal _counter
        _counter += 1
        if progress is None:
            progress = goal_value if completed else 0
        return ChallengeProgress(
            user_id=user_id,
            challenge_id=f"challenge-{_counter}",
            goal_value=goal_value,
            progress=progress,
            completed=completed,
            completed_at="2026-02-14T10:00:00+00:00" if completed else None,
        )

    return _factory
