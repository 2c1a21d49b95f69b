"""Seed Redis with two weeks of demo activity for one user.

Run: python -m aura_insights.scripts.seed_demo [--user demo-user]
"""

from __future__ import annotations

import argparse
import logging
from datetime import datetime, timedelta, timezone

import redis

from aura_insights.config.settings import LOG_LEVEL, REDIS_URL
from aura_insights.models.records import (
    ChallengeProgress,
    FocusSession,
    JournalEntry,
    Profile,
)
from aura_insights.store.redis_store import (
    CHALLENGE_PREFIX,
    FOCUS_PREFIX,
    JOURNAL_PREFIX,
    PROFILE_PREFIX,
    RedisRecordStore,
)

logger = logging.getLogger("seed_demo")

DEMO_SESSIONS = [
    # (days ago, start hour, minutes, task, category)
    (0, 9, 50, "Draft quarterly report", "Work"),
    (1, 9, 45, "Review pull requests", "Work"),
    (1, 14, 30, "Spanish flashcards", "Learning"),
    (2, 10, 90, "Deep work: data pipeline", "Work"),
    (3, 9, 25, "Inbox zero", "Admin"),
    (4, 20, 40, "Read: Atomic Habits", "Learning"),
    (6, 9, 60, "Design review prep", "Work"),
    (8, 15, 35, "Budget planning", "Personal"),
    (10, 9, 55, "Write blog post", "Creative"),
    (12, 11, 20, "Meditation practice", "Wellness"),
]

DEMO_JOURNAL = [
    (0, "Felt focused and productive this morning, grateful for a quiet office."),
    (2, "A calm day. Finished the pipeline refactor and felt happy about it."),
    (4, "Tired after a long meeting block, a bit stressed about deadlines."),
    (7, "Excited about the new project kickoff."),
    (9, "Anxious and frustrated with the release slipping again."),
    (11, "Slow Sunday, nothing special to report."),
]

DEMO_CHALLENGES = [
    # (challenge id, goal, progress)
    ("7-day-focus-streak", 7, 7),
    ("30-journal-entries", 30, 6),
    ("10-hours-deep-work", 10, 4),
]


def clear_user(r: redis.Redis, user_id: str) -> None:
    """Remove all records belonging to *user_id*."""
    for sid in r.zrange(f"user:{user_id}:focus_sessions", 0, -1):
        r.delete(f"{FOCUS_PREFIX}{sid}")
    for eid in r.zrange(f"user:{user_id}:journal_entries", 0, -1):
        r.delete(f"{JOURNAL_PREFIX}{eid}")
    for cid in r.smembers(f"user:{user_id}:challenges"):
        r.delete(f"{CHALLENGE_PREFIX}{user_id}:{cid}")
    r.delete(
        f"user:{user_id}:focus_sessions",
        f"user:{user_id}:journal_entries",
        f"user:{user_id}:challenges",
        f"{PROFILE_PREFIX}{user_id}",
    )


def seed(user_id: str = "demo-user", r: redis.Redis | None = None,
         now: datetime | None = None) -> RedisRecordStore:
    r = r or redis.Redis.from_url(REDIS_URL, decode_responses=True)
    now = now or datetime.now(timezone.utc)
    clear_user(r, user_id)

    store = RedisRecordStore(r)
    store.save_profile(Profile(user_id=user_id, name="Demo User"))

    for days_ago, hour, minutes, task, category in DEMO_SESSIONS:
        start = (now - timedelta(days=days_ago)).replace(
            hour=hour, minute=0, second=0, microsecond=0,
        )
        session = FocusSession.start(user_id, task, category, start_time=start.isoformat())
        store.save_focus_session(session)
        store.record_session_completion(
            session, end_time=(start + timedelta(minutes=minutes)).isoformat(),
        )

    # One session left open
    store.save_focus_session(FocusSession.start(user_id, "Plan tomorrow", "Admin"))

    for days_ago, text in DEMO_JOURNAL:
        created = (now - timedelta(days=days_ago)).replace(microsecond=0)
        store.save_journal_entry(
            JournalEntry.create(user_id, text, created_at=created.isoformat())
        )

    for challenge_id, goal, progress in DEMO_CHALLENGES:
        record = ChallengeProgress(user_id=user_id, challenge_id=challenge_id, goal_value=goal)
        record = record.advance(progress, now=now.isoformat())
        store.save_challenge_progress(record)

    logger.info(
        "Seeded %s: %d sessions, %d journal entries, %d challenges",
        user_id, len(DEMO_SESSIONS), len(DEMO_JOURNAL), len(DEMO_CHALLENGES),
    )
    return store


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed Redis with demo insight data")
    parser.add_argument("--user", default="demo-user", help="user id to seed")
    args = parser.parse_args()

    logging.basicConfig(level=LOG_LEVEL)
    seed(args.user)


if __name__ == "__main__":
    main()
