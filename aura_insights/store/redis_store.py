"""Redis-backed record store.

Layout:
  focus_session:<id>                  hash, one per session
  journal_entry:<id>                  hash, one per entry
  challenge_progress:<user>:<id>      hash, one per enrollment
  profile:<user>                      hash
  user:<user>:focus_sessions          zset of session ids scored by start epoch
  user:<user>:journal_entries         zset of entry ids scored by creation epoch
  user:<user>:challenges              set of challenge ids

Sorted-set scores give O(log n) ``since`` range queries per user.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

import redis

from aura_insights.config.settings import REDIS_URL
from aura_insights.models.records import (
    ChallengeProgress,
    FocusSession,
    JournalEntry,
    Profile,
    parse_timestamp,
)

logger = logging.getLogger(__name__)

FOCUS_PREFIX = "focus_session:"
JOURNAL_PREFIX = "journal_entry:"
CHALLENGE_PREFIX = "challenge_progress:"
PROFILE_PREFIX = "profile:"


def _get_redis() -> redis.Redis:
    return redis.Redis.from_url(REDIS_URL, decode_responses=True)


def _epoch(value: datetime | str) -> float:
    if isinstance(value, str):
        return parse_timestamp(value).timestamp()
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()


def _focus_index(user_id: str) -> str:
    return f"user:{user_id}:focus_sessions"


def _journal_index(user_id: str) -> str:
    return f"user:{user_id}:journal_entries"


def _challenge_index(user_id: str) -> str:
    return f"user:{user_id}:challenges"


class RedisRecordStore:
    """Record store over a single Redis connection (``decode_responses=True``)."""

    def __init__(self, r: redis.Redis | None = None):
        self.r = r or _get_redis()

    # -- Index helpers --

    def _range(self, index: str, since, newest_first: bool) -> list[str]:
        low = _epoch(since) if since is not None else "-inf"
        if newest_first:
            return self.r.zrevrangebyscore(index, "+inf", low)
        return self.r.zrangebyscore(index, low, "+inf")

    def _load(self, key: str) -> dict:
        return self.r.hgetall(key)

    # -- Focus sessions --

    def save_focus_session(self, session: FocusSession) -> None:
        self.r.hset(f"{FOCUS_PREFIX}{session.session_id}", mapping=session.to_dict())
        self.r.zadd(
            _focus_index(session.user_id),
            {session.session_id: _epoch(session.start_time)},
        )

    def get_focus_session(self, session_id: str) -> Optional[FocusSession]:
        data = self._load(f"{FOCUS_PREFIX}{session_id}")
        return FocusSession.from_dict(data) if data else None

    def record_session_completion(
        self,
        session: FocusSession,
        end_time: Optional[str] = None,
    ) -> FocusSession:
        """Complete a session and add its minutes to the profile aggregate."""
        completed = session.complete(end_time)
        self.save_focus_session(completed)
        self._add_profile_minutes(completed.user_id, completed.minutes)
        logger.info(
            "Session %s completed: %d minutes for user %s",
            completed.session_id, completed.minutes, completed.user_id,
        )
        return completed

    def delete_focus_session(self, user_id: str, session_id: str) -> None:
        self.r.delete(f"{FOCUS_PREFIX}{session_id}")
        self.r.zrem(_focus_index(user_id), session_id)

    def fetch_focus_sessions(
        self,
        user_id: str,
        since: Optional[datetime] = None,
        completed_only: bool = False,
        limit: Optional[int] = None,
        newest_first: bool = False,
    ) -> list[FocusSession]:
        sessions = []
        for sid in self._range(_focus_index(user_id), since, newest_first):
            session = self.get_focus_session(sid)
            if session is None:
                continue
            if completed_only and not session.completed:
                continue
            sessions.append(session)
            if limit is not None and len(sessions) >= limit:
                break
        return sessions

    # -- Journal entries --

    def save_journal_entry(self, entry: JournalEntry) -> None:
        self.r.hset(f"{JOURNAL_PREFIX}{entry.entry_id}", mapping=entry.to_dict())
        self.r.zadd(
            _journal_index(entry.user_id),
            {entry.entry_id: _epoch(entry.created_at)},
        )

    def get_journal_entry(self, entry_id: str) -> Optional[JournalEntry]:
        data = self._load(f"{JOURNAL_PREFIX}{entry_id}")
        return JournalEntry.from_dict(data) if data else None

    def delete_journal_entry(self, user_id: str, entry_id: str) -> None:
        self.r.delete(f"{JOURNAL_PREFIX}{entry_id}")
        self.r.zrem(_journal_index(user_id), entry_id)

    def fetch_journal_entries(
        self,
        user_id: str,
        since: Optional[datetime] = None,
        limit: Optional[int] = None,
        newest_first: bool = False,
    ) -> list[JournalEntry]:
        entries = []
        for eid in self._range(_journal_index(user_id), since, newest_first):
            entry = self.get_journal_entry(eid)
            if entry is None:
                continue
            entries.append(entry)
            if limit is not None and len(entries) >= limit:
                break
        return entries

    # -- Challenge progress --

    def save_challenge_progress(self, progress: ChallengeProgress) -> None:
        key = f"{CHALLENGE_PREFIX}{progress.user_id}:{progress.challenge_id}"
        self.r.hset(key, mapping=progress.to_dict())
        self.r.sadd(_challenge_index(progress.user_id), progress.challenge_id)

    def fetch_challenge_progress(self, user_id: str) -> list[ChallengeProgress]:
        records = []
        for cid in sorted(self.r.smembers(_challenge_index(user_id))):
            data = self._load(f"{CHALLENGE_PREFIX}{user_id}:{cid}")
            if data:
                records.append(ChallengeProgress.from_dict(data))
        return records

    # -- Profile --

    def save_profile(self, profile: Profile) -> None:
        self.r.hset(f"{PROFILE_PREFIX}{profile.user_id}", mapping=profile.to_dict())

    def fetch_profile(self, user_id: str) -> Profile:
        data = self._load(f"{PROFILE_PREFIX}{user_id}")
        data.setdefault("user_id", user_id)
        return Profile.from_dict(data)

    def _add_profile_minutes(self, user_id: str, minutes: int) -> Profile:
        """Read-modify-write the profile aggregate under WATCH."""
        key = f"{PROFILE_PREFIX}{user_id}"

        def _apply(pipe) -> Profile:
            data = pipe.hgetall(key)
            data.setdefault("user_id", user_id)
            updated = Profile.from_dict(data).add_focus_minutes(minutes)
            pipe.multi()
            pipe.hset(key, mapping=updated.to_dict())
            return updated

        return self.r.transaction(_apply, key, value_from_callable=True)
