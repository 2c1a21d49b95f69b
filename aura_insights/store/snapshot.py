"""Concurrent snapshot fetch with soft degradation.

The four collections have no data dependency on each other, so they are
fetched in parallel. A fetch that raises or exceeds the timeout is logged
and replaced with an empty collection: the reports then show their
"not enough data" defaults instead of failing.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Optional

from aura_insights.config.settings import FETCH_TIMEOUT_SECONDS
from aura_insights.models.records import (
    ChallengeProgress,
    FocusSession,
    JournalEntry,
    Profile,
)
from aura_insights.store.base import RecordStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordSnapshot:
    """Immutable view of one user's records at fetch time."""

    user_id: str
    focus_sessions: tuple[FocusSession, ...] = ()
    journal_entries: tuple[JournalEntry, ...] = ()
    challenge_progress: tuple[ChallengeProgress, ...] = ()
    profile: Optional[Profile] = None
    degraded: tuple[str, ...] = field(default=())

    def __post_init__(self):
        if self.profile is None:
            object.__setattr__(self, "profile", Profile(user_id=self.user_id))


async def _guarded(
    name: str,
    fn: Callable[..., Any],
    fallback: Any,
    timeout: float,
    *args: Any,
    **kwargs: Any,
) -> tuple[Any, bool]:
    """Run a blocking fetch off the event loop; (result, ok)."""
    try:
        result = await asyncio.wait_for(asyncio.to_thread(fn, *args, **kwargs), timeout)
        return result, True
    except asyncio.TimeoutError:
        logger.warning("Fetch %s timed out after %.1fs; using empty result", name, timeout)
    except Exception as exc:
        logger.warning("Fetch %s failed: %s; using empty result", name, exc)
    return fallback, False


async def fetch_snapshot(
    store: RecordStore,
    user_id: str,
    since: Optional[datetime] = None,
    journal_since: Optional[datetime] = None,
    session_limit: Optional[int] = None,
    journal_limit: Optional[int] = None,
    journal_newest_first: bool = False,
    timeout: float = FETCH_TIMEOUT_SECONDS,
) -> RecordSnapshot:
    """Fetch completed focus sessions, journal entries, challenges and profile.

    Sessions are returned newest first; journal order follows
    *journal_newest_first*. *journal_since* defaults to *since*.
    """
    if journal_since is None:
        journal_since = since

    results = await asyncio.gather(
        _guarded(
            "focus_sessions", store.fetch_focus_sessions, [], timeout,
            user_id, since=since, completed_only=True, limit=session_limit,
            newest_first=True,
        ),
        _guarded(
            "journal_entries", store.fetch_journal_entries, [], timeout,
            user_id, since=journal_since, limit=journal_limit,
            newest_first=journal_newest_first,
        ),
        _guarded(
            "challenge_progress", store.fetch_challenge_progress, [], timeout,
            user_id,
        ),
        _guarded(
            "profile", store.fetch_profile, Profile(user_id=user_id), timeout,
            user_id,
        ),
    )
    names = ("focus_sessions", "journal_entries", "challenge_progress", "profile")
    degraded = tuple(name for name, (_, ok) in zip(names, results) if not ok)
    (sessions, _), (entries, _), (progress, _), (profile, _) = results

    return RecordSnapshot(
        user_id=user_id,
        focus_sessions=tuple(sessions),
        journal_entries=tuple(entries),
        challenge_progress=tuple(progress),
        profile=profile,
        degraded=degraded,
    )
