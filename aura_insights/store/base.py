"""Read interface the insights engine consumes from a record store."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from aura_insights.models.records import (
    ChallengeProgress,
    FocusSession,
    JournalEntry,
    Profile,
)


class RecordStore(Protocol):
    def fetch_focus_sessions(
        self,
        user_id: str,
        since: Optional[datetime] = None,
        completed_only: bool = False,
        limit: Optional[int] = None,
        newest_first: bool = False,
    ) -> list[FocusSession]: ...

    def fetch_journal_entries(
        self,
        user_id: str,
        since: Optional[datetime] = None,
        limit: Optional[int] = None,
        newest_first: bool = False,
    ) -> list[JournalEntry]: ...

    def fetch_challenge_progress(self, user_id: str) -> list[ChallengeProgress]: ...

    def fetch_profile(self, user_id: str) -> Profile: ...
