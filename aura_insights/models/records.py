"""Raw activity records: focus sessions, journal entries, challenge progress.

Records are plain dataclasses serialized through ``to_dict`` / ``from_dict``
so they round-trip through Redis hashes (every value stored as a string).
The write-side helpers (``complete``, ``create``, ``patch``, ``advance``)
enforce the record invariants; the analytics engine only reads records.
"""

from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Optional

from aura_insights.engine.art import derive_art_seed, determine_art_style
from aura_insights.engine.sentiment import analyze_sentiment
from aura_insights.engine.stats import round_half_up
from aura_insights.engine.thresholds import ART_STYLES

MIN_SESSION_MINUTES = 1
MAX_SESSION_MINUTES = 480  # 8 hours
MAX_TASK_LENGTH = 500
MAX_JOURNAL_LENGTH = 10000
DEFAULT_CATEGORY = "General"


class RecordValidationError(ValueError):
    """A write would break a record invariant."""


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp, accepting a trailing ``Z``.

    Naive timestamps are taken as UTC so stored records always compare.
    """
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes")
    return bool(value)


def _optional(value: Any) -> Any:
    return None if value in ("", None) else value


def _redis_safe(data: dict) -> dict:
    """Redis hashes hold strings and numbers only: None → "", bool → 0/1."""
    out = {}
    for key, value in data.items():
        if value is None:
            out[key] = ""
        elif isinstance(value, bool):
            out[key] = int(value)
        else:
            out[key] = value
    return out


def _known_fields(cls, data: dict) -> dict:
    return {k: v for k, v in data.items() if k in cls.__dataclass_fields__}


def _check_duration(duration: int) -> None:
    if not MIN_SESSION_MINUTES <= duration <= MAX_SESSION_MINUTES:
        raise RecordValidationError(
            f"session duration {duration} outside "
            f"{MIN_SESSION_MINUTES}-{MAX_SESSION_MINUTES} minutes"
        )


# ═══════════════════════════════════════════════════════════════════════════
# Focus sessions
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class FocusSession:
    session_id: str
    user_id: str
    task: str
    start_time: str                       # ISO 8601
    category: str = DEFAULT_CATEGORY
    end_time: Optional[str] = None        # ISO 8601, set on completion
    duration: Optional[int] = None        # minutes, set on completion
    completed: bool = False
    created_at: str = field(default_factory=_now_iso)

    def __post_init__(self):
        if not self.task or len(self.task) > MAX_TASK_LENGTH:
            raise RecordValidationError(
                f"task must be 1-{MAX_TASK_LENGTH} characters"
            )
        if not self.category:
            self.category = DEFAULT_CATEGORY
        if self.completed:
            if self.duration is None:
                raise RecordValidationError("completed session has no duration")
            _check_duration(self.duration)
        elif self.duration is not None:
            raise RecordValidationError("open session cannot carry a duration")

    @classmethod
    def start(cls, user_id: str, task: str, category: str = DEFAULT_CATEGORY,
              start_time: Optional[str] = None) -> FocusSession:
        """Open a new, not yet completed session."""
        return cls(
            session_id=str(uuid.uuid4()),
            user_id=user_id,
            task=task,
            category=category,
            start_time=start_time or _now_iso(),
        )

    @property
    def start_dt(self) -> datetime:
        return parse_timestamp(self.start_time)

    @property
    def minutes(self) -> int:
        """Focused minutes, 0 while the session has no duration."""
        return self.duration or 0

    def complete(self, end_time: Optional[str] = None) -> FocusSession:
        """Return a completed copy with the duration derived from the timestamps."""
        if self.completed:
            raise RecordValidationError(f"session {self.session_id} is already completed")
        end_time = end_time or _now_iso()
        elapsed = (parse_timestamp(end_time) - self.start_dt).total_seconds() / 60
        return replace(
            self, end_time=end_time, duration=round_half_up(elapsed), completed=True,
        )

    def to_dict(self) -> dict:
        return _redis_safe(asdict(self))

    @classmethod
    def from_dict(cls, data: dict) -> FocusSession:
        data = _known_fields(cls, data)
        data["end_time"] = _optional(data.get("end_time"))
        duration = _optional(data.get("duration"))
        data["duration"] = int(duration) if duration is not None else None
        data["completed"] = _to_bool(data.get("completed", False))
        return cls(**data)


# ═══════════════════════════════════════════════════════════════════════════
# Journal entries
# ═══════════════════════════════════════════════════════════════════════════

def _check_text(text: str) -> None:
    if not text or len(text) > MAX_JOURNAL_LENGTH:
        raise RecordValidationError(
            f"journal text must be 1-{MAX_JOURNAL_LENGTH} characters"
        )


def _check_sentiment(score: float) -> None:
    if not -1.0 <= score <= 1.0:
        raise RecordValidationError(f"sentiment score {score} outside [-1, 1]")


def _check_style(style: str) -> None:
    if style not in ART_STYLES:
        raise RecordValidationError(f"unknown art style {style!r}")


@dataclass
class JournalEntry:
    entry_id: str
    user_id: str
    text: str
    sentiment_score: float = 0.0          # -1.0 to 1.0
    art_style: str = "muted"              # vibrant | calm | muted | dark
    art_seed: str = ""
    created_at: str = field(default_factory=_now_iso)
    updated_at: str = field(default_factory=_now_iso)

    @classmethod
    def create(
        cls,
        user_id: str,
        text: str,
        sentiment_score: Optional[float] = None,
        art_style: Optional[str] = None,
        art_seed: Optional[str] = None,
        created_at: Optional[str] = None,
    ) -> JournalEntry:
        """Build a new entry, deriving sentiment and art fields that were not supplied."""
        _check_text(text)
        if sentiment_score is None:
            sentiment_score = analyze_sentiment(text)
        _check_sentiment(sentiment_score)
        if art_style is None:
            art_style = determine_art_style(sentiment_score)
        _check_style(art_style)
        if art_seed is None:
            art_seed = derive_art_seed(text, sentiment_score)
        created_at = created_at or _now_iso()
        return cls(
            entry_id=str(uuid.uuid4()),
            user_id=user_id,
            text=text,
            sentiment_score=sentiment_score,
            art_style=art_style,
            art_seed=art_seed,
            created_at=created_at,
            updated_at=created_at,
        )

    @property
    def created_dt(self) -> datetime:
        return parse_timestamp(self.created_at)

    def patch(
        self,
        text: Optional[str] = None,
        sentiment_score: Optional[float] = None,
        art_style: Optional[str] = None,
    ) -> JournalEntry:
        """Return an updated copy. Sentiment is never recomputed from new text."""
        changes: dict[str, Any] = {}
        if text is not None:
            _check_text(text)
            changes["text"] = text
        if sentiment_score is not None:
            _check_sentiment(sentiment_score)
            changes["sentiment_score"] = sentiment_score
        if art_style is not None:
            _check_style(art_style)
            changes["art_style"] = art_style
        if not changes:
            return self
        return replace(self, updated_at=_now_iso(), **changes)

    def to_dict(self) -> dict:
        return _redis_safe(asdict(self))

    @classmethod
    def from_dict(cls, data: dict) -> JournalEntry:
        data = _known_fields(cls, data)
        score = _optional(data.get("sentiment_score"))
        data["sentiment_score"] = float(score) if score is not None else 0.0
        return cls(**data)


# ═══════════════════════════════════════════════════════════════════════════
# Challenge progress
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class ChallengeProgress:
    user_id: str
    challenge_id: str
    goal_value: int                       # from the challenge definition, > 0
    progress: int = 0
    completed: bool = False
    completed_at: Optional[str] = None    # ISO 8601, set once

    def __post_init__(self):
        if self.goal_value <= 0:
            raise RecordValidationError("goal_value must be positive")
        if self.progress < 0:
            raise RecordValidationError("progress cannot be negative")
        if self.completed != (self.progress >= self.goal_value):
            raise RecordValidationError(
                f"completed={self.completed} contradicts progress "
                f"{self.progress}/{self.goal_value}"
            )
        if self.completed != (self.completed_at is not None):
            raise RecordValidationError("completed_at is set exactly when completed")

    def advance(self, increment: int = 1, now: Optional[str] = None) -> ChallengeProgress:
        """Return a copy with progress moved forward, completing it at the goal."""
        if self.completed:
            raise RecordValidationError(f"challenge {self.challenge_id} already completed")
        if increment <= 0:
            raise RecordValidationError("increment must be positive")
        progress = self.progress + increment
        if progress >= self.goal_value:
            return replace(
                self,
                progress=progress,
                completed=True,
                completed_at=now or _now_iso(),
            )
        return replace(self, progress=progress)

    def to_dict(self) -> dict:
        return _redis_safe(asdict(self))

    @classmethod
    def from_dict(cls, data: dict) -> ChallengeProgress:
        data = _known_fields(cls, data)
        for int_field in ("goal_value", "progress"):
            if int_field in data:
                data[int_field] = int(data[int_field])
        data["completed"] = _to_bool(data.get("completed", False))
        data["completed_at"] = _optional(data.get("completed_at"))
        return cls(**data)


# ═══════════════════════════════════════════════════════════════════════════
# Profile aggregate
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class Profile:
    user_id: str
    name: str = ""
    total_focus_hours: float = 0.0

    def add_focus_minutes(self, minutes: int) -> Profile:
        """Incremental update; the aggregate is never recomputed from sessions."""
        return replace(self, total_focus_hours=self.total_focus_hours + minutes / 60)

    def to_dict(self) -> dict:
        return _redis_safe(asdict(self))

    @classmethod
    def from_dict(cls, data: dict) -> Profile:
        data = _known_fields(cls, data)
        hours = _optional(data.get("total_focus_hours"))
        data["total_focus_hours"] = float(hours) if hours is not None else 0.0
        return cls(**data)
