"""Derived, non-persisted insight values.

Recomputed from raw records on every request; nothing here is cached.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class DailyFocusBucket:
    date: str                # YYYY-MM-DD
    minutes: int

    @property
    def hours(self) -> str:
        return f"{self.minutes / 60:.1f}"

    def to_dict(self) -> dict:
        return {"date": self.date, "minutes": self.minutes, "hours": self.hours}


@dataclass(frozen=True)
class MoodTrendPoint:
    date: str                # YYYY-MM-DD of the entry
    moving_average: float    # trailing mean, 2 decimals

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ProductivityPattern:
    peak_hour: int = 0                    # 0-23
    peak_day_of_week: int = 0             # 0=Sunday .. 6=Saturday
    hourly_distribution: dict[int, int] = field(default_factory=dict)
    daily_distribution: dict[int, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Recommendation:
    type: str                # peak_time | best_day
    message: str

    def to_dict(self) -> dict:
        return asdict(self)
