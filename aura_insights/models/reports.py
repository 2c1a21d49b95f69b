"""Typed report payloads returned to the route layer.

``model_dump()`` of any report is the response body.
"""

from typing import Optional

from pydantic import BaseModel


class DailyFocus(BaseModel):
    date: str                # YYYY-MM-DD
    minutes: int
    hours: str               # "1.5"


class FocusInsights(BaseModel):
    total_minutes: int
    total_hours: str         # one decimal, e.g. "12.5"
    total_sessions: int
    average_session_length: int
    last_7_days: list[DailyFocus]


class MoodInsights(BaseModel):
    total_entries: int
    average_sentiment: float # 2 decimals
    recent_mood: str         # Positive | Neutral | Needs Support


class ChallengeInsights(BaseModel):
    total_challenges: int
    completed: int
    active: int
    completion_rate: int     # 0-100


class ProfileSummary(BaseModel):
    name: str = ""
    total_focus_hours: float = 0.0


class DashboardReport(BaseModel):
    """Aura score plus the three analytics branches."""
    aura_score: int          # 0-100
    focus: FocusInsights
    journal: MoodInsights
    challenges: ChallengeInsights
    profile: ProfileSummary
    degraded: list[str] = [] # collections that failed to load
    generated_at: str        # ISO 8601


class WeeklySummaryReport(BaseModel):
    period: str = "week"
    start_date: str
    end_date: str
    summary: str


class RecommendationItem(BaseModel):
    type: str                # peak_time | best_day
    message: str


class PatternDetail(BaseModel):
    peak_productivity_hour: int
    peak_productivity_day: int
    hourly_distribution: dict[int, int]
    daily_distribution: dict[int, int]


class ProductivityReport(BaseModel):
    period: Optional[str] = None
    total_sessions: int = 0
    message: Optional[str] = None
    patterns: Optional[PatternDetail] = None
    recommendations: list[RecommendationItem] = []


class MoodTrendItem(BaseModel):
    date: str
    moving_average: float


class MoodTrendReport(BaseModel):
    period: Optional[str] = None
    entries_analyzed: int = 0
    message: Optional[str] = None
    trends: list[MoodTrendItem] = []
    average_mood: Optional[float] = None
    mood_stability: Optional[str] = None


class FocusStatsReport(BaseModel):
    period: str              # week | month | year
    total_hours: str         # two decimals
    total_sessions: int
    average_session_length: int
    by_category: dict[str, int]
    by_day: dict[str, int]


class JournalStatsReport(BaseModel):
    total_entries: int
    average_sentiment: float
    by_month: dict[str, int]
    mood_trend: str          # improving | declining | stable
