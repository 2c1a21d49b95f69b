"""Application-wide configuration loaded from environment variables."""

import os

from dotenv import load_dotenv

load_dotenv()

# Redis
REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379")

# ── Record Windows ───────────────────────────────────────────────────────

# Most-recent records considered by the dashboard branches
FOCUS_RECENT_LIMIT: int = int(os.getenv("FOCUS_RECENT_LIMIT", "100"))
JOURNAL_RECENT_LIMIT: int = int(os.getenv("JOURNAL_RECENT_LIMIT", "50"))

# Lookback windows (days)
WEEKLY_SUMMARY_DAYS: int = int(os.getenv("WEEKLY_SUMMARY_DAYS", "7"))
PATTERN_WINDOW_DAYS: int = int(os.getenv("PATTERN_WINDOW_DAYS", "30"))
MOOD_TREND_DAYS: int = int(os.getenv("MOOD_TREND_DAYS", "30"))

# Focus stats periods
STATS_PERIOD_DAYS: dict[str, int] = {
    "week": 7,
    "month": 30,
    "year": 365,
}

# ── Store Fetching ───────────────────────────────────────────────────────

# Per-collection timeout; a slow fetch degrades to an empty collection
FETCH_TIMEOUT_SECONDS: float = float(os.getenv("FETCH_TIMEOUT_SECONDS", "5.0"))

# ── Logging ──────────────────────────────────────────────────────────────

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
