"""Templated weekly summary. Deterministic: no randomness, no model call."""

from __future__ import annotations

from typing import Sequence

from aura_insights.engine.focus import total_minutes
from aura_insights.engine.mood import average_sentiment, classify_mood
from aura_insights.engine.thresholds import (
    CONSISTENCY_BANDS,
    CONSISTENCY_DEFAULT,
    classify_above,
)
from aura_insights.models.records import FocusSession, JournalEntry

MOOD_SENTENCES = {
    "Positive": (
        "Your journal entries show a positive emotional trajectory, "
        "with consistent feelings of calm and focus. "
    ),
    "Neutral": "Your mood has been relatively balanced this week. ",
    "Needs Support": (
        "Your entries suggest some challenges this week. "
        "Consider reaching out for support. "
    ),
}

CONSISTENCY_SENTENCES = {
    "excellent": (
        "You're maintaining excellent consistency with your focus practice. "
        "Keep up the great work!"
    ),
    "momentum": "You're building good momentum. Try to maintain this consistency.",
    "set_goals": "Consider setting daily focus goals to build more consistent habits.",
}


def compute_weekly_summary(
    sessions: Sequence[FocusSession],
    entries: Sequence[JournalEntry],
) -> str:
    hours = total_minutes(sessions) / 60
    lead = (
        f"This week, you completed {hours:.1f} hours of focused work "
        f"across {len(sessions)} sessions. "
    )
    mood = MOOD_SENTENCES[classify_mood(average_sentiment(entries))]
    consistency = CONSISTENCY_SENTENCES[
        classify_above(len(sessions), CONSISTENCY_BANDS, CONSISTENCY_DEFAULT)
    ]
    return lead + mood + consistency
