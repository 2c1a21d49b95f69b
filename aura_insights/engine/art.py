"""Deterministic art seed and style for journal entries.

The seed feeds an external visual generator; only its determinism matters.
"""

from __future__ import annotations

from aura_insights.engine.stats import round_half_up
from aura_insights.engine.thresholds import (
    ART_STYLE_BANDS,
    ART_STYLE_DEFAULT,
    classify_above,
)

_INT32_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - 0x100000000 if value & 0x80000000 else value


def text_hash(text: str) -> int:
    """Rolling ``h = c + (h << 5) - h`` hash, wrapped to a signed 32-bit int."""
    h = 0
    for char in text:
        h = _to_int32(ord(char) + ((h << 5) - h))
    return h


def derive_art_seed(text: str, sentiment: float) -> str:
    """Seed string ``"<hash>-<sentiment*100>"``; same inputs, same seed."""
    return f"{text_hash(text)}-{round_half_up(sentiment * 100)}"


def determine_art_style(sentiment: float) -> str:
    """vibrant > 0.5 ≥ calm > 0 ≥ muted > -0.5 ≥ dark."""
    return classify_above(sentiment, ART_STYLE_BANDS, ART_STYLE_DEFAULT)
