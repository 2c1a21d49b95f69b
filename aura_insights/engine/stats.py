"""Small numeric helpers shared by the analytics modules."""

from __future__ import annotations

import math
from typing import Iterable, Mapping, Sequence


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean, 0.0 for an empty sequence."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity (2.5 → 3, -2.5 → -2)."""
    return math.floor(value + 0.5)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def peak_key(distribution: Mapping[int, float]) -> int:
    """Key with the largest value, scanning keys in ascending order.

    Only a strictly greater value replaces the current peak, so ties keep
    the lowest key. An empty (or all-zero) distribution yields 0.
    """
    peak, peak_value = 0, 0.0
    for key in sorted(distribution):
        if distribution[key] > peak_value:
            peak, peak_value = key, distribution[key]
    return peak


def accumulate(pairs: Iterable[tuple[int, float]]) -> dict[int, float]:
    """Sum values per key, keys returned in ascending order."""
    totals: dict[int, float] = {}
    for key, value in pairs:
        totals[key] = totals.get(key, 0) + value
    return dict(sorted(totals.items()))
