"""Descriptive statistics over a prop value sequence.

All functions accept an empty sequence and return 0 rather than raising.
Ratios against a zero average (consistency, volatility) also return 0
instead of propagating NaN or infinity.
"""

import math
from typing import Sequence


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going toward +infinity.

    Matches the rounding the dashboard shows (Math.round), so -12.5 -> -12
    and 12.5 -> 13. Python's round() would give -12 and 12.
    """
    return math.floor(value + 0.5)


def average(values: Sequence[float]) -> float:
    """Arithmetic mean; 0 for an empty sequence."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def median(values: Sequence[float]) -> float:
    """Middle value of the sorted sequence (mean of the two middles for even n)."""
    if not values:
        return 0.0
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return float(ordered[mid])


def standard_deviation(values: Sequence[float]) -> float:
    """Population standard deviation (squared deviations divided by n)."""
    if not values:
        return 0.0
    avg = average(values)
    variance = sum((v - avg) ** 2 for v in values) / len(values)
    return math.sqrt(variance)


def coefficient_of_variation(values: Sequence[float]) -> float | None:
    """Standard deviation relative to the mean, or None when the mean is 0."""
    avg = average(values)
    if not values or avg == 0:
        return None
    return standard_deviation(values) / avg


def consistency(values: Sequence[float]) -> int:
    """Consistency score: round((1 - stddev / mean) * 100).

    Higher is steadier. Returns 0 for an empty sequence or a zero mean.
    """
    cv = coefficient_of_variation(values)
    if cv is None:
        return 0
    return round_half_up((1 - cv) * 100)


def volatility(values: Sequence[float]) -> int:
    """Volatility score: round(stddev / mean * 100); 0 for empty or zero mean."""
    cv = coefficient_of_variation(values)
    if cv is None:
        return 0
    return round_half_up(cv * 100)


def percentile(values: Sequence[float], line: float) -> int:
    """Percent of games at or below the line (percentile rank of the line)."""
    if not values:
        return 0
    at_or_below = sum(1 for v in values if v <= line)
    return round_half_up(at_or_below / len(values) * 100)
