"""Shared numeric helpers for the chart model."""
import math
from typing import List, Sequence, Tuple


def is_numeric_axis(values: List) -> bool:
    """Check if all values in a list can be converted to numbers."""
    if not values:
        return False

    for val in values:
        try:
            float(val)
        except (ValueError, TypeError):
            return False
    return True


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def clamp_index(index: int, count: int) -> int:
    """Clamp a column index into [0, count - 1]."""
    if index < 0:
        return 0
    if index > count - 1:
        return count - 1
    return index


def series_extent(series: Sequence[Sequence[float]], floor: float = 0, ceiling: float = 1) -> Tuple[float, float]:
    """Find (min, max) over all series.

    The minimum never exceeds ``floor`` and the maximum is never below
    ``ceiling``, so the value axis always shows the [0, 1] baseline.
    """
    lo = floor
    hi = ceiling
    for data in series:
        lo = min(lo, min(data))
        hi = max(hi, max(data))
    return lo, hi
