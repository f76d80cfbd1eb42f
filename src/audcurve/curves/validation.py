"""
Sanitation of monthly series before display or export.
"""

import math
from numbers import Real
from typing import Iterable

from ..conventions import MIN_VALID_RATE, MAX_VALID_RATE
from .interpolation import MonthlySeries


def _is_plausible(rate, lower: float, upper: float) -> bool:
    if isinstance(rate, bool) or not isinstance(rate, Real):
        return False
    return math.isfinite(rate) and lower <= rate <= upper


def clean(
    series: Iterable,
    lower: float = MIN_VALID_RATE,
    upper: float = MAX_VALID_RATE,
) -> MonthlySeries:
    """
    Keep entries whose rate is a finite number within [lower, upper].

    Entries are returned unchanged and in their original order, so
    clean(clean(x)) == clean(x).
    """
    return tuple(
        point for point in series
        if point is not None and _is_plausible(getattr(point, "rate", None), lower, upper)
    )
