"""
Curve conventions, tenor labels and numeric constants.

Curve categories:
- Cash Rate: RBA overnight cash rate, passed through unmodified
- BBSW (adj): bank bill swap rates less the user spread
- Govt Bond: Commonwealth government bond yields

Interpolation methods:
- Linear: piecewise linear between discrete nodes, flat beyond the last
- Cubic Spline: natural cubic spline through the discrete nodes
- Regression: least-squares line through the discrete nodes

All rates are simple annualized percentages (4.35 means 4.35%).
"""

import re
from enum import Enum
from typing import Tuple


# Dense monthly curves run from month 1 to this horizon (8 years)
HORIZON_MONTHS = 96

# Validator bounds for chartable monthly rates, in percent
MIN_VALID_RATE = 0.0
MAX_VALID_RATE = 30.0

BASIS_POINTS_PER_PERCENT = 100.0

MONTHS_PER_UNIT = {
    "M": 1,
    "Y": 12,
}

# Source label of the short-rate nodes when the cash node is omitted
SPOT_SOURCE = "Spot (adj)"

# Labels that denote the overnight point of the curve
OVERNIGHT_LABELS = ("CASH", "ON", "O/N")


class CurveCategory(Enum):
    """Provenance of a discrete curve point."""
    CASH_RATE = "Cash Rate"
    SHORT_RATE = "BBSW (adj)"
    BOND_YIELD = "Govt Bond"

    @classmethod
    def from_string(cls, s: str) -> "CurveCategory":
        """Parse a category from its display value or member name."""
        key = s.strip()
        for member in cls:
            if key == member.value or key.upper() == member.name:
                return member
        raise ValueError(f"Unknown curve category: {s}")


class InterpolationMethod(Enum):
    """Monthly curve interpolation method."""
    LINEAR = "linear"
    CUBIC_SPLINE = "cubic_spline"
    REGRESSION = "regression"

    @classmethod
    def from_string(cls, s: str) -> "InterpolationMethod":
        """Parse an interpolation method from a name or alias."""
        mapping = {
            "linear": cls.LINEAR,
            "lin": cls.LINEAR,
            "cubic_spline": cls.CUBIC_SPLINE,
            "cubic": cls.CUBIC_SPLINE,
            "spline": cls.CUBIC_SPLINE,
            "regression": cls.REGRESSION,
            "ols": cls.REGRESSION,
        }
        key = s.lower().strip().replace("-", "_").replace(" ", "_")
        if key in mapping:
            return mapping[key]
        raise ValueError(f"Unknown interpolation method: {s}")


TENOR_PATTERN = re.compile(r'^(\d+)([MY])$', re.IGNORECASE)


def parse_tenor(tenor: str) -> Tuple[int, str]:
    """
    Parse a tenor label into (amount, unit).

    Args:
        tenor: Tenor label like "1M", "3M", "10Y"

    Returns:
        Tuple of (amount, unit) where unit is M or Y

    Raises:
        ValueError: If the label is not a month or year tenor
    """
    match = TENOR_PATTERN.match(tenor.upper().strip())
    if not match:
        raise ValueError(f"Invalid tenor format: {tenor}. Expected format like '3M', '2Y'")

    return int(match.group(1)), match.group(2).upper()


def tenor_to_months(tenor: str) -> int:
    """
    Convert a tenor label to whole months.

    "Cash" and "ON" map to month 0.
    """
    if tenor.upper().strip() in OVERNIGHT_LABELS:
        return 0

    amount, unit = parse_tenor(tenor)
    return amount * MONTHS_PER_UNIT[unit]


def bps_to_percent(spread_bps: float) -> float:
    """Convert a spread in basis points to percentage points."""
    return spread_bps / BASIS_POINTS_PER_PERCENT
