"""
Curves package - discrete curve assembly and monthly interpolation.

Provides:
- assemble: Discrete curve from short rates, bond yields and a spread
- linear_fill / spline_fill: Monthly curves by linear or natural cubic spline
- clean: Filter monthly series to plausible rates
- derive_curves: All of the above from one CurveInputs
"""

from .schedule import TenorSpec, TenorSchedule, FULL_SCHEDULE, REDUCED_SCHEDULE, schedule_for
from .assembler import (
    CurvePoint,
    DiscreteCurve,
    adjusted_short_rate,
    assemble,
    assemble_from_schedule,
)
from .interpolation import (
    MonthlyRate,
    MonthlySeries,
    Interpolator,
    LinearInterpolator,
    CubicSplineInterpolator,
    RegressionInterpolator,
    linear_fill,
    spline_fill,
    regression_fill,
    create_interpolator,
)
from .validation import clean
from .derive import CurveInputs, CurveSet, derive_curves

__all__ = [
    "TenorSpec",
    "TenorSchedule",
    "FULL_SCHEDULE",
    "REDUCED_SCHEDULE",
    "schedule_for",
    "CurvePoint",
    "DiscreteCurve",
    "adjusted_short_rate",
    "assemble",
    "assemble_from_schedule",
    "MonthlyRate",
    "MonthlySeries",
    "Interpolator",
    "LinearInterpolator",
    "CubicSplineInterpolator",
    "RegressionInterpolator",
    "linear_fill",
    "spline_fill",
    "regression_fill",
    "create_interpolator",
    "clean",
    "CurveInputs",
    "CurveSet",
    "derive_curves",
]
