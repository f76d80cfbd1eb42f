"""
AUDCurve: AUD Forward Curve Construction Library

A small library for:
- Loading the RBA F1.1 (cash rate, BBSW) and F2 (government bond) tables
- Assembling a discrete AUD curve with a BBSW spread adjustment
- Deriving monthly curves by linear and natural cubic spline interpolation
- Exporting the curves to CSV

Rates are simple annualized percentages throughout.
"""

__version__ = "0.1.0"

# Core modules
from .conventions import CurveCategory, InterpolationMethod, HORIZON_MONTHS, tenor_to_months
from .market_data import ShortRateSet, BondYieldSet, MarketSnapshot

# Curves
from .curves import (
    CurvePoint,
    MonthlyRate,
    TenorSchedule,
    TenorSpec,
    assemble,
    assemble_from_schedule,
    linear_fill,
    spline_fill,
    regression_fill,
    clean,
    CurveInputs,
    CurveSet,
    derive_curves,
)

# Data
from .data import load_market_data, parse_f1_table, parse_f2_table

# Reporting
from .reporting import CurveReportFormatter, export_to_csv, format_curve_csv

__all__ = [
    # Version
    "__version__",
    # Conventions
    "CurveCategory",
    "InterpolationMethod",
    "HORIZON_MONTHS",
    "tenor_to_months",
    # Market data
    "ShortRateSet",
    "BondYieldSet",
    "MarketSnapshot",
    # Curves
    "CurvePoint",
    "MonthlyRate",
    "TenorSchedule",
    "TenorSpec",
    "assemble",
    "assemble_from_schedule",
    "linear_fill",
    "spline_fill",
    "regression_fill",
    "clean",
    "CurveInputs",
    "CurveSet",
    "derive_curves",
    # Data
    "load_market_data",
    "parse_f1_table",
    "parse_f2_table",
    # Reporting
    "CurveReportFormatter",
    "export_to_csv",
    "format_curve_csv",
]
