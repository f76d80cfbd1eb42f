"""
Reporting module for curve output.

Provides:
- Console reports (formatted tables)
- CSV export of the discrete and monthly curves
"""

from .export import (
    CurveReportFormatter,
    curve_points_frame,
    monthly_frame,
    format_curve_csv,
    export_to_csv,
)


__all__ = [
    "CurveReportFormatter",
    "curve_points_frame",
    "monthly_frame",
    "format_curve_csv",
    "export_to_csv",
]
