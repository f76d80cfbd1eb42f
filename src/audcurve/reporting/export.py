"""
Curve reporting.

Provides console output and CSV export for:
- Discrete curve points (Tenor, Months, Rate, Source)
- Monthly interpolated curves (linear vs cubic spline)

The CSV export is a single file holding both tables one after the
other, each under a title line, separated by a blank line. Rates are
written to 4 decimal places; a month missing from a series is blank.
"""

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np
import pandas as pd

from ..conventions import HORIZON_MONTHS
from ..curves.derive import CurveSet

logger = logging.getLogger(__name__)

CURVE_POINTS_TITLE = "Forward Curve Data Points"
MONTHLY_TITLE = "Monthly Interpolated Forward Curve (Linear vs Cubic Spline)"

CURVE_POINTS_COLUMNS = ["Tenor", "Months", "Rate (%)", "Source"]
MONTHLY_COLUMNS = ["Month", "Linear Interpolation (%)", "Cubic Spline Interpolation (%)"]

RATE_FORMAT = "%.4f"


def curve_points_frame(curve: Sequence) -> pd.DataFrame:
    """Discrete curve as a table, one row per node, bad values included."""
    return pd.DataFrame(
        [(p.label, p.months, p.rate, p.display_source) for p in curve],
        columns=CURVE_POINTS_COLUMNS,
    )


def _by_month(series: Sequence, months: pd.Index) -> pd.Series:
    rates = pd.Series({p.month: p.rate for p in series}, dtype=np.float64)
    return rates.reindex(months)


def monthly_frame(
    linear: Sequence,
    spline: Sequence,
    horizon_months: int = HORIZON_MONTHS,
) -> pd.DataFrame:
    """
    Both monthly series aligned by month over 1..horizon.

    A month absent from a series is NaN in its column.
    """
    months = pd.RangeIndex(1, horizon_months + 1)
    return pd.DataFrame({
        MONTHLY_COLUMNS[0]: months,
        MONTHLY_COLUMNS[1]: _by_month(linear, months).to_numpy(),
        MONTHLY_COLUMNS[2]: _by_month(spline, months).to_numpy(),
    })


def format_curve_csv(
    curve: Sequence,
    linear: Sequence,
    spline: Sequence,
    horizon_months: int = HORIZON_MONTHS,
) -> str:
    """Both tables as one CSV document."""
    points = curve_points_frame(curve).to_csv(
        index=False, float_format=RATE_FORMAT, lineterminator="\n"
    )
    monthly = monthly_frame(linear, spline, horizon_months).to_csv(
        index=False, float_format=RATE_FORMAT, na_rep="", lineterminator="\n"
    )
    return (
        f"{CURVE_POINTS_TITLE}\n{points}"
        f"\n"
        f"{MONTHLY_TITLE}\n{monthly}"
    )


def export_to_csv(
    curves: CurveSet,
    output_dir: Union[str, Path],
    prefix: str = "AUD_Forward_Curve",
    as_of: Optional[date] = None,
) -> str:
    """
    Export curves to a CSV file.

    The monthly table uses the cleaned series so that only plausible
    rates are written.

    Args:
        curves: Derived curve set
        output_dir: Output directory
        prefix: Filename prefix
        as_of: Date in the filename, today if omitted

    Returns:
        Path of the created file
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    date_str = (as_of or datetime.now().date()).isoformat()
    filename = output_path / f"{prefix}_{date_str}.csv"

    content = format_curve_csv(
        curves.discrete,
        curves.clean_linear,
        curves.clean_spline,
        curves.horizon_months,
    )
    filename.write_text(content, encoding="utf-8")
    logger.info("Wrote %d curve points to %s", len(curves.discrete), filename)

    return str(filename)


class CurveReportFormatter:
    """
    Formats curves for console output.
    """

    def __init__(self, width: int = 80, precision: int = 4):
        """
        Initialize formatter.

        Args:
            width: Console width
            precision: Decimal places for rates
        """
        self.width = width
        self.precision = precision

    def header(self, title: str) -> str:
        """Create a header line."""
        return f"\n{'='*self.width}\n{title.center(self.width)}\n{'='*self.width}\n"

    def subheader(self, title: str) -> str:
        """Create a subheader."""
        return f"\n{'-'*self.width}\n{title}\n{'-'*self.width}\n"

    def format_dataframe(self, df: pd.DataFrame, max_rows: int = 120) -> str:
        """Format DataFrame for console."""
        with pd.option_context(
            'display.max_rows', max_rows,
            'display.width', self.width,
            'display.float_format', lambda x: f"{x:.{self.precision}f}",
        ):
            return df.to_string(index=False)

    def format_curves(self, curves: CurveSet, errors: Sequence[str] = ()) -> str:
        """Format discrete and monthly curves for console."""
        lines = [self.header("AUD Forward Curve")]

        for error in errors:
            lines.append(f"Warning: {error}")

        if curves.is_empty:
            lines.append("No curve: short rates or bond yields unavailable")
            return "\n".join(lines)

        lines.append(self.subheader(CURVE_POINTS_TITLE))
        lines.append(self.format_dataframe(curve_points_frame(curves.discrete)))

        lines.append(self.subheader(MONTHLY_TITLE))
        lines.append(self.format_dataframe(
            monthly_frame(curves.clean_linear, curves.clean_spline, curves.horizon_months)
        ))

        lines.append(f"\n{'='*self.width}")
        return "\n".join(lines)
