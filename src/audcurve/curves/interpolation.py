"""
Monthly interpolation of the discrete curve.

Provides:
- LinearInterpolator: Piecewise linear between nodes, flat beyond the last node
- CubicSplineInterpolator: Natural cubic spline through the nodes
- RegressionInterpolator: Least-squares straight line through the nodes

All interpolators use months as x-coordinates and percentage rates as
y-coordinates. The *_fill functions evaluate an interpolator at every
whole month from 1 to the horizon and return a MonthlySeries.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from ..conventions import HORIZON_MONTHS, InterpolationMethod


@dataclass(frozen=True)
class MonthlyRate:
    """Rate in percent at a whole month."""
    month: int
    rate: float


MonthlySeries = Tuple[MonthlyRate, ...]


def _curve_arrays(curve: Sequence) -> Tuple[np.ndarray, np.ndarray]:
    """Months and rates of a curve as float64 arrays, sorted by month."""
    months = np.array([p.months for p in curve], dtype=np.float64)
    rates = np.array([p.rate for p in curve], dtype=np.float64)
    idx = np.argsort(months, kind="stable")
    return months[idx], rates[idx]


class Interpolator(ABC):
    """Abstract base class for monthly curve interpolation."""

    @abstractmethod
    def fit(self, months: np.ndarray, rates: np.ndarray) -> None:
        """
        Fit the interpolator to the curve nodes.

        Args:
            months: Node months
            rates: Node rates in percent
        """
        pass

    @abstractmethod
    def interpolate(self, m: float) -> Optional[float]:
        """
        Interpolate at a single month.

        Returns:
            Interpolated rate, or None if the month is not covered
        """
        pass

    def __call__(self, m: float) -> Optional[float]:
        """Convenience method to call interpolate."""
        return self.interpolate(m)

    def fill(self, horizon_months: int = HORIZON_MONTHS) -> MonthlySeries:
        """Evaluate at months 1..horizon, omitting months with no rate."""
        series = []
        for m in range(1, horizon_months + 1):
            rate = self.interpolate(m)
            if rate is not None:
                series.append(MonthlyRate(m, rate))
        return tuple(series)


class LinearInterpolator(Interpolator):
    """
    Linear interpolation.

    Interpolates between the rightmost node at or before the month and
    the leftmost node at or after it. Beyond the last node the last rate
    is carried flat. Months before the first node are not covered.
    """

    def __init__(self):
        self.months: Optional[np.ndarray] = None
        self.rates: Optional[np.ndarray] = None

    def fit(self, months: np.ndarray, rates: np.ndarray) -> None:
        """Fit linear interpolator. An empty node set is allowed."""
        if len(months) != len(rates):
            raise ValueError("Months and rates must have same length")

        idx = np.argsort(months, kind="stable")
        self.months = np.asarray(months, dtype=np.float64)[idx]
        self.rates = np.asarray(rates, dtype=np.float64)[idx]

    def interpolate(self, m: float) -> Optional[float]:
        """Linear interpolation with flat extrapolation to the right."""
        if self.months is None:
            raise RuntimeError("Interpolator not fitted")

        # Rightmost node with months <= m
        n_at_or_before = int(np.searchsorted(self.months, m, side='right'))
        if n_at_or_before == 0:
            return None
        lower = n_at_or_before - 1

        # Leftmost node with months >= m
        upper = int(np.searchsorted(self.months, m, side='left'))

        if upper == len(self.months) or self.months[lower] == self.months[upper]:
            return float(self.rates[lower])

        x0, x1 = self.months[lower], self.months[upper]
        y0, y1 = self.rates[lower], self.rates[upper]
        return float(y0 + (y1 - y0) * (m - x0) / (x1 - x0))


class CubicSplineInterpolator(Interpolator):
    """
    Natural cubic spline interpolation.

    Second derivative is zero at both end nodes. Months outside the node
    range are evaluated on the nearest end segment's cubic.
    """

    def __init__(self):
        self.months: Optional[np.ndarray] = None
        self.rates: Optional[np.ndarray] = None
        self.coefficients: Optional[np.ndarray] = None  # Shape: (n-1, 4) for [a, b, c, d]

    def fit(self, months: np.ndarray, rates: np.ndarray) -> None:
        """
        Fit natural cubic spline.

        Solves the tridiagonal system for the quadratic coefficients with
        a forward sweep (l, mu, z) and back substitution, then derives
        the linear and cubic coefficients of each segment.
        """
        if len(months) != len(rates):
            raise ValueError("Months and rates must have same length")

        n = len(months)
        if n < 2:
            raise ValueError("Need at least 2 points for interpolation")

        idx = np.argsort(months, kind="stable")
        x = np.asarray(months, dtype=np.float64)[idx]
        y = np.asarray(rates, dtype=np.float64)[idx]
        self.months = x
        self.rates = y

        h = np.diff(x)

        alpha = np.zeros(n)
        for i in range(1, n - 1):
            alpha[i] = 3.0 / h[i] * (y[i+1] - y[i]) - 3.0 / h[i-1] * (y[i] - y[i-1])

        # Natural boundary: l[0] = l[n-1] = 1, mu and z start at zero
        l = np.ones(n)
        mu = np.zeros(n)
        z = np.zeros(n)
        for i in range(1, n - 1):
            l[i] = 2.0 * (x[i+1] - x[i-1]) - h[i-1] * mu[i-1]
            mu[i] = h[i] / l[i]
            z[i] = (alpha[i] - h[i-1] * z[i-1]) / l[i]

        # S_i(x) = a_i + b_i*(x-x_i) + c_i*(x-x_i)^2 + d_i*(x-x_i)^3
        c = np.zeros(n)
        b = np.zeros(n - 1)
        d = np.zeros(n - 1)
        for j in range(n - 2, -1, -1):
            c[j] = z[j] - mu[j] * c[j+1]
            b[j] = (y[j+1] - y[j]) / h[j] - h[j] * (c[j+1] + 2.0 * c[j]) / 3.0
            d[j] = (c[j+1] - c[j]) / (3.0 * h[j])

        self.coefficients = np.column_stack([y[:-1], b, c[:-1], d])

    def _segment(self, m: float) -> int:
        idx = int(np.searchsorted(self.months, m, side='right')) - 1
        return max(0, min(idx, len(self.coefficients) - 1))

    def interpolate(self, m: float) -> float:
        """Evaluate cubic spline at month m."""
        if self.months is None or self.coefficients is None:
            raise RuntimeError("Interpolator not fitted")

        idx = self._segment(m)
        dx = m - self.months[idx]
        a, b, c, d = self.coefficients[idx]

        return float(a + b*dx + c*dx**2 + d*dx**3)

    def derivative(self, m: float) -> float:
        """First derivative of cubic spline at month m."""
        if self.months is None or self.coefficients is None:
            raise RuntimeError("Interpolator not fitted")

        idx = self._segment(m)
        dx = m - self.months[idx]
        _, b, c, d = self.coefficients[idx]

        return float(b + 2*c*dx + 3*d*dx**2)

    def second_derivative(self, m: float) -> float:
        """Second derivative of cubic spline at month m."""
        if self.months is None or self.coefficients is None:
            raise RuntimeError("Interpolator not fitted")

        idx = self._segment(m)
        dx = m - self.months[idx]
        _, _, c, d = self.coefficients[idx]

        return float(2*c + 6*d*dx)


class RegressionInterpolator(Interpolator):
    """
    Ordinary least-squares line through the nodes.

    A smooth trend forecast rather than an interpolant: the line does
    not pass through the nodes in general.
    """

    def __init__(self):
        self.slope: Optional[float] = None
        self.intercept: Optional[float] = None

    def fit(self, months: np.ndarray, rates: np.ndarray) -> None:
        """Fit slope and intercept by least squares."""
        if len(months) != len(rates):
            raise ValueError("Months and rates must have same length")

        x = np.asarray(months, dtype=np.float64)
        y = np.asarray(rates, dtype=np.float64)
        if len(np.unique(x)) < 2:
            raise ValueError("Need at least 2 distinct months for regression")

        slope, intercept = np.polyfit(x, y, 1)
        self.slope = float(slope)
        self.intercept = float(intercept)

    def interpolate(self, m: float) -> float:
        """Evaluate the fitted line at month m."""
        if self.slope is None:
            raise RuntimeError("Interpolator not fitted")

        return self.slope * m + self.intercept


def linear_fill(curve: Sequence, horizon_months: int = HORIZON_MONTHS) -> MonthlySeries:
    """
    Piecewise-linear monthly curve.

    Months before the first node are omitted, so the series can be
    shorter than the horizon. An empty curve gives an empty series.
    """
    interp = LinearInterpolator()
    interp.fit(*_curve_arrays(curve))
    return interp.fill(horizon_months)


def spline_fill(curve: Sequence, horizon_months: int = HORIZON_MONTHS) -> MonthlySeries:
    """
    Natural cubic spline monthly curve.

    Returns exactly horizon_months entries, or an empty series when the
    curve has fewer than 2 nodes.
    """
    if len(curve) < 2:
        return ()

    interp = CubicSplineInterpolator()
    interp.fit(*_curve_arrays(curve))
    return interp.fill(horizon_months)


def regression_fill(curve: Sequence, horizon_months: int = HORIZON_MONTHS) -> MonthlySeries:
    """Least-squares trend line evaluated at every month, empty if it cannot be fitted."""
    months, rates = _curve_arrays(curve)
    if len(np.unique(months)) < 2:
        return ()

    interp = RegressionInterpolator()
    interp.fit(months, rates)
    return interp.fill(horizon_months)


def create_interpolator(method: Union[str, InterpolationMethod]) -> Interpolator:
    """
    Factory function to create an interpolator by name.

    Args:
        method: InterpolationMethod, or one of "linear", "cubic_spline", "regression"

    Returns:
        Interpolator instance
    """
    if not isinstance(method, InterpolationMethod):
        method = InterpolationMethod.from_string(method)

    if method is InterpolationMethod.LINEAR:
        return LinearInterpolator()
    elif method is InterpolationMethod.CUBIC_SPLINE:
        return CubicSplineInterpolator()
    else:
        return RegressionInterpolator()


__all__ = [
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
]
