"""
Explicit recomputation of every curve from one set of inputs.

The host (CLI, notebook, UI) decides when inputs have changed and calls
derive_curves again; nothing is cached here.
"""

from dataclasses import dataclass
from typing import Optional, Union

from ..conventions import HORIZON_MONTHS, InterpolationMethod
from ..market_data import ShortRateSet, BondYieldSet, MarketSnapshot
from .assembler import DiscreteCurve, assemble
from .interpolation import MonthlySeries, linear_fill, spline_fill, regression_fill
from .validation import clean


@dataclass(frozen=True)
class CurveInputs:
    """
    Everything the curves depend on.

    Attributes:
        short_rates: Short-rate set, or None if unavailable
        bond_yields: Bond-yield set, or None if unavailable
        spread_bps: Spread subtracted from BBSW nodes, in basis points
        include_cash: Include the cash-rate node at month 0
        horizon_months: Last month of the monthly series
    """
    short_rates: Optional[ShortRateSet]
    bond_yields: Optional[BondYieldSet]
    spread_bps: float = 0.0
    include_cash: bool = True
    horizon_months: int = HORIZON_MONTHS

    @classmethod
    def from_snapshot(cls, snapshot: MarketSnapshot, **kwargs) -> "CurveInputs":
        """Inputs from a loaded market snapshot plus curve settings."""
        return cls(snapshot.short_rates, snapshot.bond_yields, **kwargs)


@dataclass(frozen=True)
class CurveSet:
    """
    Discrete curve and its monthly interpolations.

    linear and spline hold the raw interpolator output; use the clean_*
    properties or series() for anything charted or exported.
    """
    discrete: DiscreteCurve
    linear: MonthlySeries
    spline: MonthlySeries
    horizon_months: int = HORIZON_MONTHS

    @property
    def clean_linear(self) -> MonthlySeries:
        return clean(self.linear)

    @property
    def clean_spline(self) -> MonthlySeries:
        return clean(self.spline)

    @property
    def is_empty(self) -> bool:
        return len(self.discrete) == 0

    def series(self, method: Union[str, InterpolationMethod]) -> MonthlySeries:
        """Cleaned monthly series for the selected interpolation method."""
        if not isinstance(method, InterpolationMethod):
            method = InterpolationMethod.from_string(method)

        if method is InterpolationMethod.LINEAR:
            return self.clean_linear
        elif method is InterpolationMethod.CUBIC_SPLINE:
            return self.clean_spline
        return clean(regression_fill(self.discrete, self.horizon_months))


def derive_curves(inputs: CurveInputs) -> CurveSet:
    """Assemble the discrete curve and interpolate it both ways."""
    discrete = assemble(
        inputs.short_rates,
        inputs.bond_yields,
        inputs.spread_bps,
        inputs.include_cash,
    )
    return CurveSet(
        discrete=discrete,
        linear=linear_fill(discrete, inputs.horizon_months),
        spline=spline_fill(discrete, inputs.horizon_months),
        horizon_months=inputs.horizon_months,
    )
