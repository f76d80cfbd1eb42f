"""
Discrete curve assembly.

Merges the short-rate set and the bond-yield set into the canonical
discrete curve, one CurvePoint per schedule node, ordered by month.
The spread is subtracted from the adjustable (BBSW) nodes only.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..conventions import CurveCategory, bps_to_percent
from ..market_data import ShortRateSet, BondYieldSet
from .schedule import TenorSchedule, schedule_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurvePoint:
    """
    A node of the discrete curve.

    Attributes:
        label: Tenor display string (e.g., "Cash", "6M", "10Y")
        months: Node position in months, the interpolation x-coordinate
        rate: Rate in percent
        category: Provenance tag
        source: Provenance display label, the category's value if None
    """
    label: str
    months: int
    rate: float
    category: CurveCategory
    source: Optional[str] = None

    @property
    def display_source(self) -> str:
        return self.source or self.category.value


DiscreteCurve = Tuple[CurvePoint, ...]


def adjusted_short_rate(rate: float, spread_bps: float) -> float:
    """Short rate less the spread, e.g. 4.34 less 30bps gives 4.04."""
    return rate - bps_to_percent(spread_bps)


def assemble_from_schedule(
    schedule: TenorSchedule,
    short_rates: Optional[ShortRateSet],
    bond_yields: Optional[BondYieldSet],
    spread_bps: float = 0.0,
) -> DiscreteCurve:
    """
    Build a discrete curve from a tenor schedule.

    Each schedule node reads its rate from whichever rate set carries
    its field. Adjustable nodes have the spread subtracted.

    Args:
        schedule: Validated tenor schedule
        short_rates: Short-rate set, or None if unavailable
        bond_yields: Bond-yield set, or None if unavailable
        spread_bps: Spread in basis points

    Returns:
        Tuple of CurvePoint ordered by months, empty if either set is missing
    """
    if short_rates is None or bond_yields is None:
        logger.debug(
            "Rate set missing (short_rates=%s, bond_yields=%s); returning empty curve",
            short_rates is not None, bond_yields is not None,
        )
        return ()

    sources = {**bond_yields.as_dict(), **short_rates.as_dict()}

    points = []
    for spec in schedule:
        if spec.field not in sources:
            raise ValueError(f"Tenor {spec.label} refers to unknown rate field '{spec.field}'")

        rate = sources[spec.field]
        if spec.adjustable:
            rate = adjusted_short_rate(rate, spread_bps)

        points.append(CurvePoint(spec.label, spec.months, rate, spec.category, spec.source))

    return tuple(points)


def assemble(
    short_rates: Optional[ShortRateSet],
    bond_yields: Optional[BondYieldSet],
    spread_bps: float = 0.0,
    include_cash: bool = True,
) -> DiscreteCurve:
    """
    Assemble the standard AUD curve.

    Full mode (include_cash=True) produces Cash, 1M, 3M, 6M, 2Y, 3Y, 5Y, 10Y.
    Reduced mode omits the cash node.
    """
    return assemble_from_schedule(
        schedule_for(include_cash), short_rates, bond_yields, spread_bps
    )
