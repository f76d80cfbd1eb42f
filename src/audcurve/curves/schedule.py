"""
Tenor schedules for curve assembly.

A schedule is the configuration table that maps each curve node to its
source field, month and provenance. Duplicate months are rejected when
the schedule is built, so the interpolators always see distinct knots.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional, Tuple

from ..conventions import CurveCategory, SPOT_SOURCE, tenor_to_months


@dataclass(frozen=True)
class TenorSpec:
    """
    One node of the discrete curve.

    Attributes:
        label: Display tenor (e.g., "Cash", "3M", "10Y")
        months: Node position in whole months
        category: Provenance tag for the node
        field: Attribute name on ShortRateSet or BondYieldSet
        adjustable: Whether the spread is subtracted from this node
        source: Display label for the node's provenance, the category's
            value if omitted
    """
    label: str
    months: int
    category: CurveCategory
    field: str
    adjustable: bool = False
    source: Optional[str] = None


class TenorSchedule:
    """Validated, month-ordered sequence of TenorSpec."""

    def __init__(self, specs: Iterable[TenorSpec]):
        specs = tuple(specs)
        seen = {}
        for spec in specs:
            if not isinstance(spec.months, int) or spec.months < 0:
                raise ValueError(
                    f"Tenor {spec.label} must have a non-negative integer month, got {spec.months!r}"
                )
            if spec.months in seen:
                raise ValueError(
                    f"Duplicate tenor month {spec.months}: {seen[spec.months]} and {spec.label}"
                )
            seen[spec.months] = spec.label

        self.specs: Tuple[TenorSpec, ...] = tuple(sorted(specs, key=lambda s: s.months))

    def __iter__(self) -> Iterator[TenorSpec]:
        return iter(self.specs)

    def __len__(self) -> int:
        return len(self.specs)

    def __repr__(self) -> str:
        labels = ", ".join(f"{s.label}={s.months}" for s in self.specs)
        return f"TenorSchedule({labels})"

    @property
    def months(self) -> Tuple[int, ...]:
        return tuple(s.months for s in self.specs)

    def without(self, category: CurveCategory) -> "TenorSchedule":
        """Return a schedule with every node of the given category removed."""
        return TenorSchedule(s for s in self.specs if s.category is not category)


_SHORT = CurveCategory.SHORT_RATE
_BOND = CurveCategory.BOND_YIELD


def _node(label: str, category: CurveCategory, field: str, adjustable: bool = False) -> TenorSpec:
    return TenorSpec(label, tenor_to_months(label), category, field, adjustable)


FULL_SCHEDULE = TenorSchedule([
    _node("Cash", CurveCategory.CASH_RATE, "cash"),
    _node("1M", _SHORT, "one_month", adjustable=True),
    _node("3M", _SHORT, "three_month", adjustable=True),
    _node("6M", _SHORT, "six_month", adjustable=True),
    _node("2Y", _BOND, "bond_2y"),
    _node("3Y", _BOND, "bond_3y"),
    _node("5Y", _BOND, "bond_5y"),
    _node("10Y", _BOND, "bond_10y"),
])

# Without the cash node the short nodes read as spot rates
REDUCED_SCHEDULE = TenorSchedule(
    replace(s, source=SPOT_SOURCE) if s.category is _SHORT else s
    for s in FULL_SCHEDULE.without(CurveCategory.CASH_RATE)
)


def schedule_for(include_cash: bool) -> TenorSchedule:
    """Full schedule with the cash node, or the reduced one without it."""
    return FULL_SCHEDULE if include_cash else REDUCED_SCHEDULE
