"""
Market data snapshots.

Provides the raw inputs to curve construction:
- ShortRateSet: RBA cash rate and BBSW 1M/3M/6M
- BondYieldSet: Commonwealth government bond yields 2Y/3Y/5Y/10Y
- MarketSnapshot: both sets as loaded, plus load errors

Each rate set is complete or absent. A missing source is modelled as
None on the snapshot, never as a set with zero-filled fields, since
zero is a valid rate.
"""

from dataclasses import dataclass, field, fields, asdict
from datetime import date, datetime
from typing import Dict, List, Mapping, Optional


def _require_fields(cls, data: Mapping[str, float]) -> Dict[str, float]:
    names = [f.name for f in fields(cls)]
    missing = [name for name in names if name not in data or data[name] is None]
    if missing:
        raise ValueError(f"{cls.__name__} missing fields: {', '.join(missing)}")
    return {name: float(data[name]) for name in names}


@dataclass(frozen=True)
class ShortRateSet:
    """
    Short end of the curve.

    Attributes:
        cash: RBA cash rate (overnight), percent
        one_month: 1M BBSW, percent
        three_month: 3M BBSW, percent
        six_month: 6M BBSW, percent
    """
    cash: float
    one_month: float
    three_month: float
    six_month: float

    @classmethod
    def from_dict(cls, data: Mapping[str, float]) -> "ShortRateSet":
        """Build from a mapping holding every field."""
        return cls(**_require_fields(cls, data))

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class BondYieldSet:
    """
    Government bond yields.

    Attributes:
        bond_2y: 2 year yield, percent
        bond_3y: 3 year yield, percent
        bond_5y: 5 year yield, percent
        bond_10y: 10 year yield, percent
    """
    bond_2y: float
    bond_3y: float
    bond_5y: float
    bond_10y: float

    @classmethod
    def from_dict(cls, data: Mapping[str, float]) -> "BondYieldSet":
        """Build from a mapping holding every field."""
        return cls(**_require_fields(cls, data))

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass
class MarketSnapshot:
    """
    Result of loading both source tables.

    Attributes:
        short_rates: Short rates, or None if the F1 table failed to load
        bond_yields: Bond yields, or None if the F2 table failed to load
        errors: Human-readable load errors, one per failed source
        as_of: Observation date of the latest short-rate row, if known
        last_update: When the snapshot was taken
    """
    short_rates: Optional[ShortRateSet] = None
    bond_yields: Optional[BondYieldSet] = None
    errors: List[str] = field(default_factory=list)
    as_of: Optional[date] = None
    last_update: datetime = field(default_factory=datetime.now)

    @property
    def is_complete(self) -> bool:
        """True when both rate sets are available."""
        return self.short_rates is not None and self.bond_yields is not None

    def to_dict(self) -> Dict:
        """Serialize to dictionary."""
        return {
            'short_rates': self.short_rates.as_dict() if self.short_rates else None,
            'bond_yields': self.bond_yields.as_dict() if self.bond_yields else None,
            'errors': list(self.errors),
            'as_of': self.as_of.isoformat() if self.as_of else None,
            'last_update': self.last_update.isoformat(),
        }
