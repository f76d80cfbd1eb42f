"""
Unit tests for tenor schedules and curve assembly.
"""

import math

import pytest

from audcurve.conventions import CurveCategory
from audcurve.market_data import ShortRateSet, BondYieldSet
from audcurve.curves import (
    TenorSpec,
    TenorSchedule,
    FULL_SCHEDULE,
    REDUCED_SCHEDULE,
    schedule_for,
    CurvePoint,
    adjusted_short_rate,
    assemble,
    assemble_from_schedule,
)


@pytest.fixture
def short_rates():
    return ShortRateSet(cash=4.35, one_month=4.34, three_month=4.30, six_month=4.20)


@pytest.fixture
def bond_yields():
    return BondYieldSet(bond_2y=3.80, bond_3y=3.85, bond_5y=4.00, bond_10y=4.40)


class TestTenorSchedule:
    """Tests for schedule validation."""

    def test_full_schedule(self):
        assert FULL_SCHEDULE.months == (0, 1, 3, 6, 24, 36, 60, 120)
        assert [s.label for s in FULL_SCHEDULE] == ["Cash", "1M", "3M", "6M", "2Y", "3Y", "5Y", "10Y"]
        assert [s.label for s in FULL_SCHEDULE if s.adjustable] == ["1M", "3M", "6M"]

    def test_reduced_schedule(self):
        assert REDUCED_SCHEDULE.months == (1, 3, 6, 24, 36, 60, 120)
        assert schedule_for(True) is FULL_SCHEDULE
        assert schedule_for(False) is REDUCED_SCHEDULE

    def test_specs_sorted_by_month(self):
        schedule = TenorSchedule([
            TenorSpec("5Y", 60, CurveCategory.BOND_YIELD, "bond_5y"),
            TenorSpec("2Y", 24, CurveCategory.BOND_YIELD, "bond_2y"),
        ])
        assert schedule.months == (24, 60)
        assert len(schedule) == 2

    def test_duplicate_months_rejected(self):
        with pytest.raises(ValueError, match="Duplicate tenor month 24"):
            TenorSchedule([
                TenorSpec("2Y", 24, CurveCategory.BOND_YIELD, "bond_2y"),
                TenorSpec("24M", 24, CurveCategory.SHORT_RATE, "six_month", adjustable=True),
            ])

    def test_negative_month_rejected(self):
        with pytest.raises(ValueError):
            TenorSchedule([TenorSpec("X", -1, CurveCategory.CASH_RATE, "cash")])


class TestAssemble:
    """Tests for the discrete curve assembler."""

    def test_full_mode_scenario(self, short_rates, bond_yields):
        """Cash passes through, BBSW less 30bps, bonds unchanged."""
        curve = assemble(short_rates, bond_yields, spread_bps=30, include_cash=True)

        expected = [
            ("Cash", 0, 4.35, CurveCategory.CASH_RATE),
            ("1M", 1, 4.04, CurveCategory.SHORT_RATE),
            ("3M", 3, 4.00, CurveCategory.SHORT_RATE),
            ("6M", 6, 3.90, CurveCategory.SHORT_RATE),
            ("2Y", 24, 3.80, CurveCategory.BOND_YIELD),
            ("3Y", 36, 3.85, CurveCategory.BOND_YIELD),
            ("5Y", 60, 4.00, CurveCategory.BOND_YIELD),
            ("10Y", 120, 4.40, CurveCategory.BOND_YIELD),
        ]

        assert len(curve) == 8
        for point, (label, months, rate, category) in zip(curve, expected):
            assert point.label == label
            assert point.months == months
            assert abs(point.rate - rate) < 1e-12
            assert point.category is category

    def test_reduced_mode(self, short_rates, bond_yields):
        curve = assemble(short_rates, bond_yields, spread_bps=30, include_cash=False)

        assert len(curve) == 7
        assert curve[0].label == "1M"
        assert curve[0].category is CurveCategory.SHORT_RATE
        assert all(p.category is not CurveCategory.CASH_RATE for p in curve)
        assert [p.display_source for p in curve[:3]] == ["Spot (adj)"] * 3
        assert curve[3].display_source == "Govt Bond"

    def test_full_mode_sources(self, short_rates, bond_yields):
        curve = assemble(short_rates, bond_yields, spread_bps=30, include_cash=True)

        assert [p.display_source for p in curve[:4]] == ["Cash Rate"] + ["BBSW (adj)"] * 3
        assert all(p.source is None for p in curve)

    @pytest.mark.parametrize("include_cash", [True, False])
    def test_months_strictly_increasing(self, short_rates, bond_yields, include_cash):
        curve = assemble(short_rates, bond_yields, 12.5, include_cash)
        months = [p.months for p in curve]
        assert all(a < b for a, b in zip(months, months[1:]))

    def test_spread_only_moves_short_points(self, short_rates, bond_yields):
        base = assemble(short_rates, bond_yields, spread_bps=0)
        bumped = assemble(short_rates, bond_yields, spread_bps=55)

        for p0, p1 in zip(base, bumped):
            if p0.category is CurveCategory.SHORT_RATE:
                assert abs((p0.rate - p1.rate) - 0.55) < 1e-12
            else:
                assert p0.rate == p1.rate

    def test_negative_spread_accepted(self, short_rates, bond_yields):
        curve = assemble(short_rates, bond_yields, spread_bps=-20)
        assert abs(curve[1].rate - 4.54) < 1e-12

    def test_missing_short_rates(self, bond_yields):
        assert assemble(None, bond_yields, 30) == ()

    def test_missing_bond_yields(self, short_rates):
        assert assemble(short_rates, None, 30, include_cash=False) == ()

    def test_nan_propagates(self, bond_yields):
        rates = ShortRateSet(cash=float("nan"), one_month=4.34, three_month=-0.1, six_month=4.20)
        curve = assemble(rates, bond_yields, 10)

        assert math.isnan(curve[0].rate)
        assert abs(curve[2].rate - (-0.2)) < 1e-12

    def test_pure(self, short_rates, bond_yields):
        first = assemble(short_rates, bond_yields, 30)
        second = assemble(short_rates, bond_yields, 30)
        assert first == second
        assert isinstance(first[0], CurvePoint)

    def test_custom_schedule(self, short_rates, bond_yields):
        schedule = TenorSchedule([
            TenorSpec("3M", 3, CurveCategory.SHORT_RATE, "three_month", adjustable=True),
            TenorSpec("10Y", 120, CurveCategory.BOND_YIELD, "bond_10y"),
        ])
        curve = assemble_from_schedule(schedule, short_rates, bond_yields, 100)

        assert [p.label for p in curve] == ["3M", "10Y"]
        assert abs(curve[0].rate - 3.30) < 1e-12
        assert curve[1].rate == 4.40

    def test_unknown_field(self, short_rates, bond_yields):
        schedule = TenorSchedule([TenorSpec("7Y", 84, CurveCategory.BOND_YIELD, "bond_7y")])
        with pytest.raises(ValueError, match="bond_7y"):
            assemble_from_schedule(schedule, short_rates, bond_yields)

    def test_adjusted_short_rate(self):
        assert abs(adjusted_short_rate(4.34, 30) - 4.04) < 1e-12
        assert math.isnan(adjusted_short_rate(float("nan"), 30))
