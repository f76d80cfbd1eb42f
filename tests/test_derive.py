"""
Unit tests for the validator and curve derivation.
"""

import pytest

from audcurve.conventions import InterpolationMethod
from audcurve.market_data import ShortRateSet, BondYieldSet, MarketSnapshot
from audcurve.curves import MonthlyRate, CurveInputs, clean, derive_curves, linear_fill, spline_fill


@pytest.fixture
def inputs():
    return CurveInputs(
        short_rates=ShortRateSet(4.35, 4.34, 4.30, 4.20),
        bond_yields=BondYieldSet(3.80, 3.85, 4.00, 4.40),
        spread_bps=30,
    )


class TestClean:
    """Tests for the monthly series validator."""

    @pytest.fixture
    def dirty_series(self):
        return (
            MonthlyRate(1, 4.0),
            MonthlyRate(2, float("nan")),
            MonthlyRate(3, float("inf")),
            MonthlyRate(4, -0.01),
            MonthlyRate(5, 0.0),
            MonthlyRate(6, 30.0),
            MonthlyRate(7, 30.0001),
            MonthlyRate(8, None),
            MonthlyRate(9, "4.1"),
            MonthlyRate(10, float("-inf")),
        )

    def test_filters_implausible_rates(self, dirty_series):
        assert [p.month for p in clean(dirty_series)] == [1, 5, 6]

    def test_entries_unchanged(self, dirty_series):
        kept = clean(dirty_series)
        assert kept[0] is dirty_series[0]

    def test_idempotent(self, dirty_series):
        once = clean(dirty_series)
        assert clean(once) == once

    def test_empty(self):
        assert clean(()) == ()
        assert clean([]) == ()

    def test_custom_bounds(self, dirty_series):
        assert [p.month for p in clean(dirty_series, lower=-1.0, upper=5.0)] == [1, 4, 5]


class TestDeriveCurves:
    """Tests for end-to-end curve derivation."""

    def test_derive(self, inputs):
        curves = derive_curves(inputs)

        assert len(curves.discrete) == 8
        assert curves.linear == linear_fill(curves.discrete, 96)
        assert curves.spline == spline_fill(curves.discrete, 96)
        assert len(curves.clean_spline) == 96
        assert not curves.is_empty

    def test_reduced_mode_and_horizon(self, inputs):
        curves = derive_curves(CurveInputs(
            inputs.short_rates, inputs.bond_yields,
            spread_bps=30, include_cash=False, horizon_months=48,
        ))

        assert len(curves.discrete) == 7
        assert len(curves.linear) == 48
        assert len(curves.spline) == 48

    def test_missing_input(self, inputs):
        curves = derive_curves(CurveInputs(None, inputs.bond_yields, spread_bps=30))

        assert curves.discrete == ()
        assert curves.linear == ()
        assert curves.spline == ()
        assert curves.clean_linear == ()
        assert curves.is_empty

    def test_deterministic(self, inputs):
        assert derive_curves(inputs) == derive_curves(inputs)

    def test_series_toggle(self, inputs):
        curves = derive_curves(inputs)

        assert curves.series("linear") == curves.clean_linear
        assert curves.series(InterpolationMethod.CUBIC_SPLINE) == curves.clean_spline
        assert len(curves.series("regression")) == 96

    def test_clean_removes_overshoot(self):
        """Spline overshoot below zero is removed from the cleaned series only."""
        curves = derive_curves(CurveInputs(
            ShortRateSet(0.10, 0.10, 0.10, 0.10),
            BondYieldSet(0.10, 2.0, 0.10, 0.10),
            spread_bps=0,
        ))

        negative = [p.month for p in curves.spline if p.rate < 0]
        assert negative
        assert not any(p.month in negative for p in curves.clean_spline)

    def test_from_snapshot(self, inputs):
        snapshot = MarketSnapshot(inputs.short_rates, inputs.bond_yields)
        built = CurveInputs.from_snapshot(snapshot, spread_bps=30)
        assert built == inputs
