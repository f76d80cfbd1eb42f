#!/usr/bin/env python
"""
AUD Forward Curve Builder

Builds the discrete AUD curve and its monthly interpolations from either
saved RBA tables or rates entered on the command line:
1. Load F1.1 (cash rate, BBSW) and F2 (government bonds), or take manual rates
2. Assemble the discrete curve with the BBSW spread
3. Interpolate monthly (linear and natural cubic spline)
4. Print the curves and optionally export them to CSV

Usage:
    python build_curve.py --f1 f1.1-data.csv --f2 f2-data.csv [--spread-bps 30]
    python build_curve.py --short-rates 4.35 4.34 4.30 4.20 --bond-yields 3.80 3.85 4.00 4.40
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from audcurve import (
    HORIZON_MONTHS,
    ShortRateSet,
    BondYieldSet,
    MarketSnapshot,
    CurveInputs,
    CurveReportFormatter,
    derive_curves,
    export_to_csv,
    load_market_data,
)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="AUD Forward Curve Builder")
    parser.add_argument("--f1", type=str, help="Path to the RBA F1.1 CSV (cash rate, BBSW)")
    parser.add_argument("--f2", type=str, help="Path to the RBA F2 CSV (government bonds)")
    parser.add_argument(
        "--short-rates",
        type=float,
        nargs=4,
        metavar=("CASH", "1M", "3M", "6M"),
        help="Manual short rates in percent, overriding --f1",
    )
    parser.add_argument(
        "--bond-yields",
        type=float,
        nargs=4,
        metavar=("2Y", "3Y", "5Y", "10Y"),
        help="Manual bond yields in percent, overriding --f2",
    )
    parser.add_argument(
        "--spread-bps",
        type=float,
        default=0.0,
        help="Spread subtracted from BBSW rates, in basis points",
    )
    parser.add_argument(
        "--no-cash",
        action="store_true",
        help="Omit the cash-rate node at month 0",
    )
    parser.add_argument(
        "--horizon",
        type=int,
        default=HORIZON_MONTHS,
        help="Last month of the monthly curves",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Write the curves to a CSV file in this directory",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def load_snapshot(args: argparse.Namespace) -> MarketSnapshot:
    """
    Market snapshot from whichever RBA tables were given, with manual
    rates taking precedence. A side with neither a table nor manual
    rates is recorded in the snapshot's errors.
    """
    snapshot = load_market_data(
        None if args.short_rates else args.f1,
        None if args.bond_yields else args.f2,
    )

    if args.short_rates:
        snapshot.short_rates = ShortRateSet(*args.short_rates)
    elif not args.f1:
        snapshot.errors.append("No short rates: pass --f1 or --short-rates")

    if args.bond_yields:
        snapshot.bond_yields = BondYieldSet(*args.bond_yields)
    elif not args.f2:
        snapshot.errors.append("No bond yields: pass --f2 or --bond-yields")

    return snapshot


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    snapshot = load_snapshot(args)
    inputs = CurveInputs.from_snapshot(
        snapshot,
        spread_bps=args.spread_bps,
        include_cash=not args.no_cash,
        horizon_months=args.horizon,
    )
    curves = derive_curves(inputs)

    print(CurveReportFormatter().format_curves(curves, snapshot.errors))

    if args.output_dir and not curves.is_empty:
        path = export_to_csv(curves, args.output_dir, as_of=snapshot.as_of)
        print(f"\nCSV written to {path}")

    return 0 if snapshot.is_complete else 1


if __name__ == "__main__":
    sys.exit(main())
