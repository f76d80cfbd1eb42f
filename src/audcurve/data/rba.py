"""
Loaders for the RBA statistical tables.

- F1.1: Interest rates and yields, money market (cash rate, BBSW)
- F2: Capital market yields, government bonds

Both tables are CSV files with a block of metadata rows above the data.
The latest observation is the last row that carries a date and numeric
values in every required column. Sources are a file path or an open
text buffer; wrap CSV text already in memory in io.StringIO. Fetching
the file is left to the caller.
"""

import csv
import io
import logging
from datetime import date
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import pandas as pd

from ..market_data import ShortRateSet, BondYieldSet, MarketSnapshot

logger = logging.getLogger(__name__)

Source = Union[str, Path, io.TextIOBase]

# Column positions in F1.1: 0=Date, 1=Cash, 7=1M BBSW, 8=3M BBSW, 9=6M BBSW
F1_COLUMNS: Dict[str, int] = {
    "cash": 1,
    "one_month": 7,
    "three_month": 8,
    "six_month": 9,
}

# Column positions in F2: 0=Date, 1=2Y, 2=3Y, 3=5Y, 4=10Y
F2_COLUMNS: Dict[str, int] = {
    "bond_2y": 1,
    "bond_3y": 2,
    "bond_5y": 3,
    "bond_10y": 4,
}

RBA_DATE_FORMAT = "%d-%b-%Y"


def _read_text(source: Source) -> str:
    if hasattr(source, "read"):
        return source.read()
    return Path(source).read_text(encoding="utf-8-sig", errors="replace")


def read_table(source: Source) -> pd.DataFrame:
    """
    Read an RBA CSV into a frame of strings with integer column labels.

    Rows are ragged in the metadata block, so the frame is as wide as the
    widest row and short rows are padded with empty strings.
    """
    text = _read_text(source)
    width = max((len(row) for row in csv.reader(io.StringIO(text))), default=0)
    if width == 0:
        return pd.DataFrame()

    frame = pd.read_csv(
        io.StringIO(text),
        header=None,
        names=list(range(width)),
        dtype=str,
        skip_blank_lines=True,
        keep_default_na=False,
    )
    return frame.fillna("").apply(lambda col: col.str.strip())


def _parse_date(cell: str) -> Optional[date]:
    parsed = pd.to_datetime(cell, format=RBA_DATE_FORMAT, errors="coerce")
    return None if pd.isna(parsed) else parsed.date()


def _latest_row(
    frame: pd.DataFrame,
    columns: Dict[str, int],
    require_date: bool,
) -> Optional[Tuple[Dict[str, float], Optional[date]]]:
    if frame.empty or max(columns.values()) >= frame.shape[1]:
        return None

    values = pd.DataFrame({
        name: pd.to_numeric(frame[pos], errors="coerce")
        for name, pos in columns.items()
    })
    valid = values.notna().all(axis=1)
    if require_date:
        valid &= frame[0] != ""

    if not valid.any():
        return None

    row = valid[valid].index[-1]
    return values.loc[row].astype(float).to_dict(), _parse_date(frame.at[row, 0])


def parse_f1_table(source: Source) -> Tuple[ShortRateSet, Optional[date]]:
    """
    Latest cash rate and BBSW rates from table F1.1.

    Returns:
        Tuple of (ShortRateSet, observation date or None)

    Raises:
        ValueError: If no row has a date and all four rates
    """
    latest = _latest_row(read_table(source), F1_COLUMNS, require_date=True)
    if latest is None:
        raise ValueError("No valid BBSW data found in F1 table")

    rates, as_of = latest
    return ShortRateSet.from_dict(rates), as_of


def parse_f2_table(source: Source) -> Tuple[BondYieldSet, Optional[date]]:
    """
    Latest 2Y, 3Y, 5Y and 10Y government bond yields from table F2.

    Raises:
        ValueError: If no row has all four yields
    """
    latest = _latest_row(read_table(source), F2_COLUMNS, require_date=False)
    if latest is None:
        raise ValueError("No valid bond yield data found in F2 table")

    yields, as_of = latest
    return BondYieldSet.from_dict(yields), as_of


def load_market_data(
    f1_source: Optional[Source] = None,
    f2_source: Optional[Source] = None,
) -> MarketSnapshot:
    """
    Load the given tables into a snapshot.

    A table that cannot be read or parsed leaves its rate set as None
    and adds a message to the snapshot's errors; nothing is raised.
    A source of None is skipped and its rate set stays None.
    """
    snapshot = MarketSnapshot()

    if f1_source is not None:
        _load_f1(snapshot, f1_source)
    if f2_source is not None:
        _load_f2(snapshot, f2_source)

    return snapshot


def _load_f1(snapshot: MarketSnapshot, source: Source) -> None:
    try:
        snapshot.short_rates, snapshot.as_of = parse_f1_table(source)
    except (ValueError, OSError, csv.Error) as e:
        logger.warning("Failed to load BBSW from F1 table: %s", e)
        snapshot.errors.append(f"Failed to load BBSW: {e}")


def _load_f2(snapshot: MarketSnapshot, source: Source) -> None:
    try:
        snapshot.bond_yields, bond_date = parse_f2_table(source)
        if snapshot.as_of is None:
            snapshot.as_of = bond_date
    except (ValueError, OSError, csv.Error) as e:
        logger.warning("Failed to load bonds from F2 table: %s", e)
        snapshot.errors.append(f"Failed to load bonds: {e}")
