"""
Data package - RBA statistical table loaders.
"""

from .rba import (
    F1_COLUMNS,
    F2_COLUMNS,
    read_table,
    parse_f1_table,
    parse_f2_table,
    load_market_data,
)

__all__ = [
    "F1_COLUMNS",
    "F2_COLUMNS",
    "read_table",
    "parse_f1_table",
    "parse_f2_table",
    "load_market_data",
]
