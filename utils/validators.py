"""
Transaction record validation.

Ensures parsed database rows hold exactly the integer fields the graph needs.

Time Complexity: O(n) where n = number of rows
Memory: O(n) for the converted copy
"""

from typing import Any

import pandas as pd

RECORD_COLUMNS = [
    "left_parent",
    "right_parent",
    "timestamp",
]

INTEGER_PATTERN = r"[+-]?\d+"


def to_int_values(series: pd.Series) -> pd.Series:
    """Convert integer text to Python ints, which have no fixed width."""
    return series.astype(str).str.strip().map(int)


def validate_records(df: Any) -> str | None:
    """
    Validate record structure. Returns error message if invalid, None if valid.

    Checks:
        1. All record columns present
        2. No missing fields
        3. Every field is a plain integer (no decimals, exponents or inf)
        4. Parent identifiers are nonnegative
    """
    missing = [col for col in RECORD_COLUMNS if col not in df.columns]
    if missing:
        return f"Missing record fields: {', '.join(missing)}"

    if df.empty:
        return None

    null_rows = df.index[df[RECORD_COLUMNS].isnull().any(axis=1)].tolist()
    if null_rows:
        return f"Incomplete records at rows: {', '.join(str(r + 1) for r in null_rows)}"

    for col in RECORD_COLUMNS:
        text = df[col].astype(str).str.strip()
        if not text.str.fullmatch(INTEGER_PATTERN).all():
            return f"Field '{col}' must contain integer values."
        if col != "timestamp" and (to_int_values(text) < 0).any():
            return f"Field '{col}' must not be negative."

    return None
