"""
Ledger database loader.

File format:
    line 1   N, the number of transactions after genesis
    line 2+  "left_parent right_parent timestamp", one transaction per line

Time Complexity: O(N)
Memory: O(N)
"""

import io
import logging
from pathlib import Path
from typing import List, Tuple

import pandas as pd

from core.errors import EmptyInput, MalformedInput
from core.graph.graph_builder import Record
from utils.validators import RECORD_COLUMNS, to_int_values, validate_records

logger = logging.getLogger(__name__)


def _read_records(body: str) -> pd.DataFrame:
    if not body.strip():
        return pd.DataFrame(columns=RECORD_COLUMNS)
    try:
        return pd.read_csv(
            io.StringIO(body),
            sep=r"\s+",
            header=None,
            names=RECORD_COLUMNS,
            index_col=False,
            dtype=str,
        )
    except pd.errors.ParserError as e:
        raise MalformedInput(f"Failed to parse transaction records: {e}") from e


def parse_database(text: str) -> Tuple[int, List[Record]]:
    """
    Parse database text into (transaction_count, records).

    Raises:
        EmptyInput: the text is empty
        MalformedInput: bad header or records
    """
    if not text.strip():
        raise EmptyInput("File is empty.")

    header, _, body = text.lstrip().partition("\n")
    try:
        transaction_count = int(header.strip())
    except ValueError:
        raise MalformedInput(
            f"First line must be the transaction count, got {header.strip()!r}"
        ) from None

    df = _read_records(body)
    validation_error = validate_records(df)
    if validation_error:
        raise MalformedInput(validation_error)

    records = list(
        zip(
            to_int_values(df["left_parent"]),
            to_int_values(df["right_parent"]),
            to_int_values(df["timestamp"]),
        )
    )
    logger.info("Parsed %d records (declared %d)", len(records), transaction_count)
    return transaction_count, records


def load_database(path: str | Path) -> Tuple[int, List[Record]]:
    """Read and parse a database file."""
    text = Path(path).read_text(encoding="utf-8")
    return parse_database(text)
