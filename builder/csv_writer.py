import csv
import os
import tempfile
from dataclasses import astuple
from pathlib import Path
from typing import Iterable, Union

from builder.report_builder import OutputRow

CSV_HEADERS = [
    "block_number",
    "timestamp",
    "user_address",
    "token_address",
    "token_balance",
    "token_symbol",
    "usd_price",
]


def format_row(row: OutputRow) -> list:
    """Row values in column order, usd_price with exactly two decimals"""
    values = list(astuple(row))
    values[-1] = f"{row.usd_price:.2f}"
    return values


def write_rows(rows: Iterable[OutputRow], path: Union[str, Path]) -> int:
    """
    Write the report to `path`, returns the number of data rows written.
    The file only appears at `path` once it is complete.
    """
    rows = list(rows)
    path = Path(path)
    fd, tmp_path = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADERS)
            for row in rows:
                writer.writerow(format_row(row))
        os.replace(tmp_path, path)
    except BaseException:
        os.unlink(tmp_path)
        raise
    return len(rows)
