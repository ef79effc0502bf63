"""Load uploaded report files into row dictionaries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .parsers import CSVParser, XLSXParser

logger = logging.getLogger(__name__)

CSV_SUFFIXES = (".csv",)
XLSX_SUFFIXES = (".xlsx", ".xlsm")


@dataclass(frozen=True)
class LoadedTable:
    """Rows read from one file."""

    rows: list[dict[str, Any]]
    # CSV reports write ambiguous dates month-first; workbooks day-first
    is_csv: bool
    source: str


def load_rows(file_path: str | Path, dedupe_claims: bool = True) -> LoadedTable:
    """Read a CSV or Excel file into row dictionaries.

    Args:
        file_path: Path to the file
        dedupe_claims: For CSV, keep only the first row per claim ID

    Returns:
        LoadedTable

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file type is not supported
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    suffix = path.suffix.lower()
    if suffix in CSV_SUFFIXES:
        rows = CSVParser(dedupe_claims=dedupe_claims).parse(str(path))
        is_csv = True
    elif suffix in XLSX_SUFFIXES:
        rows = XLSXParser().parse(str(path))
        is_csv = False
    else:
        raise ValueError(f"Unsupported file type: {suffix}")

    logger.info(f"Loaded {len(rows)} row(s) from {path.name}")
    return LoadedTable(rows=rows, is_csv=is_csv, source=str(path))
