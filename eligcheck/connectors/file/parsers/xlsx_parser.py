"""XLSX parser for eligibility and claim report workbooks."""

from __future__ import annotations

import logging
from typing import Any

from openpyxl import load_workbook

from .csv_parser import HEADER_SEARCH_ROWS, MIN_HEADER_CELLS, count_non_empty

logger = logging.getLogger(__name__)


class XLSXParser:
    """Parser for the first worksheet of an Excel workbook.

    Cell values keep their types: openpyxl returns datetimes for
    date-formatted cells and numbers for raw serials, both of which the
    date parser understands.
    """

    def __init__(self, sheet_name: str | None = None) -> None:
        """Initialize the XLSX parser.

        Args:
            sheet_name: Worksheet to read; defaults to the first sheet
        """
        self.sheet_name = sheet_name

    def parse(self, file_path: str) -> list[dict[str, Any]]:
        """Parse a workbook into row dictionaries.

        Args:
            file_path: Path to .xlsx/.xlsm file

        Returns:
            Row dictionaries keyed by header; empty cells become ""
        """
        workbook = load_workbook(file_path, read_only=True, data_only=True)
        try:
            sheet = (
                workbook[self.sheet_name]
                if self.sheet_name
                else workbook[workbook.sheetnames[0]]
            )
            all_rows = [list(row) for row in sheet.iter_rows(values_only=True)]
        finally:
            workbook.close()

        return self.parse_rows(all_rows)

    def parse_rows(self, all_rows: list[list[Any]]) -> list[dict[str, Any]]:
        """Build records from raw worksheet rows."""
        if not all_rows:
            return []

        header_idx = detect_header_row(all_rows)
        headers = [str(cell).strip() if cell is not None else "" for cell in all_rows[header_idx]]

        records = []
        for row in all_rows[header_idx + 1 :]:
            if count_non_empty(row) == 0:
                continue
            record = {}
            for idx, header in enumerate(headers):
                if not header:
                    continue
                value = row[idx] if idx < len(row) else None
                if isinstance(value, str):
                    value = value.strip()
                record[header] = "" if value is None else value
            records.append(record)

        logger.info(f"Read {len(records)} row(s) from worksheet (header at row {header_idx + 1})")
        return records


def detect_header_row(rows: list[list[Any]]) -> int:
    """First of the leading rows with at least three filled cells, else 0."""
    for idx, row in enumerate(rows[:HEADER_SEARCH_ROWS]):
        if count_non_empty(row) >= MIN_HEADER_CELLS:
            return idx
    return 0
