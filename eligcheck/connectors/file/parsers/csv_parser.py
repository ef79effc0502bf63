"""CSV parser for claim report exports.

Report exports often carry a title block above the real header row, and
the same claim can appear on several lines (one per activity). The
parser finds the header row, builds row dictionaries and keeps the first
line per claim ID.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Sequence
from typing import Any

logger = logging.getLogger(__name__)

# How many leading rows are searched for the header
HEADER_SEARCH_ROWS = 10

# Substrings that identify a claims report header row
HEADER_KEYWORDS = ("pri. claim no", "claimid", "member")

MIN_HEADER_CELLS = 3


class HeaderRowNotFoundError(ValueError):
    """Raised when no header row can be detected in a table."""


class CSVParser:
    """Parser for CSV claim reports.

    Handles:
    - Title rows above the header
    - Ragged rows (padded with empty strings)
    - Duplicate claim lines (first occurrence wins)
    """

    def __init__(
        self,
        delimiter: str = ",",
        encoding: str = "utf-8-sig",
        quotechar: str = '"',
        dedupe_claims: bool = True,
    ) -> None:
        """Initialize the CSV parser.

        Args:
            delimiter: Field delimiter character
            encoding: File encoding (utf-8-sig strips an Excel BOM)
            quotechar: Quote character
            dedupe_claims: Keep only the first row per claim ID
        """
        self.delimiter = delimiter
        self.encoding = encoding
        self.quotechar = quotechar
        self.dedupe_claims = dedupe_claims

    def parse(self, file_path: str) -> list[dict[str, Any]]:
        """Parse a CSV file.

        Args:
            file_path: Path to CSV file

        Returns:
            Row dictionaries keyed by header

        Raises:
            HeaderRowNotFoundError: If no header row is found
        """
        with open(file_path, "r", encoding=self.encoding, errors="replace", newline="") as f:
            reader = csv.reader(f, delimiter=self.delimiter, quotechar=self.quotechar)
            all_rows = [[cell.strip() for cell in row] for row in reader]

        return self.parse_rows(all_rows)

    def parse_rows(self, all_rows: Sequence[Sequence[str]]) -> list[dict[str, Any]]:
        """Build records from already-split rows."""
        header_idx = detect_claims_header_row(all_rows)
        headers = list(all_rows[header_idx])

        records = []
        for row in all_rows[header_idx + 1 :]:
            if not any(cell for cell in row):
                continue
            records.append(
                {
                    header: row[idx] if idx < len(row) else ""
                    for idx, header in enumerate(headers)
                }
            )

        if not self.dedupe_claims:
            return records

        claim_header = find_claim_id_header(headers)
        if claim_header is None:
            return records

        seen: set[str] = set()
        unique = []
        for record in records:
            claim_id = record.get(claim_header, "")
            if not claim_id or claim_id in seen:
                continue
            seen.add(claim_id)
            unique.append(record)

        if len(unique) != len(records):
            logger.info(
                f"Collapsed {len(records)} CSV rows to {len(unique)} unique claim(s) "
                f"on column '{claim_header}'"
            )
        return unique


def detect_claims_header_row(rows: Sequence[Sequence[Any]]) -> int:
    """Find the header row of a claims table.

    A row mentioning a known claims column wins; otherwise the first row
    with at least three non-empty cells is used.

    Raises:
        HeaderRowNotFoundError: If neither test matches in the first rows
    """
    window = rows[:HEADER_SEARCH_ROWS]

    for idx, row in enumerate(window):
        joined = ",".join(str(cell) for cell in row).lower()
        if any(keyword in joined for keyword in HEADER_KEYWORDS):
            return idx

    for idx, row in enumerate(window):
        if count_non_empty(row) >= MIN_HEADER_CELLS:
            return idx

    raise HeaderRowNotFoundError("Could not detect header row in CSV")


def find_claim_id_header(headers: Sequence[Any]) -> str | None:
    """Pick the column holding claim IDs, if any."""
    for header in headers:
        if header and "".join(str(header).split()).lower() == "claimid":
            return header
    for header in headers:
        if header and "claim" in str(header).lower():
            return header
    return None


def count_non_empty(row: Sequence[Any]) -> int:
    return sum(1 for cell in row if cell is not None and str(cell).strip() != "")
