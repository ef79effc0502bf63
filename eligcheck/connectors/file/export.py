"""Export of invalid claims to a spreadsheet for follow-up."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from pathlib import Path
from typing import Any

from openpyxl import Workbook

from ...rules.models import FinalStatus, ValidationResult
from ...utils.sanitization import sanitize_cell_value

logger = logging.getLogger(__name__)

EXPORT_SHEET_NAME = "Invalid Claims"

EXPORT_COLUMNS: tuple[str, ...] = (
    "Claim ID",
    "Member ID",
    "Encounter Date",
    "Package Name",
    "Provider",
    "Clinician",
    "Service Category",
    "Consultation Status",
    "Eligibility Status",
    "Final Status",
    "Remarks",
)


def build_invalid_export_rows(results: Iterable[ValidationResult]) -> list[dict[str, Any]]:
    """Select invalid results and shape them as export rows."""
    rows = []
    for result in results:
        if result is None or result.final_status is not FinalStatus.INVALID:
            continue
        row = {
            "Claim ID": result.claim_id,
            "Member ID": result.member_id,
            "Encounter Date": result.encounter_date,
            "Package Name": result.package_name,
            "Provider": result.provider,
            "Clinician": result.clinician,
            "Service Category": result.service_category,
            "Consultation Status": result.consultation_status,
            "Eligibility Status": result.status,
            "Final Status": result.final_status.value,
            "Remarks": "; ".join(result.remarks),
        }
        rows.append({key: sanitize_cell_value(value) for key, value in row.items()})
    return rows


def default_export_filename(today: date | None = None) -> str:
    today = today or date.today()
    return f"invalid_claims_{today.isoformat()}.xlsx"


def write_invalid_claims_xlsx(results: Iterable[ValidationResult], file_path: str | Path) -> int:
    """Write invalid claims to an .xlsx workbook.

    Args:
        results: Validation results of a run
        file_path: Destination path

    Returns:
        Number of claims written; 0 means no file was created
    """
    rows = build_invalid_export_rows(results)
    if not rows:
        logger.info("No invalid entries to export")
        return 0

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = EXPORT_SHEET_NAME
    sheet.append(list(EXPORT_COLUMNS))
    for row in rows:
        sheet.append([row[column] for column in EXPORT_COLUMNS])

    path = Path(file_path)
    workbook.save(path)
    logger.info(f"Exported {len(rows)} invalid claim(s) to {path.name}")
    return len(rows)
