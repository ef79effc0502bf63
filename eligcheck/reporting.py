"""Summaries, payer filtering and plain-text tables for validation results."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .rules.models import FinalStatus, ValidationResult

TABLE_COLUMNS: tuple[tuple[str, str], ...] = (
    ("Claim ID", "claim_id"),
    ("Member ID", "member_id"),
    ("Encounter Date", "encounter_date"),
    ("Clinician", "clinician"),
    ("Service Category", "service_category"),
    ("Status", "status"),
    ("Final Status", "final_status"),
    ("Remarks", "remarks"),
)


@dataclass(frozen=True)
class ResultSummary:
    total: int
    valid: int
    invalid: int
    unknown: int

    def __str__(self) -> str:
        return (
            f"Processed {self.total} claims: {self.valid} valid, "
            f"{self.unknown} unknown, {self.invalid} invalid"
        )


def summarize_results(results: Sequence[ValidationResult]) -> ResultSummary:
    counts = {status: 0 for status in FinalStatus}
    for result in results:
        counts[result.final_status] += 1
    return ResultSummary(
        total=len(results),
        valid=counts[FinalStatus.VALID],
        invalid=counts[FinalStatus.INVALID],
        unknown=counts[FinalStatus.UNKNOWN],
    )


def filter_results_by_payer(
    results: Iterable[ValidationResult], keywords: Iterable[str]
) -> list[ValidationResult]:
    """Keep results whose insurer (or package) mentions any keyword.

    With no keywords every result with a member ID is kept.
    """
    needles = [kw.strip().lower() for kw in keywords if kw and kw.strip()]
    kept = []
    for result in results:
        if not result.member_id.strip():
            continue
        if needles:
            payer = (result.insurance_company or result.package_name).lower()
            if not any(needle in payer for needle in needles):
                continue
        kept.append(result)
    return kept


def render_table(results: Sequence[ValidationResult]) -> str:
    """Render results as a fixed-width text table."""
    headers = [title for title, _ in TABLE_COLUMNS]
    body = [[_cell(result, attr) for _, attr in TABLE_COLUMNS] for result in results]

    widths = [len(header) for header in headers]
    for row in body:
        for idx, cell in enumerate(row):
            widths[idx] = max(widths[idx], len(cell))

    def line(cells: Sequence[str]) -> str:
        return "  ".join(cell.ljust(widths[idx]) for idx, cell in enumerate(cells)).rstrip()

    lines = [line(headers), line(["-" * width for width in widths])]
    lines.extend(line(row) for row in body)
    return "\n".join(lines)


def _cell(result: ValidationResult, attr: str) -> str:
    value = getattr(result, attr)
    if attr == "remarks":
        return "; ".join(value) if value else "No remarks"
    if isinstance(value, FinalStatus):
        return value.value
    return str(value or "")
