"""Report-shape mapping for claims exports.

Claims arrive from several report exports whose column names differ.
This module detects which export a table came from and maps its rows to
canonical ClaimRecords using the templates in ``mapping.templates``.

Usage:
    from eligcheck.mapping import normalize_report_rows

    claims = normalize_report_rows(rows)  # format detected from headers
    claims = normalize_report_rows(rows, report_format="odoo")
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from ..connectors.healthcare.claims import ClaimRecord, normalize_claim
from ..utils.fields import first_non_empty
from .templates import INSTA_MARKER, ODOO_MARKER, get_template

logger = logging.getLogger(__name__)

REPORT_FORMATS = ("insta", "odoo", "generic")

__all__ = [
    "REPORT_FORMATS",
    "detect_report_format",
    "map_report_row",
    "normalize_report_rows",
    "get_template",
]


def detect_report_format(rows: Sequence[Mapping[str, Any]]) -> str:
    """Detect the export shape from the headers of the first row."""
    if not rows:
        return "generic"

    headers = rows[0].keys()
    if INSTA_MARKER in headers:
        return "insta"
    if ODOO_MARKER in headers:
        return "odoo"
    return "generic"


def map_report_row(
    row: Mapping[str, Any], template: Mapping[str, tuple[str, ...]]
) -> dict[str, Any]:
    """Map one export row to canonical claim keys using a template."""
    return {
        canonical: first_non_empty(row, headers)
        for canonical, headers in template.items()
    }


def normalize_report_rows(
    rows: Sequence[Mapping[str, Any]], report_format: str | None = None
) -> list[ClaimRecord]:
    """Convert raw export rows into ClaimRecords.

    Args:
        rows: Parsed table rows (header -> cell value)
        report_format: Force a template instead of detecting one

    Returns:
        Claim records in input order; rows without a claim ID are dropped
    """
    report_format = report_format or detect_report_format(rows)
    template = get_template(report_format)

    claims: list[ClaimRecord] = []
    for row in rows:
        claim = normalize_claim(map_report_row(row, template))
        if claim is not None:
            claims.append(claim)

    logger.info(
        f"Mapped {len(claims)} of {len(rows)} report row(s) using the "
        f"{report_format} template"
    )
    return claims
