"""Claims data type interface.

Defines the canonical claim line produced by the report adapters and
consumed by the validation engine.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ...utils.fields import as_text, first_non_empty

logger = logging.getLogger(__name__)

# Canonical keys accepted from adapters: camelCase (report adapter output)
# and snake_case (this package's own naming)
CANONICAL_CLAIM_FIELDS: dict[str, tuple[str, ...]] = {
    "claim_id": ("claim_id", "claimID"),
    "member_id_raw": ("member_id", "memberID"),
    "claim_date_raw": ("claim_date", "claimDate"),
    "clinician": ("clinician",),
    "department": ("department", "clinic"),
    "package_name": ("package_name", "packageName"),
    "insurance_company": ("insurance_company", "insuranceCompany"),
    "claim_status": ("claim_status", "claimStatus"),
}


@dataclass(frozen=True)
class ClaimRecord:
    """One billing claim line from a report export."""

    claim_id: str
    member_id_raw: str = ""
    # Kept raw: the date is parsed per run with the report's day/month convention
    claim_date_raw: Any = None
    clinician: str = ""
    department: str = ""
    package_name: str = ""
    insurance_company: str = ""
    claim_status: str = ""

    @property
    def clinicians(self) -> list[str]:
        """Clinicians to match against eligibility, blanks removed."""
        return [self.clinician] if self.clinician else []

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "claim_id": self.claim_id,
            "member_id": self.member_id_raw,
            "claim_date": self.claim_date_raw,
            "clinician": self.clinician,
            "department": self.department,
            "package_name": self.package_name,
            "insurance_company": self.insurance_company,
            "claim_status": self.claim_status,
        }


def normalize_claim(data: Mapping[str, Any]) -> ClaimRecord | None:
    """Normalize a canonical claim row to a ClaimRecord.

    Args:
        data: Row with canonical keys (claimID/claim_id, memberID/member_id, ...)

    Returns:
        ClaimRecord, or None when the row has no claim ID
    """
    claim_id = as_text(first_non_empty(data, CANONICAL_CLAIM_FIELDS["claim_id"]))
    if not claim_id:
        return None

    claim_date = first_non_empty(data, CANONICAL_CLAIM_FIELDS["claim_date_raw"])

    return ClaimRecord(
        claim_id=claim_id,
        member_id_raw=as_text(
            first_non_empty(data, CANONICAL_CLAIM_FIELDS["member_id_raw"])
        ),
        claim_date_raw=claim_date if claim_date != "" else None,
        clinician=as_text(first_non_empty(data, CANONICAL_CLAIM_FIELDS["clinician"])),
        department=as_text(
            first_non_empty(data, CANONICAL_CLAIM_FIELDS["department"])
        ),
        package_name=as_text(
            first_non_empty(data, CANONICAL_CLAIM_FIELDS["package_name"])
        ),
        insurance_company=as_text(
            first_non_empty(data, CANONICAL_CLAIM_FIELDS["insurance_company"])
        ),
        claim_status=as_text(
            first_non_empty(data, CANONICAL_CLAIM_FIELDS["claim_status"])
        ),
    )


def normalize_claims(rows: list[Mapping[str, Any]]) -> list[ClaimRecord]:
    """Normalize canonical rows, dropping those without a claim ID."""
    claims = []
    dropped = 0
    for row in rows:
        claim = normalize_claim(row) if row else None
        if claim is None:
            dropped += 1
            continue
        claims.append(claim)

    if dropped:
        logger.debug(f"Dropped {dropped} claim row(s) without a claim ID")

    return claims
