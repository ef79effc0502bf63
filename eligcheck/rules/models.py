"""Data models for the validation engine."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..connectors.healthcare.eligibility import EligibilityRecord


class FinalStatus(str, Enum):
    """Verdict attached to every processed claim."""

    VALID = "valid"
    INVALID = "invalid"
    # Display bucket only; the engine never produces it
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class CategoryCheck:
    """Outcome of a service-category rule check."""

    valid: bool
    reason: str | None = None


@dataclass(frozen=True)
class ValidationResult:
    """Verdict for one claim, with display fields and remarks."""

    claim_id: str
    member_id: str
    encounter_date: str
    final_status: FinalStatus
    remarks: list[str] = field(default_factory=list)
    clinician: str = ""
    department: str = ""
    package_name: str = ""
    provider: str = ""
    insurance_company: str = ""
    claim_status: str = ""
    service_category: str = ""
    consultation_status: str = ""
    status: str = ""
    eligibility: EligibilityRecord | None = None

    @property
    def is_valid(self) -> bool:
        return self.final_status is FinalStatus.VALID

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "claim_id": self.claim_id,
            "member_id": self.member_id,
            "encounter_date": self.encounter_date,
            "clinician": self.clinician,
            "department": self.department,
            "package_name": self.package_name,
            "provider": self.provider,
            "insurance_company": self.insurance_company,
            "claim_status": self.claim_status,
            "service_category": self.service_category,
            "consultation_status": self.consultation_status,
            "status": self.status,
            "remarks": list(self.remarks),
            "final_status": self.final_status.value,
            "eligibility": self.eligibility.to_dict() if self.eligibility else None,
        }


@dataclass(frozen=True)
class ReconciliationOutcome:
    """Results of one reconciliation run plus its diagnostic side table."""

    results: list[ValidationResult]
    # Request numbers of matched eligibility records, in first-use order.
    # Diagnostic only: never consulted when matching.
    used_request_numbers: list[str] = field(default_factory=list)
