"""Eligibility data type interface.

Defines the eligibility record built from an insurer eligibility export
(one response per member per day) and the header aliases used to read
it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from ...utils.fields import as_text, first_non_empty, is_blank
from ...utils.date_parser import parse_flexible_date

ELIGIBLE_STATUS = "eligible"

# Member ID column names seen across payer portals, in preference order
MEMBER_ID_FIELDS: tuple[str, ...] = (
    "Card Number / DHA Member ID",
    "Card Number",
    "Member ID",
    "MemberID",
    "Patient Insurance Card No",
    "PatientCardID",
)

ELIGIBILITY_FIELDS: dict[str, tuple[str, ...]] = {
    "request_number": ("Eligibility Request Number",),
    "answered_on": ("Answered On",),
    "ordered_on": ("Ordered On",),
    "status": ("Status",),
    "clinician": ("Clinician",),
    "payer_name": ("Payer Name",),
    "service_category": ("Service Category",),
    "consultation_status": ("Consultation Status",),
    "package_name": ("Package Name",),
    "department": ("Department", "Clinic"),
}


@dataclass(frozen=True)
class EligibilityRecord:
    """One insurer eligibility response for one member on one day."""

    member_id_raw: str
    request_number: str = ""
    answered_on: Any = None
    ordered_on: Any = None
    status: str = ""
    clinician: str = ""
    payer_name: str = ""
    service_category: str = ""
    consultation_status: str = ""
    package_name: str = ""
    department: str = ""

    # Answered On, falling back to Ordered On; resolved once at ingestion
    match_date: date | None = None

    source_row: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def is_eligible(self) -> bool:
        return self.status.strip().lower() == ELIGIBLE_STATUS

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "request_number": self.request_number,
            "member_id": self.member_id_raw,
            "answered_on": _jsonable(self.answered_on),
            "ordered_on": _jsonable(self.ordered_on),
            "status": self.status,
            "clinician": self.clinician,
            "payer_name": self.payer_name,
            "service_category": self.service_category,
            "consultation_status": self.consultation_status,
            "package_name": self.package_name,
            "department": self.department,
            "match_date": self.match_date.isoformat() if self.match_date else None,
        }


def normalize_eligibility(data: Mapping[str, Any]) -> EligibilityRecord | None:
    """Normalize a raw eligibility row to an EligibilityRecord.

    Handles the header variations of the payer portals we export from.

    Args:
        data: Raw row mapping header -> cell value

    Returns:
        Normalized EligibilityRecord, or None if the row has no member ID
    """
    member_id = as_text(first_non_empty(data, MEMBER_ID_FIELDS))
    if not member_id:
        return None

    def text(name: str) -> str:
        return as_text(first_non_empty(data, ELIGIBILITY_FIELDS[name]))

    def raw(name: str) -> Any:
        value = first_non_empty(data, ELIGIBILITY_FIELDS[name])
        return None if is_blank(value) else value

    answered_on = raw("answered_on")
    ordered_on = raw("ordered_on")
    match_source = answered_on if answered_on is not None else ordered_on

    return EligibilityRecord(
        member_id_raw=member_id,
        request_number=text("request_number"),
        answered_on=answered_on,
        ordered_on=ordered_on,
        status=text("status"),
        clinician=text("clinician"),
        payer_name=text("payer_name"),
        service_category=text("service_category"),
        consultation_status=text("consultation_status"),
        package_name=text("package_name"),
        department=text("department"),
        match_date=parse_flexible_date(match_source),
        source_row=dict(data),
    )


def _jsonable(value: Any) -> Any:
    if isinstance(value, date):
        return value.isoformat()
    return value
