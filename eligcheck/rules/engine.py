"""Core claim validation engine."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, MutableSet
from typing import Any

from ..connectors.healthcare.claims import ClaimRecord, normalize_claim
from ..connectors.healthcare.eligibility import EligibilityRecord
from ..utils.date_parser import format_display_date, parse_flexible_date
from ..utils.identifiers import has_leading_zero, is_vvip_member
from .categories.service_category_rules import (
    ServiceCategoryRuleSet,
    category_text,
    is_service_category_valid,
)
from .eligibility_index import EligibilityIndex, build_eligibility_index
from .matcher import find_eligibility_for_claim
from .models import FinalStatus, ReconciliationOutcome, ValidationResult

logger = logging.getLogger(__name__)

VVIP_STATUS = "VVIP"
VVIP_REMARK = "VVIP member, eligibility check bypassed"
LEADING_ZERO_REMARK = "Member ID has a leading zero; claim marked as invalid."


def validate_claims(
    claims: Iterable[ClaimRecord | Mapping[str, Any]],
    index: EligibilityIndex,
    prefer_mdy: bool = False,
    *,
    rules: ServiceCategoryRuleSet | None = None,
    used_requests: MutableSet[str] | None = None,
) -> list[ValidationResult]:
    """Validate claims against an eligibility index.

    Produces one result per claim, in input order. Claims without a claim
    ID or member ID produce nothing. Data problems never raise; they turn
    into an invalid result with a remark.

    Args:
        claims: ClaimRecords or canonical claim rows
        index: Eligibility index for the run
        prefer_mdy: Read ambiguous claim dates as month/day (CSV reports)
        rules: Service-category rule set override
        used_requests: Optional diagnostic set of matched request numbers

    Returns:
        List of ValidationResult

    Raises:
        TypeError: If index is None
    """
    if index is None:
        raise TypeError("validate_claims() requires an EligibilityIndex")

    results: list[ValidationResult] = []

    for claim in claims:
        if claim is not None and not isinstance(claim, ClaimRecord):
            claim = normalize_claim(claim)
        if claim is None or not claim.claim_id.strip():
            continue

        result = validate_claim(
            claim,
            index,
            prefer_mdy,
            rules=rules,
            used_requests=used_requests,
        )
        if result is not None:
            results.append(result)

    valid = sum(1 for r in results if r.final_status is FinalStatus.VALID)
    logger.info(f"Validated {len(results)} claim(s): {valid} valid, {len(results) - valid} invalid")
    return results


def validate_claim(
    claim: ClaimRecord,
    index: EligibilityIndex,
    prefer_mdy: bool = False,
    *,
    rules: ServiceCategoryRuleSet | None = None,
    used_requests: MutableSet[str] | None = None,
) -> ValidationResult | None:
    """Validate a single claim; returns None when it has no member ID."""
    member_id = claim.member_id_raw.strip()
    if not member_id:
        logger.debug(f"Skipping claim {claim.claim_id}: no member ID")
        return None

    claim_date = parse_flexible_date(claim.claim_date_raw, prefer_mdy=prefer_mdy)
    encounter_date = format_display_date(claim_date) or _raw_text(claim.claim_date_raw)

    if is_vvip_member(member_id):
        return ValidationResult(
            claim_id=claim.claim_id,
            member_id=member_id,
            encounter_date=encounter_date,
            final_status=FinalStatus.VALID,
            remarks=[VVIP_REMARK],
            clinician=claim.clinician,
            department=claim.department,
            package_name=claim.package_name,
            insurance_company=claim.insurance_company,
            claim_status=claim.claim_status,
            status=VVIP_STATUS,
        )

    leading_zero = has_leading_zero(member_id)
    remarks: list[str] = []
    if leading_zero:
        remarks.append(LEADING_ZERO_REMARK)

    eligibility = find_eligibility_for_claim(
        index,
        claim_date,
        member_id,
        claim.clinicians,
        rules=rules,
        used_requests=used_requests,
    )

    final_status = FinalStatus.INVALID
    if eligibility is None:
        remarks.append(f"No matching eligibility found for {member_id} on {encounter_date}")
    elif not eligibility.is_eligible:
        remarks.append(f"Eligibility status: {eligibility.status}")
    else:
        check = is_service_category_valid(
            eligibility.service_category,
            eligibility.consultation_status,
            category_text(claim.department, claim.package_name),
            rules,
        )
        if not check.valid:
            remarks.append(check.reason or f"Invalid for category: {eligibility.service_category}")
        elif not leading_zero:
            final_status = FinalStatus.VALID

    logger.debug(f"Claim {claim.claim_id}: {final_status.value}")
    return _build_result(claim, member_id, encounter_date, final_status, remarks, eligibility)


def reconcile(
    eligibility_rows: Iterable[Mapping[str, Any] | EligibilityRecord],
    claim_rows: Iterable[ClaimRecord | Mapping[str, Any]],
    prefer_mdy: bool = False,
    *,
    rules: ServiceCategoryRuleSet | None = None,
) -> ReconciliationOutcome:
    """Build the index, validate every claim and collect used request numbers."""
    index = build_eligibility_index(eligibility_rows)
    results = validate_claims(claim_rows, index, prefer_mdy, rules=rules)

    used = [
        r.eligibility.request_number
        for r in results
        if r.eligibility is not None and r.eligibility.request_number
    ]
    return ReconciliationOutcome(
        results=results,
        used_request_numbers=list(dict.fromkeys(used)),
    )


def _build_result(
    claim: ClaimRecord,
    member_id: str,
    encounter_date: str,
    final_status: FinalStatus,
    remarks: list[str],
    eligibility: EligibilityRecord | None,
) -> ValidationResult:
    # Matched eligibility values win for display; claim values fill the gaps
    if eligibility is None:
        return ValidationResult(
            claim_id=claim.claim_id,
            member_id=member_id,
            encounter_date=encounter_date,
            final_status=final_status,
            remarks=remarks,
            clinician=claim.clinician,
            department=claim.department,
            package_name=claim.package_name,
            insurance_company=claim.insurance_company or claim.package_name,
            claim_status=claim.claim_status,
        )

    return ValidationResult(
        claim_id=claim.claim_id,
        member_id=member_id,
        encounter_date=encounter_date,
        final_status=final_status,
        remarks=remarks,
        clinician=eligibility.clinician or claim.clinician,
        department=claim.department or eligibility.department,
        package_name=eligibility.package_name or claim.package_name,
        provider=eligibility.payer_name,
        insurance_company=(
            eligibility.payer_name or claim.insurance_company or claim.package_name
        ),
        claim_status=claim.claim_status,
        service_category=eligibility.service_category,
        consultation_status=eligibility.consultation_status,
        status=eligibility.status,
        eligibility=eligibility,
    )


def _raw_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()
