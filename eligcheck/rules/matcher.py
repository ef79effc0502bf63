"""Claim-to-eligibility matching."""
from __future__ import annotations

import logging
from collections.abc import Iterable, MutableSet
from datetime import date
from typing import Any

from ..connectors.healthcare.eligibility import EligibilityRecord
from ..utils.date_parser import is_same_day
from ..utils.identifiers import normalize_clinician_name
from .categories.service_category_rules import (
    ServiceCategoryRuleSet,
    category_text,
    is_service_category_valid,
)
from .eligibility_index import EligibilityIndex

logger = logging.getLogger(__name__)


def clinician_matches(claim_clinicians: Iterable[str], eligibility_clinician: Any) -> bool:
    """True when either side is silent or any claim clinician equals the record's."""
    expected = normalize_clinician_name(eligibility_clinician)
    names = [normalize_clinician_name(name) for name in claim_clinicians]
    names = [name for name in names if name]
    if not expected or not names:
        return True
    return expected in names


def find_eligibility_for_claim(
    index: EligibilityIndex,
    claim_date: date | None,
    member_id: Any,
    claim_clinicians: Iterable[str] = (),
    *,
    rules: ServiceCategoryRuleSet | None = None,
    used_requests: MutableSet[str] | None = None,
) -> EligibilityRecord | None:
    """Return the first eligibility record that covers a claim.

    A candidate must, in this order:
    1. be answered on the claim's calendar day,
    2. agree on clinician (skipped when either side has none),
    3. pass its service-category rule against its own department text,
    4. carry status "Eligible".

    Args:
        index: Eligibility index for the run
        claim_date: Parsed claim date; None never matches
        member_id: Raw claim member ID (normalized for lookup)
        claim_clinicians: Clinician names/licenses on the claim
        rules: Service-category rule set override
        used_requests: Optional diagnostic set; the matched record's request
            number is added. It is never read.

    Returns:
        The matching EligibilityRecord, or None

    Raises:
        TypeError: If index is None
    """
    if index is None:
        raise TypeError("find_eligibility_for_claim() requires an EligibilityIndex")

    candidates = index.candidates(member_id)
    if not candidates:
        return None

    clinicians = [name for name in claim_clinicians if name]

    for candidate in candidates:
        if not is_same_day(claim_date, candidate.match_date):
            continue

        if not clinician_matches(clinicians, candidate.clinician):
            continue

        check = is_service_category_valid(
            candidate.service_category,
            candidate.consultation_status,
            category_text(candidate.department, candidate.package_name),
            rules,
        )
        if not check.valid:
            continue

        if not candidate.is_eligible:
            continue

        if used_requests is not None and candidate.request_number:
            used_requests.add(candidate.request_number)
        return candidate

    return None
