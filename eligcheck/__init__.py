"""Clinic claim eligibility checker.

Reconciles clinic billing claims against insurer eligibility answers and
flags each claim valid or invalid with remarks.

Usage:
    from eligcheck import reconcile

    outcome = reconcile(eligibility_rows, claim_rows, prefer_mdy=False)
    for result in outcome.results:
        print(result.claim_id, result.final_status.value, result.remarks)
"""

from .rules import (
    FinalStatus,
    ReconciliationOutcome,
    ValidationResult,
    build_eligibility_index,
    find_eligibility_for_claim,
    reconcile,
    validate_claims,
)

__version__ = "0.1.0"

__all__ = [
    "FinalStatus",
    "ReconciliationOutcome",
    "ValidationResult",
    "build_eligibility_index",
    "find_eligibility_for_claim",
    "reconcile",
    "validate_claims",
]
