"""Healthcare data type interfaces.

Provides the canonical record types read from uploaded reports:
- Claims (clinic billing report lines)
- Eligibility (insurer eligibility responses)
"""

from .claims import (
    CANONICAL_CLAIM_FIELDS,
    ClaimRecord,
    normalize_claim,
    normalize_claims,
)
from .eligibility import (
    ELIGIBILITY_FIELDS,
    MEMBER_ID_FIELDS,
    EligibilityRecord,
    normalize_eligibility,
)

__all__ = [
    # Claims
    "CANONICAL_CLAIM_FIELDS",
    "ClaimRecord",
    "normalize_claim",
    "normalize_claims",
    # Eligibility
    "ELIGIBILITY_FIELDS",
    "MEMBER_ID_FIELDS",
    "EligibilityRecord",
    "normalize_eligibility",
]
