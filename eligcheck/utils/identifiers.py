"""Member ID and clinician name normalization."""

from __future__ import annotations

import re
from typing import Any

VVIP_PREFIX = "(VVIP)"

_LEADING_ZEROS = re.compile(r"^0+")
_LEADING_ZERO_ID = re.compile(r"^0+\d+$")
_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_member_id(raw: Any) -> str:
    """Canonicalize a member ID for lookups.

    Surrounding whitespace and a leading run of zeros are removed
    ("0045" -> "45"). The same policy applies to eligibility and claim
    IDs so that lookups line up.
    """
    if raw is None:
        return ""
    return _LEADING_ZEROS.sub("", str(raw).strip())


def normalize_clinician_name(raw: Any) -> str:
    """Trim, lowercase and collapse whitespace for equality checks."""
    if not raw:
        return ""
    return _WHITESPACE_RUN.sub(" ", str(raw).strip().lower())


def is_vvip_member(raw: Any) -> bool:
    if raw is None:
        return False
    return str(raw).strip().startswith(VVIP_PREFIX)


def has_leading_zero(raw: Any) -> bool:
    """True for all-digit IDs that start with zero, e.g. "0123"."""
    if raw is None:
        return False
    return bool(_LEADING_ZERO_ID.match(str(raw).strip()))
