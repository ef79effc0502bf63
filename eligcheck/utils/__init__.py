"""Shared utility functions for the eligibility checker."""

from .date_parser import format_display_date, is_same_day, parse_flexible_date
from .identifiers import (
    has_leading_zero,
    is_vvip_member,
    normalize_clinician_name,
    normalize_member_id,
)
from .sanitization import sanitize_cell_value

__all__ = [
    "format_display_date",
    "is_same_day",
    "parse_flexible_date",
    "has_leading_zero",
    "is_vvip_member",
    "normalize_clinician_name",
    "normalize_member_id",
    "sanitize_cell_value",
]
