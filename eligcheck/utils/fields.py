"""Header lookup helpers shared by the ingestion adapters."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def normalize_header(name: Any) -> str:
    """Lowercase a header and drop all whitespace ("Member ID" -> "memberid")."""
    if name is None:
        return ""
    return "".join(str(name).split()).lower()


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def first_non_empty(row: Mapping[str, Any], headers: Iterable[str]) -> Any:
    """Return the first non-empty value among ``headers``, in order.

    Each header is tried verbatim first. If it is missing from the row,
    a case- and whitespace-insensitive match is tried, so "Member ID",
    "member id" and "MemberID " all resolve to the same column.

    Returns:
        The raw cell value, or "" when no header yields a value
    """
    folded: dict[str, Any] | None = None

    for header in headers:
        if header in row:
            value = row[header]
        else:
            if folded is None:
                folded = {}
                for key, cell in row.items():
                    folded.setdefault(normalize_header(key), cell)
            value = folded.get(normalize_header(header))

        if not is_blank(value):
            return value

    return ""


def as_text(value: Any) -> str:
    """Render a cell value as trimmed text."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        # Spreadsheets hand back 123.0 for numeric ID cells
        return str(int(value))
    return str(value).strip()
