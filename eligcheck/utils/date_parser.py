"""Date parsing utilities for eligibility and claim reports."""

from __future__ import annotations

import math
import re
from datetime import date, datetime, timedelta
from typing import Any

# Reasonable date bounds for clinic encounters
MIN_VALID_YEAR = 1900
MAX_VALID_YEAR = 2100

# Spreadsheet serial 25569 is 1970-01-01 (epoch equivalent to 1899-12-30)
EXCEL_UNIX_EPOCH_OFFSET = 25569
UNIX_EPOCH = date(1970, 1, 1)

MONTHS = ["jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"]

_NUMERIC_DATE = re.compile(r"^(\d{1,2})[/\-.](\d{1,2})[/\-.](\d{2,4})$")
_TEXTUAL_DATE = re.compile(r"^(\d{1,2})[/\- ]+([a-z]{3,})\.?[/\- ]+(\d{2,4})$", re.IGNORECASE)
_ISO_DATE = re.compile(r"^(\d{4})[/\-](\d{1,2})[/\-](\d{1,2})$")
_COMPACT_DATE = re.compile(r"^(\d{4})(\d{2})(\d{2})$")
_SERIAL_TEXT = re.compile(r"^\d{1,5}(\.\d+)?$")
_TIME_SUFFIX = re.compile(r"(T|\s+)\d{1,2}:\d{2}.*$")


def parse_flexible_date(value: Any, prefer_mdy: bool = False) -> date | None:
    """Parse a calendar day from the many shapes found in report exports.

    Supports:
    - date / datetime objects (openpyxl returns these for formatted cells)
    - Spreadsheet serials, as numbers or short digit strings (45352 -> 2024-03-01)
    - Numeric day/month forms: 01/03/2024, 1-3-24, 01.03.2024
    - Textual months: 1 Mar 2024, 01-March-2024
    - ISO 8601: 2024-03-01, 2024/03/01
    - Compact: 20240301

    Numeric forms are ambiguous when both leading parts are 12 or less.
    A part above 12 must be the day; otherwise ``prefer_mdy`` decides
    (True reads month/day/year, False reads day/month/year).

    Args:
        value: Raw cell value
        prefer_mdy: Tie-break for ambiguous numeric dates

    Returns:
        Parsed date, or None if the value is empty or cannot be read

    Examples:
        >>> parse_flexible_date("05/03/2024")
        datetime.date(2024, 3, 5)
        >>> parse_flexible_date("05/03/2024", prefer_mdy=True)
        datetime.date(2024, 5, 3)
        >>> parse_flexible_date("13/03/2024", prefer_mdy=True)
        datetime.date(2024, 3, 13)
        >>> parse_flexible_date(45352)
        datetime.date(2024, 3, 1)
        >>> parse_flexible_date("31/02/2024")  # Invalid date
        None
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        return _within_bounds(value.date())
    if isinstance(value, date):
        return _within_bounds(value)
    if isinstance(value, (int, float)):
        return _parse_serial(value)

    text = str(value).strip().replace(",", "")
    if not text:
        return None

    text = _TIME_SUFFIX.sub("", text).strip()

    if _SERIAL_TEXT.match(text):
        return _parse_serial(float(text))

    match = _NUMERIC_DATE.match(text)
    if match:
        p1, p2, year = (int(part) for part in match.groups())
        year = _expand_year(year)
        if p1 > 12 and p2 <= 12:
            return _build_date(year, p2, p1)
        if p2 > 12 and p1 <= 12:
            return _build_date(year, p1, p2)
        if prefer_mdy:
            return _build_date(year, p1, p2)
        return _build_date(year, p2, p1)

    match = _TEXTUAL_DATE.match(text)
    if match:
        month_name = match.group(2).lower()[:3]
        if month_name not in MONTHS:
            return None
        day = int(match.group(1))
        year = _expand_year(int(match.group(3)))
        return _build_date(year, MONTHS.index(month_name) + 1, day)

    match = _ISO_DATE.match(text) or _COMPACT_DATE.match(text)
    if match:
        year, month, day = (int(part) for part in match.groups())
        return _build_date(year, month, day)

    return None


def is_same_day(a: date | None, b: date | None) -> bool:
    """Return True when both values fall on the same calendar day."""
    if a is None or b is None:
        return False
    if isinstance(a, datetime):
        a = a.date()
    if isinstance(b, datetime):
        b = b.date()
    return a == b


def format_display_date(value: date | None) -> str:
    """Render a date as zero-padded DD/MM/YYYY, or '' for None."""
    if value is None:
        return ""
    return f"{value.day:02d}/{value.month:02d}/{value.year}"


def _parse_serial(serial: float) -> date | None:
    if math.isnan(serial) or math.isinf(serial):
        return None
    days = math.floor(serial) - EXCEL_UNIX_EPOCH_OFFSET
    try:
        parsed = UNIX_EPOCH + timedelta(days=days)
    except OverflowError:
        return None
    return _within_bounds(parsed)


def _expand_year(year: int) -> int:
    # Two-digit years are always read as 20xx
    return year + 2000 if year < 100 else year


def _build_date(year: int, month: int, day: int) -> date | None:
    try:
        parsed = date(year, month, day)
    except ValueError:
        # date() rejects Feb 30, month 13, etc.
        return None
    return _within_bounds(parsed)


def _within_bounds(parsed: date) -> date | None:
    if parsed.year < MIN_VALID_YEAR or parsed.year > MAX_VALID_YEAR:
        return None
    return parsed
