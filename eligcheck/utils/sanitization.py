"""Output sanitization utilities."""

from __future__ import annotations

import re
from typing import Any

# Leading characters that spreadsheet applications evaluate as formulas
FORMULA_PREFIXES = ("=", "+", "-", "@", "\t", "\r")


def sanitize_cell_value(value: Any, max_length: int = 32767) -> Any:
    """Make a value safe to write into an exported spreadsheet cell.

    Prevents:
    - Formula injection (cells starting with =, +, -, @)
    - Control characters that corrupt the workbook XML
    - Values longer than a spreadsheet cell can hold

    Non-string values (numbers, dates, None) pass through unchanged.

    Args:
        value: The value to write
        max_length: Maximum cell length

    Returns:
        A safe cell value
    """
    if not isinstance(value, str):
        return value

    # Remove control characters except newline
    safe_value = re.sub(r"[\x00-\x09\x0b-\x1f\x7f]", "", value)

    if safe_value.startswith(FORMULA_PREFIXES):
        # Negative numbers are data, not formulas
        if not re.fullmatch(r"-\d+(\.\d+)?", safe_value):
            safe_value = "'" + safe_value

    if len(safe_value) > max_length:
        safe_value = safe_value[:max_length]

    return safe_value
