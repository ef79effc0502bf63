"""File parsers for report exports.

Provides parsing capabilities for:
- CSV claim reports (header detection, claim de-duplication)
- XLSX eligibility and claim workbooks
"""

from .csv_parser import CSVParser, HeaderRowNotFoundError
from .xlsx_parser import XLSXParser

__all__ = [
    "CSVParser",
    "HeaderRowNotFoundError",
    "XLSXParser",
]
