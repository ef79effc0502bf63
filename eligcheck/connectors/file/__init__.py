"""File connectors: report loading and spreadsheet export."""

from .export import (
    EXPORT_COLUMNS,
    build_invalid_export_rows,
    default_export_filename,
    write_invalid_claims_xlsx,
)
from .loader import LoadedTable, load_rows

__all__ = [
    "EXPORT_COLUMNS",
    "build_invalid_export_rows",
    "default_export_filename",
    "write_invalid_claims_xlsx",
    "LoadedTable",
    "load_rows",
]
