"""Shared configuration for the eligibility checker.

This module centralizes environment variable access and default values
for the command-line layer. The validation engine itself reads no
configuration; everything it needs is passed in.
"""

import os

# Logging level for the CLI
LOG_LEVEL = os.getenv("ELIGCHECK_LOG_LEVEL", "INFO").upper()

# Optional YAML/JSON file overriding the default service-category rules
RULES_PATH = os.getenv("ELIGCHECK_RULES_PATH") or None

# Comma-separated payer keywords applied as a display filter (e.g. "daman,thiqa")
PAYER_FILTER = [
    keyword.strip()
    for keyword in os.getenv("ELIGCHECK_PAYER_FILTER", "").split(",")
    if keyword.strip()
]
