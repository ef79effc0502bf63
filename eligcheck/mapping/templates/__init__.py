"""Mapping templates for the claim report exports we receive.

This module provides header mappings for known report shapes:
- Insta: HIS export keyed by "Pri. Claim No"
- Odoo: ERP export keyed by "Pri. Claim ID"
- Generic: ClinicPro-style and fallback column names
"""

from .generic import GENERIC_MAPPING
from .insta import INSTA_MAPPING, INSTA_MARKER
from .odoo import ODOO_MAPPING, ODOO_MARKER

__all__ = [
    "INSTA_MAPPING",
    "INSTA_MARKER",
    "ODOO_MAPPING",
    "ODOO_MARKER",
    "GENERIC_MAPPING",
    "get_template",
]


def get_template(template_name: str) -> dict[str, tuple[str, ...]]:
    """Get a mapping template by name.

    Args:
        template_name: Name of the template ('insta', 'odoo', 'generic')

    Returns:
        Mapping of canonical field to ordered source headers

    Raises:
        ValueError: If template name is not recognized
    """
    templates = {
        "insta": INSTA_MAPPING,
        "odoo": ODOO_MAPPING,
        "generic": GENERIC_MAPPING,
        "clinicpro": GENERIC_MAPPING,
    }

    if template_name.lower() not in templates:
        available = ", ".join(templates.keys())
        raise ValueError(f"Unknown template: {template_name}. Available: {available}")

    return templates[template_name.lower()]
