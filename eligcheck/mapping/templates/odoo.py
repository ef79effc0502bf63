"""Odoo claims report mapping template.

Odoo exports are keyed by "Pri. Claim ID" and use admission fields for
the encounter date, clinician and department.
"""

ODOO_MARKER = "Pri. Claim ID"

ODOO_MAPPING: dict[str, tuple[str, ...]] = {
    "claim_id": ("Pri. Claim ID",),
    "member_id": ("Pri. Member ID",),
    "claim_date": ("Adm/Reg. Date",),
    "clinician": ("Admitting License",),
    "department": ("Admitting Department",),
    "package_name": ("Pri. Plan Type",),
    "insurance_company": ("Pri. Plan Type",),
    "claim_status": ("Codification Status",),
}
