"""Insta HIS claims report mapping template.

Insta exports carry a "Pri. Claim No" column and report the primary
payer name in place of a package name.
"""

# Detection header: present only in Insta exports
INSTA_MARKER = "Pri. Claim No"

# Format: {"canonical_field": ("source header", ...)} in preference order
INSTA_MAPPING: dict[str, tuple[str, ...]] = {
    "claim_id": ("Pri. Claim No",),
    "member_id": ("Pri. Patient Insurance Card No",),
    "claim_date": ("Encounter Date",),
    "clinician": ("Clinician License",),
    "department": ("Department",),
    "package_name": ("Pri. Payer Name",),
    "insurance_company": ("Pri. Payer Name",),
    "claim_status": ("Codification Status",),
}
