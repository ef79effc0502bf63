"""Generic claims report mapping template.

Used for ClinicPro-style exports and anything not recognized as Insta
or Odoo. Each canonical field lists every header seen in the wild.
"""

GENERIC_MAPPING: dict[str, tuple[str, ...]] = {
    "claim_id": ("ClaimID", "Pri. Claim No"),
    "member_id": ("PatientCardID", "Patient Insurance Card No"),
    "claim_date": ("ClaimDate", "Encounter Date"),
    "clinician": ("Clinician License", "Clinician"),
    "department": ("Clinic", "Department"),
    "package_name": ("Insurance Company",),
    "insurance_company": ("Insurance Company", "Pri. Payer Name"),
    "claim_status": ("VisitStatus", "Codification Status"),
}
