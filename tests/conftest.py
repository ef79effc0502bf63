"""Pytest configuration and fixtures."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import pytest

from eligcheck.connectors.healthcare import ClaimRecord
from eligcheck.rules import EligibilityIndex, build_eligibility_index


@pytest.fixture
def eligibility_rows() -> list[dict[str, Any]]:
    """Eligibility export rows with the header spellings seen in portal exports."""
    return [
        {
            "Card Number / DHA Member ID": "0012345",
            "Eligibility Request Number": "REQ-1001",
            "Answered On": "05/03/2024",
            "Ordered On": "05/03/2024",
            "Status": "Eligible",
            "Clinician": "DHA-001",
            "Payer Name": "Daman",
            "Service Category": "Consultation",
            "Consultation Status": "Elective",
            "Package Name": "Daman Enhanced",
            "Department": "General Practice",
        },
        {
            "Card Number / DHA Member ID": "777",
            "Eligibility Request Number": "REQ-1002",
            "Answered On": datetime(2024, 3, 5, 10, 30),
            "Status": "Eligible",
            "Clinician": "DHA-002",
            "Payer Name": "Thiqa",
            "Service Category": "Dental Services",
            "Consultation Status": "",
            "Package Name": "Thiqa Dental",
            "Department": "Dental",
        },
        {
            "Member ID": "888",
            "Eligibility Request Number": "REQ-1003",
            "Answered On": "",
            "Ordered On": "2024-03-06",
            "Status": "Not Eligible",
            "Clinician": "",
            "Payer Name": "Daman",
            "Service Category": "Consultation",
            "Consultation Status": "First Visit",
            "Package Name": "Daman Basic",
            "Department": "",
        },
    ]


@pytest.fixture
def eligibility_index(eligibility_rows: list[dict[str, Any]]) -> EligibilityIndex:
    """Index built from the sample eligibility rows."""
    return build_eligibility_index(eligibility_rows)


@pytest.fixture
def valid_claim() -> ClaimRecord:
    """Claim that matches REQ-1001 on every check."""
    return ClaimRecord(
        claim_id="CLM-1",
        member_id_raw="12345",
        claim_date_raw="05/03/2024",
        clinician="DHA-001",
        department="General Practice",
        package_name="Daman Enhanced",
        insurance_company="Daman",
        claim_status="Coded",
    )


@pytest.fixture
def physio_eligibility_row() -> dict[str, Any]:
    """Single eligibility answer for a physiotherapy package."""
    return {
        "Member ID": "00123",
        "Eligibility Request Number": "REQ-2001",
        "Status": "Eligible",
        "Answered On": "01/03/2024",
        "Service Category": "Physiotherapy",
        "Package Name": "Physio Package",
    }


@pytest.fixture
def insta_report_rows() -> list[dict[str, Any]]:
    """Rows as they come out of an Insta HIS claims export."""
    return [
        {
            "Pri. Claim No": "INS-1",
            "Pri. Patient Insurance Card No": "12345",
            "Encounter Date": "05/03/2024",
            "Clinician License": "DHA-001",
            "Department": "General Practice",
            "Pri. Payer Name": "Daman Enhanced",
            "Codification Status": "Coded",
        },
        {
            "Pri. Claim No": "INS-2",
            "Pri. Patient Insurance Card No": "(VVIP) 555",
            "Encounter Date": "06/03/2024",
            "Clinician License": "",
            "Department": "General Practice",
            "Pri. Payer Name": "Thiqa",
            "Codification Status": "Coded",
        },
    ]
