"""Tests for the claim validation engine."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

import pytest

from eligcheck.connectors.healthcare import ClaimRecord
from eligcheck.mapping import normalize_report_rows
from eligcheck.rules import (
    EligibilityIndex,
    FinalStatus,
    build_eligibility_index,
    reconcile,
    validate_claim,
    validate_claims,
)
from eligcheck.rules.engine import LEADING_ZERO_REMARK, VVIP_REMARK, VVIP_STATUS


class TestValidateClaim:
    """Test the per-claim verdict flow."""

    def test_valid_claim(self, valid_claim: ClaimRecord, eligibility_index: EligibilityIndex):
        """Test that a fully matching claim is valid with eligibility fields copied."""
        result = validate_claim(valid_claim, eligibility_index)

        assert result.final_status is FinalStatus.VALID
        assert result.is_valid
        assert result.remarks == []
        assert result.status == "Eligible"
        assert result.service_category == "Consultation"
        assert result.consultation_status == "Elective"
        assert result.provider == "Daman"
        assert result.encounter_date == "05/03/2024"
        assert result.eligibility.request_number == "REQ-1001"

    def test_vvip_bypasses_lookup(self, eligibility_index: EligibilityIndex):
        """Test that VVIP members are valid without an eligibility lookup."""
        claim = ClaimRecord(claim_id="V1", member_id_raw="(VVIP) 555", claim_date_raw="x")
        result = validate_claim(claim, eligibility_index)

        assert result.final_status is FinalStatus.VALID
        assert result.remarks == [VVIP_REMARK]
        assert result.status == VVIP_STATUS
        assert result.eligibility is None

    def test_vvip_without_any_eligibility(self):
        """Test that VVIP claims are valid even against an empty index."""
        claim = ClaimRecord(claim_id="V1", member_id_raw="(VVIP)1", claim_date_raw="05/03/2024")
        result = validate_claim(claim, build_eligibility_index([]))
        assert result.final_status is FinalStatus.VALID

    def test_leading_zero_overrides_match(self):
        """Test that a leading-zero member ID stays invalid despite a good match."""
        index = build_eligibility_index(
            [
                {
                    "Member ID": "42",
                    "Answered On": "01/03/2024",
                    "Status": "Eligible",
                    "Service Category": "Physiotherapy",
                    "Package Name": "Physio Package",
                    "Eligibility Request Number": "R42",
                }
            ]
        )
        claim = ClaimRecord(
            claim_id="C42",
            member_id_raw="0042",
            claim_date_raw="01/03/2024",
            package_name="Physio Package",
        )
        result = validate_claim(claim, index)

        assert result.final_status is FinalStatus.INVALID
        assert result.remarks == [LEADING_ZERO_REMARK]
        # The match is still shown
        assert result.status == "Eligible"
        assert result.service_category == "Physiotherapy"
        assert result.eligibility.request_number == "R42"

    def test_no_match_remark(self, valid_claim: ClaimRecord, eligibility_index: EligibilityIndex):
        """Test that a claim without same-day eligibility names the ID and date."""
        claim = replace(valid_claim, claim_date_raw="06/03/2024")
        result = validate_claim(claim, eligibility_index)

        assert result.final_status is FinalStatus.INVALID
        assert result.remarks == ["No matching eligibility found for 12345 on 06/03/2024"]
        assert result.status == ""
        assert result.eligibility is None

    def test_leading_zero_and_no_match(self, eligibility_index: EligibilityIndex):
        """Test that the leading-zero remark comes before the no-match remark."""
        claim = ClaimRecord(claim_id="C9", member_id_raw="0999", claim_date_raw="05/03/2024")
        result = validate_claim(claim, eligibility_index)

        assert result.remarks == [
            LEADING_ZERO_REMARK,
            "No matching eligibility found for 0999 on 05/03/2024",
        ]

    def test_unparseable_date(self, valid_claim: ClaimRecord, eligibility_index: EligibilityIndex):
        """Test that a bad date degrades to an invalid verdict instead of raising."""
        claim = replace(valid_claim, claim_date_raw="not a date")
        result = validate_claim(claim, eligibility_index)

        assert result.final_status is FinalStatus.INVALID
        assert result.encounter_date == "not a date"
        assert "No matching eligibility found" in result.remarks[0]

    def test_elective_consultation_restricted_department(
        self, valid_claim: ClaimRecord, eligibility_index: EligibilityIndex
    ):
        """Test that an elective consultation used in a dental department is invalid."""
        claim = replace(valid_claim, department="Dental Clinic")
        result = validate_claim(claim, eligibility_index)

        assert result.final_status is FinalStatus.INVALID
        assert len(result.remarks) == 1
        assert "restricted service types" in result.remarks[0]
        assert result.eligibility is not None

    def test_payer_name_in_package_is_not_inspected(
        self, valid_claim: ClaimRecord, eligibility_index: EligibilityIndex
    ):
        """Test that a package column holding a payer name does not fail the category."""
        claim = replace(valid_claim, package_name="Daman Dental Plan")
        assert validate_claim(claim, eligibility_index).is_valid

    def test_dental_category_falls_back_to_package(self, eligibility_index: EligibilityIndex):
        """Test that without a department the package text decides the dental rule."""
        base = ClaimRecord(
            claim_id="D1",
            member_id_raw="777",
            claim_date_raw="05/03/2024",
            clinician="DHA-002",
            package_name="General Dental Checkup",
        )
        assert validate_claim(base, eligibility_index).is_valid

        lab = validate_claim(replace(base, package_name="Lab Panel"), eligibility_index)
        assert lab.final_status is FinalStatus.INVALID
        assert lab.remarks == ['Dental Services requires related package. Found: "Lab Panel"']

    def test_department_checked_before_package(self, eligibility_index: EligibilityIndex):
        """Test that the department wins over a matching package name."""
        claim = ClaimRecord(
            claim_id="D2",
            member_id_raw="777",
            claim_date_raw="05/03/2024",
            department="Radiology",
            package_name="General Dental Checkup",
        )
        result = validate_claim(claim, eligibility_index)
        assert result.final_status is FinalStatus.INVALID
        assert 'Found: "Radiology"' in result.remarks[0]

    def test_blank_member_id_produces_nothing(self, eligibility_index: EligibilityIndex):
        """Test that a claim without a member ID yields no result."""
        claim = ClaimRecord(claim_id="X", member_id_raw="   ", claim_date_raw="05/03/2024")
        assert validate_claim(claim, eligibility_index) is None

    def test_month_first_dates(self, valid_claim: ClaimRecord, eligibility_index: EligibilityIndex):
        """Test that prefer_mdy decides ambiguous claim dates."""
        claim = replace(valid_claim, claim_date_raw="03/05/2024")
        assert validate_claim(claim, eligibility_index, prefer_mdy=True).is_valid
        assert not validate_claim(claim, eligibility_index, prefer_mdy=False).is_valid


class TestValidateClaims:
    """Test batch validation."""

    def test_one_result_per_claim_in_order(
        self, valid_claim: ClaimRecord, eligibility_index: EligibilityIndex
    ):
        """Test that results follow the input order."""
        claims = [
            valid_claim,
            replace(valid_claim, claim_id="CLM-2", claim_date_raw="07/03/2024"),
            replace(valid_claim, claim_id="CLM-3", member_id_raw="(VVIP) 1"),
        ]
        results = validate_claims(claims, eligibility_index)

        assert [r.claim_id for r in results] == ["CLM-1", "CLM-2", "CLM-3"]
        assert [r.final_status for r in results] == [
            FinalStatus.VALID,
            FinalStatus.INVALID,
            FinalStatus.VALID,
        ]

    def test_skips_claims_without_ids(
        self, valid_claim: ClaimRecord, eligibility_index: EligibilityIndex
    ):
        """Test that claims missing a claim ID or member ID are skipped."""
        claims: list[Any] = [
            None,
            replace(valid_claim, claim_id="  "),
            replace(valid_claim, member_id_raw=""),
            valid_claim,
        ]
        results = validate_claims(claims, eligibility_index)
        assert [r.claim_id for r in results] == ["CLM-1"]

    def test_accepts_canonical_rows(self, eligibility_index: EligibilityIndex):
        """Test that camelCase canonical rows are normalized on the way in."""
        rows = [
            {
                "claimID": "R1",
                "memberID": "12345",
                "claimDate": "05/03/2024",
                "clinician": "DHA-001",
                "packageName": "Daman Enhanced",
            }
        ]
        results = validate_claims(rows, eligibility_index)
        assert results[0].is_valid

    def test_used_requests_side_table(
        self, valid_claim: ClaimRecord, eligibility_index: EligibilityIndex
    ):
        """Test that matched request numbers are collected once."""
        used: set[str] = set()
        validate_claims([valid_claim, valid_claim], eligibility_index, used_requests=used)
        assert used == {"REQ-1001"}

    def test_none_index_raises(self, valid_claim: ClaimRecord):
        """Test that a missing index is a programming error."""
        with pytest.raises(TypeError):
            validate_claims([valid_claim], None)

    def test_deterministic_and_idempotent(
        self, valid_claim: ClaimRecord, eligibility_index: EligibilityIndex
    ):
        """Test that repeated runs give identical results."""
        claims = [
            valid_claim,
            replace(valid_claim, claim_id="CLM-2", member_id_raw="0012345"),
            replace(valid_claim, claim_id="CLM-3", claim_date_raw="bad"),
        ]
        first = validate_claims(claims, eligibility_index, used_requests=set())
        second = validate_claims(claims, eligibility_index, used_requests=set())
        assert first == second
        assert [r.to_dict() for r in first] == [r.to_dict() for r in second]


class TestReconcile:
    """End-to-end reconciliation from raw rows."""

    def test_physio_claim_is_valid(self, physio_eligibility_row: dict[str, Any]):
        """Test that a same-day physiotherapy claim is valid."""
        claim = {
            "claimID": "C1",
            "memberID": "123",
            "claimDate": "01/03/2024",
            "packageName": "Physio Package",
        }
        outcome = reconcile([physio_eligibility_row], [claim], prefer_mdy=False)

        assert len(outcome.results) == 1
        result = outcome.results[0]
        assert result.final_status is FinalStatus.VALID
        assert result.status == "Eligible"
        assert result.service_category == "Physiotherapy"
        assert outcome.used_request_numbers == ["REQ-2001"]

    def test_physio_claim_next_day_has_no_match(self, physio_eligibility_row: dict[str, Any]):
        """Test that the next day's claim finds no eligibility."""
        claim = {
            "claimID": "C1",
            "memberID": "123",
            "claimDate": "02/03/2024",
            "packageName": "Physio Package",
        }
        outcome = reconcile([physio_eligibility_row], [claim])

        result = outcome.results[0]
        assert result.final_status is FinalStatus.INVALID
        assert "No matching eligibility found" in result.remarks[0]
        assert outcome.used_request_numbers == []

    def test_insta_report_physiotherapy(self):
        """Test that an Insta claim is checked on its department, not its payer."""
        report = [
            {
                "Pri. Claim No": "INS-10",
                "Pri. Patient Insurance Card No": "123",
                "Encounter Date": "01/03/2024",
                "Clinician License": "",
                "Department": "Physiotherapy",
                "Pri. Payer Name": "Daman Enhanced",
                "Codification Status": "Coded",
            }
        ]
        eligibility = [
            {
                "Member ID": "123",
                "Answered On": "01/03/2024",
                "Status": "Eligible",
                "Service Category": "Physiotherapy",
                "Package Name": "Daman Enhanced",
                "Department": "Physiotherapy",
            }
        ]
        outcome = reconcile(eligibility, normalize_report_rows(report))

        result = outcome.results[0]
        assert result.final_status is FinalStatus.VALID
        assert result.remarks == []

    def test_insta_report_dental_with_plan_package(self):
        """Test that a plan name in the eligibility package does not hide the match."""
        report = [
            {
                "Pri. Claim No": "INS-11",
                "Pri. Patient Insurance Card No": "777",
                "Encounter Date": "05/03/2024",
                "Department": "Dental",
                "Pri. Payer Name": "Thiqa",
            }
        ]
        eligibility = [
            {
                "Member ID": "777",
                "Eligibility Request Number": "REQ-77",
                "Answered On": "05/03/2024",
                "Status": "Eligible",
                "Service Category": "Dental Services",
                "Package Name": "Thiqa",
                "Department": "Dental",
            }
        ]
        outcome = reconcile(eligibility, normalize_report_rows(report))

        result = outcome.results[0]
        assert result.final_status is FinalStatus.VALID
        assert result.eligibility.request_number == "REQ-77"

    def test_used_request_numbers_are_unique(
        self, eligibility_rows: list[dict[str, Any]], valid_claim: ClaimRecord
    ):
        """Test that one answer covering two claims is listed once."""
        claims = [valid_claim, replace(valid_claim, claim_id="CLM-2")]
        outcome = reconcile(eligibility_rows, claims)

        assert all(r.is_valid for r in outcome.results)
        assert outcome.used_request_numbers == ["REQ-1001"]

    def test_repeat_runs_match(
        self, eligibility_rows: list[dict[str, Any]], valid_claim: ClaimRecord
    ):
        """Test that reconcile is idempotent."""
        assert reconcile(eligibility_rows, [valid_claim]) == reconcile(
            eligibility_rows, [valid_claim]
        )
