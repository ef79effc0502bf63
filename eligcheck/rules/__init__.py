"""Matching and validation engine for eligibility reconciliation."""

from .categories import (
    DEFAULT_SERVICE_CATEGORY_RULES,
    ServiceCategoryRule,
    ServiceCategoryRuleSet,
    category_text,
    is_service_category_valid,
)
from .config_loader import RuleSetValidationError, load_rule_set, parse_rule_set
from .eligibility_index import EligibilityIndex, build_eligibility_index
from .engine import reconcile, validate_claim, validate_claims
from .matcher import find_eligibility_for_claim
from .models import CategoryCheck, FinalStatus, ReconciliationOutcome, ValidationResult

__all__ = [
    "DEFAULT_SERVICE_CATEGORY_RULES",
    "ServiceCategoryRule",
    "ServiceCategoryRuleSet",
    "category_text",
    "is_service_category_valid",
    "RuleSetValidationError",
    "load_rule_set",
    "parse_rule_set",
    "EligibilityIndex",
    "build_eligibility_index",
    "reconcile",
    "validate_claim",
    "validate_claims",
    "find_eligibility_for_claim",
    "CategoryCheck",
    "FinalStatus",
    "ReconciliationOutcome",
    "ValidationResult",
]
