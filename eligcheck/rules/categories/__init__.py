"""Rule categories for claim validation."""

from .service_category_rules import (
    DEFAULT_SERVICE_CATEGORY_RULES,
    RESTRICTED_ELECTIVE_KEYWORDS,
    ServiceCategoryRule,
    ServiceCategoryRuleSet,
    category_text,
    is_service_category_valid,
)

__all__ = [
    "DEFAULT_SERVICE_CATEGORY_RULES",
    "RESTRICTED_ELECTIVE_KEYWORDS",
    "ServiceCategoryRule",
    "ServiceCategoryRuleSet",
    "category_text",
    "is_service_category_valid",
]
