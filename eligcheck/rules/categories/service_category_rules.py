"""Service-category rules.

An eligibility answer names the service category it covers. Some
categories only make sense for particular services (a "Dental Services"
approval must be used in a dental department), and an elective
consultation must not be used for the restricted therapy services.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..models import CategoryCheck

ELECTIVE_STATUS = "elective"

RESTRICTED_ELECTIVE_KEYWORDS: tuple[str, ...] = (
    "dental",
    "physio",
    "diet",
    "occupational",
    "speech",
)


@dataclass(frozen=True)
class ServiceCategoryRule:
    """Keyword rule for one service category.

    ``required_keywords``: the text must contain at least one (empty = no
    restriction). ``elective_excluded_keywords``: for elective
    consultations, the text must contain none of these.
    """

    name: str
    required_keywords: tuple[str, ...] = ()
    elective_excluded_keywords: tuple[str, ...] = ()

    def check(self, category: str, consultation_status: str, text: str) -> CategoryCheck:
        text_lower = text.lower()

        if (
            self.elective_excluded_keywords
            and consultation_status.strip().lower() == ELECTIVE_STATUS
        ):
            if any(kw.lower() in text_lower for kw in self.elective_excluded_keywords):
                return CategoryCheck(
                    valid=False,
                    reason=(
                        f"{category} (Elective) cannot include restricted service "
                        f'types. Found: "{text}"'
                    ),
                )
            return CategoryCheck(valid=True)

        # Blank text carries no evidence either way
        if self.required_keywords and text_lower:
            if not any(kw.lower() in text_lower for kw in self.required_keywords):
                return CategoryCheck(
                    valid=False,
                    reason=f'{category} requires related package. Found: "{text}"',
                )

        return CategoryCheck(valid=True)


@dataclass(frozen=True)
class ServiceCategoryRuleSet:
    """Case-insensitive lookup of category name to rule."""

    rules: Mapping[str, ServiceCategoryRule] = field(default_factory=dict)

    @classmethod
    def from_rules(cls, rules: Iterable[ServiceCategoryRule]) -> ServiceCategoryRuleSet:
        return cls(rules={rule.name.strip().lower(): rule for rule in rules})

    def get(self, category: str) -> ServiceCategoryRule | None:
        return self.rules.get(category.strip().lower())

    def __len__(self) -> int:
        return len(self.rules)

    def __contains__(self, category: object) -> bool:
        return isinstance(category, str) and self.get(category) is not None


DEFAULT_SERVICE_CATEGORY_RULES = ServiceCategoryRuleSet.from_rules(
    [
        ServiceCategoryRule("Dental Services", ("dental", "orthodontic")),
        ServiceCategoryRule("Physiotherapy", ("physio",)),
        ServiceCategoryRule(
            "Other OP Services", ("physio", "diet", "occupational", "speech")
        ),
        ServiceCategoryRule(
            "Consultation", elective_excluded_keywords=RESTRICTED_ELECTIVE_KEYWORDS
        ),
    ]
)


def category_text(department: Any, package_name: Any = "") -> str:
    """Text a category rule is checked against.

    Policy: the department (or clinic) the service was given in. Report
    exports put the payer or plan name in the package column, so the
    package name is used only when the department is blank.
    """
    dept = str(department or "").strip()
    if dept:
        return dept
    return str(package_name or "").strip()


def is_service_category_valid(
    category: Any,
    consultation_status: Any,
    text: Any,
    rules: ServiceCategoryRuleSet | None = None,
) -> CategoryCheck:
    """Check a service category against department/package text.

    Matching is a case-insensitive substring test. Categories missing
    from the rule set, and a blank category, are always valid.

    Args:
        category: Service category from the eligibility answer
        consultation_status: Consultation status ("Elective", ...)
        text: Department (or package) text to inspect
        rules: Rule set to use; defaults to DEFAULT_SERVICE_CATEGORY_RULES

    Returns:
        CategoryCheck with a reason populated on failure
    """
    category = str(category or "").strip()
    if not category:
        return CategoryCheck(valid=True)

    rules = rules if rules is not None else DEFAULT_SERVICE_CATEGORY_RULES
    rule = rules.get(category)
    if rule is None:
        return CategoryCheck(valid=True)

    return rule.check(category, str(consultation_status or ""), str(text or "").strip())
