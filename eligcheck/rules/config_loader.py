"""Service-category rule set loader.

Supports loading the category keyword table from YAML and JSON files so
that clinics can adjust keywords without code changes.

File format::

    service_categories:
      - name: Dental Services
        required_keywords: [dental, orthodontic]
      - name: Consultation
        elective_excluded_keywords: [dental, physio, diet, occupational, speech]
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .categories.service_category_rules import ServiceCategoryRule, ServiceCategoryRuleSet

logger = logging.getLogger(__name__)


class RuleSetValidationError(Exception):
    """Raised when rule set validation fails."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


class ServiceCategoryRuleConfig(BaseModel):
    """One category entry in a rule set file."""

    name: str
    required_keywords: list[str] = Field(default_factory=list)
    elective_excluded_keywords: list[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Category name must not be blank")
        return v

    @field_validator("required_keywords", "elective_excluded_keywords")
    @classmethod
    def normalize_keywords(cls, v: list[str]) -> list[str]:
        """Lowercase keywords and drop blanks; matching is case-insensitive."""
        return [kw.strip().lower() for kw in v if kw and kw.strip()]

    def to_rule(self) -> ServiceCategoryRule:
        return ServiceCategoryRule(
            name=self.name,
            required_keywords=tuple(self.required_keywords),
            elective_excluded_keywords=tuple(self.elective_excluded_keywords),
        )


def load_rule_set(file_path: str | Path) -> ServiceCategoryRuleSet:
    """Load a service-category rule set from a YAML or JSON file.

    Args:
        file_path: Path to the rule set file

    Returns:
        ServiceCategoryRuleSet

    Raises:
        RuleSetValidationError: If validation fails
        FileNotFoundError: If file doesn't exist
        ValueError: If the file extension is not supported
    """
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"Rule set file not found: {path}")

    suffix = path.suffix.lower()

    with open(path, encoding="utf-8") as f:
        if suffix in (".yaml", ".yml"):
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise RuleSetValidationError(
                    f"Invalid YAML in {path}", errors=[{"file": str(path), "error": str(e)}]
                ) from e
        elif suffix == ".json":
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise RuleSetValidationError(
                    f"Invalid JSON in {path}", errors=[{"file": str(path), "error": str(e)}]
                ) from e
        else:
            raise ValueError(f"Unsupported rule set format: {suffix}")

    rule_set = parse_rule_set(data, str(path))
    logger.info(f"Loaded {len(rule_set)} service category rule(s) from {path.name}")
    return rule_set


def parse_rule_set(data: Any, source: str = "<memory>") -> ServiceCategoryRuleSet:
    """Parse already-decoded rule set data.

    Accepts either a ``{"service_categories": [...]}`` document or a bare
    list of category entries.

    Raises:
        RuleSetValidationError: If the data is malformed or any entry fails
            validation
    """
    if isinstance(data, dict) and "service_categories" in data:
        entries = data["service_categories"]
    elif isinstance(data, list):
        entries = data
    else:
        raise RuleSetValidationError(
            f"Invalid rule set format in {source}",
            errors=[{"file": source, "error": "Expected a service_categories list"}],
        )

    if not isinstance(entries, list):
        raise RuleSetValidationError(
            f"Invalid rule set format in {source}",
            errors=[{"file": source, "error": "service_categories must be a list"}],
        )

    rules: list[ServiceCategoryRule] = []
    errors: list[dict[str, Any]] = []
    seen: set[str] = set()

    for idx, entry in enumerate(entries):
        try:
            config = ServiceCategoryRuleConfig.model_validate(entry)
        except ValidationError as e:
            errors.append({"file": source, "index": idx, "error": str(e)})
            continue

        key = config.name.lower()
        if key in seen:
            errors.append(
                {
                    "file": source,
                    "index": idx,
                    "error": f"Duplicate service category: {config.name}",
                }
            )
            continue
        seen.add(key)
        rules.append(config.to_rule())

    if errors:
        raise RuleSetValidationError(
            f"Validation failed for {len(errors)} item(s)",
            errors=errors,
        )

    return ServiceCategoryRuleSet.from_rules(rules)
