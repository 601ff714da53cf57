"""Static checks over authored module rules."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Literal, TypeAlias

from buildrules.api.module_rules import LIST_FIELDS, ModuleRules
from buildrules.runtime.errors import ModuleRulesError

IssueLevel: TypeAlias = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class RulesIssue:
    level: IssueLevel
    field: str
    message: str


def find_duplicate_entries(rules: ModuleRules) -> dict[str, tuple[str, ...]]:
    """Map each list field to the entries it repeats (fields without repeats omitted)."""
    duplicates: dict[str, tuple[str, ...]] = {}
    for field_name in LIST_FIELDS:
        counts = Counter(rules.entries(field_name))
        repeated = tuple(entry for entry, count in counts.items() if count > 1)
        if repeated:
            duplicates[field_name] = repeated
    return duplicates


def validate_module_rules(rules: ModuleRules) -> tuple[RulesIssue, ...]:
    issues: list[RulesIssue] = []
    if not rules.name.strip():
        issues.append(RulesIssue("error", "name", "module name must not be empty"))
    if rules.name != rules.name.strip():
        issues.append(RulesIssue("error", "name", "module name has surrounding whitespace"))

    for field_name in LIST_FIELDS:
        if any(not entry.strip() for entry in rules.entries(field_name)):
            issues.append(RulesIssue("error", field_name, "contains an empty entry"))

    for field_name, repeated in find_duplicate_entries(rules).items():
        issues.append(
            RulesIssue("error", field_name, f"duplicate entries: {', '.join(repeated)}")
        )

    linked = set(rules.public_dependency_module_names) | set(rules.private_dependency_module_names)
    if rules.name in linked or rules.name in rules.dynamically_loaded_module_names:
        issues.append(RulesIssue("error", "name", "module depends on itself"))

    both = sorted(linked & set(rules.dynamically_loaded_module_names))
    if both:
        issues.append(
            RulesIssue(
                "warning",
                "dynamically_loaded_module_names",
                f"also linked statically: {', '.join(both)}",
            )
        )
    return tuple(issues)


def ensure_valid_module_rules(rules: ModuleRules) -> None:
    """Raise ``ModuleRulesError`` when ``rules`` has error-level issues."""
    errors = tuple(
        f"{issue.field}: {issue.message}"
        for issue in validate_module_rules(rules)
        if issue.level == "error"
    )
    if errors:
        raise ModuleRulesError(rules.name, errors)


__all__ = [
    "IssueLevel",
    "RulesIssue",
    "ensure_valid_module_rules",
    "find_duplicate_entries",
    "validate_module_rules",
]
