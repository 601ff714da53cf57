"""Apply conditional directives to module rules for one target."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from buildrules.api.directives import DirectiveOutcome
from buildrules.api.module_rules import ModuleRules, ResolvedModule
from buildrules.api.target import TargetDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConditionalResolution:
    """Extra inputs contributed by the directives that fired."""

    libraries: tuple[str, ...] = ()
    definitions: tuple[str, ...] = ()
    third_party_dependencies: tuple[str, ...] = ()
    outcomes: tuple[DirectiveOutcome, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.libraries or self.definitions or self.third_party_dependencies)


def unique(values: Iterable[str]) -> tuple[str, ...]:
    """Drop repeated entries, keeping first occurrence order."""
    seen: set[str] = set()
    ordered: list[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        ordered.append(value)
    return tuple(ordered)


def resolve_conditional_directives(
    rules: ModuleRules, target: TargetDescriptor
) -> ConditionalResolution:
    """Evaluate every directive of ``rules`` against ``target``."""
    libraries: list[str] = []
    definitions: list[str] = []
    third_party: list[str] = []
    outcomes = tuple(directive.evaluate(target) for directive in rules.directives)
    for outcome in outcomes:
        for effect in outcome.applied:
            if effect.kind == "library":
                libraries.append(effect.value)
            elif effect.kind == "definition":
                definitions.append(effect.value)
            else:
                third_party.append(effect.value)
    return ConditionalResolution(
        libraries=unique(libraries),
        definitions=unique(definitions),
        third_party_dependencies=unique(third_party),
        outcomes=outcomes,
    )


def resolve_module(rules: ModuleRules, target: TargetDescriptor) -> ResolvedModule:
    """Merge static lists with the conditional resolution for ``target``."""
    extra = resolve_conditional_directives(rules, target)
    resolved = ResolvedModule(
        name=rules.name,
        kind="module",
        public_include_paths=unique(rules.public_include_paths),
        private_include_paths=unique(rules.private_include_paths),
        public_include_path_module_names=unique(rules.public_include_path_module_names),
        private_include_path_module_names=unique(rules.private_include_path_module_names),
        public_dependency_module_names=unique(rules.public_dependency_module_names),
        private_dependency_module_names=unique(
            (*rules.private_dependency_module_names, *extra.third_party_dependencies)
        ),
        dynamically_loaded_module_names=unique(rules.dynamically_loaded_module_names),
        public_additional_libraries=unique((*rules.public_additional_libraries, *extra.libraries)),
        definitions=unique((*rules.definitions, *extra.definitions)),
        third_party_dependencies=extra.third_party_dependencies,
        directive_outcomes=extra.outcomes,
    )
    logger.debug(
        "module_resolved name=%s target=%s libraries=%s definitions=%s third_party=%s",
        resolved.name,
        target.describe(),
        ",".join(extra.libraries) or "-",
        ",".join(extra.definitions) or "-",
        ",".join(extra.third_party_dependencies) or "-",
    )
    return resolved


__all__ = ["ConditionalResolution", "resolve_conditional_directives", "resolve_module", "unique"]
