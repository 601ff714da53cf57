"""Registry of module rules and externally provided modules."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

from buildrules.api.module_graph import ModuleGraph, create_module_graph
from buildrules.api.module_rules import ExternalModule, ModuleKind, ModuleRules
from buildrules.api.target import TargetDescriptor
from buildrules.build_profile import resolve_build_profile
from buildrules.runtime.errors import DuplicateModuleError, UnknownModuleError
from buildrules.runtime.resolution import resolve_module
from buildrules.runtime.validation import ensure_valid_module_rules, validate_module_rules

logger = logging.getLogger(__name__)


class ModuleRegistry:
    """Registry that holds module rules by name and resolves them per target."""

    def __init__(self, *, strict_validation: bool = True) -> None:
        self._strict_validation = strict_validation
        self._rules: dict[str, ModuleRules] = {}
        self._external: dict[str, ExternalModule] = {}

    def register(self, rules: ModuleRules) -> None:
        """Register one authored module."""
        name = rules.name.strip()
        if not name:
            raise ValueError("module name must not be empty")
        self._ensure_available(name)
        if self._strict_validation:
            ensure_valid_module_rules(rules)
        else:
            for issue in validate_module_rules(rules):
                logger.warning(
                    "module_rules_issue module=%s field=%s level=%s message=%s",
                    rules.name,
                    issue.field,
                    issue.level,
                    issue.message,
                )
        self._rules[name] = rules if rules.name == name else replace(rules, name=name)

    def declare_external(
        self,
        name: str,
        *,
        kind: ModuleKind = "engine",
        public_include_paths: Iterable[str] = (),
        public_additional_libraries: Iterable[str] = (),
    ) -> None:
        """Declare a module whose rules live outside this registry."""
        normalized = name.strip()
        if not normalized:
            raise ValueError("module name must not be empty")
        self._ensure_available(normalized)
        self._external[normalized] = ExternalModule(
            name=normalized,
            kind=kind,
            public_include_paths=tuple(public_include_paths),
            public_additional_libraries=tuple(public_additional_libraries),
        )

    def declare_externals(self, names: Iterable[str], *, kind: ModuleKind = "engine") -> None:
        for name in names:
            self.declare_external(name, kind=kind)

    def names(self) -> tuple[str, ...]:
        return tuple(sorted((*self._rules, *self._external)))

    def module_names(self) -> tuple[str, ...]:
        """Names of modules registered with rules (not external declarations)."""
        return tuple(sorted(self._rules))

    def get(self, name: str) -> ModuleRules:
        rules = self._rules.get(name)
        if rules is None:
            raise UnknownModuleError(name)
        return rules

    def is_external(self, name: str) -> bool:
        return name in self._external

    def resolve(self, target: TargetDescriptor) -> ModuleGraph:
        """Resolve every module for ``target`` and return a validated graph."""
        profile = resolve_build_profile(target.configuration)
        graph = create_module_graph(configuration_definitions=profile.definitions)
        for external in self._external.values():
            graph.add_node(external.as_resolved())
        for rules in self._rules.values():
            graph.add_node(resolve_module(rules, target))
        order = graph.execution_order()
        logger.info(
            "module_graph_resolved target=%s modules=%d authored=%d",
            target.describe(),
            len(order),
            len(self._rules),
        )
        return graph

    def _ensure_available(self, name: str) -> None:
        if name in self._rules or name in self._external:
            raise DuplicateModuleError(name)


__all__ = ["ModuleRegistry"]
