"""Public module-graph API contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from buildrules.api.module_rules import ResolvedModule


@dataclass(frozen=True, slots=True)
class ModuleBuildEnvironment:
    """Effective compile and link inputs for one module."""

    module_name: str
    include_paths: tuple[str, ...]
    definitions: tuple[str, ...]
    additional_libraries: tuple[str, ...]
    link_modules: tuple[str, ...]
    dynamically_loaded_modules: tuple[str, ...]


class ModuleGraph(ABC):
    """Dependency graph over resolved modules for one target."""

    @abstractmethod
    def add_node(self, node: ResolvedModule) -> None:
        """Register one resolved module."""

    @abstractmethod
    def get(self, module_name: str) -> ResolvedModule:
        """Return one registered module."""

    @abstractmethod
    def execution_order(self) -> tuple[str, ...]:
        """Return dependency-first build order."""

    @abstractmethod
    def link_closure(self, module_name: str) -> tuple[str, ...]:
        """Return every module linked into ``module_name``."""

    @abstractmethod
    def public_include_paths_for(self, module_name: str) -> tuple[str, ...]:
        """Return include paths visible while compiling ``module_name``."""

    @abstractmethod
    def build_environment(self, module_name: str) -> ModuleBuildEnvironment:
        """Return the full compile and link environment of one module."""


def create_module_graph(*, configuration_definitions: tuple[str, ...] = ()) -> ModuleGraph:
    """Create the default module graph implementation."""
    from buildrules.runtime.module_graph import RuntimeModuleGraph

    return RuntimeModuleGraph(configuration_definitions=configuration_definitions)


__all__ = ["ModuleBuildEnvironment", "ModuleGraph", "create_module_graph"]
