"""Module graph implementation for build-rules resolution."""

from __future__ import annotations

from collections import deque

from buildrules.api.module_graph import ModuleBuildEnvironment, ModuleGraph
from buildrules.api.module_rules import ResolvedModule
from buildrules.runtime.errors import DuplicateModuleError, ModuleCycleError, UnknownModuleError
from buildrules.runtime.resolution import unique


class RuntimeModuleGraph(ModuleGraph):
    """Dependency-ordered view over resolved modules of one target."""

    def __init__(self, *, configuration_definitions: tuple[str, ...] = ()) -> None:
        self._nodes: dict[str, ResolvedModule] = {}
        self._configuration_definitions = tuple(configuration_definitions)
        self._cached_order: tuple[str, ...] | None = None

    def add_node(self, node: ResolvedModule) -> None:
        """Register one node; invalidates cached execution order."""
        module_name = node.name.strip()
        if not module_name:
            raise ValueError("module name must not be empty")
        if module_name in self._nodes:
            raise DuplicateModuleError(module_name)
        self._nodes[module_name] = node
        self._cached_order = None

    def get(self, module_name: str) -> ResolvedModule:
        node = self._nodes.get(module_name)
        if node is None:
            raise UnknownModuleError(module_name)
        return node

    def execution_order(self) -> tuple[str, ...]:
        """Compute dependency-first order and validate the graph."""
        if self._cached_order is not None:
            return self._cached_order

        indegree: dict[str, int] = {name: 0 for name in self._nodes}
        outgoing: dict[str, list[str]] = {name: [] for name in self._nodes}

        for name, node in self._nodes.items():
            for referenced in node.referenced_names():
                if referenced not in self._nodes:
                    raise UnknownModuleError(referenced, referenced_by=name)
            for dependency in node.link_dependencies:
                indegree[name] += 1
                outgoing[dependency].append(name)

        queue = deque(sorted(name for name, degree in indegree.items() if degree == 0))
        ordered: list[str] = []

        while queue:
            current = queue.popleft()
            ordered.append(current)
            for target in outgoing[current]:
                indegree[target] -= 1
                if indegree[target] == 0:
                    queue.append(target)

        if len(ordered) != len(self._nodes):
            placed = set(ordered)
            remaining = {name for name in self._nodes if name not in placed}
            raise ModuleCycleError(self._cycles(remaining))

        self._cached_order = tuple(ordered)
        return self._cached_order

    def link_closure(self, module_name: str) -> tuple[str, ...]:
        """Return every module linked into ``module_name`` in dependency order."""
        self.get(module_name)
        order = self.execution_order()
        reached: set[str] = set()
        pending = list(self._nodes[module_name].link_dependencies)
        while pending:
            current = pending.pop()
            if current in reached:
                continue
            reached.add(current)
            pending.extend(self._nodes[current].link_dependencies)
        return tuple(name for name in order if name in reached)

    def public_include_paths_for(self, module_name: str) -> tuple[str, ...]:
        """Return own include paths then those exported by dependencies."""
        node = self.get(module_name)
        self.execution_order()
        paths: list[str] = [*node.public_include_paths, *node.private_include_paths]
        visited: set[str] = {module_name}
        pending = deque((*node.link_dependencies, *node.include_path_modules))
        while pending:
            current = pending.popleft()
            if current in visited:
                continue
            visited.add(current)
            dependency = self._nodes[current]
            paths.extend(dependency.public_include_paths)
            # Only the public surface of a dependency propagates further.
            pending.extend(dependency.public_dependency_module_names)
            pending.extend(dependency.public_include_path_module_names)
        return unique(paths)

    def build_environment(self, module_name: str) -> ModuleBuildEnvironment:
        node = self.get(module_name)
        link_modules = self.link_closure(module_name)
        libraries: list[str] = list(node.public_additional_libraries)
        for linked in link_modules:
            libraries.extend(self._nodes[linked].public_additional_libraries)
        return ModuleBuildEnvironment(
            module_name=module_name,
            include_paths=self.public_include_paths_for(module_name),
            definitions=unique((*self._configuration_definitions, *node.definitions)),
            additional_libraries=unique(libraries),
            link_modules=link_modules,
            dynamically_loaded_modules=node.dynamically_loaded_module_names,
        )

    def _cycles(self, candidates: set[str]) -> tuple[tuple[str, ...], ...]:
        """Strongly connected components with more than one member, or self-loops."""
        index = 0
        stack: list[str] = []
        on_stack: set[str] = set()
        idx: dict[str, int] = {}
        low: dict[str, int] = {}
        out: list[tuple[str, ...]] = []

        def edges(name: str) -> list[str]:
            return [dep for dep in self._nodes[name].link_dependencies if dep in candidates]

        def strongconnect(v: str) -> None:
            nonlocal index
            idx[v] = index
            low[v] = index
            index += 1
            stack.append(v)
            on_stack.add(v)

            for w in edges(v):
                if w not in idx:
                    strongconnect(w)
                    low[v] = min(low[v], low[w])
                elif w in on_stack:
                    low[v] = min(low[v], idx[w])

            if low[v] == idx[v]:
                component: list[str] = []
                while True:
                    w = stack.pop()
                    on_stack.remove(w)
                    component.append(w)
                    if w == v:
                        break
                if len(component) > 1 or v in edges(v):
                    out.append(tuple(sorted(component)))

        for v in sorted(candidates):
            if v not in idx:
                strongconnect(v)
        return tuple(sorted(out))


__all__ = ["RuntimeModuleGraph"]
