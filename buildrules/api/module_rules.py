"""Public module rules contracts.

A ``ModuleRules`` record is authored once per module and never mutated.
Resolving it against a target descriptor yields a ``ResolvedModule``
carrying the effective lists for that one build.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, fields
from typing import Literal, TypeAlias

from buildrules.api.directives import ConditionalDirective, DirectiveOutcome

ModuleKind: TypeAlias = Literal["module", "engine", "third_party"]

MODULE_KINDS: tuple[ModuleKind, ...] = ("module", "engine", "third_party")

INCLUDE_PATH_FIELDS: tuple[str, ...] = (
    "public_include_paths",
    "private_include_paths",
)
DEPENDENCY_FIELDS: tuple[str, ...] = (
    "public_include_path_module_names",
    "private_include_path_module_names",
    "public_dependency_module_names",
    "private_dependency_module_names",
    "dynamically_loaded_module_names",
)
LIST_FIELDS: tuple[str, ...] = (
    *INCLUDE_PATH_FIELDS,
    *DEPENDENCY_FIELDS,
    "public_additional_libraries",
    "definitions",
)


def _as_tuple(values: Iterable[str]) -> tuple[str, ...]:
    if isinstance(values, str):
        raise TypeError("expected a sequence of strings, got a single string")
    entries = tuple(values)
    for value in entries:
        if not isinstance(value, str):
            raise TypeError(f"expected string entries, got {type(value).__name__}: {value!r}")
    return entries


@dataclass(frozen=True, slots=True)
class ModuleRules:
    """Declarative build record for one module."""

    name: str
    public_include_paths: tuple[str, ...] = ()
    private_include_paths: tuple[str, ...] = ()
    public_include_path_module_names: tuple[str, ...] = ()
    private_include_path_module_names: tuple[str, ...] = ()
    public_dependency_module_names: tuple[str, ...] = ()
    private_dependency_module_names: tuple[str, ...] = ()
    dynamically_loaded_module_names: tuple[str, ...] = ()
    public_additional_libraries: tuple[str, ...] = ()
    definitions: tuple[str, ...] = ()
    directives: tuple[ConditionalDirective, ...] = ()

    def __post_init__(self) -> None:
        # Accept lists from authors; store tuples so records stay hashable.
        for name in LIST_FIELDS:
            object.__setattr__(self, name, _as_tuple(getattr(self, name)))
        object.__setattr__(self, "directives", tuple(self.directives))

    def entries(self, field_name: str) -> tuple[str, ...]:
        if field_name not in LIST_FIELDS:
            raise KeyError(f"unknown module rules list: {field_name}")
        return tuple(getattr(self, field_name))


@dataclass(frozen=True, slots=True)
class ResolvedModule:
    """Module rules with every directive applied for one target."""

    name: str
    kind: ModuleKind = "module"
    public_include_paths: tuple[str, ...] = ()
    private_include_paths: tuple[str, ...] = ()
    public_include_path_module_names: tuple[str, ...] = ()
    private_include_path_module_names: tuple[str, ...] = ()
    public_dependency_module_names: tuple[str, ...] = ()
    private_dependency_module_names: tuple[str, ...] = ()
    dynamically_loaded_module_names: tuple[str, ...] = ()
    public_additional_libraries: tuple[str, ...] = ()
    definitions: tuple[str, ...] = ()
    third_party_dependencies: tuple[str, ...] = ()
    directive_outcomes: tuple[DirectiveOutcome, ...] = ()

    @property
    def link_dependencies(self) -> tuple[str, ...]:
        """Public then private dependency names; both are linked."""
        return self.public_dependency_module_names + tuple(
            name
            for name in self.private_dependency_module_names
            if name not in self.public_dependency_module_names
        )

    @property
    def include_path_modules(self) -> tuple[str, ...]:
        return self.public_include_path_module_names + tuple(
            name
            for name in self.private_include_path_module_names
            if name not in self.public_include_path_module_names
        )

    def referenced_names(self) -> tuple[str, ...]:
        """Every module name this module refers to, in declaration order."""
        seen: list[str] = []
        for group in (
            self.link_dependencies,
            self.include_path_modules,
            self.dynamically_loaded_module_names,
        ):
            for name in group:
                if name not in seen:
                    seen.append(name)
        return tuple(seen)

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {}
        for item in fields(self):
            # Outcomes are reported per directive, not as rules.
            if item.name == "directive_outcomes":
                continue
            value = getattr(self, item.name)
            payload[item.name] = list(value) if isinstance(value, tuple) else value
        return payload


@dataclass(frozen=True, slots=True)
class ExternalModule:
    """Module whose rules live outside this tree (engine or third party)."""

    name: str
    kind: ModuleKind = "engine"
    public_include_paths: tuple[str, ...] = ()
    public_additional_libraries: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.kind not in MODULE_KINDS or self.kind == "module":
            raise ValueError(f"invalid external module kind: {self.kind}")
        object.__setattr__(self, "public_include_paths", _as_tuple(self.public_include_paths))
        object.__setattr__(
            self, "public_additional_libraries", _as_tuple(self.public_additional_libraries)
        )

    def as_resolved(self) -> ResolvedModule:
        return ResolvedModule(
            name=self.name,
            kind=self.kind,
            public_include_paths=self.public_include_paths,
            public_additional_libraries=self.public_additional_libraries,
        )


__all__ = [
    "DEPENDENCY_FIELDS",
    "ExternalModule",
    "INCLUDE_PATH_FIELDS",
    "LIST_FIELDS",
    "MODULE_KINDS",
    "ModuleKind",
    "ModuleRules",
    "ResolvedModule",
]
