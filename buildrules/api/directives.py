"""Conditional directive contracts evaluated against a target descriptor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol, runtime_checkable, TypeAlias

from buildrules.api.target import TargetDescriptor, TargetPlatform, WindowsCompiler

EffectKind: TypeAlias = Literal["library", "definition", "third_party"]

EFFECT_KINDS: tuple[EffectKind, ...] = ("library", "definition", "third_party")


@runtime_checkable
class TargetPredicate(Protocol):
    """Boolean test over one target descriptor."""

    def __call__(self, target: TargetDescriptor) -> bool: ...

    def describe(self) -> str: ...


@dataclass(frozen=True, slots=True)
class PlatformIn:
    platforms: tuple[TargetPlatform, ...]

    def __call__(self, target: TargetDescriptor) -> bool:
        return target.platform in self.platforms

    def describe(self) -> str:
        return f"platform in ({', '.join(str(p) for p in self.platforms)})"


@dataclass(frozen=True, slots=True)
class CompilerIs:
    compiler: WindowsCompiler

    def __call__(self, target: TargetDescriptor) -> bool:
        return target.compiler == self.compiler

    def describe(self) -> str:
        return f"compiler == {self.compiler}"


@dataclass(frozen=True, slots=True)
class LeanAndMeanIs:
    enabled: bool

    def __call__(self, target: TargetDescriptor) -> bool:
        return bool(target.lean_and_mean) == self.enabled

    def describe(self) -> str:
        return f"lean_and_mean == {self.enabled}"


@dataclass(frozen=True, slots=True)
class AllOf:
    predicates: tuple[TargetPredicate, ...]

    def __call__(self, target: TargetDescriptor) -> bool:
        return all(predicate(target) for predicate in self.predicates)

    def describe(self) -> str:
        return " and ".join(f"({p.describe()})" for p in self.predicates) or "true"


@dataclass(frozen=True, slots=True)
class AnyOf:
    predicates: tuple[TargetPredicate, ...]

    def __call__(self, target: TargetDescriptor) -> bool:
        return any(predicate(target) for predicate in self.predicates)

    def describe(self) -> str:
        return " or ".join(f"({p.describe()})" for p in self.predicates) or "false"


@dataclass(frozen=True, slots=True)
class Negate:
    predicate: TargetPredicate

    def __call__(self, target: TargetDescriptor) -> bool:
        return not self.predicate(target)

    def describe(self) -> str:
        return f"not ({self.predicate.describe()})"


def platform_in(*platforms: TargetPlatform) -> PlatformIn:
    if not platforms:
        raise ValueError("platform_in requires at least one platform")
    return PlatformIn(platforms=tuple(platforms))


def compiler_is(compiler: WindowsCompiler) -> CompilerIs:
    return CompilerIs(compiler=compiler)


def lean_and_mean_is(enabled: bool) -> LeanAndMeanIs:
    return LeanAndMeanIs(enabled=bool(enabled))


def all_of(*predicates: TargetPredicate) -> AllOf:
    return AllOf(predicates=tuple(predicates))


def any_of(*predicates: TargetPredicate) -> AnyOf:
    return AnyOf(predicates=tuple(predicates))


def negate(predicate: TargetPredicate) -> Negate:
    return Negate(predicate=predicate)


@dataclass(frozen=True, slots=True)
class DirectiveEffect:
    """One change a directive applies to a module when it fires."""

    kind: EffectKind
    value: str

    def __post_init__(self) -> None:
        if self.kind not in EFFECT_KINDS:
            raise ValueError(f"unknown directive effect kind: {self.kind}")
        if not self.value.strip():
            raise ValueError("directive effect value must not be empty")


def add_library(name: str) -> DirectiveEffect:
    """Append a linker input (static library) to the module."""
    return DirectiveEffect(kind="library", value=name)


def add_definition(definition: str) -> DirectiveEffect:
    """Add a private preprocessor definition such as ``WITH_FOO=0``."""
    return DirectiveEffect(kind="definition", value=definition)


def add_third_party_dependency(module_name: str) -> DirectiveEffect:
    """Add a third-party static dependency; it links as a private dependency."""
    return DirectiveEffect(kind="third_party", value=module_name)


@dataclass(frozen=True, slots=True)
class ConditionalDirective:
    """Predicate plus the effects applied when it holds (or fails)."""

    when: TargetPredicate
    effects: tuple[DirectiveEffect, ...]
    otherwise: tuple[DirectiveEffect, ...] = ()

    def select(self, target: TargetDescriptor) -> tuple[DirectiveEffect, ...]:
        """Return the effects that apply for ``target``."""
        return self.evaluate(target).applied

    def evaluate(self, target: TargetDescriptor) -> DirectiveOutcome:
        fired = bool(self.when(target))
        return DirectiveOutcome(
            when=self.when.describe(),
            fired=fired,
            applied=self.effects if fired else self.otherwise,
        )


@dataclass(frozen=True, slots=True)
class DirectiveOutcome:
    """Result of evaluating one directive for one target."""

    when: str
    fired: bool
    applied: tuple[DirectiveEffect, ...]

    def to_payload(self) -> dict[str, object]:
        return {
            "when": self.when,
            "fired": self.fired,
            "effects": [{"kind": effect.kind, "value": effect.value} for effect in self.applied],
        }


__all__ = [
    "AllOf",
    "AnyOf",
    "CompilerIs",
    "ConditionalDirective",
    "DirectiveEffect",
    "DirectiveOutcome",
    "EFFECT_KINDS",
    "EffectKind",
    "LeanAndMeanIs",
    "Negate",
    "PlatformIn",
    "TargetPredicate",
    "add_definition",
    "add_library",
    "add_third_party_dependency",
    "all_of",
    "any_of",
    "compiler_is",
    "lean_and_mean_is",
    "negate",
    "platform_in",
]
