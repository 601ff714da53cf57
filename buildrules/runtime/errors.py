"""Shared build-rules exception types and policy helpers."""

from __future__ import annotations

import logging
from typing import TypeAlias


class ModuleRulesError(ValueError):
    """Module rules record failed validation."""

    def __init__(self, module_name: str, problems: tuple[str, ...]) -> None:
        self.module_name = module_name
        self.problems = problems
        super().__init__(f"invalid module rules for '{module_name}': " + "; ".join(problems))


class DuplicateModuleError(ValueError):
    """Module name registered twice in one build graph."""

    def __init__(self, module_name: str) -> None:
        self.module_name = module_name
        super().__init__(f"duplicate module name: {module_name}")


class UnknownModuleError(KeyError):
    """Referenced module name does not resolve to any known module."""

    def __init__(self, module_name: str, referenced_by: str | None = None) -> None:
        self.module_name = module_name
        self.referenced_by = referenced_by
        if referenced_by is None:
            message = f"unknown module '{module_name}'"
        else:
            message = f"unknown dependency '{module_name}' for module '{referenced_by}'"
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])


class ModuleCycleError(ValueError):
    """Link-time dependencies form a cycle."""

    def __init__(self, cycles: tuple[tuple[str, ...], ...]) -> None:
        self.cycles = cycles
        rendered = ", ".join("[" + " -> ".join(cycle) + "]" for cycle in cycles)
        super().__init__(f"module dependency cycle detected: {rendered}")

    @property
    def members(self) -> tuple[str, ...]:
        return tuple(sorted({name for cycle in self.cycles for name in cycle}))


ResolutionErrors: TypeAlias = tuple[type[Exception], ...]
RESOLUTION_ERRORS: ResolutionErrors = (
    ModuleRulesError,
    DuplicateModuleError,
    UnknownModuleError,
    ModuleCycleError,
)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
) -> None:
    """Emit structured observability for tolerated recoverable exceptions."""
    logger.log(level, message, exc_info=True)


__all__ = [
    "DuplicateModuleError",
    "ModuleCycleError",
    "ModuleRulesError",
    "RESOLUTION_ERRORS",
    "UnknownModuleError",
    "log_recoverable",
]
