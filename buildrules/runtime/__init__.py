"""Build-rules runtime modules."""

from buildrules.runtime.config import BuildRulesConfig, get_build_config, load_build_config
from buildrules.runtime.errors import (
    DuplicateModuleError,
    ModuleCycleError,
    ModuleRulesError,
    UnknownModuleError,
)
from buildrules.runtime.logging import configure_logging, setup_logging
from buildrules.runtime.module_graph import RuntimeModuleGraph
from buildrules.runtime.registry import ModuleRegistry
from buildrules.runtime.resolution import (
    ConditionalResolution,
    resolve_conditional_directives,
    resolve_module,
)
from buildrules.runtime.validation import (
    RulesIssue,
    ensure_valid_module_rules,
    find_duplicate_entries,
    validate_module_rules,
)

__all__ = [
    "BuildRulesConfig",
    "ConditionalResolution",
    "DuplicateModuleError",
    "ModuleCycleError",
    "ModuleRegistry",
    "ModuleRulesError",
    "RuntimeModuleGraph",
    "RulesIssue",
    "UnknownModuleError",
    "configure_logging",
    "ensure_valid_module_rules",
    "find_duplicate_entries",
    "get_build_config",
    "load_build_config",
    "resolve_conditional_directives",
    "resolve_module",
    "setup_logging",
    "validate_module_rules",
]
