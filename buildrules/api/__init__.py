"""Public build-rules API contracts."""

from buildrules.api.directives import (
    ConditionalDirective,
    DirectiveEffect,
    DirectiveOutcome,
    TargetPredicate,
    add_definition,
    add_library,
    add_third_party_dependency,
    all_of,
    any_of,
    compiler_is,
    lean_and_mean_is,
    negate,
    platform_in,
)
from buildrules.api.logging import LoggingConfig, get_logger
from buildrules.api.module_graph import ModuleBuildEnvironment, ModuleGraph, create_module_graph
from buildrules.api.module_rules import ExternalModule, ModuleRules, ResolvedModule
from buildrules.api.target import (
    DESKTOP_PLATFORMS,
    WINDOWS_PLATFORMS,
    TargetConfiguration,
    TargetDescriptor,
    TargetPlatform,
    WindowsCompiler,
)

__all__ = [
    "ConditionalDirective",
    "DESKTOP_PLATFORMS",
    "DirectiveEffect",
    "DirectiveOutcome",
    "ExternalModule",
    "LoggingConfig",
    "ModuleBuildEnvironment",
    "ModuleGraph",
    "ModuleRules",
    "ResolvedModule",
    "TargetConfiguration",
    "TargetDescriptor",
    "TargetPlatform",
    "TargetPredicate",
    "WINDOWS_PLATFORMS",
    "WindowsCompiler",
    "add_definition",
    "add_library",
    "add_third_party_dependency",
    "all_of",
    "any_of",
    "compiler_is",
    "create_module_graph",
    "get_logger",
    "lean_and_mean_is",
    "negate",
    "platform_in",
]
