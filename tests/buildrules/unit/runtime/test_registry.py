from __future__ import annotations

import logging

import pytest

from buildrules.api.directives import ConditionalDirective, add_third_party_dependency, platform_in
from buildrules.api.module_rules import ModuleRules
from buildrules.api.target import TargetConfiguration, TargetDescriptor, TargetPlatform
from buildrules.runtime.errors import DuplicateModuleError, ModuleRulesError, UnknownModuleError
from buildrules.runtime.registry import ModuleRegistry


def _registry() -> ModuleRegistry:
    registry = ModuleRegistry()
    registry.declare_externals(("Core", "Slate"))
    registry.declare_external("Zlib", kind="third_party", public_include_paths=("ThirdParty/zlib",))
    registry.register(
        ModuleRules(
            name="Packager",
            private_dependency_module_names=("Core", "Slate"),
            directives=(
                ConditionalDirective(
                    when=platform_in(TargetPlatform.LINUX),
                    effects=(add_third_party_dependency("Zlib"),),
                ),
            ),
        )
    )
    return registry


def test_registry_lists_names() -> None:
    registry = _registry()
    assert registry.names() == ("Core", "Packager", "Slate", "Zlib")
    assert registry.module_names() == ("Packager",)
    assert registry.is_external("Core") is True
    assert registry.is_external("Packager") is False
    assert registry.get("Packager").name == "Packager"


def test_get_unknown_rules_raises() -> None:
    with pytest.raises(UnknownModuleError):
        _registry().get("Core")


def test_resolve_applies_target_and_profile_definitions() -> None:
    graph = _registry().resolve(
        TargetDescriptor(platform=TargetPlatform.LINUX, configuration=TargetConfiguration.SHIPPING)
    )
    packager = graph.get("Packager")
    assert packager.private_dependency_module_names == ("Core", "Slate", "Zlib")
    environment = graph.build_environment("Packager")
    assert "UE_BUILD_SHIPPING=1" in environment.definitions
    assert "ThirdParty/zlib" in environment.include_paths
    assert graph.get("Zlib").kind == "third_party"


def test_resolve_without_conditional_match() -> None:
    graph = _registry().resolve(TargetDescriptor(platform=TargetPlatform.MAC))
    assert graph.get("Packager").private_dependency_module_names == ("Core", "Slate")


def test_duplicate_registration_is_rejected() -> None:
    registry = _registry()
    with pytest.raises(DuplicateModuleError):
        registry.declare_external("Core")
    with pytest.raises(DuplicateModuleError):
        registry.register(ModuleRules(name="Packager"))
    with pytest.raises(DuplicateModuleError):
        registry.register(ModuleRules(name="Slate"))


def test_strict_registry_rejects_invalid_rules() -> None:
    registry = ModuleRegistry(strict_validation=True)
    with pytest.raises(ModuleRulesError):
        registry.register(ModuleRules(name="Bad", private_dependency_module_names=("Core", "Core")))


def test_lenient_registry_logs_issues(caplog) -> None:
    registry = ModuleRegistry(strict_validation=False)
    with caplog.at_level(logging.WARNING, logger="buildrules.runtime.registry"):
        registry.register(ModuleRules(name="Bad", private_dependency_module_names=("Core", "Core")))
    assert "module_rules_issue module=Bad" in caplog.text
    assert registry.module_names() == ("Bad",)


def test_unresolved_dependency_surfaces_on_resolve() -> None:
    registry = ModuleRegistry()
    registry.register(ModuleRules(name="Orphan", private_dependency_module_names=("Nowhere",)))
    with pytest.raises(UnknownModuleError):
        registry.resolve(TargetDescriptor(platform=TargetPlatform.WIN64))


def test_declare_external_rejects_empty_name() -> None:
    with pytest.raises(ValueError):
        ModuleRegistry().declare_external("  ")


def test_lenient_registry_stores_normalized_name() -> None:
    registry = ModuleRegistry(strict_validation=False)
    registry.declare_external("Core")
    registry.register(ModuleRules(name=" Tool ", private_dependency_module_names=("Core",)))
    assert registry.get("Tool").name == "Tool"
    graph = registry.resolve(TargetDescriptor(platform=TargetPlatform.LINUX))
    assert graph.get("Tool").name == "Tool"
    assert graph.get("Tool").to_payload()["name"] == "Tool"
