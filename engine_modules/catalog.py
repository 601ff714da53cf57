"""Engine-provided and third-party modules referenced by the rules in this package."""

from __future__ import annotations

from collections.abc import Iterable

from buildrules.runtime.config import get_build_config
from buildrules.runtime.registry import ModuleRegistry
from engine_modules.landscape_editor import KISSFFT_MODULE, LANDSCAPE_EDITOR_RULES
from engine_modules.plugin_template import plugin_module_rules

# Module name -> source tree layer it lives under.
ENGINE_MODULE_LAYERS: dict[str, str] = {
    "Core": "Runtime",
    "CoreUObject": "Runtime",
    "Engine": "Runtime",
    "InputCore": "Runtime",
    "RenderCore": "Runtime",
    "Slate": "Runtime",
    "SlateCore": "Runtime",
    "Landscape": "Runtime",
    "Foliage": "Runtime",
    "ImageWrapper": "Runtime",
    "Projects": "Runtime",
    "DesktopPlatform": "Developer",
    "AssetTools": "Developer",
    "UnrealEd": "Editor",
    "EditorStyle": "Editor",
    "EditorWidgets": "Editor",
    "PropertyEditor": "Editor",
    "ContentBrowser": "Editor",
    "MainFrame": "Editor",
    "LevelEditor": "Editor",
}

THIRD_PARTY_INCLUDE_PATHS: dict[str, tuple[str, ...]] = {
    KISSFFT_MODULE: ("ThirdParty/Kiss_FFT/kiss_fft129",),
}


def engine_include_path(module_name: str) -> str:
    return f"{ENGINE_MODULE_LAYERS[module_name]}/{module_name}/Public"


def create_engine_registry(
    *,
    plugins: Iterable[str] = (),
    strict_validation: bool | None = None,
) -> ModuleRegistry:
    """Registry with every known external module and the rules in this package."""
    strict = get_build_config().strict_validation if strict_validation is None else strict_validation
    registry = ModuleRegistry(strict_validation=strict)
    for name in ENGINE_MODULE_LAYERS:
        registry.declare_external(name, kind="engine", public_include_paths=(engine_include_path(name),))
    for name, paths in THIRD_PARTY_INCLUDE_PATHS.items():
        registry.declare_external(name, kind="third_party", public_include_paths=paths)
    registry.register(LANDSCAPE_EDITOR_RULES)
    for plugin_name in plugins:
        registry.register(plugin_module_rules(plugin_name))
    return registry


__all__ = [
    "ENGINE_MODULE_LAYERS",
    "THIRD_PARTY_INCLUDE_PATHS",
    "create_engine_registry",
    "engine_include_path",
]
