"""Rules produced by the advanced plugin template."""

from __future__ import annotations

from buildrules.api.module_rules import ModuleRules

TEMPLATE_PLACEHOLDER = "PLUGIN_NAME"

PLUGIN_PUBLIC_DEPENDENCIES: tuple[str, ...] = ("Core",)
PLUGIN_PRIVATE_DEPENDENCIES: tuple[str, ...] = (
    "Projects",
    "InputCore",
    "UnrealEd",
    "LevelEditor",
    "CoreUObject",
    "Engine",
    "Slate",
    "SlateCore",
)


def plugin_module_rules(plugin_name: str = TEMPLATE_PLACEHOLDER) -> ModuleRules:
    """Instantiate the template for ``plugin_name``.

    The plugin name doubles as module name and include-path root, so it must
    be a valid identifier.
    """
    name = plugin_name.strip()
    if not name.isidentifier():
        raise ValueError(f"plugin name must be an identifier: {plugin_name!r}")
    return ModuleRules(
        name=name,
        public_include_paths=(f"{name}/Public",),
        private_include_paths=(f"{name}/Private",),
        public_dependency_module_names=PLUGIN_PUBLIC_DEPENDENCIES,
        private_dependency_module_names=PLUGIN_PRIVATE_DEPENDENCIES,
        dynamically_loaded_module_names=(),
    )


__all__ = ["TEMPLATE_PLACEHOLDER", "plugin_module_rules"]
