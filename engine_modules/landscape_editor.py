"""Rules for the landscape editor module."""

from __future__ import annotations

from buildrules.api.directives import (
    ConditionalDirective,
    add_definition,
    add_library,
    add_third_party_dependency,
    all_of,
    compiler_is,
    lean_and_mean_is,
    platform_in,
)
from buildrules.api.module_rules import ModuleRules
from buildrules.api.target import DESKTOP_PLATFORMS, WINDOWS_PLATFORMS, WindowsCompiler

LANDSCAPE_EDITOR = "LandscapeEditor"

# Shim for CRT definitions the Windows SDK has not caught up with under VS2015.
# TODO: drop once VisualStudio2015 builds no longer need legacy_stdio_definitions.lib.
LEGACY_STDIO_LIBRARY = "legacy_stdio_definitions.lib"

# Kiss FFT backs the smooth tool.
KISSFFT_MODULE = "Kiss_FFT"
KISSFFT_DISABLED_DEFINITION = "WITH_KISSFFT=0"

LANDSCAPE_EDITOR_RULES = ModuleRules(
    name=LANDSCAPE_EDITOR,
    private_dependency_module_names=(
        "Core",
        "CoreUObject",
        "Slate",
        "SlateCore",
        "EditorStyle",
        "Engine",
        "Landscape",
        "RenderCore",
        "InputCore",
        "UnrealEd",
        "PropertyEditor",
        "ImageWrapper",
        "EditorWidgets",
        "Foliage",
    ),
    private_include_path_module_names=(
        "MainFrame",
        "DesktopPlatform",
        "ContentBrowser",
        "AssetTools",
    ),
    dynamically_loaded_module_names=(
        "MainFrame",
        "DesktopPlatform",
    ),
    directives=(
        ConditionalDirective(
            when=all_of(
                platform_in(*WINDOWS_PLATFORMS),
                compiler_is(WindowsCompiler.VISUAL_STUDIO_2015),
            ),
            effects=(add_library(LEGACY_STDIO_LIBRARY),),
        ),
        ConditionalDirective(
            when=all_of(platform_in(*DESKTOP_PLATFORMS), lean_and_mean_is(False)),
            effects=(add_third_party_dependency(KISSFFT_MODULE),),
        ),
        ConditionalDirective(
            when=all_of(platform_in(*DESKTOP_PLATFORMS), lean_and_mean_is(True)),
            effects=(add_definition(KISSFFT_DISABLED_DEFINITION),),
        ),
    ),
)
