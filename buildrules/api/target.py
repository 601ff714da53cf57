"""Target descriptor contracts consumed by conditional module rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TargetPlatform(StrEnum):
    """Platforms a module can be built for."""

    WIN64 = "Win64"
    WIN32 = "Win32"
    MAC = "Mac"
    LINUX = "Linux"
    IOS = "IOS"
    ANDROID = "Android"
    PS4 = "PS4"
    XBOX_ONE = "XboxOne"
    HTML5 = "HTML5"


class WindowsCompiler(StrEnum):
    """Toolchain used for Windows targets."""

    DEFAULT = "Default"
    VISUAL_STUDIO_2013 = "VisualStudio2013"
    VISUAL_STUDIO_2015 = "VisualStudio2015"


class TargetConfiguration(StrEnum):
    """Build configuration of the target."""

    DEBUG = "Debug"
    DEVELOPMENT = "Development"
    SHIPPING = "Shipping"


WINDOWS_PLATFORMS: tuple[TargetPlatform, ...] = (TargetPlatform.WIN64, TargetPlatform.WIN32)
DESKTOP_PLATFORMS: tuple[TargetPlatform, ...] = (
    TargetPlatform.WIN64,
    TargetPlatform.WIN32,
    TargetPlatform.MAC,
    TargetPlatform.LINUX,
)


@dataclass(frozen=True, slots=True)
class TargetDescriptor:
    """Platform, compiler and configuration flags one build is evaluated against."""

    platform: TargetPlatform
    compiler: WindowsCompiler = WindowsCompiler.DEFAULT
    lean_and_mean: bool = False
    configuration: TargetConfiguration = TargetConfiguration.DEVELOPMENT

    @property
    def is_windows(self) -> bool:
        return self.platform in WINDOWS_PLATFORMS

    def describe(self) -> str:
        lean = " lean" if self.lean_and_mean else ""
        return f"{self.platform}/{self.compiler}/{self.configuration}{lean}"


def parse_platform(raw: str) -> TargetPlatform:
    """Parse a platform name case-insensitively."""
    value = raw.strip().lower()
    for platform in TargetPlatform:
        if platform.value.lower() == value:
            return platform
    raise ValueError(f"unknown target platform: {raw!r}")


def parse_compiler(raw: str) -> WindowsCompiler:
    """Parse a compiler name; accepts short aliases such as ``vs2015``."""
    value = raw.strip().lower()
    aliases = {
        "default": WindowsCompiler.DEFAULT,
        "vs2013": WindowsCompiler.VISUAL_STUDIO_2013,
        "vs2015": WindowsCompiler.VISUAL_STUDIO_2015,
    }
    if value in aliases:
        return aliases[value]
    for compiler in WindowsCompiler:
        if compiler.value.lower() == value:
            return compiler
    raise ValueError(f"unknown windows compiler: {raw!r}")


def parse_configuration(raw: str) -> TargetConfiguration:
    """Parse a configuration name with the usual short aliases."""
    value = raw.strip().lower()
    aliases = {
        "debug": TargetConfiguration.DEBUG,
        "dev": TargetConfiguration.DEVELOPMENT,
        "development": TargetConfiguration.DEVELOPMENT,
        "shipping": TargetConfiguration.SHIPPING,
        "release": TargetConfiguration.SHIPPING,
    }
    try:
        return aliases[value]
    except KeyError:
        raise ValueError(f"unknown target configuration: {raw!r}") from None


__all__ = [
    "DESKTOP_PLATFORMS",
    "TargetConfiguration",
    "TargetDescriptor",
    "TargetPlatform",
    "WINDOWS_PLATFORMS",
    "WindowsCompiler",
    "parse_compiler",
    "parse_configuration",
    "parse_platform",
]
