"""Build profile presets keyed by target configuration."""

from __future__ import annotations

from dataclasses import dataclass

from buildrules.api.target import TargetConfiguration


@dataclass(frozen=True, slots=True)
class BuildProfile:
    """Resolved per-configuration defaults."""

    configuration: TargetConfiguration
    definitions: tuple[str, ...]
    check_enabled: bool
    debug_info: bool
    optimize: bool


_PROFILE_PRESETS: dict[TargetConfiguration, BuildProfile] = {
    TargetConfiguration.DEBUG: BuildProfile(
        configuration=TargetConfiguration.DEBUG,
        definitions=(
            "UE_BUILD_DEBUG=1",
            "UE_BUILD_DEVELOPMENT=0",
            "UE_BUILD_SHIPPING=0",
            "DO_CHECK=1",
        ),
        check_enabled=True,
        debug_info=True,
        optimize=False,
    ),
    TargetConfiguration.DEVELOPMENT: BuildProfile(
        configuration=TargetConfiguration.DEVELOPMENT,
        definitions=(
            "UE_BUILD_DEBUG=0",
            "UE_BUILD_DEVELOPMENT=1",
            "UE_BUILD_SHIPPING=0",
            "DO_CHECK=1",
        ),
        check_enabled=True,
        debug_info=True,
        optimize=True,
    ),
    TargetConfiguration.SHIPPING: BuildProfile(
        configuration=TargetConfiguration.SHIPPING,
        definitions=(
            "UE_BUILD_DEBUG=0",
            "UE_BUILD_DEVELOPMENT=0",
            "UE_BUILD_SHIPPING=1",
            "DO_CHECK=0",
        ),
        check_enabled=False,
        debug_info=False,
        optimize=True,
    ),
}


def resolve_build_profile(configuration: TargetConfiguration) -> BuildProfile:
    """Return full build profile defaults for one configuration."""
    return _PROFILE_PRESETS[TargetConfiguration(configuration)]


__all__ = ["BuildProfile", "resolve_build_profile"]
