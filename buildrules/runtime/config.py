"""Centralized build-rules configuration sourced from environment."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping, TypeVar

from buildrules.api.logging import LoggingConfig
from buildrules.api.target import (
    TargetConfiguration,
    TargetDescriptor,
    TargetPlatform,
    WindowsCompiler,
    parse_compiler,
    parse_configuration,
    parse_platform,
)
from buildrules.runtime.errors import log_recoverable

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


@dataclass(frozen=True, slots=True)
class BuildRulesConfig:
    """Immutable configuration for one resolution run."""

    target: TargetDescriptor
    strict_validation: bool
    logging: LoggingConfig


_BUILD_CONFIG: ContextVar[BuildRulesConfig | None] = ContextVar("buildrules_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _parsed(
    name: str,
    parser: Callable[[str], _T],
    default: _T,
    *,
    env: Mapping[str, str] | None = None,
) -> _T:
    raw = _raw(name, env=env)
    if raw is None or not raw.strip():
        return default
    try:
        return parser(raw)
    except ValueError:
        log_recoverable(logger, f"ignoring invalid {name}={raw!r}", level=logging.WARNING)
        return default


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("BUILDRULES_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = default
    return value.strip().upper()


def load_logging_config(*, env: Mapping[str, str] | None = None) -> LoggingConfig:
    """Logging settings only; reading them never logs."""
    log_format = _text("BUILDRULES_LOG_FORMAT", "text", env=env).lower()
    return LoggingConfig(
        level_name=resolve_log_level_name(env=env),
        console_format=log_format if log_format in {"text", "json"} else "text",
        file_path=_text("BUILDRULES_LOG_FILE", "", env=env) or None,
    )


def load_build_config(*, env: Mapping[str, str] | None = None) -> BuildRulesConfig:
    target = TargetDescriptor(
        platform=_parsed("BUILDRULES_TARGET_PLATFORM", parse_platform, TargetPlatform.WIN64, env=env),
        compiler=_parsed("BUILDRULES_COMPILER", parse_compiler, WindowsCompiler.DEFAULT, env=env),
        lean_and_mean=_flag("BUILDRULES_LEAN_AND_MEAN", False, env=env),
        configuration=_parsed(
            "BUILDRULES_CONFIGURATION",
            parse_configuration,
            TargetConfiguration.DEVELOPMENT,
            env=env,
        ),
    )
    return BuildRulesConfig(
        target=target,
        strict_validation=_flag("BUILDRULES_STRICT_VALIDATION", True, env=env),
        logging=load_logging_config(env=env),
    )


def initialize_build_config(*, env: Mapping[str, str] | None = None) -> BuildRulesConfig:
    config = load_build_config(env=env)
    _BUILD_CONFIG.set(config)
    return config


def set_build_config(config: BuildRulesConfig) -> BuildRulesConfig:
    _BUILD_CONFIG.set(config)
    return config


def get_build_config() -> BuildRulesConfig:
    config = _BUILD_CONFIG.get()
    if config is not None:
        return config
    return initialize_build_config()


__all__ = [
    "BuildRulesConfig",
    "get_build_config",
    "initialize_build_config",
    "load_build_config",
    "load_logging_config",
    "resolve_log_level_name",
    "set_build_config",
]
