"""Command-line resolution entrypoint shared by module catalogs."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from buildrules.api.target import (
    TargetConfiguration,
    TargetDescriptor,
    TargetPlatform,
    WindowsCompiler,
    parse_compiler,
    parse_configuration,
    parse_platform,
)
from buildrules.runtime.config import BuildRulesConfig, get_build_config
from buildrules.runtime.errors import RESOLUTION_ERRORS
from buildrules.runtime.registry import ModuleRegistry
from buildrules.runtime.report import build_report_payload, render_report_json, render_report_text

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_RESOLUTION_ERROR = 2


def _platform_arg(raw: str) -> TargetPlatform:
    try:
        return parse_platform(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _compiler_arg(raw: str) -> WindowsCompiler:
    try:
        return parse_compiler(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _configuration_arg(raw: str) -> TargetConfiguration:
    try:
        return parse_configuration(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser(description: str = "Resolve module rules for a build target.") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--platform", type=_platform_arg, default=None)
    parser.add_argument("--compiler", type=_compiler_arg, default=None)
    parser.add_argument("--configuration", type=_configuration_arg, default=None)
    lean = parser.add_mutually_exclusive_group()
    lean.add_argument("--lean-and-mean", dest="lean_and_mean", action="store_true", default=None)
    lean.add_argument("--no-lean-and-mean", dest="lean_and_mean", action="store_false")
    parser.add_argument(
        "--module",
        action="append",
        default=[],
        help="Limit output to this module (repeatable). Defaults to every authored module.",
    )
    parser.add_argument("--format", choices=("text", "json"), default="text")
    return parser


def target_from_args(args: argparse.Namespace, config: BuildRulesConfig) -> TargetDescriptor:
    """Overlay command-line choices on the configured target."""
    base = config.target
    return TargetDescriptor(
        platform=args.platform if args.platform is not None else base.platform,
        compiler=args.compiler if args.compiler is not None else base.compiler,
        lean_and_mean=args.lean_and_mean if args.lean_and_mean is not None else base.lean_and_mean,
        configuration=(
            args.configuration if args.configuration is not None else base.configuration
        ),
    )


def run_resolution(
    registry: ModuleRegistry,
    args: argparse.Namespace,
    *,
    config: BuildRulesConfig | None = None,
    stream: TextIO | None = None,
) -> int:
    """Resolve ``registry`` for the requested target and print the report."""
    active = config if config is not None else get_build_config()
    out = stream if stream is not None else sys.stdout
    target = target_from_args(args, active)
    try:
        graph = registry.resolve(target)
        selected = tuple(args.module) if args.module else registry.module_names()
        payload = build_report_payload(graph, target, module_names=selected)
    except RESOLUTION_ERRORS as exc:
        logger.error("module_resolution_failed target=%s error=%s", target.describe(), exc)
        return EXIT_RESOLUTION_ERROR
    rendered = render_report_json(payload) if args.format == "json" else render_report_text(payload)
    out.write(rendered + "\n")
    return EXIT_OK


__all__ = [
    "EXIT_OK",
    "EXIT_RESOLUTION_ERROR",
    "build_parser",
    "run_resolution",
    "target_from_args",
]
