"""Report payloads describing a resolved module graph."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, cast

from buildrules.api.module_graph import ModuleGraph
from buildrules.api.target import TargetDescriptor
from buildrules.build_profile import resolve_build_profile
from buildrules.diagnostics.json_codec import dumps_text


def build_report_payload(
    graph: ModuleGraph,
    target: TargetDescriptor,
    *,
    module_names: tuple[str, ...],
) -> dict[str, object]:
    """Return a JSON-ready description of ``module_names`` under ``target``."""
    profile = resolve_build_profile(target.configuration)
    modules: dict[str, object] = {}
    for name in module_names:
        node = graph.get(name)
        environment = graph.build_environment(name)
        modules[name] = {
            "rules": node.to_payload(),
            "directives": [outcome.to_payload() for outcome in node.directive_outcomes],
            "environment": {
                key: list(value) if isinstance(value, tuple) else value
                for key, value in asdict(environment).items()
            },
        }
    return {
        "target": {
            "platform": str(target.platform),
            "compiler": str(target.compiler),
            "configuration": str(target.configuration),
            "lean_and_mean": target.lean_and_mean,
        },
        "profile": {
            "check_enabled": profile.check_enabled,
            "debug_info": profile.debug_info,
            "optimize": profile.optimize,
            "definitions": list(profile.definitions),
        },
        "order": list(graph.execution_order()),
        "modules": modules,
    }


def render_report_json(payload: dict[str, object]) -> str:
    return dumps_text(payload, pretty=True, sort_keys=True)


def render_report_text(payload: dict[str, object]) -> str:
    target = cast(dict[str, Any], payload["target"])
    lines = [
        "target: {platform} {compiler} {configuration}{lean}".format(
            platform=target["platform"],
            compiler=target["compiler"],
            configuration=target["configuration"],
            lean=" lean-and-mean" if target["lean_and_mean"] else "",
        )
    ]
    profile = cast(dict[str, Any], payload["profile"])
    lines.append(
        "profile: checks={checks} debug_info={debug_info} optimize={optimize}".format(
            checks=_on_off(profile["check_enabled"]),
            debug_info=_on_off(profile["debug_info"]),
            optimize=_on_off(profile["optimize"]),
        )
    )
    modules = cast(dict[str, dict[str, Any]], payload["modules"])
    for name, entry in modules.items():
        environment = entry["environment"]
        lines.append(f"module {name}")
        for key in (
            "include_paths",
            "definitions",
            "additional_libraries",
            "link_modules",
            "dynamically_loaded_modules",
        ):
            values = environment[key]
            lines.append(f"  {key}: {', '.join(values) if values else '-'}")
        for directive in entry["directives"]:
            effects = ", ".join(f"{e['kind']} {e['value']}" for e in directive["effects"]) or "-"
            state = "fired" if directive["fired"] else "skipped"
            lines.append(f"  directive {state}: {directive['when']} => {effects}")
    return "\n".join(lines)


def _on_off(value: object) -> str:
    return "on" if value else "off"


__all__ = ["build_report_payload", "render_report_json", "render_report_text"]
