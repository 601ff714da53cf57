from __future__ import annotations

import pytest

from buildrules.api.directives import (
    ConditionalDirective,
    DirectiveEffect,
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
from buildrules.api.target import TargetDescriptor, TargetPlatform, WindowsCompiler


def _target(platform: TargetPlatform, **kwargs) -> TargetDescriptor:
    return TargetDescriptor(platform=platform, **kwargs)


def test_platform_and_compiler_predicates() -> None:
    windows = platform_in(TargetPlatform.WIN64, TargetPlatform.WIN32)
    vs2015 = compiler_is(WindowsCompiler.VISUAL_STUDIO_2015)
    assert windows(_target(TargetPlatform.WIN32)) is True
    assert windows(_target(TargetPlatform.LINUX)) is False
    assert vs2015(_target(TargetPlatform.WIN64, compiler=WindowsCompiler.VISUAL_STUDIO_2015)) is True
    assert vs2015(_target(TargetPlatform.WIN64)) is False


def test_composite_predicates() -> None:
    lean = lean_and_mean_is(True)
    mac_or_linux = any_of(platform_in(TargetPlatform.MAC), platform_in(TargetPlatform.LINUX))
    combined = all_of(mac_or_linux, negate(lean))
    assert combined(_target(TargetPlatform.MAC)) is True
    assert combined(_target(TargetPlatform.MAC, lean_and_mean=True)) is False
    assert combined(_target(TargetPlatform.IOS)) is False
    assert all_of()(_target(TargetPlatform.IOS)) is True
    assert any_of()(_target(TargetPlatform.IOS)) is False


def test_predicates_satisfy_protocol_and_describe() -> None:
    predicate = all_of(platform_in(TargetPlatform.WIN64), lean_and_mean_is(False))
    assert isinstance(predicate, TargetPredicate)
    assert predicate.describe() == "(platform in (Win64)) and (lean_and_mean == False)"
    assert negate(compiler_is(WindowsCompiler.DEFAULT)).describe() == "not (compiler == Default)"


def test_platform_in_requires_platforms() -> None:
    with pytest.raises(ValueError):
        platform_in()


def test_effect_factories_and_validation() -> None:
    assert add_library("a.lib") == DirectiveEffect(kind="library", value="a.lib")
    assert add_definition("WITH_X=0").kind == "definition"
    assert add_third_party_dependency("Kiss_FFT").kind == "third_party"
    with pytest.raises(ValueError):
        DirectiveEffect(kind="linker_flag", value="x")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        add_library("  ")


def test_conditional_directive_selects_branch() -> None:
    directive = ConditionalDirective(
        when=platform_in(TargetPlatform.LINUX),
        effects=(add_definition("ON_LINUX=1"),),
        otherwise=(add_definition("ON_LINUX=0"),),
    )
    assert directive.select(_target(TargetPlatform.LINUX)) == (add_definition("ON_LINUX=1"),)
    assert directive.select(_target(TargetPlatform.MAC)) == (add_definition("ON_LINUX=0"),)


def test_conditional_directive_evaluate_reports_outcome() -> None:
    directive = ConditionalDirective(
        when=platform_in(TargetPlatform.LINUX),
        effects=(add_library("libdl.so"),),
    )
    outcome = directive.evaluate(_target(TargetPlatform.MAC))
    assert outcome.fired is False
    assert outcome.applied == ()
    assert outcome.to_payload() == {"when": "platform in (Linux)", "fired": False, "effects": []}
    fired = directive.evaluate(_target(TargetPlatform.LINUX)).to_payload()
    assert fired["effects"] == [{"kind": "library", "value": "libdl.so"}]
