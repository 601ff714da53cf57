from __future__ import annotations

import pytest

from buildrules.api.module_graph import create_module_graph
from buildrules.api.module_rules import ResolvedModule
from buildrules.runtime.errors import DuplicateModuleError, ModuleCycleError, UnknownModuleError
from buildrules.runtime.module_graph import RuntimeModuleGraph


def _graph() -> RuntimeModuleGraph:
    graph = RuntimeModuleGraph(configuration_definitions=("UE_BUILD_DEVELOPMENT=1",))
    graph.add_node(
        ResolvedModule(
            name="Core",
            kind="engine",
            public_include_paths=("Core/Public",),
            public_additional_libraries=("core_extra.lib",),
        )
    )
    graph.add_node(
        ResolvedModule(
            name="Slate",
            kind="engine",
            public_include_paths=("Slate/Public",),
            public_dependency_module_names=("Core",),
            private_dependency_module_names=("Render",),
        )
    )
    graph.add_node(ResolvedModule(name="Render", kind="engine", public_include_paths=("Render/Public",)))
    graph.add_node(ResolvedModule(name="MainFrame", kind="engine", public_include_paths=("MainFrame/Public",)))
    graph.add_node(
        ResolvedModule(
            name="Editor",
            public_include_paths=("Editor/Public",),
            private_include_paths=("Editor/Private",),
            private_dependency_module_names=("Slate",),
            private_include_path_module_names=("MainFrame",),
            dynamically_loaded_module_names=("MainFrame",),
            public_additional_libraries=("editor.lib",),
            definitions=("WITH_EDITOR_TOOLS=1",),
        )
    )
    return graph


def test_execution_order_is_dependency_first() -> None:
    order = _graph().execution_order()
    assert order.index("Core") < order.index("Slate")
    assert order.index("Render") < order.index("Slate")
    assert order.index("Slate") < order.index("Editor")
    assert set(order) == {"Core", "Slate", "Render", "MainFrame", "Editor"}


def test_link_closure_includes_private_dependencies_of_dependencies() -> None:
    graph = _graph()
    closure = graph.link_closure("Editor")
    assert set(closure) == {"Slate", "Core", "Render"}
    assert closure.index("Core") < closure.index("Slate")
    assert "MainFrame" not in closure


def test_include_paths_propagate_only_public_surface() -> None:
    paths = _graph().public_include_paths_for("Editor")
    assert paths[:2] == ("Editor/Public", "Editor/Private")
    assert set(paths) == {
        "Editor/Public",
        "Editor/Private",
        "Slate/Public",
        "Core/Public",
        "MainFrame/Public",
    }
    assert "Render/Public" not in paths


def test_build_environment_merges_configuration_and_link_inputs() -> None:
    environment = _graph().build_environment("Editor")
    assert environment.module_name == "Editor"
    assert environment.definitions == ("UE_BUILD_DEVELOPMENT=1", "WITH_EDITOR_TOOLS=1")
    assert environment.additional_libraries == ("editor.lib", "core_extra.lib")
    assert environment.dynamically_loaded_modules == ("MainFrame",)
    assert set(environment.link_modules) == {"Slate", "Core", "Render"}


def test_unknown_dependency_is_reported_with_referrer() -> None:
    graph = RuntimeModuleGraph()
    graph.add_node(ResolvedModule(name="Editor", private_dependency_module_names=("Missing",)))
    with pytest.raises(UnknownModuleError) as excinfo:
        graph.execution_order()
    assert excinfo.value.module_name == "Missing"
    assert excinfo.value.referenced_by == "Editor"
    assert isinstance(excinfo.value, KeyError)


def test_unknown_dynamically_loaded_module_is_reported() -> None:
    graph = RuntimeModuleGraph()
    graph.add_node(ResolvedModule(name="Editor", dynamically_loaded_module_names=("Plugins",)))
    with pytest.raises(KeyError):
        graph.execution_order()


def test_cycle_detection_names_members() -> None:
    graph = RuntimeModuleGraph()
    graph.add_node(ResolvedModule(name="A", public_dependency_module_names=("B",)))
    graph.add_node(ResolvedModule(name="B", private_dependency_module_names=("C",)))
    graph.add_node(ResolvedModule(name="C", private_dependency_module_names=("A",)))
    graph.add_node(ResolvedModule(name="D", private_dependency_module_names=("A",)))
    with pytest.raises(ModuleCycleError) as excinfo:
        graph.execution_order()
    assert excinfo.value.cycles == (("A", "B", "C"),)
    assert excinfo.value.members == ("A", "B", "C")
    assert isinstance(excinfo.value, ValueError)


def test_self_loop_is_a_cycle() -> None:
    graph = RuntimeModuleGraph()
    graph.add_node(ResolvedModule(name="A", private_dependency_module_names=("A",)))
    with pytest.raises(ModuleCycleError) as excinfo:
        graph.execution_order()
    assert excinfo.value.cycles == (("A",),)


def test_dynamic_references_do_not_create_cycles() -> None:
    graph = RuntimeModuleGraph()
    graph.add_node(ResolvedModule(name="A", dynamically_loaded_module_names=("B",)))
    graph.add_node(ResolvedModule(name="B", private_dependency_module_names=("A",)))
    assert graph.execution_order() == ("A", "B")


def test_rejects_duplicate_and_empty_names() -> None:
    graph = RuntimeModuleGraph()
    graph.add_node(ResolvedModule(name="Core"))
    with pytest.raises(DuplicateModuleError):
        graph.add_node(ResolvedModule(name="Core"))
    with pytest.raises(ValueError):
        graph.add_node(ResolvedModule(name=" "))


def test_get_unknown_module_raises() -> None:
    with pytest.raises(UnknownModuleError):
        _graph().get("Nope")


def test_add_node_invalidates_cached_order() -> None:
    graph = RuntimeModuleGraph()
    graph.add_node(ResolvedModule(name="B"))
    assert graph.execution_order() == ("B",)
    graph.add_node(ResolvedModule(name="A"))
    assert graph.execution_order() == ("A", "B")


def test_create_module_graph_returns_runtime_graph() -> None:
    graph = create_module_graph(configuration_definitions=("X=1",))
    assert isinstance(graph, RuntimeModuleGraph)
