from __future__ import annotations

from pathlib import Path

from result import is_err, is_ok

from openfolder.host import (
    StaticProject,
    StaticProjectItem,
    StaticSelectedItem,
    StaticSolution,
    static_properties,
)
from openfolder.resolution import (
    SelectedProject,
    SelectedProjectItem,
    SelectedSolution,
    active_configuration_bag,
    resolve_entity_output_path,
    resolve_entity_path,
    selected_entities,
)


def _project(properties: dict[str, object], active_configuration: dict[str, object] | None = None) -> StaticProject:
    return StaticProject(
        properties=static_properties(properties),
        active_configuration=static_properties(active_configuration),
    )


def test_selected_entities_skips_empty_entries() -> None:
    project = _project({"FullProjectFileName": "/proj/app.proj"})
    item = StaticProjectItem(properties=static_properties({"FullPath": "/proj/main.c"}))

    entities = list(
        selected_entities(
            [
                StaticSelectedItem(project=project),
                StaticSelectedItem(),
                StaticSelectedItem(project_item=item),
            ]
        )
    )

    assert entities == [SelectedProject(project), SelectedProjectItem(item)]


def test_selected_entities_prefers_project_over_item() -> None:
    project = _project({"FullProjectFileName": "/proj/app.proj"})
    item = StaticProjectItem(properties=static_properties({"FullPath": "/proj/main.c"}))

    entities = list(selected_entities([StaticSelectedItem(project=project, project_item=item)]))

    assert entities == [SelectedProject(project)]


def test_resolve_entity_path_dispatches_by_kind(tmp_path: Path) -> None:
    solution = SelectedSolution(StaticSolution(full_name=str(tmp_path / "app.sln")))
    project = SelectedProject(_project({"FullProjectFileName": "/proj/app.proj"}))
    item = SelectedProjectItem(StaticProjectItem(properties=static_properties({"FullPath": "/proj/main.c"})))

    assert resolve_entity_path(solution).unwrap() == tmp_path / "app.sln"
    assert resolve_entity_path(project).unwrap() == Path("/proj/app.proj")
    assert resolve_entity_path(item).unwrap() == Path("/proj/main.c")


def test_resolve_entity_path_for_project_without_properties() -> None:
    assert is_err(resolve_entity_path(SelectedProject(StaticProject())))


def test_output_path_uses_active_configuration() -> None:
    project = _project(
        {"FullProjectFileName": "/proj/app.proj"},
        {"PrimaryOutput": "bin/out.bin"},
    )

    result = resolve_entity_output_path(SelectedProject(project))

    assert result.unwrap() == Path("/proj/bin/out.bin")


def test_output_path_falls_back_to_nested_active_configuration() -> None:
    project = _project(
        {
            "FullProjectFileName": "/proj/app.proj",
            "ActiveConfiguration": {"OutputPath": "/build/"},
            "OutputFileName": "app.dll",
        }
    )

    result = resolve_entity_output_path(SelectedProject(project))

    assert result.unwrap() == Path("/build/app.dll")


def test_output_path_not_found_without_active_configuration() -> None:
    project = _project({"FullProjectFileName": "/proj/app.proj"})

    result = resolve_entity_output_path(SelectedProject(project))

    assert is_err(result)
    assert result.unwrap_err().context == "configuration"


def test_output_path_not_found_for_items() -> None:
    item = SelectedProjectItem(StaticProjectItem(properties=static_properties({"FullPath": "/proj/main.c"})))

    assert is_err(resolve_entity_output_path(item))


def test_active_configuration_prefers_host_configuration() -> None:
    project = _project(
        {"ActiveConfiguration": {"PrimaryOutput": "/nested.dll"}},
        {"PrimaryOutput": "/direct.dll"},
    )

    result = active_configuration_bag(project)

    assert is_ok(result)
    assert result.unwrap()["PrimaryOutput"] == "/direct.dll"
