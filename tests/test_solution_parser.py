# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for reading ``.sln`` and ``.slnx`` solutions."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from subprocess import CompletedProcess

import pytest

from builders import FOLDER_GUID, sln_entry, write_sln
from vscgen.config import SolutionConfig
from vscgen.errors import SolutionNotFoundError, UnsupportedSolutionError
from vscgen.solution import migrate
from vscgen.solution.legacy import SolutionEntryKind, iter_entries
from vscgen.solution.migrate import CommandSolutionConverter, expand_command
from vscgen.solution.parser import SolutionParser, validate_solution_path


def _parser(converter: Callable[[Path], bool] | None = None, messages: list[str] | None = None) -> SolutionParser:
    sink = messages.append if messages is not None else (lambda _message: None)
    return SolutionParser(log=sink, converter=converter or (lambda _path: False))


def test_slnx_projects_in_declaration_order(tmp_path: Path, write_slnx: Callable[..., Path]) -> None:
    solution = write_slnx(["src\\App\\App.csproj", "lib/Lib.csproj"])

    projects = _parser().get_projects(solution)

    assert [project.name for project in projects] == ["App", "Lib"]
    assert projects[0].absolute_path == tmp_path / "src" / "App" / "App.csproj"
    assert projects[1].absolute_path == tmp_path / "lib" / "Lib.csproj"


def test_slnx_includes_projects_nested_in_folders(tmp_path: Path) -> None:
    solution = tmp_path / "Nested.slnx"
    solution.write_text(
        '<Solution>\n  <Folder Name="/tools/">\n    <Project Path="tools/Tool.csproj" />\n  </Folder>\n'
        '  <Project Path="App.csproj" />\n  <Project />\n</Solution>\n',
        encoding="utf-8",
    )

    projects = _parser().get_projects(solution)

    assert [project.name for project in projects] == ["Tool", "App"]


def test_slnx_parse_failure_logs_and_returns_empty(tmp_path: Path) -> None:
    solution = tmp_path / "Broken.slnx"
    solution.write_text("<Solution><Project", encoding="utf-8")
    messages: list[str] = []

    assert _parser(messages=messages).get_projects(solution) == ()
    assert messages and "Broken.slnx" in messages[0]


def test_sln_skips_solution_folders_and_non_project_items(tmp_path: Path) -> None:
    entries = (
        sln_entry("App", "App\\App.csproj")
        + sln_entry("Solution Items", "Solution Items", type_guid=FOLDER_GUID)
        + sln_entry("Shared", "Shared\\Shared.shproj")
        + sln_entry("Site", "Site\\")
        + sln_entry("Tests", "tests\\Tests.fsproj")
    )
    solution = write_sln(tmp_path, entries)

    projects = _parser().get_projects(solution)

    assert [project.name for project in projects] == ["App", "Tests"]
    assert projects[0].absolute_path == tmp_path / "App" / "App.csproj"


def test_sln_entry_kinds() -> None:
    content = sln_entry("Folder", "Folder", type_guid=FOLDER_GUID.lower()) + sln_entry("Lib", "Lib.vbproj")

    kinds = [entry.kind for entry in iter_entries(content)]

    assert kinds == [SolutionEntryKind.SOLUTION_FOLDER, SolutionEntryKind.MSBUILD_PROJECT]


def test_existing_slnx_sibling_is_preferred_without_conversion(tmp_path: Path) -> None:
    solution = write_sln(tmp_path, sln_entry("Old", "Old.csproj"))
    (tmp_path / "Legacy.slnx").write_text('<Solution><Project Path="New.csproj" /></Solution>', encoding="utf-8")
    calls: list[Path] = []

    def converter(path: Path) -> bool:
        calls.append(path)
        return True

    projects = _parser(converter).get_projects(solution)

    assert [project.name for project in projects] == ["New"]
    assert calls == []


def test_successful_conversion_reads_generated_slnx(tmp_path: Path) -> None:
    solution = write_sln(tmp_path, sln_entry("Old", "Old.csproj"))

    def converter(path: Path) -> bool:
        path.with_suffix(".slnx").write_text('<Solution><Project Path="Migrated.csproj" /></Solution>', encoding="utf-8")
        return True

    projects = _parser(converter).get_projects(solution)

    assert [project.name for project in projects] == ["Migrated"]


def test_failed_conversion_falls_back_to_sln(tmp_path: Path) -> None:
    solution = write_sln(tmp_path, sln_entry("Old", "Old.csproj"))

    projects = _parser(lambda _path: False).get_projects(solution)

    assert [project.name for project in projects] == ["Old"]


def test_conversion_can_be_disabled(tmp_path: Path) -> None:
    solution = write_sln(tmp_path, sln_entry("Old", "Old.csproj"))
    calls: list[Path] = []

    parser = SolutionParser(
        SolutionConfig(convert_legacy=False),
        log=lambda _message: None,
        converter=lambda path: calls.append(path) is None,
    )

    assert [project.name for project in parser.get_projects(solution)] == ["Old"]
    assert calls == []


def test_expand_command_substitutes_solution_name() -> None:
    assert expand_command(("dotnet", "sln", "{solution}", "migrate"), Path("/x/App.sln")) == [
        "dotnet",
        "sln",
        "App.sln",
        "migrate",
    ]


def test_command_converter_runs_in_solution_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_run(args: list[str], **kwargs: object) -> CompletedProcess[str]:
        captured["args"] = args
        captured.update(kwargs)
        return CompletedProcess(args, 0, stdout="", stderr="")

    monkeypatch.setattr(migrate, "run_command", fake_run)
    converter = CommandSolutionConverter(
        ("dotnet", "sln", "{solution}", "migrate"),
        log=lambda _message: None,
        environment={"VSINSTALLDIR": "/vs"},
    )

    assert converter(tmp_path / "App.sln") is True
    assert captured["args"] == ["dotnet", "sln", "App.sln", "migrate"]
    assert captured["cwd"] == tmp_path
    assert captured["discard_stdin"] is True
    env = captured["env"]
    assert isinstance(env, dict)
    assert env["VSINSTALLDIR"] == "/vs"


def test_command_converter_logs_non_zero_exit(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    messages: list[str] = []
    monkeypatch.setattr(
        migrate,
        "run_command",
        lambda args, **_kwargs: CompletedProcess(args, 3, stdout="", stderr="bad solution"),
    )

    converter = CommandSolutionConverter(("dotnet", "sln", "migrate"), log=messages.append)

    assert converter(tmp_path / "App.sln") is False
    assert "exited with code 3" in messages[-1]
    assert "bad solution" in messages[-1]


def test_command_converter_logs_missing_executable(tmp_path: Path) -> None:
    messages: list[str] = []
    converter = CommandSolutionConverter(("vscgen-no-such-tool-xyz", "{solution}"), log=messages.append)

    assert converter(tmp_path / "App.sln") is False
    assert "could not start" in messages[-1]


def test_validate_solution_path(tmp_path: Path) -> None:
    with pytest.raises(SolutionNotFoundError):
        validate_solution_path(tmp_path / "missing.sln")

    other = tmp_path / "notes.txt"
    other.write_text("", encoding="utf-8")
    with pytest.raises(UnsupportedSolutionError):
        validate_solution_path(other)

    solution = tmp_path / "App.SLN"
    solution.write_text("", encoding="utf-8")
    assert validate_solution_path(solution) == solution.absolute()
