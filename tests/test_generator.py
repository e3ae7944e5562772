# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""End-to-end tests for :class:`VSCodeGenerator`."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Callable
from pathlib import Path

import pytest

from builders import ProjectWriter
from vscgen.config import GeneratorConfig, OutputConfig
from vscgen.emit.labels import OVERWRITE_PROMPT
from vscgen.generator import VSCodeGenerator

GeneratorFactory = Callable[..., VSCodeGenerator]


def _solution(write_project: ProjectWriter, write_slnx: Callable[..., Path]) -> Path:
    write_project("App/App.csproj", output_type="Exe", target_framework="net8.0")
    write_project("Lib/Lib.csproj", output_type="Library", target_framework="net8.0")
    return write_slnx(["App/App.csproj", "Lib/Lib.csproj"])


def _read(path: Path) -> dict[str, object]:
    return json.loads(path.read_text(encoding="utf-8"))


def test_generate_all_writes_tasks_and_launch(
    tmp_path: Path,
    write_project: ProjectWriter,
    write_slnx: Callable[..., Path],
    make_generator: GeneratorFactory,
) -> None:
    solution = _solution(write_project, write_slnx)

    result = make_generator().generate_all_sync(solution)

    assert result.output_dir == tmp_path / ".vscode"
    assert result.regenerated is False
    tasks = _read(result.tasks_path)
    assert tasks["version"] == "2.0.0"
    assert result.launch_path is not None
    launch = _read(result.launch_path)
    configurations = launch["configurations"]
    assert isinstance(configurations, list)
    assert [entry["name"] for entry in configurations] == [".NET Launch (App)"]
    assert "compounds" not in launch


def test_tasks_use_resolved_toolchain(
    write_project: ProjectWriter,
    write_slnx: Callable[..., Path],
    make_generator: GeneratorFactory,
) -> None:
    solution = _solution(write_project, write_slnx)
    generator = make_generator()

    result = generator.generate_all_sync(solution)

    tasks = _read(result.tasks_path)["tasks"]
    assert isinstance(tasks, list)
    assert {task["command"] for task in tasks} == {generator.executable_path}
    assert tasks[0]["args"][0] == "Sample.slnx"
    assert "Visual Studio 2022" in tasks[0]["detail"]


def test_missing_toolchain_still_writes_documents(
    write_project: ProjectWriter,
    write_slnx: Callable[..., Path],
    make_generator: GeneratorFactory,
) -> None:
    solution = _solution(write_project, write_slnx)
    generator = make_generator(installation=None)

    result = generator.generate_all_sync(solution)

    assert generator.executable_path == ""
    tasks = _read(result.tasks_path)["tasks"]
    assert isinstance(tasks, list)
    assert {task["command"] for task in tasks} == {""}


def test_generation_is_byte_identical_across_runs(
    write_project: ProjectWriter,
    write_slnx: Callable[..., Path],
    make_generator: GeneratorFactory,
) -> None:
    solution = _solution(write_project, write_slnx)
    generator = make_generator()

    first = generator.generate_all_sync(solution)
    tasks_bytes = first.tasks_path.read_bytes()
    assert first.launch_path is not None
    launch_bytes = first.launch_path.read_bytes()
    second = generator.generate_all_sync(solution, lambda _prompt: False)

    assert second.tasks_path.read_bytes() == tasks_bytes
    assert second.launch_path is not None
    assert second.launch_path.read_bytes() == launch_bytes


def test_multiple_executables_get_compound(
    write_project: ProjectWriter,
    write_slnx: Callable[..., Path],
    make_generator: GeneratorFactory,
) -> None:
    write_project("App1/App1.csproj", output_type="Exe", target_framework="net8.0")
    write_project("App2/App2.csproj", output_type="WinExe", target_framework="net48")
    solution = write_slnx(["App1/App1.csproj", "App2/App2.csproj"])

    result = make_generator().generate_all_sync(solution)

    assert result.launch_path is not None
    launch = _read(result.launch_path)
    configurations = launch["configurations"]
    assert isinstance(configurations, list)
    assert [entry["type"] for entry in configurations] == ["coreclr", "clr"]
    assert launch["compounds"] == [
        {"name": "Launch All", "configurations": [".NET Launch (App1)", ".NET Launch (App2)"]}
    ]


def test_no_executables_skips_launch_and_keeps_existing_file(
    tmp_path: Path,
    write_project: ProjectWriter,
    write_slnx: Callable[..., Path],
    make_generator: GeneratorFactory,
) -> None:
    write_project("Lib/Lib.csproj", output_type="Library", target_framework="net8.0")
    solution = write_slnx(["Lib/Lib.csproj"])
    output_dir = tmp_path / ".vscode"
    output_dir.mkdir()
    stale = output_dir / "launch.json"
    stale.write_text("{}\n", encoding="utf-8")
    messages: list[str] = []

    result = make_generator(log=messages.append).generate_all_sync(solution)

    assert result.launch_path is None
    assert stale.read_text(encoding="utf-8") == "{}\n"
    assert any("launch.json was not generated" in message for message in messages)


def test_confirm_true_recreates_output_directory(
    tmp_path: Path,
    write_project: ProjectWriter,
    write_slnx: Callable[..., Path],
    make_generator: GeneratorFactory,
) -> None:
    solution = _solution(write_project, write_slnx)
    extra = tmp_path / ".vscode" / "settings.json"
    extra.parent.mkdir()
    extra.write_text("{}", encoding="utf-8")
    prompts: list[str] = []

    def confirm(prompt: str) -> bool:
        prompts.append(prompt)
        return True

    result = make_generator().generate_all_sync(solution, confirm)

    assert result.regenerated is True
    assert prompts == [OVERWRITE_PROMPT]
    assert not extra.exists()
    assert result.tasks_path.is_file()


def test_confirm_false_keeps_unrelated_files(
    tmp_path: Path,
    write_project: ProjectWriter,
    write_slnx: Callable[..., Path],
    make_generator: GeneratorFactory,
) -> None:
    solution = _solution(write_project, write_slnx)
    extra = tmp_path / ".vscode" / "settings.json"
    extra.parent.mkdir()
    extra.write_text("{}", encoding="utf-8")

    result = make_generator().generate_all_sync(solution, lambda _prompt: False)

    assert result.regenerated is False
    assert extra.read_text(encoding="utf-8") == "{}"
    assert result.tasks_path.is_file()


def test_async_generation_awaits_confirmation(
    tmp_path: Path,
    write_project: ProjectWriter,
    write_slnx: Callable[..., Path],
    make_generator: GeneratorFactory,
) -> None:
    solution = _solution(write_project, write_slnx)
    (tmp_path / ".vscode").mkdir()
    extra = tmp_path / ".vscode" / "extensions.json"
    extra.write_text("{}", encoding="utf-8")

    async def confirm(_prompt: str) -> bool:
        await asyncio.sleep(0)
        return True

    result = asyncio.run(make_generator().generate_all(solution, confirm))

    assert result.regenerated is True
    assert not extra.exists()


def test_no_prompt_without_existing_directory(
    write_project: ProjectWriter,
    write_slnx: Callable[..., Path],
    make_generator: GeneratorFactory,
) -> None:
    solution = _solution(write_project, write_slnx)
    prompts: list[str] = []

    make_generator().generate_all_sync(solution, lambda prompt: prompts.append(prompt) is None)

    assert prompts == []


def test_unparseable_executable_is_skipped(
    tmp_path: Path,
    write_slnx: Callable[..., Path],
    make_generator: GeneratorFactory,
) -> None:
    solution = write_slnx(["Missing/Missing.csproj"])

    result = make_generator().generate_all_sync(solution)

    assert result.launch_path is None
    assert (tmp_path / ".vscode" / "tasks.json").is_file()


def test_output_settings_are_honoured(
    tmp_path: Path,
    write_project: ProjectWriter,
    write_slnx: Callable[..., Path],
    make_generator: GeneratorFactory,
) -> None:
    solution = _solution(write_project, write_slnx)
    config = GeneratorConfig(output=OutputConfig(directory_name="vscode-out", verbosity="quiet", indent=4))

    result = make_generator(config=config).generate_all_sync(solution)

    assert result.output_dir == tmp_path / "vscode-out"
    text = result.tasks_path.read_text(encoding="utf-8")
    assert '\n    "version": "2.0.0"' in text
    assert "/verbosity:quiet" in text


def test_sync_generation_rejects_async_confirmation(
    tmp_path: Path,
    write_project: ProjectWriter,
    write_slnx: Callable[..., Path],
    make_generator: GeneratorFactory,
) -> None:
    solution = _solution(write_project, write_slnx)
    extra = tmp_path / ".vscode" / "settings.json"
    extra.parent.mkdir()
    extra.write_text("{}", encoding="utf-8")

    async def confirm(_prompt: str) -> bool:
        return True

    with pytest.raises(TypeError):
        make_generator().generate_all_sync(solution, confirm)  # type: ignore[arg-type]

    assert extra.read_text(encoding="utf-8") == "{}"
