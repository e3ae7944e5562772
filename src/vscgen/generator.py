# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Generate ``.vscode/tasks.json`` and ``.vscode/launch.json`` for a solution."""

from __future__ import annotations

import inspect
import shutil
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from .config import GeneratorConfig
from .emit.labels import OVERWRITE_PROMPT
from .emit.launch import build_launch_descriptor, build_launch_document
from .emit.models import LaunchDescriptor
from .emit.tasks import TaskContext, build_tasks_document
from .emit.writer import LAUNCH_FILENAME, TASKS_FILENAME, write_json
from .errors import ProjectParseError
from .logging import LogSink, default_sink
from .projects.classifier import LaunchableProject, describe_launchable, is_executable
from .solution.parser import SolutionParser
from .toolchain.locator import ToolchainLocator
from .toolchain.models import ToolchainInstallation

ConfirmOverwrite = Callable[[str], bool | Awaitable[bool]]
ToolchainResolver = Callable[[], ToolchainInstallation | None]


@dataclass(slots=True, frozen=True)
class GenerationResult:
    """Files produced by one :meth:`VSCodeGenerator.generate_all` run."""

    output_dir: Path
    tasks_path: Path
    launch_path: Path | None
    regenerated: bool


class VSCodeGenerator:
    """Convert a Visual Studio solution into VS Code build and launch configuration.

    The MSBuild toolchain is resolved once, when the generator is created, and
    reused for every solution processed by the instance.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        *,
        log: LogSink = default_sink,
        resolve_toolchain: ToolchainResolver | None = None,
        parser: SolutionParser | None = None,
    ) -> None:
        """Create a generator and resolve the toolchain.

        Args:
            config: Generator settings; defaults apply when omitted.
            log: Sink receiving progress and non-fatal failure messages.
            resolve_toolchain: Callable returning the MSBuild installation.
                Defaults to :meth:`ToolchainLocator.resolve`.
            parser: Solution parser override.
        """

        self._config = config or GeneratorConfig()
        self._log = log
        resolver = resolve_toolchain or ToolchainLocator(self._config.toolchain, log=log).resolve
        self._installation = resolver()
        environment = self._installation.environment if self._installation else None
        self._parser = parser or SolutionParser(self._config.solution, log=log, environment=environment)

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def installation(self) -> ToolchainInstallation | None:
        return self._installation

    @property
    def executable_path(self) -> str:
        """Return the MSBuild command, ``""`` when no toolchain was found."""

        return self._installation.command if self._installation else ""

    @property
    def parser(self) -> SolutionParser:
        return self._parser

    def output_directory(self, solution_path: Path) -> Path:
        return solution_path.absolute().parent / self._config.output.directory_name

    def generate_tasks(self, output_dir: Path, solution_name: str, solution_file_name: str) -> Path:
        """Write ``tasks.json`` with the Debug, Release, clean and rebuild tasks.

        Args:
            output_dir: Existing directory receiving the file.
            solution_name: Solution name without extension, used in labels.
            solution_file_name: Solution file name passed to MSBuild.

        Returns:
            Path: Location of the written file.
        """

        context = TaskContext(
            solution_name=solution_name,
            solution_file_name=solution_file_name,
            command=self.executable_path,
            version_label=self._installation.version_label if self._installation else None,
            verbosity=self._config.output.verbosity,
        )
        document = build_tasks_document(context)
        path = write_json(output_dir / TASKS_FILENAME, document, indent=self._config.output.indent)
        self._log(f"Generated tasks.json with {len(document.tasks)} tasks.")
        return path

    def launchable_projects(self, solution_path: Path) -> list[LaunchableProject]:
        """Return executable projects of ``solution_path`` with their launch metadata.

        Projects whose file cannot be parsed are logged and skipped.
        """

        launchable: list[LaunchableProject] = []
        for reference in self._parser.get_projects(solution_path):
            if not is_executable(reference.absolute_path):
                continue
            try:
                launchable.append(describe_launchable(reference))
            except ProjectParseError as exc:
                self._log(f"Skipping launch configuration for {reference.name}: {exc}")
        return launchable

    def generate_launch(self, output_dir: Path, solution_path: Path, solution_name: str) -> Path | None:
        """Write ``launch.json`` for the executable projects of the solution.

        Nothing is written when the solution has no executable project.

        Returns:
            Path | None: Location of the written file, ``None`` when skipped.
        """

        solution_dir = solution_path.absolute().parent
        descriptors: list[LaunchDescriptor] = [
            build_launch_descriptor(project, solution_dir=solution_dir, solution_name=solution_name)
            for project in self.launchable_projects(solution_path)
        ]
        document = build_launch_document(descriptors)
        if document is None:
            self._log("No executable projects found; launch.json was not generated.")
            return None
        path = write_json(output_dir / LAUNCH_FILENAME, document, indent=self._config.output.indent)
        if document.compounds:
            self._log(f"Generated launch.json with {len(descriptors)} configurations and a compound entry.")
        else:
            self._log(f"Generated launch.json for {descriptors[0].name}.")
        return path

    def _prepare_output_directory(self, output_dir: Path, *, regenerate: bool) -> None:
        if output_dir.is_dir():
            if regenerate:
                shutil.rmtree(output_dir)
                self._log(f"Deleted existing {output_dir.name} folder.")
                output_dir.mkdir(parents=True)
                self._log(f"Created new {output_dir.name} folder.")
            else:
                self._log(f"Keeping existing {output_dir.name} folder; generated files are overwritten.")
            return
        output_dir.mkdir(parents=True)
        self._log(f"Created new {output_dir.name} folder.")

    def _emit(self, solution_path: Path, output_dir: Path, *, regenerated: bool) -> GenerationResult:
        tasks_path = self.generate_tasks(output_dir, solution_path.stem, solution_path.name)
        launch_path = self.generate_launch(output_dir, solution_path, solution_path.stem)
        self._log("VS Code configuration generated.")
        return GenerationResult(
            output_dir=output_dir,
            tasks_path=tasks_path,
            launch_path=launch_path,
            regenerated=regenerated,
        )

    async def generate_all(
        self,
        solution_path: Path,
        confirm_overwrite: ConfirmOverwrite | None = None,
    ) -> GenerationResult:
        """Generate both documents under ``<solution dir>/.vscode``.

        When the output directory exists and ``confirm_overwrite`` is given,
        it is awaited with :data:`OVERWRITE_PROMPT`; ``True`` deletes and
        recreates the directory, ``False`` keeps unrelated files. Without a
        callback existing contents are kept.

        Raises:
            OSError: If the output directory cannot be created, deleted or written.
        """

        output_dir = self.output_directory(solution_path)
        regenerate = False
        if output_dir.is_dir() and confirm_overwrite is not None:
            answer = confirm_overwrite(OVERWRITE_PROMPT)
            if inspect.isawaitable(answer):
                answer = await answer
            regenerate = bool(answer)
        self._prepare_output_directory(output_dir, regenerate=regenerate)
        return self._emit(solution_path, output_dir, regenerated=regenerate)

    def generate_all_sync(
        self,
        solution_path: Path,
        confirm_overwrite: Callable[[str], bool] | None = None,
    ) -> GenerationResult:
        """Blocking counterpart of :meth:`generate_all` for synchronous callers.

        Raises:
            TypeError: If ``confirm_overwrite`` returns an awaitable; use
                :meth:`generate_all` for asynchronous callbacks.
            OSError: If the output directory cannot be created, deleted or written.
        """

        output_dir = self.output_directory(solution_path)
        regenerate = False
        if output_dir.is_dir() and confirm_overwrite is not None:
            answer = confirm_overwrite(OVERWRITE_PROMPT)
            if inspect.isawaitable(answer):
                if inspect.iscoroutine(answer):
                    answer.close()
                raise TypeError("generate_all_sync needs a synchronous confirmation callback")
            regenerate = bool(answer)
        self._prepare_output_directory(output_dir, regenerate=regenerate)
        return self._emit(solution_path, output_dir, regenerated=regenerate)


__all__ = ["ConfirmOverwrite", "GenerationResult", "ToolchainResolver", "VSCodeGenerator"]
