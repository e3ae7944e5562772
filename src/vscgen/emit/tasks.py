# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build the four MSBuild tasks written to ``tasks.json``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from .labels import build_label, clean_label, rebuild_label, toolchain_text
from .models import TaskDescriptor, TaskGroup, TasksDocument

DEBUG_CONFIGURATION: Final[str] = "Debug"
RELEASE_CONFIGURATION: Final[str] = "Release"


class TaskKind(str, Enum):
    BUILD = "build"
    CLEAN = "clean"
    REBUILD = "rebuild"


@dataclass(slots=True, frozen=True)
class TaskContext:
    """Solution and toolchain facts shared by every task."""

    solution_name: str
    solution_file_name: str
    command: str
    version_label: str | None
    verbosity: str = "normal"

    @property
    def verbosity_flag(self) -> str:
        return f"/verbosity:{self.verbosity}"


def build_task(context: TaskContext, kind: TaskKind, configuration: str | None = None) -> TaskDescriptor:
    """Return the descriptor for one task.

    Args:
        context: Solution and toolchain facts.
        kind: Task flavour.
        configuration: Build configuration; required for :attr:`TaskKind.BUILD`.

    Returns:
        TaskDescriptor: Descriptor invoking MSBuild on the solution file.

    Raises:
        ValueError: If a build task is requested without a configuration.
    """

    toolchain = toolchain_text(context.version_label)
    solution = context.solution_name
    if kind is TaskKind.BUILD:
        if not configuration:
            raise ValueError("build tasks require a configuration")
        label = build_label(solution, configuration)
        flag = f"/p:Configuration={configuration}"
        detail = (
            f"Build the entire {solution} solution in the {configuration} configuration "
            f"using {toolchain} MSBuild"
        )
        is_default = configuration == DEBUG_CONFIGURATION
    elif kind is TaskKind.CLEAN:
        label = clean_label(solution)
        flag = "/t:Clean"
        detail = f"Clean the entire {solution} solution using {toolchain} MSBuild"
        is_default = False
    else:
        label = rebuild_label(solution)
        flag = "/t:Rebuild"
        detail = f"Rebuild the entire {solution} solution using {toolchain} MSBuild"
        is_default = False

    return TaskDescriptor(
        label=label,
        command=context.command,
        args=(context.solution_file_name, flag, context.verbosity_flag),
        group=TaskGroup(is_default=is_default),
        detail=detail,
    )


def build_tasks_document(context: TaskContext) -> TasksDocument:
    """Return Debug build, Release build, clean and rebuild tasks in that order."""

    return TasksDocument(
        tasks=(
            build_task(context, TaskKind.BUILD, DEBUG_CONFIGURATION),
            build_task(context, TaskKind.BUILD, RELEASE_CONFIGURATION),
            build_task(context, TaskKind.CLEAN),
            build_task(context, TaskKind.REBUILD),
        )
    )


__all__ = [
    "DEBUG_CONFIGURATION",
    "RELEASE_CONFIGURATION",
    "TaskContext",
    "TaskKind",
    "build_task",
    "build_tasks_document",
]
