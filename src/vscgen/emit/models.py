# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pydantic models for the VS Code ``tasks.json`` and ``launch.json`` documents.

Field declaration order is the key order of the written JSON, so the models
double as the output schema.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TASKS_SCHEMA_VERSION = "2.0.0"
LAUNCH_SCHEMA_VERSION = "0.2.0"
PROBLEM_MATCHER = "$msCompile"


class _Document(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_payload(self) -> dict[str, object]:
        """Return the JSON-ready mapping using VS Code's camelCase keys."""

        return dict(self.model_dump(mode="json", by_alias=True, exclude_none=True))


class TaskGroup(_Document):
    kind: Literal["build"] = "build"
    is_default: bool = Field(alias="isDefault")


class TaskPresentation(_Document):
    """Terminal panel behaviour shared by every generated task."""

    echo: bool = True
    reveal: Literal["always", "silent", "never"] = "always"
    focus: bool = False
    panel: Literal["shared", "dedicated", "new"] = "shared"
    show_reuse_message: bool = Field(default=True, alias="showReuseMessage")
    clear: bool = False


class TaskDescriptor(_Document):
    """One MSBuild invocation exposed as a VS Code shell task."""

    label: str
    type: Literal["shell"] = "shell"
    command: str
    args: tuple[str, ...]
    group: TaskGroup
    presentation: TaskPresentation = Field(default_factory=TaskPresentation)
    problem_matcher: str = Field(default=PROBLEM_MATCHER, alias="problemMatcher")
    detail: str


class TasksDocument(_Document):
    version: str = TASKS_SCHEMA_VERSION
    tasks: tuple[TaskDescriptor, ...]


class LaunchDescriptor(_Document):
    """Debugger configuration for one executable project."""

    name: str
    type: str
    request: Literal["launch"] = "launch"
    pre_launch_task: str = Field(alias="preLaunchTask")
    program: str
    args: tuple[str, ...] = ()
    cwd: str
    console: Literal["internalConsole", "integratedTerminal", "externalTerminal"] = "internalConsole"
    stop_at_entry: bool = Field(default=False, alias="stopAtEntry")


class CompoundDescriptor(_Document):
    name: str
    configurations: tuple[str, ...]


class LaunchDocument(_Document):
    version: str = LAUNCH_SCHEMA_VERSION
    configurations: tuple[LaunchDescriptor, ...]
    compounds: tuple[CompoundDescriptor, ...] | None = None


__all__ = [
    "CompoundDescriptor",
    "LAUNCH_SCHEMA_VERSION",
    "LaunchDescriptor",
    "LaunchDocument",
    "PROBLEM_MATCHER",
    "TASKS_SCHEMA_VERSION",
    "TaskDescriptor",
    "TaskGroup",
    "TaskPresentation",
    "TasksDocument",
]
