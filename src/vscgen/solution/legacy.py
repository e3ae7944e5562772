# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reader for the line-oriented ``.sln`` solution format."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Final

from ..logging import LogSink
from .models import ProjectReference, SolutionGraph, absolute_project_path

# Project("{TYPE-GUID}") = "Name", "Path\To\Project.csproj", "{PROJECT-GUID}"
PROJECT_LINE: Final[re.Pattern[str]] = re.compile(
    r'^\s*Project\(\s*"\{(?P<type>[^}]+)\}"\s*\)\s*=\s*'
    r'"(?P<name>[^"]*)"\s*,\s*"(?P<path>[^"]*)"\s*,\s*"\{(?P<guid>[^}]+)\}"',
    re.MULTILINE,
)

SOLUTION_FOLDER_GUID: Final[str] = "2150E333-8FDC-42A3-9474-1A3956D46DE8"
SHARED_PROJECT_SUFFIX: Final[str] = ".shproj"


class SolutionEntryKind(str, Enum):
    """Classification of a ``Project(...)`` entry in a legacy solution."""

    MSBUILD_PROJECT = "msbuild_project"
    SOLUTION_FOLDER = "solution_folder"
    SHARED_PROJECT = "shared_project"
    UNKNOWN = "unknown"


@dataclass(slots=True, frozen=True)
class SolutionEntry:
    """Raw ``Project(...)`` declaration."""

    type_guid: str
    name: str
    path: str
    project_guid: str

    @property
    def kind(self) -> SolutionEntryKind:
        if self.type_guid.upper() == SOLUTION_FOLDER_GUID:
            return SolutionEntryKind.SOLUTION_FOLDER
        suffix = PurePosixPath(self.path.replace("\\", "/")).suffix.lower()
        if suffix == SHARED_PROJECT_SUFFIX:
            return SolutionEntryKind.SHARED_PROJECT
        if suffix.endswith("proj"):
            return SolutionEntryKind.MSBUILD_PROJECT
        return SolutionEntryKind.UNKNOWN


def iter_entries(content: str) -> list[SolutionEntry]:
    """Return every ``Project(...)`` declaration in ``content`` in file order."""

    return [
        SolutionEntry(
            type_guid=match.group("type").upper(),
            name=match.group("name"),
            path=match.group("path"),
            project_guid=match.group("guid").upper(),
        )
        for match in PROJECT_LINE.finditer(content)
    ]


def read_sln(solution_path: Path, *, log: LogSink) -> SolutionGraph:
    """Return the MSBuild projects of a legacy solution, skipping folders and items."""

    try:
        content = solution_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        log(f"Failed to parse {solution_path.name}: {exc}")
        return ()

    solution_dir = solution_path.absolute().parent
    return tuple(
        ProjectReference(name=entry.name, absolute_path=absolute_project_path(solution_dir, entry.path))
        for entry in iter_entries(content)
        if entry.kind is SolutionEntryKind.MSBUILD_PROJECT
    )


__all__ = [
    "PROJECT_LINE",
    "SOLUTION_FOLDER_GUID",
    "SolutionEntry",
    "SolutionEntryKind",
    "iter_entries",
    "read_sln",
]
