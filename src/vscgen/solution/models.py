# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Value types produced while reading solution files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias


@dataclass(slots=True, frozen=True)
class ProjectReference:
    """Project declared by a solution, identified by its absolute path."""

    name: str
    absolute_path: Path

    @property
    def directory(self) -> Path:
        return self.absolute_path.parent


SolutionGraph: TypeAlias = tuple[ProjectReference, ...]


def absolute_project_path(solution_dir: Path, declared: str) -> Path:
    """Join ``declared`` (which may use backslashes) onto ``solution_dir`` and normalise it."""

    relative = declared.strip().replace("\\", "/")
    return Path(os.path.normpath(solution_dir / relative))


__all__ = ["ProjectReference", "SolutionGraph", "absolute_project_path"]
