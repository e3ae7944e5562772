# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build ``launch.json`` configurations for executable projects."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path
from typing import Final

from ..projects.classifier import LaunchableProject, OutputLayout
from .labels import COMPOUND_NAME, build_label, launch_name
from .models import CompoundDescriptor, LaunchDescriptor, LaunchDocument
from .tasks import DEBUG_CONFIGURATION

WORKSPACE_FOLDER: Final[str] = "${workspaceFolder}"


def relative_directory(project_dir: Path, solution_dir: Path) -> str:
    """Return ``project_dir`` relative to ``solution_dir`` as ``a/b/`` (``""`` at the root)."""

    try:
        relative = os.path.relpath(project_dir, solution_dir)
    except ValueError:
        # different drive on Windows
        relative = str(project_dir)
    if relative == os.curdir:
        return ""
    return relative.replace("\\", "/").rstrip("/") + "/"


def program_path(project: LaunchableProject, relative_dir: str) -> str:
    """Return the Debug output binary of ``project`` below the workspace folder."""

    base = f"{WORKSPACE_FOLDER}/{relative_dir}bin/{DEBUG_CONFIGURATION}"
    name = project.name
    if project.layout is OutputLayout.PORTABLE:
        return f"{base}/{project.target_framework}/{name}.dll"
    if project.layout is OutputLayout.LEGACY:
        return f"{base}/{name}.exe"
    return f"{base}/{project.target_framework}/{name}.exe"


def build_launch_descriptor(
    project: LaunchableProject,
    *,
    solution_dir: Path,
    solution_name: str,
) -> LaunchDescriptor:
    """Return the debugger configuration for one executable project."""

    relative_dir = relative_directory(project.reference.directory, solution_dir)
    return LaunchDescriptor(
        name=launch_name(project.name),
        type=project.runtime_kind.value,
        pre_launch_task=build_label(solution_name, DEBUG_CONFIGURATION),
        program=program_path(project, relative_dir),
        cwd=f"{WORKSPACE_FOLDER}/{relative_dir.rstrip('/')}",
    )


def build_launch_document(descriptors: Sequence[LaunchDescriptor]) -> LaunchDocument | None:
    """Wrap ``descriptors`` in a document, adding a compound entry for two or more."""

    if not descriptors:
        return None
    compounds = None
    if len(descriptors) >= 2:
        compounds = (
            CompoundDescriptor(
                name=COMPOUND_NAME,
                configurations=tuple(descriptor.name for descriptor in descriptors),
            ),
        )
    return LaunchDocument(configurations=tuple(descriptors), compounds=compounds)


__all__ = [
    "WORKSPACE_FOLDER",
    "build_launch_descriptor",
    "build_launch_document",
    "program_path",
    "relative_directory",
]
