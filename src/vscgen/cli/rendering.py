# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rich tables for the ``projects`` and ``toolchain`` commands."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path

from rich import box
from rich.table import Table

from ..projects.classifier import LaunchableProject
from ..solution.models import ProjectReference
from ..toolchain.models import ToolchainInstallation


def _display_path(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)


def build_projects_table(
    projects: Sequence[ProjectReference],
    launchable: Mapping[Path, LaunchableProject],
    *,
    root: Path,
) -> Table:
    """Return a table listing the solution's projects in declaration order.

    Args:
        projects: Projects declared by the solution.
        launchable: Launch metadata keyed by project path.
        root: Solution directory used to shorten paths.

    Returns:
        Table: Rich table ready for rendering.
    """

    table = Table(title="Projects", box=box.SIMPLE, expand=False)
    table.add_column("Project", style="bold")
    table.add_column("Launchable")
    table.add_column("Framework")
    table.add_column("Runtime")
    table.add_column("Path", overflow="fold")
    for project in projects:
        details = launchable.get(project.absolute_path)
        table.add_row(
            project.name,
            "yes" if details else "no",
            (details.target_framework or "-") if details else "-",
            details.runtime_kind.value if details else "-",
            _display_path(project.absolute_path, root),
        )
    return table


def build_toolchain_table(installation: ToolchainInstallation) -> Table:
    """Return a two-column table describing ``installation``."""

    table = Table(title="MSBuild", box=box.SIMPLE, expand=False)
    table.add_column("Field", style="bold")
    table.add_column("Value", overflow="fold")
    table.add_row("Version", installation.version_label)
    table.add_row("Discovered via", installation.discovery_tier.value)
    table.add_row("Install root", str(installation.root_path))
    table.add_row("Executable", str(installation.executable_path))
    for key, value in sorted(installation.environment.items()):
        table.add_row(key, value)
    return table


__all__ = ["build_projects_table", "build_toolchain_table"]
