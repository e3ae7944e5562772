# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""``vscgen projects``: list the projects a solution declares."""

from __future__ import annotations

import typer

from ...config_loader import load_config
from ...errors import VscgenError
from ...generator import VSCodeGenerator
from ...solution.parser import validate_solution_path
from ..options import COLOR_OPTION, CONFIG_OPTION, EMOJI_OPTION, SOLUTION_ARGUMENT
from ..rendering import build_projects_table
from ..shared import build_cli_logger


def projects_command(
    solution: SOLUTION_ARGUMENT,
    config: CONFIG_OPTION = None,
    emoji: EMOJI_OPTION = True,
    no_color: COLOR_OPTION = False,
) -> None:
    """Show the projects of SOLUTION and which of them can be launched."""

    logger = build_cli_logger(emoji=emoji, no_color=no_color)
    try:
        solution_path = validate_solution_path(solution)
        settings = load_config(solution_path.parent, explicit=config)
    except VscgenError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc

    generator = VSCodeGenerator(settings, log=logger.debug)
    projects = generator.parser.get_projects(solution_path)
    if not projects:
        logger.warn(f"No projects found in {solution_path.name}.")
        return
    launchable = {project.reference.absolute_path: project for project in generator.launchable_projects(solution_path)}
    logger.console.print(build_projects_table(projects, launchable, root=solution_path.parent))
    logger.ok(f"{len(projects)} project(s), {len(launchable)} launchable.")


def register(app: typer.Typer) -> None:
    """Register the projects command with ``app``."""

    app.command(name="projects")(projects_command)


__all__ = ["projects_command", "register"]
