# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""``vscgen generate``: write tasks.json and launch.json beside a solution."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

import typer

from ...config_loader import config_sources, describe_sources, load_config
from ...errors import VscgenError
from ...generator import VSCodeGenerator
from ...solution.parser import validate_solution_path
from ..options import COLOR_OPTION, CONFIG_OPTION, DEBUG_OPTION, EMOJI_OPTION, KEEP_OPTION, SOLUTION_ARGUMENT, YES_OPTION
from ..shared import CLIError, build_cli_logger


def _confirmation(*, yes: bool, keep: bool) -> Callable[[str], bool]:
    if yes and keep:
        raise CLIError("--yes and --keep cannot be combined.", exit_code=2)
    if yes:
        return lambda _prompt: True
    if keep:
        return lambda _prompt: False
    return lambda prompt: typer.confirm(prompt, default=False)


def generate_command(
    solution: SOLUTION_ARGUMENT,
    config: CONFIG_OPTION = None,
    yes: YES_OPTION = False,
    keep: KEEP_OPTION = False,
    emoji: EMOJI_OPTION = True,
    no_color: COLOR_OPTION = False,
    debug: DEBUG_OPTION = False,
) -> None:
    """Generate VS Code build and launch configuration for SOLUTION."""

    logger = build_cli_logger(emoji=emoji, debug=debug, no_color=no_color)
    try:
        confirm = _confirmation(yes=yes, keep=keep)
        solution_path = validate_solution_path(solution)
        settings = load_config(solution_path.parent, explicit=config)
        sources = describe_sources(config_sources(solution_path.parent, config))
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    except VscgenError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc

    logger.debug(f"config={sources!r}")
    generator = VSCodeGenerator(settings, log=logger.info)
    if generator.installation is None:
        logger.warn("MSBuild was not found; generated tasks have an empty command.")
    else:
        logger.debug(f"toolchain={generator.installation.version_label} command={generator.executable_path}")

    try:
        result = asyncio.run(generator.generate_all(solution_path, confirm))
    except OSError as exc:
        logger.fail(f"Could not write VS Code configuration: {exc}")
        raise typer.Exit(code=1) from exc

    logger.ok(f"Wrote {result.tasks_path}")
    if result.launch_path is not None:
        logger.ok(f"Wrote {result.launch_path}")
    else:
        logger.warn("No executable projects; launch.json was not written.")


def register(app: typer.Typer) -> None:
    """Register the generate command with ``app``."""

    app.command(name="generate")(generate_command)


__all__ = ["generate_command", "register"]
