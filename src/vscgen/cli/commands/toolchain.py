# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""``vscgen toolchain``: report the MSBuild installation that would be used."""

from __future__ import annotations

from pathlib import Path

import typer

from ...config_loader import load_config
from ...errors import VscgenError
from ...toolchain.locator import ToolchainLocator
from ..options import COLOR_OPTION, CONFIG_OPTION, DEBUG_OPTION, EMOJI_OPTION
from ..rendering import build_toolchain_table
from ..shared import build_cli_logger


def toolchain_command(
    config: CONFIG_OPTION = None,
    emoji: EMOJI_OPTION = True,
    no_color: COLOR_OPTION = False,
    debug: DEBUG_OPTION = False,
) -> None:
    """Locate MSBuild and print the installation details."""

    logger = build_cli_logger(emoji=emoji, debug=debug, no_color=no_color)
    try:
        settings = load_config(Path.cwd(), explicit=config)
    except VscgenError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc

    installation = ToolchainLocator(settings.toolchain, log=logger.debug).resolve()
    if installation is None:
        logger.warn("MSBuild could not be located.")
        raise typer.Exit(code=1)
    logger.console.print(build_toolchain_table(installation))
    logger.ok(f"Using {installation.version_label}")


def register(app: typer.Typer) -> None:
    """Register the toolchain command with ``app``."""

    app.command(name="toolchain")(toolchain_command)


__all__ = ["register", "toolchain_command"]
