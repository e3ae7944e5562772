# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typer parameter declarations shared by the vscgen commands.

Defaults live in the command signatures.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

SOLUTION_ARGUMENT = Annotated[
    Path,
    typer.Argument(
        help="Path to the .sln or .slnx solution file.",
        show_default=False,
    ),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Extra TOML configuration layered over pyproject.toml and .vscgen.toml.",
    ),
]
YES_OPTION = Annotated[
    bool,
    typer.Option(
        "--yes",
        "-y",
        help="Delete an existing .vscode folder and regenerate it without asking.",
    ),
]
KEEP_OPTION = Annotated[
    bool,
    typer.Option(
        "--keep",
        help="Keep an existing .vscode folder and overwrite only the generated files.",
    ),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
COLOR_OPTION = Annotated[
    bool,
    typer.Option("--no-color", help="Disable ANSI colour output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Print toolchain discovery details."),
]

__all__ = [
    "COLOR_OPTION",
    "CONFIG_OPTION",
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "KEEP_OPTION",
    "SOLUTION_ARGUMENT",
    "YES_OPTION",
]
