# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

import typer

from .commands import register_commands

app = typer.Typer(
    name="vscgen",
    help="Generate VS Code tasks.json and launch.json from Visual Studio solutions.",
    no_args_is_help=True,
    add_completion=False,
)
register_commands(app)


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "main"]
