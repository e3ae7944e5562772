# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Human-readable labels shared by tasks, launch configurations and prompts."""

from __future__ import annotations

from typing import Final

from ..toolchain.versioning import GENERIC_LABEL

COMPOUND_NAME: Final[str] = "Launch All"
OVERWRITE_PROMPT: Final[str] = (
    "An existing .vscode folder was found.\n"
    "Delete it and regenerate?\n\n"
    "Choose no to keep it and overwrite only tasks.json and launch.json."
)


def build_label(solution_name: str, configuration: str) -> str:
    return f"Build - {solution_name} solution - {configuration}"


def clean_label(solution_name: str) -> str:
    return f"Clean - {solution_name} solution"


def rebuild_label(solution_name: str) -> str:
    return f"Rebuild - {solution_name} solution"


def launch_name(project_name: str) -> str:
    return f".NET Launch ({project_name})"


def toolchain_text(version_label: str | None) -> str:
    """Return the toolchain name embedded in task details."""

    return version_label or GENERIC_LABEL


__all__ = [
    "COMPOUND_NAME",
    "OVERWRITE_PROMPT",
    "build_label",
    "clean_label",
    "launch_name",
    "rebuild_label",
    "toolchain_text",
]
