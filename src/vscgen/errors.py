# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared across the generator."""

from __future__ import annotations

from pathlib import Path


class VscgenError(Exception):
    """Base class for errors raised by vscgen."""


class ConfigError(VscgenError):
    """Raised when configuration input is invalid."""


class ProjectParseError(VscgenError):
    """Raised when a project file cannot be read as MSBuild XML."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Unable to parse project {path}: {reason}")
        self.path = path
        self.reason = reason


class SolutionNotFoundError(VscgenError):
    """Raised when the requested solution file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Solution file does not exist: {path}")
        self.path = path


class UnsupportedSolutionError(VscgenError):
    """Raised when the solution file extension is neither ``.sln`` nor ``.slnx``."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"Unsupported solution format '{path.suffix or '<none>'}' for {path.name}; "
            "select a .sln or .slnx file."
        )
        self.path = path


__all__ = [
    "ConfigError",
    "ProjectParseError",
    "SolutionNotFoundError",
    "UnsupportedSolutionError",
    "VscgenError",
]
