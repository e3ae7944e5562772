# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Dispatch solution files to the matching reader."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Final

from ..config import SolutionConfig
from ..errors import SolutionNotFoundError, UnsupportedSolutionError
from ..logging import LogSink, default_sink
from .legacy import read_sln
from .migrate import CommandSolutionConverter, SolutionConverter
from .models import SolutionGraph
from .modern import read_slnx

LEGACY_SUFFIX: Final[str] = ".sln"
MODERN_SUFFIX: Final[str] = ".slnx"
SUPPORTED_SUFFIXES: Final[frozenset[str]] = frozenset({LEGACY_SUFFIX, MODERN_SUFFIX})


class SolutionParser:
    """Normalise ``.sln`` and ``.slnx`` solutions into an ordered project list.

    Legacy solutions are first converted to a ``.slnx`` sibling when none
    exists; the XML form is preferred whenever it is present afterwards.
    """

    def __init__(
        self,
        config: SolutionConfig | None = None,
        *,
        log: LogSink = default_sink,
        environment: Mapping[str, str] | None = None,
        converter: SolutionConverter | None = None,
    ) -> None:
        self._config = config or SolutionConfig()
        self._log = log
        self._converter = converter or CommandSolutionConverter(
            self._config.conversion_command,
            log=log,
            environment=environment,
        )

    def get_projects(self, solution_path: Path) -> SolutionGraph:
        """Return the projects declared by ``solution_path`` in declaration order.

        Never raises; failures are logged and produce an empty or partial graph.
        """

        suffix = solution_path.suffix.lower()
        if suffix == MODERN_SUFFIX:
            return read_slnx(solution_path, log=self._log)
        if suffix == LEGACY_SUFFIX:
            modern = solution_path.with_suffix(MODERN_SUFFIX)
            if not modern.is_file() and self._config.convert_legacy:
                self._converter(solution_path)
            if modern.is_file():
                return read_slnx(modern, log=self._log)
        return read_sln(solution_path, log=self._log)


def validate_solution_path(solution_path: Path) -> Path:
    """Return ``solution_path`` made absolute after checking it names a solution file.

    Raises:
        SolutionNotFoundError: If the file does not exist.
        UnsupportedSolutionError: If the extension is not ``.sln`` or ``.slnx``.
    """

    if not solution_path.is_file():
        raise SolutionNotFoundError(solution_path)
    if solution_path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise UnsupportedSolutionError(solution_path)
    return solution_path.absolute()


__all__ = [
    "LEGACY_SUFFIX",
    "MODERN_SUFFIX",
    "SUPPORTED_SUFFIXES",
    "SolutionParser",
    "validate_solution_path",
]
