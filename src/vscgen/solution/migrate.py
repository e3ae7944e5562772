# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Convert legacy ``.sln`` solutions to ``.slnx`` with an external command."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Final, Protocol

from ..logging import LogSink
from ..subprocess_utils import merged_environment, run_command

SOLUTION_PLACEHOLDER: Final[str] = "{solution}"


class SolutionConverter(Protocol):
    """Callable producing a ``.slnx`` sibling for a legacy solution."""

    def __call__(self, solution_path: Path) -> bool: ...


def expand_command(command: Sequence[str], solution_path: Path) -> list[str]:
    """Substitute the ``{solution}`` placeholder with the solution file name."""

    return [part.replace(SOLUTION_PLACEHOLDER, solution_path.name) for part in command]


class CommandSolutionConverter:
    """Run the configured conversion command inside the solution directory."""

    def __init__(
        self,
        command: Sequence[str],
        *,
        log: LogSink,
        environment: Mapping[str, str] | None = None,
    ) -> None:
        self._command = tuple(command)
        self._log = log
        self._environment = dict(environment or {})

    def __call__(self, solution_path: Path) -> bool:
        """Run the conversion; return ``True`` when the command exited cleanly.

        Failures are logged, never raised. The call blocks until the command exits.
        """

        solution_dir = solution_path.absolute().parent
        args = expand_command(self._command, solution_path)
        try:
            completed = run_command(
                args,
                cwd=solution_dir,
                env=merged_environment(self._environment),
                check=False,
                capture_output=True,
                discard_stdin=True,
            )
        except (OSError, ValueError) as exc:
            self._log(f"Solution conversion could not start ({' '.join(args)}): {exc}")
            return False

        if completed.returncode != 0:
            stderr = (completed.stderr or "").strip()
            self._log(f"Solution conversion exited with code {completed.returncode}. {stderr}".rstrip())
            return False
        self._log(f"Converted {solution_path.name} to .slnx.")
        return True


__all__ = [
    "CommandSolutionConverter",
    "SOLUTION_PLACEHOLDER",
    "SolutionConverter",
    "expand_command",
]
