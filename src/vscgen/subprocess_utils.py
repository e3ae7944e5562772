# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Blocking subprocess helper used for host queries and solution conversion."""

from __future__ import annotations

import os
import shutil

# Bandit: subprocess usage is intentional; we provide a controlled wrapper around
# external tool execution, normalising arguments and disabling ``shell=True``.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from pathlib import Path
from subprocess import CompletedProcess


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        super().__init__(
            f"Command '{command[0]}' exited with status {returncode}. stderr: {stderr or '<none>'}",
        )
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def _resolve_executable(args: Sequence[str]) -> list[str]:
    """Return ``args`` with the executable replaced by its absolute path."""

    if not args:
        raise ValueError("run_command needs an executable")
    executable = args[0]
    if not Path(executable).is_absolute():
        located = shutil.which(executable)
        if located is None:
            raise FileNotFoundError(f"{executable} is not on PATH")
        executable = located
    return [executable, *args[1:]]


def merged_environment(overrides: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return a copy of ``os.environ`` with ``overrides`` applied."""

    env = os.environ.copy()
    if overrides:
        env.update(overrides)
    return env


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    check: bool = True,
    capture_output: bool = False,
    text: bool = True,
    discard_stdin: bool = False,
) -> CompletedProcess[str]:
    """Execute *args* after normalising the executable path.

    The call blocks until the child exits; no timeout is applied.

    Args:
        args: Command and arguments; the head is resolved through ``PATH``.
        cwd: Working directory for the child process.
        env: Complete environment for the child, ``None`` to inherit.
        check: Raise :class:`SubprocessExecutionError` on a non-zero exit.
        capture_output: Capture stdout and stderr.
        text: Decode output streams as text.
        discard_stdin: Connect stdin to ``/dev/null`` so the child cannot prompt.

    Returns:
        CompletedProcess[str]: Completed process metadata.

    Raises:
        FileNotFoundError: If the executable cannot be located.
        SubprocessExecutionError: If ``check`` is set and the command fails.
    """

    normalized = _resolve_executable(args)
    # Bandit: commands come from configuration as argument lists; no shell expansion.
    completed: CompletedProcess[str] = subprocess.run(  # nosec B603
        normalized,
        cwd=str(cwd) if cwd is not None else None,
        env=dict(env) if env is not None else None,
        check=False,
        capture_output=capture_output,
        text=text,
        stdin=subprocess.DEVNULL if discard_stdin else None,
    )

    if check and completed.returncode != 0:
        raise SubprocessExecutionError(
            normalized,
            completed.returncode,
            completed.stdout if isinstance(completed.stdout, str) else None,
            completed.stderr if isinstance(completed.stderr, str) else None,
        )

    return completed


__all__ = ["SubprocessExecutionError", "merged_environment", "run_command"]
