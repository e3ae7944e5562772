# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from rich.console import Console
from rich.text import Text

from ..logging import fail as core_fail
from ..logging import info as core_info
from ..logging import ok as core_ok
from ..logging import warn as core_warn


class CLIError(RuntimeError):
    """Command failure carrying the process exit status."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Route command output through the vscgen console helpers.

    ``info`` doubles as the generator log sink, so progress lines from the
    generator share the command's emoji and colour settings.
    """

    console: Console
    use_emoji: bool
    use_color: bool | None = None
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = field(default=re.compile(r"([\w-]+)=(\".*?\"|\S+)"))

    def info(self, message: str) -> None:
        """Log an informational message; used as the generator's log sink."""

        core_info(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def fail(self, message: str) -> None:
        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        Args:
            message: Debug payload rendered with simple ``key=value`` highlighting.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            key, raw_value = match.group(1), match.group(2)
            text.append(key, style="bold magenta")
            text.append("=", style="dim")
            value_style = "bold blue" if key in {"command", "cmd"} else "bold green"
            text.append(raw_value, style=value_style)
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided presentation flags.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger instance bound to a dedicated Rich console.
    """

    console = Console(no_color=no_color, highlight=False)
    return CLILogger(
        console=console,
        use_emoji=emoji,
        use_color=False if no_color else None,
        debug_enabled=debug,
    )


__all__ = ["CLIError", "CLILogger", "build_cli_logger"]
