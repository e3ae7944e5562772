# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared rich consoles for user-facing output."""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import NamedTuple

from rich.console import Console


def detect_tty() -> bool:
    """Return whether ``sys.stdout`` is attached to a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


class ConsoleKey(NamedTuple):
    """Presentation settings a cached console was built for."""

    color: bool
    emoji: bool
    tty: bool

    @property
    def colorize(self) -> bool:
        return self.color and self.tty


def _build_console(key: ConsoleKey) -> Console:
    return Console(
        color_system="auto" if key.colorize else None,
        force_terminal=key.tty,
        no_color=not key.colorize,
        emoji=key.emoji,
        soft_wrap=True,
        highlight=False,
    )


class RichConsoleManager:
    """Hand out one console per colour, emoji and terminal combination.

    Consoles are built lazily. Colour is only enabled when stdout is a
    terminal, so output captured by tests or pipes stays plain.
    """

    def __init__(self) -> None:
        self._consoles: dict[ConsoleKey, Console] = {}

    def get(self, *, color: bool, emoji: bool) -> Console:
        """Return the console matching ``color`` and ``emoji`` for the current stdout."""

        key = ConsoleKey(color=color, emoji=emoji, tty=detect_tty())
        console = self._consoles.get(key)
        if console is None:
            console = self._consoles[key] = _build_console(key)
        return console

    def clear(self) -> None:
        """Forget every cached console."""

        self._consoles.clear()


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    """Return the process-wide :class:`RichConsoleManager`."""

    return RichConsoleManager()


__all__ = ["ConsoleKey", "RichConsoleManager", "detect_tty", "get_console_manager"]
