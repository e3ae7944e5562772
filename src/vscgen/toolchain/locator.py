# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the MSBuild installation used by generated tasks."""

from __future__ import annotations

import os
from collections.abc import Mapping, MutableMapping, Sequence

from ..config import ToolchainConfig
from ..logging import LogSink, default_sink
from .models import ToolchainInstallation
from .registry import HostInstanceQuery, InstanceQuery
from .strategies import DEFAULT_STRATEGIES, LocatorContext, ToolchainStrategy


class ToolchainLocator:
    """Run the discovery strategies in order and return the first installation found."""

    def __init__(
        self,
        config: ToolchainConfig | None = None,
        *,
        instance_query: InstanceQuery | None = None,
        strategies: Sequence[ToolchainStrategy] = DEFAULT_STRATEGIES,
        env: Mapping[str, str] | None = None,
        log: LogSink = default_sink,
    ) -> None:
        """Create a locator.

        Args:
            config: Discovery settings; defaults apply when omitted.
            instance_query: Callable listing registered instances. Defaults to
                :class:`HostInstanceQuery`.
            strategies: Ordered discovery tiers.
            env: Environment consulted for install locations, defaults to ``os.environ``.
            log: Sink receiving progress and failure messages.
        """

        self._config = config or ToolchainConfig()
        self._env = dict(os.environ if env is None else env)
        self._log = log
        self._strategies = tuple(strategies)
        self._instance_query = instance_query or HostInstanceQuery(self._config, log=log, env=self._env)

    @property
    def strategies(self) -> tuple[ToolchainStrategy, ...]:
        return self._strategies

    def resolve(self) -> ToolchainInstallation | None:
        """Return the first installation produced by the strategy chain, or ``None``.

        Filesystem errors raised by the instance query or a strategy are logged
        and the next strategy runs.
        """

        try:
            instances = list(self._instance_query())
        except OSError as exc:
            self._log(f"Registered MSBuild instances could not be queried: {exc}")
            instances = []
        if not instances:
            self._log("No registered MSBuild instances; scanning install directories.")
        context = LocatorContext(config=self._config, instances=instances, env=self._env, log=self._log)
        for strategy in self._strategies:
            try:
                installation = strategy(context)
            except OSError as exc:
                step = getattr(strategy, "__name__", repr(strategy))
                self._log(f"MSBuild discovery step {step} failed: {exc}")
                continue
            if installation is not None:
                self._log(f"Using MSBuild: {installation.executable_path}")
                return installation
        self._log("MSBuild could not be located; tasks will have an empty command.")
        return None


def apply_environment(
    installation: ToolchainInstallation,
    environ: MutableMapping[str, str] | None = None,
) -> None:
    """Export the installation's toolchain variables into ``environ`` (``os.environ`` by default)."""

    target = os.environ if environ is None else environ
    target.update(installation.environment)


__all__ = ["ToolchainLocator", "apply_environment"]
