# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from builders import ProjectWriter, render_project
from vscgen.config import GeneratorConfig
from vscgen.console import get_console_manager
from vscgen.generator import VSCodeGenerator
from vscgen.solution.parser import SolutionParser
from vscgen.toolchain.models import DiscoveryTier, ToolchainInstallation
from vscgen.toolchain.versioning import toolchain_environment


@pytest.fixture
def write_project(tmp_path: Path) -> ProjectWriter:
    """Return a helper that writes ``<root>/<relative>`` as a project file."""

    def _write(relative: str, **properties: str | None) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_project(**properties), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_slnx(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing an ``.slnx`` that lists ``paths`` in order."""

    def _write(paths: list[str], name: str = "Sample") -> Path:
        entries = "\n".join(f'  <Project Path="{path}" />' for path in paths)
        solution = tmp_path / f"{name}.slnx"
        solution.write_text(f"<Solution>\n{entries}\n</Solution>\n", encoding="utf-8")
        return solution

    return _write


@pytest.fixture
def fake_installation(tmp_path: Path) -> ToolchainInstallation:
    root = tmp_path / "vs" / "2022" / "Community"
    return ToolchainInstallation(
        root_path=root,
        executable_path=root / "MSBuild" / "Current" / "Bin" / "MSBuild.exe",
        version_label="Visual Studio 2022",
        discovery_tier=DiscoveryTier.FILESYSTEM,
        major_version=17,
        environment=toolchain_environment(root, 17),
    )


@pytest.fixture
def make_generator(fake_installation: ToolchainInstallation) -> Callable[..., VSCodeGenerator]:
    """Return a factory for generators that never touch the host toolchain."""

    def _make(
        *,
        installation: ToolchainInstallation | None = fake_installation,
        config: GeneratorConfig | None = None,
        log: Callable[[str], None] = lambda _message: None,
    ) -> VSCodeGenerator:
        settings = config or GeneratorConfig()
        parser = SolutionParser(settings.solution, log=log, converter=lambda _path: False)
        return VSCodeGenerator(settings, log=log, resolve_toolchain=lambda: installation, parser=parser)

    return _make


@pytest.fixture(autouse=True)
def _fresh_consoles() -> None:
    get_console_manager().clear()
