# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Query MSBuild installations registered on the host."""

from __future__ import annotations

import json
import re
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final

from packaging.version import InvalidVersion, Version

from ..config import ToolchainConfig
from ..logging import LogSink
from ..subprocess_utils import SubprocessExecutionError, run_command
from .models import DiscoveryType, RegisteredInstance

CommandRunner = Callable[..., CompletedProcess[str]]
InstanceQuery = Callable[[], Sequence[RegisteredInstance]]

VSWHERE_RELATIVE_PATH: Final[str] = "Microsoft Visual Studio/Installer/vswhere.exe"
VSWHERE_ARGS: Final[tuple[str, ...]] = ("-all", "-prerelease", "-products", "*", "-format", "json", "-utf8")
_SDK_LINE = re.compile(r"^(?P<version>\S+)\s+\[(?P<base>.+)\]\s*$")


def msbuild_bin_dir(root: Path, major: int) -> Path:
    """Return the MSBuild ``Bin`` directory for a Visual Studio root."""

    folder = "15.0" if major == 15 else "Current"
    return root / "MSBuild" / folder / "Bin"


def _default_vswhere(env: Mapping[str, str]) -> Path | None:
    base = env.get("ProgramFiles(x86)") or env.get("ProgramFiles")
    if not base:
        return None
    return Path(base) / VSWHERE_RELATIVE_PATH


def _major_of(raw: str) -> int:
    try:
        return Version(raw).major
    except InvalidVersion:
        return 0


def parse_vswhere_output(payload: str) -> list[RegisteredInstance]:
    """Convert ``vswhere -format json`` output into registered instances.

    Entries without an installation path or version are ignored.
    """

    data = json.loads(payload or "[]")
    if not isinstance(data, list):
        return []
    instances: list[RegisteredInstance] = []
    for entry in data:
        if not isinstance(entry, Mapping):
            continue
        root = entry.get("installationPath")
        version = entry.get("installationVersion")
        if not isinstance(root, str) or not isinstance(version, str):
            continue
        root_path = Path(root)
        name = entry.get("displayName")
        instances.append(
            RegisteredInstance(
                name=name if isinstance(name, str) else f"Visual Studio {version}",
                version=version,
                root_path=root_path,
                msbuild_path=msbuild_bin_dir(root_path, _major_of(version)),
                discovery_type=DiscoveryType.VISUAL_STUDIO_SETUP,
            )
        )
    return instances


def parse_dotnet_sdks(output: str) -> list[RegisteredInstance]:
    """Convert ``dotnet --list-sdks`` output into registered instances."""

    instances: list[RegisteredInstance] = []
    for line in output.splitlines():
        match = _SDK_LINE.match(line.strip())
        if match is None:
            continue
        version = match.group("version")
        sdk_dir = Path(match.group("base")) / version
        instances.append(
            RegisteredInstance(
                name=f".NET SDK {version}",
                version=version,
                root_path=sdk_dir,
                msbuild_path=sdk_dir,
                discovery_type=DiscoveryType.DOTNET_SDK,
            )
        )
    return instances


def developer_console_instance(env: Mapping[str, str]) -> RegisteredInstance | None:
    """Return the instance advertised by a Visual Studio developer shell, if any."""

    root = env.get("VSINSTALLDIR")
    version = env.get("VisualStudioVersion")
    if not root or not version:
        return None
    root_path = Path(root)
    return RegisteredInstance(
        name=f"Developer Console {version}",
        version=version,
        root_path=root_path,
        msbuild_path=msbuild_bin_dir(root_path, _major_of(version)),
        discovery_type=DiscoveryType.DEVELOPER_CONSOLE,
    )


class HostInstanceQuery:
    """Collect registered MSBuild instances from vswhere, the shell and the .NET SDK."""

    def __init__(
        self,
        config: ToolchainConfig,
        *,
        log: LogSink,
        env: Mapping[str, str],
        runner: CommandRunner = run_command,
    ) -> None:
        self._config = config
        self._log = log
        self._env = env
        self._runner = runner

    def __call__(self) -> list[RegisteredInstance]:
        instances = [*self._query_vswhere()]
        console_instance = developer_console_instance(self._env)
        if console_instance is not None:
            instances.append(console_instance)
        instances.extend(self._query_dotnet())
        return instances

    def _query_vswhere(self) -> list[RegisteredInstance]:
        vswhere = self._config.vswhere_path or _default_vswhere(self._env)
        if vswhere is None or not vswhere.is_file():
            self._log("vswhere was not found; skipping Visual Studio setup query.")
            return []
        try:
            completed = self._runner(
                [str(vswhere), *VSWHERE_ARGS],
                capture_output=True,
                discard_stdin=True,
            )
            return parse_vswhere_output(completed.stdout)
        except (OSError, SubprocessExecutionError, json.JSONDecodeError) as exc:
            self._log(f"vswhere query failed: {exc}")
            return []

    def _query_dotnet(self) -> list[RegisteredInstance]:
        try:
            completed = self._runner(
                ["dotnet", "--list-sdks"],
                capture_output=True,
                discard_stdin=True,
            )
        except (OSError, SubprocessExecutionError) as exc:
            self._log(f".NET SDK query failed: {exc}")
            return []
        return parse_dotnet_sdks(completed.stdout)


__all__ = [
    "CommandRunner",
    "HostInstanceQuery",
    "InstanceQuery",
    "developer_console_instance",
    "msbuild_bin_dir",
    "parse_dotnet_sdks",
    "parse_vswhere_output",
]
