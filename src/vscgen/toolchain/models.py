# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models describing MSBuild installations."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from packaging.version import InvalidVersion, Version
from pydantic import BaseModel, ConfigDict, Field, field_validator


class DiscoveryType(str, Enum):
    """Host mechanism through which an installation was registered."""

    VISUAL_STUDIO_SETUP = "visual_studio_setup"
    DEVELOPER_CONSOLE = "developer_console"
    DOTNET_SDK = "dotnet_sdk"


class DiscoveryTier(str, Enum):
    """Locator tier that produced an installation."""

    REGISTERED = "registered"
    ANY_REGISTERED = "any_registered"
    FILESYSTEM = "filesystem"


class RegisteredInstance(BaseModel):
    """MSBuild installation reported by the host (vswhere, developer shell, SDK list)."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    root_path: Path
    msbuild_path: Path
    discovery_type: DiscoveryType

    @property
    def parsed_version(self) -> Version:
        """Return :attr:`version` as a comparable :class:`Version` (``0`` when malformed)."""

        try:
            return Version(self.version)
        except InvalidVersion:
            return Version("0")

    @property
    def major(self) -> int:
        return self.parsed_version.major


class ToolchainInstallation(BaseModel):
    """Resolved MSBuild executable plus the metadata needed to invoke it.

    ``environment`` is a read-only mapping of the install-root and
    tool-search-path variables that MSBuild expects; callers thread it into
    child processes instead of mutating ``os.environ``.
    """

    model_config = ConfigDict(frozen=True)

    root_path: Path
    executable_path: Path
    version_label: str
    discovery_tier: DiscoveryTier
    major_version: int
    environment: Mapping[str, str] = Field(default_factory=lambda: MappingProxyType({}))

    @field_validator("environment", mode="after")
    @classmethod
    def _freeze_environment(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @property
    def command(self) -> str:
        """Return the executable path as used in task descriptors."""

        return str(self.executable_path)


__all__ = [
    "DiscoveryTier",
    "DiscoveryType",
    "RegisteredInstance",
    "ToolchainInstallation",
]
