# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Ordered discovery strategies used by :class:`ToolchainLocator`.

Each strategy receives a :class:`LocatorContext` and returns an installation
or ``None``; the locator stops at the first installation produced.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from ..config import ToolchainConfig
from ..logging import LogSink
from .models import DiscoveryTier, DiscoveryType, RegisteredInstance, ToolchainInstallation
from .versioning import major_from_directory, toolchain_environment, version_label

EXECUTABLE_NAME: Final[str] = "MSBuild.exe"
INSTALL_DIR_NAME: Final[str] = "Microsoft Visual Studio"
DEFAULT_PROGRAM_FILES: Final[str] = r"C:\Program Files"


@dataclass(slots=True, frozen=True)
class LocatorContext:
    """Inputs shared by every discovery strategy."""

    config: ToolchainConfig
    instances: Sequence[RegisteredInstance]
    env: Mapping[str, str]
    log: LogSink


ToolchainStrategy = Callable[[LocatorContext], ToolchainInstallation | None]


def resolve_executable(msbuild_path: Path) -> Path | None:
    """Return the MSBuild executable for a registration record.

    The record may point at the executable itself or at its directory.
    """

    if msbuild_path.is_file():
        return msbuild_path
    candidate = msbuild_path / EXECUTABLE_NAME
    if candidate.is_file():
        return candidate
    return None


def _from_instance(
    instance: RegisteredInstance,
    tier: DiscoveryTier,
    context: LocatorContext,
) -> ToolchainInstallation | None:
    executable = resolve_executable(instance.msbuild_path)
    if executable is None:
        context.log(f"No MSBuild executable under {instance.msbuild_path} for {instance.name}.")
        return None
    major = instance.major
    installation = ToolchainInstallation(
        root_path=instance.root_path,
        executable_path=executable,
        version_label=version_label(major),
        discovery_tier=tier,
        major_version=major,
        environment=toolchain_environment(instance.root_path, major),
    )
    context.log(f"Registered MSBuild instance: {instance.name} ({instance.root_path})")
    return installation


def registered_visual_studio(context: LocatorContext) -> ToolchainInstallation | None:
    """Pick the newest IDE-managed instance meeting the minimum major version."""

    candidates = [
        instance
        for instance in context.instances
        if instance.discovery_type is DiscoveryType.VISUAL_STUDIO_SETUP
        and instance.major >= context.config.minimum_major_version
    ]
    if not candidates:
        return None
    best = max(candidates, key=lambda instance: instance.parsed_version)
    return _from_instance(best, DiscoveryTier.REGISTERED, context)


def any_registered(context: LocatorContext) -> ToolchainInstallation | None:
    """Pick the newest registered instance of any kind."""

    if not context.instances:
        return None
    latest = max(context.instances, key=lambda instance: instance.parsed_version)
    return _from_instance(latest, DiscoveryTier.ANY_REGISTERED, context)


def install_base(context: LocatorContext) -> Path:
    """Return the directory holding version-named Visual Studio installs."""

    if context.config.install_base is not None:
        return context.config.install_base
    program_files = context.env.get("ProgramFiles") or DEFAULT_PROGRAM_FILES
    return Path(program_files) / INSTALL_DIR_NAME


def filesystem_scan(context: LocatorContext) -> ToolchainInstallation | None:
    """Probe conventional install folders, newest version directory first."""

    base = install_base(context)
    if not base.is_dir():
        context.log(f"Visual Studio install directory not found: {base}")
        return None

    version_dirs = sorted((entry.name for entry in base.iterdir() if entry.is_dir()), reverse=True)
    if not version_dirs:
        context.log(f"No Visual Studio versions installed under {base}")
        return None

    for version_name in version_dirs:
        for edition in context.config.editions:
            edition_root = base / version_name / edition
            executable = edition_root / context.config.executable_relative_path
            if not executable.is_file():
                continue
            major, label = major_from_directory(
                version_name,
                default=context.config.default_major_version,
            )
            context.log(f"Found Visual Studio {version_name} {edition}: {executable}")
            return ToolchainInstallation(
                root_path=edition_root,
                executable_path=executable,
                version_label=label,
                discovery_tier=DiscoveryTier.FILESYSTEM,
                major_version=major,
                environment=toolchain_environment(edition_root, major),
            )

    context.log(f"{EXECUTABLE_NAME} was not found under {base}")
    return None


DEFAULT_STRATEGIES: Final[tuple[ToolchainStrategy, ...]] = (
    registered_visual_studio,
    any_registered,
    filesystem_scan,
)


__all__ = [
    "DEFAULT_STRATEGIES",
    "EXECUTABLE_NAME",
    "LocatorContext",
    "ToolchainStrategy",
    "any_registered",
    "filesystem_scan",
    "install_base",
    "registered_visual_studio",
    "resolve_executable",
]
