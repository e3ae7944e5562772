# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""MSBuild toolchain discovery."""

from __future__ import annotations

from .locator import ToolchainLocator, apply_environment
from .models import DiscoveryTier, DiscoveryType, RegisteredInstance, ToolchainInstallation
from .registry import HostInstanceQuery, InstanceQuery
from .strategies import (
    DEFAULT_STRATEGIES,
    LocatorContext,
    ToolchainStrategy,
    any_registered,
    filesystem_scan,
    registered_visual_studio,
)
from .versioning import major_from_directory, version_label

__all__ = [
    "DEFAULT_STRATEGIES",
    "DiscoveryTier",
    "DiscoveryType",
    "HostInstanceQuery",
    "InstanceQuery",
    "LocatorContext",
    "RegisteredInstance",
    "ToolchainInstallation",
    "ToolchainLocator",
    "ToolchainStrategy",
    "any_registered",
    "apply_environment",
    "filesystem_scan",
    "major_from_directory",
    "registered_visual_studio",
    "version_label",
]
