# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Visual Studio version naming and install-directory version mapping."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Final

VERSION_NAMES: Final[Mapping[int, str]] = MappingProxyType(
    {
        10: "Visual Studio 2010",
        11: "Visual Studio 2012",
        12: "Visual Studio 2013",
        14: "Visual Studio 2015",
        15: "Visual Studio 2017",
        16: "Visual Studio 2019",
        17: "Visual Studio 2022",
        18: "Visual Studio 2026",
    }
)

YEAR_TO_MAJOR: Final[Mapping[int, int]] = MappingProxyType(
    {
        2010: 10,
        2012: 11,
        2013: 12,
        2015: 14,
        2017: 15,
        2019: 16,
        2022: 17,
        2026: 18,
    }
)

DEFAULT_MAJOR_VERSION: Final[int] = 17
GENERIC_LABEL: Final[str] = "Visual Studio"
TOOLS_PATH_TEMPLATE: Final[str] = "MSBuild/Microsoft/VisualStudio/v{major}.0"
INSTALL_DIR_VARIABLE: Final[str] = "VSINSTALLDIR"
TOOLS_PATH_VARIABLE: Final[str] = "VSToolsPath"


def version_label(major: int) -> str:
    """Return the product name for an MSBuild/Visual Studio major version."""

    return VERSION_NAMES.get(major, f"Visual Studio (Version {major})")


def major_from_directory(name: str, *, default: int = DEFAULT_MAJOR_VERSION) -> tuple[int, str]:
    """Map an install directory name such as ``2022`` to ``(major, label)``.

    Year-style names go through :data:`YEAR_TO_MAJOR`, unknown years fall back
    to ``default``. Small numbers are taken as the major version itself.
    Non-numeric names keep ``default`` and are labelled with the raw name.
    """

    if not name.isdecimal():
        return default, f"{GENERIC_LABEL} {name}"
    number = int(name)
    major = YEAR_TO_MAJOR.get(number, default) if number > 100 else number
    return major, version_label(major)


def toolchain_environment(root: Path, major: int) -> dict[str, str]:
    """Return the install-root and tools-path variables for an installation."""

    return {
        INSTALL_DIR_VARIABLE: str(root),
        TOOLS_PATH_VARIABLE: str(root / TOOLS_PATH_TEMPLATE.format(major=major)),
    }


__all__ = [
    "DEFAULT_MAJOR_VERSION",
    "GENERIC_LABEL",
    "INSTALL_DIR_VARIABLE",
    "TOOLS_PATH_TEMPLATE",
    "TOOLS_PATH_VARIABLE",
    "VERSION_NAMES",
    "YEAR_TO_MAJOR",
    "major_from_directory",
    "toolchain_environment",
    "version_label",
]
