# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Inspect MSBuild project files to find launchable projects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Final
from xml.etree.ElementTree import Element

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError
from defusedxml.ElementTree import parse as parse_xml

from ..errors import ProjectParseError
from ..solution.models import ProjectReference

EXECUTABLE_OUTPUT_TYPES: Final[frozenset[str]] = frozenset({"Exe", "WinExe"})
MODERN_PREFIX: Final[str] = "net"
LEGACY_PREFIX: Final[str] = "net4"
DESKTOP_MARKER: Final[str] = "-windows"


class RuntimeKind(str, Enum):
    """Debugger runtime used for a launch configuration."""

    MANAGED = "coreclr"
    LEGACY = "clr"


class OutputLayout(str, Enum):
    """Shape of the Debug build output of a project."""

    PORTABLE = "portable"
    LEGACY = "legacy"
    DESKTOP = "desktop"

    @property
    def runtime_kind(self) -> RuntimeKind:
        return RuntimeKind.LEGACY if self is OutputLayout.LEGACY else RuntimeKind.MANAGED


@dataclass(slots=True, frozen=True)
class LaunchableProject:
    """Executable project together with its target framework."""

    reference: ProjectReference
    target_framework: str
    layout: OutputLayout

    @property
    def name(self) -> str:
        return self.reference.name

    @property
    def runtime_kind(self) -> RuntimeKind:
        return self.layout.runtime_kind


def load_project(project_path: Path) -> Element:
    """Parse ``project_path`` and return its root element.

    Raises:
        ProjectParseError: If the file is missing or is not well-formed XML.
    """

    if not project_path.is_file():
        raise ProjectParseError(project_path, "file does not exist")
    try:
        return parse_xml(project_path).getroot()
    except (OSError, ParseError, DefusedXmlException) as exc:
        raise ProjectParseError(project_path, str(exc)) from exc


def _qualified(root: Element, name: str) -> str:
    tag = root.tag if isinstance(root.tag, str) else ""
    if tag.startswith("{"):
        namespace = tag[1:].split("}", 1)[0]
        return f"{{{namespace}}}{name}"
    return name


def first_text(root: Element, name: str) -> str | None:
    """Return the text of the first ``name`` element in the root's default namespace."""

    element = next(root.iter(_qualified(root, name)), None)
    if element is None:
        return None
    return element.text or ""


def is_executable(project_path: Path) -> bool:
    """Return ``True`` when the project's ``OutputType`` is exactly ``Exe`` or ``WinExe``."""

    try:
        root = load_project(project_path)
    except ProjectParseError:
        return False
    return first_text(root, "OutputType") in EXECUTABLE_OUTPUT_TYPES


def target_framework_of(root: Element) -> str:
    """Return ``TargetFramework`` or the first ``TargetFrameworks`` entry, else ``""``."""

    single = first_text(root, "TargetFramework")
    if single is not None:
        return single.strip()
    multiple = first_text(root, "TargetFrameworks")
    if multiple is None:
        return ""
    return multiple.split(";", 1)[0].strip()


def read_target_framework(project_path: Path) -> str:
    """Return the target framework declared by ``project_path``.

    Raises:
        ProjectParseError: If the project cannot be parsed.
    """

    return target_framework_of(load_project(project_path))


def output_layout(target_framework: str) -> OutputLayout:
    """Classify the Debug output layout for ``target_framework``.

    ``net8.0`` style frameworks build a portable ``.dll``; ``net48`` and an
    empty framework (old-style projects) build an ``.exe`` directly under
    ``bin/Debug``; Windows-specific modern frameworks build an ``.exe`` under
    the framework directory.
    """

    framework = target_framework
    if (
        framework.startswith(MODERN_PREFIX)
        and DESKTOP_MARKER not in framework
        and not framework.startswith(LEGACY_PREFIX)
    ):
        return OutputLayout.PORTABLE
    if framework.startswith(LEGACY_PREFIX) or not framework:
        return OutputLayout.LEGACY
    return OutputLayout.DESKTOP


def describe_launchable(reference: ProjectReference) -> LaunchableProject:
    """Read the launch metadata of an executable project.

    Raises:
        ProjectParseError: If the project cannot be parsed.
    """

    framework = read_target_framework(reference.absolute_path)
    return LaunchableProject(reference=reference, target_framework=framework, layout=output_layout(framework))


__all__ = [
    "EXECUTABLE_OUTPUT_TYPES",
    "LaunchableProject",
    "OutputLayout",
    "RuntimeKind",
    "describe_launchable",
    "first_text",
    "is_executable",
    "load_project",
    "output_layout",
    "read_target_framework",
    "target_framework_of",
]
