# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Text builders for solution and project fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

ProjectWriter = Callable[..., Path]

SLN_TEMPLATE = """\
Microsoft Visual Studio Solution File, Format Version 12.00
# Visual Studio Version 17
{entries}Global
EndGlobal
"""
CSHARP_GUID = "FAE04EC0-301F-11D3-BF4B-00C04F79EFBC"
FOLDER_GUID = "2150E333-8FDC-42A3-9474-1A3956D46DE8"


def render_project(
    *,
    output_type: str | None = None,
    target_framework: str | None = None,
    target_frameworks: str | None = None,
) -> str:
    """Return a minimal SDK-style project body."""

    properties = []
    if output_type is not None:
        properties.append(f"    <OutputType>{output_type}</OutputType>")
    if target_framework is not None:
        properties.append(f"    <TargetFramework>{target_framework}</TargetFramework>")
    if target_frameworks is not None:
        properties.append(f"    <TargetFrameworks>{target_frameworks}</TargetFrameworks>")
    body = "\n".join(properties)
    return f'<Project Sdk="Microsoft.NET.Sdk">\n  <PropertyGroup>\n{body}\n  </PropertyGroup>\n</Project>\n'


def sln_entry(name: str, path: str, *, type_guid: str = CSHARP_GUID, guid: str | None = None) -> str:
    project_guid = guid or "11111111-2222-3333-4444-555555555555"
    return f'Project("{{{type_guid}}}") = "{name}", "{path}", "{{{project_guid}}}"\nEndProject\n'


def write_sln(root: Path, entries: str, name: str = "Legacy") -> Path:
    solution = root / f"{name}.sln"
    solution.write_text(SLN_TEMPLATE.format(entries=entries), encoding="utf-8")
    return solution
