# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reader for XML ``.slnx`` solutions."""

from __future__ import annotations

from pathlib import Path
from xml.etree.ElementTree import Element

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError
from defusedxml.ElementTree import parse as parse_xml

from ..logging import LogSink
from .models import ProjectReference, SolutionGraph, absolute_project_path


def local_name(element: Element) -> str:
    """Return ``element``'s tag without any ``{namespace}`` prefix."""

    tag = element.tag if isinstance(element.tag, str) else ""
    return tag.rsplit("}", 1)[-1]


def read_slnx(solution_path: Path, *, log: LogSink) -> SolutionGraph:
    """Return the projects declared by ``Project`` elements of an ``.slnx`` file.

    Projects nested in ``Folder`` elements are included; elements without a
    ``Path`` attribute are skipped. Parse failures are logged and yield an
    empty graph.
    """

    solution_dir = solution_path.absolute().parent
    try:
        root = parse_xml(solution_path).getroot()
    except (OSError, ParseError, DefusedXmlException) as exc:
        log(f"Failed to parse {solution_path.name}: {exc}")
        return ()

    projects: list[ProjectReference] = []
    for element in root.iter():
        if local_name(element) != "Project":
            continue
        declared = element.get("Path")
        if not declared:
            continue
        absolute = absolute_project_path(solution_dir, declared)
        projects.append(ProjectReference(name=absolute.stem, absolute_path=absolute))
    return tuple(projects)


__all__ = ["local_name", "read_slnx"]
