# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Persist generated documents as deterministic JSON."""

from __future__ import annotations

import json
from pathlib import Path

from .models import LaunchDocument, TasksDocument

TASKS_FILENAME = "tasks.json"
LAUNCH_FILENAME = "launch.json"


def render_json(document: TasksDocument | LaunchDocument, *, indent: int = 2) -> str:
    """Return the JSON text for ``document``, newline terminated."""

    return json.dumps(document.to_payload(), indent=indent, ensure_ascii=False) + "\n"


def write_json(path: Path, document: TasksDocument | LaunchDocument, *, indent: int = 2) -> Path:
    """Overwrite ``path`` with ``document`` encoded as UTF-8 JSON and return ``path``."""

    path.write_text(render_json(document, indent=indent), encoding="utf-8")
    return path


__all__ = ["LAUNCH_FILENAME", "TASKS_FILENAME", "render_json", "write_json"]
