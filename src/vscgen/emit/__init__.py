# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Task and launch document construction."""

from __future__ import annotations

from .labels import COMPOUND_NAME, OVERWRITE_PROMPT
from .launch import build_launch_descriptor, build_launch_document
from .models import LaunchDescriptor, LaunchDocument, TaskDescriptor, TasksDocument
from .tasks import TaskContext, TaskKind, build_tasks_document
from .writer import LAUNCH_FILENAME, TASKS_FILENAME, render_json, write_json

__all__ = [
    "COMPOUND_NAME",
    "LAUNCH_FILENAME",
    "LaunchDescriptor",
    "LaunchDocument",
    "OVERWRITE_PROMPT",
    "TASKS_FILENAME",
    "TaskContext",
    "TaskDescriptor",
    "TaskKind",
    "TasksDocument",
    "build_launch_descriptor",
    "build_launch_document",
    "build_tasks_document",
    "render_json",
    "write_json",
]
