# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project file classification."""

from __future__ import annotations

from .classifier import (
    LaunchableProject,
    OutputLayout,
    RuntimeKind,
    describe_launchable,
    is_executable,
    output_layout,
    read_target_framework,
)

__all__ = [
    "LaunchableProject",
    "OutputLayout",
    "RuntimeKind",
    "describe_launchable",
    "is_executable",
    "output_layout",
    "read_target_framework",
]
