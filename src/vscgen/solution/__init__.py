# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Solution file readers."""

from __future__ import annotations

from .legacy import read_sln
from .migrate import CommandSolutionConverter, SolutionConverter
from .models import ProjectReference, SolutionGraph
from .modern import read_slnx
from .parser import LEGACY_SUFFIX, MODERN_SUFFIX, SUPPORTED_SUFFIXES, SolutionParser, validate_solution_path

__all__ = [
    "CommandSolutionConverter",
    "LEGACY_SUFFIX",
    "MODERN_SUFFIX",
    "ProjectReference",
    "SUPPORTED_SUFFIXES",
    "SolutionConverter",
    "SolutionGraph",
    "SolutionParser",
    "read_sln",
    "read_slnx",
    "validate_solution_path",
]
