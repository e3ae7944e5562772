# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for Visual Studio version naming."""

from __future__ import annotations

from pathlib import Path

import pytest

from vscgen.toolchain.versioning import (
    YEAR_TO_MAJOR,
    major_from_directory,
    toolchain_environment,
    version_label,
)


@pytest.mark.parametrize(
    ("major", "expected"),
    [
        (10, "Visual Studio 2010"),
        (15, "Visual Studio 2017"),
        (16, "Visual Studio 2019"),
        (17, "Visual Studio 2022"),
        (18, "Visual Studio 2026"),
        (13, "Visual Studio (Version 13)"),
    ],
)
def test_version_label(major: int, expected: str) -> None:
    assert version_label(major) == expected


def test_year_table_maps_every_year_to_a_named_major() -> None:
    for year, major in YEAR_TO_MAJOR.items():
        assert version_label(major) == f"Visual Studio {year}"


def test_year_directory_maps_through_table() -> None:
    assert major_from_directory("2019") == (16, "Visual Studio 2019")


def test_unknown_year_falls_back_to_default_major() -> None:
    assert major_from_directory("2099") == (17, "Visual Studio 2022")
    assert major_from_directory("2099", default=18) == (18, "Visual Studio 2026")


def test_small_number_is_taken_as_major() -> None:
    assert major_from_directory("15") == (15, "Visual Studio 2017")


def test_non_numeric_directory_keeps_raw_name() -> None:
    assert major_from_directory("Preview") == (17, "Visual Studio Preview")
    assert major_from_directory("²") == (17, "Visual Studio ²")


def test_toolchain_environment_points_at_versioned_tools_path() -> None:
    root = Path("/opt/vs/2022/Community")
    environment = toolchain_environment(root, 17)
    assert environment["VSINSTALLDIR"] == str(root)
    assert environment["VSToolsPath"] == str(root / "MSBuild" / "Microsoft" / "VisualStudio" / "v17.0")
