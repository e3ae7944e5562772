# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for toolchain discovery, solution parsing and output."""

from __future__ import annotations

from pathlib import Path
from typing import Final, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import ConfigError

DEFAULT_EDITIONS: Final[tuple[str, ...]] = ("Professional", "Enterprise", "Community")
DEFAULT_EXECUTABLE_RELATIVE_PATH: Final[str] = "MSBuild/Current/Bin/MSBuild.exe"
DEFAULT_CONVERSION_COMMAND: Final[tuple[str, ...]] = ("dotnet", "sln", "{solution}", "migrate")
DEFAULT_OUTPUT_DIRECTORY: Final[str] = ".vscode"

Verbosity = Literal["quiet", "minimal", "normal", "detailed", "diagnostic"]


class ToolchainConfig(BaseModel):
    """Settings steering the MSBuild discovery tiers."""

    model_config = ConfigDict(validate_assignment=True)

    minimum_major_version: int = Field(default=10, ge=1)
    install_base: Path | None = None
    editions: list[str] = Field(default_factory=lambda: list(DEFAULT_EDITIONS))
    executable_relative_path: str = DEFAULT_EXECUTABLE_RELATIVE_PATH
    default_major_version: int = Field(default=17, ge=1)
    vswhere_path: Path | None = None


class SolutionConfig(BaseModel):
    """Settings for reading solution files."""

    model_config = ConfigDict(validate_assignment=True)

    conversion_command: list[str] = Field(default_factory=lambda: list(DEFAULT_CONVERSION_COMMAND))
    convert_legacy: bool = True

    @field_validator("conversion_command")
    @classmethod
    def _require_executable(cls, value: list[str]) -> list[str]:
        if not value or not value[0].strip():
            raise ValueError("conversion_command must name an executable")
        return value


class OutputConfig(BaseModel):
    """Settings for the emitted VS Code documents."""

    model_config = ConfigDict(validate_assignment=True)

    directory_name: str = DEFAULT_OUTPUT_DIRECTORY
    verbosity: Verbosity = "normal"
    indent: int = Field(default=2, ge=0)


class GeneratorConfig(BaseModel):
    """Primary configuration container used by the generator."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    toolchain: ToolchainConfig = Field(default_factory=ToolchainConfig)
    solution: SolutionConfig = Field(default_factory=SolutionConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


__all__ = [
    "ConfigError",
    "DEFAULT_CONVERSION_COMMAND",
    "DEFAULT_EDITIONS",
    "DEFAULT_EXECUTABLE_RELATIVE_PATH",
    "DEFAULT_OUTPUT_DIRECTORY",
    "GeneratorConfig",
    "OutputConfig",
    "SolutionConfig",
    "ToolchainConfig",
    "Verbosity",
]
