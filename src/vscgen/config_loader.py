# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Layered configuration loading from ``pyproject.toml`` and ``.vscgen.toml``."""

from __future__ import annotations

import os
import re
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from .config import GeneratorConfig
from .errors import ConfigError

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PROJECT_CONFIG_FILENAME: Final[str] = ".vscgen.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "vscgen"

_ENV_VAR_PATTERN = re.compile(r"\$(\w+)|\$\{([^}]+)\}")


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``base`` updated with ``override``, merging nested tables key by key."""

    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            value = _deep_merge(current, value)
        merged[key] = value
    return merged


def _expand_env_value(value: Any, env: Mapping[str, str]) -> Any:
    """Expand ``$NAME`` and ``${NAME}`` in strings nested anywhere in ``value``.

    Unknown variables are left as written.
    """

    if isinstance(value, str):
        return _ENV_VAR_PATTERN.sub(lambda match: env.get(match.group(1) or match.group(2), match.group(0)), value)
    if isinstance(value, Mapping):
        return {key: _expand_env_value(item, env) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand_env_value(item, env) for item in value]
    return value


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration {path}: {exc}") from exc


def _pyproject_fragment(path: Path) -> dict[str, Any]:
    data = _read_toml(path)
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return dict(section)


def config_sources(base_dir: Path, explicit: Path | None = None) -> list[Path]:
    """Return the existing configuration files for ``base_dir`` in precedence order.

    Later entries override earlier ones. An explicit path must exist; when it
    names a discovered file, that file is only layered once, last.
    """

    sources = [
        candidate
        for candidate in (base_dir / PYPROJECT_FILENAME, base_dir / PROJECT_CONFIG_FILENAME)
        if candidate.is_file()
    ]
    if explicit is not None:
        if not explicit.is_file():
            raise ConfigError(f"Configuration file not found: {explicit}")
        resolved = explicit.resolve()
        sources = [source for source in sources if source.resolve() != resolved]
        sources.append(explicit)
    return sources


def load_config(
    base_dir: Path,
    *,
    explicit: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> GeneratorConfig:
    """Resolve the generator configuration for a solution directory.

    Args:
        base_dir: Directory holding the solution; searched for ``pyproject.toml``
            (``[tool.vscgen]``) and ``.vscgen.toml``.
        explicit: Optional configuration file layered on top of the discovered ones.
            A file named ``pyproject.toml`` contributes its ``[tool.vscgen]`` table.
        env: Environment used for ``$VAR`` expansion, defaults to ``os.environ``.

    Returns:
        GeneratorConfig: Validated configuration with defaults applied.

    Raises:
        ConfigError: If a file cannot be parsed or violates the schema.
    """

    environment = os.environ if env is None else env
    merged: dict[str, Any] = {}
    for source in config_sources(base_dir, explicit):
        if source.name == PYPROJECT_FILENAME:
            fragment = _pyproject_fragment(source)
        else:
            fragment = _read_toml(source)
        merged = _deep_merge(merged, fragment)
    expanded = {key: _expand_env_value(value, environment) for key, value in merged.items()}
    try:
        return GeneratorConfig.model_validate(expanded)
    except ValidationError as exc:
        raise ConfigError(f"Invalid vscgen configuration: {exc}") from exc


def describe_sources(sources: Sequence[Path]) -> str:
    """Return a human-readable summary of ``sources``."""

    if not sources:
        return "built-in defaults"
    return ", ".join(str(path) for path in sources)


__all__ = [
    "PROJECT_CONFIG_FILENAME",
    "PYPROJECT_FILENAME",
    "config_sources",
    "describe_sources",
    "load_config",
]
