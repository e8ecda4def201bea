# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration sources (defaults, TOML, pyproject) and layered loading."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final, Protocol

from pydantic import ValidationError

from .models import Config, ConfigError

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
CONFIG_FILENAME: Final[str] = ".verilint.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "verilint"


class ConfigSource(Protocol):
    """Provide a configuration fragment."""

    name: str

    def load(self) -> Mapping[str, Any]:
        """Return the fragment contributed by the source."""
        ...


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return Config().to_dict()


class TomlConfigSource:
    """Load configuration data from a standalone TOML document."""

    def __init__(self, path: Path, *, name: str | None = None) -> None:
        self._path = path
        self.name = name or str(path)

    def load(self) -> Mapping[str, Any]:
        if not self._path.is_file():
            return {}
        try:
            with self._path.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {self._path}: {exc}") from exc
        return _resolve_include_paths(data, self._path.parent)


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.verilint]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        data = super().load()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(section, Mapping):
            return {}
        return _resolve_include_paths(section, self._path.parent)


def _resolve_include_paths(data: Mapping[str, Any], base_dir: Path) -> dict[str, Any]:
    """Anchor relative ``verilator.include_paths`` entries at ``base_dir``."""

    document = dict(data)
    verilator = document.get("verilator")
    if not isinstance(verilator, Mapping):
        return document
    includes = verilator.get("include_paths")
    if not isinstance(includes, list):
        return document
    resolved = []
    for entry in includes:
        path = Path(str(entry)).expanduser()
        resolved.append(str(path if path.is_absolute() else base_dir / path))
    document["verilator"] = {**verilator, "include_paths": resolved}
    return document


def default_sources(root: Path, explicit: Path | None = None) -> list[ConfigSource]:
    """Return the configuration sources for ``root`` in ascending precedence.

    Args:
        root: Project root searched for ``pyproject.toml`` and ``.verilint.toml``.
        explicit: Optional configuration file given on the command line.

    Returns:
        list[ConfigSource]: Defaults, pyproject, project file and explicit file.
    """

    sources: list[ConfigSource] = [
        DefaultConfigSource(),
        PyProjectConfigSource(root / PYPROJECT_FILENAME),
        TomlConfigSource(root / CONFIG_FILENAME),
    ]
    if explicit is not None:
        if not explicit.is_file():
            raise ConfigError(f"Configuration file {explicit} does not exist")
        sources.append(TomlConfigSource(explicit))
    return sources


def load_config(
    root: Path,
    *,
    config_file: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
    sources: Sequence[ConfigSource] | None = None,
) -> Config:
    """Merge every source for ``root`` and validate the result.

    Args:
        root: Project root directory.
        config_file: Optional explicit TOML file with the highest file precedence.
        overrides: Final overrides, typically derived from CLI options.
        sources: Replacement source list, mainly for tests.

    Returns:
        Config: Validated configuration.

    Raises:
        ConfigError: If a document cannot be read or the merged data is invalid.
    """

    active = sources if sources is not None else default_sources(root, config_file)
    merged: dict[str, Any] = {}
    for source in active:
        merged = _deep_merge(merged, source.load())
    if overrides:
        merged = _deep_merge(merged, overrides)
    try:
        return Config.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


__all__ = [
    "CONFIG_FILENAME",
    "ConfigSource",
    "DefaultConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "default_sources",
    "load_config",
]
