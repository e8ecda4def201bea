# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for verilint."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..parsing.patterns import DEFAULT_SUFFIXES, normalize_suffixes


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


OutputMode = Literal["concise", "pretty", "json"]


class VerilatorSettings(BaseModel):
    """How the Verilator executable is located and invoked."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    executable_path: Path | None = None
    arguments: str = ""
    include_paths: list[Path] = Field(default_factory=list)
    run_at_file_location: bool = False
    suffixes: tuple[str, ...] = DEFAULT_SUFFIXES
    timeout: float | None = Field(default=None, ge=0)

    @field_validator("suffixes", mode="after")
    @classmethod
    def _order_suffixes(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Validate suffixes and order them longest first.

        Args:
            value: Suffixes supplied by the user.

        Returns:
            tuple[str, ...]: Normalised suffix tuple.
        """

        return normalize_suffixes(value)


class OutputConfig(BaseModel):
    """Configuration for controlling console output."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    output: OutputMode = "concise"
    color: bool = True
    emoji: bool = False
    passthrough: bool = True
    verbose: bool = False


class Config(BaseModel):
    """Root configuration object."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    verilator: VerilatorSettings = Field(default_factory=VerilatorSettings)
    output: OutputConfig = Field(default_factory=OutputConfig)

    def to_dict(self) -> dict[str, object]:
        """Return the configuration as plain JSON-compatible data."""

        return self.model_dump(mode="json")


__all__ = ["Config", "ConfigError", "OutputConfig", "OutputMode", "VerilatorSettings"]
