# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (configuration, errors, exit codes)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum
from pathlib import Path
from typing import Any, Final

import typer

from ..config import Config, ConfigError, load_config
from ..core.logging import configure_logging
from ..core.logging import fail as core_fail
from ..core.models import ParseResult
from ..core.severity import Severity
from ..diagnostics.passthrough import ConsolePassthroughSink, PassthroughSink

EXIT_OK: Final[int] = 0
EXIT_DIAGNOSTICS: Final[int] = 1
EXIT_CONFIG_ERROR: Final[int] = 2


class OutputChoice(str, Enum):
    """Output modes selectable from the command line."""

    CONCISE = "concise"
    PRETTY = "pretty"
    JSON = "json"


def build_overrides(
    *,
    output: OutputChoice | None,
    suffixes: Sequence[str] | None,
    no_passthrough: bool,
    no_color: bool,
    verbose: bool,
) -> dict[str, Any]:
    """Translate CLI flags into a configuration override fragment."""

    output_section: dict[str, Any] = {}
    if output is not None:
        output_section["output"] = output.value
    if no_passthrough:
        output_section["passthrough"] = False
    if no_color:
        output_section["color"] = False
    if verbose:
        output_section["verbose"] = True
    overrides: dict[str, Any] = {}
    if output_section:
        overrides["output"] = output_section
    if suffixes:
        overrides["verilator"] = {"suffixes": list(suffixes)}
    return overrides


def resolve_config(root: Path, config_file: Path | None, overrides: dict[str, Any]) -> Config:
    """Load configuration for ``root`` or exit with :data:`EXIT_CONFIG_ERROR`.

    Args:
        root: Project root searched for configuration files.
        config_file: Optional explicit configuration file.
        overrides: Fragment built from command-line flags.

    Returns:
        Config: Validated configuration with logging configured.
    """

    try:
        config = load_config(root, config_file=config_file, overrides=overrides)
    except ConfigError as exc:
        core_fail(str(exc), use_emoji=False)
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from exc
    configure_logging(verbose=config.output.verbose)
    return config


def passthrough_sink(config: Config) -> PassthroughSink | None:
    """Return the console sink when passthrough output is enabled."""

    if not config.output.passthrough or config.output.output == OutputChoice.JSON.value:
        return None
    return ConsolePassthroughSink(use_color=config.output.color, use_emoji=config.output.emoji)


def exit_code_for(results: Iterable[ParseResult], *, invocation_failed: bool = False) -> int:
    """Return :data:`EXIT_DIAGNOSTICS` when any error was reported."""

    if invocation_failed:
        return EXIT_DIAGNOSTICS
    for result in results:
        if result.diagnostics.count(Severity.ERROR):
            return EXIT_DIAGNOSTICS
    return EXIT_OK


__all__ = [
    "EXIT_CONFIG_ERROR",
    "EXIT_DIAGNOSTICS",
    "EXIT_OK",
    "OutputChoice",
    "build_overrides",
    "exit_code_for",
    "passthrough_sink",
    "resolve_config",
]
