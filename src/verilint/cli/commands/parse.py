# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command parsing previously captured Verilator output."""

from __future__ import annotations

from pathlib import Path

import typer

from ...diagnostics.index import FileDiagnosticIndex
from ...diagnostics.passthrough import emit_passthrough
from ...parsing.parser import VerilatorOutputParser
from ...reporting.render import ConsoleDiagnosticConsumer, render_json
from ..shared import OutputChoice, build_overrides, exit_code_for, passthrough_sink, resolve_config

STDIN_MARKER = "-"


def _read_source(source: Path | None) -> str:
    if source is None or str(source) == STDIN_MARKER:
        return typer.get_text_stream("stdin").read()
    file_path = source.expanduser().resolve()
    if not file_path.is_file():
        raise typer.BadParameter(f"{source} not found or unreadable", param_hint="FILE")
    return file_path.read_text(encoding="utf-8", errors="replace")


def parse_command(
    source: Path | None = typer.Argument(
        None,
        metavar="[FILE]",
        help="File holding captured Verilator stderr; stdin when omitted or '-'.",
    ),
    root: Path = typer.Option(Path("."), "--root", "-r", help="Project root used for configuration lookup."),
    config_file: Path | None = typer.Option(None, "--config", help="Explicit configuration file."),
    output: OutputChoice | None = typer.Option(None, "--output", "-o", help="Output mode."),
    suffix: list[str] | None = typer.Option(None, "--suffix", help="Recognised source suffix (repeatable)."),
    no_passthrough: bool = typer.Option(False, "--no-passthrough", help="Hide unstructured tool output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable coloured output."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log dropped headers and parser decisions."),
) -> None:
    """Parse captured Verilator output and report the diagnostics it contains."""

    overrides = build_overrides(
        output=output,
        suffixes=suffix,
        no_passthrough=no_passthrough,
        no_color=no_color,
        verbose=verbose,
    )
    config = resolve_config(root.resolve(), config_file, overrides)
    text = _read_source(source)

    result = VerilatorOutputParser(config.verilator.suffixes).parse(text)
    if config.output.output == OutputChoice.JSON.value:
        render_json([result], config.output)
    else:
        emit_passthrough(result.passthrough, passthrough_sink(config))
        index = FileDiagnosticIndex(consumers=[ConsoleDiagnosticConsumer(config.output)])
        index.replace(result.diagnostics)
    raise typer.Exit(code=exit_code_for([result]))


def register(app: typer.Typer) -> None:
    """Register the ``parse`` command on ``app``."""

    app.command(name="parse")(parse_command)


__all__ = ["parse_command", "register"]
