# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command running Verilator on source files."""

from __future__ import annotations

from pathlib import Path

import typer

from ...core.logging import ok as core_ok
from ...diagnostics.index import FileDiagnosticIndex
from ...linting.verilator import LintOutcome, VerilatorLinter
from ...reporting.render import ConsoleDiagnosticConsumer, render_json
from ..shared import OutputChoice, build_overrides, exit_code_for, passthrough_sink, resolve_config


def lint_command(
    documents: list[Path] = typer.Argument(..., metavar="DOCUMENT...", help="Verilog/SystemVerilog files to lint."),
    root: Path = typer.Option(Path("."), "--root", "-r", help="Workspace root and configuration lookup directory."),
    config_file: Path | None = typer.Option(None, "--config", help="Explicit configuration file."),
    output: OutputChoice | None = typer.Option(None, "--output", "-o", help="Output mode."),
    suffix: list[str] | None = typer.Option(None, "--suffix", help="Recognised source suffix (repeatable)."),
    no_passthrough: bool = typer.Option(False, "--no-passthrough", help="Hide unstructured tool output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable coloured output."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log commands and parser decisions."),
) -> None:
    """Lint each document with Verilator and report its diagnostics."""

    overrides = build_overrides(
        output=output,
        suffixes=suffix,
        no_passthrough=no_passthrough,
        no_color=no_color,
        verbose=verbose,
    )
    workspace_root = root.resolve()
    config = resolve_config(workspace_root, config_file, overrides)
    json_mode = config.output.output == OutputChoice.JSON.value

    index = FileDiagnosticIndex()
    if not json_mode:
        index.subscribe(ConsoleDiagnosticConsumer(config.output))
    linter = VerilatorLinter(
        config.verilator,
        workspace_root=workspace_root,
        index=index,
        sink=passthrough_sink(config),
    )
    outcomes: list[LintOutcome] = []
    for document in documents:
        outcome = linter.lint(document.expanduser().resolve())
        outcomes.append(outcome)
        if not json_mode and not outcome.invocation_failed and not outcome.result.diagnostics:
            core_ok(f"{outcome.document}: no diagnostics", use_emoji=config.output.emoji, use_color=config.output.color)

    if json_mode:
        render_json([outcome.result for outcome in outcomes], config.output)
    failed = any(outcome.invocation_failed for outcome in outcomes)
    raise typer.Exit(code=exit_code_for((outcome.result for outcome in outcomes), invocation_failed=failed))


def register(app: typer.Typer) -> None:
    """Register the ``lint`` command on ``app``."""

    app.command(name="lint")(lint_command)


__all__ = ["lint_command", "register"]
