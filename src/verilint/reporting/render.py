# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Render diagnostic sets in concise, pretty and JSON output modes."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..config.models import OutputConfig
from ..core.models import Diagnostic, DiagnosticSet, ParseResult, SourceRange
from ..core.severity import Severity
from ..diagnostics.index import IndexUpdate
from ..runtime.console import get_console_manager

LOCATION_SEPARATOR: Final[str] = ":"
MISSING_CODE_PLACEHOLDER: Final[str] = "-"


def severity_color(sev: Severity) -> str:
    """Return the rich colour name associated with a severity level."""

    return {
        Severity.ERROR: "red",
        Severity.WARNING: "yellow",
        Severity.INFORMATION: "cyan",
    }.get(sev, "yellow")


def format_location(location: SourceRange) -> str:
    """Return ``file:line:col`` using 1-based numbers for display."""

    start = location.start
    return LOCATION_SEPARATOR.join((start.file_path, str(start.line0 + 1), str(start.col0 + 1)))


def format_span(location: SourceRange) -> str:
    """Return the 1-based column span, ``N-`` when the range is unbounded."""

    first = location.start.col0 + 1
    if location.end_col0 is None:
        return f"{first}-"
    return f"{first}-{location.end_col0}"


def format_concise(diagnostic: Diagnostic) -> list[str]:
    """Return the concise lines describing ``diagnostic`` and its related messages."""

    label = diagnostic.severity.value
    if diagnostic.code:
        label = f"{label}[{diagnostic.code}]"
    lines = [f"{format_location(diagnostic.range)}: {label}: {diagnostic.message}"]
    lines.extend(f"    {format_location(related.range)}: {related.text}" for related in diagnostic.related)
    return lines


def _console(cfg: OutputConfig) -> Console:
    return get_console_manager().get(color=cfg.color, emoji=cfg.emoji)


def render_concise(diagnostics: DiagnosticSet, cfg: OutputConfig) -> None:
    """Render diagnostics one per line, related messages indented below."""

    console = _console(cfg)
    for diagnostic in diagnostics.iter_diagnostics():
        head, *related = format_concise(diagnostic)
        text = Text(head)
        if cfg.color:
            text.stylize(severity_color(diagnostic.severity))
        console.print(text)
        for line in related:
            console.print(Text(line))


def render_pretty(diagnostics: DiagnosticSet, cfg: OutputConfig) -> None:
    """Render one Rich table per file."""

    console = _console(cfg)
    for path in diagnostics.paths():
        table = Table(title=path, box=box.SIMPLE, expand=True)
        table.add_column("Line", justify="right")
        table.add_column("Cols")
        table.add_column("Severity", style="bold")
        table.add_column("Code")
        table.add_column("Message", overflow="fold")
        for diagnostic in diagnostics.get(path):
            style = severity_color(diagnostic.severity) if cfg.color else ""
            message = Text(diagnostic.message)
            for related in diagnostic.related:
                message.append(f"\n  {format_location(related.range)}: {related.text}", style="dim")
            table.add_row(
                str(diagnostic.range.start.line0 + 1),
                format_span(diagnostic.range),
                Text(diagnostic.severity.value, style=style),
                diagnostic.code or MISSING_CODE_PLACEHOLDER,
                message,
            )
        console.print(table)


def result_payload(result: ParseResult, *, include_passthrough: bool = True) -> dict[str, object]:
    """Return a JSON-compatible mapping describing ``result``."""

    payload: dict[str, object] = {"files": result.diagnostics.model_dump(mode="json")["files"]}
    if include_passthrough:
        payload["passthrough"] = [line.model_dump(mode="json") for line in result.passthrough]
    return payload


def render_json(results: Sequence[ParseResult], cfg: OutputConfig) -> None:
    """Render one JSON document covering ``results``."""

    console = get_console_manager().get(color=False, emoji=False)
    documents = [result_payload(result, include_passthrough=cfg.passthrough) for result in results]
    body = documents[0] if len(documents) == 1 else documents
    console.print(json.dumps(body, indent=2), markup=False, highlight=False)


def render_diagnostics(diagnostics: DiagnosticSet, cfg: OutputConfig) -> None:
    """Dispatch to the renderer selected by ``cfg.output`` (JSON excluded)."""

    if cfg.output == "pretty":
        render_pretty(diagnostics, cfg)
    else:
        render_concise(diagnostics, cfg)


class ConsoleDiagnosticConsumer:
    """Presentation layer printing each applied index update to the console."""

    def __init__(self, cfg: OutputConfig) -> None:
        self._cfg = cfg

    def publish(self, update: IndexUpdate) -> None:
        """Render ``update``, announcing files whose diagnostics were cleared."""

        if not update.applied:
            return
        render_diagnostics(update.diagnostics, self._cfg)
        console = _console(self._cfg)
        for path in update.cleared:
            console.print(Text(f"{path}: cleared", style="dim" if self._cfg.color else ""))


__all__ = [
    "ConsoleDiagnosticConsumer",
    "format_concise",
    "format_location",
    "format_span",
    "render_concise",
    "render_diagnostics",
    "render_json",
    "render_pretty",
    "result_payload",
    "severity_color",
]
