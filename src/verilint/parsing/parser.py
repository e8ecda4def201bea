# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parse captured Verilator output into a :class:`ParseResult`."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ..core.models import Diagnostic, LineIssue, LineIssueKind, ParseResult, PassthroughLine
from ..core.severity import Severity, passthrough_severity
from ..diagnostics.index import group_by_file
from .builder import build_diagnostic
from .classify import (
    ClassifiedLine,
    HeaderWithLocation,
    HeaderWithoutLocation,
    LineKind,
    classify_stream,
    resolve_plain_severities,
)
from .continuations import collect_block
from .lines import LineStream
from .patterns import DEFAULT_SUFFIXES, LinePatterns, compile_patterns

LOGGER = logging.getLogger(__name__)


class _PassCollector:
    """Mutable accumulator owned by a single parse pass."""

    __slots__ = ("diagnostics", "issues", "passthrough")

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []
        self.passthrough: list[PassthroughLine] = []
        self.issues: list[LineIssue] = []

    def forward(self, line: ClassifiedLine, severity: Severity) -> None:
        self.passthrough.append(PassthroughLine(severity=severity, text=line.text, index=line.index))

    def record(self, line: ClassifiedLine, kind: LineIssueKind) -> None:
        self.issues.append(LineIssue(index=line.index, kind=kind, text=line.text))

    def result(self) -> ParseResult:
        return ParseResult(
            diagnostics=group_by_file(self.diagnostics),
            passthrough=tuple(self.passthrough),
            issues=tuple(self.issues),
        )


class VerilatorOutputParser:
    """Stateless parser turning one captured text block into structured diagnostics.

    Each call to :meth:`parse` is an independent pass: the input is split into
    lines, every line is classified once, header blocks are collected and built
    into diagnostics, and everything that did not become a diagnostic is
    returned as passthrough text. The parser performs no I/O and never raises
    for malformed input.
    """

    def __init__(self, suffixes: Iterable[str] = DEFAULT_SUFFIXES) -> None:
        self._patterns: LinePatterns = compile_patterns(tuple(suffixes))

    @property
    def suffixes(self) -> tuple[str, ...]:
        """Return the recognised source suffixes, longest first."""

        return self._patterns.suffixes

    def parse(self, text: str | None) -> ParseResult:
        """Parse ``text`` and return the diagnostics and passthrough lines of the pass.

        Args:
            text: Complete stderr text captured from one tool invocation.

        Returns:
            ParseResult: File-grouped diagnostics, passthrough lines and line issues.
        """

        if not text or not text.strip():
            return ParseResult()
        lines = classify_stream(LineStream.from_text(text), self._patterns)
        return self._build(lines)

    def _build(self, lines: Sequence[ClassifiedLine]) -> ParseResult:
        context = resolve_plain_severities(lines)
        collector = _PassCollector()
        for line in lines:
            if not line.text.strip():
                continue
            if line.kind is not LineKind.HEADER:
                collector.forward(line, context[line.index])
                continue
            header = line.header
            if isinstance(header, HeaderWithLocation):
                diagnostic = build_diagnostic(header, collect_block(lines, line.index))
                if diagnostic is not None:
                    collector.diagnostics.append(diagnostic)
                    continue
                collector.record(line, LineIssueKind.UNPARSEABLE_LINE_NUMBER)
                collector.forward(line, passthrough_severity(header.severity))
            elif isinstance(header, HeaderWithoutLocation):
                collector.record(line, LineIssueKind.MISSING_LOCATION)
                collector.forward(line, passthrough_severity(header.severity))
            else:
                LOGGER.debug("unrecognised header line %d: %s", line.index, line.text)
                collector.record(line, LineIssueKind.UNRECOGNIZED_LINE)
                collector.forward(line, context[line.index])
        return collector.result()


def parse_output(text: str | None, *, suffixes: Iterable[str] = DEFAULT_SUFFIXES) -> ParseResult:
    """Parse ``text`` with a parser configured for ``suffixes``."""

    return VerilatorOutputParser(suffixes).parse(text)


__all__ = ["VerilatorOutputParser", "parse_output"]
