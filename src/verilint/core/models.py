# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the verilint package."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .severity import Severity

DEFAULT_SOURCE = "verilator"


class SourceLocation(BaseModel):
    """Zero-based position inside a source file."""

    model_config = ConfigDict(frozen=True)

    file_path: str
    line0: int = Field(ge=0)
    col0: int = Field(ge=0)


class SourceRange(BaseModel):
    """Single-line range starting at ``start``.

    ``end_col0`` set to ``None`` marks the range as unbounded: it extends to the
    end of the line because no highlight could size it.
    """

    model_config = ConfigDict(frozen=True)

    start: SourceLocation
    end_col0: int | None = None

    @property
    def unbounded(self) -> bool:
        """Return ``True`` when the range runs to the end of the line."""

        return self.end_col0 is None

    @property
    def file_path(self) -> str:
        """Return the file the range belongs to."""

        return self.start.file_path

    def with_end(self, end_col0: int | None) -> SourceRange:
        """Return a copy of the range ending at ``end_col0``.

        Args:
            end_col0: Replacement end column, ``None`` for an unbounded range.

        Returns:
            SourceRange: Range sharing ``start`` with the new end column.
        """

        return SourceRange(start=self.start, end_col0=end_col0)


class RelatedMessage(BaseModel):
    """Auxiliary message attached to a diagnostic."""

    model_config = ConfigDict(frozen=True)

    range: SourceRange
    text: str


class Diagnostic(BaseModel):
    """Structured diagnostic recovered from one header line and its continuation block."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    code: str | None = None
    message: str
    range: SourceRange
    related: tuple[RelatedMessage, ...] = Field(default_factory=tuple)
    source: str = DEFAULT_SOURCE

    @property
    def file_path(self) -> str:
        """Return the file the diagnostic is reported against."""

        return self.range.file_path


class PassthroughLine(BaseModel):
    """Raw tool output forwarded for display without structure."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    text: str
    index: int = Field(default=0, ge=0)


class LineIssueKind(str, Enum):
    """Reasons a line failed to become part of a structured diagnostic."""

    UNRECOGNIZED_LINE = "unrecognized-line"
    MISSING_LOCATION = "missing-location"
    UNPARSEABLE_LINE_NUMBER = "unparseable-line-number"


class LineIssue(BaseModel):
    """Record describing why a ``%`` line yielded no diagnostic."""

    model_config = ConfigDict(frozen=True)

    index: int
    kind: LineIssueKind
    text: str


class DiagnosticSet(BaseModel):
    """Diagnostics of one parse pass grouped by file path in discovery order."""

    model_config = ConfigDict(frozen=True)

    files: dict[str, tuple[Diagnostic, ...]] = Field(default_factory=dict)

    def paths(self) -> tuple[str, ...]:
        """Return the file paths in first-seen order."""

        return tuple(self.files)

    def get(self, path: str) -> tuple[Diagnostic, ...]:
        """Return the diagnostics recorded for ``path`` (empty when absent)."""

        return self.files.get(path, ())

    def count(self, severity: Severity | None = None) -> int:
        """Return the number of diagnostics, optionally filtered by ``severity``."""

        if severity is None:
            return len(self)
        return sum(1 for diagnostic in self.iter_diagnostics() if diagnostic.severity is severity)

    def iter_diagnostics(self) -> Iterator[Diagnostic]:
        """Yield every diagnostic, file by file, in discovery order."""

        for diagnostics in self.files.values():
            yield from diagnostics

    def __len__(self) -> int:
        return sum(len(diagnostics) for diagnostics in self.files.values())

    def __bool__(self) -> bool:
        return bool(self.files)


class ParseResult(BaseModel):
    """Complete output of a single parse pass."""

    model_config = ConfigDict(frozen=True)

    diagnostics: DiagnosticSet = Field(default_factory=DiagnosticSet)
    passthrough: tuple[PassthroughLine, ...] = Field(default_factory=tuple)
    issues: tuple[LineIssue, ...] = Field(default_factory=tuple)


__all__ = [
    "DEFAULT_SOURCE",
    "Diagnostic",
    "DiagnosticSet",
    "LineIssue",
    "LineIssueKind",
    "ParseResult",
    "PassthroughLine",
    "RelatedMessage",
    "SourceLocation",
    "SourceRange",
]
