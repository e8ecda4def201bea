# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Per-line classification of Verilator output.

Every line is classified exactly once into a :class:`ClassifiedLine`. Header
lines additionally carry a parsed header variant; continuation lines carry the
payload extracted by their matching expression so that later scans never need
to re-run the regular expressions.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from ..core.severity import HEADER_MARKER, Severity, severity_from_marker, severity_from_word
from .lines import LineStream
from .patterns import LinePatterns


class LineKind(str, Enum):
    """Syntactic role of a line within the diagnostic stream."""

    HEADER = "header"
    ELABORATION = "elaboration"
    HIGHLIGHT = "highlight"
    SECONDARY = "secondary"
    PLAIN = "plain"


@dataclass(frozen=True, slots=True)
class HeaderWithLocation:
    """Header line naming a file; line and column tokens are kept verbatim."""

    severity: Severity
    code: str | None
    file_path: str
    line_token: str | None
    column_token: str | None
    message: str


@dataclass(frozen=True, slots=True)
class HeaderWithoutLocation:
    """Header line whose message carries no file location."""

    severity: Severity
    code: str | None
    message: str


@dataclass(frozen=True, slots=True)
class Unrecognized:
    """Line starting with ``%`` that does not follow the header grammar."""

    text: str


HeaderParse: TypeAlias = HeaderWithLocation | HeaderWithoutLocation | Unrecognized


@dataclass(frozen=True, slots=True)
class SecondaryMatch:
    """Payload of a secondary message; location fields are all set or all ``None``."""

    text: str
    file_path: str | None = None
    line1: int | None = None
    column1: int | None = None


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    """Line text plus the classification computed for it."""

    index: int
    text: str
    kind: LineKind
    header: HeaderParse | None = None
    elaboration: str | None = None
    highlight_width: int | None = None
    secondary: SecondaryMatch | None = None

    @property
    def starts_block(self) -> bool:
        """Return ``True`` for any ``%`` line, recognised or not."""

        return self.kind is LineKind.HEADER


def parse_header(text: str, patterns: LinePatterns) -> HeaderParse:
    """Parse a ``%`` line into one of the header variants.

    Args:
        text: Raw line text.
        patterns: Compiled expressions for the active suffix set.

    Returns:
        HeaderParse: ``HeaderWithLocation`` when a file path was recognised,
        ``HeaderWithoutLocation`` when only a message follows the severity, and
        ``Unrecognized`` otherwise.
    """

    match = patterns.header.match(text)
    if match is None:
        return Unrecognized(text)
    severity = severity_from_word(match.group("severity"))
    code = match.group("code")
    message = match.group("message")
    file_path = match.group("file")
    if file_path is None:
        return HeaderWithoutLocation(severity=severity, code=code, message=message)
    return HeaderWithLocation(
        severity=severity,
        code=code,
        file_path=file_path.strip(),
        line_token=match.group("line"),
        column_token=match.group("column"),
        message=message,
    )


def classify_line(index: int, text: str, patterns: LinePatterns) -> ClassifiedLine:
    """Return the :class:`ClassifiedLine` for ``text`` at ``index``."""

    if text.startswith(HEADER_MARKER):
        return ClassifiedLine(index, text, LineKind.HEADER, header=parse_header(text, patterns))

    elaboration = patterns.elaboration.match(text)
    if elaboration is not None:
        return ClassifiedLine(index, text, LineKind.ELABORATION, elaboration=elaboration.group("text").rstrip())

    highlight = patterns.highlight.search(text)
    if highlight is not None:
        return ClassifiedLine(index, text, LineKind.HIGHLIGHT, highlight_width=len(highlight.group("highlight")))

    secondary = patterns.secondary.match(text)
    if secondary is not None:
        file_path = secondary.group("file")
        payload = SecondaryMatch(
            text=secondary.group("text").rstrip(),
            file_path=file_path.strip() if file_path is not None else None,
            line1=int(secondary.group("line")) if file_path is not None else None,
            column1=int(secondary.group("column")) if file_path is not None else None,
        )
        return ClassifiedLine(index, text, LineKind.SECONDARY, secondary=payload)

    return ClassifiedLine(index, text, LineKind.PLAIN)


def classify_stream(stream: LineStream, patterns: LinePatterns) -> tuple[ClassifiedLine, ...]:
    """Classify every line of ``stream`` once, in order."""

    return tuple(classify_line(line.index, line.text, patterns) for line in stream)


def resolve_plain_severities(lines: Sequence[ClassifiedLine]) -> tuple[Severity, ...]:
    """Return the context severity of each line.

    The context severity of a line is the severity of the nearest line at or
    before it that starts with ``%Error`` or ``%Warning``. Lines with no such
    predecessor default to :attr:`Severity.ERROR`, which covers free text such
    as start-up failures printed before any header.

    Args:
        lines: Classified lines of a single pass.

    Returns:
        tuple[Severity, ...]: One severity per input line.
    """

    resolved: list[Severity] = []
    current = Severity.ERROR
    for line in lines:
        marker = severity_from_marker(line.text)
        if marker is not None:
            current = marker
        resolved.append(current)
    return tuple(resolved)


__all__ = [
    "ClassifiedLine",
    "HeaderParse",
    "HeaderWithLocation",
    "HeaderWithoutLocation",
    "LineKind",
    "SecondaryMatch",
    "Unrecognized",
    "classify_line",
    "classify_stream",
    "parse_header",
    "resolve_plain_severities",
]
