# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core models and helpers shared across verilint."""

from __future__ import annotations

from .models import (
    Diagnostic,
    DiagnosticSet,
    LineIssue,
    LineIssueKind,
    ParseResult,
    PassthroughLine,
    RelatedMessage,
    SourceLocation,
    SourceRange,
)
from .severity import Severity, passthrough_severity, severity_from_marker, severity_from_word

__all__ = [
    "Diagnostic",
    "DiagnosticSet",
    "LineIssue",
    "LineIssueKind",
    "ParseResult",
    "PassthroughLine",
    "RelatedMessage",
    "Severity",
    "SourceLocation",
    "SourceRange",
    "passthrough_severity",
    "severity_from_marker",
    "severity_from_word",
]
