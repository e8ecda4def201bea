# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final

HEADER_MARKER: Final[str] = "%"
ERROR_MARKER: Final[str] = "%Error"
WARNING_MARKER: Final[str] = "%Warning"


class Severity(str, Enum):
    """Severity levels reported by Verilator diagnostics."""

    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"


def severity_from_word(word: str) -> Severity:
    """Map the word following ``%`` in a header line to a :class:`Severity`.

    Args:
        word: Severity word such as ``Error`` or ``Warning``.

    Returns:
        Severity: ``ERROR`` or ``WARNING`` for matching prefixes, ``INFORMATION`` otherwise.
    """

    if word.startswith("Error"):
        return Severity.ERROR
    if word.startswith("Warning"):
        return Severity.WARNING
    return Severity.INFORMATION


def severity_from_marker(line: str) -> Severity | None:
    """Return the severity announced by a header marker at the start of ``line``."""

    if line.startswith(ERROR_MARKER):
        return Severity.ERROR
    if line.startswith(WARNING_MARKER):
        return Severity.WARNING
    return None


def passthrough_severity(severity: Severity) -> Severity:
    """Collapse ``severity`` onto the two levels used for passthrough text."""

    return Severity.WARNING if severity is Severity.WARNING else Severity.ERROR


__all__ = [
    "ERROR_MARKER",
    "HEADER_MARKER",
    "Severity",
    "WARNING_MARKER",
    "passthrough_severity",
    "severity_from_marker",
    "severity_from_word",
]
