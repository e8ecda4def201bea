# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostic storage and passthrough delivery."""

from __future__ import annotations

from .index import DiagnosticConsumer, FileDiagnosticIndex, IndexUpdate, group_by_file
from .passthrough import (
    CollectingPassthroughSink,
    ConsolePassthroughSink,
    LoggingPassthroughSink,
    PassthroughSink,
    emit_passthrough,
)

__all__ = [
    "CollectingPassthroughSink",
    "ConsolePassthroughSink",
    "DiagnosticConsumer",
    "FileDiagnosticIndex",
    "IndexUpdate",
    "LoggingPassthroughSink",
    "PassthroughSink",
    "emit_passthrough",
    "group_by_file",
]
