# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console and JSON rendering of diagnostics."""

from __future__ import annotations

from .render import (
    ConsoleDiagnosticConsumer,
    format_concise,
    format_location,
    format_span,
    render_concise,
    render_diagnostics,
    render_json,
    render_pretty,
    result_payload,
)

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
]
