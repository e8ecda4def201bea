# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Assemble :class:`Diagnostic` objects from parsed headers and their blocks."""

from __future__ import annotations

import logging

from ..core.models import Diagnostic, RelatedMessage, SourceLocation, SourceRange
from .classify import HeaderWithLocation
from .continuations import ContinuationBlock, SecondaryMessage

LOGGER = logging.getLogger(__name__)


def to_zero_based(token: str | None, *, default: int | None = None) -> int | None:
    """Convert a 1-based numeric token to a 0-based index.

    Args:
        token: Decimal text emitted by the tool, or ``None`` when absent.
        default: Value returned when ``token`` is absent.

    Returns:
        int | None: Zero-based value clamped at ``0``; ``default`` for a missing
        token and ``None`` unless the token is plain ASCII decimal digits.
    """

    if token is None:
        return default
    if not (token.isascii() and token.isdigit()):
        return None
    return max(int(token) - 1, 0)


def header_range(header: HeaderWithLocation, highlight_width: int | None) -> SourceRange | None:
    """Return the primary range for ``header`` or ``None`` when its line is unusable."""

    line0 = to_zero_based(header.line_token)
    if line0 is None:
        return None
    # Older Verilator releases omit the column entirely.
    col0 = to_zero_based(header.column_token, default=0)
    if col0 is None:
        col0 = 0
    end_col0 = col0 + highlight_width if highlight_width is not None else None
    start = SourceLocation(file_path=header.file_path, line0=line0, col0=col0)
    return SourceRange(start=start, end_col0=end_col0)


def secondary_related(message: SecondaryMessage, primary: SourceRange) -> RelatedMessage:
    """Return the related message for a secondary line.

    Messages with their own location replace the header's location and run to
    the end of the line; messages without one inherit the primary range. A
    refining highlight then sets the end column relative to the start column.
    """

    match = message.match
    if match.file_path is not None and match.line1 is not None and match.column1 is not None:
        start = SourceLocation(
            file_path=match.file_path,
            line0=max(match.line1 - 1, 0),
            col0=max(match.column1 - 1, 0),
        )
        location = SourceRange(start=start)
    else:
        location = primary
    if message.highlight_width is not None:
        location = location.with_end(location.start.col0 + message.highlight_width)
    return RelatedMessage(range=location, text=match.text)


def build_diagnostic(header: HeaderWithLocation, block: ContinuationBlock) -> Diagnostic | None:
    """Return the diagnostic for ``header`` and its continuation ``block``.

    Args:
        header: Parsed header carrying a file location.
        block: Continuation data collected for the header.

    Returns:
        Diagnostic | None: Structured diagnostic, or ``None`` when the header's
        line number is missing or not an integer and the block must be dropped.
    """

    primary = header_range(header, block.highlight_width)
    if primary is None:
        LOGGER.debug("dropping header with unparseable line number: %s", header.line_token)
        return None
    related = [secondary_related(message, primary) for message in block.secondaries]
    related.extend(RelatedMessage(range=primary, text=text) for text in block.elaborations)
    return Diagnostic(
        severity=header.severity,
        code=header.code,
        message=header.message,
        range=primary,
        related=tuple(related),
    )


__all__ = ["build_diagnostic", "header_range", "secondary_related", "to_zero_based"]
