# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Collect the continuation block that follows a diagnostic header.

A block spans the lines after a header up to, but excluding, the next line
starting with ``%``. Three independent scans run over that window:

* the elaboration run (``: ... text``) directly under the header,
* the first highlight line, which sizes the header's range,
* the secondary messages (``[file:line:col:] ... text``) and the highlight that
  refines each of them.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .classify import ClassifiedLine, LineKind, SecondaryMatch


@dataclass(frozen=True, slots=True)
class SecondaryMessage:
    """Secondary message together with the width of the highlight refining it."""

    match: SecondaryMatch
    highlight_width: int | None = None


@dataclass(frozen=True, slots=True)
class ContinuationBlock:
    """Result of scanning one header's continuation window."""

    elaborations: tuple[str, ...] = ()
    highlight_width: int | None = None
    secondaries: tuple[SecondaryMessage, ...] = ()


@dataclass(slots=True)
class _SecondaryState:
    messages: list[SecondaryMessage] = field(default_factory=list)
    awaiting_highlight: bool = False


def block_window(lines: Sequence[ClassifiedLine], header_index: int) -> Sequence[ClassifiedLine]:
    """Return the continuation lines following ``header_index``.

    Args:
        lines: Classified lines of the whole pass.
        header_index: Index of the header opening the block.

    Returns:
        Sequence[ClassifiedLine]: Lines in ``[header_index + 1, next header)``.
    """

    stop = header_index + 1
    while stop < len(lines) and not lines[stop].starts_block:
        stop += 1
    return lines[header_index + 1 : stop]


def collect_elaborations(window: Sequence[ClassifiedLine]) -> tuple[str, ...]:
    """Return the contiguous elaboration messages at the top of ``window``."""

    messages: list[str] = []
    for line in window:
        if line.kind is not LineKind.ELABORATION or line.elaboration is None:
            break
        messages.append(line.elaboration)
    return tuple(messages)


def find_primary_highlight(window: Sequence[ClassifiedLine]) -> int | None:
    """Return the width of the first highlight marker in ``window``, if any."""

    for line in window:
        if line.kind is LineKind.HIGHLIGHT:
            return line.highlight_width
    return None


def collect_secondaries(window: Sequence[ClassifiedLine]) -> tuple[SecondaryMessage, ...]:
    """Return the secondary messages of ``window`` in discovery order.

    A highlight line refines the most recently collected secondary message,
    once. Highlights seen before the first secondary message, or after the
    latest one was already refined, are ignored.

    Args:
        window: Continuation lines of a single block.

    Returns:
        tuple[SecondaryMessage, ...]: Messages with their optional highlight width.
    """

    state = _SecondaryState()
    for line in window:
        if line.kind is LineKind.SECONDARY and line.secondary is not None:
            state.messages.append(SecondaryMessage(line.secondary))
            state.awaiting_highlight = True
        elif line.kind is LineKind.HIGHLIGHT and state.awaiting_highlight:
            latest = state.messages[-1]
            state.messages[-1] = SecondaryMessage(latest.match, line.highlight_width)
            state.awaiting_highlight = False
    return tuple(state.messages)


def collect_block(lines: Sequence[ClassifiedLine], header_index: int) -> ContinuationBlock:
    """Run the three continuation scans for the header at ``header_index``.

    Args:
        lines: Classified lines of the whole pass.
        header_index: Index of a header line with a recognised location.

    Returns:
        ContinuationBlock: Elaborations, primary highlight width and secondary messages.
    """

    window = block_window(lines, header_index)
    return ContinuationBlock(
        elaborations=collect_elaborations(window),
        highlight_width=find_primary_highlight(window),
        secondaries=collect_secondaries(window),
    )


__all__ = [
    "ContinuationBlock",
    "SecondaryMessage",
    "block_window",
    "collect_block",
    "collect_elaborations",
    "collect_secondaries",
    "find_primary_highlight",
]
