# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Sinks receiving tool output that did not become a structured diagnostic."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol

from ..core.logging import fail, warn
from ..core.models import PassthroughLine
from ..core.severity import Severity

TOOL_LOGGER = "verilint.verilator"


class PassthroughSink(Protocol):
    """Callable accepting passthrough lines for display or logging."""

    def __call__(self, line: PassthroughLine) -> None:
        """Consume ``line``."""
        ...


class LoggingPassthroughSink:
    """Forward passthrough lines to the tool logger at the matching level."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(TOOL_LOGGER)

    def __call__(self, line: PassthroughLine) -> None:
        if line.severity is Severity.WARNING:
            self._logger.warning(line.text)
        else:
            self._logger.error(line.text)


class ConsolePassthroughSink:
    """Print passthrough lines through the shared Rich console helpers."""

    def __init__(self, *, use_color: bool | None = None, use_emoji: bool = False) -> None:
        self._use_color = use_color
        self._use_emoji = use_emoji

    def __call__(self, line: PassthroughLine) -> None:
        if line.severity is Severity.WARNING:
            warn(line.text, use_emoji=self._use_emoji, use_color=self._use_color)
        else:
            fail(line.text, use_emoji=self._use_emoji, use_color=self._use_color)


class CollectingPassthroughSink:
    """Keep passthrough lines in memory."""

    def __init__(self) -> None:
        self.lines: list[PassthroughLine] = []

    def __call__(self, line: PassthroughLine) -> None:
        self.lines.append(line)


def emit_passthrough(lines: Iterable[PassthroughLine], sink: PassthroughSink | None) -> int:
    """Send ``lines`` to ``sink`` in order and return how many were forwarded."""

    if sink is None:
        return 0
    count = 0
    for line in lines:
        sink(line)
        count += 1
    return count


__all__ = [
    "CollectingPassthroughSink",
    "ConsolePassthroughSink",
    "LoggingPassthroughSink",
    "PassthroughSink",
    "TOOL_LOGGER",
    "emit_passthrough",
]
