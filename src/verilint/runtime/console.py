# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared Rich consoles for reports, passthrough lines and JSON documents."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import lru_cache

from rich.console import Console


def detect_tty() -> bool:
    """Return ``True`` when stdout is attached to a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@dataclass(frozen=True, slots=True)
class ConsoleStyle:
    """Presentation flags a console is created for."""

    color: bool
    emoji: bool
    tty: bool

    @property
    def ansi(self) -> bool:
        """Return ``True`` when ANSI styling should reach the output stream."""

        return self.color and self.tty


class RichConsoleManager:
    """Create one Rich :class:`Console` per :class:`ConsoleStyle` and reuse it.

    Consoles are built without an explicit file so they always write to the
    current ``sys.stdout``. Soft wrapping keeps long tool lines and JSON
    documents intact.
    """

    def __init__(self) -> None:
        self._consoles: dict[ConsoleStyle, Console] = {}

    def get(self, *, color: bool, emoji: bool) -> Console:
        """Return the console for the requested colour and emoji preferences."""

        style = ConsoleStyle(color=color, emoji=emoji, tty=detect_tty())
        console = self._consoles.get(style)
        if console is None:
            console = Console(
                color_system="auto" if style.ansi else None,
                force_terminal=style.tty,
                no_color=not style.ansi,
                emoji=style.emoji,
                soft_wrap=True,
            )
            self._consoles[style] = console
        return console


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    """Return the process-wide :class:`RichConsoleManager`."""

    return RichConsoleManager()


__all__ = ["ConsoleStyle", "RichConsoleManager", "detect_tty", "get_console_manager"]
