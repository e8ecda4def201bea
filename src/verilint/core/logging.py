# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console status lines and the package logger."""

from __future__ import annotations

import logging
import sys
from typing import Final

from rich.text import Text

from ..runtime.console import detect_tty, get_console_manager

PACKAGE_LOGGER: Final[str] = "verilint"

# level -> (rich style, emoji prefix)
_STATUS_STYLES: Final[dict[str, tuple[str, str]]] = {
    "ok": ("green", "✅ "),
    "warn": ("yellow", "⚠️ "),
    "fail": ("red", "❌ "),
}


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def status(level: str, msg: str, *, use_emoji: bool = False, use_color: bool | None = None) -> None:
    """Print ``msg`` as a single status line styled for ``level``.

    Args:
        level: One of ``ok``, ``warn`` or ``fail``.
        msg: Text printed verbatim; Rich markup in it is not interpreted.
        use_emoji: Prefix the line with the level's emoji.
        use_color: Force colour on or off; ``None`` follows TTY detection.
    """

    style, symbol = _STATUS_STYLES[level]
    colored = detect_tty() if use_color is None else use_color
    line = Text(emoji(symbol, use_emoji) + msg)
    if colored:
        line.stylize(style)
    get_console_manager().get(color=colored, emoji=use_emoji).print(line)


def ok(msg: str, *, use_emoji: bool = False, use_color: bool | None = None) -> None:
    status("ok", msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool = False, use_color: bool | None = None) -> None:
    status("warn", msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool = False, use_color: bool | None = None) -> None:
    status("fail", msg, use_emoji=use_emoji, use_color=use_color)


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Route ``verilint`` log records to stderr.

    Args:
        verbose: Emit ``DEBUG`` records (dropped headers, stale passes, commands) when ``True``.

    Returns:
        logging.Logger: The configured package logger.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if getattr(logger, "_verilint_configured", False):
        return logger
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    setattr(logger, "_verilint_configured", True)
    return logger


__all__ = ["PACKAGE_LOGGER", "configure_logging", "emoji", "fail", "ok", "status", "warn"]
