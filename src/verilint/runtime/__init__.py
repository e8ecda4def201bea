# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime services: console provisioning and subprocess execution."""

from __future__ import annotations

from .console import ConsoleStyle, RichConsoleManager, detect_tty, get_console_manager
from .process import CommandOptions, SubprocessExecutionError, resolve_argv, run_command

__all__ = [
    "CommandOptions",
    "ConsoleStyle",
    "RichConsoleManager",
    "SubprocessExecutionError",
    "detect_tty",
    "get_console_manager",
    "resolve_argv",
    "run_command",
]
