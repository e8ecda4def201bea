# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tool invocation for Verilator lint runs."""

from __future__ import annotations

from .verilator import LintOutcome, VerilatorCommand, VerilatorLinter, build_command, resolve_executable

__all__ = ["LintOutcome", "VerilatorCommand", "VerilatorLinter", "build_command", "resolve_executable"]
