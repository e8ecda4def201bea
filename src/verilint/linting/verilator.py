# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run Verilator in lint-only mode and feed its stderr through the parser."""

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final

from ..config.models import VerilatorSettings
from ..core.models import ParseResult
from ..diagnostics.index import FileDiagnosticIndex, IndexUpdate
from ..diagnostics.passthrough import PassthroughSink, emit_passthrough
from ..parsing.parser import VerilatorOutputParser
from ..runtime.process import CommandOptions, run_command

LOGGER = logging.getLogger(__name__)

EXECUTABLE_NAME: Final[str] = "verilator"
SYSTEMVERILOG_SUFFIXES: Final[frozenset[str]] = frozenset({".sv", ".svh", ".SV"})

CommandRunner = Callable[[Sequence[str], CommandOptions], CompletedProcess[str]]


@dataclass(frozen=True, slots=True)
class VerilatorCommand:
    """Argument vector and working directory for one lint invocation."""

    args: tuple[str, ...]
    cwd: Path

    def display(self) -> str:
        """Return the command as a shell-quoted string for logging."""

        return shlex.join(self.args)


@dataclass(frozen=True, slots=True)
class LintOutcome:
    """Everything produced by linting one document."""

    document: Path
    command: VerilatorCommand
    returncode: int | None
    result: ParseResult
    update: IndexUpdate

    @property
    def invocation_failed(self) -> bool:
        """Return ``True`` when the executable could not be started."""

        return self.returncode is None


def resolve_executable(settings: VerilatorSettings) -> str:
    """Return the executable to run.

    ``executable_path`` may name the installation directory or the binary itself.
    """

    configured = settings.executable_path
    if configured is None:
        return EXECUTABLE_NAME
    if configured.is_dir():
        return str(configured / EXECUTABLE_NAME)
    return str(configured)


def build_command(document: Path, settings: VerilatorSettings, *, workspace_root: Path) -> VerilatorCommand:
    """Construct the Verilator command linting ``document``.

    Args:
        document: Source file to lint.
        settings: Verilator invocation settings.
        workspace_root: Working directory used unless ``run_at_file_location`` is set.

    Returns:
        VerilatorCommand: Argument vector and working directory.
    """

    folder = document.parent
    args: list[str] = [resolve_executable(settings)]
    if document.suffix in SYSTEMVERILOG_SUFFIXES:
        args.append("-sv")
    args.append("--lint-only")
    args.append(f"-I{folder}")
    args.extend(f"-I{path}" for path in settings.include_paths)
    args.extend(shlex.split(settings.arguments))
    args.append(str(document))
    cwd = folder if settings.run_at_file_location else workspace_root
    return VerilatorCommand(args=tuple(args), cwd=cwd)


def _default_runner(args: Sequence[str], options: CommandOptions) -> CompletedProcess[str]:
    return run_command(args, options=options)


class VerilatorLinter:
    """Lint documents with Verilator and keep the diagnostic index current.

    Each call to :meth:`lint` is one pass: the index contents are replaced by
    that pass's diagnostics, and files no longer reported are cleared.
    """

    def __init__(
        self,
        settings: VerilatorSettings,
        *,
        workspace_root: Path,
        index: FileDiagnosticIndex | None = None,
        sink: PassthroughSink | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        self.settings = settings
        self.workspace_root = workspace_root
        self.index = index or FileDiagnosticIndex()
        self.parser = VerilatorOutputParser(settings.suffixes)
        self._sink = sink
        self._runner: CommandRunner = runner or _default_runner

    def lint(self, document: Path) -> LintOutcome:
        """Run Verilator on ``document`` and publish the resulting diagnostics.

        Args:
            document: Source file to lint.

        Returns:
            LintOutcome: Command, exit status, parse result and index update.
        """

        sequence = self.index.begin_pass()
        command = build_command(document, self.settings, workspace_root=self.workspace_root)
        LOGGER.info("[verilator] Execute")
        LOGGER.info("[verilator]   command: %s", command.display())
        LOGGER.info("[verilator]   cwd    : %s", command.cwd)

        returncode: int | None
        try:
            completed = self._runner(command.args, CommandOptions(cwd=command.cwd, timeout=self.settings.timeout))
        except OSError as exc:
            # Invocation failures flow through the parser as free text.
            LOGGER.debug("verilator invocation failed: %s", exc)
            stderr = str(exc)
            returncode = None
        else:
            stderr = completed.stderr or ""
            returncode = completed.returncode

        result = self.parser.parse(stderr)
        emit_passthrough(result.passthrough, self._sink)
        update = self.index.replace(result.diagnostics, sequence=sequence)
        return LintOutcome(
            document=document,
            command=command,
            returncode=returncode,
            result=result,
            update=update,
        )


__all__ = [
    "CommandRunner",
    "EXECUTABLE_NAME",
    "LintOutcome",
    "VerilatorCommand",
    "VerilatorLinter",
    "build_command",
    "resolve_executable",
]
