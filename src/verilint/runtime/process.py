# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shell-free execution of external tools such as Verilator."""

from __future__ import annotations

import shutil

# Bandit: arguments are always passed as a list; ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final

TIMEOUT_RETURNCODE: Final[int] = 124


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """How a tool process is started and how its result is reported."""

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    check: bool = False
    capture_output: bool = True
    text: bool = True
    timeout: float | None = None
    discard_stdin: bool = True
    encoding: str = "utf-8"
    errors: str = "replace"


class SubprocessExecutionError(RuntimeError):
    """A checked command exited with a non-zero status."""

    def __init__(self, command: Sequence[str], completed: CompletedProcess[str]) -> None:
        stderr = completed.stderr if isinstance(completed.stderr, str) else None
        super().__init__(f"{command[0]} exited with status {completed.returncode}: {stderr or '<no stderr>'}")
        self.command = tuple(command)
        self.returncode = completed.returncode
        self.stdout = completed.stdout if isinstance(completed.stdout, str) else None
        self.stderr = stderr


def resolve_argv(args: Sequence[str]) -> list[str]:
    """Return ``args`` with the executable replaced by its resolved path.

    Raises:
        ValueError: If ``args`` is empty.
        FileNotFoundError: If the executable does not exist or is not on ``PATH``.
    """

    if not args:
        raise ValueError("a command needs at least the executable")
    executable, *rest = args
    if Path(executable).is_absolute():
        if not Path(executable).exists():
            raise FileNotFoundError(f"Executable '{executable}' does not exist")
        return [executable, *rest]
    found = shutil.which(executable)
    if found is None:
        raise FileNotFoundError(f"Executable '{executable}' was not found on PATH")
    return [found, *rest]


def _as_text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode(errors="replace")
    return value


def _timed_out(argv: list[str], exc: subprocess.TimeoutExpired) -> CompletedProcess[str]:
    note = f"Command timed out after {exc.timeout:.1f}s"
    captured = _as_text(exc.stderr)
    return CompletedProcess(
        args=argv,
        returncode=TIMEOUT_RETURNCODE,
        stdout=_as_text(exc.stdout),
        stderr=f"{captured}\n{note}" if captured else note,
    )


def run_command(args: Sequence[str], *, options: CommandOptions | None = None) -> CompletedProcess[str]:
    """Run ``args`` and return the completed process.

    Args:
        args: Executable followed by its arguments.
        options: Execution options; defaults capture text output and discard stdin.

    Returns:
        CompletedProcess: Result of the run. A timeout is reported as return
        code ``124`` with a note appended to stderr.

    Raises:
        FileNotFoundError: If the executable cannot be resolved.
        SubprocessExecutionError: If ``options.check`` is set and the exit status is non-zero.
    """

    argv = resolve_argv(args)
    opts = options or CommandOptions()
    try:
        completed: CompletedProcess[str] = subprocess.run(  # nosec B603
            argv,
            cwd=opts.cwd,
            env=dict(opts.env) if opts.env is not None else None,
            check=False,
            capture_output=opts.capture_output,
            text=opts.text,
            encoding=opts.encoding if opts.text else None,
            errors=opts.errors if opts.text else None,
            timeout=opts.timeout,
            stdin=subprocess.DEVNULL if opts.discard_stdin else None,
        )
    except subprocess.TimeoutExpired as exc:
        completed = _timed_out(argv, exc)
    if opts.check and completed.returncode != 0:
        raise SubprocessExecutionError(argv, completed)
    return completed


__all__ = [
    "CommandOptions",
    "SubprocessExecutionError",
    "TIMEOUT_RETURNCODE",
    "resolve_argv",
    "run_command",
]
