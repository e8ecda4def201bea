# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Regular expressions describing the Verilator diagnostic grammar."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Final

DEFAULT_SUFFIXES: Final[tuple[str, ...]] = (".svh", ".sv", ".SV", ".vh", ".vl", ".v")

# Highlights look like "   |     ^~~~~"; the caret may also sit on an indent-only line.
HIGHLIGHT_PATTERN: Final[re.Pattern[str]] = re.compile(r"(?:^|\|)\s+(?P<highlight>\^~*)")
ELABORATION_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\s+: \.\.\. (?P<text>[\S ]+)")


def normalize_suffixes(suffixes: Iterable[str]) -> tuple[str, ...]:
    """Return ``suffixes`` de-duplicated and ordered longest first.

    Args:
        suffixes: Candidate file suffixes, each starting with ``.``.

    Returns:
        tuple[str, ...]: Suffixes sorted by descending length, ties keeping input order.

    Raises:
        ValueError: If a suffix is empty or lacks the leading dot.
    """

    seen: dict[str, None] = {}
    for suffix in suffixes:
        if len(suffix) < 2 or not suffix.startswith("."):
            raise ValueError(f"invalid source suffix '{suffix}': expected '.<ext>'")
        seen.setdefault(suffix, None)
    if not seen:
        raise ValueError("at least one source suffix is required")
    return tuple(sorted(seen, key=len, reverse=True))


def _path_fragment(suffixes: tuple[str, ...]) -> str:
    alternatives = "|".join(re.escape(suffix) for suffix in suffixes)
    return rf"(?P<file>[\S ]+?(?:{alternatives}))"


@dataclass(frozen=True, slots=True)
class LinePatterns:
    """Compiled header and secondary-message expressions for one suffix set."""

    suffixes: tuple[str, ...]
    header: re.Pattern[str] = field(init=False)
    secondary: re.Pattern[str] = field(init=False)

    def __post_init__(self) -> None:
        path = _path_fragment(self.suffixes)
        header = re.compile(
            r"^%(?P<severity>\w+)"
            r"(?:-(?P<code>[A-Z0-9]+))?"
            r": "
            rf"(?:{path}:(?:(?P<line>[^:\s]+):)?(?:(?P<column>\d+):)? )?"
            r"(?P<message>.*)$",
            re.ASCII,
        )
        secondary = re.compile(
            rf"^\s+(?:{path}:(?P<line>\d+):(?P<column>\d+):)? \.\.\. (?P<text>[\S ]+)",
            re.ASCII,
        )
        object.__setattr__(self, "header", header)
        object.__setattr__(self, "secondary", secondary)

    @property
    def highlight(self) -> re.Pattern[str]:
        """Return the caret-and-tildes highlight expression."""

        return HIGHLIGHT_PATTERN

    @property
    def elaboration(self) -> re.Pattern[str]:
        """Return the ``: ... text`` elaboration expression."""

        return ELABORATION_PATTERN


@lru_cache(maxsize=16)
def compile_patterns(suffixes: tuple[str, ...] = DEFAULT_SUFFIXES) -> LinePatterns:
    """Return cached :class:`LinePatterns` for ``suffixes``.

    Args:
        suffixes: Recognised source file suffixes.

    Returns:
        LinePatterns: Compiled expressions using the longest-first suffix order.
    """

    return LinePatterns(normalize_suffixes(suffixes))


__all__ = [
    "DEFAULT_SUFFIXES",
    "ELABORATION_PATTERN",
    "HIGHLIGHT_PATTERN",
    "LinePatterns",
    "compile_patterns",
    "normalize_suffixes",
]
