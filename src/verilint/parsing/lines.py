# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Indexed, immutable view over captured tool output."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Final

_LINE_BREAK: Final[re.Pattern[str]] = re.compile(r"\r?\n")


@dataclass(frozen=True, slots=True)
class RawLine:
    """One line of tool output together with its position in the stream."""

    index: int
    text: str


class LineStream(Sequence[RawLine]):
    """Ordered lines of a single captured text block."""

    __slots__ = ("_lines",)

    def __init__(self, lines: Sequence[str]) -> None:
        self._lines: tuple[RawLine, ...] = tuple(RawLine(index, text) for index, text in enumerate(lines))

    @classmethod
    def from_text(cls, text: str) -> LineStream:
        """Split ``text`` on LF or CRLF terminators.

        Args:
            text: Complete output captured from one tool invocation.

        Returns:
            LineStream: Stream over the lines of ``text``; empty when ``text`` is empty.
        """

        if not text:
            return cls(())
        return cls(_LINE_BREAK.split(text))

    def at(self, index: int) -> RawLine | None:
        """Return the line at ``index`` or ``None`` when out of range."""

        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def __getitem__(self, index: int) -> RawLine:  # type: ignore[override]
        return self._lines[index]

    def __iter__(self) -> Iterator[RawLine]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)


__all__ = ["LineStream", "RawLine"]
