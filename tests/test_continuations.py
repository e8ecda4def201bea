# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for continuation block collection."""

from __future__ import annotations

from verilint.parsing import LineStream, collect_block, compile_patterns
from verilint.parsing.classify import ClassifiedLine, classify_stream
from verilint.parsing.continuations import block_window


def _classify(text: str) -> tuple[ClassifiedLine, ...]:
    return classify_stream(LineStream.from_text(text), compile_patterns())


def test_block_window_is_bounded_by_next_header() -> None:
    lines = _classify("%Error: a.sv:1:1: x\n  one\n%Error: b.sv:2:2: y\n  two")

    assert [line.index for line in block_window(lines, 0)] == [1]
    assert [line.index for line in block_window(lines, 2)] == [3]


def test_elaborations_must_be_contiguous() -> None:
    lines = _classify(
        "\n".join(
            [
                "%Warning: a.sv:1:1: x",
                "      : ... first",
                "      : ... second",
                "   1 | code",
                "      : ... detached",
            ]
        )
    )

    block = collect_block(lines, 0)

    assert block.elaborations == ("first", "second")


def test_primary_highlight_uses_first_match() -> None:
    lines = _classify("%Error: a.sv:1:1: x\n   1 | code\n      | ^~~\n      | ^~~~~~")

    assert collect_block(lines, 0).highlight_width == 3


def test_primary_highlight_absent() -> None:
    lines = _classify("%Error: a.sv:1:1: x\n   1 | code\n%Error: b.sv:1:1: y\n      | ^~~")

    assert collect_block(lines, 0).highlight_width is None


def test_secondary_refined_once_by_following_highlight() -> None:
    lines = _classify(
        "\n".join(
            [
                "%Error: a.sv:5:3: boom",
                "      |   ^~~",
                "        b.sv:2:4: ... note: here",
                "    2 |    thing",
                "      |    ^~~~~",
                "      |    ^~~~~~~~~",
                "        ... note: again",
            ]
        )
    )

    block = collect_block(lines, 0)

    assert block.highlight_width == 3
    assert len(block.secondaries) == 2
    first, second = block.secondaries
    assert first.match.file_path == "b.sv"
    assert first.highlight_width == 5
    assert second.match.file_path is None
    assert second.highlight_width is None


def test_highlight_before_any_secondary_is_not_attributed() -> None:
    lines = _classify("%Error: a.sv:1:1: x\n      | ^~~~\n        ... note: later")

    block = collect_block(lines, 0)

    assert block.secondaries[0].highlight_width is None
