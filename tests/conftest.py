# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from verilint.parsing import VerilatorOutputParser

SAMPLE_OUTPUT = "\n".join(
    [
        "%Warning-WIDTH: top.sv:10:3: Operator ASSIGN expects 8 bits on the Assign RHS, but CONST generates 32 bits.",
        "                           : ... In instance top",
        "   10 |   assign a = 32'h1;",
        "      |   ^~~~~~",
        "                ... For warning description see https://verilator.org/warn/WIDTH?v=5.020",
        '                ... Use "/* verilator lint_off WIDTH */" and lint_on around source to disable this message.',
        "%Error: sub.sv:4:8: Cannot find file containing module: 'missing'",
        "    4 |        missing u_missing();",
        "      |        ^~~~~~~",
        "        sub.sv:1:1: ... note: In file included from 'top.sv'",
        '    1 | `include "sub.sv"',
        "      | ^~~~~~~~",
        "%Error: Exiting due to 1 error(s)",
        "",
    ]
)


@pytest.fixture
def parser() -> VerilatorOutputParser:
    """Return a parser using the default suffix set."""
    return VerilatorOutputParser()


@pytest.fixture
def sample_output() -> str:
    """Return a realistic Verilator stderr capture."""
    return SAMPLE_OUTPUT
