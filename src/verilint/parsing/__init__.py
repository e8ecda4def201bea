# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parser for Verilator's textual diagnostic stream."""

from __future__ import annotations

from .classify import (
    ClassifiedLine,
    HeaderParse,
    HeaderWithLocation,
    HeaderWithoutLocation,
    LineKind,
    Unrecognized,
    classify_line,
    parse_header,
)
from .continuations import ContinuationBlock, collect_block
from .lines import LineStream, RawLine
from .parser import VerilatorOutputParser, parse_output
from .patterns import DEFAULT_SUFFIXES, compile_patterns, normalize_suffixes

__all__ = [
    "ClassifiedLine",
    "ContinuationBlock",
    "DEFAULT_SUFFIXES",
    "HeaderParse",
    "HeaderWithLocation",
    "HeaderWithoutLocation",
    "LineKind",
    "LineStream",
    "RawLine",
    "Unrecognized",
    "VerilatorOutputParser",
    "classify_line",
    "collect_block",
    "compile_patterns",
    "normalize_suffixes",
    "parse_header",
    "parse_output",
]
