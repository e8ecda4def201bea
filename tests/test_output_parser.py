# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end tests for parsing captured Verilator output."""

from __future__ import annotations

from verilint.core.models import LineIssueKind, RelatedMessage, SourceLocation, SourceRange
from verilint.core.severity import Severity
from verilint.parsing import VerilatorOutputParser, parse_output


def test_parsing_is_idempotent(parser: VerilatorOutputParser, sample_output: str) -> None:
    assert parser.parse(sample_output) == parser.parse(sample_output)


def test_line_and_column_are_zero_based(parser: VerilatorOutputParser) -> None:
    result = parser.parse("%Error: foo.sv:12:5: msg")

    (diagnostic,) = result.diagnostics.get("foo.sv")
    assert diagnostic.range.start == SourceLocation(file_path="foo.sv", line0=11, col0=4)
    assert diagnostic.range.unbounded


def test_missing_column_defaults_to_zero(parser: VerilatorOutputParser) -> None:
    result = parser.parse("%Error: foo.sv:12: msg")

    (diagnostic,) = result.diagnostics.get("foo.sv")
    assert diagnostic.range.start.col0 == 0


def test_plain_line_inherits_previous_header_severity(parser: VerilatorOutputParser) -> None:
    result = parser.parse("%Warning: a.sv:1:1: m1\nextra detail")

    assert [(line.text, line.severity) for line in result.passthrough] == [("extra detail", Severity.WARNING)]


def test_plain_line_without_header_defaults_to_error(parser: VerilatorOutputParser) -> None:
    result = parser.parse("verilator: Cannot open directory\n%Warning: a.sv:1:1: m1")

    assert result.passthrough[0].severity is Severity.ERROR
    assert len(result.diagnostics) == 1


def test_highlight_sizes_end_column(parser: VerilatorOutputParser) -> None:
    result = parser.parse("%Error: foo.sv:3:5: msg\n      ^~~~~")

    (diagnostic,) = result.diagnostics.get("foo.sv")
    assert diagnostic.range.end_col0 == 9


def test_secondary_without_location_inherits_header_range(parser: VerilatorOutputParser) -> None:
    result = parser.parse("%Error: foo.sv:3:5: msg\n        ... note: see also")

    (diagnostic,) = result.diagnostics.get("foo.sv")
    assert diagnostic.related == (RelatedMessage(range=diagnostic.range, text="note: see also"),)


def test_unparseable_line_number_drops_block(parser: VerilatorOutputParser) -> None:
    result = parser.parse("%Error: foo.sv:NOTANUMBER: msg\n        ... note: see also")

    assert len(result.diagnostics) == 0
    assert not result.diagnostics
    assert [issue.kind for issue in result.issues] == [LineIssueKind.UNPARSEABLE_LINE_NUMBER]
    assert result.passthrough[0].text == "%Error: foo.sv:NOTANUMBER: msg"


def test_header_without_location_is_passthrough_only(parser: VerilatorOutputParser) -> None:
    result = parser.parse("%Warning: Exiting early")

    assert not result.diagnostics
    assert result.issues[0].kind is LineIssueKind.MISSING_LOCATION
    assert result.passthrough[0].severity is Severity.WARNING


def test_information_header_passthrough_is_error(parser: VerilatorOutputParser) -> None:
    result = parser.parse("%Info: nothing to see")

    assert result.passthrough[0].severity is Severity.ERROR


def test_unrecognized_percent_line(parser: VerilatorOutputParser) -> None:
    result = parser.parse("%Warning: a.sv:1:1: m\n%%% corrupted")

    assert result.issues[0].kind is LineIssueKind.UNRECOGNIZED_LINE
    assert result.passthrough[-1].severity is Severity.WARNING


def test_empty_input_yields_empty_result(parser: VerilatorOutputParser) -> None:
    for text in ("", "   \n\n", None):
        result = parser.parse(text)
        assert not result.diagnostics
        assert result.passthrough == ()


def test_end_to_end_width_warning() -> None:
    text = "%Warning-WIDTH: top.sv:10:3: Width mismatch\n           : ... In instance top\n"

    result = parse_output(text)

    assert result.diagnostics.paths() == ("top.sv",)
    (diagnostic,) = result.diagnostics.get("top.sv")
    expected_range = SourceRange(start=SourceLocation(file_path="top.sv", line0=9, col0=2))
    assert diagnostic.severity is Severity.WARNING
    assert diagnostic.code == "WIDTH"
    assert diagnostic.message == "Width mismatch"
    assert diagnostic.range == expected_range
    assert diagnostic.related == (RelatedMessage(range=expected_range, text="In instance top"),)


def test_realistic_capture(parser: VerilatorOutputParser, sample_output: str) -> None:
    result = parser.parse(sample_output)

    assert result.diagnostics.paths() == ("top.sv", "sub.sv")
    assert result.diagnostics.count(Severity.ERROR) == 1
    assert result.diagnostics.count(Severity.WARNING) == 1

    (width,) = result.diagnostics.get("top.sv")
    assert width.range == SourceRange(start=SourceLocation(file_path="top.sv", line0=9, col0=2), end_col0=9)
    assert [related.text for related in width.related] == [
        "For warning description see https://verilator.org/warn/WIDTH?v=5.020",
        'Use "/* verilator lint_off WIDTH */" and lint_on around source to disable this message.',
        "In instance top",
    ]
    assert all(related.range == width.range for related in width.related)

    (missing,) = result.diagnostics.get("sub.sv")
    assert missing.range == SourceRange(start=SourceLocation(file_path="sub.sv", line0=3, col0=7), end_col0=15)
    assert missing.related == (
        RelatedMessage(
            range=SourceRange(start=SourceLocation(file_path="sub.sv", line0=0, col0=0), end_col0=9),
            text="note: In file included from 'top.sv'",
        ),
    )

    assert len(result.passthrough) == 11
    assert [line.severity for line in result.passthrough[:5]] == [Severity.WARNING] * 5
    assert [line.severity for line in result.passthrough[5:]] == [Severity.ERROR] * 6
    assert result.passthrough[-1].text == "%Error: Exiting due to 1 error(s)"


def test_diagnostics_group_in_discovery_order(parser: VerilatorOutputParser) -> None:
    text = "\n".join(["%Error: b.sv:1:1: one", "%Error: a.sv:1:1: two", "%Warning: b.sv:2:1: three"])

    result = parser.parse(text)

    assert result.diagnostics.paths() == ("b.sv", "a.sv")
    assert [diagnostic.message for diagnostic in result.diagnostics.get("b.sv")] == ["one", "three"]


def test_custom_suffixes() -> None:
    parser = VerilatorOutputParser([".sv", ".svp"])

    result = parser.parse("%Error: prot.svp:4:2: encrypted")

    assert parser.suffixes == (".svp", ".sv")
    assert result.diagnostics.paths() == ("prot.svp",)


def test_underscored_line_number_drops_block(parser: VerilatorOutputParser) -> None:
    result = parser.parse("%Error: foo.sv:1_0:1: msg")

    assert not result.diagnostics
    assert [issue.kind for issue in result.issues] == [LineIssueKind.UNPARSEABLE_LINE_NUMBER]
