# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI tests for the ``parse`` and ``lint`` commands."""

from __future__ import annotations

import json
import stat
import sys
from pathlib import Path
from textwrap import dedent

import pytest
from typer.testing import CliRunner

from verilint.cli.app import app
from verilint.cli.shared import EXIT_CONFIG_ERROR, EXIT_DIAGNOSTICS, EXIT_OK

runner = CliRunner()


def _capture(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "verilator.log"
    path.write_text(text, encoding="utf-8")
    return path


def test_parse_reports_concise_diagnostics(tmp_path: Path, sample_output: str) -> None:
    capture = _capture(tmp_path, sample_output)

    result = runner.invoke(app, ["parse", str(capture), "--root", str(tmp_path)])

    assert result.exit_code == EXIT_DIAGNOSTICS
    assert "top.sv:10:3: warning[WIDTH]: Operator ASSIGN expects 8 bits" in result.stdout
    assert "sub.sv:4:8: error: Cannot find file containing module: 'missing'" in result.stdout
    assert "%Error: Exiting due to 1 error(s)" in result.stdout


def test_parse_without_errors_exits_cleanly(tmp_path: Path) -> None:
    capture = _capture(tmp_path, "%Warning-UNUSED: a.sv:2:1: Signal is not used\n")

    result = runner.invoke(app, ["parse", str(capture), "--root", str(tmp_path), "--no-passthrough"])

    assert result.exit_code == EXIT_OK
    assert "a.sv:2:1: warning[UNUSED]: Signal is not used" in result.stdout


def test_parse_json_output(tmp_path: Path, sample_output: str) -> None:
    capture = _capture(tmp_path, sample_output)

    result = runner.invoke(app, ["parse", str(capture), "--root", str(tmp_path), "--output", "json"])

    payload = json.loads(result.stdout)
    assert list(payload["files"]) == ["top.sv", "sub.sv"]
    assert payload["files"]["top.sv"][0]["code"] == "WIDTH"
    assert len(payload["passthrough"]) == 11


def test_parse_reads_stdin(tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        ["parse", "-", "--root", str(tmp_path), "-o", "json", "--no-passthrough"],
        input="%Error: a.sv:1:1: boom\n",
    )

    assert result.exit_code == EXIT_DIAGNOSTICS
    assert json.loads(result.stdout) == {
        "files": {
            "a.sv": [
                {
                    "severity": "error",
                    "code": None,
                    "message": "boom",
                    "range": {"start": {"file_path": "a.sv", "line0": 0, "col0": 0}, "end_col0": None},
                    "related": [],
                    "source": "verilator",
                },
            ],
        },
    }


def test_parse_honours_custom_suffix(tmp_path: Path) -> None:
    capture = _capture(tmp_path, "%Error: prot.svp:1:1: encrypted\n")

    result = runner.invoke(app, ["parse", str(capture), "-r", str(tmp_path), "--suffix", ".svp", "--no-passthrough"])

    assert result.exit_code == EXIT_DIAGNOSTICS
    assert "prot.svp:1:1: error: encrypted" in result.stdout


def test_parse_missing_config_file_exits_with_config_error(tmp_path: Path) -> None:
    capture = _capture(tmp_path, "")

    result = runner.invoke(app, ["parse", str(capture), "--root", str(tmp_path), "--config", str(tmp_path / "x.toml")])

    assert result.exit_code == EXIT_CONFIG_ERROR


def test_parse_invalid_config_exits_with_config_error(tmp_path: Path) -> None:
    (tmp_path / ".verilint.toml").write_text('[verilator]\nsuffixes = ["sv"]\n', encoding="utf-8")
    capture = _capture(tmp_path, "")

    result = runner.invoke(app, ["parse", str(capture), "--root", str(tmp_path)])

    assert result.exit_code == EXIT_CONFIG_ERROR
    assert "Invalid configuration" in result.output


def test_parse_missing_capture_is_usage_error(tmp_path: Path) -> None:
    result = runner.invoke(app, ["parse", str(tmp_path / "absent.log"), "--root", str(tmp_path)])

    assert result.exit_code == 2


@pytest.mark.skipif(sys.platform == "win32", reason="requires a POSIX shell script")
def test_lint_runs_configured_executable(tmp_path: Path) -> None:
    document = tmp_path / "top.sv"
    document.write_text("module top; endmodule\n", encoding="utf-8")
    script = tmp_path / "verilator"
    script.write_text(
        dedent(
            f"""\
            #!/bin/sh
            cat >&2 <<'OUT'
            %Warning-UNUSED: {document}:1:8: Signal is not used
            %Error: {document}:2:1: syntax error
            %Error: Exiting due to 1 error(s)
            OUT
            exit 1
            """,
        ),
        encoding="utf-8",
    )
    script.chmod(script.stat().st_mode | stat.S_IXUSR)
    (tmp_path / ".verilint.toml").write_text(f"[verilator]\nexecutable_path = '{tmp_path}'\n", encoding="utf-8")

    result = runner.invoke(app, ["lint", str(document), "--root", str(tmp_path), "-o", "json"])

    assert result.exit_code == EXIT_DIAGNOSTICS
    payload = json.loads(result.stdout)
    assert [entry["severity"] for entry in payload["files"][str(document)]] == ["warning", "error"]
    assert payload["passthrough"][-1]["text"] == "%Error: Exiting due to 1 error(s)"


def test_lint_reports_missing_executable(tmp_path: Path) -> None:
    document = tmp_path / "top.sv"
    document.write_text("module top; endmodule\n", encoding="utf-8")
    missing = tmp_path / "bin" / "verilator-missing"
    (tmp_path / ".verilint.toml").write_text(f"[verilator]\nexecutable_path = '{missing}'\n", encoding="utf-8")

    result = runner.invoke(app, ["lint", str(document), "--root", str(tmp_path), "--no-color"])

    assert result.exit_code == EXIT_DIAGNOSTICS
    assert "does not exist" in result.stdout


@pytest.mark.skipif(sys.platform == "win32", reason="requires a POSIX shell script")
def test_lint_clean_document_reports_success(tmp_path: Path) -> None:
    document = tmp_path / "clean.v"
    document.write_text("module clean; endmodule\n", encoding="utf-8")
    script = tmp_path / "fake-verilator"
    script.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR)
    (tmp_path / ".verilint.toml").write_text(f"[verilator]\nexecutable_path = '{script}'\n", encoding="utf-8")

    result = runner.invoke(app, ["lint", str(document), "--root", str(tmp_path), "--no-color"])

    assert result.exit_code == EXIT_OK
    assert "clean.v: no diagnostics" in result.stdout


def test_help_lists_options_alphabetically() -> None:
    result = runner.invoke(app, ["parse", "--help"])

    assert result.exit_code == 0
    help_text = result.stdout
    assert help_text.index("Arguments") < help_text.index("Options")
    assert help_text.index("--config") < help_text.index("--no-color") < help_text.index("--verbose")


def test_app_lists_commands_by_name() -> None:
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    commands = [line.split()[0] for line in result.stdout.split("Commands:")[1].splitlines() if line.strip()]
    assert commands == ["lint", "parse"]


def test_parse_root_defaults_to_invocation_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".verilint.toml").write_text('[output]\noutput = "json"\npassthrough = false\n', encoding="utf-8")
    capture = _capture(tmp_path, "%Error: a.sv:1:1: boom\n")
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["parse", str(capture)])

    assert result.exit_code == EXIT_DIAGNOSTICS
    assert list(json.loads(result.stdout)["files"]) == ["a.sv"]
