"""Tests for the parse command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from avowed.cli import cli


class TestParseCommand:
    def test_parse(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "range,min=4,max=6"])
        assert result.exit_code == 0, result.output
        assert "directive: range" in result.output
        assert "param max: 6" in result.output

    def test_parse_and_resolve(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "range,min=4,max=6", "--type", "int"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert data["kind"] == "int"
        assert data["validator"] == "RangeValidator"

    def test_wrong_kind(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "range,min=4,max=6", "-t", "string"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "UNKNOWN_DIRECTIVE"

    def test_malformed(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "range,min"])
        assert result.exit_code == 1
        assert "ERROR" in result.output

    def test_bad_type_choice(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "email", "--type", "float"])
        assert result.exit_code == 2
