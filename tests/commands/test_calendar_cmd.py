"""Tests for the calendar command group."""

from __future__ import annotations

import json
from datetime import date

from click.testing import CliRunner

from dobcheck.cli import cli


class TestNewYear:
    def test_verified_year(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["calendar", "new-year", "2024"])
        assert result.exit_code == 0, result.output
        assert "Chinese New Year date for the year 2024" in result.stdout
        assert "2024-02-10" in result.stdout
        assert result.stderr == ""

    def test_unverified_year_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["calendar", "new-year", "2040"])
        assert result.exit_code == 0
        assert "¹" in result.stdout
        assert "WARNING: The result for year 2040 cannot be verified" in result.stderr

    def test_json_keeps_warnings_in_payload(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "calendar", "new-year", "2040"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["data"]["accuracy"] == "unverified"
        assert len(payload["warnings"]) == 1
        assert result.stderr == ""

    def test_prompts_for_year(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["calendar", "new-year"], input="2031\n")
        assert result.exit_code == 0, result.output
        assert "2031-01-23" in result.output

    def test_reprompts_on_bad_year(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["calendar", "new-year"], input="31\n2031\n")
        assert result.exit_code == 0, result.output
        assert "Expected a four-digit year." in result.output
        assert "2031-01-23" in result.output

    def test_no_interact_uses_current_year(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--no-interact", "--json", "calendar", "new-year"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["data"]["year"] == date.today().year

    def test_bad_year_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["calendar", "new-year", "24"])
        assert result.exit_code == 2
        assert "Expected a four-digit year." in result.output

    def test_out_of_range(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["calendar", "new-year", "2100"])
        assert result.exit_code == 1
        assert "outside the supported range" in result.stderr

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "calendar", "new-year", "2024"])
        assert result.stdout.strip() == "OK: new_year"
