"""Tests for output mode selection and the console factory."""

import json

import pytest

from dobcheck.output.console import create_console, get_output, verdict_style
from dobcheck.output.formatters import OutputSettings, format_result
from dobcheck.services.result import ErrorCode, ServiceResult


@pytest.fixture
def verdict() -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="verify",
        data={"mode": "calendar", "of_age": True},
        warnings=["just a note"],
    )


class TestFormatResult:
    def test_default_is_rich(self, verdict: ServiceResult) -> None:
        output = format_result(verdict)
        assert "Is of required minimum age: true" in output

    def test_json(self, verdict: ServiceResult) -> None:
        output = format_result(verdict, settings=OutputSettings(json_output=True))
        parsed = json.loads(output)
        assert parsed["ok"] is True
        assert parsed["data"]["of_age"] is True
        assert parsed["warnings"] == ["just a note"]

    def test_json_wins_over_quiet(self, verdict: ServiceResult) -> None:
        output = format_result(verdict, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "verify"

    def test_quiet(self, verdict: ServiceResult) -> None:
        assert format_result(verdict, settings=OutputSettings(quiet=True)) == "true"

    def test_json_error(self) -> None:
        result = ServiceResult.failure("verify", ErrorCode.INVALID_INPUT, "bad")
        parsed = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert parsed["ok"] is False
        assert parsed["error"]["code"] == "INVALID_INPUT"


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console()
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_width_override(self) -> None:
        assert create_console(width=40).width == 40
        assert create_console().width == 100

    def test_verdict_style(self) -> None:
        assert verdict_style(True) == "dob.pass"
        assert verdict_style(False) == "dob.fail"
