"""Tests for the precision benchmark helpers and PrecisionService."""

from __future__ import annotations

import itertools
from pathlib import Path

import pytest

from dobcheck.config.settings import DobSettings
from dobcheck.infrastructure.clocks import CLOCK_SOURCES, SourceFamily, TimeSource
from dobcheck.services.precision import (
    BenchmarkArgumentError,
    BenchmarkDefaults,
    PrecisionService,
    average,
    comparison,
    oom_diff,
    parse_count,
    require,
    unique_values,
)
from dobcheck.services.result import ErrorCode


def _counter_source() -> TimeSource:
    counter = itertools.count()
    return TimeSource(
        key="counter",
        family=SourceFamily.INSTANT,
        label="counter",
        sample=lambda: next(counter),
        note="",
    )


def _constant_source() -> TimeSource:
    return TimeSource(
        key="constant",
        family=SourceFamily.CLOCK,
        label="constant",
        sample=lambda: 7,
        note="",
    )


class TestHelpers:
    def test_require_passes(self) -> None:
        require(True, "never shown")

    def test_require_raises_with_message(self) -> None:
        with pytest.raises(BenchmarkArgumentError, match="custom message"):
            require(False, "custom message")

    def test_require_default_message(self) -> None:
        with pytest.raises(BenchmarkArgumentError, match="Assertion failed"):
            require(False)

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("1_000_000", 1_000_000.0), ("1,000", 1000.0), ("250000", 250_000.0), ("12.5", 12.5)],
    )
    def test_parse_count(self, raw: str, expected: float) -> None:
        assert parse_count(raw) == expected

    def test_parse_count_numbers_pass_through(self) -> None:
        assert parse_count(500) == 500.0

    def test_parse_count_garbage(self) -> None:
        with pytest.raises(BenchmarkArgumentError):
            parse_count("lots")

    def test_average(self) -> None:
        assert average(1.0, 2.0, 3.0) == 2.0
        assert average() == 0.0

    def test_oom_diff(self) -> None:
        assert oom_diff(1000, 10) == pytest.approx(2.0)
        assert oom_diff(10, 1000) == pytest.approx(2.0)
        assert oom_diff(42, 42) == 0.0


class TestUniqueValues:
    def test_counts_distinct(self) -> None:
        assert unique_values(_counter_source(), 100) == 100
        assert unique_values(_constant_source(), 100) == 1

    def test_floors_fractional_entries(self) -> None:
        assert unique_values(_counter_source(), 150.9) == 150

    @pytest.mark.parametrize("entries", [99, 1_000_001, 0, -5])
    def test_entries_out_of_range(self, entries: int) -> None:
        with pytest.raises(BenchmarkArgumentError, match="'per_entries'"):
            unique_values(_counter_source(), entries)

    def test_range_message(self) -> None:
        with pytest.raises(BenchmarkArgumentError) as exc_info:
            unique_values(_counter_source(), 50)
        assert str(exc_info.value) == (
            "Invalid argument 'per_entries', must use a value between 100 and "
            "1,000,000 (inclusive), but 50 was given."
        )

    def test_real_clock_source(self) -> None:
        unique = unique_values(CLOCK_SOURCES["millis"], BenchmarkDefaults.MIN_ENTRIES)
        assert 1 <= unique <= BenchmarkDefaults.MIN_ENTRIES


class TestComparison:
    def test_one_gap_per_iteration(self) -> None:
        gaps = comparison(100, 3, _constant_source())
        assert len(gaps) == 3
        assert all(gap >= 0 for gap in gaps)

    @pytest.mark.parametrize("iterations", [0, 33, -1])
    def test_iterations_out_of_range(self, iterations: int) -> None:
        with pytest.raises(BenchmarkArgumentError, match="'iterations'"):
            comparison(100, iterations, _constant_source())


class TestPrecisionService:
    def test_sources(self, settings: DobSettings) -> None:
        result = PrecisionService(settings).sources()
        assert result.ok
        assert result.op == "bench_sources"
        assert result.data["count"] == 5
        families = {item["family"] for item in result.data["items"]}
        assert families == {"clock", "instant"}
        assert all(isinstance(item["sample"], int) for item in result.data["items"])

    def test_unique_clock(self, settings: DobSettings) -> None:
        result = PrecisionService(settings).unique("clock", "now", 100)
        assert result.ok
        assert result.op == "bench_unique"
        assert result.data["entries"] == 100
        assert 1 <= result.data["unique"] <= 100
        assert result.meta is not None
        assert "duration_ms" in result.meta

    def test_unique_instant(self, settings: DobSettings) -> None:
        result = PrecisionService(settings).unique("instant", "nanos", 200)
        assert result.ok
        assert result.data["source"] == "time.time_ns()"
        assert result.data["entries"] == 200

    def test_unique_unknown_source(self, settings: DobSettings) -> None:
        result = PrecisionService(settings).unique("clock", "sundial", 100)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == ErrorCode.INVALID_ARGUMENT
        assert "sundial" in result.error.message

    def test_unique_out_of_range(self, settings: DobSettings) -> None:
        result = PrecisionService(settings).unique("clock", "millis", 10)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == ErrorCode.INVALID_ARGUMENT
        assert "per_entries" in result.error.message

    def test_compare(self, settings: DobSettings) -> None:
        result = PrecisionService(settings).compare("millis", 100, 2)
        assert result.ok
        assert result.op == "bench_compare"
        assert result.data["iterations"] == 2
        assert result.data["entries"] == 100
        assert result.data["orders_of_magnitude"] >= 0

    def test_compare_uses_configured_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "dobcheck.toml").write_text("[bench]\nper_entries = 100\niterations = 1\n")
        settings = DobSettings.from_cli(start=tmp_path)
        result = PrecisionService(settings).compare()
        assert result.ok
        assert result.data["entries"] == 100
        assert result.data["iterations"] == 1

    def test_compare_bad_iterations(self, settings: DobSettings) -> None:
        result = PrecisionService(settings).compare("millis", 100, 64)
        assert not result.ok
        assert result.error is not None
        assert "'iterations'" in result.error.message

    def test_compare_unknown_clock(self, settings: DobSettings) -> None:
        result = PrecisionService(settings).compare("sundial", 100, 1)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == ErrorCode.INVALID_ARGUMENT
