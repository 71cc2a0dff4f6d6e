"""PrecisionService — count distinct values produced by time sources.

A source is called ``per_entries`` times in a tight loop and the readings
are collected into a set. The comparison report averages, over several
iterations, the orders-of-magnitude gap between a clock source and the
nanosecond instant source.

Argument ranges are checked with :func:`require`, which aborts the
operation with a descriptive message.
"""

from __future__ import annotations

import math
import re
import time

import structlog

from dobcheck.infrastructure.clocks import (
    CLOCK_SOURCES,
    INSTANT_SOURCES,
    TimeSource,
    all_sources,
)
from dobcheck.services.base import BaseService
from dobcheck.services.result import ErrorCode, ServiceResult

logger = structlog.get_logger(__name__)


class BenchmarkDefaults:
    """Bounds and defaults for benchmark arguments."""

    MIN_ENTRIES = 100
    MAX_ENTRIES = 1_000_000
    NUM_ENTRIES = 1_000_000
    MAX_ITERATIONS = 32
    NUM_ITERATIONS = 10


class BenchmarkArgumentError(ValueError):
    """A benchmark argument is outside its allowed range."""


def require(condition: bool, message: str = "Assertion failed") -> None:
    """Raise :class:`BenchmarkArgumentError` with *message* unless *condition* holds."""
    if not condition:
        raise BenchmarkArgumentError(message)


def parse_count(value: str | float) -> float:
    """Read a count that may carry separators (``1_000_000``, ``1,000``).

    Anything other than digits, ``.`` and ``-`` is dropped before parsing.
    """
    if isinstance(value, (int, float)):
        return float(value)
    cleaned = re.sub(r"[^\d.-]", "", value)
    try:
        return float(cleaned)
    except ValueError as exc:
        raise BenchmarkArgumentError(f"Invalid number {value!r}") from exc


def average(*nums: float) -> float:
    return sum(nums) / len(nums) if nums else 0.0


def oom_diff(a: float, b: float) -> float:
    """Orders-of-magnitude difference between two positive values."""
    return abs(math.log10(a) - math.log10(b))


def _check_entries(per_entries: float) -> None:
    require(
        BenchmarkDefaults.MIN_ENTRIES <= per_entries <= BenchmarkDefaults.MAX_ENTRIES,
        f"Invalid argument 'per_entries', must use a value between "
        f"{BenchmarkDefaults.MIN_ENTRIES:,} and {BenchmarkDefaults.MAX_ENTRIES:,} "
        f"(inclusive), but {per_entries:g} was given.",
    )


def _check_iterations(iterations: int) -> None:
    require(
        0 < iterations <= BenchmarkDefaults.MAX_ITERATIONS,
        f"Invalid argument 'iterations', must use a value between 1 and "
        f"{BenchmarkDefaults.MAX_ITERATIONS} (inclusive), but {iterations} was given.",
    )


def unique_values(source: TimeSource, per_entries: float = BenchmarkDefaults.NUM_ENTRIES) -> int:
    """Call *source* ``floor(per_entries)`` times and count distinct readings."""
    _check_entries(per_entries)
    count = math.floor(per_entries)
    logger.debug("bench.capturing", source=source.label, entries=count)
    sample = source.sample
    entries = {sample() for _ in range(count)}
    logger.debug("bench.sampled", source=source.label, unique=len(entries))
    return len(entries)


def comparison(
    per_entries: float = BenchmarkDefaults.NUM_ENTRIES,
    iterations: int = BenchmarkDefaults.NUM_ITERATIONS,
    clock: TimeSource = CLOCK_SOURCES["millis"],
) -> list[float]:
    """Per-iteration orders-of-magnitude gaps between *clock* and nanosecond instants."""
    _check_entries(per_entries)
    _check_iterations(iterations)
    instant = INSTANT_SOURCES["nanos"]
    return [
        oom_diff(unique_values(clock, per_entries), unique_values(instant, per_entries))
        for _ in range(iterations)
    ]


class PrecisionService(BaseService):
    """Benchmark operations exposed to the CLI."""

    def sources(self) -> ServiceResult:
        items = [
            {
                "family": str(source.family),
                "key": source.key,
                "label": source.label,
                "sample": source.sample(),
                "note": source.note,
            }
            for source in all_sources()
        ]
        data = {"items": items, "count": len(items)}
        return ServiceResult(ok=True, op="bench_sources", data=data)

    def unique(self, family: str, key: str, per_entries: float | None = None) -> ServiceResult:
        op = "bench_unique"
        table = CLOCK_SOURCES if family == "clock" else INSTANT_SOURCES
        source = table.get(key)
        if source is None:
            msg = f"Unknown {family} source {key!r}; choose from {', '.join(table)}"
            return ServiceResult.failure(op, ErrorCode.INVALID_ARGUMENT, msg)

        entries = self._settings.bench.per_entries if per_entries is None else per_entries
        started = time.perf_counter()
        try:
            unique = unique_values(source, entries)
        except BenchmarkArgumentError as exc:
            return ServiceResult.failure(op, ErrorCode.INVALID_ARGUMENT, str(exc))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "source": source.label,
                "entries": math.floor(entries),
                "unique": unique,
            },
            meta={"duration_ms": round((time.perf_counter() - started) * 1000, 2)},
        )

    def compare(
        self,
        clock_key: str = "millis",
        per_entries: float | None = None,
        iterations: int | None = None,
    ) -> ServiceResult:
        op = "bench_compare"
        clock = CLOCK_SOURCES.get(clock_key)
        if clock is None:
            msg = f"Unknown clock source {clock_key!r}; choose from {', '.join(CLOCK_SOURCES)}"
            return ServiceResult.failure(op, ErrorCode.INVALID_ARGUMENT, msg)

        entries = self._settings.bench.per_entries if per_entries is None else per_entries
        rounds = self._settings.bench.iterations if iterations is None else iterations
        started = time.perf_counter()
        try:
            gaps = comparison(entries, rounds, clock)
        except BenchmarkArgumentError as exc:
            return ServiceResult.failure(op, ErrorCode.INVALID_ARGUMENT, str(exc))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "clock": clock.label,
                "instant": INSTANT_SOURCES["nanos"].label,
                "entries": math.floor(entries),
                "iterations": rounds,
                "orders_of_magnitude": round(average(*gaps), 2),
            },
            meta={"duration_ms": round((time.perf_counter() - started) * 1000, 2)},
        )
