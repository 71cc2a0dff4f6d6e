"""Command group: precision benchmark of time-sampling primitives."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from dobcheck.commands._base import DobGroup
from dobcheck.infrastructure.clocks import CLOCK_SOURCES, INSTANT_SOURCES
from dobcheck.services.precision import BenchmarkArgumentError, PrecisionService, parse_count

if TYPE_CHECKING:
    from dobcheck.commands._context import AppContext

_BENCH_EXAMPLES = """\
  dobcheck bench sources
  dobcheck bench clock -e 100_000 -f now
  dobcheck bench instant -e 1,000,000
  dobcheck bench compare -i 5 -e 250_000 -f time"""


def _count(ctx: click.Context, param: click.Parameter, value: Any) -> float | None:
    if value is None:
        return None
    try:
        return parse_count(value)
    except BenchmarkArgumentError as exc:
        raise click.BadParameter(str(exc)) from exc


_per_entries = click.option(
    "-e", "--per-entries", default=None, callback=_count, help="Number of entries per run."
)


@click.group(cls=DobGroup, examples=_BENCH_EXAMPLES)
def bench() -> None:
    """Count distinct values produced by clock and instant sources."""


@bench.command(examples="  dobcheck bench sources")
@click.pass_obj
def sources(app: AppContext) -> None:
    """List the available time sources with a sample value and notes."""
    app.emit(PrecisionService(app.settings).sources())


@bench.command(
    examples="""\
  dobcheck bench clock
  dobcheck bench clock -e 100_000 -f now"""
)
@_per_entries
@click.option(
    "-f",
    "--function",
    "function",
    type=click.Choice(list(CLOCK_SOURCES)),
    default="millis",
    help="Clock source to sample.",
)
@click.pass_obj
def clock(app: AppContext, per_entries: float | None, function: str) -> None:
    """Distinct wall-clock millisecond values over sequential captures."""
    app.emit(PrecisionService(app.settings).unique("clock", function, per_entries))


@bench.command(
    examples="""\
  dobcheck bench instant
  dobcheck bench instant -e 500_000 -f millis"""
)
@_per_entries
@click.option(
    "-f",
    "--function",
    "function",
    type=click.Choice(list(INSTANT_SOURCES)),
    default="nanos",
    help="Instant source to sample.",
)
@click.pass_obj
def instant(app: AppContext, per_entries: float | None, function: str) -> None:
    """Distinct epoch-nanosecond values over sequential captures."""
    app.emit(PrecisionService(app.settings).unique("instant", function, per_entries))


@bench.command(
    examples="""\
  dobcheck bench compare
  dobcheck bench compare -i 5 -e 250_000 -f time"""
)
@click.option(
    "-i", "--num-iterations", "iterations", type=int, default=None, help="Number of iterations."
)
@_per_entries
@click.option(
    "-f",
    "--date-function",
    "clock_key",
    type=click.Choice(list(CLOCK_SOURCES)),
    default="millis",
    help="Clock source compared against nanosecond instants.",
)
@click.pass_obj
def compare(
    app: AppContext, iterations: int | None, per_entries: float | None, clock_key: str
) -> None:
    """Orders-of-magnitude gap between a clock source and nanosecond instants."""
    app.emit(PrecisionService(app.settings).compare(clock_key, per_entries, iterations))
