"""Command group: calendar conversions (named calendar_cmd to avoid the stdlib module)."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import click

from dobcheck.commands._base import DobGroup
from dobcheck.domain.validation import is_year
from dobcheck.services.holidays import HolidayService

if TYPE_CHECKING:
    from dobcheck.commands._context import AppContext


def _check_year(value: str) -> int:
    value = str(value).strip()
    if not is_year(value):
        raise click.BadParameter("Expected a four-digit year.")
    return int(value)


def _year_argument(ctx: click.Context, param: click.Parameter, value: str | None) -> int | None:
    return None if value is None else _check_year(value)


@click.group(
    "calendar",
    cls=DobGroup,
    examples="""\
  dobcheck calendar new-year
  dobcheck calendar new-year 2031""",
)
def calendar_cmd() -> None:
    """Calendar conversions between Gregorian and Chinese lunisolar dates."""


@calendar_cmd.command(
    "new-year",
    examples="""\
  dobcheck calendar new-year
  dobcheck calendar new-year 2026
  dobcheck --json calendar new-year 2040""",
)
@click.argument("year", required=False, callback=_year_argument)
@click.pass_obj
def new_year(app: AppContext, year: int | None) -> None:
    """Gregorian date of Chinese New Year for YEAR (default: prompt or current year)."""
    if year is None:
        current = date.today().year
        year = (
            click.prompt("Year", default=current, value_proc=_check_year)
            if app.interactive
            else current
        )
    app.emit(HolidayService(app.settings).new_year(year))
