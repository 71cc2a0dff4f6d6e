"""CalendarDate — a proleptic Gregorian date with an explicit overflow policy.

Field arithmetic never silently rolls into the next month. Setting a day
that does not exist in the target month is governed by :class:`Overflow`:

- ``CONSTRAIN`` (default): clamp into the target month, so Feb 29 moved
  into a non-leap year becomes Feb 28.
- ``REJECT``: raise :class:`InvalidDateError`.

The age evaluators rely on ``CONSTRAIN`` for leap-day birthdays.

INVARIANT: a CalendarDate is always a valid Gregorian date in 1..9999.
"""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, timedelta
from enum import StrEnum
from typing import Self

from dobcheck.domain.errors import InvalidDateError

MIN_YEAR = 1
MAX_YEAR = 9999

_ISO_DATE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")


class Overflow(StrEnum):
    """What to do when field arithmetic produces a day outside the month."""

    CONSTRAIN = "constrain"
    REJECT = "reject"


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule (divisible by 4, except centuries not by 400)."""
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


@dataclass(frozen=True, order=True)
class CalendarDate:
    """Immutable year/month/day triple, ordered chronologically."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            msg = f"Year {self.year} is outside the supported range {MIN_YEAR}..{MAX_YEAR}"
            raise InvalidDateError(msg)
        if not 1 <= self.month <= 12:
            raise InvalidDateError(f"Month {self.month} is outside 1..12")
        last = days_in_month(self.year, self.month)
        if not 1 <= self.day <= last:
            msg = f"Day {self.day} is outside 1..{last} for {self.year:04d}-{self.month:02d}"
            raise InvalidDateError(msg)

    # ── Construction ─────────────────────────────────────────────────

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse strict ``YYYY-MM-DD`` text.

        Raises:
            InvalidDateError: if the text is not in that shape, or names a
                day that does not exist (``2023-02-29``).
        """
        match = _ISO_DATE.fullmatch(text.strip())
        if match is None:
            raise InvalidDateError(f"Invalid date {text!r}, expected YYYY-MM-DD")
        year, month, day = (int(part) for part in match.groups())
        return cls(year, month, day)

    @classmethod
    def build(
        cls,
        year: int,
        month: int,
        day: int,
        *,
        overflow: Overflow = Overflow.CONSTRAIN,
    ) -> Self:
        """Build a date from fields that may be out of range.

        Under ``CONSTRAIN`` the month is clamped to 1..12 and the day to the
        length of that month. The year is never clamped.
        """
        if overflow is Overflow.CONSTRAIN and MIN_YEAR <= year <= MAX_YEAR:
            month = min(max(month, 1), 12)
            day = min(max(day, 1), days_in_month(year, month))
        return cls(year, month, day)

    @classmethod
    def from_date(cls, value: date) -> Self:
        return cls(value.year, value.month, value.day)

    # ── Queries ──────────────────────────────────────────────────────

    @property
    def in_leap_year(self) -> bool:
        return is_leap_year(self.year)

    @property
    def is_leap_day(self) -> bool:
        """True for February 29th."""
        return self.month == 2 and self.day == 29

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    # ── Arithmetic ───────────────────────────────────────────────────

    def with_year(self, year: int, *, overflow: Overflow = Overflow.CONSTRAIN) -> Self:
        """Same month/day in *year*; Feb 29 constrains to Feb 28 by default."""
        return self.build(year, self.month, self.day, overflow=overflow)

    def add(
        self,
        *,
        years: int = 0,
        months: int = 0,
        days: int = 0,
        overflow: Overflow = Overflow.CONSTRAIN,
    ) -> Self:
        """Calendar-aware addition.

        Years and months move the month field first (with *overflow*
        applied to the day), then days are added as exact calendar days.
        """
        total_months = self.year * 12 + (self.month - 1) + years * 12 + months
        year, month_index = divmod(total_months, 12)
        shifted = self.build(year, month_index + 1, self.day, overflow=overflow)
        if not days:
            return shifted
        try:
            return self.from_date(shifted.to_date() + timedelta(days=days))
        except OverflowError as exc:
            raise InvalidDateError(f"{shifted} plus {days} days is out of range") from exc

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
