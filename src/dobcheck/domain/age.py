"""Age evaluators — three models of calendar correctness.

Each evaluator answers "has the person reached *minimum_age* as of the
reference point?" and returns a bool. They are kept side by side on
purpose; callers pick one through :data:`EVALUATORS`.

- :func:`is_of_age_using_date`: naive field arithmetic on stdlib dates.
- :func:`is_of_age_using_calendar`: one comparison against the birthday
  re-anchored into the reference year (:class:`CalendarDate`, constrain).
- :func:`is_of_age_with_location`: absolute-instant comparison between
  zoned instants, with an optional March 1st rule for leap-day births.

Leap-day policy: a Feb 29 birthday falls on Feb 28 in non-leap years
(``Overflow.CONSTRAIN``). ``force_march_1`` moves it to March 1st for the
zoned evaluator only, judged by the reference instant's year.

Evaluators never raise for well-formed value inputs. Birth after the
reference yields a negative age, which fails any non-negative threshold.
"""

from __future__ import annotations

import calendar
import math
from datetime import date
from enum import StrEnum
from typing import Any, Protocol, TypeVar

from dobcheck.domain.dates import CalendarDate, Overflow
from dobcheck.domain.instants import ZonedInstant

DEFAULT_MINIMUM_AGE = 18

_T_contra = TypeVar("_T_contra", contravariant=True)


class EvaluationMode(StrEnum):
    """Selectable correctness model."""

    DATE = "date"
    CALENDAR = "calendar"
    LOCATION = "location"


class AgeEvaluator(Protocol[_T_contra]):
    """Shared call shape of the three evaluators."""

    def __call__(
        self,
        reference: _T_contra,
        birth: _T_contra,
        minimum_age: float = ...,
    ) -> bool: ...


def _parse_plain(text: str) -> date:
    return CalendarDate.parse(text).to_date()


# ── Naive field arithmetic ───────────────────────────────────────────


def is_of_age_using_date(
    reference: str,
    birth: str,
    minimum_age: float = DEFAULT_MINIMUM_AGE,
) -> bool:
    """Age check from year/month/day fields only; no time or zone."""
    on = _parse_plain(reference)
    born = _parse_plain(birth)

    birth_month, birth_day = born.month, born.day
    if birth_month == 2 and birth_day == 29 and not calendar.isleap(on.year):
        birth_day = 28

    age = on.year - born.year
    has_had_birthday = on.month > birth_month or (on.month == birth_month and on.day >= birth_day)
    if not has_had_birthday:
        age -= 1

    return age >= minimum_age


# ── Calendar-correct ─────────────────────────────────────────────────


def age_in_years(reference: CalendarDate, birth: CalendarDate) -> int:
    """Completed years between *birth* and *reference* (negative if reversed)."""
    anniversary = birth.with_year(reference.year, overflow=Overflow.CONSTRAIN)
    return reference.year - birth.year - (1 if reference < anniversary else 0)


def is_of_age_using_calendar(
    reference: str,
    birth: str,
    minimum_age: float = DEFAULT_MINIMUM_AGE,
) -> bool:
    """Age check against the birthday re-anchored into the reference year."""
    return age_in_years(CalendarDate.parse(reference), CalendarDate.parse(birth)) >= minimum_age


# ── Timezone-aware ───────────────────────────────────────────────────


def adjusted_birthday(
    reference: ZonedInstant,
    birth: ZonedInstant,
    minimum_age: float = DEFAULT_MINIMUM_AGE,
    *,
    force_march_1: bool = False,
) -> ZonedInstant:
    """The instant at which *birth* reaches *minimum_age*.

    Fractional thresholds round up to whole years, matching the integral
    comparison of the field evaluators.
    """
    threshold = birth.add(years=math.ceil(minimum_age), overflow=Overflow.CONSTRAIN)
    if force_march_1 and birth.date.is_leap_day and not reference.date.in_leap_year:
        threshold = threshold.add(days=1)
    return threshold


def is_of_age_with_location(
    reference: ZonedInstant,
    birth: ZonedInstant,
    minimum_age: float = DEFAULT_MINIMUM_AGE,
    force_march_1: bool = False,
) -> bool:
    """Age check on the absolute timeline; inclusive at the threshold instant."""
    threshold = adjusted_birthday(reference, birth, minimum_age, force_march_1=force_march_1)
    return ZonedInstant.compare(reference, threshold) >= 0


EVALUATORS: dict[EvaluationMode, AgeEvaluator[Any]] = {
    EvaluationMode.DATE: is_of_age_using_date,
    EvaluationMode.CALENDAR: is_of_age_using_calendar,
    EvaluationMode.LOCATION: is_of_age_with_location,
}
