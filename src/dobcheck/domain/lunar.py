"""Chinese New Year lookup via the Chinese lunisolar calendar.

Conversion is done by ``lunardate``, which covers lunar years 1900–2099.
The result is checked against a table of published dates so callers can
flag anything the conversion cannot vouch for.
"""

from __future__ import annotations

from enum import StrEnum

from lunardate import LunarDate

from dobcheck.domain.dates import CalendarDate

MIN_LUNAR_YEAR = 1900
MAX_LUNAR_YEAR = 2099

# https://en.wikipedia.org/wiki/Chinese_New_Year#Dates_in_the_Chinese_lunisolar_calendar
KNOWN_NEW_YEARS: dict[int, CalendarDate] = {
    2024: CalendarDate(2024, 2, 10),
    2025: CalendarDate(2025, 1, 29),
    2026: CalendarDate(2026, 2, 17),
    2027: CalendarDate(2027, 2, 6),
    2028: CalendarDate(2028, 1, 26),
    2029: CalendarDate(2029, 2, 13),
    2030: CalendarDate(2030, 2, 3),
    2031: CalendarDate(2031, 1, 23),
    2032: CalendarDate(2032, 2, 11),
    2033: CalendarDate(2033, 1, 31),
    2034: CalendarDate(2034, 2, 19),
    2035: CalendarDate(2035, 2, 8),
}


class Accuracy(StrEnum):
    """How a computed date relates to the published table."""

    VERIFIED = "verified"
    MISMATCH = "mismatch"
    UNVERIFIED = "unverified"


def chinese_new_year(year: int) -> CalendarDate:
    """Gregorian date of the first day of the first lunar month in *year*.

    Mid-year (July 1st) always falls in the lunar year of the same number,
    so that year's month 1 day 1 is the new year we want.

    Raises:
        ValueError: if *year* is outside 1900–2099.
    """
    if not MIN_LUNAR_YEAR <= year <= MAX_LUNAR_YEAR:
        msg = f"Year {year} is outside the supported range {MIN_LUNAR_YEAR}..{MAX_LUNAR_YEAR}"
        raise ValueError(msg)
    midyear = LunarDate.fromSolarDate(year, 7, 1)
    return CalendarDate.from_date(LunarDate(midyear.year, 1, 1).toSolarDate())


def check_accuracy(year: int, computed: CalendarDate) -> Accuracy:
    known = KNOWN_NEW_YEARS.get(year)
    if known is None:
        return Accuracy.UNVERIFIED
    return Accuracy.VERIFIED if known == computed else Accuracy.MISMATCH
