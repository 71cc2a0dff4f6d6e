"""ZonedInstant — an absolute point in time observed from a named zone.

A ZonedInstant keeps the local calendar date, the local wall-clock time,
and an IANA zone id. The UTC position is resolved through ``zoneinfo``;
local times that fall in a DST gap or overlap resolve with ``fold=0``
(the offset in effect before the transition).

Ordering is always by UTC position (:meth:`ZonedInstant.compare`), never
by local fields. Aware ``datetime`` objects sharing a tzinfo compare by
wall clock, so comparisons go through :attr:`ZonedInstant.instant`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import UTC, datetime, time
from typing import Self
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dobcheck.domain.dates import CalendarDate, Overflow
from dobcheck.domain.errors import InvalidTimeError, InvalidTimeZoneError

DEFAULT_ZONE = "Europe/Zurich"

_TIME = re.compile(r"(\d{2}):(\d{2})(?::(\d{2}))?")


def parse_time(text: str) -> time:
    """Parse ``HH:MM`` or ``HH:MM:SS`` into a naive ``time``."""
    match = _TIME.fullmatch(text.strip())
    if match is None:
        raise InvalidTimeError(f"Invalid time {text!r}, expected HH:MM or HH:MM:SS")
    hour, minute, second = match.groups()
    try:
        return time(int(hour), int(minute), int(second or 0))
    except ValueError as exc:
        raise InvalidTimeError(f"Invalid time {text!r}: {exc}") from exc


def load_zone(zone_id: str) -> ZoneInfo:
    """Look up *zone_id* in the time-zone database.

    Raises:
        InvalidTimeZoneError: if the id is unknown or not a zone file.
    """
    try:
        return ZoneInfo(zone_id)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise InvalidTimeZoneError(f"Unknown time zone {zone_id!r}") from exc


@dataclass(frozen=True)
class ZonedInstant:
    """Local date + wall-clock time + zone id, resolving to one UTC instant."""

    date: CalendarDate
    wall_time: time
    zone: str

    def __post_init__(self) -> None:
        load_zone(self.zone)
        if self.wall_time.tzinfo is not None:
            raise InvalidTimeError("ZonedInstant time-of-day must be naive")

    # ── Construction ─────────────────────────────────────────────────

    @classmethod
    def of(cls, date_text: str, time_text: str | None = None, zone: str = DEFAULT_ZONE) -> Self:
        """Combine ``YYYY-MM-DD``, optional ``HH:MM[:SS]`` and a zone id.

        A missing time means midnight at the start of the local day.
        """
        wall = parse_time(time_text) if time_text else time(0, 0)
        return cls(CalendarDate.parse(date_text), wall, zone)

    @classmethod
    def from_datetime(cls, value: datetime, zone: str) -> Self:
        """Express *value* in *zone*.

        Aware datetimes are converted into the zone first; naive ones are
        taken as local wall-clock time there.
        """
        local = value.astimezone(load_zone(zone)) if value.tzinfo is not None else value
        return cls(CalendarDate.from_date(local.date()), local.time(), zone)

    # ── Views ────────────────────────────────────────────────────────

    @property
    def local(self) -> datetime:
        """Aware datetime carrying the zone's tzinfo."""
        return datetime.combine(self.date.to_date(), self.wall_time, tzinfo=load_zone(self.zone))

    @property
    def instant(self) -> datetime:
        """The same moment as an aware UTC datetime."""
        return self.local.astimezone(UTC)

    @property
    def utc_offset_seconds(self) -> int:
        offset = self.local.utcoffset()
        return int(offset.total_seconds()) if offset is not None else 0

    # ── Arithmetic ───────────────────────────────────────────────────

    def add(
        self,
        *,
        years: int = 0,
        months: int = 0,
        days: int = 0,
        overflow: Overflow = Overflow.CONSTRAIN,
    ) -> Self:
        """Calendar-aware addition on the local date; wall-clock time is kept."""
        return replace(
            self,
            date=self.date.add(years=years, months=months, days=days, overflow=overflow),
        )

    def with_zone(self, zone: str) -> Self:
        """The same absolute instant observed from *zone*."""
        return self.from_datetime(self.instant, zone)

    @staticmethod
    def compare(a: ZonedInstant, b: ZonedInstant) -> int:
        """Return -1, 0 or 1 ordering *a* and *b* on the UTC timeline."""
        left, right = a.instant, b.instant
        return (left > right) - (left < right)

    def __str__(self) -> str:
        return f"{self.local.isoformat()}[{self.zone}]"


def make_instant(text: str, zone: str = DEFAULT_ZONE) -> ZonedInstant:
    """Build an instant from ``YYYY-MM-DD`` or ``YYYY-MM-DDTHH:MM[:SS]`` text."""
    date_text, _, time_text = text.partition("T")
    return ZonedInstant.of(date_text, time_text or None, zone)
