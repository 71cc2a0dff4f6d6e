"""Time sources sampled by the precision benchmark.

Two families:

- ``clock``: millisecond wall-clock readings built from ``datetime`` and
  ``time.time()``.
- ``instant``: epoch readings from ``time.time_ns()``.

Each source is a zero-argument callable returning an int so results can
be collected into a set and counted.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class SourceFamily(StrEnum):
    CLOCK = "clock"
    INSTANT = "instant"


@dataclass(frozen=True)
class TimeSource:
    """A named sampling primitive."""

    key: str
    family: SourceFamily
    label: str
    sample: Callable[[], int]
    note: str


CLOCK_SOURCES: dict[str, TimeSource] = {
    "millis": TimeSource(
        key="millis",
        family=SourceFamily.CLOCK,
        label="datetime.now() milliseconds field",
        sample=lambda: datetime.now().microsecond // 1000,
        note="Millisecond field only (0-999); wraps every second.",
    ),
    "now": TimeSource(
        key="now",
        family=SourceFamily.CLOCK,
        label="time.time() in milliseconds",
        sample=lambda: int(time.time() * 1000),
        note="Epoch milliseconds; usually the fewest distinct values.",
    ),
    "time": TimeSource(
        key="time",
        family=SourceFamily.CLOCK,
        label="datetime.now().timestamp() in milliseconds",
        sample=lambda: int(datetime.now().timestamp() * 1000),
        note="Epoch milliseconds via a datetime object; slower per call.",
    ),
}

INSTANT_SOURCES: dict[str, TimeSource] = {
    "nanos": TimeSource(
        key="nanos",
        family=SourceFamily.INSTANT,
        label="time.time_ns()",
        sample=time.time_ns,
        note="Epoch nanoseconds; resolution depends on the platform clock.",
    ),
    "millis": TimeSource(
        key="millis",
        family=SourceFamily.INSTANT,
        label="time.time_ns() in milliseconds",
        sample=lambda: time.time_ns() // 1_000_000,
        note="Epoch nanoseconds truncated to milliseconds.",
    ),
}


def all_sources() -> list[TimeSource]:
    return [*CLOCK_SOURCES.values(), *INSTANT_SOURCES.values()]
