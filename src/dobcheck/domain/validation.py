"""Input guards for raw prompt/option strings.

These are presentation-layer checks run before any value reaches the
domain. The domain types enforce their own invariants independently,
so a string passing a guard can still fail construction (``2023-02-30``
matches the date shape but is not a date).
"""

from __future__ import annotations

import re

INPUT_PATTERNS: dict[str, re.Pattern[str]] = {
    "year": re.compile(r"\d{4}"),
    "date": re.compile(r"\d{4}-\d{2}-\d{2}"),
    "time": re.compile(r"([01]\d|2[0-3]):([0-5]\d)(?::([0-5]\d))?"),
    "timezone": re.compile(r"[A-Za-z]+(?:/[A-Za-z_]+)+"),
}


def is_year(value: str) -> bool:
    return INPUT_PATTERNS["year"].fullmatch(value) is not None


def is_date(value: str) -> bool:
    return INPUT_PATTERNS["date"].fullmatch(value) is not None


def is_time(value: str) -> bool:
    return INPUT_PATTERNS["time"].fullmatch(value) is not None


def is_timezone_id(value: str) -> bool:
    """``Area/Location`` with one or more segments; letters and underscores only."""
    return INPUT_PATTERNS["timezone"].fullmatch(value) is not None


def is_allowed_age(value: str | float) -> bool:
    """A positive, finite number of years."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return number > 0 and number != float("inf")


def validate(kind: str, value: str) -> bool:
    """Dispatch to the guard for *kind* (``year``, ``date``, ``time``, ``timezone``, ``age``)."""
    if kind == "age":
        return is_allowed_age(value)
    pattern = INPUT_PATTERNS.get(kind)
    if pattern is None:
        return False
    return pattern.fullmatch(value) is not None
