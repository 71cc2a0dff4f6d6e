"""Malformed-input errors raised while building domain values.

Both are ``ValueError`` subclasses so callers that only care about
"bad input" can catch the builtin.
"""

from __future__ import annotations


class InvalidDateError(ValueError):
    """A date string or field combination is not a valid Gregorian date."""


class InvalidTimeError(ValueError):
    """A time-of-day string is not ``HH:MM`` or ``HH:MM:SS``."""


class InvalidTimeZoneError(ValueError):
    """A zone identifier is unknown to the time-zone database."""
