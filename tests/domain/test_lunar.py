"""Tests for Chinese New Year conversion."""

import pytest

from dobcheck.domain.dates import CalendarDate
from dobcheck.domain.lunar import (
    KNOWN_NEW_YEARS,
    MAX_LUNAR_YEAR,
    MIN_LUNAR_YEAR,
    Accuracy,
    check_accuracy,
    chinese_new_year,
)


class TestChineseNewYear:
    @pytest.mark.parametrize(
        ("year", "expected"),
        [
            (2024, CalendarDate(2024, 2, 10)),
            (2025, CalendarDate(2025, 1, 29)),
            (2026, CalendarDate(2026, 2, 17)),
            (2033, CalendarDate(2033, 1, 31)),
        ],
    )
    def test_known_years(self, year: int, expected: CalendarDate) -> None:
        assert chinese_new_year(year) == expected

    def test_matches_whole_table(self) -> None:
        for year, expected in KNOWN_NEW_YEARS.items():
            assert chinese_new_year(year) == expected, year

    def test_lower_bound(self) -> None:
        assert chinese_new_year(MIN_LUNAR_YEAR) == CalendarDate(1900, 1, 31)

    def test_upper_bound(self) -> None:
        result = chinese_new_year(MAX_LUNAR_YEAR)
        assert result.year == MAX_LUNAR_YEAR
        assert result.month in (1, 2)

    def test_falls_between_jan_21_and_feb_20(self) -> None:
        for year in range(1990, 2060):
            result = chinese_new_year(year)
            assert CalendarDate(year, 1, 21) <= result <= CalendarDate(year, 2, 20), year

    @pytest.mark.parametrize("year", [MIN_LUNAR_YEAR - 1, MAX_LUNAR_YEAR + 1, 1])
    def test_out_of_range(self, year: int) -> None:
        with pytest.raises(ValueError, match="outside the supported range"):
            chinese_new_year(year)


class TestCheckAccuracy:
    def test_verified(self) -> None:
        assert check_accuracy(2024, CalendarDate(2024, 2, 10)) is Accuracy.VERIFIED

    def test_mismatch(self) -> None:
        assert check_accuracy(2024, CalendarDate(2024, 2, 11)) is Accuracy.MISMATCH

    def test_unverified_outside_table(self) -> None:
        assert check_accuracy(1999, CalendarDate(1999, 2, 16)) is Accuracy.UNVERIFIED
