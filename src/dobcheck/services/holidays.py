"""HolidayService — Chinese New Year dates for Gregorian years."""

from __future__ import annotations

from typing import Any

from dobcheck.domain.lunar import KNOWN_NEW_YEARS, Accuracy, check_accuracy, chinese_new_year
from dobcheck.services.base import BaseService
from dobcheck.services.result import ErrorCode, ServiceResult


class HolidayService(BaseService):
    """Lunisolar conversions used by the holiday helper."""

    def new_year(self, year: int) -> ServiceResult:
        op = "new_year"
        try:
            date = chinese_new_year(year)
        except ValueError as exc:
            return ServiceResult.failure(op, ErrorCode.OUT_OF_RANGE, str(exc), year=year)

        accuracy = check_accuracy(year, date)
        self._log.debug("calendar.new_year", year=year, date=str(date), accuracy=str(accuracy))

        warnings: list[str] = []
        if accuracy is Accuracy.MISMATCH:
            warnings.append(
                "Calendar implementation is not 100% accurate, "
                f"real date should be {KNOWN_NEW_YEARS[year]}."
            )
        elif accuracy is Accuracy.UNVERIFIED:
            warnings.append(
                f"The result for year {year} cannot be verified, and may be inaccurate."
            )

        data: dict[str, Any] = {"year": year, "date": str(date), "accuracy": str(accuracy)}
        if year in KNOWN_NEW_YEARS:
            data["expected"] = str(KNOWN_NEW_YEARS[year])
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
