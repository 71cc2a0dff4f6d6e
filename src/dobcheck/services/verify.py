"""VerificationService — build domain values and run an age evaluator.

Two entry points mirror the two input shapes:

- :meth:`VerificationService.verify_dates`: plain ``YYYY-MM-DD`` strings,
  evaluated with the ``date`` or ``calendar`` model.
- :meth:`VerificationService.verify_location`: date + time + zone for both
  the reference and the birth, evaluated on the absolute timeline.

Parse failures come back as ``INVALID_INPUT``; the evaluators themselves
never fail once values are built.
"""

from __future__ import annotations

from typing import Any

from dobcheck.domain.age import (
    EVALUATORS,
    EvaluationMode,
    adjusted_birthday,
    age_in_years,
    is_of_age_with_location,
)
from dobcheck.domain.dates import CalendarDate
from dobcheck.domain.instants import ZonedInstant
from dobcheck.services.base import BaseService
from dobcheck.services.result import ErrorCode, ServiceResult

_OP = "verify"


class VerificationService(BaseService):
    """Runs one of the three evaluators over caller-supplied primitives."""

    def verify_dates(
        self,
        reference: str,
        birth: str,
        minimum_age: float,
        *,
        mode: EvaluationMode = EvaluationMode.CALENDAR,
    ) -> ServiceResult:
        """Evaluate two calendar dates with the ``date`` or ``calendar`` model."""
        if mode is EvaluationMode.LOCATION:
            return ServiceResult.failure(
                _OP,
                ErrorCode.INVALID_ARGUMENT,
                "The location model needs times and zones; use verify_location",
                mode=str(mode),
            )

        try:
            reference_date = CalendarDate.parse(reference)
            birth_date = CalendarDate.parse(birth)
            of_age = EVALUATORS[mode](reference, birth, minimum_age)
        except ValueError as exc:
            return ServiceResult.failure(_OP, ErrorCode.INVALID_INPUT, str(exc), mode=str(mode))

        age = age_in_years(reference_date, birth_date)
        self._log.debug("verify.evaluated", mode=str(mode), age=age, of_age=of_age)

        warnings: list[str] = []
        if birth_date > reference_date:
            warnings.append(f"Birth date {birth_date} is after reference date {reference_date}")

        return ServiceResult(
            ok=True,
            op=_OP,
            data={
                "mode": str(mode),
                "reference": str(reference_date),
                "birth": str(birth_date),
                "minimum_age": minimum_age,
                "age": age,
                "of_age": of_age,
            },
            warnings=warnings,
        )

    def verify_location(
        self,
        *,
        reference_date: str,
        reference_time: str | None,
        reference_zone: str,
        birth_date: str,
        birth_time: str | None,
        birthplace: str,
        minimum_age: float,
        force_march_1: bool = False,
    ) -> ServiceResult:
        """Evaluate two zoned instants by their UTC positions."""
        mode = str(EvaluationMode.LOCATION)
        try:
            reference = ZonedInstant.of(reference_date, reference_time, reference_zone)
            birth = ZonedInstant.of(birth_date, birth_time, birthplace)
        except ValueError as exc:
            return ServiceResult.failure(_OP, ErrorCode.INVALID_INPUT, str(exc), mode=mode)

        try:
            threshold = adjusted_birthday(
                reference, birth, minimum_age, force_march_1=force_march_1
            )
        except (ValueError, OverflowError) as exc:
            return ServiceResult.failure(_OP, ErrorCode.OUT_OF_RANGE, str(exc), mode=mode)
        of_age = is_of_age_with_location(reference, birth, minimum_age, force_march_1)
        self._log.debug(
            "verify.evaluated",
            mode=mode,
            reference_utc=reference.instant.isoformat(),
            threshold_utc=threshold.instant.isoformat(),
            of_age=of_age,
        )

        data: dict[str, Any] = {
            "mode": mode,
            "reference": str(reference),
            "birth": str(birth),
            "threshold": str(threshold),
            "reference_utc": reference.instant.isoformat(),
            "threshold_utc": threshold.instant.isoformat(),
            "minimum_age": minimum_age,
            "force_march_1": force_march_1,
            "of_age": of_age,
        }
        return ServiceResult(
            ok=True,
            op=_OP,
            data=data,
            warnings=_leap_rule_warnings(reference, birth, threshold, force_march_1),
        )


def _leap_rule_warnings(
    reference: ZonedInstant,
    birth: ZonedInstant,
    threshold: ZonedInstant,
    force_march_1: bool,
) -> list[str]:
    """Flag leap-day births whose March 1st rule is judged by a different year.

    The rule looks at the reference year, while the anniversary lands in
    the threshold year. When the two disagree on leap-ness the outcome may
    not match the intended jurisdiction policy.
    """
    if not (force_march_1 and birth.date.is_leap_day):
        return []
    if reference.date.in_leap_year == threshold.date.in_leap_year:
        return []
    return [
        f"March 1st rule judged by reference year {reference.date.year}, "
        f"but the anniversary falls in {threshold.date.year}"
    ]
