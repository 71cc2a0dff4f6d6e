"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``dobcheck.toml`` only holds
overrides. The ``[verify]`` defaults are also what the interactive
prompts pre-fill and what ``--no-interact`` falls back to.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from dobcheck.domain.validation import is_date, is_time, is_timezone_id


class VerifyConfig(BaseModel):
    """[verify] section."""

    model_config = {"frozen": True}

    reference_date: str = "2025-02-28"
    reference_time: str = "06:00"
    reference_zone: str = "Europe/Zurich"
    birth_date: str = "2004-02-29"
    birth_time: str = "00:00"
    birthplace: str = "America/New_York"
    minimum_age: float = Field(default=21, gt=0, allow_inf_nan=False)
    force_march_1: bool = False

    @field_validator("reference_date", "birth_date")
    @classmethod
    def _check_date(cls, value: str) -> str:
        if not is_date(value):
            raise ValueError(f"expected YYYY-MM-DD, got {value!r}")
        return value

    @field_validator("reference_time", "birth_time")
    @classmethod
    def _check_time(cls, value: str) -> str:
        if not is_time(value):
            raise ValueError(f"expected HH:MM or HH:MM:SS, got {value!r}")
        return value

    @field_validator("reference_zone", "birthplace")
    @classmethod
    def _check_zone(cls, value: str) -> str:
        if not is_timezone_id(value):
            raise ValueError(f"expected an Area/Location zone id, got {value!r}")
        return value


class BenchConfig(BaseModel):
    """[bench] section."""

    model_config = {"frozen": True}

    per_entries: int = Field(default=1_000_000, ge=100, le=1_000_000)
    iterations: int = Field(default=10, ge=1, le=32)
