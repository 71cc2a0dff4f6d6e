"""Tests for config section models — defaults and field checks."""

import pytest
from pydantic import ValidationError

from dobcheck.config.models import BenchConfig, VerifyConfig


class TestVerifyConfig:
    def test_defaults(self) -> None:
        cfg = VerifyConfig()
        assert cfg.reference_date == "2025-02-28"
        assert cfg.birth_time == "00:00"
        assert cfg.minimum_age == 21
        assert cfg.force_march_1 is False

    def test_sparse_override(self) -> None:
        cfg = VerifyConfig.model_validate({"minimum_age": 16, "birthplace": "Asia/Tokyo"})
        assert cfg.minimum_age == 16
        assert cfg.birthplace == "Asia/Tokyo"
        assert cfg.reference_zone == "Europe/Zurich"

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("reference_date", "2025/02/28"),
            ("birth_time", "7pm"),
            ("reference_zone", "UTC"),
            ("minimum_age", 0),
            ("minimum_age", -2),
            ("minimum_age", float("inf")),
            ("minimum_age", "inf"),
            ("minimum_age", "nan"),
        ],
    )
    def test_rejects_bad_values(self, field: str, value: object) -> None:
        with pytest.raises(ValidationError):
            VerifyConfig.model_validate({field: value})

    def test_frozen(self) -> None:
        cfg = VerifyConfig()
        with pytest.raises(ValidationError):
            cfg.minimum_age = 18  # type: ignore[misc]


class TestBenchConfig:
    def test_defaults(self) -> None:
        cfg = BenchConfig()
        assert cfg.per_entries == 1_000_000
        assert cfg.iterations == 10

    @pytest.mark.parametrize(
        ("field", "value"),
        [("per_entries", 99), ("per_entries", 1_000_001), ("iterations", 0), ("iterations", 33)],
    )
    def test_bounds(self, field: str, value: int) -> None:
        with pytest.raises(ValidationError):
            BenchConfig.model_validate({field: value})
