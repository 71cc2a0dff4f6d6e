"""Tests for benchmark time sources."""

import pytest

from dobcheck.infrastructure.clocks import (
    CLOCK_SOURCES,
    INSTANT_SOURCES,
    SourceFamily,
    all_sources,
)


class TestSources:
    def test_families(self) -> None:
        assert all(s.family is SourceFamily.CLOCK for s in CLOCK_SOURCES.values())
        assert all(s.family is SourceFamily.INSTANT for s in INSTANT_SOURCES.values())

    def test_keys_match_table(self) -> None:
        for table in (CLOCK_SOURCES, INSTANT_SOURCES):
            for key, source in table.items():
                assert source.key == key

    def test_all_sources(self) -> None:
        assert len(all_sources()) == len(CLOCK_SOURCES) + len(INSTANT_SOURCES)

    @pytest.mark.parametrize("source", all_sources(), ids=lambda s: f"{s.family}-{s.key}")
    def test_samples_are_ints(self, source) -> None:
        assert isinstance(source.sample(), int)

    def test_millis_field_wraps(self) -> None:
        assert 0 <= CLOCK_SOURCES["millis"].sample() < 1000

    def test_nanos_finer_than_millis(self) -> None:
        nanos = INSTANT_SOURCES["nanos"].sample()
        millis = INSTANT_SOURCES["millis"].sample()
        assert nanos // 1_000_000 <= millis
