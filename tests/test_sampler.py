"""Tests for BoundedUnbiasedSampler."""

from __future__ import annotations

import pytest

from randomizer.exceptions import InvalidRangeError, RangeOverflowError
from randomizer.sampler import BoundedSample, BoundedUnbiasedSampler
from randomizer.sources.mock import ScriptedSource
from randomizer.sources.platform import PlatformSource
from randomizer.sources.subtractive import SubtractiveSource

_TRIALS: int = 10_000


class TestBounds:
    """Every sample stays within the requested inclusive range."""

    @pytest.mark.parametrize(
        ("lo", "hi"),
        [(0, 1), (1, 6), (-10, 10), (0, 254), (-(2**30), 2**30), (0, 2**31 - 2)],
    )
    def test_values_within_range(self, lo: int, hi: int) -> None:
        sampler = BoundedUnbiasedSampler(SubtractiveSource(seed=2021))
        for _ in range(_TRIALS):
            v = sampler.sample(lo, hi)
            assert lo <= v <= hi

    def test_full_span_range_on_32_bit_source(self) -> None:
        sampler = BoundedUnbiasedSampler(PlatformSource(seed=5, bits=32))
        for _ in range(1000):
            v = sampler.sample(-(2**31), 2**31 - 1)
            assert -(2**31) <= v <= 2**31 - 1

    def test_both_endpoints_reachable(self) -> None:
        sampler = BoundedUnbiasedSampler(SubtractiveSource(seed=7))
        seen = {sampler.sample(3, 5) for _ in range(500)}
        assert seen == {3, 4, 5}


class TestSingleValueRange:
    def test_returns_lo_without_drawing(self) -> None:
        source = ScriptedSource([])
        sampler = BoundedUnbiasedSampler(source)
        for _ in range(100):
            assert sampler.sample(17, 17) == 17
        assert source.draw_count == 0

    def test_draw_reports_zero_draws(self) -> None:
        sampler = BoundedUnbiasedSampler(ScriptedSource([]))
        assert sampler.draw(-4, -4) == BoundedSample(value=-4, draws=0, rejections=0)


class TestRejection:
    """Drive the accept/reject boundary with a scripted 8-bit source.

    For range 3 over span 256: limit = 85 * 3 = 255, so only raw 255 is
    rejected.
    """

    def test_value_at_limit_is_rejected(self) -> None:
        source = ScriptedSource([255, 255, 4], bits=8)
        result = BoundedUnbiasedSampler(source).draw(10, 12)
        assert result.value == 10 + 4 % 3
        assert result.draws == 3
        assert result.rejections == 2
        assert source.draw_count == 3

    def test_value_below_limit_is_accepted(self) -> None:
        source = ScriptedSource([254], bits=8)
        result = BoundedUnbiasedSampler(source).draw(0, 2)
        assert result.value == 254 % 3
        assert result.rejections == 0

    def test_mapping_is_lo_plus_remainder(self) -> None:
        source = ScriptedSource([0, 1, 2, 3, 99], bits=8)
        sampler = BoundedUnbiasedSampler(source)
        assert [sampler.sample(5, 7) for _ in range(5)] == [5, 6, 7, 5, 5]

    def test_power_of_two_range_never_rejects(self) -> None:
        source = ScriptedSource(range(256), bits=8)
        sampler = BoundedUnbiasedSampler(source)
        results = [sampler.draw(0, 15) for _ in range(256)]
        assert all(r.rejections == 0 for r in results)
        assert source.draw_count == 256

    def test_full_span_range_never_rejects(self) -> None:
        source = ScriptedSource([255, 0], bits=8)
        sampler = BoundedUnbiasedSampler(source)
        assert sampler.sample(0, 255) == 255
        assert sampler.sample(0, 255) == 0

    def test_non_power_of_two_span(self) -> None:
        """Subtractive span is 2**31 - 1; range 2**30 gives limit 2**30."""
        source = SubtractiveSource(seed=3)
        sampler = BoundedUnbiasedSampler(source)
        results = [sampler.draw(0, 2**30 - 1) for _ in range(2000)]
        rejected = sum(r.rejections for r in results)
        # Rejection probability is about 1/2; expect many, not all.
        assert 0 < rejected
        assert all(r.draws == r.rejections + 1 for r in results)


class TestErrors:
    def test_lo_greater_than_hi(self) -> None:
        sampler = BoundedUnbiasedSampler(ScriptedSource([1]))
        with pytest.raises(InvalidRangeError) as excinfo:
            sampler.sample(5, 3)
        assert excinfo.value.lo == 5
        assert excinfo.value.hi == 3
        assert "[5, 3]" in str(excinfo.value)

    def test_invalid_range_consumes_nothing(self) -> None:
        source = ScriptedSource([1])
        with pytest.raises(InvalidRangeError):
            BoundedUnbiasedSampler(source).sample(1, 0)
        assert source.draw_count == 0

    def test_range_wider_than_span_overflows(self) -> None:
        sampler = BoundedUnbiasedSampler(ScriptedSource([1], bits=8))
        with pytest.raises(RangeOverflowError, match="257"):
            sampler.sample(0, 256)

    def test_overflow_is_builtin_overflow_error(self) -> None:
        sampler = BoundedUnbiasedSampler(SubtractiveSource(seed=1))
        with pytest.raises(OverflowError):
            sampler.sample(0, 2**31 - 1)


class TestRandomFloat:
    def test_divides_by_span(self) -> None:
        sampler = BoundedUnbiasedSampler(ScriptedSource([0, 128, 255], bits=8))
        assert sampler.random() == 0.0
        assert sampler.random() == 0.5
        assert sampler.random() == 255 / 256

    def test_one_draw_per_float(self) -> None:
        source = SubtractiveSource(seed=11)
        sampler = BoundedUnbiasedSampler(source)
        for _ in range(100):
            assert 0.0 <= sampler.random() < 1.0
        assert source.draw_count == 100

    def test_64_bit_source_stays_below_one(self) -> None:
        sampler = BoundedUnbiasedSampler(ScriptedSource([2**64 - 1], bits=64))
        assert sampler.random() < 1.0
