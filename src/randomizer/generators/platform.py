"""Platform default generator.

Delegates bounded integers, floats and bytes to numpy's own ``Generator``
methods, which are unbiased. Bounds are limited to signed 64-bit integers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from randomizer.exceptions import InvalidRangeError, RangeOverflowError
from randomizer.generators.base import Generator
from randomizer.generators.registry import register_generator
from randomizer.kinds import GeneratorKind
from randomizer.sampler import BoundedSample
from randomizer.sources.platform import PlatformSource

if TYPE_CHECKING:
    from randomizer.config import RandomizerConfig

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _check_bounds(lo: int, hi: int) -> None:
    if hi < lo:
        raise InvalidRangeError(lo, hi)
    if lo < _INT64_MIN or hi > _INT64_MAX:
        raise RangeOverflowError(
            f"Range [{lo}, {hi}] exceeds the signed 64-bit bounds of the platform generator"
        )


@register_generator(GeneratorKind.PLATFORM_DEFAULT)
class PlatformDefaultGenerator(Generator):
    """Handle backed by :class:`~randomizer.sources.platform.PlatformSource`.

    Seeded from ``config.seed``; unseeded instances draw fresh OS entropy.
    """

    kind = GeneratorKind.PLATFORM_DEFAULT
    _source: PlatformSource

    def _build_source(self, config: RandomizerConfig) -> PlatformSource:
        return PlatformSource(seed=config.seed, bits=config.raw_bits)

    def _bounded(self, lo: int, hi: int) -> BoundedSample:
        _check_bounds(lo, hi)
        if lo == hi:
            return BoundedSample(value=lo, draws=0, rejections=0)
        value = int(self._source.generator.integers(lo, hi, endpoint=True))
        return BoundedSample(value=value, draws=1, rejections=0)

    def _random(self) -> float:
        return float(self._source.generator.random())

    def _bytes(self, n: int) -> bytes:
        return self._source.generator.bytes(n)

    def _bounded_list(self, size: int, lo: int, hi: int) -> list[int]:
        _check_bounds(lo, hi)
        values = self._source.generator.integers(lo, hi, size=size, endpoint=True)
        return [int(v) for v in values]
