"""Rejection-sampling generator.

Bounded integers come from :class:`~randomizer.sampler.BoundedUnbiasedSampler`
over Knuth's subtractive generator, so no value in a range is favoured.
Bytes are drawn through the sampler as well rather than by truncating raw
values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from randomizer.generators.base import Generator
from randomizer.generators.registry import register_generator
from randomizer.kinds import GeneratorKind
from randomizer.sampler import BoundedUnbiasedSampler
from randomizer.sources.subtractive import SubtractiveSource

if TYPE_CHECKING:
    from randomizer.config import RandomizerConfig
    from randomizer.sampler import BoundedSample
    from randomizer.sources.base import RawBitSource


@register_generator(GeneratorKind.REJECTION_SAMPLING)
class RejectionSamplingGenerator(Generator):
    """Deterministic handle: same seed, same sequence.

    Seeded from ``config.seed``; unseeded instances draw a seed from
    ``os.urandom()``.
    """

    kind = GeneratorKind.REJECTION_SAMPLING

    def __init__(
        self,
        config: RandomizerConfig | None = None,
        source: RawBitSource | None = None,
    ) -> None:
        super().__init__(config, source)
        self._sampler = BoundedUnbiasedSampler(self._source)

    @property
    def sampler(self) -> BoundedUnbiasedSampler:
        return self._sampler

    def _build_source(self, config: RandomizerConfig) -> RawBitSource:
        return SubtractiveSource(seed=config.seed)

    def _bounded(self, lo: int, hi: int) -> BoundedSample:
        return self._sampler.draw(lo, hi)

    def _random(self) -> float:
        return self._sampler.random()
