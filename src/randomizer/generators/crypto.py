"""Cryptographically secure generator backed by ``os.urandom()``.

If the OS cannot provide entropy the error reaches the caller; no weaker
generator is ever substituted for this kind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from randomizer.generators.base import Generator
from randomizer.generators.registry import register_generator
from randomizer.kinds import GeneratorKind
from randomizer.sampler import BoundedUnbiasedSampler
from randomizer.sources.system import SystemSource

if TYPE_CHECKING:
    from randomizer.config import RandomizerConfig
    from randomizer.sampler import BoundedSample


@register_generator(GeneratorKind.CRYPTOGRAPHICALLY_SECURE)
class CryptographicGenerator(Generator):
    """Handle over :class:`~randomizer.sources.system.SystemSource`.

    The OS CSPRNG is thread safe, so calls are not serialized.
    """

    kind = GeneratorKind.CRYPTOGRAPHICALLY_SECURE
    _source: SystemSource

    def __init__(
        self,
        config: RandomizerConfig | None = None,
        source: SystemSource | None = None,
    ) -> None:
        super().__init__(config, source)
        self._sampler = BoundedUnbiasedSampler(self._source)

    def _build_source(self, config: RandomizerConfig) -> SystemSource:
        return SystemSource(bits=config.raw_bits)

    def _bounded(self, lo: int, hi: int) -> BoundedSample:
        return self._sampler.draw(lo, hi)

    def _random(self) -> float:
        return self._sampler.random()

    def _bytes(self, n: int) -> bytes:
        return self._source.get_random_bytes(n)
