"""Platform default bit source backed by numpy's default generator (PCG64).

Not cryptographically secure and not guaranteed reproducible across numpy
releases. Seeded runs are reproducible on a given installation.
"""

from __future__ import annotations

import numpy as np

from randomizer.sources.base import RawBitSource


class PlatformSource(RawBitSource):
    """``numpy.random.default_rng()`` wrapper.

    Args:
        seed: Optional seed for reproducible output; negative seeds are folded
            to their absolute value.
        bits: Raw output width, between 1 and 64.
    """

    def __init__(self, seed: int | None = None, bits: int = 32) -> None:
        if not 1 <= bits <= 64:
            raise ValueError(f"bits must be in [1, 64], got {bits}")
        super().__init__()
        self._bits = bits
        self._seed = None if seed is None else abs(seed)
        self._rng = np.random.default_rng(self._seed)

    @property
    def name(self) -> str:
        """Return ``'platform'``."""
        return "platform"

    @property
    def bits(self) -> int:
        return self._bits

    @property
    def generator(self) -> np.random.Generator:
        """The underlying numpy Generator, for native bounded draws."""
        return self._rng

    def _next(self) -> int:
        return int(self._rng.integers(0, 1 << self._bits, dtype=np.uint64))
