"""Knuth's subtractive generator.

The lagged-subtraction scheme from Numerical Recipes in C (2nd ed., 1992),
``ran3``. The second lag index starts at 31, the value Knuth specifies;
some well-known ports start it at 21. Outputs fall in ``[0, 2**31 - 1)``.
"""

from __future__ import annotations

import os

from randomizer.sources.base import RawBitSource

_MBIG = 2**31 - 1
_MSEED = 161803398
_SIZE = 56
_LAG = 31


def _entropy_seed() -> int:
    return int.from_bytes(os.urandom(4), "little") % _MBIG


class SubtractiveSource(RawBitSource):
    """Seeded, deterministic subtractive generator.

    Args:
        seed: Non-negative seed; negative seeds are folded to their absolute
            value. ``None`` seeds from ``os.urandom()``.
    """

    def __init__(self, seed: int | None = None) -> None:
        super().__init__()
        self._seed = _entropy_seed() if seed is None else abs(seed) % _MBIG
        self._state = [0] * _SIZE
        self._inext = 0
        self._inextp = _LAG
        self._initialize(self._seed)

    @property
    def name(self) -> str:
        """Return ``'subtractive'``."""
        return "subtractive"

    @property
    def bits(self) -> int:
        return 31

    @property
    def span(self) -> int:
        """``2**31 - 1``: draws never reach the modulus."""
        return _MBIG

    @property
    def seed(self) -> int:
        """Seed the state table was initialized from."""
        return self._seed

    def _initialize(self, seed: int) -> None:
        state = self._state
        last = _SIZE - 1
        mj = abs(_MSEED - seed) % _MBIG
        state[last] = mj
        mk = 1
        for i in range(1, last):
            ii = (21 * i) % last
            state[ii] = mk
            mk = mj - mk
            if mk < 0:
                mk += _MBIG
            mj = state[ii]

        # Warm the table up.
        for _ in range(4):
            for k in range(1, _SIZE):
                value = state[k] - state[1 + (k + 30) % last]
                if value < 0:
                    value += _MBIG
                state[k] = value

    def _next(self) -> int:
        self._inext += 1
        if self._inext >= _SIZE:
            self._inext = 1
        self._inextp += 1
        if self._inextp >= _SIZE:
            self._inextp = 1

        value = self._state[self._inext] - self._state[self._inextp]
        if value < 0:
            value += _MBIG
        self._state[self._inext] = value
        return value
