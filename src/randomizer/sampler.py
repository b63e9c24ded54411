"""Bounded unbiased integer sampling by rejection.

Mapping a raw draw into ``[lo, hi]`` with ``draw % range`` over-represents
low values whenever ``range`` does not divide the source span. The sampler
accepts only draws below the largest multiple of ``range`` that fits in the
span and redraws otherwise, which makes every value in range equally likely.
The expected number of draws per sample is ``span / limit < 2``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from randomizer.exceptions import InvalidRangeError, RangeOverflowError

if TYPE_CHECKING:
    from randomizer.sources.base import RawBitSource

_FLOAT_BITS = 53


@dataclass(frozen=True, slots=True)
class BoundedSample:
    """Result of one bounded draw.

    Attributes:
        value: The sampled integer in ``[lo, hi]``.
        draws: Raw values consumed, including rejected ones.
        rejections: Raw values discarded for falling at or above the limit.
    """

    value: int
    draws: int
    rejections: int


class BoundedUnbiasedSampler:
    """Unbiased integers in an inclusive range on top of a raw bit source.

    Args:
        source: Uniform raw source over ``[0, source.span)``.
    """

    def __init__(self, source: RawBitSource) -> None:
        self._source = source

    @property
    def source(self) -> RawBitSource:
        return self._source

    def draw(self, lo: int, hi: int) -> BoundedSample:
        """Sample an integer in ``[lo, hi]`` and report the draws it took.

        Args:
            lo: Inclusive lower bound.
            hi: Inclusive upper bound.

        Returns:
            BoundedSample with the value and draw diagnostics.

        Raises:
            InvalidRangeError: If ``hi < lo``.
            RangeOverflowError: If the range holds more values than the
                source can produce.
        """
        if hi < lo:
            raise InvalidRangeError(lo, hi)

        span = self._source.span
        size = hi - lo + 1
        if size > span:
            raise RangeOverflowError(
                f"Range [{lo}, {hi}] holds {size} values, more than the "
                f"{span} a {self._source.name!r} source can produce"
            )
        if size == 1:
            return BoundedSample(value=lo, draws=0, rejections=0)

        limit = (span // size) * size
        draws = 0
        while True:
            raw = self._source.next_raw()
            draws += 1
            if raw < limit:
                return BoundedSample(value=lo + raw % size, draws=draws, rejections=draws - 1)

    def sample(self, lo: int, hi: int) -> int:
        """Return an unbiased integer in ``[lo, hi]``.

        See :meth:`draw` for errors.
        """
        return self.draw(lo, hi).value

    def random(self) -> float:
        """Return a float in ``[0, 1)`` from a single raw draw.

        The result is ``raw / span`` and carries at most ``log2(span)`` bits
        of precision, capped at the 53 bits of a double. No rejection is
        needed for a continuous target.
        """
        raw = self._source.next_raw()
        span = self._source.span
        # Drop low bits that a double cannot hold so the quotient stays below 1.
        shift = span.bit_length() - 1 - _FLOAT_BITS
        if shift > 0:
            return (raw >> shift) / (span >> shift)
        return raw / span
