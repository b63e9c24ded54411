"""Abstract base class for generator handles.

A handle is the uniform capability surface returned by the registry for
every generator kind: bounded integers, unit floats, bytes and integer
lists. Each handle owns exactly one raw bit source. Calls into a handle
whose source is not thread safe are serialized by a per-handle lock.
"""

from __future__ import annotations

import threading
import time
from abc import ABC, abstractmethod
from contextlib import nullcontext
from typing import TYPE_CHECKING, Any, ClassVar

from randomizer.config import RandomizerConfig
from randomizer.exceptions import InvalidRangeError
from randomizer.logging.logger import DrawLogger
from randomizer.logging.types import DrawRecord

if TYPE_CHECKING:
    from randomizer.kinds import GeneratorKind
    from randomizer.sampler import BoundedSample
    from randomizer.sources.base import RawBitSource


class Generator(ABC):
    """Abstract base for all generator handles.

    Subclasses set :attr:`kind`, build their default source in
    ``_build_source()`` and implement ``_bounded()`` and ``_random()``.

    Args:
        config: Active configuration. Defaults to ``RandomizerConfig()``.
        source: Raw bit source to use instead of the kind's default.
    """

    kind: ClassVar[GeneratorKind]

    def __init__(
        self,
        config: RandomizerConfig | None = None,
        source: RawBitSource | None = None,
    ) -> None:
        self._config = config if config is not None else RandomizerConfig()
        self._source = source if source is not None else self._build_source(self._config)
        self._lock: Any = nullcontext() if self._source.is_thread_safe else threading.Lock()
        self._draw_logger = DrawLogger(self._config)

    @property
    def source(self) -> RawBitSource:
        """The raw bit source owned by this handle."""
        return self._source

    @property
    def draw_logger(self) -> DrawLogger:
        return self._draw_logger

    @abstractmethod
    def _build_source(self, config: RandomizerConfig) -> RawBitSource:
        """Construct the default raw source for this kind."""

    @abstractmethod
    def _bounded(self, lo: int, hi: int) -> BoundedSample:
        """Draw one integer in ``[lo, hi]``. Called with the handle lock held."""

    @abstractmethod
    def _random(self) -> float:
        """Draw one float in ``[0, 1)``. Called with the handle lock held."""

    def _bytes(self, n: int) -> bytes:
        return bytes(self._bounded(0, 255).value for _ in range(n))

    def _bounded_list(self, size: int, lo: int, hi: int) -> list[int]:
        return [self._bounded(lo, hi).value for _ in range(size)]

    def randint(self, lo: int, hi: int) -> int:
        """Return a uniformly distributed integer in ``[lo, hi]``.

        Args:
            lo: Inclusive lower bound.
            hi: Inclusive upper bound.

        Returns:
            An integer ``v`` with ``lo <= v <= hi``.

        Raises:
            InvalidRangeError: If ``hi < lo``.
            RangeOverflowError: If the range cannot be represented.
            EntropyUnavailableError: If the source cannot provide entropy.
        """
        with self._lock:
            result = self._bounded(lo, hi)

        if self._draw_logger.enabled:
            self._draw_logger.log_draw(
                DrawRecord(
                    timestamp_ns=time.time_ns(),
                    kind=self.kind.label,
                    source=self._source.name,
                    lo=lo,
                    hi=hi,
                    value=result.value,
                    draws=result.draws,
                    rejections=result.rejections,
                )
            )
        return result.value

    def random(self) -> float:
        """Return a uniformly distributed float in ``[0, 1)``."""
        with self._lock:
            return self._random()

    def random_bytes(self, n: int) -> bytes:
        """Return *n* uniformly distributed random bytes.

        Raises:
            ValueError: If *n* is negative.
        """
        if n < 0:
            raise ValueError(f"Byte count must be non-negative, got {n}")
        with self._lock:
            return self._bytes(n)

    def randint_list(self, size: int, lo: int, hi: int) -> list[int]:
        """Return *size* integers, each uniformly distributed in ``[lo, hi]``.

        Raises:
            ValueError: If *size* is not positive.
            InvalidRangeError: If ``hi < lo``.
        """
        if hi < lo:
            raise InvalidRangeError(lo, hi)
        if size <= 0:
            raise ValueError(f"List size must be positive, got {size}")
        with self._lock:
            return self._bounded_list(size, lo, hi)

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this handle and its source."""
        return {"kind": self.kind.label, "source": self._source.health_check()}
