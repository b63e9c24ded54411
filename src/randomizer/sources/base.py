"""Abstract base class for all raw bit sources.

A raw bit source produces uniformly distributed integers over a fixed
output space ``[0, span)``. For full-width sources ``span == 2**bits``.
Every distribution the generators offer is built on top of ``next_raw()``.
Subclasses implement ``name``, ``bits`` and ``_next()``; the base class
keeps the draw counter.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Any


class RawBitSource(ABC):
    """Abstract base for all raw bit sources."""

    is_thread_safe: bool = False
    """Whether concurrent ``next_raw()`` calls are safe without a lock."""

    def __init__(self) -> None:
        self._draw_count = 0
        self._count_lock = threading.Lock()

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g. ``'subtractive'``, ``'system'``)."""

    @property
    @abstractmethod
    def bits(self) -> int:
        """Width of a raw draw in bits."""

    @property
    def span(self) -> int:
        """Number of distinct raw values; draws fall in ``[0, span)``."""
        return 1 << self.bits

    @property
    def draw_count(self) -> int:
        """Number of raw values consumed so far."""
        return self._draw_count

    def next_raw(self) -> int:
        """Return the next raw value in ``[0, span)``.

        Raises:
            EntropyUnavailableError: If the source cannot produce a value.
        """
        value = self._next()
        # Lock-free sources may be drawn from concurrently.
        with self._count_lock:
            self._draw_count += 1
        return value

    @abstractmethod
    def _next(self) -> int:
        """Produce one raw value. Called only through :meth:`next_raw`."""

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with ``'source'``, ``'bits'``, ``'span'`` and
            ``'draws'`` keys.
        """
        return {
            "source": self.name,
            "bits": self.bits,
            "span": self.span,
            "draws": self._draw_count,
        }
