"""Scripted raw bit source for tests.

Replays a fixed sequence of raw values so that the rejection loop can be
driven through exact accept/reject paths.
"""

from __future__ import annotations

from collections.abc import Iterable

from randomizer.sources.base import RawBitSource


class ScriptedSource(RawBitSource):
    """Returns the given *values* in order, then raises ``IndexError``.

    Usage:
        - **Rejection paths**: feed values ``>= limit`` before an accepted one.
        - **Draw counting**: ``draw_count`` reports how many values were read.

    Args:
        values: Raw values to replay; each must lie in ``[0, 2**bits)``.
        bits: Raw output width.
        cycle: Restart from the first value when exhausted.
    """

    def __init__(self, values: Iterable[int], bits: int = 8, cycle: bool = False) -> None:
        super().__init__()
        self._values = list(values)
        self._bits = bits
        self._cycle = cycle
        self._pos = 0
        for value in self._values:
            if not 0 <= value < (1 << bits):
                raise ValueError(f"Scripted value {value} outside [0, 2**{bits})")

    @property
    def name(self) -> str:
        """Return ``'scripted'``."""
        return "scripted"

    @property
    def bits(self) -> int:
        return self._bits

    def _next(self) -> int:
        if self._pos >= len(self._values):
            if not self._cycle or not self._values:
                raise IndexError(f"Scripted source exhausted after {self._pos} values")
            self._pos = 0
        value = self._values[self._pos]
        self._pos += 1
        return value
