"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DrawRecord:
    """Immutable record of a single bounded draw.

    Attributes:
        timestamp_ns: Wall-clock time of the draw (nanoseconds since epoch).
        kind: Label of the generator kind that served the draw.
        source: Name of the raw bit source behind the generator.
        lo: Inclusive lower bound requested.
        hi: Inclusive upper bound requested.
        value: The value returned.
        draws: Raw values consumed (0 for single-value ranges; 1 for
            generators that bound natively).
        rejections: Raw values discarded by rejection sampling.
    """

    timestamp_ns: int
    kind: str
    source: str

    # Request
    lo: int
    hi: int

    # Outcome
    value: int
    draws: int
    rejections: int
