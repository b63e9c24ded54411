"""Diagnostic logging subsystem for randomizer.

Provides immutable per-draw records and a configurable logger that supports
none/summary/full verbosity and in-memory diagnostic mode.
"""

from randomizer.logging.logger import DrawLogger
from randomizer.logging.types import DrawRecord

__all__ = [
    "DrawLogger",
    "DrawRecord",
]
