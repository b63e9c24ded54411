"""Raw bit source subsystem for randomizer.

Re-exports the ABC and all built-in source implementations::

    from randomizer.sources import RawBitSource, SubtractiveSource
"""

from randomizer.sources.base import RawBitSource
from randomizer.sources.mock import ScriptedSource
from randomizer.sources.platform import PlatformSource
from randomizer.sources.subtractive import SubtractiveSource
from randomizer.sources.system import SystemSource

__all__ = [
    "PlatformSource",
    "RawBitSource",
    "ScriptedSource",
    "SubtractiveSource",
    "SystemSource",
]
