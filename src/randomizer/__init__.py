"""randomizer: selectable random-number generators behind one interface.

Pick a :class:`GeneratorKind` (platform default, rejection sampling or
cryptographically secure), ask a :class:`GeneratorRegistry` for its handle,
and draw unbiased bounded integers, unit floats or bytes from it.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("randomizer")
except PackageNotFoundError:
    __version__ = "0.0.0"

from randomizer.config import RandomizerConfig, resolve_config
from randomizer.exceptions import (
    ConfigValidationError,
    EntropyUnavailableError,
    InvalidRangeError,
    RandomizerError,
    RangeOverflowError,
    UnknownGeneratorKindError,
)
from randomizer.generators import Generator, GeneratorRegistry
from randomizer.kinds import GeneratorKind, parse_generator_kind
from randomizer.sampler import BoundedSample, BoundedUnbiasedSampler

__all__ = [
    "BoundedSample",
    "BoundedUnbiasedSampler",
    "ConfigValidationError",
    "EntropyUnavailableError",
    "Generator",
    "GeneratorKind",
    "GeneratorRegistry",
    "InvalidRangeError",
    "RandomizerConfig",
    "RandomizerError",
    "RangeOverflowError",
    "UnknownGeneratorKindError",
    "__version__",
    "parse_generator_kind",
    "resolve_config",
]
