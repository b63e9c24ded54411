"""Exception hierarchy for randomizer.

All exceptions derive from RandomizerError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""

from __future__ import annotations


class RandomizerError(Exception):
    """Base exception for all randomizer errors."""


class InvalidRangeError(RandomizerError):
    """A bounded request was made with ``lo > hi``.

    Never retried. The offending bounds are kept on the exception for
    diagnostics.
    """

    def __init__(self, lo: int, hi: int) -> None:
        self.lo = lo
        self.hi = hi
        super().__init__(f"Invalid range [{lo}, {hi}]: lower bound exceeds upper bound")


class RangeOverflowError(RandomizerError, OverflowError):
    """The requested range cannot be represented by the underlying source.

    Raised when ``hi - lo + 1`` exceeds the span of the raw source, or the
    integer width of a platform generator.
    """


class UnknownGeneratorKindError(RandomizerError):
    """A selector value does not name a known generator kind."""

    def __init__(self, value: object, valid: list[str]) -> None:
        self.value = value
        super().__init__(
            f"Unknown generator kind: {value!r}. Available: {', '.join(valid)}"
        )


class EntropyUnavailableError(RandomizerError):
    """The operating system could not provide entropy.

    Propagated to the caller as-is; no weaker generator is substituted.
    """


class ConfigValidationError(RandomizerError):
    """Configuration field validation failed.

    Raised when overrides name unknown fields or carry values that are
    rejected by the config model.
    """
