"""System entropy source using ``os.urandom()``.

Cryptographically secure. Failures of the OS entropy pool are surfaced as
:class:`~randomizer.exceptions.EntropyUnavailableError`.
"""

from __future__ import annotations

import os

from randomizer.exceptions import EntropyUnavailableError
from randomizer.sources.base import RawBitSource


class SystemSource(RawBitSource):
    """``os.urandom()`` wrapper producing *bits*-wide raw integers.

    Args:
        bits: Raw output width; a positive multiple of 8.
    """

    is_thread_safe = True

    def __init__(self, bits: int = 32) -> None:
        if bits <= 0 or bits % 8:
            raise ValueError(f"bits must be a positive multiple of 8, got {bits}")
        super().__init__()
        self._bits = bits
        self._width = bits // 8

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    @property
    def bits(self) -> int:
        return self._bits

    def get_random_bytes(self, n: int) -> bytes:
        """Return *n* bytes from the OS CSPRNG.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes of entropy from ``os.urandom()``.

        Raises:
            EntropyUnavailableError: If the OS cannot provide entropy.
        """
        try:
            return os.urandom(n)
        except (OSError, NotImplementedError) as exc:
            raise EntropyUnavailableError(f"OS entropy unavailable: {exc}") from exc

    def _next(self) -> int:
        return int.from_bytes(self.get_random_bytes(self._width), "little")
