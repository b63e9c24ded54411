"""Diagnostic logger for bounded draws.

Uses the standard ``logging`` module with the ``"randomizer"`` logger.
Supports three verbosity levels and an in-memory diagnostic mode for
post-hoc analysis of rejection rates.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from randomizer.config import RandomizerConfig
    from randomizer.logging.types import DrawRecord

logger = logging.getLogger("randomizer")


class DrawLogger:
    """Per-draw diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per draw (kind, range, value, draws).

        ``"full"``: Full JSON dump of all record fields.
    """

    def __init__(self, config: RandomizerConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[DrawRecord] = []

    @property
    def enabled(self) -> bool:
        """Whether records are consumed at all; lets callers skip building them."""
        return self._diagnostic_mode or self._log_level != "none"

    def log_draw(self, record: DrawRecord) -> None:
        """Log a single bounded draw.

        Args:
            record: Immutable record of the draw.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "kind=%s source=%s range=[%d, %d] value=%d draws=%d rejections=%d",
                record.kind,
                record.source,
                record.lo,
                record.hi,
                record.value,
                record.draws,
                record.rejections,
            )
        elif self._log_level == "full":
            logger.info("draw_record: %s", json.dumps(asdict(record)))

    def get_diagnostic_data(self) -> list[DrawRecord]:
        """Return all stored records (requires ``diagnostic_mode=True``)."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        n = len(self._records)
        total_draws = sum(r.draws for r in self._records)
        total_rejections = sum(r.rejections for r in self._records)
        return {
            "total_samples": n,
            "total_draws": total_draws,
            "total_rejections": total_rejections,
            "mean_draws": total_draws / n,
            "rejection_rate": total_rejections / total_draws if total_draws else 0.0,
            "kinds": sorted({r.kind for r in self._records}),
        }
