"""Diagnostic logger for per-token decoding events.

Uses the standard ``logging`` module with the ``"slot_tagger"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from slot_tagger.config import SlotTaggerConfig
    from slot_tagger.logging.types import TokenDecodingRecord

logger = logging.getLogger("slot_tagger")


class DecodingLogger:
    """Per-token diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per token with the decoded tag, its
        probability and the merge action.

        ``"full"``: Full JSON dump of all record fields.

    Diagnostic mode stores all records in memory for post-hoc analysis via
    ``get_diagnostic_data()`` and ``get_summary_stats()``.
    """

    def __init__(self, config: SlotTaggerConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[TokenDecodingRecord] = []

    def log_token(
        self, record: TokenDecodingRecord, config: SlotTaggerConfig | None = None
    ) -> None:
        """Log a single token decoding event.

        Args:
            record: The token record.
            config: Per-call configuration whose ``log_level`` and
                ``diagnostic_mode`` apply to this record instead of the
                logger's own. Stored records always land on this logger.
        """
        log_level = config.log_level if config is not None else self._log_level
        diagnostic_mode = (
            config.diagnostic_mode if config is not None else self._diagnostic_mode
        )
        if diagnostic_mode:
            self._records.append(record)

        if log_level == "none":
            return

        if log_level == "summary":
            logger.info(
                "intent=%s token=%d %r tag=%s slot=%s prob=%.4f valid=%s action=%s%s",
                record.intent_name,
                record.token_index,
                record.token_text,
                record.tag or "?",
                record.slot_name or "-",
                record.probability,
                record.is_valid,
                record.action,
                " [ENTITY]" if record.entity_bound else "",
            )
        elif log_level == "full":
            logger.info("decoding_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[TokenDecodingRecord]:
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
        probs = [r.probability for r in self._records if r.tag]
        valid_count = sum(1 for r in self._records if r.is_valid)
        undefined_count = sum(1 for r in self._records if r.action == "undefined")
        actions = Counter(r.action for r in self._records)
        return {
            "total_tokens": n,
            "valid_count": valid_count,
            "valid_rate": valid_count / n,
            "undefined_count": undefined_count,
            "mean_probability": sum(probs) / len(probs) if probs else 0.0,
            "min_probability": min(probs) if probs else 0.0,
            "actions": dict(actions),
        }
