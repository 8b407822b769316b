"""Rejection rules for analysis briefs.

The analysis model is told to answer with a fixed marker when it cannot
verify the source. Detection is plain substring matching, so a legitimate
brief that happens to quote a marker is rejected too.
"""

from __future__ import annotations

import logging

from ..errors import UnverifiableContentError, UnverifiableReason
from ..providers.config import AnalysisConfig

_logger = logging.getLogger("ai_calls")


class BriefValidator:
    """Checks a brief for failure markers and a minimum length."""

    def __init__(
        self,
        min_length: int,
        not_found_markers: list[str],
        insufficient_data_markers: list[str],
        safety_markers: list[str],
    ):
        self.min_length = min_length
        # Checked in order; the first matching marker decides the reason
        self._markers: list[tuple[str, UnverifiableReason]] = [
            *((m, UnverifiableReason.NOT_FOUND) for m in not_found_markers),
            *((m, UnverifiableReason.SAFETY) for m in safety_markers),
            *((m, UnverifiableReason.INSUFFICIENT_DATA) for m in insufficient_data_markers),
        ]

    @classmethod
    def from_config(cls, config: AnalysisConfig) -> "BriefValidator":
        return cls(
            min_length=config.min_brief_length,
            not_found_markers=config.not_found_markers,
            insufficient_data_markers=config.insufficient_data_markers,
            safety_markers=config.safety_markers,
        )

    def classify(self, text: str, safety_blocked: bool = False) -> UnverifiableReason | None:
        """Return the failure reason for a brief, or None if it is usable."""
        if safety_blocked:
            return UnverifiableReason.SAFETY

        for marker, reason in self._markers:
            if marker and marker in text:
                return reason

        if len(text.strip()) < self.min_length:
            return UnverifiableReason.INSUFFICIENT_DATA

        return None

    def validate(self, text: str, source: str, safety_blocked: bool = False) -> str:
        """Return the brief unchanged, or raise if it must not be used.

        Raises:
            UnverifiableContentError: with the matching reason.
        """
        reason = self.classify(text, safety_blocked=safety_blocked)
        if reason is not None:
            _logger.warning(
                f"BRIEF_REJECTED | source:{source} | reason:{reason.value} | length:{len(text.strip())}"
            )
            raise UnverifiableContentError(reason, source, detail=text.strip()[:200] or None)
        return text
