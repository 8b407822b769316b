"""Tests for BriefValidator."""

from __future__ import annotations

import pytest

from link2ink.content.validation import BriefValidator
from link2ink.errors import UnverifiableContentError, UnverifiableReason
from link2ink.providers.config import AnalysisConfig

USABLE_BRIEF = "A" * 60


@pytest.fixture
def validator() -> BriefValidator:
    return BriefValidator.from_config(AnalysisConfig())


class TestBriefValidator:
    """Tests for marker and length checks."""

    def test_usable_brief_is_returned_unchanged(self, validator: BriefValidator):
        assert validator.validate(USABLE_BRIEF, "source") == USABLE_BRIEF

    def test_marker_anywhere_in_text_rejects(self, validator: BriefValidator):
        text = USABLE_BRIEF + " ... SOURCE_NOT_FOUND ... " + USABLE_BRIEF
        assert validator.classify(text) == UnverifiableReason.NOT_FOUND

    def test_not_found_wins_over_insufficient_data(self, validator: BriefValidator):
        assert validator.classify("INSUFFICIENT_DATA SOURCE_NOT_FOUND") == UnverifiableReason.NOT_FOUND

    def test_length_is_measured_after_trimming(self, validator: BriefValidator):
        padded = "   " + "x" * 49 + "\n\n\n" + " " * 20
        assert validator.classify(padded) == UnverifiableReason.INSUFFICIENT_DATA
        assert validator.classify("x" * 50) is None

    def test_safety_flag_rejects_even_good_text(self, validator: BriefValidator):
        assert validator.classify(USABLE_BRIEF, safety_blocked=True) == UnverifiableReason.SAFETY

    def test_validate_raises_with_source_and_reason(self, validator: BriefValidator):
        with pytest.raises(UnverifiableContentError) as exc_info:
            validator.validate("VIDEO_NOT_FOUND_IN_SEARCH", "https://youtu.be/dQw4w9WgXcQ")

        error = exc_info.value
        assert error.reason == UnverifiableReason.NOT_FOUND
        assert error.source == "https://youtu.be/dQw4w9WgXcQ"
        assert "could not be found" in str(error)

    def test_custom_markers_and_threshold(self):
        validator = BriefValidator(
            min_length=10,
            not_found_markers=["NOPE"],
            insufficient_data_markers=["THIN"],
            safety_markers=["BLOCKED"],
        )

        assert validator.classify("this says NOPE loudly") == UnverifiableReason.NOT_FOUND
        assert validator.classify("THIN content here") == UnverifiableReason.INSUFFICIENT_DATA
        assert validator.classify("BLOCKED for policy") == UnverifiableReason.SAFETY
        assert validator.classify("ten chars!") is None
        # Default markers no longer apply
        assert validator.classify("SOURCE_NOT_FOUND") is None
