"""Unit tests for CLI core parsers."""

from __future__ import annotations

import pytest

from link2ink.cli.core.parsers import mask_secret, parse_aspect_ratio
from link2ink.content.models import AspectRatio


class TestParseAspectRatio:
    """Tests for parse_aspect_ratio function."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("9:16", AspectRatio.PORTRAIT),
            ("16:9", AspectRatio.LANDSCAPE),
            ("16x9", AspectRatio.LANDSCAPE),
            ("4/3", AspectRatio.CLASSIC),
            (" 3:4 ", AspectRatio.CLASSIC_PORTRAIT),
            ("portrait", AspectRatio.PORTRAIT),
            ("Landscape", AspectRatio.LANDSCAPE),
            ("square", AspectRatio.SQUARE),
        ],
    )
    def test_valid_values(self, value: str, expected: AspectRatio):
        assert parse_aspect_ratio(value) == expected

    @pytest.mark.parametrize("value", ["21:9", "tall", "", "16"])
    def test_invalid_values(self, value: str):
        with pytest.raises(ValueError, match="Invalid aspect ratio"):
            parse_aspect_ratio(value)


class TestMaskSecret:

    def test_shows_last_four(self):
        assert mask_secret("AIzaSyExample1234") == "*************1234"

    def test_short_values_fully_masked(self):
        assert mask_secret("abc") == "***"
