"""Unit tests for CLI core validators."""

from __future__ import annotations

from pathlib import Path

from link2ink.cli.core.paths import SUPPORTED_DOCUMENT_TYPES
from link2ink.cli.core.types import Failure, Success
from link2ink.cli.core.validators import (
    validate_image_size,
    validate_input_file,
    validate_repo_reference,
    validate_style,
    validate_text,
    validate_url,
    validate_video_reference,
)


class TestValidateUrl:

    def test_accepts_http_urls(self):
        assert validate_url(" https://example.com/post ") == Success("https://example.com/post")

    def test_rejects_other_values(self):
        assert isinstance(validate_url("example.com"), Failure)
        assert isinstance(validate_url("ftp://example.com"), Failure)


class TestSourceReferences:

    def test_video_reference_returns_id(self):
        assert validate_video_reference("https://youtu.be/dQw4w9WgXcQ") == Success("dQw4w9WgXcQ")

    def test_invalid_video_reference(self):
        result = validate_video_reference("https://vimeo.com/1")
        assert isinstance(result, Failure)
        assert result.kind == "invalid_source"

    def test_repo_reference(self):
        result = validate_repo_reference("https://github.com/acme/widgets")
        assert isinstance(result, Success)
        assert result.value.full_name == "acme/widgets"
        assert isinstance(validate_repo_reference("widgets"), Failure)


class TestPresentation:

    def test_custom_style_needs_text(self):
        assert isinstance(validate_style("custom", None), Failure)
        assert validate_style("custom", "Pastel") == Success("custom")
        assert validate_style("anything goes", None) == Success("anything goes")

    def test_image_size(self):
        assert validate_image_size(None) == Success(None)
        assert validate_image_size("4k") == Success("4K")
        assert isinstance(validate_image_size("8K"), Failure)

    def test_text(self):
        assert validate_text("  hello ") == Success("hello")
        assert isinstance(validate_text("   "), Failure)


class TestValidateInputFile:

    def test_missing_file(self, tmp_path: Path):
        result = validate_input_file(tmp_path / "nope.pdf", SUPPORTED_DOCUMENT_TYPES)
        assert isinstance(result, Failure)
        assert "not found" in result.error

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "empty.pdf"
        path.write_bytes(b"")
        assert isinstance(validate_input_file(path, SUPPORTED_DOCUMENT_TYPES), Failure)

    def test_unsupported_type(self, tmp_path: Path):
        path = tmp_path / "song.mp3"
        path.write_bytes(b"ID3")
        assert isinstance(validate_input_file(path, SUPPORTED_DOCUMENT_TYPES), Failure)

    def test_supported_type_returns_mime(self, tmp_path: Path):
        path = tmp_path / "report.PDF"
        path.write_bytes(b"%PDF-1.4")
        assert validate_input_file(path, SUPPORTED_DOCUMENT_TYPES) == Success("application/pdf")
