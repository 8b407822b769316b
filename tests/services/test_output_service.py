"""Tests for OutputService and ProgressManager."""

from __future__ import annotations

import base64
import json
from datetime import datetime
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from PIL import Image, UnidentifiedImageError

from link2ink.content.models import Citation, GenerationResult, GenerationStage, RepoAnalysisResult
from link2ink.services.output import OutputService, slugify
from link2ink.services.progress import ProgressManager
from link2ink.sources.models import RepoFile, RepoReference


class TestOutputService:

    def test_slugify(self):
        assert slugify("How We Cut Costs by 40%!") == "how-we-cut-costs-by-40"
        assert slugify("!!!") == "infographic"

    def test_output_path_layout(self, tmp_path: Path):
        service = OutputService(tmp_path)
        path = service.get_output_path("My Post", now=datetime(2025, 3, 7, 14, 5, 9))
        assert path == tmp_path / "2025" / "03" / "07-140509-my-post"

    def test_save_writes_image_brief_and_citations(self, tmp_path: Path, png_base64: str):
        result = GenerationResult(
            image_base64=png_base64,
            analysis_text="# Brief\nKey stats",
            citations=[Citation(uri="https://a.example", title="A")],
        )

        path = OutputService(tmp_path).save(result, title="https://example.com/post")

        with Image.open(path / "infographic.png") as img:
            assert img.format == "PNG"
        assert (path / "analysis.md").read_text(encoding="utf-8") == "# Brief\nKey stats"
        citations = json.loads((path / "citations.json").read_text(encoding="utf-8"))
        assert citations == [{"uri": "https://a.example", "title": "A"}]

    def test_video_title_names_the_folder(self, tmp_path: Path, png_base64: str):
        result = GenerationResult(image_base64=png_base64, analysis_text="x", video_title="Deep Work")

        path = OutputService(tmp_path).save(result, title="dQw4w9WgXcQ")

        assert path.name.endswith("deep-work")

    def test_jpeg_payload_is_converted_to_png(self, tmp_path: Path):
        from io import BytesIO

        buffer = BytesIO()
        Image.new("L", (4, 4), 128).save(buffer, format="JPEG")
        payload = base64.b64encode(buffer.getvalue()).decode()

        target = OutputService.save_image(payload, tmp_path / "out.png")

        with Image.open(target) as img:
            assert img.format == "PNG"

    def test_invalid_image_raises(self, tmp_path: Path):
        with pytest.raises(UnidentifiedImageError):
            OutputService.save_image(base64.b64encode(b"not an image").decode(), tmp_path / "x.png")

    def test_undecodable_image_creates_no_folder(self, tmp_path: Path):
        result = GenerationResult(
            image_base64=base64.b64encode(b"not an image").decode(),
            analysis_text="brief",
        )

        with pytest.raises(UnidentifiedImageError):
            OutputService(tmp_path).save(result, title="broken")

        assert list(tmp_path.iterdir()) == []

    def test_failed_write_removes_new_folder(
        self, tmp_path: Path, png_base64: str, monkeypatch: pytest.MonkeyPatch
    ):
        service = OutputService(tmp_path)
        target = tmp_path / "2025" / "03" / "07-140509-post"
        monkeypatch.setattr(service, "get_output_path", lambda title, now=None: target)

        def disk_full(*args, **kwargs):
            raise OSError("No space left on device")

        monkeypatch.setattr("link2ink.services.output.json.dump", disk_full)
        result = GenerationResult(image_base64=png_base64, analysis_text="brief")

        with pytest.raises(OSError, match="No space left"):
            service.save(result, title="post")

        assert not target.exists()

    def test_save_repository_skips_missing_poster(self, tmp_path: Path, png_base64: str):
        result = RepoAnalysisResult(
            repo=RepoReference(owner="acme", repo="widgets"),
            technical_image=png_base64,
            feature_image=None,
            feature_summary="Summary",
            files=[RepoFile(path="app.py")],
        )

        path = OutputService(tmp_path).save_repository(result)

        assert (path / "technical.png").exists()
        assert not (path / "features.png").exists()
        assert json.loads((path / "files.json").read_text()) == [{"path": "app.py", "size": None}]


class TestProgressManager:

    @pytest.mark.asyncio
    async def test_counts_provider_responses(self, mock_progress_callback: AsyncMock):
        manager = ProgressManager("abcd1234", callback=mock_progress_callback)

        await manager.start_stage(GenerationStage.ANALYZING, "Analyzing")
        await manager.handle_ai_event({"type": "text_call", "model": "m"})
        await manager.handle_ai_event({"type": "text_response", "model": "m", "duration_seconds": 1.5})
        await manager.start_stage(GenerationStage.DESIGNING, "Designing")
        await manager.handle_ai_event({"type": "image_response", "model": "img"})
        await manager.complete()

        final = mock_progress_callback.updates[-1]
        assert final.stage == GenerationStage.COMPLETED
        assert final.total_text_calls == 1
        assert final.total_image_calls == 1
        assert final.completed_steps == 2
        assert all(u.request_id == "abcd1234" for u in mock_progress_callback.updates)

    @pytest.mark.asyncio
    async def test_fail_records_error(self, mock_progress_callback: AsyncMock):
        manager = ProgressManager("abcd1234", callback=mock_progress_callback)

        await manager.fail("boom")

        assert manager.progress.stage == GenerationStage.FAILED
        assert manager.progress.errors == ["boom"]

    @pytest.mark.asyncio
    async def test_works_without_callback(self):
        manager = ProgressManager("abcd1234")
        await manager.start_stage(GenerationStage.ANALYZING, "Analyzing")
        assert manager.progress.label == "Analyzing"
