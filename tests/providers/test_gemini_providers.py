"""Tests for the Gemini text and image providers.

The google-genai client is replaced with a mock, so no network is used.
"""

from __future__ import annotations

import base64
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from link2ink.providers.config import ProviderConfig, load_provider_config
from link2ink.providers.image import ImageProvider, extract_first_image
from link2ink.providers.text import InlineDocument, TextProvider, TextResult, extract_references


# =============================================================================
# Fixtures
# =============================================================================

def _part(text=None, data=None, thought=False, mime_type="image/png"):
    inline = SimpleNamespace(data=data, mime_type=mime_type) if data is not None else None
    return SimpleNamespace(text=text, inline_data=inline, thought=thought)


def _response(parts, chunks=None, finish_reason="STOP", block_reason=None):
    metadata = SimpleNamespace(grounding_chunks=chunks) if chunks is not None else None
    candidate = SimpleNamespace(
        content=SimpleNamespace(parts=parts),
        grounding_metadata=metadata,
        finish_reason=finish_reason,
    )
    return SimpleNamespace(
        candidates=[candidate],
        prompt_feedback=SimpleNamespace(block_reason=block_reason),
    )


def _chunk(uri, title=None):
    return SimpleNamespace(web=SimpleNamespace(uri=uri, title=title))


def _install_client(provider, api_key: str, response=None, error=None) -> AsyncMock:
    generate = AsyncMock(return_value=response, side_effect=error)
    client = MagicMock()
    client.aio.models.generate_content = generate
    provider._clients[api_key] = client
    return generate


@pytest.fixture
def events() -> list[dict]:
    return []


@pytest.fixture
def event_callback(events):
    async def record(event):
        events.append(event)
    return record


# =============================================================================
# Text provider
# =============================================================================

class TestTextProvider:

    @pytest.mark.asyncio
    async def test_returns_text_and_references(self, event_callback, events):
        provider = TextProvider(ProviderConfig())
        response = _response(
            [_part(text="thinking...", thought=True), _part(text="Brief "), _part(text="body")],
            chunks=[_chunk("https://a.example", "A"), _chunk(None), _chunk("https://b.example")],
        )
        generate = _install_client(provider, "key", response=response)

        result = await provider.generate(
            "Analyze", api_key="key", use_search=True, task="analyze_url", event_callback=event_callback
        )

        assert result.text == "Brief body"
        assert result.references == [
            {"uri": "https://a.example", "title": "A"},
            {"uri": "https://b.example", "title": None},
        ]
        config = generate.call_args.kwargs["config"]
        assert config.tools[0].google_search is not None
        assert [e["type"] for e in events] == ["text_call", "text_response"]
        assert provider.total_calls == 1

    @pytest.mark.asyncio
    async def test_plain_call_sends_no_config(self):
        provider = TextProvider(ProviderConfig())
        generate = _install_client(provider, "key", response=_response([_part(text="ok")]))

        await provider.generate("Hello", api_key="key")

        assert generate.call_args.kwargs["config"] is None
        assert generate.call_args.kwargs["contents"] == "Hello"

    @pytest.mark.asyncio
    async def test_document_is_sent_before_prompt(self):
        provider = TextProvider(ProviderConfig())
        generate = _install_client(provider, "key", response=_response([_part(text="ok")]))
        document = InlineDocument(data_base64=base64.b64encode(b"%PDF").decode(), mime_type="application/pdf")

        await provider.generate("Summarize", api_key="key", document=document, temperature=0.3)

        contents = generate.call_args.kwargs["contents"]
        assert contents[0].inline_data.data == b"%PDF"
        assert contents[0].inline_data.mime_type == "application/pdf"
        assert contents[1].text == "Summarize"
        assert generate.call_args.kwargs["config"].temperature == 0.3

    @pytest.mark.asyncio
    async def test_errors_emit_event_and_propagate(self, event_callback, events):
        provider = TextProvider(ProviderConfig())
        _install_client(provider, "key", error=RuntimeError("Requested entity was not found."))

        with pytest.raises(RuntimeError):
            await provider.generate("Hello", api_key="key", event_callback=event_callback)

        assert events[-1]["type"] == "text_error"
        assert "Requested entity" in events[-1]["error"]
        assert provider.total_calls == 0

    @pytest.mark.asyncio
    async def test_safety_finish_reason_is_reported(self):
        provider = TextProvider(ProviderConfig())
        _install_client(provider, "key", response=_response([_part(text="")], finish_reason="SAFETY"))

        result = await provider.generate("Hello", api_key="key")

        assert result.safety_blocked

    def test_block_reason_marks_safety(self):
        assert TextResult(text="", block_reason="PROHIBITED_CONTENT").safety_blocked
        assert not TextResult(text="x", finish_reason="STOP").safety_blocked

    def test_references_without_metadata(self):
        assert extract_references(_response([_part(text="x")])) == []
        assert extract_references(SimpleNamespace(candidates=[])) == []


# =============================================================================
# Image provider
# =============================================================================

class TestImageProvider:

    @pytest.mark.asyncio
    async def test_returns_first_image_as_base64(self, event_callback, events):
        provider = ImageProvider(ProviderConfig())
        response = _response([_part(text="Here you go"), _part(data=b"\x89PNG-bytes")])
        generate = _install_client(provider, "key", response=response)

        image = await provider.generate(
            "Draw", api_key="key", aspect_ratio="9:16", event_callback=event_callback
        )

        assert base64.b64decode(image) == b"\x89PNG-bytes"
        config = generate.call_args.kwargs["config"]
        assert config.response_modalities == ["IMAGE"]
        assert config.image_config.aspect_ratio == "9:16"
        assert config.image_config.image_size == "2K"
        assert [e["type"] for e in events] == ["image_call", "image_response"]

    @pytest.mark.asyncio
    async def test_no_image_returns_none(self):
        provider = ImageProvider(ProviderConfig())
        _install_client(provider, "key", response=_response([_part(text="I cannot draw that")]))

        assert await provider.generate("Draw", api_key="key") is None

    @pytest.mark.asyncio
    async def test_reference_image_precedes_prompt(self):
        provider = ImageProvider(ProviderConfig())
        generate = _install_client(provider, "key", response=_response([_part(data=b"img")]))
        reference = InlineDocument(data_base64=base64.b64encode(b"src").decode(), mime_type="image/jpeg")

        await provider.generate("Make it blue", api_key="key", reference=reference, image_size="4K")

        contents = generate.call_args.kwargs["contents"]
        assert contents.parts[0].inline_data.data == b"src"
        assert contents.parts[1].text == "Make it blue"
        assert generate.call_args.kwargs["config"].image_config.image_size == "4K"

    def test_thought_images_are_skipped(self):
        response = _response([_part(data=b"draft", thought=True), _part(data=b"final")])
        assert base64.b64decode(extract_first_image(response)) == b"final"

    def test_empty_response(self):
        assert extract_first_image(SimpleNamespace(candidates=None)) is None


class TestProviderConfig:
    """Tests for YAML configuration loading."""

    def test_missing_file_uses_defaults(self, tmp_path):
        config = load_provider_config(tmp_path / "missing.yaml")
        assert config == ProviderConfig()

    def test_yaml_overrides_sections(self, tmp_path):
        path = tmp_path / "providers.yaml"
        path.write_text(
            "image:\n  image_size: 4K\n"
            "analysis:\n  min_brief_length: 10\n  analyze_text_sources: false\n",
            encoding="utf-8",
        )

        config = load_provider_config(path)

        assert config.image.image_size == "4K"
        assert config.analysis.min_brief_length == 10
        assert config.analysis.analyze_text_sources is False
        assert config.text == ProviderConfig().text

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "providers.yaml"
        path.write_text("", encoding="utf-8")
        assert load_provider_config(path) == ProviderConfig()
