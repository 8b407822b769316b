"""Text analysis provider backed by Gemini through the google-genai SDK.

Handles plain prompts, prompts with an inline document, and prompts grounded
with Google Search. Grounding references are returned raw; deduplication is
the caller's job.
"""

from __future__ import annotations

import base64
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Awaitable

from google import genai
from google.genai import types

from .config import ProviderConfig, load_provider_config

_logger = logging.getLogger("ai_calls")

# Type for AI event callback
AIEventCallback = Callable[[dict[str, Any]], Awaitable[None]] | None

SAFETY_FINISH_REASONS = {"SAFETY", "PROHIBITED_CONTENT", "BLOCKLIST", "SPII"}


@dataclass
class InlineDocument:
    """A document sent alongside the prompt (base64 payload + MIME type)."""

    data_base64: str
    mime_type: str

    def to_part(self) -> types.Part:
        return types.Part(
            inline_data=types.Blob(
                data=base64.b64decode(self.data_base64),
                mime_type=self.mime_type,
            )
        )


@dataclass
class TextResult:
    """Outcome of one analysis call."""

    text: str
    references: list[dict[str, str | None]] = field(default_factory=list)
    finish_reason: str | None = None
    block_reason: str | None = None

    @property
    def safety_blocked(self) -> bool:
        """Whether the provider stopped or blocked the call for safety reasons."""
        if self.block_reason:
            return True
        return (self.finish_reason or "").upper() in SAFETY_FINISH_REASONS


def _enum_name(value: Any) -> str | None:
    if value is None:
        return None
    return str(getattr(value, "value", value))


def extract_references(response: Any) -> list[dict[str, str | None]]:
    """Pull web grounding chunks out of a response, in the order returned."""
    references: list[dict[str, str | None]] = []
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return references

    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        uri = getattr(web, "uri", None)
        if uri:
            references.append({"uri": uri, "title": getattr(web, "title", None)})
    return references


def extract_text(response: Any) -> str:
    """Concatenate the non-thought text parts of the first candidate."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return ""
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    chunks = [
        part.text
        for part in parts
        if getattr(part, "text", None) and not getattr(part, "thought", False)
    ]
    return "".join(chunks)


class TextProvider:
    """Gemini text generation provider.

    Usage:
        provider = TextProvider()
        result = await provider.generate(
            "Summarize https://example.com/post",
            api_key=key,
            use_search=True,
        )
        print(result.text, result.references)
    """

    def __init__(self, config: ProviderConfig | None = None):
        """Initialize the text provider.

        Args:
            config: Provider configuration. If None, loads from default config file.
        """
        self.config = config or load_provider_config()
        self._clients: dict[str, genai.Client] = {}
        self._total_calls = 0

    def _get_client(self, api_key: str) -> genai.Client:
        client = self._clients.get(api_key)
        if client is None:
            client = genai.Client(
                api_key=api_key,
                http_options=types.HttpOptions(timeout=self.config.text.timeout * 1000),
            )
            self._clients[api_key] = client
        return client

    def _build_config(
        self,
        use_search: bool,
        temperature: float | None,
    ) -> types.GenerateContentConfig | None:
        params: dict[str, Any] = {}
        if use_search:
            params["tools"] = [types.Tool(google_search=types.GoogleSearch())]
        if temperature is None:
            temperature = self.config.text.temperature
        if temperature is not None:
            params["temperature"] = temperature
        return types.GenerateContentConfig(**params) if params else None

    async def generate(
        self,
        prompt: str,
        *,
        api_key: str,
        task: str | None = None,
        use_search: bool = False,
        temperature: float | None = None,
        document: InlineDocument | None = None,
        event_callback: AIEventCallback = None,
    ) -> TextResult:
        """Run one analysis call.

        Args:
            prompt: The prompt to send to the model.
            api_key: Gemini API key for this call.
            task: Optional task name for logging and events.
            use_search: Enable Google Search grounding.
            temperature: Sampling temperature; config default when None.
            document: Optional inline document sent before the prompt.
            event_callback: Receives text_call/text_response/text_error events.

        Returns:
            TextResult with the generated text and raw grounding references.
        """
        model_id = self.config.text.model

        if document is not None:
            contents: Any = [document.to_part(), types.Part(text=prompt)]
        else:
            contents = prompt

        if event_callback:
            await event_callback({
                "type": "text_call",
                "provider": "gemini",
                "model": model_id,
                "prompt_preview": prompt[:200],
                "task": task,
                "grounded": use_search,
            })

        _logger.info(
            f"AI_REQUEST | provider:gemini | model:{model_id} | task:{task} | "
            f"search:{use_search} | document:{document.mime_type if document else '(none)'}\n"
            f"--- PROMPT ---\n{prompt}\n"
            f"--- END REQUEST ---"
        )

        start_time = time.time()
        try:
            response = await self._get_client(api_key).aio.models.generate_content(
                model=model_id,
                contents=contents,
                config=self._build_config(use_search, temperature),
            )
        except Exception as e:
            _logger.warning(f"AI_ERROR | provider:gemini | model:{model_id} | task:{task} | error:{e}")
            if event_callback:
                await event_callback({
                    "type": "text_error",
                    "provider": "gemini",
                    "model": model_id,
                    "task": task,
                    "error": str(e)[:100],
                })
            raise

        duration = time.time() - start_time
        self._total_calls += 1

        candidates = getattr(response, "candidates", None) or []
        feedback = getattr(response, "prompt_feedback", None)
        result = TextResult(
            text=extract_text(response),
            references=extract_references(response),
            finish_reason=_enum_name(getattr(candidates[0], "finish_reason", None)) if candidates else None,
            block_reason=_enum_name(getattr(feedback, "block_reason", None)),
        )

        _logger.info(
            f"AI_RESPONSE | provider:gemini | model:{model_id} | task:{task} | "
            f"duration:{duration:.2f}s | references:{len(result.references)} | "
            f"finish:{result.finish_reason}\n"
            f"--- RESPONSE ---\n{result.text}\n"
            f"--- END RESPONSE ---"
        )

        if event_callback:
            await event_callback({
                "type": "text_response",
                "provider": "gemini",
                "model": model_id,
                "task": task,
                "response_preview": result.text[:200],
                "duration_seconds": duration,
                "total_calls": self._total_calls,
            })

        return result

    @property
    def total_calls(self) -> int:
        """Number of successful calls made through this provider."""
        return self._total_calls
