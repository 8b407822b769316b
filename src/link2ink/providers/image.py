"""Image synthesis provider backed by Gemini's image model."""

from __future__ import annotations

import base64
import logging
import time
from typing import Any

from google import genai
from google.genai import types

from .config import ProviderConfig, load_provider_config
from .text import AIEventCallback, InlineDocument

_logger = logging.getLogger("ai_calls")


def extract_first_image(response: Any) -> str | None:
    """Return the first inline image of a response as a base64 string.

    Thought parts are skipped. Returns None when no part carries image data.
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None

    content = getattr(candidates[0], "content", None)
    for part in getattr(content, "parts", None) or []:
        if getattr(part, "thought", False):
            continue
        inline_data = getattr(part, "inline_data", None)
        data = getattr(inline_data, "data", None)
        if not data:
            continue
        if isinstance(data, str):
            return data
        return base64.b64encode(data).decode("ascii")
    return None


class ImageProvider:
    """Gemini image synthesis provider.

    Usage:
        provider = ImageProvider()
        image_b64 = await provider.generate(
            prompt="Vertical infographic about ...",
            api_key=key,
            aspect_ratio="9:16",
        )
    """

    def __init__(self, config: ProviderConfig | None = None):
        """Initialize image provider.

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
                http_options=types.HttpOptions(timeout=self.config.image.timeout * 1000),
            )
            self._clients[api_key] = client
        return client

    async def generate(
        self,
        prompt: str,
        *,
        api_key: str,
        aspect_ratio: str | None = None,
        image_size: str | None = None,
        task: str | None = None,
        reference: InlineDocument | None = None,
        event_callback: AIEventCallback = None,
    ) -> str | None:
        """Generate an image from a prompt.

        Args:
            prompt: Text description of the image.
            api_key: Gemini API key for this call.
            aspect_ratio: Target aspect ratio such as "9:16"; model default when None.
            image_size: Resolution tier ("1K", "2K", "4K"); config default when None.
            task: Optional task name for logging and events.
            reference: Optional source image for edits.
            event_callback: Receives image_call/image_response/image_error events.

        Returns:
            Base64 image payload, or None when the response held no image.
        """
        model_id = self.config.image.model
        size = image_size or self.config.image.image_size

        image_config: dict[str, Any] = {"image_size": size}
        if aspect_ratio:
            image_config["aspect_ratio"] = aspect_ratio

        parts = [types.Part(text=prompt)]
        if reference is not None:
            parts.insert(0, reference.to_part())

        if event_callback:
            await event_callback({
                "type": "image_call",
                "provider": "gemini",
                "model": model_id,
                "prompt_preview": prompt[:200],
                "size": size,
                "aspect_ratio": aspect_ratio,
                "task": task,
            })

        _logger.info(
            f"AI_IMAGE_REQUEST | provider:gemini | model:{model_id} | task:{task} | "
            f"aspect:{aspect_ratio} | size:{size}\n"
            f"--- PROMPT ---\n{prompt}\n"
            f"--- END REQUEST ---"
        )

        start_time = time.time()
        try:
            response = await self._get_client(api_key).aio.models.generate_content(
                model=model_id,
                contents=types.Content(role="user", parts=parts),
                config=types.GenerateContentConfig(
                    response_modalities=["IMAGE"],
                    image_config=types.ImageConfig(**image_config),
                ),
            )
        except Exception as e:
            _logger.warning(f"AI_IMAGE_ERROR | provider:gemini | model:{model_id} | task:{task} | error:{e}")
            if event_callback:
                await event_callback({
                    "type": "image_error",
                    "provider": "gemini",
                    "model": model_id,
                    "task": task,
                    "error": str(e)[:100],
                })
            raise

        duration = time.time() - start_time
        self._total_calls += 1
        image_b64 = extract_first_image(response)

        _logger.info(
            f"AI_IMAGE_RESPONSE | provider:gemini | model:{model_id} | task:{task} | "
            f"duration:{duration:.2f}s | has_image:{image_b64 is not None}"
        )

        if event_callback:
            await event_callback({
                "type": "image_response",
                "provider": "gemini",
                "model": model_id,
                "task": task,
                "duration_seconds": duration,
                "total_calls": self._total_calls,
                "image_size_bytes": len(image_b64) * 3 // 4 if image_b64 else 0,
            })

        return image_b64

    @property
    def total_calls(self) -> int:
        """Number of successful calls made through this provider."""
        return self._total_calls
