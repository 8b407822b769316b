"""Stateless service for infographic generation."""

from __future__ import annotations

import base64
from pathlib import Path

from rich.status import Status

from ...content.models import (
    FileSource,
    GenerationRequest,
    PresentationOptions,
    TextSource,
    UrlSource,
    VideoSource,
)
from ...services.output import OutputService
from ...services.progress import ProgressCallback
from ..core.failures import run_with_credential_retry
from ..core.paths import SUPPORTED_DOCUMENT_TYPES, SUPPORTED_IMAGE_TYPES, guess_mime_type
from ..core.session import build_orchestrator
from ..core.types import Failure, Result, SavedOutput, Success


def build_source(kind: str, value: str):
    """Build the request source for a CLI command kind."""
    if kind == "url":
        return UrlSource(url=value)
    if kind == "video":
        return VideoSource(reference=value)
    if kind == "text":
        return TextSource(text=value)
    path = Path(value)
    mime_type = guess_mime_type(path, SUPPORTED_DOCUMENT_TYPES) or "application/octet-stream"
    return FileSource(
        data_base64=base64.b64encode(path.read_bytes()).decode("ascii"),
        mime_type=mime_type,
        filename=path.name,
    )


class InfographicService:
    """Stateless service for infographic generation.

    All state is passed via params - no instance state.
    """

    async def generate(
        self,
        kind: str,
        source: str,
        options: PresentationOptions,
        output_dir: Path,
        image_size: str | None = None,
        on_progress: ProgressCallback | None = None,
        status: Status | None = None,
    ) -> Result[SavedOutput]:
        """Generate and save one infographic.

        Returns:
            Result containing SavedOutput or Failure
        """
        try:
            request = GenerationRequest(source=build_source(kind, source), options=options)
        except (OSError, ValueError) as e:
            return Failure(str(e), kind="invalid_source")

        orchestrator = build_orchestrator(image_size, status=status)
        result = await run_with_credential_retry(
            orchestrator.credentials,
            lambda: orchestrator.generate(request, on_progress=on_progress),
        )
        if isinstance(result, Failure):
            return result

        generated = result.value
        title = generated.video_title or request.source.describe()
        try:
            output_path = OutputService(output_dir).save(generated, title=title)
        except Exception as e:
            return Failure(f"Could not save the infographic: {e}", kind="output")

        return Success(SavedOutput(
            output_path=output_path,
            title=title,
            citation_count=len(generated.citations),
            metadata={
                "citations": [c.model_dump() for c in generated.citations],
                "kind": kind,
            },
        ))


class ImageEditService:
    """Stateless service for editing an existing image with an instruction."""

    async def edit(
        self,
        image_path: Path,
        instruction: str,
        output_path: Path,
        on_progress: ProgressCallback | None = None,
        status: Status | None = None,
    ) -> Result[Path]:
        mime_type = guess_mime_type(image_path, SUPPORTED_IMAGE_TYPES)
        if mime_type is None:
            return Failure(f"Unsupported image type: {image_path.suffix}", kind="invalid_source")

        image_base64 = base64.b64encode(image_path.read_bytes()).decode("ascii")
        orchestrator = build_orchestrator(status=status)
        result = await run_with_credential_retry(
            orchestrator.credentials,
            lambda: orchestrator.edit_image(image_base64, mime_type, instruction, on_progress=on_progress),
        )
        if isinstance(result, Failure):
            return result

        try:
            return Success(OutputService.save_image(result.value, output_path))
        except Exception as e:
            return Failure(f"Could not save the edited image: {e}", kind="output")
