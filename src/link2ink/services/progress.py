"""Progress management service.

One ProgressManager is created per request, so concurrent requests never
share progress state or callbacks.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Awaitable, TYPE_CHECKING

if TYPE_CHECKING:
    from ..content.models import GenerationProgress, GenerationStage


# Logger for progress events
_logger = logging.getLogger("ai_calls")

# Type for progress callback
ProgressCallback = Callable[["GenerationProgress"], Awaitable[None]]


class ProgressManager:
    """Tracks and reports the stages of a single generation request.

    Usage:
        manager = ProgressManager(request_id="a1b2c3d4", callback=show_stage)
        await manager.start_stage(GenerationStage.ANALYZING, "Analyzing source")
        await manager.start_stage(GenerationStage.DESIGNING, "Designing infographic")
        await manager.complete()
    """

    def __init__(
        self,
        request_id: str,
        callback: ProgressCallback | None = None,
        total_steps: int = 2,
        source: str = "",
    ):
        """Initialize the progress manager.

        Args:
            request_id: Request ID for log correlation.
            callback: Optional callback for progress updates.
            total_steps: Number of stage boundaries before completion.
            source: Short description of the source being processed.
        """
        self.request_id = request_id
        self.callback = callback
        self.source = source

        from ..content.models import GenerationProgress

        self._progress = GenerationProgress(
            request_id=request_id,
            total_steps=total_steps,
        )
        self._stages_started = 0
        self._total_text_calls = 0
        self._total_image_calls = 0

    @property
    def progress(self) -> "GenerationProgress":
        """Get the current progress state."""
        return self._progress

    async def emit(self) -> None:
        """Send the current state to the callback, if any."""
        if self.callback:
            await self.callback(self._progress)

    async def update(self, **kwargs: Any) -> None:
        """Update progress state and emit."""
        self._progress = self._progress.model_copy(update=kwargs)
        await self.emit()

    async def start_stage(self, stage: "GenerationStage", label: str) -> None:
        """Enter a new stage and report it.

        Args:
            stage: The stage being entered.
            label: Human-readable stage label.
        """
        completed = self._stages_started
        self._stages_started += 1

        _logger.info(
            f"REQUEST:{self.request_id} | PHASE_START | stage:{stage.value} | "
            f"label:{label} | source:{self.source}"
        )

        await self.update(
            stage=stage,
            label=label,
            completed_steps=completed,
            event_type=None,
        )

    async def handle_ai_event(self, event: dict[str, Any]) -> None:
        """Fold a provider event into the progress state."""
        event_type = event.get("type", "")

        if event_type == "text_response":
            self._total_text_calls += 1
        elif event_type == "image_response":
            self._total_image_calls += 1

        await self.update(
            event_type=event_type,
            model=event.get("model"),
            total_text_calls=self._total_text_calls,
            total_image_calls=self._total_image_calls,
        )

        if event_type.endswith("_error"):
            _logger.error(
                f"REQUEST:{self.request_id} | {event_type.upper()} | "
                f"model:{event.get('model')} | task:{event.get('task')} | error:{event.get('error')}"
            )
        elif event_type.endswith("_response"):
            _logger.info(
                f"REQUEST:{self.request_id} | {event_type.upper()} | model:{event.get('model')} | "
                f"task:{event.get('task')} | duration:{event.get('duration_seconds', 0):.2f}s"
            )

    async def complete(self) -> None:
        """Mark the request as complete."""
        from ..content.models import GenerationStage

        await self.update(
            stage=GenerationStage.COMPLETED,
            label="Done",
            completed_steps=self._progress.total_steps,
        )

        _logger.info(
            f"REQUEST:{self.request_id} | GENERATION_COMPLETE | "
            f"text_calls:{self._total_text_calls} | image_calls:{self._total_image_calls}"
        )

    async def fail(self, error: str) -> None:
        """Mark the request as failed.

        Args:
            error: Error message.
        """
        from ..content.models import GenerationStage

        errors = list(self._progress.errors) + [error]
        await self.update(
            stage=GenerationStage.FAILED,
            label="Failed",
            errors=errors,
        )

        _logger.error(f"REQUEST:{self.request_id} | GENERATION_FAILED | error:{error}")
