"""Stateless service for repository analysis."""

from __future__ import annotations

from pathlib import Path

from rich.status import Status

from ...content.models import PresentationOptions
from ...services.output import OutputService, slugify
from ...services.progress import ProgressCallback
from ...sources.models import RepoReference
from ..core.failures import run_with_credential_retry
from ..core.session import build_orchestrator
from ..core.types import Failure, Result, SavedOutput, Success


class RepoService:
    """Stateless service for repository commands.

    All state is passed via params - no instance state.
    """

    async def analyze(
        self,
        reference: RepoReference,
        options: PresentationOptions,
        output_dir: Path,
        image_size: str | None = None,
        on_progress: ProgressCallback | None = None,
        status: Status | None = None,
    ) -> Result[SavedOutput]:
        """Analyze a repository and save its diagrams and summary."""
        orchestrator = build_orchestrator(image_size, status=status)
        result = await run_with_credential_retry(
            orchestrator.credentials,
            lambda: orchestrator.analyze_repository(reference, options, on_progress=on_progress),
        )
        if isinstance(result, Failure):
            return result

        analysis = result.value
        try:
            output_path = OutputService(output_dir).save_repository(analysis)
        except Exception as e:
            return Failure(f"Could not save the repository analysis: {e}", kind="output")
        return Success(SavedOutput(
            output_path=output_path,
            title=reference.full_name,
            metadata={
                "file_count": len(analysis.files),
                "has_feature_image": analysis.feature_image is not None,
                "summary": analysis.feature_summary,
            },
        ))

    async def render_3d(
        self,
        repo_name: str,
        options: PresentationOptions,
        output_dir: Path,
        image_size: str | None = None,
        on_progress: ProgressCallback | None = None,
        status: Status | None = None,
    ) -> Result[Path]:
        """Create the holographic 3D variant for a repository."""
        orchestrator = build_orchestrator(image_size, status=status)
        result = await run_with_credential_retry(
            orchestrator.credentials,
            lambda: orchestrator.generate_3d_variant(repo_name, options, on_progress=on_progress),
        )
        if isinstance(result, Failure):
            return result

        output_path = OutputService(output_dir).get_output_path(repo_name) / f"{slugify(repo_name)}-3d.png"
        try:
            return Success(OutputService.save_image(result.value, output_path))
        except Exception as e:
            return Failure(f"Could not save the 3D image: {e}", kind="output")

    async def ask(
        self,
        reference: RepoReference,
        component: str,
        question: str,
        on_progress: ProgressCallback | None = None,
        status: Status | None = None,
    ) -> Result[str]:
        """Answer a question about one component of a repository."""
        orchestrator = build_orchestrator(status=status)

        async def call() -> str:
            files = await orchestrator.github_client.fetch_file_tree(reference)
            return await orchestrator.ask_component(component, question, files, on_progress=on_progress)

        return await run_with_credential_retry(orchestrator.credentials, call)
