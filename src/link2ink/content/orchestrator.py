"""Infographic orchestrator: analysis, validation, then image synthesis.

This is the main entry point for turning a source into an infographic. The
pipeline is a plain ordered sequence with no retries: any stage failure ends
the request with a single error and no partial result.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from typing import TYPE_CHECKING, Any, Awaitable

from ..constants import (
    REPO_TREE_FEATURE_LIMIT,
    REPO_TREE_SUMMARY_LIMIT,
    REPO_TREE_TECHNICAL_LIMIT,
    resolve_language,
)
from ..errors import (
    CredentialInvalidError,
    InvalidSourceError,
    SynthesisError,
    UnverifiableContentError,
    UnverifiableReason,
    is_credential_error,
)
from ..providers.text import InlineDocument
from ..services.progress import ProgressCallback, ProgressManager
from ..sources.github import parse_repo_reference
from ..sources.models import RepoFile, RepoReference, VideoMetadata
from ..sources.youtube import canonical_video_url
from . import prompts
from .grounding import collect_citations
from .models import (
    AspectRatio,
    Citation,
    FileSource,
    GenerationRequest,
    GenerationResult,
    GenerationStage,
    PresentationOptions,
    RepoAnalysisResult,
    TextSource,
    UrlSource,
    VideoSource,
)
from .validation import BriefValidator

if TYPE_CHECKING:
    from ..credentials import CredentialManager
    from ..providers import ImageProvider, ProviderConfig, TextProvider
    from ..sources import GitHubTreeClient, VideoMetadataResolver


# Logger
_logger = logging.getLogger("ai_calls")

LABEL_ANALYZING = "Fetching and analyzing source"
LABEL_DESIGNING = "Designing infographic"
LABEL_REPO_FETCH = "Connecting to GitHub"
LABEL_REPO_VISUALIZE = "Analyzing and visualizing repository"


class InfographicOrchestrator:
    """Coordinates the generation pipeline.

    Holds only configuration and collaborators; every call gets its own
    ProgressManager, so concurrent calls are independent.

    Usage:
        orchestrator = InfographicOrchestrator(credentials=manager)
        result = await orchestrator.generate(
            GenerationRequest(source=UrlSource(url="https://example.com/post")),
            on_progress=show_progress,
        )
    """

    def __init__(
        self,
        credentials: "CredentialManager",
        config: "ProviderConfig | None" = None,
        text_provider: "TextProvider | None" = None,
        image_provider: "ImageProvider | None" = None,
        metadata_resolver: "VideoMetadataResolver | None" = None,
        github_client: "GitHubTreeClient | None" = None,
        validator: BriefValidator | None = None,
    ):
        """Initialize the orchestrator.

        Args:
            credentials: Resolves the API key and receives invalidation.
            config: Provider configuration (loaded from providers.yaml if not provided).
            text_provider: Analysis provider (created if not provided).
            image_provider: Image synthesis provider (created if not provided).
            metadata_resolver: Video oEmbed resolver (created if not provided).
            github_client: GitHub tree client (created if not provided).
            validator: Brief validator (built from config if not provided).
        """
        if config is None:
            from ..providers.config import load_provider_config
            config = load_provider_config()
        self.config = config
        self.credentials = credentials

        if text_provider is None:
            from ..providers import TextProvider
            text_provider = TextProvider(config)
        self.text_provider = text_provider

        if image_provider is None:
            from ..providers import ImageProvider
            image_provider = ImageProvider(config)
        self.image_provider = image_provider

        if metadata_resolver is None:
            from ..sources import VideoMetadataResolver
            metadata_resolver = VideoMetadataResolver(
                oembed_url=config.sources.oembed_url,
                timeout=config.sources.oembed_timeout,
            )
        self.metadata_resolver = metadata_resolver

        if github_client is None:
            from ..sources import GitHubTreeClient
            github_client = GitHubTreeClient(
                api_url=config.sources.github_api_url,
                token=config.sources.get_github_token(),
                timeout=config.sources.github_timeout,
                max_attempts=config.sources.github_max_attempts,
            )
        self.github_client = github_client

        self.validator = validator or BriefValidator.from_config(config.analysis)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _new_request_id() -> str:
        return uuid.uuid4().hex[:8]

    def _language(self, options: PresentationOptions) -> str:
        return resolve_language(options.language or self.config.analysis.default_language)

    def _rules(self) -> str:
        analysis = self.config.analysis
        return prompts.verification_rules(
            not_found=analysis.not_found_markers[0] if analysis.not_found_markers else "",
            insufficient=analysis.insufficient_data_markers[0] if analysis.insufficient_data_markers else "",
            safety=analysis.safety_markers[0] if analysis.safety_markers else "",
        )

    async def _api_key(self) -> str:
        from ..credentials import CredentialState

        if self.credentials.state == CredentialState.UNKNOWN:
            await self.credentials.resolve()
        return self.credentials.require()

    async def _fail(self, progress: ProgressManager, error: Exception) -> Exception:
        """Report a failure and return the exception the caller should raise.

        Provider errors that mean the key was rejected become
        CredentialInvalidError and trigger the credential reset signal.
        """
        if is_credential_error(error) and not isinstance(error, CredentialInvalidError):
            self.credentials.invalidate()
            classified: Exception = CredentialInvalidError(
                "The Gemini API key was rejected. Please provide a new key."
            )
        else:
            classified = error
        await progress.fail(str(classified))
        return classified

    @staticmethod
    def _check_source(request: GenerationRequest) -> None:
        source = request.source
        if isinstance(source, VideoSource) and source.video_id is None:
            raise InvalidSourceError(
                f"Not a valid YouTube link or video id: {source.reference!r}"
            )
        if isinstance(source, UrlSource) and not source.url.strip():
            raise InvalidSourceError("URL must not be empty")
        if isinstance(source, TextSource) and not source.text.strip():
            raise InvalidSourceError("Text must not be empty")
        if isinstance(source, FileSource) and not source.data_base64:
            raise InvalidSourceError(f"File is empty: {source.filename}")

    # -------------------------------------------------------------------------
    # Main pipeline
    # -------------------------------------------------------------------------

    async def generate(
        self,
        request: GenerationRequest,
        on_progress: ProgressCallback | None = None,
    ) -> GenerationResult:
        """Turn a source into an infographic.

        Args:
            request: Source and presentation options.
            on_progress: Optional async callback receiving stage updates.

        Returns:
            GenerationResult with image, brief and citations.

        Raises:
            InvalidSourceError: Malformed source, before any network call.
            CredentialMissingError: No API key available.
            UnverifiableContentError: The brief was rejected.
            SynthesisError: No image was produced.
            CredentialInvalidError: The provider rejected the key.
        """
        progress = ProgressManager(
            request_id=self._new_request_id(),
            callback=on_progress,
            source=request.source.describe(),
        )

        try:
            self._check_source(request)
            api_key = await self._api_key()

            await progress.start_stage(GenerationStage.ANALYZING, LABEL_ANALYZING)
            brief, citations, video_title = await self._analyze(request, api_key, progress)

            await progress.start_stage(GenerationStage.DESIGNING, LABEL_DESIGNING)
            image = await self._synthesize(brief, request.options, api_key, progress)

            await progress.complete()
        except Exception as e:
            error = await self._fail(progress, e)
            if error is e:
                raise
            raise error from e

        return GenerationResult(
            image_base64=image,
            analysis_text=brief,
            citations=citations,
            video_title=video_title,
        )

    async def _analyze(
        self,
        request: GenerationRequest,
        api_key: str,
        progress: ProgressManager,
    ) -> tuple[str, list[Citation], str | None]:
        """Run the analysis call for the source and validate the brief."""
        source = request.source
        options = request.options
        language = self._language(options)
        rules = self._rules()
        analysis = self.config.analysis

        video_title: str | None = None
        document: InlineDocument | None = None
        use_search = False
        temperature: float | None = None

        if isinstance(source, UrlSource):
            prompt = prompts.article_analysis_prompt(source.url.strip(), language, rules)
            use_search = True
        elif isinstance(source, FileSource):
            prompt = prompts.document_analysis_prompt(options.aspect_ratio, language, rules)
            document = InlineDocument(data_base64=source.data_base64, mime_type=source.mime_type)
        elif isinstance(source, TextSource):
            if not analysis.analyze_text_sources:
                brief = prompts.text_brief_template(source.text, options.aspect_ratio, language)
                return self.validator.validate(brief, source.describe()), [], None
            prompt = prompts.text_analysis_prompt(source.text, options.aspect_ratio, language, rules)
        else:
            video_id = source.video_id or ""
            metadata = await self._resolve_video(video_id)
            video_title = metadata.title if metadata else None
            prompt = prompts.video_analysis_prompt(
                video_id=video_id,
                video_url=canonical_video_url(video_id),
                aspect_ratio=options.aspect_ratio,
                language=language,
                rules=rules,
                metadata=metadata,
            )
            use_search = True
            temperature = self.config.text.video_temperature

        result = await self.text_provider.generate(
            prompt,
            api_key=api_key,
            task=f"analyze_{source.kind.value}",
            use_search=use_search,
            temperature=temperature,
            document=document,
            event_callback=progress.handle_ai_event,
        )

        brief = self.validator.validate(
            result.text,
            source.describe(),
            safety_blocked=result.safety_blocked,
        )
        citations = collect_citations(result.references, analysis.citation_fallback_title)
        return brief, citations, video_title

    async def _resolve_video(self, video_id: str) -> VideoMetadata | None:
        metadata = await self.metadata_resolver.resolve(video_id)
        if metadata is None:
            _logger.info(f"VIDEO_METADATA | video:{video_id} | unresolved, continuing without it")
        return metadata

    async def _synthesize(
        self,
        brief: str,
        options: PresentationOptions,
        api_key: str,
        progress: ProgressManager,
    ) -> str:
        image_size = self.config.image.image_size
        prompt = prompts.infographic_design_prompt(
            brief=brief,
            style=options.resolved_style(),
            language=self._language(options),
            aspect_ratio=options.aspect_ratio,
            image_size=image_size,
        )
        image = await self.image_provider.generate(
            prompt,
            api_key=api_key,
            aspect_ratio=options.aspect_ratio.value,
            image_size=image_size,
            task="infographic",
            event_callback=progress.handle_ai_event,
        )
        if not image:
            raise SynthesisError("The image model returned no image.")
        return image

    # -------------------------------------------------------------------------
    # Repository analysis
    # -------------------------------------------------------------------------

    async def analyze_repository(
        self,
        reference: str | RepoReference,
        options: PresentationOptions | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> RepoAnalysisResult:
        """Build technical and product infographics plus a summary for a repo.

        The technical diagram, product poster and feature summary are issued
        concurrently. The poster is optional; the other two must succeed.
        """
        options = options or PresentationOptions(aspect_ratio=AspectRatio.LANDSCAPE)
        label = reference.full_name if isinstance(reference, RepoReference) else str(reference)
        progress = ProgressManager(
            request_id=self._new_request_id(),
            callback=on_progress,
            source=label,
        )

        try:
            if isinstance(reference, RepoReference):
                ref = reference
            else:
                parsed = parse_repo_reference(reference)
                if parsed is None:
                    raise InvalidSourceError(
                        f"Invalid repository reference {reference!r}. Use 'owner/repo' or a github.com URL."
                    )
                ref = parsed
            api_key = await self._api_key()

            await progress.start_stage(GenerationStage.ANALYZING, LABEL_REPO_FETCH)
            files = await self.github_client.fetch_file_tree(ref)
            if not files:
                raise UnverifiableContentError(UnverifiableReason.INSUFFICIENT_DATA, ref.full_name)

            await progress.start_stage(GenerationStage.DESIGNING, LABEL_REPO_VISUALIZE)
            technical, feature, summary = await self._run_repo_calls(
                self._repo_technical_image(ref, files, options, api_key, progress),
                self._repo_feature_image(ref, files, options, api_key, progress),
                self._repo_summary(ref, files, options, api_key, progress),
            )

            if not technical:
                raise SynthesisError("The technical diagram could not be created.")
            if not summary.strip():
                raise UnverifiableContentError(UnverifiableReason.INSUFFICIENT_DATA, ref.full_name)

            await progress.complete()
        except Exception as e:
            error = await self._fail(progress, e)
            if error is e:
                raise
            raise error from e

        return RepoAnalysisResult(
            repo=ref,
            technical_image=technical,
            feature_image=feature,
            feature_summary=summary,
            files=files,
        )

    @staticmethod
    async def _run_repo_calls(*calls: Awaitable[Any]) -> list[Any]:
        """Run the repository calls concurrently.

        When one fails the others are cancelled and awaited before the error
        propagates, so no call outlives the request.
        """
        tasks = [asyncio.ensure_future(call) for call in calls]
        try:
            return await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def _repo_technical_image(
        self,
        ref: RepoReference,
        files: list[RepoFile],
        options: PresentationOptions,
        api_key: str,
        progress: ProgressManager,
    ) -> str | None:
        image_size = self.config.image.image_size
        prompt = prompts.repo_technical_prompt(
            ref.repo, files, REPO_TREE_TECHNICAL_LIMIT,
            options.resolved_style(), self._language(options), image_size,
        )
        return await self.image_provider.generate(
            prompt,
            api_key=api_key,
            aspect_ratio=options.aspect_ratio.value,
            image_size=image_size,
            task="repo_technical",
            event_callback=progress.handle_ai_event,
        )

    async def _repo_feature_image(
        self,
        ref: RepoReference,
        files: list[RepoFile],
        options: PresentationOptions,
        api_key: str,
        progress: ProgressManager,
    ) -> str | None:
        """Product poster; failures degrade to None unless the key was rejected."""
        image_size = self.config.image.image_size
        prompt = prompts.repo_feature_poster_prompt(
            ref.repo, files, REPO_TREE_FEATURE_LIMIT,
            options.resolved_style(), self._language(options), image_size,
        )
        try:
            return await self.image_provider.generate(
                prompt,
                api_key=api_key,
                aspect_ratio=options.aspect_ratio.value,
                image_size=image_size,
                task="repo_feature",
                event_callback=progress.handle_ai_event,
            )
        except Exception as e:
            if is_credential_error(e):
                raise
            _logger.warning(f"REQUEST:{progress.request_id} | FEATURE_POSTER_SKIPPED | error:{e}")
            return None

    async def _repo_summary(
        self,
        ref: RepoReference,
        files: list[RepoFile],
        options: PresentationOptions,
        api_key: str,
        progress: ProgressManager,
    ) -> str:
        prompt = prompts.repo_summary_prompt(
            ref.repo, files, REPO_TREE_SUMMARY_LIMIT, self._language(options)
        )
        result = await self.text_provider.generate(
            prompt,
            api_key=api_key,
            task="repo_summary",
            event_callback=progress.handle_ai_event,
        )
        return result.text

    # -------------------------------------------------------------------------
    # Follow-up actions
    # -------------------------------------------------------------------------

    async def generate_3d_variant(
        self,
        repo_name: str,
        options: PresentationOptions | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> str:
        """Holographic 3D architecture image, always landscape."""
        options = options or PresentationOptions()
        progress = ProgressManager(
            request_id=self._new_request_id(),
            callback=on_progress,
            total_steps=1,
            source=repo_name,
        )
        try:
            api_key = await self._api_key()
            await progress.start_stage(GenerationStage.DESIGNING, LABEL_DESIGNING)
            image_size = self.config.image.image_size
            image = await self.image_provider.generate(
                prompts.repo_3d_prompt(repo_name, options.resolved_style(), image_size),
                api_key=api_key,
                aspect_ratio=AspectRatio.LANDSCAPE.value,
                image_size=image_size,
                task="repo_3d",
                event_callback=progress.handle_ai_event,
            )
            if not image:
                raise SynthesisError("The 3D model image could not be created.")
            await progress.complete()
        except Exception as e:
            error = await self._fail(progress, e)
            if error is e:
                raise
            raise error from e
        return image

    async def edit_image(
        self,
        image_base64: str,
        mime_type: str,
        instruction: str,
        on_progress: ProgressCallback | None = None,
    ) -> str:
        """Apply a text instruction to an existing image."""
        progress = ProgressManager(
            request_id=self._new_request_id(),
            callback=on_progress,
            total_steps=1,
            source="image edit",
        )
        try:
            if not instruction.strip():
                raise InvalidSourceError("Edit instruction must not be empty")
            api_key = await self._api_key()
            await progress.start_stage(GenerationStage.DESIGNING, LABEL_DESIGNING)
            image = await self.image_provider.generate(
                instruction,
                api_key=api_key,
                task="edit",
                reference=InlineDocument(data_base64=image_base64, mime_type=mime_type),
                event_callback=progress.handle_ai_event,
            )
            if not image:
                raise SynthesisError("The edited image could not be created.")
            await progress.complete()
        except Exception as e:
            error = await self._fail(progress, e)
            if error is e:
                raise
            raise error from e
        return image

    async def ask_component(
        self,
        component: str,
        question: str,
        files: list[RepoFile],
        on_progress: ProgressCallback | None = None,
    ) -> str:
        """Answer a question about one component of a repository."""
        progress = ProgressManager(
            request_id=self._new_request_id(),
            callback=on_progress,
            total_steps=1,
            source=component,
        )
        try:
            api_key = await self._api_key()
            await progress.start_stage(GenerationStage.ANALYZING, LABEL_ANALYZING)
            result = await self.text_provider.generate(
                prompts.component_question_prompt(component, question, files, REPO_TREE_SUMMARY_LIMIT),
                api_key=api_key,
                task="component_question",
                event_callback=progress.handle_ai_event,
            )
            if not result.text.strip():
                raise UnverifiableContentError(UnverifiableReason.INSUFFICIENT_DATA, component)
            await progress.complete()
        except Exception as e:
            error = await self._fail(progress, e)
            if error is e:
                raise
            raise error from e
        return result.text.strip()
