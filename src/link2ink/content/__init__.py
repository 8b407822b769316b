"""Content generation: request models, prompts, validation and orchestration.

Architecture:
- InfographicOrchestrator: runs analysis -> validation -> image synthesis
- BriefValidator: rejects briefs carrying failure markers or too little text
- collect_citations: turns grounding references into deduplicated citations
"""

from .models import (
    AspectRatio,
    Citation,
    FileSource,
    GenerationProgress,
    GenerationRequest,
    GenerationResult,
    GenerationStage,
    PresentationOptions,
    RepoAnalysisResult,
    SourceKind,
    TextSource,
    UrlSource,
    VideoSource,
)
from .grounding import collect_citations
from .validation import BriefValidator
from .orchestrator import InfographicOrchestrator

__all__ = [
    # Main classes
    "InfographicOrchestrator",
    "BriefValidator",
    "collect_citations",
    # Models
    "AspectRatio",
    "Citation",
    "FileSource",
    "GenerationProgress",
    "GenerationRequest",
    "GenerationResult",
    "GenerationStage",
    "PresentationOptions",
    "RepoAnalysisResult",
    "SourceKind",
    "TextSource",
    "UrlSource",
    "VideoSource",
]
