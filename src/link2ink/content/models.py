"""Data models for infographic generation."""

from __future__ import annotations

import base64
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, model_validator

from ..constants import CUSTOM_STYLE, DEFAULT_ARTICLE_STYLE, STYLE_PRESETS
from ..sources.models import RepoFile, RepoReference, VideoMetadata
from ..sources.youtube import extract_video_id


class SourceKind(str, Enum):
    """Kind of content a request is built from."""

    URL = "url"
    FILE = "file"
    TEXT = "text"
    VIDEO = "video"


class AspectRatio(str, Enum):
    """Aspect ratios accepted by the image model."""

    LANDSCAPE = "16:9"
    PORTRAIT = "9:16"
    SQUARE = "1:1"
    CLASSIC = "4:3"
    CLASSIC_PORTRAIT = "3:4"

    @property
    def orientation(self) -> str:
        width, height = (int(x) for x in self.value.split(":"))
        if height > width:
            return "VERTICAL (mobile story format)"
        if width > height:
            return "HORIZONTAL"
        return "SQUARE"


class PresentationOptions(BaseModel):
    """How the infographic should look."""

    style: str = DEFAULT_ARTICLE_STYLE
    custom_style: str | None = None
    language: str | None = None
    aspect_ratio: AspectRatio = AspectRatio.PORTRAIT

    @model_validator(mode="after")
    def _check_custom_style(self) -> "PresentationOptions":
        if self.style == CUSTOM_STYLE and not (self.custom_style and self.custom_style.strip()):
            raise ValueError("custom style selected but no custom style text given")
        return self

    def resolved_style(self) -> str:
        """Style guideline text for the image prompt."""
        if self.style == CUSTOM_STYLE:
            return (self.custom_style or "").strip()
        return STYLE_PRESETS.get(self.style, self.style)


class UrlSource(BaseModel):
    kind: Literal[SourceKind.URL] = SourceKind.URL
    url: str

    def describe(self) -> str:
        return self.url


class FileSource(BaseModel):
    kind: Literal[SourceKind.FILE] = SourceKind.FILE
    data_base64: str
    mime_type: str
    filename: str

    def describe(self) -> str:
        return self.filename


class TextSource(BaseModel):
    kind: Literal[SourceKind.TEXT] = SourceKind.TEXT
    text: str

    def describe(self) -> str:
        preview = " ".join(self.text.split())[:60]
        return f'text "{preview}"'


class VideoSource(BaseModel):
    kind: Literal[SourceKind.VIDEO] = SourceKind.VIDEO
    reference: str

    @property
    def video_id(self) -> str | None:
        return extract_video_id(self.reference)

    def describe(self) -> str:
        return self.reference


Source = Annotated[
    Union[UrlSource, FileSource, TextSource, VideoSource],
    Field(discriminator="kind"),
]


class GenerationRequest(BaseModel):
    """One infographic-creation attempt: a source plus presentation options."""

    source: Source
    options: PresentationOptions = Field(default_factory=PresentationOptions)

    @property
    def kind(self) -> SourceKind:
        return self.source.kind


class Citation(BaseModel):
    """A reference returned by a search-grounded analysis call."""

    uri: str
    title: str


class GenerationResult(BaseModel):
    """Image plus the brief and citations it was built from."""

    image_base64: str
    analysis_text: str
    citations: list[Citation] = Field(default_factory=list)
    video_title: str | None = None

    def image_bytes(self) -> bytes:
        return base64.b64decode(self.image_base64)


class RepoAnalysisResult(BaseModel):
    """Output of a repository analysis.

    ``feature_image`` is optional: the product poster may fail without failing
    the analysis.
    """

    repo: RepoReference
    technical_image: str
    feature_image: str | None = None
    feature_summary: str
    files: list[RepoFile] = Field(default_factory=list)


class GenerationStage(str, Enum):
    """Phase boundaries reported to progress callbacks."""

    ANALYZING = "analyzing"
    DESIGNING = "designing"
    COMPLETED = "completed"
    FAILED = "failed"


class GenerationProgress(BaseModel):
    """Progress snapshot for a single request."""

    request_id: str
    stage: GenerationStage = GenerationStage.ANALYZING
    label: str = ""
    completed_steps: int = 0
    total_steps: int = 2
    event_type: str | None = None
    model: str | None = None
    total_text_calls: int = 0
    total_image_calls: int = 0
    errors: list[str] = Field(default_factory=list)


__all__ = [
    "SourceKind",
    "AspectRatio",
    "PresentationOptions",
    "UrlSource",
    "FileSource",
    "TextSource",
    "VideoSource",
    "Source",
    "GenerationRequest",
    "Citation",
    "GenerationResult",
    "RepoAnalysisResult",
    "RepoFile",
    "RepoReference",
    "VideoMetadata",
    "GenerationStage",
    "GenerationProgress",
]
