"""Provider configuration loading and validation."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants import (
    BRIEF_MIN_LENGTH,
    DEFAULT_CITATION_TITLE,
    DEFAULT_IMAGE_SIZE,
    DEFAULT_LANGUAGE,
    GITHUB_MAX_ATTEMPTS,
    GITHUB_TIMEOUT_SECONDS,
    MARKER_INSUFFICIENT_DATA,
    MARKER_NOT_FOUND,
    MARKER_SAFETY,
    MARKER_VIDEO_NOT_FOUND,
    OEMBED_TIMEOUT_SECONDS,
    PROVIDERS_CONFIG_FILE,
)

# Load .env file
load_dotenv()


class CredentialSettings(BaseSettings):
    """API key read from the environment (or .env)."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"),
    )


class TextProviderConfig(BaseModel):
    """Configuration for the analysis (text) model."""

    model: str = "gemini-3-pro-preview"
    temperature: float | None = None
    video_temperature: float = 0.2
    timeout: int = 120


class ImageProviderConfig(BaseModel):
    """Configuration for the image synthesis model."""

    model: str = "gemini-3-pro-image-preview"
    image_size: str = DEFAULT_IMAGE_SIZE
    timeout: int = 180


class AnalysisConfig(BaseModel):
    """Thresholds for rejecting analysis briefs.

    Markers are matched as plain substrings against the brief; the keys are
    the failure reason each marker maps to.
    """

    min_brief_length: int = BRIEF_MIN_LENGTH
    not_found_markers: list[str] = Field(
        default_factory=lambda: [MARKER_NOT_FOUND, MARKER_VIDEO_NOT_FOUND]
    )
    insufficient_data_markers: list[str] = Field(
        default_factory=lambda: [MARKER_INSUFFICIENT_DATA]
    )
    safety_markers: list[str] = Field(default_factory=lambda: [MARKER_SAFETY])
    analyze_text_sources: bool = True
    citation_fallback_title: str = DEFAULT_CITATION_TITLE
    default_language: str = DEFAULT_LANGUAGE


class SourcesConfig(BaseModel):
    """Endpoints used to resolve source metadata."""

    github_api_url: str = "https://api.github.com"
    github_token_env: str | None = "GITHUB_TOKEN"
    github_timeout: float = GITHUB_TIMEOUT_SECONDS
    github_max_attempts: int = GITHUB_MAX_ATTEMPTS
    oembed_url: str = "https://www.youtube.com/oembed"
    oembed_timeout: float = OEMBED_TIMEOUT_SECONDS

    def get_github_token(self) -> str | None:
        """Get the GitHub token from environment, if configured."""
        if self.github_token_env:
            return os.getenv(self.github_token_env)
        return None


class ProviderConfig(BaseModel):
    """Full provider configuration."""

    text: TextProviderConfig = Field(default_factory=TextProviderConfig)
    image: ImageProviderConfig = Field(default_factory=ImageProviderConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    sources: SourcesConfig = Field(default_factory=SourcesConfig)


def load_provider_config(config_path: Path | None = None) -> ProviderConfig:
    """Load provider configuration from YAML file."""
    if config_path is None:
        config_path = PROVIDERS_CONFIG_FILE

    if not config_path.exists():
        # Return default config if file doesn't exist
        return ProviderConfig()

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return ProviderConfig(**data)
