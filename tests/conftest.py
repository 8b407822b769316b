"""Shared test fixtures and configuration.

Provides mocks and fixtures for testing the Link2Ink components.
Provider fixtures return async-compatible mocks so the orchestrator can be
driven without touching the network.
"""

from __future__ import annotations

import base64
from io import BytesIO
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from PIL import Image

from link2ink.content.orchestrator import InfographicOrchestrator
from link2ink.credentials import CredentialManager, CredentialStore
from link2ink.providers.config import ProviderConfig
from link2ink.providers.text import TextResult
from link2ink.sources.models import RepoFile, VideoMetadata

TEST_API_KEY = "test-gemini-key"

SAMPLE_BRIEF = (
    "HEADLINE: Five Habits That Double Focus\n"
    "KEY STATS: 42% fewer interruptions, 3 hours saved per week.\n"
    "TAKEAWAYS: 1. Batch email 2. Block calendar 3. Mute chat 4. Walk 5. Review."
)


def make_png_base64(size: tuple[int, int] = (8, 8), color: str = "red") -> str:
    """Build a tiny valid PNG as base64."""
    buffer = BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return base64.b64encode(buffer.getvalue()).decode("ascii")


@pytest.fixture
def png_base64() -> str:
    return make_png_base64()


@pytest.fixture
def provider_config() -> ProviderConfig:
    """Default provider configuration (no YAML file involved)."""
    return ProviderConfig()


@pytest.fixture
def credential_store(tmp_path: Path) -> CredentialStore:
    return CredentialStore(tmp_path / "credentials.json")


@pytest.fixture
def credentials(credential_store: CredentialStore) -> CredentialManager:
    """Credential manager whose environment always holds a test key."""
    return CredentialManager(store=credential_store, env_loader=lambda: TEST_API_KEY)


@pytest.fixture
def mock_text_provider() -> AsyncMock:
    """Create a mock TextProvider.

    Returns:
        AsyncMock configured as TextProvider, answering with a usable brief.
    """
    provider = AsyncMock()
    provider.generate.return_value = TextResult(
        text=SAMPLE_BRIEF,
        references=[
            {"uri": "https://example.com/a", "title": "Example A"},
            {"uri": "https://example.com/b", "title": None},
        ],
        finish_reason="STOP",
    )
    return provider


@pytest.fixture
def mock_image_provider(png_base64: str) -> AsyncMock:
    """Create a mock ImageProvider.

    Returns:
        AsyncMock configured as ImageProvider, returning a small PNG.
    """
    provider = AsyncMock()
    provider.generate.return_value = png_base64
    return provider


@pytest.fixture
def mock_metadata_resolver() -> AsyncMock:
    resolver = AsyncMock()
    resolver.resolve.return_value = VideoMetadata(
        video_id="dQw4w9WgXcQ",
        title="Focus Habits Explained",
        author_name="Productivity Lab",
    )
    return resolver


@pytest.fixture
def sample_files() -> list[RepoFile]:
    return [
        RepoFile(path="README.md", size=1200),
        RepoFile(path="src/app/main.py", size=3400),
        RepoFile(path="src/app/auth/service.py", size=2100),
        RepoFile(path="tests/test_main.py", size=800),
    ]


@pytest.fixture
def mock_github_client(sample_files: list[RepoFile]) -> AsyncMock:
    client = AsyncMock()
    client.fetch_file_tree.return_value = sample_files
    return client


@pytest.fixture
def orchestrator(
    credentials: CredentialManager,
    provider_config: ProviderConfig,
    mock_text_provider: AsyncMock,
    mock_image_provider: AsyncMock,
    mock_metadata_resolver: AsyncMock,
    mock_github_client: AsyncMock,
) -> InfographicOrchestrator:
    """Create an InfographicOrchestrator with all mocks."""
    return InfographicOrchestrator(
        credentials=credentials,
        config=provider_config,
        text_provider=mock_text_provider,
        image_provider=mock_image_provider,
        metadata_resolver=mock_metadata_resolver,
        github_client=mock_github_client,
    )


@pytest.fixture
def mock_progress_callback() -> AsyncMock:
    """Create a mock progress callback.

    Returns:
        AsyncMock that records all progress updates.
    """
    callback = AsyncMock()
    callback.updates = []

    async def record_update(progress):
        callback.updates.append(progress)

    callback.side_effect = record_update
    return callback
