"""GitHub repository reference parsing and file tree retrieval."""

from __future__ import annotations

import logging
import re
from typing import Any
from urllib.parse import urlparse

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..constants import GITHUB_MAX_ATTEMPTS, GITHUB_TIMEOUT_SECONDS
from ..errors import InvalidSourceError
from .models import RepoFile, RepoReference

_logger = logging.getLogger("link2ink.sources")

_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")
_GITHUB_HOSTS = {"github.com", "www.github.com"}

IGNORED_DIRECTORIES = {
    ".git", ".github", ".idea", ".vscode", "node_modules", "vendor", "dist",
    "build", "out", "coverage", "__pycache__", ".next", ".venv", "venv", "target",
}

IGNORED_EXTENSIONS = {
    ".png", ".jpg", ".jpeg", ".gif", ".ico", ".svg", ".webp", ".bmp",
    ".woff", ".woff2", ".ttf", ".eot", ".otf",
    ".zip", ".gz", ".tar", ".jar", ".pdf", ".mp4", ".mp3", ".wav",
    ".lock", ".min.js", ".map",
}


def parse_repo_reference(value: str) -> RepoReference | None:
    """Parse ``owner/repo`` or a github.com URL into a RepoReference.

    Returns None for anything that does not name a repository.
    """
    text = (value or "").strip().rstrip("/")
    if not text:
        return None

    parts: list[str]
    parsed = urlparse(text)
    if parsed.scheme in ("http", "https"):
        if parsed.hostname not in _GITHUB_HOSTS:
            return None
        parts = [p for p in parsed.path.split("/") if p]
        if len(parts) < 2:
            return None
    else:
        parts = text.split("/")
        if len(parts) != 2:
            return None

    owner, repo = parts[0], parts[1]
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    if not owner or not repo:
        return None
    if not _NAME_PATTERN.match(owner) or not _NAME_PATTERN.match(repo):
        return None

    return RepoReference(owner=owner, repo=repo)


def is_relevant_path(path: str) -> bool:
    """Whether a tree path is worth showing to the model."""
    segments = path.split("/")
    if any(segment in IGNORED_DIRECTORIES for segment in segments[:-1]):
        return False
    name = segments[-1].lower()
    return not any(name.endswith(ext) for ext in IGNORED_EXTENSIONS)


class GitHubTreeClient:
    """Fetches the recursive file tree of a repository's default branch.

    Usage:
        client = GitHubTreeClient(token=os.getenv("GITHUB_TOKEN"))
        files = await client.fetch_file_tree(RepoReference(owner="psf", repo="requests"))
    """

    def __init__(
        self,
        api_url: str = "https://api.github.com",
        token: str | None = None,
        timeout: float = GITHUB_TIMEOUT_SECONDS,
        max_attempts: int = GITHUB_MAX_ATTEMPTS,
        transport: httpx.AsyncBaseTransport | None = None,
        retry_wait_seconds: float = 1.0,
    ):
        self.api_url = api_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.retry_wait_seconds = retry_wait_seconds
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _get_json(
        self,
        client: httpx.AsyncClient,
        path: str,
        ref: RepoReference,
        params: dict[str, str] | None = None,
    ) -> Any:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=self.retry_wait_seconds, max=10),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        ):
            with attempt:
                response = await client.get(path, params=params)

        if response.status_code == 404:
            raise InvalidSourceError(f"Repository not found or not public: {ref.full_name}")
        response.raise_for_status()
        return response.json()

    async def fetch_file_tree(self, ref: RepoReference) -> list[RepoFile]:
        """Return the relevant files of the repository, in tree order."""
        async with httpx.AsyncClient(
            base_url=self.api_url,
            headers=self._headers(),
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            info = await self._get_json(client, f"/repos/{ref.owner}/{ref.repo}", ref)
            branch = info.get("default_branch") or "main"
            tree = await self._get_json(
                client,
                f"/repos/{ref.owner}/{ref.repo}/git/trees/{branch}",
                ref,
                params={"recursive": "1"},
            )

        items = tree.get("tree", []) if isinstance(tree, dict) else []
        files = [
            RepoFile(path=item["path"], size=item.get("size"))
            for item in items
            if item.get("type") == "blob" and item.get("path") and is_relevant_path(item["path"])
        ]

        _logger.info(
            f"GITHUB_TREE | repo:{ref.full_name} | branch:{branch} | "
            f"files:{len(files)} | truncated:{bool(tree.get('truncated')) if isinstance(tree, dict) else False}"
        )
        return files
