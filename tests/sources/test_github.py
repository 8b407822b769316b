"""Tests for GitHub reference parsing and tree retrieval."""

from __future__ import annotations

import httpx
import pytest

from link2ink.errors import InvalidSourceError
from link2ink.sources.github import GitHubTreeClient, is_relevant_path, parse_repo_reference
from link2ink.sources.models import RepoReference


class TestParseRepoReference:

    @pytest.mark.parametrize(
        "value",
        [
            "acme/widgets",
            "https://github.com/acme/widgets",
            "https://github.com/acme/widgets/",
            "https://github.com/acme/widgets.git",
            "https://www.github.com/acme/widgets/tree/main/src",
        ],
    )
    def test_accepted_shapes(self, value: str):
        assert parse_repo_reference(value) == RepoReference(owner="acme", repo="widgets")

    @pytest.mark.parametrize(
        "value",
        ["", "widgets", "acme/widgets/extra", "https://gitlab.com/acme/widgets", "https://github.com/acme", "a b/c"],
    )
    def test_rejected_values(self, value: str):
        assert parse_repo_reference(value) is None


class TestIsRelevantPath:

    @pytest.mark.parametrize("path", ["src/app.py", "README.md", "pkg/index.ts"])
    def test_source_files_kept(self, path: str):
        assert is_relevant_path(path)

    @pytest.mark.parametrize(
        "path",
        ["node_modules/react/index.js", "assets/logo.png", "dist/bundle.min.js", "yarn.lock", ".git/HEAD"],
    )
    def test_noise_dropped(self, path: str):
        assert not is_relevant_path(path)


class TestGitHubTreeClient:

    @pytest.mark.asyncio
    async def test_fetches_default_branch_tree(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            if request.url.path == "/repos/acme/widgets":
                return httpx.Response(200, json={"default_branch": "develop"})
            assert request.url.params["recursive"] == "1"
            return httpx.Response(200, json={
                "tree": [
                    {"path": "src", "type": "tree"},
                    {"path": "src/main.py", "type": "blob", "size": 120},
                    {"path": "docs/logo.png", "type": "blob", "size": 9000},
                    {"path": "README.md", "type": "blob", "size": 40},
                ],
                "truncated": False,
            })

        client = GitHubTreeClient(transport=httpx.MockTransport(handler), token="t0ken")

        files = await client.fetch_file_tree(RepoReference(owner="acme", repo="widgets"))

        assert [f.path for f in files] == ["src/main.py", "README.md"]
        assert files[0].size == 120
        assert seen == ["/repos/acme/widgets", "/repos/acme/widgets/git/trees/develop"]

    @pytest.mark.asyncio
    async def test_missing_repo_is_invalid_source(self):
        client = GitHubTreeClient(transport=httpx.MockTransport(lambda request: httpx.Response(404)))

        with pytest.raises(InvalidSourceError):
            await client.fetch_file_tree(RepoReference(owner="acme", repo="ghost"))

    @pytest.mark.asyncio
    async def test_transport_errors_are_retried(self):
        attempts = []

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/repos/acme/widgets":
                attempts.append(True)
                if len(attempts) < 2:
                    raise httpx.ConnectError("reset", request=request)
                return httpx.Response(200, json={"default_branch": "main"})
            return httpx.Response(200, json={"tree": [{"path": "app.py", "type": "blob"}]})

        client = GitHubTreeClient(transport=httpx.MockTransport(handler), retry_wait_seconds=0)

        files = await client.fetch_file_tree(RepoReference(owner="acme", repo="widgets"))

        assert len(attempts) == 2
        assert [f.path for f in files] == ["app.py"]

    @pytest.mark.asyncio
    async def test_server_error_is_raised(self):
        client = GitHubTreeClient(transport=httpx.MockTransport(lambda request: httpx.Response(500)))

        with pytest.raises(httpx.HTTPStatusError):
            await client.fetch_file_tree(RepoReference(owner="acme", repo="widgets"))
