"""CLI command tests that stop at argument validation (no network)."""

from __future__ import annotations

from typer.testing import CliRunner

from link2ink.cli.app import app

runner = CliRunner()


class TestCommandValidation:

    def test_help_lists_commands(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("article", "youtube", "repo", "repo-3d", "credential"):
            assert command in result.output

    def test_article_rejects_non_url(self):
        result = runner.invoke(app, ["article", "not-a-url"])
        assert result.exit_code == 1
        assert "Invalid URL" in result.output

    def test_youtube_rejects_bad_reference(self):
        result = runner.invoke(app, ["youtube", "https://vimeo.com/1"])
        assert result.exit_code == 1
        assert "Not a valid YouTube link" in result.output

    def test_custom_style_without_text(self):
        result = runner.invoke(app, ["article", "https://example.com", "--style", "custom"])
        assert result.exit_code == 1
        assert "Custom style" in result.output

    def test_bad_aspect_ratio(self):
        result = runner.invoke(app, ["article", "https://example.com", "--aspect", "21:9"])
        assert result.exit_code == 1
        assert "Invalid aspect ratio" in result.output

    def test_repo_rejects_bad_reference(self):
        result = runner.invoke(app, ["repo", "not a repo"])
        assert result.exit_code == 1
        assert "Invalid repository reference" in result.output


class TestCredentialCommands:

    def test_set_and_clear_stored_key(self, tmp_path, monkeypatch):
        key_file = tmp_path / "credentials.json"
        monkeypatch.setattr("link2ink.credentials.store.CREDENTIALS_FILE", key_file)

        saved = runner.invoke(app, ["credential", "set", "stored-key"])
        assert saved.exit_code == 0
        assert "API key saved to" in saved.output
        assert key_file.exists()

        cleared = runner.invoke(app, ["credential", "clear"])
        assert cleared.exit_code == 0
        assert "Stored API key removed" in cleared.output
        assert not key_file.exists()
