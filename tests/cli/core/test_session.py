"""Unit tests for the CLI session helpers."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
import typer

from link2ink.cli.core import session
from link2ink.cli.core.session import key_selector


class TestKeySelector:

    @pytest.mark.asyncio
    async def test_spinner_is_paused_while_prompting(self, monkeypatch: pytest.MonkeyPatch):
        status = MagicMock()
        calls = []
        status.stop.side_effect = lambda: calls.append("stop")
        status.start.side_effect = lambda: calls.append("start")

        async def prompt():
            calls.append("prompt")
            return "new-key"

        monkeypatch.setattr(session, "prompt_for_api_key", prompt)

        assert await key_selector(status)() == "new-key"
        assert calls == ["stop", "prompt", "start"]

    @pytest.mark.asyncio
    async def test_spinner_resumes_when_prompt_is_aborted(self, monkeypatch: pytest.MonkeyPatch):
        status = MagicMock()
        monkeypatch.setattr(session, "prompt_for_api_key", AsyncMock(side_effect=typer.Abort()))

        with pytest.raises(typer.Abort):
            await key_selector(status)()

        status.stop.assert_called_once()
        status.start.assert_called_once()

    @pytest.mark.asyncio
    async def test_without_spinner(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(session, "prompt_for_api_key", AsyncMock(return_value=None))

        assert await key_selector()() is None
