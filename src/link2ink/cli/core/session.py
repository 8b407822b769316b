"""Builds the orchestrator and credential manager used by CLI commands."""

from __future__ import annotations

import sys
from typing import Awaitable, Callable

import typer
from rich.status import Status

from ...content.orchestrator import InfographicOrchestrator
from ...credentials import CredentialManager
from ...providers.config import ProviderConfig, load_provider_config
from .console import console


async def prompt_for_api_key() -> str | None:
    """Ask the user for a Gemini API key; None when not interactive or declined."""
    if not sys.stdin.isatty():
        return None
    console.print(
        "[yellow]A Gemini API key is required.[/yellow] "
        "[dim]Create one at https://aistudio.google.com/apikey[/dim]"
    )
    value = typer.prompt("Gemini API key", default="", hide_input=True, show_default=False)
    return value.strip() or None


def key_selector(status: Status | None = None) -> Callable[[], Awaitable[str | None]]:
    """Selector that pauses a running spinner while the key prompt is shown."""

    async def select() -> str | None:
        if status is None:
            return await prompt_for_api_key()
        status.stop()
        try:
            return await prompt_for_api_key()
        finally:
            status.start()

    return select


def load_config(image_size: str | None = None) -> ProviderConfig:
    """Load provider config, applying a CLI image size override."""
    config = load_provider_config()
    if image_size:
        config = config.model_copy(
            update={"image": config.image.model_copy(update={"image_size": image_size})}
        )
    return config


def build_orchestrator(
    image_size: str | None = None,
    credentials: CredentialManager | None = None,
    status: Status | None = None,
) -> InfographicOrchestrator:
    credentials = credentials or CredentialManager(selector=key_selector(status))
    credentials.subscribe(
        lambda: console.print("[red]The saved Gemini API key was rejected and has been cleared.[/red]")
    )
    return InfographicOrchestrator(credentials=credentials, config=load_config(image_size))
