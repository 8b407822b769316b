"""Credential CLI commands."""

from __future__ import annotations

import asyncio
from typing import Optional

import typer

from ..core.console import console, print_error, print_saved
from ..core.types import Failure
from .display import show_credential_status
from .service import CredentialService

credential_app = typer.Typer(help="Manage the Gemini API key", add_completion=False)


@credential_app.command("status")
def status() -> None:
    """Show whether a key is available and where it comes from."""
    show_credential_status(console, asyncio.run(CredentialService().status()))


@credential_app.command("set")
def set_key(
    api_key: Optional[str] = typer.Argument(None, help="API key (prompted if omitted)"),
) -> None:
    """Store a Gemini API key for later runs."""
    if api_key is None:
        api_key = typer.prompt("Gemini API key", hide_input=True)

    result = CredentialService().set(api_key)
    if isinstance(result, Failure):
        print_error(result.error)
        raise typer.Exit(1)
    print_saved("API key", result.value)


@credential_app.command("clear")
def clear() -> None:
    """Remove the stored key."""
    result = CredentialService().clear()
    console.print(f"[green]Stored API key removed[/green] [dim]({result.value})[/dim]")
