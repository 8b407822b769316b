"""Display functions for credential commands."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from ..core.parsers import mask_secret


def show_credential_status(console: Console, status: dict) -> None:
    table = Table(title="Gemini API Key", show_header=False)
    table.add_column("Field", style="dim")
    table.add_column("Value")

    has_key = status["state"] == "has_credential"
    state_style = "green" if has_key else "yellow"
    table.add_row("State", f"[{state_style}]{status['state']}[/{state_style}]")
    table.add_row("Source", status["source"] or "-")
    table.add_row("Key", mask_secret(status["key"]) if status["key"] else "-")
    table.add_row("Stored at", status["path"])
    console.print(table)

    if not has_key:
        console.print("[yellow]No key found. Set GEMINI_API_KEY or run: link2ink credential set[/yellow]")
