"""Shared Rich console for link2ink commands."""

from __future__ import annotations

import sys
from pathlib import Path

from rich.console import Console

# Legacy Windows code pages have no box drawing glyphs
console = Console(safe_box=sys.platform == "win32")


def print_error(message: str) -> None:
    console.print(f"[red]Error: {message}[/red]")


def print_saved(what: str, path: Path | str) -> None:
    """Report a file or folder a command has written."""
    console.print(f"[green]{what} saved to[/green] [cyan]{path}[/cyan]")
