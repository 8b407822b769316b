"""Display functions for infographic commands - pure functions for Rich output."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...content.models import GenerationProgress, GenerationStage
from ..core.types import SavedOutput
from .params import InfographicParams

# What to try next, by failure kind
ERROR_SUGGESTIONS: dict[str, list[str]] = {
    "not_found": [
        "Make sure the video or page is public (not unlisted or private).",
        "Very new content may not be indexed by Google Search yet.",
        "Check that the link or the 11-character video id is correct.",
    ],
    "insufficient_data": [
        "The source may be very short or contain almost no spoken or written content.",
        "The title or description may be too thin to work from.",
        "Try a longer or more detailed source.",
    ],
    "safety": [
        "The content was blocked by safety filters. Try a different source.",
    ],
    "credential_invalid": [
        "Create a new key at https://aistudio.google.com/apikey",
        "Store it with: link2ink credential set",
    ],
    "credential_missing": [
        "Set GEMINI_API_KEY in your environment or .env file.",
        "Or store a key with: link2ink credential set",
    ],
    "output": [
        "Check that the output folder is writable and the disk is not full.",
        "Choose another folder with --output.",
    ],
}

DEFAULT_SUGGESTIONS: list[str] = [
    "Try a different link.",
    "Run the command again.",
    "Very long sources (1 hour+) may time out.",
]


def show_infographic_config(console: Console, params: InfographicParams, title: str) -> None:
    """Display generation configuration panel."""
    style = params.custom_style if params.style == "custom" else params.style
    console.print(Panel(
        f"Source: [cyan]{params.source if len(params.source) < 80 else params.source[:77] + '...'}[/cyan]\n"
        f"Style: [yellow]{style}[/yellow]\n"
        f"Language: [yellow]{params.language or 'default'}[/yellow]\n"
        f"Aspect: [yellow]{params.aspect_ratio.value}[/yellow]\n"
        f"Size: [yellow]{params.image_size or 'default'}[/yellow]\n"
        f"Output: [dim]{params.output_dir}[/dim]",
        title=title,
    ))


def format_progress(progress: GenerationProgress) -> str:
    """One-line status text for a progress snapshot."""
    if progress.stage == GenerationStage.FAILED:
        return "[red]Failed[/red]"
    step = f"[{progress.completed_steps}/{progress.total_steps}]"
    model = f" [dim]({progress.model})[/dim]" if progress.model else ""
    return f"[bold cyan]{step}[/bold cyan] {progress.label}{model}"


def show_infographic_result(console: Console, saved: SavedOutput) -> None:
    """Display successful generation result."""
    console.print(Panel(
        f"[bold green]Infographic generated successfully![/bold green]\n\n"
        f"[bold]Title:[/] {saved.title}\n"
        f"[bold]Output:[/] {saved.output_path}\n"
        f"[bold]Citations:[/] {saved.citation_count}",
        title="Complete",
        border_style="green",
    ))

    citations = saved.metadata.get("citations") or []
    if citations:
        table = Table(title="Sources")
        table.add_column("#", style="dim")
        table.add_column("Title", style="white")
        table.add_column("URL", style="cyan")
        for i, citation in enumerate(citations, 1):
            table.add_row(str(i), citation["title"][:50], citation["uri"])
        console.print(table)


def show_infographic_error(
    console: Console,
    error: str,
    details: Optional[dict] = None,
    kind: Optional[str] = None,
) -> None:
    """Display generation error with suggestions."""
    console.print(f"\n[red]Error: {error}[/red]")
    if details:
        for key, value in details.items():
            console.print(f"  [dim]{key}:[/dim] [yellow]{value}[/yellow]")

    if kind == "invalid_source":
        return

    console.print("\n[bold]Suggestions:[/bold]")
    for suggestion in ERROR_SUGGESTIONS.get(kind or "", DEFAULT_SUGGESTIONS):
        console.print(f"  [dim]-[/dim] {suggestion}")
