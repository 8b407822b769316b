"""Display functions for repository commands - pure functions for Rich output."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel

from ..core.types import SavedOutput
from .params import RepoParams


def show_repo_config(console: Console, params: RepoParams) -> None:
    style = params.custom_style if params.style == "custom" else params.style
    console.print(Panel(
        f"Repository: [cyan]{params.reference}[/cyan]\n"
        f"Style: [yellow]{style}[/yellow]\n"
        f"Language: [yellow]{params.language or 'default'}[/yellow]\n"
        f"Aspect: [yellow]{params.aspect_ratio.value}[/yellow]\n"
        f"Output: [dim]{params.output_dir}[/dim]",
        title="Repository Analysis",
    ))


def show_repo_result(console: Console, saved: SavedOutput) -> None:
    """Display analysis result with the feature summary."""
    metadata = saved.metadata
    poster = "[green]yes[/green]" if metadata.get("has_feature_image") else "[yellow]skipped[/yellow]"
    console.print(Panel(
        f"[bold green]Repository analyzed successfully![/bold green]\n\n"
        f"[bold]Repository:[/] {saved.title}\n"
        f"[bold]Output:[/] {saved.output_path}\n"
        f"[bold]Files:[/] {metadata.get('file_count', 0)}\n"
        f"[bold]Feature poster:[/] {poster}",
        title="Complete",
        border_style="green",
    ))
    if metadata.get("summary"):
        console.print(Panel(Markdown(metadata["summary"]), title="Summary"))


def show_3d_result(console: Console, path: Path) -> None:
    console.print(Panel(
        f"[bold green]3D model created![/bold green]\n\n[bold]Output:[/] {path}",
        title="Complete",
        border_style="green",
    ))


def show_answer(console: Console, component: str, answer: str) -> None:
    console.print(Panel(Markdown(answer), title=f"{component}"))
