"""Repository CLI commands - thin wrappers orchestrating params, validation, display, and service."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer

from ...constants import DEFAULT_REPO_STYLE
from ...content.models import GenerationProgress
from ..core.console import console
from ..core.types import Failure
from ..core.validators import validate_image_size, validate_repo_reference, validate_style
from ..infographic.display import format_progress, show_infographic_error
from .display import show_3d_result, show_answer, show_repo_config, show_repo_result
from .params import RepoParams
from .service import RepoService

_STYLE = typer.Option(DEFAULT_REPO_STYLE, "--style", "-s", help="Style preset or free-form style text")
_CUSTOM_STYLE = typer.Option(None, "--custom-style", help="Style text when --style custom")
_LANGUAGE = typer.Option(None, "--language", "-l", help="Output language (en, tr, de, es or a name)")
_SIZE = typer.Option(None, "--size", help="Image size tier: 1K, 2K, 4K")
_OUTPUT = typer.Option(None, "--output", "-o", help="Output directory (default: ./output)")


def _fail(result: Failure) -> None:
    show_infographic_error(console, result.error, result.details, result.kind)
    raise typer.Exit(1)


def repo(
    reference: str = typer.Argument(..., help="owner/repo or https://github.com/owner/repo"),
    style: str = _STYLE,
    custom_style: Optional[str] = _CUSTOM_STYLE,
    language: Optional[str] = _LANGUAGE,
    aspect: str = typer.Option("16:9", "--aspect", "-a", help="Aspect ratio for the diagrams"),
    size: Optional[str] = _SIZE,
    output: Optional[Path] = _OUTPUT,
) -> None:
    """Analyze a GitHub repository into a technical diagram, product poster and summary."""
    try:
        params = RepoParams.from_cli(reference, style, custom_style, language, aspect, size, output)
    except ValueError as e:
        _fail(Failure(str(e), kind="invalid_source"))

    for check in (
        validate_repo_reference(params.reference),
        validate_style(params.style, params.custom_style),
        validate_image_size(params.image_size),
    ):
        if isinstance(check, Failure):
            _fail(check)

    ref = validate_repo_reference(params.reference).value
    show_repo_config(console, params)

    with console.status("Starting...") as status:
        async def on_progress(progress: GenerationProgress) -> None:
            status.update(format_progress(progress))

        result = asyncio.run(RepoService().analyze(
            ref,
            params.to_options(),
            params.output_dir,
            image_size=params.image_size,
            on_progress=on_progress,
            status=status,
        ))

    if isinstance(result, Failure):
        _fail(result)
    show_repo_result(console, result.value)


def repo_3d(
    name: str = typer.Argument(..., help="Repository name shown in the visualization"),
    style: str = typer.Option("neon-cyberpunk", "--style", "-s", help="Style preset or free-form style text"),
    size: Optional[str] = _SIZE,
    output: Optional[Path] = _OUTPUT,
) -> None:
    """Create a holographic 3D architecture image (always 16:9)."""
    params = RepoParams.from_cli(name, style, image_size=size, output=output)
    size_check = validate_image_size(params.image_size)
    if isinstance(size_check, Failure):
        _fail(size_check)

    with console.status("Starting...") as status:
        async def on_progress(progress: GenerationProgress) -> None:
            status.update(format_progress(progress))

        result = asyncio.run(RepoService().render_3d(
            params.reference,
            params.to_options(),
            params.output_dir,
            image_size=params.image_size,
            on_progress=on_progress,
            status=status,
        ))

    if isinstance(result, Failure):
        _fail(result)
    show_3d_result(console, result.value)


def ask(
    reference: str = typer.Argument(..., help="owner/repo or https://github.com/owner/repo"),
    component: str = typer.Argument(..., help="Component name, e.g. 'auth service'"),
    question: str = typer.Argument(..., help="Question about the component"),
) -> None:
    """Ask a question about one component of a repository."""
    ref_result = validate_repo_reference(reference)
    if isinstance(ref_result, Failure):
        _fail(ref_result)
    if not question.strip():
        _fail(Failure("Question is empty"))

    with console.status("Reading repository...") as status:
        async def on_progress(progress: GenerationProgress) -> None:
            status.update(format_progress(progress))

        result = asyncio.run(RepoService().ask(
            ref_result.value, component, question, on_progress=on_progress, status=status
        ))

    if isinstance(result, Failure):
        _fail(result)
    show_answer(console, component, result.value)
