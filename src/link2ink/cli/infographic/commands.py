"""Infographic CLI commands - thin wrappers orchestrating params, validation, display, and service."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Callable, Optional

import typer

from ...constants import DEFAULT_ARTICLE_STYLE
from ...content.models import GenerationProgress
from ..core.console import console, print_saved
from ..core.types import Failure, Result
from .display import (
    format_progress,
    show_infographic_config,
    show_infographic_error,
    show_infographic_result,
)
from .params import InfographicParams
from .service import ImageEditService, InfographicService
from .validators import (
    validate_article_params,
    validate_edit_params,
    validate_file_params,
    validate_text_params,
    validate_video_params,
)

# Shared options
_STYLE = typer.Option(DEFAULT_ARTICLE_STYLE, "--style", "-s", help="Style preset or free-form style text")
_CUSTOM_STYLE = typer.Option(None, "--custom-style", help="Style text when --style custom")
_LANGUAGE = typer.Option(None, "--language", "-l", help="Output language (en, tr, de, es or a name)")
_ASPECT = typer.Option("9:16", "--aspect", "-a", help="Aspect ratio: 9:16, 16:9, 1:1, 4:3, 3:4")
_SIZE = typer.Option(None, "--size", help="Image size tier: 1K, 2K, 4K")
_OUTPUT = typer.Option(None, "--output", "-o", help="Output directory (default: ./output)")


def _build_params(
    source: str,
    style: str,
    custom_style: Optional[str],
    language: Optional[str],
    aspect: str,
    image_size: Optional[str],
    output: Optional[Path],
) -> InfographicParams:
    try:
        return InfographicParams.from_cli(
            source=source,
            style=style,
            custom_style=custom_style,
            language=language,
            aspect=aspect,
            image_size=image_size,
            output=output,
        )
    except ValueError as e:
        show_infographic_error(console, str(e), kind="invalid_source")
        raise typer.Exit(1)


def _run(
    kind: str,
    params: InfographicParams,
    validator: Callable[[InfographicParams], Result[InfographicParams]],
    title: str,
) -> None:
    """Validate, generate, and display one infographic."""
    validation = validator(params)
    if isinstance(validation, Failure):
        show_infographic_error(console, validation.error, validation.details, validation.kind)
        raise typer.Exit(1)

    show_infographic_config(console, params, title)

    with console.status("Starting...") as status:
        async def on_progress(progress: GenerationProgress) -> None:
            status.update(format_progress(progress))

        result = asyncio.run(InfographicService().generate(
            kind=kind,
            source=params.source,
            options=params.to_options(),
            output_dir=params.output_dir,
            image_size=params.image_size,
            on_progress=on_progress,
            status=status,
        ))

    if isinstance(result, Failure):
        show_infographic_error(console, result.error, result.details, result.kind)
        raise typer.Exit(1)

    show_infographic_result(console, result.value)


def article(
    url: str = typer.Argument(..., help="Article URL to analyze"),
    style: str = _STYLE,
    custom_style: Optional[str] = _CUSTOM_STYLE,
    language: Optional[str] = _LANGUAGE,
    aspect: str = _ASPECT,
    size: Optional[str] = _SIZE,
    output: Optional[Path] = _OUTPUT,
) -> None:
    """Create an infographic from a web article (search-grounded)."""
    params = _build_params(url, style, custom_style, language, aspect, size, output)
    _run("url", params, validate_article_params, "Article Infographic")


def text(
    content: Optional[str] = typer.Argument(None, help="Text to visualize (reads stdin if omitted)"),
    from_file: Optional[Path] = typer.Option(None, "--from-file", "-f", help="Read the text from a file"),
    style: str = _STYLE,
    custom_style: Optional[str] = _CUSTOM_STYLE,
    language: Optional[str] = _LANGUAGE,
    aspect: str = _ASPECT,
    size: Optional[str] = _SIZE,
    output: Optional[Path] = _OUTPUT,
) -> None:
    """Create an infographic from raw text."""
    if from_file is not None:
        content = from_file.read_text(encoding="utf-8")
    elif content is None and not sys.stdin.isatty():
        content = sys.stdin.read()

    params = _build_params(content or "", style, custom_style, language, aspect, size, output)
    _run("text", params, validate_text_params, "Text Infographic")


def file(
    path: Path = typer.Argument(..., help="Document to analyze (pdf, txt, md, html, csv)"),
    style: str = _STYLE,
    custom_style: Optional[str] = _CUSTOM_STYLE,
    language: Optional[str] = _LANGUAGE,
    aspect: str = _ASPECT,
    size: Optional[str] = _SIZE,
    output: Optional[Path] = _OUTPUT,
) -> None:
    """Create an infographic from an uploaded document."""
    params = _build_params(str(path), style, custom_style, language, aspect, size, output)
    _run("file", params, validate_file_params, "Document Infographic")


def youtube(
    video: str = typer.Argument(..., help="YouTube link or 11-character video id"),
    style: str = typer.Option("cinematic", "--style", "-s", help="Style preset or free-form style text"),
    custom_style: Optional[str] = _CUSTOM_STYLE,
    language: Optional[str] = _LANGUAGE,
    aspect: str = _ASPECT,
    size: Optional[str] = _SIZE,
    output: Optional[Path] = _OUTPUT,
) -> None:
    """Create an infographic from a YouTube video."""
    params = _build_params(video, style, custom_style, language, aspect, size, output)
    _run("video", params, validate_video_params, "Video Infographic")


def edit(
    image: Path = typer.Argument(..., help="Image to edit (png, jpg, webp)"),
    instruction: str = typer.Argument(..., help="What to change, e.g. 'make the title red'"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Where to write the edited PNG"),
) -> None:
    """Edit an existing infographic with a text instruction."""
    validation = validate_edit_params(image, instruction)
    if isinstance(validation, Failure):
        show_infographic_error(console, validation.error, validation.details, validation.kind)
        raise typer.Exit(1)

    target = output or image.with_name(f"{image.stem}-edited.png")

    with console.status("Starting...") as status:
        async def on_progress(progress: GenerationProgress) -> None:
            status.update(format_progress(progress))

        result = asyncio.run(ImageEditService().edit(
            image, instruction, target, on_progress=on_progress, status=status
        ))

    if isinstance(result, Failure):
        show_infographic_error(console, result.error, result.details, result.kind)
        raise typer.Exit(1)

    print_saved("Edited image", result.value)
