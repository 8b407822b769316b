"""Pure validation functions for CLI arguments."""

from __future__ import annotations

from pathlib import Path

from ...constants import CUSTOM_STYLE, IMAGE_SIZE_TIERS, STYLE_PRESETS
from ...sources.github import parse_repo_reference
from ...sources.models import RepoReference
from ...sources.youtube import extract_video_id
from .paths import guess_mime_type
from .types import Result, Success, Failure


def validate_url(url: str) -> Result[str]:
    """Validate that a value looks like an http(s) URL.

    Pure function - no side effects.
    """
    value = url.strip()
    if not value.lower().startswith(("http://", "https://")) or "." not in value:
        return Failure(
            f"Invalid URL: {url}",
            {"hint": "URLs must start with http:// or https://"},
        )
    return Success(value)


def validate_video_reference(reference: str) -> Result[str]:
    """Validate a YouTube link or bare video id, returning the id."""
    video_id = extract_video_id(reference)
    if video_id is None:
        return Failure(
            f"Not a valid YouTube link or video id: {reference}",
            {"hint": "Use a youtube.com/watch?v=, youtu.be/ or /shorts/ link, or the 11-character id"},
            kind="invalid_source",
        )
    return Success(video_id)


def validate_repo_reference(reference: str) -> Result[RepoReference]:
    """Validate 'owner/repo' or a github.com URL."""
    parsed = parse_repo_reference(reference)
    if parsed is None:
        return Failure(
            f"Invalid repository reference: {reference}",
            {"hint": "Use owner/repo or https://github.com/owner/repo"},
            kind="invalid_source",
        )
    return Success(parsed)


def validate_style(style: str, custom_style: str | None) -> Result[str]:
    """Validate a style label; 'custom' requires custom style text.

    Labels that are not presets are accepted and used verbatim.
    """
    if style == CUSTOM_STYLE and not (custom_style and custom_style.strip()):
        return Failure(
            "Custom style selected but --custom-style is empty",
            {"presets": ", ".join(sorted(STYLE_PRESETS))},
        )
    return Success(style)


def validate_image_size(size: str | None) -> Result[str | None]:
    if size is None:
        return Success(None)
    normalized = size.strip().upper()
    if normalized not in IMAGE_SIZE_TIERS:
        return Failure(
            f"Invalid image size: {size}",
            {"valid_sizes": ", ".join(IMAGE_SIZE_TIERS)},
        )
    return Success(normalized)


def validate_input_file(path: Path, allowed: dict[str, str]) -> Result[str]:
    """Validate that a file exists, is non-empty and has a supported type.

    Returns:
        Result containing the MIME type or failure
    """
    if not path.exists() or not path.is_file():
        return Failure(f"File not found: {path}", {"path": str(path)})
    if path.stat().st_size == 0:
        return Failure(f"File is empty: {path}", {"path": str(path)})
    mime_type = guess_mime_type(path, allowed)
    if mime_type is None:
        return Failure(
            f"Unsupported file type: {path.suffix or path.name}",
            {"supported": ", ".join(sorted(allowed))},
        )
    return Success(mime_type)


def validate_text(text: str, min_length: int = 1) -> Result[str]:
    value = text.strip()
    if len(value) < min_length:
        return Failure(
            "Text is empty" if not value else f"Text too short: {len(value)} characters",
            {"hint": "Provide the text as an argument, with --file, or on stdin"},
        )
    return Success(value)
