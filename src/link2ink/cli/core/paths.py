"""Path utilities for CLI - pure functions for path manipulation."""

from __future__ import annotations

import mimetypes
from pathlib import Path

from ...constants import get_output_root

# Document types the analysis model accepts inline
SUPPORTED_DOCUMENT_TYPES: dict[str, str] = {
    ".pdf": "application/pdf",
    ".txt": "text/plain",
    ".md": "text/markdown",
    ".html": "text/html",
    ".csv": "text/csv",
}

SUPPORTED_IMAGE_TYPES: dict[str, str] = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
}


def get_output_dir(output: Path | None = None) -> Path:
    """Get the output directory, defaulting to ./output.

    Pure function.
    """
    if output is not None:
        return output
    return get_output_root()


def guess_mime_type(path: Path, allowed: dict[str, str]) -> str | None:
    """Map a file extension to a MIME type from the allowed table.

    Pure function.
    """
    suffix = path.suffix.lower()
    if suffix in allowed:
        return allowed[suffix]
    guessed, _ = mimetypes.guess_type(path.name)
    if guessed in allowed.values():
        return guessed
    return None
