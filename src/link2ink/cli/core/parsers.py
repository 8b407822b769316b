"""Pure parsing functions for CLI arguments."""

from __future__ import annotations

from ...content.models import AspectRatio

# Shorthand names accepted next to the ratio itself
_ASPECT_ALIASES: dict[str, AspectRatio] = {
    "portrait": AspectRatio.PORTRAIT,
    "vertical": AspectRatio.PORTRAIT,
    "story": AspectRatio.PORTRAIT,
    "landscape": AspectRatio.LANDSCAPE,
    "horizontal": AspectRatio.LANDSCAPE,
    "wide": AspectRatio.LANDSCAPE,
    "square": AspectRatio.SQUARE,
}


def parse_aspect_ratio(value: str) -> AspectRatio:
    """Parse '9:16', '16x9' or 'portrait' into an AspectRatio.

    Pure function - no side effects.

    Raises:
        ValueError: If the value is not a supported ratio
    """
    key = value.strip().lower().replace("x", ":").replace("/", ":")
    if key in _ASPECT_ALIASES:
        return _ASPECT_ALIASES[key]
    try:
        return AspectRatio(key)
    except ValueError:
        valid = ", ".join(a.value for a in AspectRatio)
        raise ValueError(f"Invalid aspect ratio: {value}. Use one of {valid} or portrait/landscape/square")


def mask_secret(value: str, visible: int = 4) -> str:
    """Show only the last few characters of a secret."""
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]
