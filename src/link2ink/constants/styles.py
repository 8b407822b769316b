"""Presentation presets: visual styles, languages and aspect ratios.

Style presets map a short label to the guideline text that is fed into the
image prompt. Any label that is not a preset is passed through verbatim, so
users can type a free-form style without choosing ``custom``.
"""

from typing import Final

CUSTOM_STYLE: Final[str] = "custom"
"""Preset label that selects the user's own style text."""

ARTICLE_STYLES: Final[dict[str, str]] = {
    "modern-editorial": "Modern editorial: magazine grid, serif headlines, muted accent colors",
    "minimalist-white": "Minimalist white: generous white space, thin lines, one accent color",
    "fun-vibrant": "Fun and vibrant: bold saturated colors, rounded shapes, playful icons",
    "clean-minimal": "Clean minimalist: flat icons, neutral palette, strict alignment",
    "dark-tech": "Dark mode tech: near-black background, neon accents, monospace labels",
    "cinematic": "Cinematic analysis: film-still framing, dramatic lighting, widescreen typography",
}

REPO_STYLES: Final[dict[str, str]] = {
    "data-flow": "Modern data flow: directional arrows, layered boxes, gradient connectors",
    "blueprint": "Hand-drawn blueprint: white ink lines on blueprint blue, sketch annotations",
    "corporate-white": "Corporate white: clean boxes, brand-neutral blues, legible sans-serif",
    "neon-cyberpunk": "Neon cyberpunk: glowing edges, dark backdrop, magenta and cyan",
}

STYLE_PRESETS: Final[dict[str, str]] = {**ARTICLE_STYLES, **REPO_STYLES}

DEFAULT_ARTICLE_STYLE: Final[str] = "modern-editorial"
DEFAULT_REPO_STYLE: Final[str] = "data-flow"

LANGUAGES: Final[dict[str, str]] = {
    "en": "English",
    "tr": "Turkish",
    "de": "German",
    "es": "Spanish",
}

DEFAULT_LANGUAGE: Final[str] = "English"

IMAGE_SIZE_TIERS: Final[tuple[str, ...]] = ("1K", "2K", "4K")
DEFAULT_IMAGE_SIZE: Final[str] = "2K"


def resolve_language(value: str) -> str:
    """Map a language code (``en``) or name (``english``) to its display name.

    Unknown values are returned unchanged so any language the model
    understands can be requested.
    """
    key = value.strip()
    if key.lower() in LANGUAGES:
        return LANGUAGES[key.lower()]
    for name in LANGUAGES.values():
        if name.lower() == key.lower():
            return name
    return key
