"""Global constants package for Link2Ink.

PACKAGE STRUCTURE:
-----------------
- limits.py : validation thresholds, sentinel markers, prompt truncation
- styles.py : style presets, languages, image size tiers
- paths.py  : config, log, credential and output locations

USAGE EXAMPLES:
--------------
    from link2ink.constants import BRIEF_MIN_LENGTH, STYLE_PRESETS
"""

from .limits import (
    BRIEF_MIN_LENGTH,
    MARKER_NOT_FOUND,
    MARKER_VIDEO_NOT_FOUND,
    MARKER_INSUFFICIENT_DATA,
    MARKER_SAFETY,
    CREDENTIAL_ERROR_FRAGMENT,
    DEFAULT_CITATION_TITLE,
    REPO_TREE_TECHNICAL_LIMIT,
    REPO_TREE_FEATURE_LIMIT,
    REPO_TREE_SUMMARY_LIMIT,
    GITHUB_TIMEOUT_SECONDS,
    GITHUB_MAX_ATTEMPTS,
    OEMBED_TIMEOUT_SECONDS,
)
from .styles import (
    CUSTOM_STYLE,
    ARTICLE_STYLES,
    REPO_STYLES,
    STYLE_PRESETS,
    DEFAULT_ARTICLE_STYLE,
    DEFAULT_REPO_STYLE,
    LANGUAGES,
    DEFAULT_LANGUAGE,
    IMAGE_SIZE_TIERS,
    DEFAULT_IMAGE_SIZE,
    resolve_language,
)
from .paths import (
    PROJECT_ROOT,
    PROVIDERS_CONFIG_FILE,
    LOG_DIR,
    AI_CALLS_LOG_FILE,
    CREDENTIALS_FILE,
    IMAGE_FILENAME,
    ANALYSIS_FILENAME,
    CITATIONS_FILENAME,
    get_output_root,
)

__all__ = [
    # Limits
    "BRIEF_MIN_LENGTH",
    "MARKER_NOT_FOUND",
    "MARKER_VIDEO_NOT_FOUND",
    "MARKER_INSUFFICIENT_DATA",
    "MARKER_SAFETY",
    "CREDENTIAL_ERROR_FRAGMENT",
    "DEFAULT_CITATION_TITLE",
    "REPO_TREE_TECHNICAL_LIMIT",
    "REPO_TREE_FEATURE_LIMIT",
    "REPO_TREE_SUMMARY_LIMIT",
    "GITHUB_TIMEOUT_SECONDS",
    "GITHUB_MAX_ATTEMPTS",
    "OEMBED_TIMEOUT_SECONDS",
    # Styles
    "CUSTOM_STYLE",
    "ARTICLE_STYLES",
    "REPO_STYLES",
    "STYLE_PRESETS",
    "DEFAULT_ARTICLE_STYLE",
    "DEFAULT_REPO_STYLE",
    "LANGUAGES",
    "DEFAULT_LANGUAGE",
    "IMAGE_SIZE_TIERS",
    "DEFAULT_IMAGE_SIZE",
    "resolve_language",
    # Paths
    "PROJECT_ROOT",
    "PROVIDERS_CONFIG_FILE",
    "LOG_DIR",
    "AI_CALLS_LOG_FILE",
    "CREDENTIALS_FILE",
    "IMAGE_FILENAME",
    "ANALYSIS_FILENAME",
    "CITATIONS_FILENAME",
    "get_output_root",
]
