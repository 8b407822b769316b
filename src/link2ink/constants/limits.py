"""Limit constants for Link2Ink.

This module contains the thresholds and caps used across the pipeline:
- Analysis brief validation thresholds
- File tree truncation per prompt type
- HTTP timeouts for source lookups

MODIFICATION GUIDE:
------------------
- BRIEF_* values are only defaults; providers.yaml can override them
- REPO_TREE_* limits keep prompts within a reasonable token budget
"""

from typing import Final

# =============================================================================
# ANALYSIS VALIDATION
# =============================================================================

BRIEF_MIN_LENGTH: Final[int] = 50
"""Briefs shorter than this are rejected as insufficient content."""

MARKER_NOT_FOUND: Final[str] = "SOURCE_NOT_FOUND"
"""Returned verbatim by the analysis model when the source cannot be found."""

MARKER_VIDEO_NOT_FOUND: Final[str] = "VIDEO_NOT_FOUND_IN_SEARCH"
"""Video-specific variant of the not-found marker."""

MARKER_INSUFFICIENT_DATA: Final[str] = "INSUFFICIENT_DATA"
"""Returned verbatim when the source exists but holds too little content."""

MARKER_SAFETY: Final[str] = "SAFETY_BLOCKED"
"""Returned verbatim when the model refuses the source on safety grounds."""

CREDENTIAL_ERROR_FRAGMENT: Final[str] = "Requested entity was not found"
"""Provider error text that signals an invalid or revoked API key."""

DEFAULT_CITATION_TITLE: Final[str] = "Source"
"""Title used for grounding references that come back without one."""


# =============================================================================
# REPOSITORY PROMPTS
# =============================================================================

REPO_TREE_TECHNICAL_LIMIT: Final[int] = 150
"""Paths included in the technical architecture diagram prompt."""

REPO_TREE_FEATURE_LIMIT: Final[int] = 100
"""Paths included in the product feature poster prompt."""

REPO_TREE_SUMMARY_LIMIT: Final[int] = 300
"""Paths included in the textual feature summary and component Q&A prompts."""


# =============================================================================
# HTTP
# =============================================================================

GITHUB_TIMEOUT_SECONDS: Final[float] = 15.0
"""Timeout for GitHub REST API calls."""

GITHUB_MAX_ATTEMPTS: Final[int] = 3
"""Attempts for GitHub calls that fail at the transport level."""

OEMBED_TIMEOUT_SECONDS: Final[float] = 5.0
"""Timeout for the best-effort video metadata lookup."""
