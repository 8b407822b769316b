"""Error taxonomy for infographic generation.

Only the classes below carry meaning for callers. Anything else raised by the
pipeline (transport failures, SDK errors) is unclassified and should be shown
to the user verbatim.
"""

from __future__ import annotations

from enum import Enum

from .constants import CREDENTIAL_ERROR_FRAGMENT


class Link2InkError(Exception):
    """Base class for classified generation errors."""


class InvalidSourceError(Link2InkError):
    """Malformed source reference, rejected before any network call."""


class UnverifiableReason(str, Enum):
    """Why the analysis phase could not produce usable content."""

    NOT_FOUND = "not_found"
    INSUFFICIENT_DATA = "insufficient_data"
    SAFETY = "safety"


class UnverifiableContentError(Link2InkError):
    """The analysis phase could not obtain real content for the source."""

    def __init__(self, reason: UnverifiableReason, source: str, detail: str | None = None):
        self.reason = reason
        self.source = source
        self.detail = detail
        messages = {
            UnverifiableReason.NOT_FOUND: f"Source could not be found or verified: {source}",
            UnverifiableReason.INSUFFICIENT_DATA: f"Not enough content to build an infographic from: {source}",
            UnverifiableReason.SAFETY: f"Content was blocked by safety filters: {source}",
        }
        super().__init__(messages[reason])


class SynthesisError(Link2InkError):
    """Image synthesis failed or returned no image."""


class CredentialMissingError(Link2InkError):
    """No API key is available; generation is blocked until one is provided."""


class CredentialInvalidError(Link2InkError):
    """The provider rejected the API key as invalid or not found."""


def is_credential_error(error: BaseException) -> bool:
    """Check whether a provider error means the API key is invalid.

    Only errors raised outside this package are inspected. Our own errors may
    quote user input, which must never be mistaken for a key rejection.
    """
    if isinstance(error, CredentialInvalidError):
        return True
    if isinstance(error, Link2InkError):
        return False
    return CREDENTIAL_ERROR_FRAGMENT in str(error)
