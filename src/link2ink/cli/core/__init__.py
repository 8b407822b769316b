"""Core utilities for CLI - pure functions and shared types."""

from .types import Result, Success, Failure, SavedOutput
from .parsers import parse_aspect_ratio, mask_secret
from .validators import (
    validate_url,
    validate_video_reference,
    validate_repo_reference,
    validate_style,
    validate_image_size,
    validate_input_file,
    validate_text,
)
from .failures import failure_from_error, run_with_credential_retry
from .paths import get_output_dir, guess_mime_type, SUPPORTED_DOCUMENT_TYPES, SUPPORTED_IMAGE_TYPES
from .console import console

__all__ = [
    # Types
    "Result",
    "Success",
    "Failure",
    "SavedOutput",
    # Parsers
    "parse_aspect_ratio",
    "mask_secret",
    # Validators
    "validate_url",
    "validate_video_reference",
    "validate_repo_reference",
    "validate_style",
    "validate_image_size",
    "validate_input_file",
    "validate_text",
    # Failures
    "failure_from_error",
    "run_with_credential_retry",
    # Paths
    "get_output_dir",
    "guess_mime_type",
    "SUPPORTED_DOCUMENT_TYPES",
    "SUPPORTED_IMAGE_TYPES",
    # Console
    "console",
]
