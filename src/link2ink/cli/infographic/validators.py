"""Infographic-specific validators."""

from __future__ import annotations

from pathlib import Path

from ..core.paths import SUPPORTED_DOCUMENT_TYPES, SUPPORTED_IMAGE_TYPES
from ..core.types import Result, Success, Failure
from ..core.validators import (
    validate_image_size,
    validate_input_file,
    validate_style,
    validate_url,
    validate_video_reference,
)
from .params import InfographicParams


def _validate_presentation(params: InfographicParams) -> Result[InfographicParams]:
    style_result = validate_style(params.style, params.custom_style)
    if isinstance(style_result, Failure):
        return style_result

    size_result = validate_image_size(params.image_size)
    if isinstance(size_result, Failure):
        return size_result

    return Success(params)


def validate_article_params(params: InfographicParams) -> Result[InfographicParams]:
    url_result = validate_url(params.source)
    if isinstance(url_result, Failure):
        return url_result
    return _validate_presentation(params)


def validate_video_params(params: InfographicParams) -> Result[InfographicParams]:
    video_result = validate_video_reference(params.source)
    if isinstance(video_result, Failure):
        return video_result
    return _validate_presentation(params)


def validate_file_params(params: InfographicParams) -> Result[InfographicParams]:
    file_result = validate_input_file(Path(params.source), SUPPORTED_DOCUMENT_TYPES)
    if isinstance(file_result, Failure):
        return file_result
    return _validate_presentation(params)


def validate_text_params(params: InfographicParams) -> Result[InfographicParams]:
    if not params.source.strip():
        return Failure(
            "Text is empty",
            {"hint": "Pass the text as an argument, use --from-file, or pipe it on stdin"},
        )
    return _validate_presentation(params)


def validate_edit_params(image: Path, instruction: str) -> Result[Path]:
    file_result = validate_input_file(image, SUPPORTED_IMAGE_TYPES)
    if isinstance(file_result, Failure):
        return file_result
    if not instruction.strip():
        return Failure("Edit instruction is empty", {"hint": "Describe the change to make"})
    return Success(image)
