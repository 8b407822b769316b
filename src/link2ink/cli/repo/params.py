"""Immutable parameter dataclasses for repository commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ...content.models import AspectRatio, PresentationOptions


@dataclass(frozen=True)
class RepoParams:
    """Immutable parameters for repository analysis."""

    reference: str
    style: str
    custom_style: Optional[str]
    language: Optional[str]
    aspect_ratio: AspectRatio
    image_size: Optional[str]
    output_dir: Path

    @classmethod
    def from_cli(
        cls,
        reference: str,
        style: str,
        custom_style: Optional[str] = None,
        language: Optional[str] = None,
        aspect: str = AspectRatio.LANDSCAPE.value,
        image_size: Optional[str] = None,
        output: Optional[Path] = None,
        **kwargs,
    ) -> "RepoParams":
        from ..core.parsers import parse_aspect_ratio
        from ..core.paths import get_output_dir

        return cls(
            reference=reference.strip(),
            style=style,
            custom_style=custom_style,
            language=language,
            aspect_ratio=parse_aspect_ratio(aspect),
            image_size=image_size.strip().upper() if image_size else None,
            output_dir=get_output_dir(output),
        )

    def to_options(self) -> PresentationOptions:
        return PresentationOptions(
            style=self.style,
            custom_style=self.custom_style,
            language=self.language,
            aspect_ratio=self.aspect_ratio,
        )
