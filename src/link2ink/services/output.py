"""Output service for saving generated infographics.

Each saved result gets its own folder under the output root:

    output/YYYY/MM/DD-HHMMSS-slug/
        infographic.png
        analysis.md
        citations.json
"""

from __future__ import annotations

import base64
import json
import re
import shutil
from contextlib import contextmanager
from datetime import datetime
from io import BytesIO
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

from PIL import Image

from ..constants import ANALYSIS_FILENAME, CITATIONS_FILENAME, IMAGE_FILENAME

if TYPE_CHECKING:
    from ..content.models import GenerationResult, RepoAnalysisResult


def slugify(value: str, max_length: int = 50) -> str:
    """Lowercase, dash-separated folder name fragment."""
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower())[:max_length].strip("-")
    return slug or "infographic"


def decode_image(image_base64: str) -> Image.Image:
    """Decode a base64 image, failing on anything Pillow cannot read."""
    raw = base64.b64decode(image_base64)
    img = Image.open(BytesIO(raw))
    img.load()
    return img


def write_png(img: Image.Image, path: Path) -> Path:
    """Save as PNG, converting if the model sent another format."""
    if img.mode not in ("RGB", "RGBA"):
        img = img.convert("RGBA")
    path.parent.mkdir(parents=True, exist_ok=True)
    img.save(path, format="PNG")
    return path


class OutputService:
    """Handles saving generated infographics to disk.

    Images are decoded before any folder is created. A folder created for a
    save that then fails is removed again.

    Usage:
        service = OutputService(Path("output"))
        path = service.save(result, title="my-article")
    """

    def __init__(self, output_root: Path):
        self.output_root = Path(output_root)

    def get_output_path(self, title: str, now: datetime | None = None) -> Path:
        now = now or datetime.now()
        folder = f"{now.strftime('%d')}-{now.strftime('%H%M%S')}-{slugify(title)}"
        return self.output_root / now.strftime("%Y") / now.strftime("%m") / folder

    @contextmanager
    def _new_folder(self, output_path: Path) -> Iterator[Path]:
        created = not output_path.exists()
        output_path.mkdir(parents=True, exist_ok=True)
        try:
            yield output_path
        except BaseException:
            if created:
                shutil.rmtree(output_path, ignore_errors=True)
            raise

    def save(self, result: "GenerationResult", title: str) -> Path:
        """Save image, brief and citations for one generation.

        Returns:
            Path to the created folder.
        """
        image = decode_image(result.image_base64)
        citations = [c.model_dump() for c in result.citations]

        with self._new_folder(self.get_output_path(result.video_title or title)) as output_path:
            write_png(image, output_path / IMAGE_FILENAME)
            (output_path / ANALYSIS_FILENAME).write_text(result.analysis_text, encoding="utf-8")
            with open(output_path / CITATIONS_FILENAME, "w", encoding="utf-8") as f:
                json.dump(citations, f, indent=2, ensure_ascii=False)

        return output_path

    def save_repository(self, result: "RepoAnalysisResult") -> Path:
        """Save the diagrams and summary of a repository analysis."""
        technical = decode_image(result.technical_image)
        feature = decode_image(result.feature_image) if result.feature_image else None
        files = [f.model_dump() for f in result.files]

        with self._new_folder(self.get_output_path(result.repo.full_name)) as output_path:
            write_png(technical, output_path / "technical.png")
            if feature is not None:
                write_png(feature, output_path / "features.png")
            (output_path / ANALYSIS_FILENAME).write_text(result.feature_summary, encoding="utf-8")
            with open(output_path / "files.json", "w", encoding="utf-8") as f:
                json.dump(files, f, indent=2)

        return output_path

    @staticmethod
    def save_image(image_base64: str, path: Path) -> Path:
        """Write a base64 image as PNG."""
        return write_png(decode_image(image_base64), path)
