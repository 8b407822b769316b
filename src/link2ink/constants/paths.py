"""Path constants and helpers for Link2Ink.

All paths are computed from the project root or the user's home directory;
nothing here creates directories.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

PROJECT_ROOT: Final[Path] = Path(__file__).parent.parent.parent.parent
"""Repository root (the directory holding ``src/``)."""

CONFIG_DIR: Final[Path] = PROJECT_ROOT / "config"
PROVIDERS_CONFIG_FILE: Final[Path] = CONFIG_DIR / "providers.yaml"
LOG_DIR: Final[Path] = PROJECT_ROOT / "logs"
AI_CALLS_LOG_FILE: Final[str] = "ai_calls.log"

USER_DATA_DIR: Final[Path] = Path.home() / ".link2ink"
CREDENTIALS_FILE: Final[Path] = USER_DATA_DIR / "credentials.json"

DEFAULT_OUTPUT_DIR: Final[str] = "output"
IMAGE_FILENAME: Final[str] = "infographic.png"
ANALYSIS_FILENAME: Final[str] = "analysis.md"
CITATIONS_FILENAME: Final[str] = "citations.json"


def get_output_root(base_dir: Path | None = None) -> Path:
    """Get the output root directory (defaults to ``./output``)."""
    if base_dir is None:
        base_dir = Path.cwd()
    return base_dir / DEFAULT_OUTPUT_DIR
