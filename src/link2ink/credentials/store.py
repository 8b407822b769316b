"""Local persistence for a user-entered API key."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from ..constants import CREDENTIALS_FILE

_logger = logging.getLogger("link2ink.credentials")

_KEY_FIELD = "gemini_api_key"


class CredentialStore:
    """Stores a single API key in a small JSON file.

    The file is created with owner-only permissions where the platform
    supports it.
    """

    def __init__(self, path: Path | None = None):
        self.path = Path(path) if path else CREDENTIALS_FILE

    def load(self) -> str | None:
        """Read the stored key, or None if nothing usable is stored."""
        if not self.path.exists():
            return None
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            _logger.warning(f"Could not read credential file {self.path}: {e}")
            return None

        value = data.get(_KEY_FIELD) if isinstance(data, dict) else None
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

    def save(self, api_key: str) -> None:
        """Persist the key, replacing any previous value."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Recreated so an existing file never keeps a wider mode
        if self.path.exists():
            self.path.unlink()
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump({_KEY_FIELD: api_key.strip()}, f)

    def clear(self) -> None:
        """Delete the stored key."""
        if self.path.exists():
            self.path.unlink()
