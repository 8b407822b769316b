"""Stateless service for credential management."""

from __future__ import annotations

from ...credentials import CredentialManager, CredentialStore
from ..core.types import Failure, Result, Success


class CredentialService:
    """Reads and changes the stored Gemini API key."""

    def __init__(self, store: CredentialStore | None = None):
        self.store = store or CredentialStore()

    async def status(self) -> dict:
        """Resolve without prompting and report where the key comes from."""
        manager = CredentialManager(store=self.store)
        state = await manager.resolve()
        return {
            "state": state.value,
            "source": manager.source.value if manager.source else None,
            "key": manager.require() if manager.has_credential else None,
            "path": str(self.store.path),
        }

    def set(self, api_key: str) -> Result[str]:
        manager = CredentialManager(store=self.store)
        try:
            manager.set_credential(api_key, persist=True)
        except ValueError as e:
            return Failure(str(e))
        return Success(str(self.store.path))

    def clear(self) -> Result[str]:
        CredentialManager(store=self.store).clear()
        return Success(str(self.store.path))
