"""Credential resolution and the "credential invalidated" signal.

The manager is a small state machine:

    UNKNOWN -> CHECKING -> HAS_CREDENTIAL | NEEDS_CREDENTIAL

HAS_CREDENTIAL only moves back to NEEDS_CREDENTIAL through ``invalidate()``,
which is what the orchestrator calls when the provider rejects the key.
Listeners registered with ``subscribe()`` are notified once per such
transition.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Awaitable, Callable

from ..errors import CredentialMissingError
from ..providers.config import CredentialSettings
from .store import CredentialStore

_logger = logging.getLogger("link2ink.credentials")

# Host-provided selection flow (e.g. a CLI prompt); returns None if the user declines
CredentialSelector = Callable[[], Awaitable[str | None]]

# Listener for the "credential invalidated" topic; the signal carries no payload
ResetListener = Callable[[], None]


class CredentialState(str, Enum):
    """Where the manager is in resolving a usable API key."""

    UNKNOWN = "unknown"
    CHECKING = "checking"
    HAS_CREDENTIAL = "has_credential"
    NEEDS_CREDENTIAL = "needs_credential"


class CredentialSource(str, Enum):
    """Where the active key came from."""

    ENVIRONMENT = "environment"
    STORED = "stored"
    SELECTED = "selected"


def _env_api_key() -> str | None:
    return CredentialSettings().api_key


class CredentialManager:
    """Resolves the Gemini API key and broadcasts invalidation.

    Precedence: environment, then the locally stored value, then the
    host-provided selector.

    Usage:
        manager = CredentialManager(selector=prompt_for_key)
        manager.subscribe(lambda: console.print("Key rejected"))
        await manager.resolve()
        key = manager.require()
    """

    def __init__(
        self,
        store: CredentialStore | None = None,
        selector: CredentialSelector | None = None,
        env_loader: Callable[[], str | None] = _env_api_key,
    ):
        self.store = store or CredentialStore()
        self._selector = selector
        self._env_loader = env_loader
        self._state = CredentialState.UNKNOWN
        self._api_key: str | None = None
        self._source: CredentialSource | None = None
        self._rejected: set[str] = set()
        self._listeners: list[ResetListener] = []

    @property
    def state(self) -> CredentialState:
        return self._state

    @property
    def source(self) -> CredentialSource | None:
        return self._source

    @property
    def has_credential(self) -> bool:
        return self._state == CredentialState.HAS_CREDENTIAL

    def _accept(self, key: str | None) -> str | None:
        if key and key.strip() and key.strip() not in self._rejected:
            return key.strip()
        return None

    def _set(self, key: str, source: CredentialSource) -> None:
        self._api_key = key
        self._source = source
        self._state = CredentialState.HAS_CREDENTIAL
        _logger.info(f"CREDENTIAL | state:{self._state.value} | source:{source.value}")

    async def resolve(self) -> CredentialState:
        """Look for a key in precedence order and settle the state."""
        self._state = CredentialState.CHECKING

        env_key = self._accept(self._env_loader())
        if env_key:
            self._set(env_key, CredentialSource.ENVIRONMENT)
            return self._state

        stored_key = self._accept(self.store.load())
        if stored_key:
            self._set(stored_key, CredentialSource.STORED)
            return self._state

        if self._selector is not None:
            selected = self._accept(await self._selector())
            if selected:
                self.store.save(selected)
                self._set(selected, CredentialSource.SELECTED)
                return self._state

        self._api_key = None
        self._source = None
        self._state = CredentialState.NEEDS_CREDENTIAL
        _logger.info(f"CREDENTIAL | state:{self._state.value}")
        return self._state

    def require(self) -> str:
        """Return the active key, or raise when generation must be blocked."""
        if self._state != CredentialState.HAS_CREDENTIAL or not self._api_key:
            raise CredentialMissingError(
                "No Gemini API key available. Set GEMINI_API_KEY or run 'link2ink credential set'."
            )
        return self._api_key

    def set_credential(self, api_key: str, persist: bool = True) -> None:
        """Install a key entered by the user."""
        key = api_key.strip()
        if not key:
            raise ValueError("API key must not be empty")
        self._rejected.discard(key)
        if persist:
            self.store.save(key)
        self._set(key, CredentialSource.SELECTED)

    def clear(self) -> None:
        """Forget the stored key and require a new one."""
        self.store.clear()
        self._api_key = None
        self._source = None
        self._state = CredentialState.NEEDS_CREDENTIAL

    def subscribe(self, listener: ResetListener) -> Callable[[], None]:
        """Register a listener for credential invalidation.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: ResetListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def invalidate(self) -> bool:
        """Mark the active key as rejected by the provider.

        Only the HAS_CREDENTIAL -> NEEDS_CREDENTIAL transition notifies
        listeners; repeated calls are no-ops.

        Returns:
            True if the transition happened and listeners were notified.
        """
        if self._state != CredentialState.HAS_CREDENTIAL:
            return False

        if self._api_key:
            self._rejected.add(self._api_key)
            if self._source == CredentialSource.STORED or self._source == CredentialSource.SELECTED:
                self.store.clear()

        self._api_key = None
        self._source = None
        self._state = CredentialState.NEEDS_CREDENTIAL
        _logger.warning("CREDENTIAL | state:needs_credential | reason:rejected_by_provider")

        for listener in list(self._listeners):
            listener()
        return True
