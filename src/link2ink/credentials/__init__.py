"""Credential resolution, persistence and reset signalling."""

from .manager import (
    CredentialManager,
    CredentialSelector,
    CredentialSource,
    CredentialState,
    ResetListener,
)
from .store import CredentialStore

__all__ = [
    "CredentialManager",
    "CredentialSelector",
    "CredentialSource",
    "CredentialState",
    "CredentialStore",
    "ResetListener",
]
