"""Credential commands: status, set, clear."""

from .commands import credential_app

__all__ = ["credential_app"]
